"""
Errors raised by the delivery calculator.
"""


class InvalidInputError(ValueError):
    """A form field held a value that is not a number (strict mode only)."""

    def __init__(self, field: str, value):
        self.field = field
        self.value = value
        super().__init__(f"Invalid value for '{field}': {value!r}")
