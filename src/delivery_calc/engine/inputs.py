"""
Coercion of raw form values into numbers.

Form fields arrive as strings, numbers or nothing at all. The lenient policy
reads whatever numeric prefix a string has and falls back to 0; the strict
policy rejects anything that is present but not entirely numeric.
"""
import logging
import math
import re
from typing import Any

from ..errors import InvalidInputError

logger = logging.getLogger(__name__)

_NUMBER_PREFIX = re.compile(r'^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?')


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def parse_number(value: Any, strict: bool = False) -> float:
    """
    Parse a single raw value.

    Returns NaN when nothing numeric can be read, or when the value
    overflows a float, so callers can decide between defaulting and
    rejecting.
    """
    if isinstance(value, bool):
        return math.nan
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError:
            return math.nan
    if not isinstance(value, str):
        return math.nan

    text = value.strip()
    match = _NUMBER_PREFIX.match(text)
    if not match:
        return math.nan
    if strict and match.end() != len(text):
        return math.nan
    return float(match.group(0))


def coerce_decimal(field: str, value: Any, strict: bool = False) -> float:
    """Coerce a raw value to a float, defaulting missing input to 0."""
    if _is_blank(value):
        return 0.0

    number = parse_number(value, strict)
    if not math.isfinite(number):
        if strict:
            raise InvalidInputError(field, value)
        logger.debug("Field %s value %r is not a finite number, using 0", field, value)
        return 0.0
    return number


def coerce_count(field: str, value: Any, strict: bool = False) -> int:
    """Coerce a raw value to a whole count, truncating any fraction."""
    return int(coerce_decimal(field, value, strict))
