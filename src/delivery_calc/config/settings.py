"""
Centralized settings for the delivery calculator.

Pricing constants live here as named values so the calculation stays
auditable and can be exercised with alternative values in tests.
"""
from pathlib import Path
from dataclasses import dataclass, asdict
from typing import Optional


def get_project_root() -> Path:
    """Get the project root directory (where pyproject.toml lives)."""
    current = Path(__file__).resolve()
    for parent in current.parents:
        if (parent / 'pyproject.toml').exists():
            return parent
    # Fallback to 3 levels up from this file
    return Path(__file__).resolve().parent.parent.parent.parent


@dataclass(frozen=True)
class Settings:
    """Application settings with the standard pricing constants."""

    project_root: Path

    # Pricing constants
    delivery_rate_per_km: float = 1.50
    tax_rate: float = 0.08
    free_delivery_threshold: float = 50.0

    # Display
    currency_symbol: str = "R$"
    decimal_places: int = 2

    @classmethod
    def load(cls, project_root: Optional[Path] = None, **overrides) -> 'Settings':
        """Load settings, optionally overriding individual constants."""
        root = project_root or get_project_root()
        return cls(project_root=root, **overrides)

    @property
    def tax_percent(self) -> float:
        """Tax rate expressed as a percentage (8.0 for 0.08)."""
        return self.tax_rate * 100

    def pricing_constants(self) -> dict:
        """Named pricing constants, without paths."""
        data = asdict(self)
        data.pop('project_root')
        return data


# Default settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings
