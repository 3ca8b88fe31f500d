"""Configuration module using Pydantic Settings.

Usage:
    from scentfield.config import FieldSettings

    settings = FieldSettings(degradation_fraction=0.05)
"""

from scentfield.config.settings import (
    DEFAULT_DEGRADATION_FRACTION,
    DEFAULT_DIFFUSION_FRACTION,
    MAX_DIFFUSION_FRACTION,
    FieldSettings,
)

__all__ = [
    "FieldSettings",
    "DEFAULT_DIFFUSION_FRACTION",
    "DEFAULT_DEGRADATION_FRACTION",
    "MAX_DIFFUSION_FRACTION",
]
