"""Configuration settings using Pydantic Settings.

Provides typed, validated field parameters with environment variable support.

Usage:
    from scentfield.config import FieldSettings

    # Load from environment variables (SCENTFIELD_*)
    settings = FieldSettings()

    # Or override with explicit values
    settings = FieldSettings(diffusion_fraction=0.05)
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DIFFUSION_FRACTION = 0.1
"""Fraction of a tile's signal sent to each empty neighbor per tick."""

DEFAULT_DEGRADATION_FRACTION = 0.1
"""Fraction of every signal lost per tick."""

MAX_DIFFUSION_FRACTION = 1.0 / 6.0
"""Exclusive upper bound: a hex tile has up to 6 neighbors to send to."""


class FieldSettings(BaseSettings):  # type: ignore[misc]
    """Parameters of the signal field pipeline.

    Attributes:
        diffusion_fraction: Share of a tile's strength moved to each empty
            neighbor per tick. Must stay below 1/6 so a tile with six empty
            neighbors never sends away more than it holds.
        degradation_fraction: Share of every strength lost per tick (0-1).
        history_max_ticks: Ticks kept by the in-memory history store that
            SignalPipeline creates when keep_history=True.
        log_level: Level used by configure_logging(settings=...).
        log_json: Render log events as JSON lines in configure_logging(settings=...).

    Environment Variables:
        SCENTFIELD_DIFFUSION_FRACTION
        SCENTFIELD_DEGRADATION_FRACTION
        SCENTFIELD_HISTORY_MAX_TICKS
        SCENTFIELD_LOG_LEVEL
        SCENTFIELD_LOG_JSON
    """

    model_config = SettingsConfigDict(
        env_prefix="SCENTFIELD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    diffusion_fraction: float = Field(
        default=DEFAULT_DIFFUSION_FRACTION, ge=0.0, lt=MAX_DIFFUSION_FRACTION
    )
    degradation_fraction: float = Field(default=DEFAULT_DEGRADATION_FRACTION, ge=0.0, le=1.0)
    history_max_ticks: int = Field(default=1000, gt=0)
    log_level: str = "INFO"
    log_json: bool = False
