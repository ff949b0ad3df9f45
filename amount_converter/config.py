"""
Environment-driven defaults for the CLI and the HTTP API.

    AMOUNT_CONVERTER_RATE         yen per dollar            (default 150)
    AMOUNT_CONVERTER_LARGE_UNITS  true → 万/億, false → commas (default true)
    AMOUNT_CONVERTER_LOG_LEVEL    logging level name         (default WARNING)

Entry points call `load_dotenv()` first, so a local .env file works too.
Bad values fail loudly at load time (pydantic.ValidationError).
"""

from __future__ import annotations

import os

from pydantic import BaseModel, Field, field_validator

DEFAULT_RATE = 150.0


class Settings(BaseModel):
    """Resolved configuration."""

    default_rate: float = Field(DEFAULT_RATE, gt=0, allow_inf_nan=False)
    use_large_units: bool = True
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value!r}")
        return level


def load_settings() -> Settings:
    """Build Settings from AMOUNT_CONVERTER_* environment variables."""
    values: dict[str, str] = {}

    rate = os.environ.get("AMOUNT_CONVERTER_RATE")
    if rate:
        values["default_rate"] = rate

    large_units = os.environ.get("AMOUNT_CONVERTER_LARGE_UNITS")
    if large_units:
        values["use_large_units"] = large_units

    log_level = os.environ.get("AMOUNT_CONVERTER_LOG_LEVEL")
    if log_level:
        values["log_level"] = log_level

    return Settings.model_validate(values)
