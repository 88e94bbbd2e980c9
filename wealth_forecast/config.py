"""Runtime settings, read from WEALTH_FORECAST_* environment variables."""

from __future__ import annotations

import os
from typing import List, Mapping, Optional

from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator

ENV_PREFIX = "WEALTH_FORECAST_"

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:5173",
]


class ConfigurationError(Exception):
    """Raised when the environment holds settings that cannot be used."""


class Settings(BaseModel):
    cors_origins: List[str] = Field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    log_level: str = "INFO"
    max_chart_points: int = Field(10, ge=2, description="Chart points kept after decimation.")
    port: int = Field(5000, ge=1, le=65535)

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level '{v}'")
        return level


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from the environment; CORS origins are comma-separated."""
    environ = os.environ if environ is None else environ

    raw = {}
    for field_name in Settings.model_fields:
        value = environ.get(ENV_PREFIX + field_name.upper())
        if value is None:
            continue
        if field_name == "cors_origins":
            raw[field_name] = [origin.strip() for origin in value.split(",") if origin.strip()]
        else:
            raw[field_name] = value

    try:
        settings = Settings.model_validate(raw)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid {ENV_PREFIX}* settings: {exc}") from exc

    if raw:
        logger.info("settings overridden from environment: {}", ", ".join(sorted(raw)))
    return settings
