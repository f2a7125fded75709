"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting has a default: the service starts with no environment at all
    - Empty environment variables fall back to the default (env_ignore_empty)
    - READ_TIMEOUT / WRITE_TIMEOUT are seconds; a unit suffix (ms, s, m, h) is also accepted
    - get_settings() is cached (lru_cache) — single instance per process
    - Invalid values fail at startup with a ValidationError, never later

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - log_level accepts the short names (warn) and stores logging module names (WARNING)
"""

import re
from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = {
    "debug": "DEBUG",
    "info": "INFO",
    "warn": "WARNING",
    "warning": "WARNING",
    "error": "ERROR",
}

_DURATION = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*(ms|s|m|h)?\s*$")
_DURATION_UNITS = {"ms": 0.001, "s": 1, "m": 60, "h": 3600}


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False,
        env_ignore_empty=True, populate_by_name=True,
    )

    # Server
    host: str = "0.0.0.0"
    port: int = Field(3000, ge=1, le=65535)
    read_timeout_seconds: float = Field(10.0, gt=0, alias="read_timeout")
    write_timeout_seconds: float = Field(10.0, gt=0, alias="write_timeout")

    # Data
    data_file_path: str = Field("./data.json", min_length=1)
    reload_enabled: bool = False

    # API
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "text"
    json_log: bool = False

    @field_validator("read_timeout_seconds", "write_timeout_seconds", mode="before")
    @classmethod
    def parse_duration(cls, v: object) -> object:
        """Accept "10s", "500ms", "2m" as well as plain seconds."""
        if not isinstance(v, str):
            return v
        match = _DURATION.match(v)
        if match is None:
            raise ValueError(f"invalid duration: {v} (e.g. 10, 10s, 500ms, 1m)")
        value, unit = match.groups()
        return float(value) * _DURATION_UNITS[unit or "s"]

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = _LOG_LEVELS.get(str(v).strip().lower())
        if level is None:
            raise ValueError(
                f"invalid log level: {v} (must be debug, info, warn, or error)",
            )
        return level

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in ("json", "text"):
            raise ValueError(f"invalid log format: {v} (must be json or text)")
        return v

    @model_validator(mode="after")
    def apply_json_log(self) -> "Settings":
        """JSON_LOG=true is shorthand for LOG_FORMAT=json."""
        if self.json_log:
            self.log_format = "json"
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
