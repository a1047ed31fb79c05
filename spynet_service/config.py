import logging

from pydantic_settings import BaseSettings
from pydantic import field_validator
from typing import Literal


class SpynetSettings(BaseSettings):
    """SpyNet service configuration.

    All durations are in milliseconds, matching the ``SESSION_TTL``
    environment variable the server has always accepted.
    """

    host: str = "0.0.0.0"
    port: int = 8675
    session_ttl: int = 3600000
    sweep_interval: int = 60000
    history_limit: int = 1000
    cors_origins: list[str] = ["*"]
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    model_config = {"env_prefix": "", "case_sensitive": False}

    @field_validator("session_ttl", "sweep_interval", "history_limit")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError(f"Must be a positive integer, got {v!r}")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.upper()
        return v

    @property
    def session_ttl_seconds(self) -> float:
        return self.session_ttl / 1000

    @property
    def sweep_interval_seconds(self) -> float:
        return self.sweep_interval / 1000

    @property
    def log_level_value(self) -> int:
        """Numeric level for ``logging.basicConfig``."""
        return logging.getLevelName(self.log_level)
