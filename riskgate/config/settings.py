"""Application settings using Pydantic BaseSettings."""

import logging
from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from riskgate.config.constants import DEFAULT_PRESET

_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "RiskGate"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        upper = v.upper()
        if upper not in _VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {_VALID_LOG_LEVELS}, got '{v}'")
        return upper

    @field_validator("default_preset")
    @classmethod
    def validate_default_preset(cls, v: str) -> str:
        from riskgate.services.classifier.presets import list_presets

        known = list_presets()
        if v not in known:
            raise ValueError(f"default_preset must be one of {known}, got '{v}'")
        return v

    @model_validator(mode="after")
    def validate_limits_positive(self) -> "Settings":
        if self.max_input_size is not None and self.max_input_size <= 0:
            raise ValueError(f"max_input_size must be positive, got {self.max_input_size}")
        if self.max_batch_size <= 0:
            raise ValueError(f"max_batch_size must be positive, got {self.max_batch_size}")
        if self.violation_tracker_max_sessions <= 0:
            raise ValueError(
                f"violation_tracker_max_sessions must be positive, got {self.violation_tracker_max_sessions}"
            )
        return self

    @model_validator(mode="after")
    def warn_wildcard_origins(self) -> "Settings":
        if self.allowed_origins == ["*"]:
            logging.getLogger(__name__).warning(
                "allowed_origins is set to ['*'], consider restricting in production"
            )
        return self

    # Classifier
    shield_enabled: bool = True
    default_preset: str = DEFAULT_PRESET
    config_file: str | None = None
    max_input_size: int | None = None

    # API
    max_batch_size: int = 100
    violation_tracker_max_sessions: int = 1000

    # CORS
    allowed_origins: list[str] = ["*"]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
