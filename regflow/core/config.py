"""Application settings for the registration service and tests."""

from __future__ import annotations

from pydantic import Field
from pydantic import field_validator
from pydantic_settings import BaseSettings

DEFAULT_BCRYPT_ROUNDS = 12
MIN_JWT_SECRET_BYTES = 32
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Typed settings loaded from environment variables or explicit kwargs."""

    regflow_app_env: str = "dev"
    regflow_app_host: str = "127.0.0.1"
    regflow_app_port: int = Field(default=8000, ge=1)

    regflow_jwt_secret: str = Field(min_length=1)
    regflow_access_token_expire_seconds: int = Field(default=3600, ge=1)

    regflow_sqlite_path: str = "regflow.db"
    regflow_bcrypt_rounds: int = Field(default=DEFAULT_BCRYPT_ROUNDS, ge=4, le=31)
    regflow_cors_allow_origins: str = "*"
    regflow_log_level: str = "INFO"

    @field_validator("regflow_jwt_secret")
    @classmethod
    def validate_jwt_secret_length(cls, value: str) -> str:
        """HS256 keys shorter than the digest size are rejected."""
        if len(value.encode("utf-8")) < MIN_JWT_SECRET_BYTES:
            raise ValueError(
                f"REGFLOW_JWT_SECRET must be at least {MIN_JWT_SECRET_BYTES} bytes"
            )
        return value

    @field_validator("regflow_log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level: {value}")
        return level

    @property
    def cors_allow_origins(self) -> list[str]:
        """Split the comma separated origin list."""
        return [origin.strip() for origin in self.regflow_cors_allow_origins.split(",") if origin.strip()]


def load_settings() -> Settings:
    """Load settings from process environment."""
    return Settings()
