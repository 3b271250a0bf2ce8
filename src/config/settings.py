"""Application settings and configuration."""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.shared.validators.password import PasswordPolicyConfig

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application (hardcoded constants)
    app_name: str = "Staff Admin API"
    app_version: str = "0.1.0"

    # Environment-specific settings
    debug: bool = False
    environment: str = "development"  # development, staging, production

    # API
    api_prefix: str = "/api"

    # Logging
    log_level: str = "INFO"

    # Password policy
    password_min_length: int = Field(default=8, ge=1)
    password_require_uppercase: bool = True
    password_require_lowercase: bool = True
    password_require_numbers: bool = True
    password_require_special_chars: bool = True

    # Staff forms
    staff_minimum_age: int = Field(default=18, ge=0)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        valid_envs = {"development", "staging", "production"}
        env = str(v).lower()
        if env not in valid_envs:
            raise ValueError(f"Environment must be one of {valid_envs}, got {env}")
        return env

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name."""
        level = str(v).upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    def get_password_policy(self) -> PasswordPolicyConfig:
        """Build the password policy from the configured defaults.

        Returns:
            PasswordPolicyConfig instance

        """
        policy = PasswordPolicyConfig(
            min_length=self.password_min_length,
            require_uppercase=self.password_require_uppercase,
            require_lowercase=self.password_require_lowercase,
            require_numbers=self.password_require_numbers,
            require_special_chars=self.password_require_special_chars,
        )
        logger.debug(f"Password policy resolved: {policy.model_dump()}")
        return policy


settings = Settings()
