"""
Accumulator Configuration

Environment-based configuration. Every field can be set through an
ACCUMULATOR_-prefixed environment variable or a .env file.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ACCUMULATOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Public parameters
    n_hex: Optional[str] = Field(
        default=None,
        description="RSA modulus N as a hex string; overrides params_file",
    )

    g_hex: Optional[str] = Field(
        default=None,
        description="Generator g as a hex string; defaults to 2^2 mod N",
    )

    params_file: Optional[str] = Field(
        default=None,
        description="JSON file holding hex-encoded N and g",
    )

    min_modulus_bits: int = Field(
        default=0,
        ge=0,
        description="Reject moduli shorter than this many bits (0 disables)",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )

    log_format: str = Field(
        default="json",
        description="Log format: json or text",
    )

    # Application
    app_name: str = Field(default="rsa-accumulator")

    app_version: str = Field(default="0.1.0")

    @field_validator("log_format")
    @classmethod
    def _check_log_format(cls, value: str) -> str:
        value = value.lower()
        if value not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()


@lru_cache()
def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
