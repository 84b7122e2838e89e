"""
Zerocoin Configuration

Environment-based configuration for the zerocoin core. Every field can be
overridden with a ``ZEROCOIN_``-prefixed environment variable or a ``.env``
file.
"""

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .paramgen import generate_demo_params
from .params import ZerocoinParams, load_params

logger = logging.getLogger(__name__)

MAX_COINMINT_ATTEMPTS = 10000


class Settings(BaseSettings):
    """Core settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ZEROCOIN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )

    log_format: str = Field(
        default="json",
        description="Log format: json or text"
    )

    # Parameters
    security_level: int = Field(
        default=80,
        description="Security level used when deriving parameters"
    )

    params_file: Optional[str] = Field(
        default=None,
        description="JSON file holding the zerocoin parameters"
    )

    # Minting
    max_coinmint_attempts: int = Field(
        default=MAX_COINMINT_ATTEMPTS,
        gt=0,
        description="Upper bound on commitments tried per minted coin"
    )

    app_version: str = Field(
        default="0.1.0",
        description="Version reported in structured logs"
    )


@lru_cache()
def get_settings() -> Settings:
    """Get the cached core settings."""
    return Settings()


def load_default_params(settings: Optional[Settings] = None) -> ZerocoinParams:
    """
    Load the parameters named by ``settings.params_file``.

    Without a configured file the demo parameters are derived instead, which
    is only acceptable outside production.

    Raises:
        ConfigurationError: If the configured file is missing or invalid
    """
    settings = settings or get_settings()
    if settings.params_file:
        params = load_params(settings.params_file)
        logger.info(f"Loaded zerocoin parameters from {settings.params_file}")
        return params

    logger.warning("No params_file configured; deriving demo parameters (not for production)")
    return generate_demo_params(settings.security_level)
