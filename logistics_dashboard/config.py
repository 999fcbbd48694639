"""
Configuration management for the logistics dashboard.

This module provides centralized configuration management including:
- Environment variable loading
- Logging configuration
- Geocoding service settings
"""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

PROJECT_ROOT = Path(__file__).resolve().parent.parent


class Settings(BaseModel):
    """Runtime settings read from the environment."""

    nominatim_user_agent: str = Field(
        default="logistics_dashboard_app",
        description="User agent sent to the Nominatim geocoding service.",
    )
    geocode_delay_seconds: float = Field(
        default=1.0,
        description="Fixed delay before each geocoding request (rate limit).",
        ge=0,
    )
    geocode_timeout_seconds: float = Field(
        default=5.0, description="Timeout of a geocoding request.", gt=0
    )
    log_level: str = Field(default="INFO", description="Root logging level.")


def setup_logging(level: str = "INFO", format_string: Optional[str] = None) -> None:
    """
    Configure logging for the logistics dashboard.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string for log messages
    """
    if format_string is None:
        format_string = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=format_string,
        force=True  # Override any existing configuration
    )

    # Reduce HTTP request logging
    logging.getLogger("geopy").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def load_environment(env_file: Optional[Path] = None) -> bool:
    """
    Load environment variables from .env file.

    Args:
        env_file: Path to .env file. If None, will search for .env in project root.

    Returns:
        True if .env file was found and loaded, False otherwise.
    """
    if env_file is None:
        env_file = PROJECT_ROOT / '.env'

    if env_file.exists():
        load_dotenv(dotenv_path=env_file)
        logging.info(f"Environment loaded from {env_file}")
        return True
    else:
        logging.info(f"No .env file found at {env_file}. Using system environment variables.")
        return False


def get_settings() -> Settings:
    """Build the settings from the current environment."""
    return Settings(
        nominatim_user_agent=os.getenv('NOMINATIM_USER_AGENT', 'logistics_dashboard_app'),
        geocode_delay_seconds=os.getenv('GEOCODE_DELAY_SECONDS', '1.0'),
        geocode_timeout_seconds=os.getenv('GEOCODE_TIMEOUT_SECONDS', '5'),
        log_level=os.getenv('LOG_LEVEL', 'INFO'),
    )


def initialize_config(log_level: Optional[str] = None) -> Settings:
    """
    Initialize logging and the environment, then return the settings.

    Args:
        log_level: Logging level to use; defaults to the LOG_LEVEL setting

    Returns:
        Settings for this run
    """
    load_environment()
    settings = get_settings()
    setup_logging(level=log_level or settings.log_level)

    logging.debug(f"Configuration: {settings}")
    return settings
