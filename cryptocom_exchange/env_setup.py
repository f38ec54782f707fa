"""Environment configuration setup utilities.

This module provides functions for loading environment variables from .env files
and configuring the SDK for local development.
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from cryptocom_exchange.helpers import DEFAULT_API_URL, get_client_id

log = logging.getLogger(__name__)

_startup_notice_logged = False


def log_startup_notice(api_endpoint: str) -> None:
    """Log the SDK version and endpoint, once per process."""
    global _startup_notice_logged
    if _startup_notice_logged:
        return
    _startup_notice_logged = True
    log.info("%s using %s", get_client_id(), api_endpoint)


def reset_startup_notice() -> None:
    """Allow the startup notice to be logged again."""
    global _startup_notice_logged
    _startup_notice_logged = False


def setup_environment() -> tuple[str, str, str]:
    """Load and return environment variables for Crypto.com API configuration.

    Loads environment variables from a .env file if present, otherwise falls
    back to system environment variables. Reads environment-specific variables
    based on the ENVIRONMENT variable (defaults to 'production').

    Returns:
        Tuple:
            - api_endpoint: The API endpoint URL
            - api_key: The API key
            - api_secret: The API secret used to sign private calls

    """
    env_file_path = Path(".env")
    if env_file_path.exists():
        log.info("Loading environment variables from .env file")
        load_dotenv(env_file_path)
    else:
        log.info(".env file not found. Falling back to Bash Environment variables.")

    environment = os.getenv("ENVIRONMENT", "production").lower()
    log.info("Using %s environment", environment)

    suffix = environment.upper()
    api_endpoint = os.environ.get(f"CRYPTOCOM_API_ENDPOINT_{suffix}", DEFAULT_API_URL)
    api_key = os.environ.get(f"CRYPTOCOM_API_KEY_{suffix}", "your-api-key")
    api_secret = os.environ.get(f"CRYPTOCOM_API_SECRET_{suffix}", "your-api-secret")

    log_startup_notice(api_endpoint)

    return api_endpoint, api_key, api_secret
