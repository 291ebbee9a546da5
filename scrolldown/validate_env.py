"""Fail-fast environment validation for the ScrollDown client.

Runs once before settings are built so a misconfigured deployment stops at
startup instead of surfacing as fetch errors on every moment.
"""

from __future__ import annotations

import os
from functools import lru_cache
from urllib.parse import urlparse

ALLOWED_ENVIRONMENTS = {"development", "staging", "production"}
ALLOWED_DATA_MODES = {"mock", "api"}

DEFAULT_ENVIRONMENT = "development"
DEFAULT_DATA_MODE = "mock"


def require_env(name: str) -> str:
    """Fetch an environment variable or raise RuntimeError if missing."""
    value = os.getenv(name)
    if value is None or not value.strip():
        raise RuntimeError(f"{name} is required and must be set before startup.")
    return value.strip()


def validate_environment_value(environment: str) -> None:
    """Ensure ENVIRONMENT is one of the allowed values."""
    if environment not in ALLOWED_ENVIRONMENTS:
        allowed = ", ".join(sorted(ALLOWED_ENVIRONMENTS))
        raise RuntimeError(f"ENVIRONMENT must be one of: {allowed}.")


def validate_data_mode(data_mode: str) -> None:
    """Ensure SCROLLDOWN_DATA_MODE selects a known game service."""
    if data_mode not in ALLOWED_DATA_MODES:
        allowed = ", ".join(sorted(ALLOWED_DATA_MODES))
        raise RuntimeError(f"SCROLLDOWN_DATA_MODE must be one of: {allowed}.")


def validate_non_local_url(name: str, value: str) -> None:
    """Ensure a URL does not point to localhost in production."""
    parsed = urlparse(value)
    host = parsed.hostname
    if not host:
        raise RuntimeError(f"{name} must be a valid URL (missing hostname).")
    if host in {"localhost", "127.0.0.1"}:
        raise RuntimeError(f"{name} must not point to localhost in production.")


@lru_cache(maxsize=1)
def validate_env() -> None:
    """Validate environment variables before the client starts.

    Production builds talking to the live API must be given a real
    SCROLLDOWN_API_BASE_URL; mock mode never touches the network.
    """
    environment = (os.getenv("ENVIRONMENT") or DEFAULT_ENVIRONMENT).strip()
    validate_environment_value(environment)

    data_mode = (os.getenv("SCROLLDOWN_DATA_MODE") or DEFAULT_DATA_MODE).strip().lower()
    validate_data_mode(data_mode)

    if environment == "production" and data_mode == "api":
        base_url = require_env("SCROLLDOWN_API_BASE_URL")
        validate_non_local_url("SCROLLDOWN_API_BASE_URL", base_url)
