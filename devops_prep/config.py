"""
Runtime configuration for DevOps Interview Prep.

Defaults live in ``devops_prep.constants.network_constants``; each value can be
overridden through an environment variable so the desktop client can point at
a different backend without code changes.
"""
from __future__ import annotations

import os
from dataclasses import dataclass

from devops_prep.constants.network_constants import (
    API_BASE_URL_ENV_VAR,
    DEFAULT_API_BASE_URL,
    LOG_LEVEL_ENV_VAR,
    REQUEST_TIMEOUT_ENV_VAR,
    REQUEST_TIMEOUT_SECONDS,
)

DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class AppConfig:
    """Main configuration object."""

    api_base_url: str = DEFAULT_API_BASE_URL
    request_timeout_seconds: float = REQUEST_TIMEOUT_SECONDS
    log_level: str = DEFAULT_LOG_LEVEL


def get_config() -> AppConfig:
    """Load configuration, letting environment variables override the defaults."""
    base_url = os.getenv(API_BASE_URL_ENV_VAR) or DEFAULT_API_BASE_URL
    raw_timeout = os.getenv(REQUEST_TIMEOUT_ENV_VAR)
    log_level = (os.getenv(LOG_LEVEL_ENV_VAR) or DEFAULT_LOG_LEVEL).upper()

    timeout = REQUEST_TIMEOUT_SECONDS
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError as exc:
            raise ValueError(f"{REQUEST_TIMEOUT_ENV_VAR} must be a number of seconds.") from exc
        if timeout <= 0:
            raise ValueError(f"{REQUEST_TIMEOUT_ENV_VAR} must be positive.")

    return AppConfig(
        api_base_url=base_url.rstrip("/"),
        request_timeout_seconds=timeout,
        log_level=log_level,
    )
