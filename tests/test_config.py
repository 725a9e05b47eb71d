from __future__ import annotations

import pytest

from devops_prep.config import AppConfig, get_config
from devops_prep.constants.network_constants import (
    API_BASE_URL_ENV_VAR,
    DEFAULT_API_BASE_URL,
    LOG_LEVEL_ENV_VAR,
    REQUEST_TIMEOUT_ENV_VAR,
    REQUEST_TIMEOUT_SECONDS,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (API_BASE_URL_ENV_VAR, REQUEST_TIMEOUT_ENV_VAR, LOG_LEVEL_ENV_VAR):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    assert get_config() == AppConfig()
    assert get_config().api_base_url == DEFAULT_API_BASE_URL
    assert get_config().request_timeout_seconds == REQUEST_TIMEOUT_SECONDS


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv(API_BASE_URL_ENV_VAR, "https://prep.example.com/")
    monkeypatch.setenv(REQUEST_TIMEOUT_ENV_VAR, "2.5")
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "debug")

    config = get_config()

    assert config.api_base_url == "https://prep.example.com"
    assert config.request_timeout_seconds == 2.5
    assert config.log_level == "DEBUG"


@pytest.mark.parametrize("raw", ["soon", "0", "-1"])
def test_invalid_timeout_is_rejected(monkeypatch, raw):
    monkeypatch.setenv(REQUEST_TIMEOUT_ENV_VAR, raw)

    with pytest.raises(ValueError, match=REQUEST_TIMEOUT_ENV_VAR):
        get_config()
