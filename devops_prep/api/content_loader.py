"""Loaders for optional backend content with static fallbacks.

The application must stay usable when any of these endpoints is unreachable,
so each loader converts an ``ApiError`` into a logged warning and returns a
copy of the matching constant from ``devops_prep.constants.fallback_content``.
"""

from __future__ import annotations

import copy
import logging

from devops_prep.api.client import ApiClient, ApiError
from devops_prep.constants.fallback_content import (
    FALLBACK_CATEGORIES,
    FALLBACK_HOMEPAGE_CONTENT,
    FALLBACK_INTERVIEW_SCENARIOS,
    FALLBACK_UI_CONFIG,
)
from devops_prep.core.models import HomepageContent, InterviewScenarios, UIConfig

logger = logging.getLogger(__name__)


def load_ui_config(client: ApiClient) -> UIConfig:
    try:
        return client.fetch_ui_config()
    except ApiError as exc:
        logger.warning("Failed to load UI config, using fallback data: %s", exc)
    return copy.deepcopy(FALLBACK_UI_CONFIG)


def load_interview_scenarios(client: ApiClient) -> InterviewScenarios:
    try:
        return client.fetch_interview_scenarios()
    except ApiError as exc:
        logger.warning("Failed to load interview scenarios, using fallback data: %s", exc)
    return copy.deepcopy(FALLBACK_INTERVIEW_SCENARIOS)


def load_homepage_content(client: ApiClient) -> HomepageContent:
    try:
        return client.fetch_homepage_content()
    except ApiError as exc:
        logger.warning("Failed to load homepage data, using fallback data: %s", exc)
    return copy.deepcopy(FALLBACK_HOMEPAGE_CONTENT)


def load_categories(client: ApiClient, ui_config: UIConfig | None = None) -> list[str]:
    """Return the server's categories, or the configured fallback list."""
    try:
        return client.fetch_categories()
    except ApiError as exc:
        logger.error("Error loading categories: %s", exc)
    if ui_config is not None and ui_config.fallback_categories:
        return list(ui_config.fallback_categories)
    return list(FALLBACK_CATEGORIES)
