from __future__ import annotations

from devops_prep.api.content_loader import (
    load_categories,
    load_homepage_content,
    load_interview_scenarios,
    load_ui_config,
)
from devops_prep.constants.fallback_content import (
    FALLBACK_CATEGORIES,
    FALLBACK_HOMEPAGE_CONTENT,
    FALLBACK_INTERVIEW_SCENARIOS,
    FALLBACK_UI_CONFIG,
)
from devops_prep.core.models import InterviewStage, UIConfig


def test_missing_ui_config_falls_back_to_named_constant(api):
    config = load_ui_config(api)

    assert config == FALLBACK_UI_CONFIG
    assert config is not FALLBACK_UI_CONFIG
    assert config.category_colors is not FALLBACK_UI_CONFIG.category_colors


def test_fallback_copy_can_be_mutated_without_touching_the_constant(api):
    config = load_ui_config(api)
    config.category_colors["Core Concepts"] = "bg-pink-100 text-pink-800"

    assert FALLBACK_UI_CONFIG.category_colors["Core Concepts"] == "bg-blue-100 text-blue-800"


def test_served_ui_config_is_used(api, backend):
    backend.ui_config = {
        "categoryColors": {"Storage": "bg-cyan-100 text-cyan-800"},
        "difficultyColors": {},
        "defaultColor": "bg-gray-100 text-gray-800",
        "fallbackCategories": ["Storage"],
    }

    config = load_ui_config(api)

    assert config.color_for_category("Storage") == "bg-cyan-100 text-cyan-800"
    assert config.color_for_category("Unknown") == "bg-gray-100 text-gray-800"
    assert config.fallback_categories == ("Storage",)


def test_malformed_ui_config_falls_back(api, backend):
    backend.ui_config = {"categoryColors": {}}

    assert load_ui_config(api) == FALLBACK_UI_CONFIG


def test_missing_interview_scenarios_fall_back(api):
    scenarios = load_interview_scenarios(api)

    assert scenarios == FALLBACK_INTERVIEW_SCENARIOS
    assert [q.id for q in scenarios.questions_for(InterviewStage.PERSONAL)] == [1, 2, 3]
    assert scenarios.total_question_count() == 8
    assert len(scenarios.incident_scenarios) == 2


def test_missing_homepage_falls_back(api, backend):
    backend.failing_paths.add("/api/homepage-data")

    assert load_homepage_content(api) == FALLBACK_HOMEPAGE_CONTENT


def test_served_homepage_is_parsed(api, backend):
    backend.homepage = {
        "features": {"quiz": [{"icon": "Brain", "text": "Random questions"}]},
        "stats": [{"value": "100+", "label": "Questions"}],
        "metadata": {"title": "Prep", "subtitle": "Practice daily"},
    }

    content = load_homepage_content(api)

    assert content.title == "Prep"
    assert content.features["quiz"][0].text == "Random questions"
    assert content.stats[0].value == "100+"


def test_categories_come_from_server_when_available(api):
    assert load_categories(api) == ["Core Concepts", "Networking"]


def test_categories_fall_back_to_ui_config_list(api, backend):
    backend.failing_paths.add("/api/categories")
    ui_config = UIConfig(
        category_colors={},
        difficulty_colors={},
        default_color="bg-gray-100 text-gray-800",
        fallback_categories=("Storage", "Security"),
    )

    assert load_categories(api, ui_config) == ["Storage", "Security"]


def test_categories_fall_back_to_constant_without_ui_config(api, backend):
    backend.failing_paths.add("/api/categories")

    assert load_categories(api) == list(FALLBACK_CATEGORIES)
