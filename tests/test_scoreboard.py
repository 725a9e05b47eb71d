from __future__ import annotations

from datetime import date

import pytest

from devops_prep.core.models import (
    ApplicationStatus,
    Difficulty,
    JobApplication,
    Question,
    QuestionType,
    SubmissionResult,
)
from devops_prep.core.services.application_analytics import compute_analytics, filter_applications
from devops_prep.core.services.scoreboard import compute_quiz_score, round_percentage


@pytest.mark.parametrize(
    ("part", "total", "expected"),
    [(0, 0, 0), (3, 5, 60), (1, 3, 33), (2, 3, 67), (1, 8, 13), (5, 5, 100), (0, 7, 0)],
)
def test_round_percentage_rounds_half_up(part, total, expected):
    assert round_percentage(part, total) == expected


def _question(question_id: str) -> Question:
    return Question(
        id=question_id,
        question_text="?",
        category="Core Concepts",
        difficulty=Difficulty.EASY,
        question_type=QuestionType.OPEN_ENDED,
        answer="x",
    )


def test_unanswered_questions_count_towards_the_total():
    questions = [_question(f"q{i}") for i in range(4)]
    submissions = {"q0": SubmissionResult(correct=True), "q1": SubmissionResult(correct=False)}

    score = compute_quiz_score(questions, submissions)

    assert (score.correct, score.total, score.percentage) == (1, 4, 25)


def _application(app_id: str, status: ApplicationStatus, company: str = "Acme", location: str = "") -> JobApplication:
    return JobApplication(id=app_id, company=company, applied_date=date(2024, 1, 1), status=status, location=location)


def test_analytics_lists_every_status():
    analytics = compute_analytics([_application("1", ApplicationStatus.APPLIED)])

    assert set(analytics.by_status) == set(ApplicationStatus)
    assert sum(analytics.by_status.values()) == analytics.total == 1
    assert analytics.response_rate == 0


def test_offers_count_as_responses():
    applications = [
        _application("1", ApplicationStatus.OFFER),
        _application("2", ApplicationStatus.INTERVIEW),
        _application("3", ApplicationStatus.WITHDRAWN),
    ]

    analytics = compute_analytics(applications)

    assert analytics.response_rate == 67
    assert analytics.offer_rate == 33


def test_filter_returns_new_list_and_keeps_order():
    applications = [
        _application("1", ApplicationStatus.APPLIED, "Acme", "Berlin"),
        _application("2", ApplicationStatus.APPLIED, "Globex", "Berlin"),
        _application("3", ApplicationStatus.OFFER, "Initech", "Paris"),
    ]

    result = filter_applications(applications, " berlin ", "applied")

    assert [app.id for app in result] == ["1", "2"]
    assert result is not applications
    assert len(applications) == 3
