"""Score and percentage helpers shared by the quiz and the application tracker."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from devops_prep.core.models import Question, QuizScore, SubmissionResult


def round_percentage(part: int, total: int) -> int:
    """Return ``100 * part / total`` rounded half-up, or 0 when ``total`` is 0."""
    if total <= 0:
        return 0
    # Integer form of floor(100 * part / total + 0.5); avoids float ties.
    return (200 * part + total) // (2 * total)


def compute_quiz_score(
    questions: Iterable[Question],
    submissions: Mapping[str, SubmissionResult],
) -> QuizScore:
    total = sum(1 for _ in questions)
    correct = sum(1 for result in submissions.values() if result.correct)
    return QuizScore(correct=correct, total=total, percentage=round_percentage(correct, total))
