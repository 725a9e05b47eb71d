"""Local form validation performed before any request reaches the backend."""

from __future__ import annotations

from devops_prep.constants.quiz_constants import MIN_MULTIPLE_CHOICE_OPTIONS
from devops_prep.core.models import ApplicationFields, Difficulty, QuestionDraft, QuestionType


class ValidationError(ValueError):
    """Raised with a user-facing message when form input is rejected."""


def validate_question_draft(draft: QuestionDraft) -> None:
    if not draft.question_text.strip():
        raise ValidationError("Question is required")
    if not draft.answer.strip():
        raise ValidationError("Answer is required")
    if not draft.category.strip():
        raise ValidationError("Category is required")

    try:
        Difficulty(draft.difficulty)
    except ValueError as exc:
        raise ValidationError(f"Unknown difficulty: {draft.difficulty}") from exc
    try:
        question_type = QuestionType(draft.question_type)
    except ValueError as exc:
        raise ValidationError(f"Unknown question type: {draft.question_type}") from exc

    if question_type is QuestionType.MULTIPLE_CHOICE:
        valid_options = [option.strip() for option in draft.options if option.strip()]
        if len(valid_options) < MIN_MULTIPLE_CHOICE_OPTIONS:
            raise ValidationError("Multiple choice questions need at least 2 options")
        if draft.answer.strip() not in valid_options:
            raise ValidationError("Answer must be one of the options for multiple choice questions")


def validate_application_fields(fields: ApplicationFields) -> None:
    if not fields.company.strip():
        raise ValidationError("Company name is required")
    if fields.applied_date is None:
        raise ValidationError("Applied date is required")
