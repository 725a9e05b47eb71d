"""Pydantic schemas describing the backend's JSON contract.

Server field names (``_id``, ``appliedDate``, ``timeLimit``, ``correct_answer``)
only ever appear in this module. Every inbound schema exposes ``to_model()``
which returns the domain dataclass used by the controllers, so the rest of the
application works with one canonical shape.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from devops_prep.constants.quiz_constants import MIN_MULTIPLE_CHOICE_OPTIONS
from devops_prep.core.models import (
    ApplicationFields,
    ApplicationStatus,
    Difficulty,
    FeatureBullet,
    HomepageContent,
    HomepageStat,
    IncidentScenario,
    INTERVIEW_PHASE_ORDER,
    InterviewPhase,
    InterviewQuestion,
    InterviewScenarios,
    InterviewStage,
    JobApplication,
    Question,
    QuestionDraft,
    QuestionType,
    SubmissionResult,
    UIConfig,
)

logger = logging.getLogger(__name__)


def _coerce_identifier(value: Any) -> Any:
    # Mongo extended JSON may wrap ids as {"$oid": "..."}.
    if isinstance(value, dict) and "$oid" in value:
        return str(value["$oid"])
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


class _WireModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


# --- Questions -----------------------------------------------------------------


class QuestionSchema(_WireModel):
    """Question as served by the question bank."""

    id: str = Field(validation_alias=AliasChoices("id", "_id"))
    question: str
    answer: str = ""
    category: str = ""
    difficulty: Difficulty = Difficulty.EASY
    type: QuestionType = QuestionType.OPEN_ENDED
    options: list[str] | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _normalize_id(cls, value: Any) -> Any:
        return _coerce_identifier(value)

    @model_validator(mode="after")
    def _check_multiple_choice(self) -> "QuestionSchema":
        if self.type is QuestionType.MULTIPLE_CHOICE:
            options = self.options or []
            if len(options) < MIN_MULTIPLE_CHOICE_OPTIONS:
                raise ValueError("multiple-choice question needs at least two options")
            if self.answer not in options:
                raise ValueError("multiple-choice answer must be one of the options")
        return self

    def to_model(self) -> Question:
        return Question(
            id=self.id,
            question_text=self.question,
            category=self.category,
            difficulty=self.difficulty,
            question_type=self.type,
            answer=self.answer,
            options=tuple(self.options or ()),
        )


class NewQuestionPayload(_WireModel):
    """Body of ``POST /api/questions``."""

    question: str
    answer: str
    category: str
    difficulty: Difficulty
    type: QuestionType
    options: list[str] | None = None

    @classmethod
    def from_draft(cls, draft: QuestionDraft) -> "NewQuestionPayload":
        question_type = QuestionType(draft.question_type)
        options = None
        if question_type is QuestionType.MULTIPLE_CHOICE:
            options = [option.strip() for option in draft.options if option.strip()]
        return cls(
            question=draft.question_text.strip(),
            answer=draft.answer.strip(),
            category=draft.category.strip(),
            difficulty=Difficulty(draft.difficulty),
            type=question_type,
            options=options,
        )

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class QuestionCreatedSchema(_WireModel):
    """Response of ``POST /api/questions``: the stored question wrapped with a message."""

    message: str = ""
    id: str | None = None
    question: QuestionSchema

    @field_validator("id", mode="before")
    @classmethod
    def _normalize_id(cls, value: Any) -> Any:
        return _coerce_identifier(value)

    def to_model(self) -> Question:
        # The embedded question may still carry a zero id; the top-level id is authoritative.
        created = self.question.to_model()
        return replace(created, id=self.id) if self.id else created


class SubmissionPayload(_WireModel):
    """Body of ``POST /api/submit``."""

    question_id: str
    answer: str
    type: QuestionType

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


class SubmissionResultSchema(_WireModel):
    correct: bool
    correct_answer: str = ""
    explanation: str = ""
    score: int | None = None

    def to_model(self) -> SubmissionResult:
        return SubmissionResult(
            correct=self.correct,
            explanation=self.explanation,
            correct_answer=self.correct_answer,
            score=self.score,
        )


# --- Optional content ----------------------------------------------------------


class UIConfigSchema(_WireModel):
    category_colors: dict[str, str] = Field(default_factory=dict, alias="categoryColors")
    difficulty_colors: dict[str, str] = Field(default_factory=dict, alias="difficultyColors")
    default_color: str = Field(alias="defaultColor")
    fallback_categories: list[str] = Field(default_factory=list, alias="fallbackCategories")

    def to_model(self) -> UIConfig:
        return UIConfig(
            category_colors=dict(self.category_colors),
            difficulty_colors=dict(self.difficulty_colors),
            default_color=self.default_color,
            fallback_categories=tuple(self.fallback_categories),
        )


class InterviewQuestionSchema(_WireModel):
    id: int
    question: str
    time_limit: int = Field(gt=0, alias="timeLimit")
    hints: list[str] = Field(default_factory=list)

    def to_model(self) -> InterviewQuestion:
        return InterviewQuestion(
            id=self.id,
            prompt=self.question,
            time_limit_seconds=self.time_limit,
            hints=tuple(self.hints),
        )


class InterviewPhaseSchema(_WireModel):
    title: str
    icon: str = ""
    color: str = "blue"
    questions: list[InterviewQuestionSchema] = Field(default_factory=list)

    def to_model(self, stage: InterviewStage) -> InterviewPhase:
        return InterviewPhase(
            stage=stage,
            title=self.title,
            icon=self.icon,
            color=self.color,
            questions=tuple(question.to_model() for question in self.questions),
        )


class IncidentScenarioSchema(_WireModel):
    id: int
    title: str
    description: str = ""
    situation: str = ""
    type: str = "scenario"
    time_limit: int = Field(gt=0, alias="timeLimit")
    hints: list[str] = Field(default_factory=list)

    def to_model(self) -> IncidentScenario:
        return IncidentScenario(
            id=self.id,
            title=self.title,
            description=self.description,
            situation=self.situation,
            scenario_type=self.type,
            time_limit_seconds=self.time_limit,
            hints=tuple(self.hints),
        )


class InterviewScenariosSchema(_WireModel):
    phases: dict[str, InterviewPhaseSchema]
    scenarios: list[IncidentScenarioSchema] = Field(default_factory=list)

    def to_model(self) -> InterviewScenarios:
        phases: dict[InterviewStage, InterviewPhase] = {}
        for stage in INTERVIEW_PHASE_ORDER:
            phase = self.phases.get(stage.value)
            if phase is not None:
                phases[stage] = phase.to_model(stage)
        unknown = set(self.phases) - {stage.value for stage in INTERVIEW_PHASE_ORDER}
        if unknown:
            logger.warning("Ignoring unknown interview phases: %s", ", ".join(sorted(unknown)))
        return InterviewScenarios(
            phases=phases,
            incident_scenarios=tuple(scenario.to_model() for scenario in self.scenarios),
        )


class FeatureSchema(_WireModel):
    icon: str = ""
    text: str


class StatSchema(_WireModel):
    value: str
    label: str


class HomepageMetadataSchema(_WireModel):
    title: str
    subtitle: str = ""


class HomepageSchema(_WireModel):
    features: dict[str, list[FeatureSchema]] = Field(default_factory=dict)
    stats: list[StatSchema] = Field(default_factory=list)
    metadata: HomepageMetadataSchema

    def to_model(self) -> HomepageContent:
        return HomepageContent(
            features={
                section: tuple(FeatureBullet(icon=item.icon, text=item.text) for item in items)
                for section, items in self.features.items()
            },
            stats=tuple(HomepageStat(value=stat.value, label=stat.label) for stat in self.stats),
            title=self.metadata.title,
            subtitle=self.metadata.subtitle,
        )


# --- Job applications ----------------------------------------------------------


class JobApplicationSchema(_WireModel):
    """Job application record; the server's ``_id`` wins over ``id``."""

    id: str = Field(validation_alias=AliasChoices("_id", "id"))
    company: str
    applied_date: date = Field(validation_alias=AliasChoices("appliedDate", "applied_date"))
    status: ApplicationStatus = ApplicationStatus.APPLIED
    location: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _normalize_id(cls, value: Any) -> Any:
        return _coerce_identifier(value)

    @field_validator("applied_date", mode="before")
    @classmethod
    def _strip_time(cls, value: Any) -> Any:
        if isinstance(value, str) and len(value) > 10 and value[10] in ("T", " "):
            return value[:10]
        return value

    def to_model(self) -> JobApplication:
        return JobApplication(
            id=self.id,
            company=self.company,
            applied_date=self.applied_date,
            status=self.status,
            location=self.location or "",
        )


class JobApplicationPayload(_WireModel):
    """Body of the create/update application requests."""

    company: str
    applied_date: date = Field(serialization_alias="appliedDate")
    status: ApplicationStatus
    location: str = ""

    @classmethod
    def from_fields(cls, fields: ApplicationFields) -> "JobApplicationPayload":
        if fields.applied_date is None:
            raise ValueError("applied_date is required")
        return cls(
            company=fields.company.strip(),
            applied_date=fields.applied_date,
            status=fields.status,
            location=fields.location.strip(),
        )

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
