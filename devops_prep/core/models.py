"""Domain models for the interview prep application."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum


class QuestionType(str, Enum):
    """Supported quiz question formats."""

    MULTIPLE_CHOICE = "multiple-choice"
    OPEN_ENDED = "open-ended"
    SHORT_ANSWER = "short-answer"


class Difficulty(str, Enum):
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


class QuizStage(Enum):
    """Lifecycle of a quiz session."""

    SETUP = "setup"
    ACTIVE = "active"
    RESULTS = "results"


class InterviewStage(str, Enum):
    """Linear stages of the interview simulation."""

    INTRO = "intro"
    PERSONAL = "personal"
    TECHNICAL = "technical"
    SCENARIO = "scenario"
    RESULTS = "results"


# Phases that hold questions, in the order they are traversed.
INTERVIEW_PHASE_ORDER: tuple[InterviewStage, ...] = (
    InterviewStage.PERSONAL,
    InterviewStage.TECHNICAL,
    InterviewStage.SCENARIO,
)


class ApplicationStatus(str, Enum):
    APPLIED = "applied"
    INTERVIEW = "interview"
    OFFER = "offer"
    REJECTED = "rejected"
    WITHDRAWN = "withdrawn"


@dataclass(frozen=True, slots=True)
class Question:
    """Quiz question loaded from the question bank."""

    id: str
    question_text: str
    category: str
    difficulty: Difficulty
    question_type: QuestionType
    answer: str
    options: tuple[str, ...] = ()

    @property
    def is_multiple_choice(self) -> bool:
        return self.question_type is QuestionType.MULTIPLE_CHOICE


@dataclass(slots=True)
class QuestionDraft:
    """Form data for a question the user wants to add to the bank."""

    question_text: str = ""
    answer: str = ""
    category: str = ""
    difficulty: str = Difficulty.EASY.value
    question_type: str = QuestionType.OPEN_ENDED.value
    options: list[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class SubmissionResult:
    """Grading outcome returned by the backend for one answer."""

    correct: bool
    explanation: str = ""
    correct_answer: str = ""
    score: int | None = None


@dataclass(frozen=True, slots=True)
class QuizScore:
    correct: int
    total: int
    percentage: int


@dataclass(frozen=True, slots=True)
class InterviewQuestion:
    id: int
    prompt: str
    time_limit_seconds: int
    hints: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class InterviewPhase:
    """One labeled stage of the interview and its ordered questions."""

    stage: InterviewStage
    title: str
    questions: tuple[InterviewQuestion, ...]
    icon: str = ""
    color: str = "blue"


@dataclass(frozen=True, slots=True)
class IncidentScenario:
    """Standalone practice scenario shown on the interview intro screen."""

    id: int
    title: str
    description: str
    situation: str
    scenario_type: str
    time_limit_seconds: int
    hints: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class InterviewScenarios:
    phases: dict[InterviewStage, InterviewPhase]
    incident_scenarios: tuple[IncidentScenario, ...] = ()

    def questions_for(self, stage: InterviewStage) -> tuple[InterviewQuestion, ...]:
        phase = self.phases.get(stage)
        return phase.questions if phase is not None else ()

    def total_question_count(self) -> int:
        return sum(len(phase.questions) for phase in self.phases.values())


@dataclass(frozen=True, slots=True)
class RecordedAnswer:
    """Answer captured when the candidate leaves an interview question."""

    question_id: int
    prompt: str
    answer: str
    time_spent_seconds: int
    phase: InterviewStage


@dataclass(frozen=True, slots=True)
class JobApplication:
    id: str
    company: str
    applied_date: date
    status: ApplicationStatus = ApplicationStatus.APPLIED
    location: str = ""


@dataclass(slots=True)
class ApplicationFields:
    """Form data used to create or update a job application."""

    company: str = ""
    applied_date: date | None = None
    status: ApplicationStatus = ApplicationStatus.APPLIED
    location: str = ""


@dataclass(frozen=True, slots=True)
class ApplicationAnalytics:
    total: int
    by_status: dict[ApplicationStatus, int]
    response_rate: int
    offer_rate: int


@dataclass(frozen=True, slots=True)
class UIConfig:
    """Badge color classes and fallback categories served by the backend."""

    category_colors: dict[str, str]
    difficulty_colors: dict[str, str]
    default_color: str
    fallback_categories: tuple[str, ...] = ()

    def color_for_category(self, category: str) -> str:
        return self.category_colors.get(category, self.default_color)

    def color_for_difficulty(self, difficulty: str) -> str:
        return self.difficulty_colors.get(difficulty, self.default_color)


@dataclass(frozen=True, slots=True)
class FeatureBullet:
    icon: str
    text: str


@dataclass(frozen=True, slots=True)
class HomepageStat:
    value: str
    label: str


@dataclass(frozen=True, slots=True)
class HomepageContent:
    features: dict[str, tuple[FeatureBullet, ...]]
    stats: tuple[HomepageStat, ...]
    title: str
    subtitle: str
