"""State container for the timed interview simulation."""

from __future__ import annotations

from devops_prep.core.models import (
    INTERVIEW_PHASE_ORDER,
    InterviewQuestion,
    InterviewScenarios,
    InterviewStage,
    RecordedAnswer,
)


class InterviewSession:
    """Tracks the stage, question pointer, countdown and recorded answers."""

    def __init__(self) -> None:
        self._scenarios: InterviewScenarios | None = None
        self._stage: InterviewStage = InterviewStage.INTRO
        self._question_index: int = 0
        self._time_remaining: int = 0
        self._answer_buffer: str = ""
        self._answers: dict[int, RecordedAnswer] = {}
        self._entry_token: int = 0

    def set_scenarios(self, scenarios: InterviewScenarios) -> None:
        self._scenarios = scenarios

    @property
    def scenarios(self) -> InterviewScenarios | None:
        return self._scenarios

    @property
    def stage(self) -> InterviewStage:
        return self._stage

    @property
    def question_index(self) -> int:
        return self._question_index

    @property
    def time_remaining(self) -> int:
        return self._time_remaining

    @property
    def answer_buffer(self) -> str:
        return self._answer_buffer

    @property
    def entry_token(self) -> int:
        return self._entry_token

    def is_in_phase(self) -> bool:
        return self._stage in INTERVIEW_PHASE_ORDER

    def phase_questions(self, stage: InterviewStage | None = None) -> tuple[InterviewQuestion, ...]:
        if self._scenarios is None:
            return ()
        return self._scenarios.questions_for(stage or self._stage)

    def current_question(self) -> InterviewQuestion | None:
        if not self.is_in_phase():
            return None
        questions = self.phase_questions()
        if 0 <= self._question_index < len(questions):
            return questions[self._question_index]
        return None

    def first_phase_after(self, stage: InterviewStage) -> InterviewStage:
        """Return the next phase holding questions, or RESULTS when none is left."""
        if stage is InterviewStage.INTRO:
            candidates = INTERVIEW_PHASE_ORDER
        elif stage in INTERVIEW_PHASE_ORDER:
            candidates = INTERVIEW_PHASE_ORDER[INTERVIEW_PHASE_ORDER.index(stage) + 1:]
        else:
            return InterviewStage.RESULTS
        for candidate in candidates:
            if self.phase_questions(candidate):
                return candidate
        return InterviewStage.RESULTS

    def enter_question(self, stage: InterviewStage, index: int) -> InterviewQuestion:
        """Point at a question, reset its countdown and start a new entry."""
        self._stage = stage
        self._question_index = index
        question = self.phase_questions()[index]
        self._time_remaining = question.time_limit_seconds
        self._entry_token += 1
        return question

    def enter_results(self) -> None:
        self._stage = InterviewStage.RESULTS
        self._question_index = 0
        self._time_remaining = 0
        self._entry_token += 1

    def decrement_time(self) -> int:
        self._time_remaining = max(0, self._time_remaining - 1)
        return self._time_remaining

    def set_answer_buffer(self, text: str) -> None:
        self._answer_buffer = text

    def record_current_answer(self) -> RecordedAnswer | None:
        """Persist the buffer for the current question (if non-blank) and clear it."""
        question = self.current_question()
        buffer = self._answer_buffer
        self._answer_buffer = ""
        if question is None or not buffer.strip():
            return None
        recorded = RecordedAnswer(
            question_id=question.id,
            prompt=question.prompt,
            answer=buffer,
            time_spent_seconds=question.time_limit_seconds - self._time_remaining,
            phase=self._stage,
        )
        self._answers[question.id] = recorded
        return recorded

    def get_answers(self) -> dict[int, RecordedAnswer]:
        return dict(self._answers)

    def reset(self) -> None:
        self._stage = InterviewStage.INTRO
        self._question_index = 0
        self._time_remaining = 0
        self._answer_buffer = ""
        self._answers = {}
        self._entry_token += 1
