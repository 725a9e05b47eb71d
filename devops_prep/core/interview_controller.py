"""Controller for the timed, three-phase interview simulation."""

from __future__ import annotations

import logging
from threading import Lock
from typing import Callable

from devops_prep.constants.quiz_constants import TICK_INTERVAL_SECONDS
from devops_prep.core.models import (
    InterviewPhase,
    InterviewQuestion,
    InterviewScenarios,
    InterviewStage,
    RecordedAnswer,
)
from devops_prep.core.services.interview_session import InterviewSession
from devops_prep.core.services.tick_scheduler import TickHandle, TickScheduler

logger = logging.getLogger(__name__)


class InterviewController:
    """Drives intro -> personal -> technical -> scenario -> results.

    Every question entry arms its own tick bound to the session's entry token,
    so a tick that outlives its question is recognised and dropped. Observers
    are invoked after the lock is released and may read controller state.
    """

    def __init__(
        self,
        scheduler: TickScheduler,
        on_change: Callable[[], None] | None = None,
        on_tick: Callable[[int], None] | None = None,
    ) -> None:
        self._lock = Lock()
        self._scheduler = scheduler
        self._session = InterviewSession()
        self._tick_handle: TickHandle | None = None
        self.on_change = on_change
        self.on_tick = on_tick

    # --- Lifecycle ---

    def load_scenarios(self, scenarios: InterviewScenarios) -> bool:
        with self._lock:
            if self._session.stage is not InterviewStage.INTRO:
                logger.warning("Ignoring scenario data: interview already in progress")
                return False
            self._session.set_scenarios(scenarios)
        logger.debug("Loaded %d interview question(s)", scenarios.total_question_count())
        self._notify_change()
        return True

    def start(self) -> bool:
        with self._lock:
            if self._session.stage is not InterviewStage.INTRO:
                logger.warning("Cannot start interview from stage %s", self._session.stage.value)
                return False
            scenarios = self._session.scenarios
            if scenarios is None or scenarios.total_question_count() == 0:
                logger.error("Cannot start interview: no questions loaded")
                return False
            self._cancel_tick_locked()
            first_stage = self._session.first_phase_after(InterviewStage.INTRO)
            self._enter_question_locked(first_stage, 0)
        logger.info("Interview started in %s phase", first_stage.value)
        self._notify_change()
        return True

    def advance(self) -> InterviewStage:
        """Record the current answer and move to the next question, phase or results."""
        with self._lock:
            if not self._session.is_in_phase():
                logger.warning("Ignoring advance outside an interview phase")
                return self._session.stage
            stage = self._advance_locked()
        self._notify_change()
        return stage

    def reset(self) -> None:
        with self._lock:
            self._cancel_tick_locked()
            self._session.reset()
        logger.debug("Interview reset")
        self._notify_change()

    def shutdown(self) -> None:
        """Stop the countdown when the view goes away; state is kept."""
        with self._lock:
            self._cancel_tick_locked()

    def set_answer_buffer(self, text: str) -> bool:
        with self._lock:
            if not self._session.is_in_phase():
                return False
            self._session.set_answer_buffer(text)
            return True

    # --- Derived state ---

    @property
    def stage(self) -> InterviewStage:
        with self._lock:
            return self._session.stage

    @property
    def question_index(self) -> int:
        with self._lock:
            return self._session.question_index

    @property
    def time_remaining(self) -> int:
        with self._lock:
            return self._session.time_remaining

    @property
    def answer_buffer(self) -> str:
        with self._lock:
            return self._session.answer_buffer

    @property
    def scenarios(self) -> InterviewScenarios | None:
        with self._lock:
            return self._session.scenarios

    def current_question(self) -> InterviewQuestion | None:
        with self._lock:
            return self._session.current_question()

    def current_phase(self) -> InterviewPhase | None:
        with self._lock:
            scenarios = self._session.scenarios
            if scenarios is None or not self._session.is_in_phase():
                return None
            return scenarios.phases.get(self._session.stage)

    def phase_progress(self) -> float:
        """Fraction of the current phase reached, counting the current question."""
        with self._lock:
            questions = self._session.phase_questions() if self._session.is_in_phase() else ()
            if not questions:
                return 0.0
            return (self._session.question_index + 1) / len(questions)

    def answered_count(self) -> int:
        with self._lock:
            return len(self._session.get_answers())

    def total_time_spent(self) -> int:
        with self._lock:
            return sum(answer.time_spent_seconds for answer in self._session.get_answers().values())

    def get_answers(self) -> list[RecordedAnswer]:
        with self._lock:
            return list(self._session.get_answers().values())

    @staticmethod
    def format_time(seconds: int) -> str:
        minutes, secs = divmod(max(0, int(seconds)), 60)
        return f"{minutes}:{secs:02d}"

    # --- Internals (caller holds the lock) ---

    def _advance_locked(self) -> InterviewStage:
        self._cancel_tick_locked()
        recorded = self._session.record_current_answer()
        if recorded is not None:
            logger.debug("Recorded answer for question %s (%ss)", recorded.question_id, recorded.time_spent_seconds)

        stage = self._session.stage
        next_index = self._session.question_index + 1
        if next_index < len(self._session.phase_questions()):
            self._enter_question_locked(stage, next_index)
            return stage

        next_stage = self._session.first_phase_after(stage)
        if next_stage is InterviewStage.RESULTS:
            self._session.enter_results()
            logger.info("Interview finished with %d answer(s)", len(self._session.get_answers()))
        else:
            self._enter_question_locked(next_stage, 0)
            logger.info("Interview moved to %s phase", next_stage.value)
        return next_stage

    def _enter_question_locked(self, stage: InterviewStage, index: int) -> None:
        self._session.enter_question(stage, index)
        token = self._session.entry_token
        self._tick_handle = self._scheduler.call_every(
            TICK_INTERVAL_SECONDS, lambda: self._handle_tick(token)
        )

    def _cancel_tick_locked(self) -> None:
        if self._tick_handle is not None:
            self._tick_handle.cancel()
            self._tick_handle = None

    def _handle_tick(self, token: int) -> None:
        with self._lock:
            if token != self._session.entry_token or not self._session.is_in_phase():
                return
            remaining = self._session.decrement_time()
        if self.on_tick is not None:
            self.on_tick(remaining)
        if remaining > 0:
            return

        with self._lock:
            # on_tick may have advanced or reset already.
            if token != self._session.entry_token or not self._session.is_in_phase():
                return
            logger.debug("Time expired on question %d, advancing", self._session.question_index)
            self._advance_locked()
        self._notify_change()

    def _notify_change(self) -> None:
        if self.on_change is not None:
            self.on_change()
