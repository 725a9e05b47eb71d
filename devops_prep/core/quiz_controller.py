"""Quiz flow controller shared between the Qt view and background workers."""

from __future__ import annotations

import logging
from threading import Lock

from devops_prep.api.client import ApiClient, ApiError
from devops_prep.api.content_loader import load_categories
from devops_prep.constants.quiz_constants import ALL_CATEGORIES, DEFAULT_QUESTION_COUNT
from devops_prep.core.models import (
    Question,
    QuestionDraft,
    QuizScore,
    QuizStage,
    SubmissionResult,
    UIConfig,
)
from devops_prep.core.services.quiz_session import QuizSession
from devops_prep.core.services.scoreboard import compute_quiz_score
from devops_prep.core.services.validation import ValidationError, validate_question_draft

logger = logging.getLogger(__name__)


class QuizController:
    """Owns the setup -> active -> results state machine of a quiz.

    Network calls run without holding the lock so the view can call these
    methods from a worker thread while reading state from the UI thread.
    """

    def __init__(self, api: ApiClient) -> None:
        self._lock = Lock()
        self._api = api
        self._session = QuizSession()
        self._category: str = ALL_CATEGORIES
        self._count: int = DEFAULT_QUESTION_COUNT

    # --- Setup ---

    def select_category(self, category: str) -> None:
        with self._lock:
            self._category = category or ALL_CATEGORIES

    def select_count(self, count: int) -> None:
        if not isinstance(count, int) or count <= 0:
            raise ValueError("Question count must be a positive integer.")
        with self._lock:
            self._count = count

    @property
    def category(self) -> str:
        with self._lock:
            return self._category

    @property
    def count(self) -> int:
        with self._lock:
            return self._count

    def load_categories(self, ui_config: UIConfig | None = None) -> list[str]:
        return load_categories(self._api, ui_config)

    def load_questions(self) -> bool:
        """Fetch questions for the current setup and start a new session.

        Returns False (and leaves state untouched) when the request fails.
        """
        with self._lock:
            category, count = self._category, self._count
        try:
            if category == ALL_CATEGORIES:
                questions = self._api.fetch_random_questions(count)
            else:
                # A specific category returns the server's full set; count does not apply.
                questions = self._api.fetch_questions_for_category(category)
        except ApiError as exc:
            logger.error("Error loading questions for category %r: %s", category, exc)
            return False

        with self._lock:
            self._session.begin(questions)
        logger.info("Loaded %d question(s) for category %r", len(questions), category)
        return True

    # --- Answering ---

    def select_answer(self, question_id: str, answer: str) -> bool:
        with self._lock:
            if self._session.stage is not QuizStage.ACTIVE:
                logger.warning("Ignoring answer for %s: no active quiz", question_id)
                return False
            question = self._session.find_question(question_id)
            if question is None:
                logger.error("Ignoring answer for unknown question %s", question_id)
                return False
            if question.is_multiple_choice and answer not in question.options:
                logger.error("Ignoring answer for %s: %r is not one of its options", question_id, answer)
                return False
            if self._session.get_submission(question_id) is not None:
                logger.warning("Ignoring answer for %s: already graded", question_id)
                return False
            self._session.set_selected_answer(question_id, answer)
            return True

    def submit_answer(self, question_id: str) -> SubmissionResult | None:
        """Send the selected answer for grading and store the result under ``question_id``.

        Raises ValidationError when nothing has been selected. Returns None when
        the request fails or another submission for the same question is in flight.
        """
        with self._lock:
            if self._session.stage is not QuizStage.ACTIVE:
                logger.warning("Cannot submit %s: no active quiz", question_id)
                return None
            question = self._session.find_question(question_id)
            if question is None:
                logger.error("Cannot submit unknown question %s", question_id)
                return None
            existing = self._session.get_submission(question_id)
            if existing is not None:
                return existing
            if self._session.is_pending(question_id):
                logger.debug("Submission for %s already in flight", question_id)
                return None
            answer = (self._session.get_selected_answer(question_id) or "").strip()
            if not answer:
                raise ValidationError("Select or type an answer before submitting.")
            self._session.mark_pending(question_id)
            generation = self._session.generation

        try:
            result = self._api.submit_answer(question_id, answer, question.question_type)
        except ApiError as exc:
            logger.error("Error submitting answer for %s: %s", question_id, exc)
            with self._lock:
                if self._session.generation == generation:
                    self._session.clear_pending(question_id)
            return None

        with self._lock:
            if self._session.generation != generation:
                logger.info("Discarding grade for %s: quiz was reloaded", question_id)
                return None
            self._session.clear_pending(question_id)
            self._session.store_submission(question_id, result)
        return result

    def toggle_show_answer(self, question_id: str) -> bool:
        with self._lock:
            return self._session.toggle_revealed(question_id)

    # --- Navigation ---

    def advance(self) -> QuizStage:
        with self._lock:
            if self._session.stage is not QuizStage.ACTIVE:
                return self._session.stage
            next_index = self._session.current_index + 1
            if next_index >= self._session.question_count():
                self._session.finish()
            else:
                self._session.move_to(next_index)
            return self._session.stage

    def retreat(self) -> None:
        with self._lock:
            if self._session.stage is not QuizStage.ACTIVE or self._session.current_index == 0:
                return
            self._session.move_to(self._session.current_index - 1)

    def reset(self) -> None:
        with self._lock:
            self._session.clear()

    # --- Derived state ---

    def score(self) -> QuizScore:
        with self._lock:
            return compute_quiz_score(self._session.get_questions(), self._session.get_submissions())

    @property
    def stage(self) -> QuizStage:
        with self._lock:
            return self._session.stage

    @property
    def current_index(self) -> int:
        with self._lock:
            return self._session.current_index

    @property
    def completed(self) -> bool:
        with self._lock:
            return self._session.completed

    def get_questions(self) -> list[Question]:
        with self._lock:
            return self._session.get_questions()

    def get_current_question(self) -> Question | None:
        with self._lock:
            return self._session.get_current_question()

    def get_selected_answer(self, question_id: str) -> str | None:
        with self._lock:
            return self._session.get_selected_answer(question_id)

    def get_submission(self, question_id: str) -> SubmissionResult | None:
        with self._lock:
            return self._session.get_submission(question_id)

    def is_answer_shown(self, question_id: str) -> bool:
        with self._lock:
            return self._session.is_revealed(question_id)

    def is_submission_pending(self, question_id: str) -> bool:
        with self._lock:
            return self._session.is_pending(question_id)

    # --- Question bank ---

    def add_question(self, draft: QuestionDraft) -> Question | None:
        """Validate a new question locally, then post it to the question bank."""
        validate_question_draft(draft)
        try:
            created = self._api.create_question(draft)
        except ApiError as exc:
            logger.error("Error adding question: %s", exc)
            return None
        logger.info("Added question %s to category %r", created.id, created.category)
        return created
