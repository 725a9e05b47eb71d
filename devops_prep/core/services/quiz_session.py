"""State container for one quiz session and its per-question maps."""

from __future__ import annotations

from devops_prep.core.models import Question, QuizStage, SubmissionResult


class QuizSession:
    """Holds the loaded questions and everything the user did with them."""

    def __init__(self) -> None:
        self._stage: QuizStage = QuizStage.SETUP
        self._questions: list[Question] = []
        self._current_index: int = 0
        self._selected_answers: dict[str, str] = {}
        self._submissions: dict[str, SubmissionResult] = {}
        self._revealed: dict[str, bool] = {}
        self._pending: set[str] = set()
        self._completed: bool = False
        self._generation: int = 0

    # --- Lifecycle ---

    def begin(self, questions: list[Question]) -> None:
        """Replace the question list and start a fresh active session."""
        self._questions = list(questions)
        self._clear_progress()
        self._stage = QuizStage.ACTIVE

    def clear(self) -> None:
        self._questions = []
        self._clear_progress()
        self._stage = QuizStage.SETUP

    def finish(self) -> None:
        self._completed = True
        self._stage = QuizStage.RESULTS

    def _clear_progress(self) -> None:
        self._current_index = 0
        self._selected_answers = {}
        self._submissions = {}
        self._revealed = {}
        self._pending = set()
        self._completed = False
        self._generation += 1

    # --- Accessors ---

    @property
    def stage(self) -> QuizStage:
        return self._stage

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def completed(self) -> bool:
        return self._completed

    @property
    def current_index(self) -> int:
        return self._current_index

    def get_questions(self) -> list[Question]:
        return list(self._questions)

    def question_count(self) -> int:
        return len(self._questions)

    def get_current_question(self) -> Question | None:
        if 0 <= self._current_index < len(self._questions):
            return self._questions[self._current_index]
        return None

    def find_question(self, question_id: str) -> Question | None:
        return next((q for q in self._questions if q.id == question_id), None)

    def get_selected_answer(self, question_id: str) -> str | None:
        return self._selected_answers.get(question_id)

    def get_submission(self, question_id: str) -> SubmissionResult | None:
        return self._submissions.get(question_id)

    def get_submissions(self) -> dict[str, SubmissionResult]:
        return dict(self._submissions)

    def is_revealed(self, question_id: str) -> bool:
        return self._revealed.get(question_id, False)

    def is_pending(self, question_id: str) -> bool:
        return question_id in self._pending

    # --- Mutations ---

    def set_selected_answer(self, question_id: str, answer: str) -> None:
        self._selected_answers[question_id] = answer

    def mark_pending(self, question_id: str) -> None:
        self._pending.add(question_id)

    def clear_pending(self, question_id: str) -> None:
        self._pending.discard(question_id)

    def store_submission(self, question_id: str, result: SubmissionResult) -> None:
        self._submissions[question_id] = result

    def toggle_revealed(self, question_id: str) -> bool:
        revealed = not self._revealed.get(question_id, False)
        self._revealed[question_id] = revealed
        return revealed

    def move_to(self, index: int) -> None:
        if not 0 <= index < len(self._questions):
            raise IndexError(f"Question index {index} out of range")
        self._current_index = index
