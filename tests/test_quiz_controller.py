from __future__ import annotations

import pytest

from devops_prep.api.client import ApiError
from devops_prep.core.models import QuestionDraft, QuizStage, SubmissionResult
from devops_prep.core.quiz_controller import QuizController
from devops_prep.core.services.validation import ValidationError


@pytest.fixture
def controller(api) -> QuizController:
    return QuizController(api)


def _start(controller: QuizController, count: int = 5) -> None:
    controller.select_count(count)
    assert controller.load_questions() is True


def test_new_controller_is_in_setup(controller):
    assert controller.stage is QuizStage.SETUP
    assert controller.get_questions() == []
    assert controller.category == "all"
    assert controller.count == 5


def test_all_categories_loads_a_random_sample_of_count(controller, backend):
    _start(controller, count=3)

    assert controller.stage is QuizStage.ACTIVE
    assert len(controller.get_questions()) == 3
    assert backend.count("GET", "/api/questions/random/3") == 1


def test_specific_category_is_not_truncated_to_count(controller, backend):
    controller.select_category("Core Concepts")
    controller.select_count(2)

    assert controller.load_questions() is True

    assert len(controller.get_questions()) == 4
    assert backend.count("GET", "/api/questions/random/") == 0


def test_select_count_rejects_non_positive_values(controller):
    with pytest.raises(ValueError):
        controller.select_count(0)


def test_failed_load_leaves_state_untouched(controller, backend):
    _start(controller)
    controller.select_answer("q1", "A Pod")
    backend.failing_paths.add("/api/questions/random/5")

    assert controller.load_questions() is False

    assert controller.stage is QuizStage.ACTIVE
    assert controller.get_selected_answer("q1") == "A Pod"


def test_load_clears_previous_session_state(controller):
    _start(controller)
    controller.select_answer("q1", "A Pod")
    controller.submit_answer("q1")
    controller.toggle_show_answer("q2")
    controller.advance()

    _start(controller)

    assert controller.current_index == 0
    assert controller.get_submission("q1") is None
    assert controller.get_selected_answer("q1") is None
    assert controller.is_answer_shown("q2") is False


def test_empty_question_list_is_a_valid_active_session(controller, backend):
    backend.questions = []
    _start(controller)

    assert controller.stage is QuizStage.ACTIVE
    assert controller.get_current_question() is None
    assert controller.advance() is QuizStage.RESULTS
    assert controller.score().percentage == 0


def test_retreat_on_empty_quiz_stays_put(controller, backend):
    backend.questions = []
    _start(controller)

    controller.retreat()

    assert controller.stage is QuizStage.ACTIVE
    assert controller.current_index == 0


def test_submit_grades_and_stores_by_question_id(controller, backend):
    _start(controller)
    controller.select_answer("q1", "a pod")

    result = controller.submit_answer("q1")

    assert result == controller.get_submission("q1")
    assert result.correct is True
    assert backend.received_bodies[-1] == {"question_id": "q1", "answer": "a pod", "type": "open-ended"}


def test_blank_answer_is_rejected_before_any_request(controller, backend):
    _start(controller)
    controller.select_answer("q1", "   ")

    with pytest.raises(ValidationError):
        controller.submit_answer("q1")

    assert backend.count("POST", "/api/submit") == 0
    assert controller.is_submission_pending("q1") is False


def test_graded_question_is_locked(controller, backend):
    _start(controller)
    controller.select_answer("q1", "wrong")
    first = controller.submit_answer("q1")

    assert controller.select_answer("q1", "A Pod") is False
    assert controller.get_selected_answer("q1") == "wrong"
    assert controller.submit_answer("q1") is first
    assert backend.count("POST", "/api/submit") == 1


def test_unknown_question_is_rejected(controller):
    _start(controller)

    assert controller.select_answer("nope", "x") is False
    assert controller.submit_answer("nope") is None


def test_multiple_choice_answer_must_be_one_of_the_options(controller):
    _start(controller)

    assert controller.select_answer("q3", "ExternalName") is False
    assert controller.get_selected_answer("q3") is None
    assert controller.select_answer("q3", "NodePort") is True
    assert controller.get_selected_answer("q3") == "NodePort"


def test_answers_are_rejected_outside_an_active_quiz(controller):
    assert controller.select_answer("q1", "A Pod") is False


def test_failed_submission_returns_none_and_allows_retry(controller, backend):
    _start(controller)
    controller.select_answer("q1", "A Pod")
    backend.failing_paths.add("/api/submit")

    assert controller.submit_answer("q1") is None
    assert controller.is_submission_pending("q1") is False

    backend.failing_paths.clear()
    assert controller.submit_answer("q1").correct is True


class _ReentrantApi:
    """Wraps the real client and runs a hook while a submission is in flight."""

    def __init__(self, api, hook):
        self._api = api
        self._hook = hook

    def __getattr__(self, name):
        return getattr(self._api, name)

    def submit_answer(self, question_id, answer, question_type):
        self._hook()
        return self._api.submit_answer(question_id, answer, question_type)


def test_second_submission_for_same_question_is_serialized(api):
    nested_results: list[SubmissionResult | None] = []
    controller = QuizController(_ReentrantApi(api, lambda: nested_results.append(controller.submit_answer("q1"))))
    _start(controller)
    controller.select_answer("q1", "A Pod")

    result = controller.submit_answer("q1")

    assert nested_results == [None]
    assert result.correct is True


def test_result_is_discarded_when_quiz_is_reloaded_meanwhile(api):
    controller = QuizController(_ReentrantApi(api, lambda: controller.load_questions()))
    _start(controller)
    controller.select_answer("q1", "A Pod")

    assert controller.submit_answer("q1") is None
    assert controller.get_submission("q1") is None
    assert controller.is_submission_pending("q1") is False


def test_result_is_stored_under_the_captured_question_id(api):
    controller = QuizController(_ReentrantApi(api, lambda: controller.advance()))
    _start(controller)
    controller.select_answer("q1", "A Pod")

    controller.submit_answer("q1")

    assert controller.current_index == 1
    assert controller.get_submission("q1") is not None
    assert controller.get_submission("q2") is None


def test_toggle_show_answer_flips(controller):
    _start(controller)

    assert controller.toggle_show_answer("q1") is True
    assert controller.is_answer_shown("q1") is True
    assert controller.toggle_show_answer("q1") is False


def test_navigation_is_clamped_and_finishes_at_the_end(controller):
    _start(controller, count=2)

    controller.retreat()
    assert controller.current_index == 0

    assert controller.advance() is QuizStage.ACTIVE
    assert controller.current_index == 1
    assert controller.advance() is QuizStage.RESULTS
    assert controller.completed is True
    assert controller.advance() is QuizStage.RESULTS


def test_score_rounds_half_up(controller, backend):
    _start(controller, count=5)
    for question_id, answer in (("q1", "A Pod"), ("q2", "kubectl get pods"), ("q3", "ClusterIP")):
        controller.select_answer(question_id, answer)
        controller.submit_answer(question_id)
    controller.select_answer("q4", "wrong")
    controller.submit_answer("q4")

    score = controller.score()

    assert (score.correct, score.total, score.percentage) == (3, 5, 60)


def test_reset_returns_to_setup(controller):
    _start(controller)
    controller.select_answer("q1", "A Pod")

    controller.reset()

    assert controller.stage is QuizStage.SETUP
    assert controller.get_questions() == []
    assert controller.get_selected_answer("q1") is None


def test_load_categories_uses_fallback_on_error(controller, backend):
    backend.failing_paths.add("/api/categories")

    assert controller.load_categories() == ["Core Concepts", "Networking", "Configuration"]


def test_add_question_rejects_invalid_multiple_choice_locally(controller, backend):
    draft = QuestionDraft(
        question_text="Pick one",
        answer="C",
        category="Networking",
        question_type="multiple-choice",
        options=["A", "B"],
    )

    with pytest.raises(ValidationError, match="one of the options"):
        controller.add_question(draft)

    assert backend.requests == []


def test_add_question_posts_valid_draft(controller, backend):
    draft = QuestionDraft(question_text="What stores cluster state?", answer="etcd", category="Architecture")

    created = controller.add_question(draft)

    assert created is not None
    assert created.category == "Architecture"
    assert backend.count("POST", "/api/questions") == 1


def test_add_question_returns_none_on_api_error(controller, backend):
    backend.failing_paths.add("/api/questions")
    draft = QuestionDraft(question_text="Q", answer="A", category="C")

    assert controller.add_question(draft) is None


def test_api_errors_never_escape_the_controller(controller, backend, monkeypatch):
    def boom(*args, **kwargs):
        raise ApiError("down")

    monkeypatch.setattr(controller._api, "fetch_random_questions", boom)

    assert controller.load_questions() is False
