from __future__ import annotations

import pytest

from devops_prep.constants.fallback_content import FALLBACK_INTERVIEW_SCENARIOS
from devops_prep.core.interview_controller import InterviewController
from devops_prep.core.models import (
    InterviewPhase,
    InterviewQuestion,
    InterviewScenarios,
    InterviewStage,
)


def build_scenarios(**questions_per_phase: list[InterviewQuestion]) -> InterviewScenarios:
    phases = {}
    for name, questions in questions_per_phase.items():
        stage = InterviewStage(name)
        phases[stage] = InterviewPhase(stage=stage, title=name.title(), questions=tuple(questions))
    return InterviewScenarios(phases=phases)


@pytest.fixture
def controller(scheduler) -> InterviewController:
    controller = InterviewController(scheduler)
    controller.load_scenarios(FALLBACK_INTERVIEW_SCENARIOS)
    return controller


def test_start_without_questions_stays_in_intro(scheduler):
    controller = InterviewController(scheduler)

    assert controller.start() is False
    assert controller.stage is InterviewStage.INTRO
    assert scheduler.handles == []


def test_start_enters_first_question_with_its_time_limit(controller, scheduler):
    assert controller.start() is True

    assert controller.stage is InterviewStage.PERSONAL
    assert controller.question_index == 0
    assert controller.time_remaining == 180
    assert len(scheduler.active) == 1


def test_start_only_works_from_intro(controller):
    controller.start()

    assert controller.start() is False
    assert controller.stage is InterviewStage.PERSONAL


def test_scenarios_cannot_be_replaced_mid_interview(controller):
    controller.start()

    assert controller.load_scenarios(build_scenarios(technical=[InterviewQuestion(1, "Q", 10)])) is False
    assert controller.scenarios is FALLBACK_INTERVIEW_SCENARIOS


def test_advancing_through_every_question_reaches_results_once(controller, scheduler):
    controller.start()
    visited = []
    for _ in range(FALLBACK_INTERVIEW_SCENARIOS.total_question_count()):
        visited.append(controller.stage)
        controller.advance()

    assert controller.stage is InterviewStage.RESULTS
    assert visited == [InterviewStage.PERSONAL] * 3 + [InterviewStage.TECHNICAL] * 3 + [InterviewStage.SCENARIO] * 2
    assert scheduler.active == []

    assert controller.advance() is InterviewStage.RESULTS
    assert controller.stage is InterviewStage.RESULTS


def test_each_transition_rearms_a_single_tick(controller, scheduler):
    controller.start()
    first = scheduler.active[0]

    controller.advance()

    assert first.cancelled is True
    assert len(scheduler.active) == 1
    assert controller.time_remaining == 120


def test_empty_phases_are_skipped(scheduler):
    controller = InterviewController(scheduler)
    controller.load_scenarios(
        build_scenarios(personal=[], technical=[InterviewQuestion(4, "Explain probes.", 60)], scenario=[])
    )

    controller.start()
    assert controller.stage is InterviewStage.TECHNICAL

    assert controller.advance() is InterviewStage.RESULTS


def test_countdown_auto_advances_exactly_once(scheduler):
    seen = []
    changes = []
    controller = InterviewController(scheduler, on_change=lambda: changes.append(1), on_tick=seen.append)
    controller.load_scenarios(
        build_scenarios(personal=[InterviewQuestion(1, "Short", 5), InterviewQuestion(2, "Next", 30)])
    )
    controller.start()
    changes.clear()

    scheduler.tick(4)
    assert controller.question_index == 0
    assert controller.time_remaining == 1

    scheduler.tick()

    assert seen == [4, 3, 2, 1, 0]
    assert controller.question_index == 1
    assert controller.time_remaining == 30
    assert changes == [1]


def test_expiring_last_question_finishes_the_interview(scheduler):
    controller = InterviewController(scheduler)
    controller.load_scenarios(build_scenarios(scenario=[InterviewQuestion(7, "Outage", 2)]))
    controller.start()
    controller.set_answer_buffer("Check the dashboards")

    scheduler.tick(5)

    assert controller.stage is InterviewStage.RESULTS
    [answer] = controller.get_answers()
    assert answer.time_spent_seconds == 2


def test_stale_tick_is_ignored(controller, scheduler):
    controller.start()
    stale = scheduler.active[0]
    controller.advance()
    remaining = controller.time_remaining

    # Simulates a timer event already queued before cancellation.
    stale.callback()

    assert controller.time_remaining == remaining
    assert controller.question_index == 1


def test_on_tick_advancing_does_not_double_advance(scheduler):
    controller = InterviewController(scheduler)
    controller.on_tick = lambda remaining: controller.advance() if remaining == 0 else None
    controller.load_scenarios(
        build_scenarios(personal=[InterviewQuestion(1, "A", 1), InterviewQuestion(2, "B", 10)])
    )
    controller.start()

    scheduler.tick()

    assert controller.stage is InterviewStage.PERSONAL
    assert controller.question_index == 1


def test_reset_and_shutdown_cancel_the_tick(controller, scheduler):
    controller.start()
    controller.shutdown()

    assert scheduler.active == []
    assert controller.stage is InterviewStage.PERSONAL

    controller.reset()

    assert controller.stage is InterviewStage.INTRO
    assert controller.get_answers() == []
    assert controller.scenarios is FALLBACK_INTERVIEW_SCENARIOS


def test_blank_answers_are_not_recorded(controller):
    controller.start()
    controller.set_answer_buffer("   ")
    controller.advance()

    assert controller.answered_count() == 0
    assert controller.answer_buffer == ""


def test_answers_record_time_spent_and_phase(controller, scheduler):
    controller.start()
    scheduler.tick(30)
    controller.set_answer_buffer("I run platform teams.")
    controller.advance()
    scheduler.tick(10)
    controller.set_answer_buffer("Automation.")
    controller.advance()

    answers = controller.get_answers()

    assert [(a.question_id, a.time_spent_seconds, a.phase) for a in answers] == [
        (1, 30, InterviewStage.PERSONAL),
        (2, 10, InterviewStage.PERSONAL),
    ]
    assert controller.total_time_spent() == 40


def test_answer_buffer_is_ignored_outside_a_phase(controller):
    assert controller.set_answer_buffer("too early") is False
    assert controller.answer_buffer == ""


def test_phase_progress_counts_the_current_question(controller):
    assert controller.phase_progress() == 0.0

    controller.start()
    assert controller.phase_progress() == pytest.approx(1 / 3)

    controller.advance()
    controller.advance()
    assert controller.phase_progress() == pytest.approx(1.0)


def test_current_phase_and_question(controller):
    assert controller.current_phase() is None

    controller.start()

    assert controller.current_phase().title == "Getting to Know You"
    assert controller.current_question().id == 1


def test_on_change_fires_for_user_actions(scheduler):
    changes = []
    controller = InterviewController(scheduler, on_change=lambda: changes.append(controller.stage))
    controller.load_scenarios(FALLBACK_INTERVIEW_SCENARIOS)
    controller.start()
    controller.advance()
    controller.reset()

    assert changes == [
        InterviewStage.INTRO,
        InterviewStage.PERSONAL,
        InterviewStage.PERSONAL,
        InterviewStage.INTRO,
    ]


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [(0, "0:00"), (59, "0:59"), (60, "1:00"), (605, "10:05"), (-3, "0:00")],
)
def test_format_time(seconds, expected):
    assert InterviewController.format_time(seconds) == expected
