from __future__ import annotations

import time
from threading import Thread

import pytest
from PySide6.QtCore import QCoreApplication

from devops_prep.ui.background import UiThreadPrompt


@pytest.fixture(scope="module")
def qt_app() -> QCoreApplication:
    return QCoreApplication.instance() or QCoreApplication([])


def _pump_until_done(app: QCoreApplication, threads: list[Thread], timeout: float = 5.0) -> None:
    deadline = time.monotonic() + timeout
    while any(thread.is_alive() for thread in threads):
        assert time.monotonic() < deadline, "workers did not finish"
        app.processEvents()
        time.sleep(0.001)


def test_prompt_on_ui_thread_calls_directly(qt_app):
    prompt = UiThreadPrompt(lambda application_id: application_id == "keep")

    assert prompt("keep") is True
    assert prompt("other") is False


def test_concurrent_workers_each_get_their_own_answer(qt_app):
    prompt = UiThreadPrompt(lambda application_id: application_id.startswith("yes"))
    answers: dict[str, bool] = {}

    def ask(application_id: str) -> None:
        for round_number in range(20):
            key = f"{application_id}-{round_number}"
            answers[key] = prompt(key)

    threads = [Thread(target=ask, args=(name,), daemon=True) for name in ("yes-a", "no-b", "yes-c", "no-d")]
    for thread in threads:
        thread.start()
    _pump_until_done(qt_app, threads)

    assert len(answers) == 80
    assert all(answer is key.startswith("yes") for key, answer in answers.items())
