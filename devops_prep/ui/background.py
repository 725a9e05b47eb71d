"""Run blocking controller calls off the UI thread and deliver results back onto it.

Workers are plain daemon threads. Results travel back through queued signals
on a relay object created in the UI thread, so callbacks always run there.
"""

from __future__ import annotations

import logging
from threading import Thread
from typing import Any, Callable

from PySide6.QtCore import QObject, QThread, Qt, Signal, Slot

logger = logging.getLogger(__name__)

# Relays stay referenced until their worker reports back.
_active_relays: set["_ResultRelay"] = set()


class _ResultRelay(QObject):
    succeeded = Signal(object)
    failed = Signal(object)

    def __init__(
        self,
        on_done: Callable[[Any], None],
        on_error: Callable[[BaseException], None] | None,
    ) -> None:
        super().__init__()
        self._on_done = on_done
        self._on_error = on_error
        self.succeeded.connect(self._deliver_result, Qt.ConnectionType.QueuedConnection)
        self.failed.connect(self._deliver_error, Qt.ConnectionType.QueuedConnection)

    @Slot(object)
    def _deliver_result(self, result: Any) -> None:
        _active_relays.discard(self)
        self._on_done(result)

    @Slot(object)
    def _deliver_error(self, error: BaseException) -> None:
        _active_relays.discard(self)
        if self._on_error is not None:
            self._on_error(error)


def run_in_background(
    task: Callable[[], Any],
    on_done: Callable[[Any], None],
    on_error: Callable[[BaseException], None] | None = None,
    *,
    name: str = "BackgroundTask",
) -> Thread:
    """Run ``task`` on a worker thread; call ``on_done`` or ``on_error`` on the UI thread.

    Must be called from the UI thread.
    """
    relay = _ResultRelay(on_done, on_error)
    _active_relays.add(relay)

    def worker() -> None:
        try:
            result = task()
        except Exception as exc:
            # Rejected input arrives as ValueError; anything else gets a traceback.
            if not isinstance(exc, ValueError):
                logger.exception("Background task %s failed", name)
            relay.failed.emit(exc)
            return
        relay.succeeded.emit(result)

    thread = Thread(target=worker, name=name, daemon=True)
    thread.start()
    return thread


class UiThreadPrompt(QObject):
    """Callable that runs a blocking prompt on the UI thread from any thread.

    Wraps a dialog function such as ``confirm_delete_application`` so a
    controller method running on a worker can ask the user and wait for the
    answer.
    """

    _requested = Signal(str, object)

    def __init__(self, prompt: Callable[[str], bool]) -> None:
        super().__init__()
        self._prompt = prompt
        self._requested.connect(self._ask, Qt.ConnectionType.BlockingQueuedConnection)

    @Slot(str, object)
    def _ask(self, argument: str, answer: list[bool]) -> None:
        answer.append(bool(self._prompt(argument)))

    def __call__(self, argument: str) -> bool:
        if QThread.currentThread() == self.thread():
            return bool(self._prompt(argument))
        # Each caller gets its own holder, so concurrent prompts never share an answer.
        answer: list[bool] = []
        self._requested.emit(argument, answer)
        return bool(answer and answer[0])
