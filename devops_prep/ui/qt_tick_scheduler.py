"""QTimer-backed implementation of the interview tick scheduler."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import QObject, QTimer


class _TimerHandle:
    def __init__(self, timer: QTimer) -> None:
        self._timer: QTimer | None = timer

    def cancel(self) -> None:
        if self._timer is None:
            return
        self._timer.stop()
        # The timer may be cancelled from inside its own timeout slot.
        self._timer.deleteLater()
        self._timer = None


class QtTickScheduler:
    """Creates one QTimer per armed tick on the UI thread."""

    def __init__(self, parent: QObject | None = None) -> None:
        self._parent = parent

    def call_every(self, interval_seconds: float, callback: Callable[[], None]) -> _TimerHandle:
        timer = QTimer(self._parent)
        timer.setInterval(int(interval_seconds * 1000))
        timer.timeout.connect(callback)
        timer.start()
        return _TimerHandle(timer)
