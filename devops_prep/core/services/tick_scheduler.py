"""Protocol for the cancellable one-second tick that drives interview timers."""

from __future__ import annotations

from typing import Callable, Protocol


class TickHandle(Protocol):
    def cancel(self) -> None:
        """Stop the tick; no callback may fire after this returns."""


class TickScheduler(Protocol):
    """Schedules a recurring callback on the caller's event loop."""

    def call_every(self, interval_seconds: float, callback: Callable[[], None]) -> TickHandle:
        ...
