"""Shared fixtures for nodeboard tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest


class ManualCall:
    """Deferred callback driven by ManualScheduler."""

    def __init__(self, due: float, callback: Callable[[], None]) -> None:
        self.due = due
        self.callback = callback
        self.cancelled = False
        self.fired = False
        self.cancel_count = 0

    def cancel(self) -> None:
        self.cancel_count += 1
        self.cancelled = True


class ManualScheduler:
    """Scheduler with a hand-advanced clock."""

    def __init__(self) -> None:
        self.now = 0.0
        self.calls: list[ManualCall] = []

    def __call__(self, delay: float, callback: Callable[[], None]) -> ManualCall:
        call = ManualCall(self.now + delay, callback)
        self.calls.append(call)
        return call

    @property
    def pending(self) -> list[ManualCall]:
        return [c for c in self.calls if not c.cancelled and not c.fired]

    def advance(self, seconds: float) -> None:
        self.now += seconds
        due = sorted(
            (c for c in self.pending if c.due <= self.now + 1e-9),
            key=lambda c: c.due,
        )
        for call in due:
            call.fired = True
            call.callback()


@pytest.fixture
def manual_scheduler() -> ManualScheduler:
    """Scheduler whose time only moves when the test advances it."""
    return ManualScheduler()
