"""Cancellable debounced callbacks.

The debouncer never owns a timer implementation. It is given a scheduler,
a callable ``(delay_seconds, callback) -> handle`` whose handle has a
``cancel()`` method, and stores the handle of the one pending call.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Protocol

logger = logging.getLogger(__name__)


class ScheduledCall(Protocol):
    """Handle of a deferred callback."""

    def cancel(self) -> None: ...


Scheduler = Callable[[float, Callable[[], None]], ScheduledCall]


def asyncio_scheduler(delay: float, callback: Callable[[], None]) -> ScheduledCall:
    """Schedule ``callback`` on the running asyncio loop."""
    return asyncio.get_running_loop().call_later(delay, callback)


class Debouncer:
    """Runs only the last submitted callback once input has been quiet for ``delay``.

    Each ``submit`` cancels the pending handle before scheduling a new one.
    A generation counter guards against a handle that fires after it was
    superseded, so a stale callback is never run.
    """

    def __init__(self, delay: float, scheduler: Scheduler | None = None) -> None:
        self._delay = delay
        self._scheduler = scheduler or asyncio_scheduler
        self._handle: ScheduledCall | None = None
        self._callback: Callable[[], None] | None = None
        self._generation = 0

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def is_pending(self) -> bool:
        return self._callback is not None

    def submit(self, callback: Callable[[], None]) -> None:
        """Replace any pending callback with ``callback`` and restart the window."""
        self.cancel()
        generation = self._generation
        self._callback = callback
        self._handle = self._scheduler(self._delay, lambda: self._fire(generation))

    def cancel(self) -> None:
        """Drop the pending callback, if any. Safe to call repeatedly."""
        handle = self._handle
        self._handle = None
        self._callback = None
        self._generation += 1
        if handle is not None:
            handle.cancel()

    def flush(self) -> bool:
        """Run the pending callback now. Returns False if nothing was pending."""
        callback = self._callback
        if callback is None:
            return False
        self.cancel()
        callback()
        return True

    def _fire(self, generation: int) -> None:
        if generation != self._generation or self._callback is None:
            logger.debug("Ignoring superseded debounced call")
            return
        callback = self._callback
        self._handle = None
        self._callback = None
        self._generation += 1
        callback()
