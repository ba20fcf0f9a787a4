"""Result wrapper returned by controller loads run inside Textual workers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class WorkerResult:
    """Outcome of one background load.

    ``error`` is set instead of raising so the worker can report failure
    to the screen as a message.
    """

    success: bool
    data: Any | None = None
    error: str | None = None
    duration_ms: float = 0.0
