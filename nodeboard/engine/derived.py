"""Memoized derived values.

Each ``Derived`` node is a pure function of named upstream values. It
recomputes only when one of its inputs differs from the previous call,
compared by identity first and then by equality.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

_UNSET: Any = object()


def _same_inputs(current: tuple[Any, ...], previous: tuple[Any, ...]) -> bool:
    if len(current) != len(previous):
        return False
    return all(a is b or a == b for a, b in zip(current, previous))


class Derived(Generic[T]):
    """One node of the derived-view dependency graph."""

    def __init__(self, name: str, compute: Callable[..., T]) -> None:
        self.name = name
        self._compute = compute
        self._inputs: tuple[Any, ...] = _UNSET
        self._value: T = _UNSET
        self._compute_count = 0

    def get(self, *inputs: Any) -> T:
        """Return the value for ``inputs``, recomputing only on change."""
        if self._inputs is not _UNSET and _same_inputs(inputs, self._inputs):
            return self._value
        self._value = self._compute(*inputs)
        self._inputs = inputs
        self._compute_count += 1
        logger.debug("Recomputed %s (#%d)", self.name, self._compute_count)
        return self._value

    def invalidate(self) -> None:
        self._inputs = _UNSET
        self._value = _UNSET

    @property
    def compute_count(self) -> int:
        """How many times the value has been computed."""
        return self._compute_count
