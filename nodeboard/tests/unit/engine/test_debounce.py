"""Unit tests for Debouncer."""

from __future__ import annotations

import asyncio

import pytest

from nodeboard.engine.debounce import Debouncer


class TestDebouncer:
    """Tests for Debouncer with a manual clock."""

    def test_fires_after_delay(self, manual_scheduler) -> None:
        calls: list[str] = []
        debouncer = Debouncer(0.3, manual_scheduler)
        debouncer.submit(lambda: calls.append("a"))
        manual_scheduler.advance(0.29)
        assert calls == []
        assert debouncer.is_pending is True
        manual_scheduler.advance(0.01)
        assert calls == ["a"]
        assert debouncer.is_pending is False

    def test_only_last_submission_runs(self, manual_scheduler) -> None:
        calls: list[str] = []
        debouncer = Debouncer(0.3, manual_scheduler)
        for term in ("b", "bb", "bbb"):
            debouncer.submit(lambda term=term: calls.append(term))
            manual_scheduler.advance(0.1)
        manual_scheduler.advance(0.3)
        assert calls == ["bbb"]

    def test_new_submission_restarts_window(self, manual_scheduler) -> None:
        calls: list[str] = []
        debouncer = Debouncer(0.3, manual_scheduler)
        debouncer.submit(lambda: calls.append("first"))
        manual_scheduler.advance(0.2)
        debouncer.submit(lambda: calls.append("second"))
        manual_scheduler.advance(0.2)
        assert calls == []
        manual_scheduler.advance(0.1)
        assert calls == ["second"]

    def test_submit_cancels_previous_handle(self, manual_scheduler) -> None:
        debouncer = Debouncer(0.3, manual_scheduler)
        debouncer.submit(lambda: None)
        debouncer.submit(lambda: None)
        assert manual_scheduler.calls[0].cancelled is True
        assert len(manual_scheduler.pending) == 1

    def test_cancel_is_idempotent(self, manual_scheduler) -> None:
        calls: list[str] = []
        debouncer = Debouncer(0.3, manual_scheduler)
        debouncer.submit(lambda: calls.append("x"))
        debouncer.cancel()
        debouncer.cancel()
        manual_scheduler.advance(1.0)
        assert calls == []
        assert manual_scheduler.calls[0].cancel_count == 1

    def test_stale_handle_does_not_fire(self, manual_scheduler) -> None:
        calls: list[str] = []
        debouncer = Debouncer(0.3, manual_scheduler)
        debouncer.submit(lambda: calls.append("old"))
        stale = manual_scheduler.calls[0]
        debouncer.submit(lambda: calls.append("new"))
        # A timer implementation that ignores cancel() still must not apply the old value
        stale.callback()
        assert calls == []
        manual_scheduler.advance(0.3)
        assert calls == ["new"]

    def test_flush_runs_pending_now(self, manual_scheduler) -> None:
        calls: list[str] = []
        debouncer = Debouncer(0.3, manual_scheduler)
        debouncer.submit(lambda: calls.append("now"))
        assert debouncer.flush() is True
        assert calls == ["now"]
        manual_scheduler.advance(1.0)
        assert calls == ["now"]

    def test_flush_without_pending(self, manual_scheduler) -> None:
        debouncer = Debouncer(0.3, manual_scheduler)
        assert debouncer.flush() is False

    @pytest.mark.asyncio
    async def test_default_scheduler_uses_running_loop(self) -> None:
        calls: list[str] = []
        debouncer = Debouncer(0.01)
        debouncer.submit(lambda: calls.append("a"))
        debouncer.submit(lambda: calls.append("b"))
        await asyncio.sleep(0.05)
        assert calls == ["b"]
