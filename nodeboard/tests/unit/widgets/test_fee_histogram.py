"""Unit tests for the fee histogram bar helper."""

from __future__ import annotations

from nodeboard.widgets.fee_histogram import build_bar


class TestBuildBar:
    """Tests for build_bar()."""

    def test_full_bar_for_max(self) -> None:
        assert build_bar(8, 8, width=20) == "█" * 20

    def test_proportional(self) -> None:
        assert build_bar(2, 8, width=20) == "█" * 5

    def test_small_count_gets_one_block(self) -> None:
        assert build_bar(1, 1000, width=20) == "█"

    def test_zero_count(self) -> None:
        assert build_bar(0, 10) == ""

    def test_zero_max(self) -> None:
        assert build_bar(3, 0) == ""
