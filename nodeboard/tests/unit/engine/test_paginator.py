"""Unit tests for Paginator."""

from __future__ import annotations

import pytest

from nodeboard.engine.paginator import Paginator
from nodeboard.models.core.node_record import NodeRecord


def _make_nodes(count: int) -> list[NodeRecord]:
    return [
        NodeRecord(operator=f"0x{i:04d}", status=True, uptime=50.0, fee=1.0)
        for i in range(count)
    ]


class TestPaginatorApply:
    """Tests for Paginator.apply()."""

    def test_first_page(self) -> None:
        page = Paginator.apply(_make_nodes(120), 1, 50)
        assert page.page_number == 1
        assert page.total_pages == 3
        assert page.start_index == 0
        assert page.end_index == 50
        assert len(page.records) == 50
        assert page.total_count == 120

    def test_last_partial_page(self) -> None:
        page = Paginator.apply(_make_nodes(120), 3, 50)
        assert page.start_index == 100
        assert page.end_index == 120
        assert [r.operator for r in page.records][0] == "0x0100"
        assert page.visible_range == (101, 120)

    def test_page_beyond_range_is_clamped(self) -> None:
        page = Paginator.apply(_make_nodes(120), 9, 50)
        assert page.page_number == 3
        assert len(page.records) == 20

    def test_page_below_range_is_clamped(self) -> None:
        page = Paginator.apply(_make_nodes(10), 0, 50)
        assert page.page_number == 1
        page = Paginator.apply(_make_nodes(10), -4, 50)
        assert page.page_number == 1

    def test_empty_records(self) -> None:
        page = Paginator.apply([], 5, 50)
        assert page.page_number == 1
        assert page.total_pages == 1
        assert page.records == ()
        assert page.start_index == 0
        assert page.end_index == 0
        assert page.visible_range == (0, 0)
        assert page.has_next is False
        assert page.has_previous is False

    def test_exact_multiple(self) -> None:
        page = Paginator.apply(_make_nodes(100), 2, 50)
        assert page.total_pages == 2
        assert page.has_next is False
        assert page.has_previous is True

    def test_pages_concatenate_to_input(self) -> None:
        nodes = _make_nodes(237)
        for size in (50, 100, 200):
            total_pages = Paginator.total_pages(len(nodes), size)
            rebuilt: list[NodeRecord] = []
            for number in range(1, total_pages + 1):
                rebuilt.extend(Paginator.apply(nodes, number, size).records)
            assert rebuilt == nodes

    def test_page_number_always_in_range(self) -> None:
        nodes = _make_nodes(75)
        for number in (-10, 0, 1, 2, 3, 100):
            page = Paginator.apply(nodes, number, 50)
            assert 1 <= page.page_number <= page.total_pages

    def test_invalid_page_size(self) -> None:
        with pytest.raises(ValueError):
            Paginator.apply(_make_nodes(3), 1, 0)
