"""Paginator - slices the ordered view into pages."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from nodeboard.constants.limits import FIRST_PAGE
from nodeboard.models.core.node_record import NodeRecord


@dataclass(frozen=True)
class Page:
    """One page of the ordered view plus its position metadata."""

    records: tuple[NodeRecord, ...]
    page_number: int
    page_size: int
    total_pages: int
    start_index: int
    end_index: int
    total_count: int

    @property
    def has_previous(self) -> bool:
        return self.page_number > FIRST_PAGE

    @property
    def has_next(self) -> bool:
        return self.page_number < self.total_pages

    @property
    def visible_range(self) -> tuple[int, int]:
        """1-based inclusive range of shown rows, (0, 0) when empty."""
        if self.end_index <= self.start_index:
            return 0, 0
        return self.start_index + 1, self.end_index


class Paginator:
    """Computes page slices with out-of-range page numbers clamped."""

    @staticmethod
    def total_pages(total_count: int, page_size: int) -> int:
        return max(1, math.ceil(total_count / page_size))

    @classmethod
    def clamp(cls, page_number: int, total_count: int, page_size: int) -> int:
        return min(max(FIRST_PAGE, page_number), cls.total_pages(total_count, page_size))

    @classmethod
    def apply(
        cls,
        records: Sequence[NodeRecord],
        page_number: int,
        page_size: int,
    ) -> Page:
        if page_size <= 0:
            raise ValueError(f"page_size must be positive, got {page_size}")
        total_count = len(records)
        total_pages = cls.total_pages(total_count, page_size)
        current = cls.clamp(page_number, total_count, page_size)
        start_index = (current - 1) * page_size
        end_index = min(start_index + page_size, total_count)
        return Page(
            records=tuple(records[start_index:end_index]),
            page_number=current,
            page_size=page_size,
            total_pages=total_pages,
            start_index=start_index,
            end_index=end_index,
            total_count=total_count,
        )
