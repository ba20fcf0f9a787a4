"""FeeHistogram widget - horizontal bar chart of nodes per fee value."""

from __future__ import annotations

from collections.abc import Sequence

from rich.table import Table
from rich.text import Text
from textual.widgets import Static

from nodeboard.constants.limits import HISTOGRAM_BAR_WIDTH
from nodeboard.engine.aggregator import FeeBucket


def build_bar(count: int, max_count: int, width: int = HISTOGRAM_BAR_WIDTH) -> str:
    """Return a bar of block characters proportional to ``count``.

    Any non-zero count gets at least one block.
    """
    if max_count <= 0 or count <= 0:
        return ""
    return "█" * max(1, round(count / max_count * width))


class FeeHistogram(Static):
    """Renders one row per fee bucket: label, bar, count."""

    DEFAULT_CSS = """
    FeeHistogram {
        height: auto;
        padding: 0 1;
    }
    """

    def __init__(self, *, id: str | None = None, classes: str = "") -> None:
        super().__init__("", id=id, classes=classes)
        self._buckets: tuple[FeeBucket, ...] = ()

    @property
    def buckets(self) -> tuple[FeeBucket, ...]:
        return self._buckets

    def set_buckets(self, buckets: Sequence[FeeBucket]) -> None:
        buckets = tuple(buckets)
        if buckets == self._buckets:
            return
        self._buckets = buckets
        self.update(self._render_table())

    def _render_table(self) -> Table | Text:
        if not self._buckets:
            return Text("No fee data", style="dim")
        max_count = max(bucket.count for bucket in self._buckets)
        table = Table.grid(padding=(0, 1))
        table.add_column(justify="right", style="bold")
        table.add_column()
        table.add_column(justify="right", style="dim")
        for bucket in self._buckets:
            table.add_row(
                bucket.fee_label,
                Text(build_bar(bucket.count, max_count), style="blue"),
                str(bucket.count),
            )
        return table
