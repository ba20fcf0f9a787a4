"""Nodes screen presenter - data loading, view state and row formatting."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from rich.markup import escape
from textual.message import Message

from nodeboard.constants.enums import FetchState, SortKey
from nodeboard.constants.limits import UPTIME_BAR_WIDTH
from nodeboard.constants.values import STATUS_ACTIVE, STATUS_INACTIVE
from nodeboard.controllers import NodesController
from nodeboard.engine.aggregator import NodeStats, format_number, round_half_up
from nodeboard.engine.debounce import Scheduler
from nodeboard.engine.paginator import Page
from nodeboard.engine.view_controller import DerivedView, ViewController
from nodeboard.models.core.node_record import NodeRecord
from nodeboard.models.state.view_state import SortConfig, ViewState
from nodeboard.screens.nodes.config import (
    KPI_ACTIVE_NODES,
    KPI_AVG_FEE,
    KPI_AVG_UPTIME,
    KPI_TOTAL_NODES,
    SORT_INDICATORS,
    SORT_LABELS,
)

logger = logging.getLogger(__name__)


class NodesDataLoaded(Message):
    """Message carrying the fetched node records."""

    def __init__(self, records: list[NodeRecord]) -> None:
        super().__init__()
        self.records = records


class NodesDataLoadFailed(Message):
    """Message indicating the node fetch failed."""

    def __init__(self, error: str) -> None:
        super().__init__()
        self.error = error


class NodesPresenter:
    """Presenter for NodesScreen data and row formatting."""

    def __init__(
        self,
        screen: Any,
        controller: NodesController,
        *,
        page_size: int | None = None,
        scheduler: Scheduler | None = None,
    ) -> None:
        self._screen = screen
        self._controller = controller
        self._fetch_state = FetchState.IDLE
        self._error_message = ""
        state = ViewState()
        if page_size is not None:
            state = state.with_page_size(page_size)
        self._view_controller = ViewController(state=state, scheduler=scheduler)

    @property
    def fetch_state(self) -> FetchState:
        return self._fetch_state

    @property
    def is_loading(self) -> bool:
        return self._fetch_state is FetchState.LOADING

    @property
    def error_message(self) -> str:
        return self._error_message

    @property
    def view_controller(self) -> ViewController:
        return self._view_controller

    # =========================================================================
    # Loading
    # =========================================================================

    def load_data(self) -> None:
        """Start the one-shot background fetch."""
        if self._fetch_state is not FetchState.IDLE:
            logger.debug("Nodes already requested (%s), not fetching again", self._fetch_state)
            return
        self._fetch_state = FetchState.LOADING
        self._error_message = ""
        self._screen.run_worker(
            self._load_nodes_worker,
            name="nodes-data",
            exclusive=True,
        )

    @staticmethod
    def _friendly_error(error: BaseException | str) -> str:
        msg = str(error)
        if "timed out" in msg.lower() or "timeout" in msg.lower():
            return "Connection timed out"
        if "connection refused" in msg.lower():
            return "Connection refused"
        if len(msg) > 80:
            return msg[:77] + "..."
        return msg or "Unknown error"

    async def _load_nodes_worker(self) -> None:
        """Worker: fetch the node list and hand it to the screen."""
        try:
            result = await self._controller.load()
        except asyncio.CancelledError:
            self._fetch_state = FetchState.IDLE
            raise
        except Exception as exc:
            logger.exception("Failed to load nodes")
            self.mark_failed(str(exc))
            self._screen.post_message(NodesDataLoadFailed(self._error_message))
            return

        if not result.success:
            self.mark_failed(result.error or "")
            self._screen.post_message(NodesDataLoadFailed(self._error_message))
            return
        logger.debug("Nodes fetched in %.0f ms", result.duration_ms)
        self._screen.post_message(NodesDataLoaded(result.data or []))

    def apply_records(self, records: list[NodeRecord]) -> DerivedView:
        """Load fetched records into the view engine."""
        self._fetch_state = FetchState.LOADED
        return self._view_controller.load(records)

    def mark_failed(self, error: str) -> None:
        """Record a failed fetch; the record store stays empty."""
        self._fetch_state = FetchState.ERROR
        self._error_message = self._friendly_error(error)

    # =========================================================================
    # Formatting
    # =========================================================================

    @staticmethod
    def format_status(status: bool) -> str:
        if status:
            return f"[green]{STATUS_ACTIVE}[/green]"
        return f"[red]{STATUS_INACTIVE}[/red]"

    @staticmethod
    def format_percentage(value: float) -> str:
        return f"{round_half_up(value):.2f}%"

    @classmethod
    def format_uptime(cls, uptime: float, width: int = UPTIME_BAR_WIDTH) -> str:
        """Render uptime as a small bar followed by the percentage."""
        clamped = min(max(uptime, 0.0), 100.0)
        filled = round(clamped / 100 * width)
        bar = "█" * filled + "░" * (width - filled)
        return f"[blue]{bar}[/blue] {cls.format_percentage(uptime)}"

    @staticmethod
    def format_fee(fee: float) -> str:
        return f"{format_number(fee)}%"

    def format_row(self, record: NodeRecord) -> tuple[str, ...]:
        """Columns: Operator, Status, Uptime, Fee"""
        return (
            escape(record.operator),
            self.format_status(record.status),
            self.format_uptime(record.uptime),
            self.format_fee(record.fee),
        )

    def format_rows(self, view: DerivedView) -> list[tuple[str, ...]]:
        return [self.format_row(record) for record in view.rows]

    def format_stats(self, stats: NodeStats) -> dict[str, str]:
        """KPI title -> display value."""
        return {
            KPI_TOTAL_NODES: str(stats.total_nodes),
            KPI_ACTIVE_NODES: str(stats.active_nodes),
            KPI_AVG_UPTIME: self.format_percentage(stats.avg_uptime),
            KPI_AVG_FEE: self.format_percentage(stats.avg_fee),
        }

    @staticmethod
    def format_column_label(label: str, sort_key: SortKey, sort_config: SortConfig) -> str:
        """Column header with the direction marker on the active sort column."""
        if sort_key is not sort_config.key:
            return label
        return f"{label} {SORT_INDICATORS[sort_config.direction]}"

    @staticmethod
    def format_sort_label(sort_config: SortConfig) -> str:
        indicator = SORT_INDICATORS[sort_config.direction]
        return f"Sort by: {SORT_LABELS[sort_config.key]} {indicator}"

    @staticmethod
    def format_page_label(page: Page) -> str:
        """E.g. ``Showing 51-100 of 240 · Page 2/5``."""
        first, last = page.visible_range
        return (
            f"Showing {first}-{last} of {page.total_count} · "
            f"Page {page.page_number}/{page.total_pages}"
        )
