"""Nodes screen - summary KPIs, fee histogram and the searchable node list."""

from __future__ import annotations

import logging
from collections.abc import Callable
from contextlib import suppress
from typing import TYPE_CHECKING

from rich.markup import escape
from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.screen import Screen
from textual.timer import Timer
from textual.widgets import Button, DataTable, Footer, Header, Input, Select, Static

from nodeboard.controllers import NodesController
from nodeboard.engine.debounce import ScheduledCall
from nodeboard.engine.view_controller import DerivedView
from nodeboard.keyboard.navigation import NODES_SCREEN_BINDINGS
from nodeboard.models.state.view_state import ViewParameterError
from nodeboard.screens.nodes.config import (
    EMPTY_MESSAGE,
    HISTOGRAM_TITLE,
    KPI_ACTIVE_NODES,
    KPI_AVG_FEE,
    KPI_AVG_UPTIME,
    KPI_TOTAL_NODES,
    LIST_TITLE,
    LOADING_MESSAGE,
    NODES_TABLE_COLUMNS,
    PAGE_SIZE_SELECT_OPTIONS,
    SEARCH_PLACEHOLDER,
)
from nodeboard.screens.nodes.presenter import (
    NodesDataLoaded,
    NodesDataLoadFailed,
    NodesPresenter,
)
from nodeboard.widgets import FeeHistogram, StatCard

if TYPE_CHECKING:
    from textual.binding import BindingType

logger = logging.getLogger(__name__)

_KPI_IDS: dict[str, str] = {
    KPI_TOTAL_NODES: "kpi-total-nodes",
    KPI_ACTIVE_NODES: "kpi-active-nodes",
    KPI_AVG_UPTIME: "kpi-avg-uptime",
    KPI_AVG_FEE: "kpi-avg-fee",
}


class TimerCall:
    """Adapts a Textual Timer to the debouncer's cancel() handle."""

    def __init__(self, timer: Timer) -> None:
        self._timer = timer

    def cancel(self) -> None:
        self._timer.stop()


class NodesScreen(Screen[None]):
    """Main dashboard screen."""

    BINDINGS: list[BindingType] = NODES_SCREEN_BINDINGS
    CSS_PATH = "../../css/screens/nodes_screen.tcss"

    def __init__(
        self,
        controller: NodesController | None = None,
        *,
        page_size: int | None = None,
    ) -> None:
        super().__init__()
        self._controller = controller or NodesController()
        self.presenter = NodesPresenter(
            self,
            self._controller,
            page_size=page_size,
            scheduler=self._schedule,
        )
        self._unsubscribe: Callable[[], None] | None = None

    def _schedule(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        return TimerCall(self.set_timer(delay, callback))

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="kpi-row"):
            for title, kpi_id in _KPI_IDS.items():
                yield StatCard(title, "-", id=kpi_id)
        with Vertical(id="histogram-panel"):
            yield Static(HISTOGRAM_TITLE, classes="panel-title")
            yield FeeHistogram(id="fee-histogram")
        with Vertical(id="list-panel"):
            with Horizontal(id="list-toolbar"):
                yield Static(LIST_TITLE, classes="panel-title")
                yield Static("", id="sort-label")
                yield Select(
                    PAGE_SIZE_SELECT_OPTIONS,
                    value=self.presenter.view_controller.state.page_size,
                    allow_blank=False,
                    id="page-size-select",
                )
                yield Input(placeholder=SEARCH_PLACEHOLDER, id="search-input")
            yield DataTable(id="nodes-table", cursor_type="row", zebra_stripes=True)
            yield Static("", id="status-message")
            with Horizontal(id="pager"):
                yield Button("‹ Prev", id="prev-page")
                yield Static("", id="page-label")
                yield Button("Next ›", id="next-page")
        yield Footer()

    def on_mount(self) -> None:
        self._unsubscribe = self.presenter.view_controller.subscribe(self._render_view)
        self._set_loading(True)
        self._render_view(self.presenter.view_controller.view)
        self.presenter.load_data()

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self.presenter.view_controller.close()

    # =========================================================================
    # Data loading
    # =========================================================================

    def on_nodes_data_loaded(self, message: NodesDataLoaded) -> None:
        self._set_loading(False)
        self.presenter.apply_records(message.records)

    def on_nodes_data_load_failed(self, message: NodesDataLoadFailed) -> None:
        self._set_loading(False)
        self._render_view(self.presenter.view_controller.view)
        self._set_status(f"[red]Failed to load nodes: {escape(message.error)}[/red]")
        self.notify(escape(message.error), title="Failed to load nodes", severity="error")

    def _set_loading(self, loading: bool) -> None:
        with suppress(NoMatches):
            self.query_one("#nodes-table", DataTable).loading = loading
            for kpi_id in _KPI_IDS.values():
                self.query_one(f"#{kpi_id}", StatCard).is_loading = loading
        if loading:
            self._set_status(LOADING_MESSAGE)

    # =========================================================================
    # User input
    # =========================================================================

    @on(Input.Changed, "#search-input")
    def _on_search_changed(self, event: Input.Changed) -> None:
        self.presenter.view_controller.set_search_term(event.value)

    @on(Input.Submitted, "#search-input")
    def _on_search_submitted(self, _: Input.Submitted) -> None:
        self.presenter.view_controller.flush_search()

    @on(Select.Changed, "#page-size-select")
    def _on_page_size_changed(self, event: Select.Changed) -> None:
        if event.value is Select.BLANK:
            return
        if int(event.value) == self.presenter.view_controller.state.page_size:
            return
        self._guarded(lambda: self.presenter.view_controller.set_page_size(int(event.value)))

    @on(DataTable.HeaderSelected, "#nodes-table")
    def _on_header_selected(self, event: DataTable.HeaderSelected) -> None:
        self.action_sort(str(event.column_key.value))

    @on(Button.Pressed, "#prev-page")
    def _on_prev_pressed(self, _: Button.Pressed) -> None:
        self.action_previous_page()

    @on(Button.Pressed, "#next-page")
    def _on_next_pressed(self, _: Button.Pressed) -> None:
        self.action_next_page()

    def action_focus_search(self) -> None:
        self.query_one("#search-input", Input).focus()

    def action_clear_search(self) -> None:
        search_input = self.query_one("#search-input", Input)
        if not search_input.value:
            return
        search_input.value = ""
        self.presenter.view_controller.set_search_term("")
        self.presenter.view_controller.flush_search()

    def action_sort(self, key: str) -> None:
        self._guarded(lambda: self.presenter.view_controller.sort_by(key))

    def action_next_page(self) -> None:
        self.presenter.view_controller.next_page()

    def action_previous_page(self) -> None:
        self.presenter.view_controller.previous_page()

    def _guarded(self, change: Callable[[], object]) -> None:
        """Run a parameter change, reporting rejected requests to the user."""
        try:
            change()
        except ViewParameterError as exc:
            logger.warning("Rejected view change: %s", exc)
            self.notify(str(exc), severity="warning")

    # =========================================================================
    # Rendering
    # =========================================================================

    def _render_view(self, view: DerivedView) -> None:
        if not self.is_mounted:
            return
        presenter = self.presenter
        if not presenter.is_loading:
            for title, value in presenter.format_stats(view.stats).items():
                self.query_one(f"#{_KPI_IDS[title]}", StatCard).set_value(value)
            self.query_one("#fee-histogram", FeeHistogram).set_buckets(view.histogram)

        self._render_table(view)
        self.query_one("#sort-label", Static).update(
            presenter.format_sort_label(view.state.sort_config)
        )
        self.query_one("#page-label", Static).update(presenter.format_page_label(view.page))
        self.query_one("#prev-page", Button).disabled = not view.page.has_previous
        self.query_one("#next-page", Button).disabled = not view.page.has_next

        if presenter.is_loading or presenter.error_message:
            return
        self._set_status(EMPTY_MESSAGE if not view.rows and view.stats.total_nodes else "")

    def _render_table(self, view: DerivedView) -> None:
        table = self.query_one("#nodes-table", DataTable)
        sort_config = view.state.sort_config
        table.clear(columns=True)
        for label, sort_key, width in NODES_TABLE_COLUMNS:
            table.add_column(
                self.presenter.format_column_label(label, sort_key, sort_config),
                key=sort_key.value,
                width=width,
            )
        for record in view.rows:
            table.add_row(*self.presenter.format_row(record), key=record.operator)

    def _set_status(self, text: str) -> None:
        with suppress(NoMatches):
            self.query_one("#status-message", Static).update(text)
