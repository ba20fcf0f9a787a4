"""View controller - composes the engine into the single derived view.

Recomputation order follows the data flow
``RecordStore -> SearchFilter -> Sorter -> Paginator``; the aggregates read
the record store directly. Search term updates are debounced, every other
parameter change recomputes synchronously.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from nodeboard.constants.enums import SortKey
from nodeboard.constants.timeouts import SEARCH_DEBOUNCE_SECONDS
from nodeboard.engine.aggregator import Aggregator, FeeBucket, NodeStats
from nodeboard.engine.debounce import Debouncer, Scheduler
from nodeboard.engine.derived import Derived
from nodeboard.engine.paginator import Page, Paginator
from nodeboard.engine.record_store import RecordStore
from nodeboard.engine.search_filter import SearchFilter
from nodeboard.engine.sorter import Sorter
from nodeboard.models.core.node_record import NodeRecord
from nodeboard.models.state.view_state import ViewState, parse_sort_key

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DerivedView:
    """Everything the presentation layer needs for one render."""

    rows: tuple[NodeRecord, ...]
    page: Page
    stats: NodeStats
    histogram: tuple[FeeBucket, ...]
    state: ViewState
    search_pending: bool = False

    @property
    def filtered_count(self) -> int:
        return self.page.total_count


ViewListener = Callable[[DerivedView], None]


class ViewController:
    """Owns the ViewState and derives the view from it.

    Args:
        store: Record store to read from; a fresh empty store by default.
        state: Initial view state; defaults to an empty search sorted by
            uptime descending, page 1 of 50.
        scheduler: Timer scheduler used for the search debounce.
        debounce_seconds: Quiet period before a search term is applied.
    """

    def __init__(
        self,
        store: RecordStore | None = None,
        *,
        state: ViewState | None = None,
        scheduler: Scheduler | None = None,
        debounce_seconds: float = SEARCH_DEBOUNCE_SECONDS,
    ) -> None:
        self._store = store if store is not None else RecordStore()
        self._state = state or ViewState()
        self._pending_search_term: str | None = None
        self._debouncer = Debouncer(debounce_seconds, scheduler)
        self._listeners: list[ViewListener] = []

        # The store revision is an input so a reload always yields the new record objects
        self._filtered = Derived(
            "filtered",
            lambda _revision, records, term: SearchFilter.apply(records, term),
        )
        self._ordered = Derived(
            "ordered",
            lambda _revision, records, sort_config: Sorter.apply(records, sort_config),
        )
        self._stats = Derived("stats", Aggregator.compute_stats)
        self._histogram = Derived(
            "histogram",
            lambda records: tuple(Aggregator.compute_fee_histogram(records)),
        )

        self._view = self._recompute(notify=False)

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def store(self) -> RecordStore:
        return self._store

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def view(self) -> DerivedView:
        return self._view

    @property
    def pending_search_term(self) -> str | None:
        """Search term waiting for the debounce window to close."""
        return self._pending_search_term

    def subscribe(self, listener: ViewListener) -> Callable[[], None]:
        """Call ``listener`` after every recompute. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    # =========================================================================
    # Parameter changes
    # =========================================================================

    def load(self, records: Iterable[NodeRecord]) -> DerivedView:
        """Load the fetched records and recompute everything."""
        self._store.load(records)
        return self._commit(self._state)

    def set_search_term(self, term: str) -> DerivedView:
        """Schedule ``term`` to be applied once typing pauses.

        Returns the current view; listeners receive the recomputed one when
        the debounce window closes.
        """
        self._pending_search_term = term
        self._debouncer.submit(lambda: self._apply_search_term(term))
        self._view = self._with_pending_flag(self._view)
        return self._view

    def flush_search(self) -> DerivedView:
        """Apply the pending search term immediately, if any."""
        self._debouncer.flush()
        return self._view

    def cancel_pending_search(self) -> None:
        """Forget the pending search term without applying it."""
        self._debouncer.cancel()
        if self._pending_search_term is not None:
            self._pending_search_term = None
            self._view = self._with_pending_flag(self._view)

    def sort_by(self, key: SortKey | str) -> DerivedView:
        """Sort by ``key``, flipping the direction if it is already the sort key.

        Raises:
            UnknownSortKeyError: If ``key`` is not a supported field.
        """
        sort_key = parse_sort_key(key)
        return self._commit(self._state.with_sort_key(sort_key))

    def set_page(self, page_number: int) -> DerivedView:
        """Move to ``page_number``, clamped to the available pages."""
        return self._commit(self._state.with_page_number(page_number))

    def next_page(self) -> DerivedView:
        return self.set_page(self._state.page_number + 1)

    def previous_page(self) -> DerivedView:
        return self.set_page(self._state.page_number - 1)

    def set_page_size(self, page_size: int) -> DerivedView:
        """Change the page size and go back to the first page.

        Raises:
            InvalidPageSizeError: If ``page_size`` is not one of the options.
        """
        return self._commit(self._state.with_page_size(page_size))

    def close(self) -> None:
        """Cancel pending work and drop listeners."""
        self._debouncer.cancel()
        self._pending_search_term = None
        self._listeners.clear()

    # =========================================================================
    # Recomputation
    # =========================================================================

    def _apply_search_term(self, term: str) -> None:
        self._pending_search_term = None
        if term == self._state.search_term:
            self._view = self._with_pending_flag(self._view)
            self._notify(self._view)
            return
        self._commit(self._state.with_search_term(term))

    def _commit(self, state: ViewState) -> DerivedView:
        self._state = state
        self._view = self._recompute(notify=True)
        return self._view

    def _recompute(self, *, notify: bool) -> DerivedView:
        state = self._state
        records = self._store.get_all()

        revision = self._store.revision
        filtered = self._filtered.get(revision, records, state.search_term)
        ordered = self._ordered.get(revision, filtered, state.sort_config)
        page = Paginator.apply(ordered, state.page_number, state.page_size)
        if page.page_number != state.page_number:
            logger.debug(
                "Clamped page %d to %d of %d",
                state.page_number,
                page.page_number,
                page.total_pages,
            )
            state = state.with_page_number(page.page_number)
            self._state = state

        view = DerivedView(
            rows=page.records,
            page=page,
            stats=self._stats.get(records),
            histogram=self._histogram.get(records),
            state=state,
            search_pending=self._pending_search_term is not None,
        )
        if notify:
            self._notify(view)
        return view

    def _with_pending_flag(self, view: DerivedView) -> DerivedView:
        pending = self._pending_search_term is not None
        if view.search_pending == pending:
            return view
        return DerivedView(
            rows=view.rows,
            page=view.page,
            stats=view.stats,
            histogram=view.histogram,
            state=view.state,
            search_pending=pending,
        )

    def _notify(self, view: DerivedView) -> None:
        for listener in list(self._listeners):
            listener(view)
