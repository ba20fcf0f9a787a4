"""In-memory data view engine.

RecordStore -> SearchFilter -> Sorter -> Paginator produce the rows to show;
Aggregator summarises the whole store; ViewController ties them together.
"""

from nodeboard.engine.aggregator import (
    Aggregator,
    FeeBucket,
    NodeStats,
    format_number,
    round_half_up,
)
from nodeboard.engine.debounce import Debouncer, ScheduledCall, Scheduler, asyncio_scheduler
from nodeboard.engine.derived import Derived
from nodeboard.engine.paginator import Page, Paginator
from nodeboard.engine.record_store import RecordStore
from nodeboard.engine.search_filter import SearchFilter
from nodeboard.engine.sorter import Sorter
from nodeboard.engine.view_controller import DerivedView, ViewController

__all__ = [
    "Aggregator",
    "Debouncer",
    "Derived",
    "DerivedView",
    "FeeBucket",
    "NodeStats",
    "Page",
    "Paginator",
    "RecordStore",
    "ScheduledCall",
    "Scheduler",
    "SearchFilter",
    "Sorter",
    "ViewController",
    "asyncio_scheduler",
    "format_number",
    "round_half_up",
]
