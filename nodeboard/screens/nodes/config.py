"""Nodes screen configuration - column definitions, labels and options."""

from __future__ import annotations

from nodeboard.constants.enums import SortDirection, SortKey
from nodeboard.constants.limits import PAGE_SIZE_OPTIONS

# =============================================================================
# Table Column Definitions (label, sort key, width)
# =============================================================================

NODES_TABLE_COLUMNS: list[tuple[str, SortKey, int]] = [
    ("Operator", SortKey.OPERATOR, 46),
    ("Status", SortKey.STATUS, 10),
    ("Uptime", SortKey.UPTIME, 22),
    ("Fee", SortKey.FEE, 8),
]

SORT_LABELS: dict[SortKey, str] = {
    sort_key: label for label, sort_key, _ in NODES_TABLE_COLUMNS
}

SORT_INDICATORS: dict[SortDirection, str] = {
    SortDirection.ASC: "▲",
    SortDirection.DESC: "▼",
}

# =============================================================================
# Select Widget Options (label, value)
# =============================================================================

PAGE_SIZE_SELECT_OPTIONS: list[tuple[str, int]] = [
    (f"{size} / page", size) for size in PAGE_SIZE_OPTIONS
]

# =============================================================================
# Labels
# =============================================================================

SEARCH_PLACEHOLDER = "Search by operator address..."
HISTOGRAM_TITLE = "Fee Distribution"
LIST_TITLE = "Node List"
LOADING_MESSAGE = "Loading nodes..."
EMPTY_MESSAGE = "No nodes match the current search."

KPI_TOTAL_NODES = "Total Nodes"
KPI_ACTIVE_NODES = "Active Nodes"
KPI_AVG_UPTIME = "Average Uptime"
KPI_AVG_FEE = "Average Fee"
