"""Nodes screen keyboard bindings.

Sort keys use ctrl so plain letters keep going to the search input. They
are priority bindings because the focused Input binds ctrl+f, ctrl+u and
ctrl+e for cursor editing.
"""

from textual.binding import Binding

# ============================================================================
# Nodes screen bindings
# ============================================================================

NODES_SCREEN_BINDINGS: list[Binding] = [
    Binding("ctrl+f", "focus_search", "Search", priority=True),
    Binding("escape", "clear_search", "Clear", show=False),
    Binding("ctrl+o", "sort('operator')", "Sort operator", priority=True),
    Binding("ctrl+s", "sort('status')", "Sort status", priority=True),
    Binding("ctrl+u", "sort('uptime')", "Sort uptime", priority=True),
    Binding("ctrl+e", "sort('fee')", "Sort fee", priority=True),
    Binding("pageup", "previous_page", "Prev page"),
    Binding("pagedown", "next_page", "Next page"),
]

__all__ = [
    "NODES_SCREEN_BINDINGS",
]
