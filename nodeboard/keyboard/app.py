"""App-level keyboard bindings.

This module contains Textual Binding objects for app-level bindings
that work from any screen.
"""

from textual.binding import Binding

# ============================================================================
# Textual Binding objects for app-level bindings
# ============================================================================

APP_BINDINGS: list[Binding] = [
    Binding("ctrl+t", "toggle_theme", "Theme"),
    Binding("ctrl+q", "app.quit", "Quit", priority=True),
]

__all__ = [
    "APP_BINDINGS",
]
