"""StatCard widget for the summary numbers above the node list.

CSS Classes: widget-stat-card
"""

from __future__ import annotations

from textual.app import ComposeResult
from textual.reactive import reactive
from textual.timer import Timer
from textual.widget import Widget
from textual.widgets import Static

# Spinner frames for the inline loading placeholder
_SPINNER_FRAMES = ("   ", ".  ", ".. ", "...")
_SPINNER_INTERVAL = 0.3


class StatCard(Widget):
    """Titled value with a loading placeholder.

    CSS Classes: widget-stat-card
    """

    DEFAULT_CSS = """
    StatCard {
        height: auto;
        width: 1fr;
        padding: 0 1;
        border: round $surface-lighten-1;
        background: $surface;
    }
    StatCard > .stat-title {
        color: $text-muted;
        width: 100%;
    }
    StatCard > .stat-value {
        text-style: bold;
        color: $text;
        width: 100%;
    }
    StatCard > .stat-spinner {
        text-style: bold;
        width: 100%;
        display: none;
    }
    """

    is_loading = reactive(False, init=False)
    value = reactive("", init=False)

    def __init__(
        self,
        title: str,
        value: str = "",
        *,
        id: str | None = None,
        classes: str = "",
    ) -> None:
        super().__init__(id=id, classes=classes)
        self.add_class("widget-stat-card")
        self._title = title
        self._initial_value = value
        self._spinner_timer: Timer | None = None
        self._spinner_frame = 0

    def compose(self) -> ComposeResult:
        yield Static(self._title, classes="stat-title")
        yield Static(self._initial_value, classes="stat-value")
        yield Static(_SPINNER_FRAMES[-1], classes="stat-spinner")

    def on_unmount(self) -> None:
        """Stop the spinner timer so it does not outlive the widget."""
        self._stop_spinner()

    def watch_is_loading(self, loading: bool) -> None:
        if not self.is_mounted:
            return
        value_widget = self.query_one(".stat-value", Static)
        spinner_widget = self.query_one(".stat-spinner", Static)
        value_widget.display = not loading
        spinner_widget.display = loading
        if loading:
            self._spinner_frame = 0
            self._stop_spinner()
            self._spinner_timer = self.set_interval(_SPINNER_INTERVAL, self._advance_spinner)
        else:
            self._stop_spinner()

    def watch_value(self, value: str) -> None:
        if self.is_mounted:
            self.query_one(".stat-value", Static).update(value)

    def set_value(self, value: str) -> None:
        """Show ``value`` and leave the loading state."""
        self.is_loading = False
        self.value = value

    def _advance_spinner(self) -> None:
        self._spinner_frame = (self._spinner_frame + 1) % len(_SPINNER_FRAMES)
        self.query_one(".stat-spinner", Static).update(_SPINNER_FRAMES[self._spinner_frame])

    def _stop_spinner(self) -> None:
        if self._spinner_timer is not None:
            self._spinner_timer.stop()
            self._spinner_timer = None

    @property
    def title(self) -> str:
        return self._title
