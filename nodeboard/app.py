"""Main application class for the node dashboard."""

from __future__ import annotations

import logging
from pathlib import Path

from textual.app import App
from textual.binding import Binding

from nodeboard.constants import APP_TITLE, DARK_THEME, LIGHT_THEME
from nodeboard.constants.enums import ThemeMode
from nodeboard.controllers import NodesController
from nodeboard.keyboard.app import APP_BINDINGS
from nodeboard.models.state.app_settings import (
    AppSettings,
    ConfigLoadError,
    ConfigSaveError,
)
from nodeboard.models.state.config_manager import ConfigManager

logger = logging.getLogger(__name__)

_THEMES: dict[str, str] = {
    ThemeMode.DARK.value: DARK_THEME,
    ThemeMode.LIGHT.value: LIGHT_THEME,
}


class NodeBoardApp(App[None]):
    """Main TUI application for the node dashboard."""

    TITLE = APP_TITLE
    CSS_PATH = "css/app.tcss"
    BINDINGS: list[Binding] = APP_BINDINGS

    # Type hint for settings attribute
    settings: AppSettings

    def __init__(
        self,
        endpoint_url: str | None = None,
        page_size: int | None = None,
        theme: str | None = None,
        config_path: Path | None = None,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.config_path = config_path
        self._load_settings()

        # CLI overrides apply to this session only
        if endpoint_url:
            self.settings.endpoint_url = endpoint_url
        if page_size is not None:
            self.settings.page_size = page_size
        if theme:
            self.settings.theme = theme

        self._apply_theme()

    def _load_settings(self) -> None:
        """Load application settings from persistent storage."""
        try:
            self.settings = ConfigManager.load(self.config_path)
        except ConfigLoadError as exc:
            logger.warning("Using default settings: %s", exc)
            self.settings = AppSettings()

    def _apply_theme(self) -> None:
        self.theme = _THEMES.get(self.settings.theme, DARK_THEME)

    def on_mount(self) -> None:
        """Called when app is mounted."""
        from nodeboard.screens import NodesScreen

        controller = NodesController(
            self.settings.endpoint_url,
            request_timeout=self.settings.request_timeout_seconds,
        )
        self.push_screen(NodesScreen(controller, page_size=self.settings.page_size))

    def action_toggle_theme(self) -> None:
        """Switch between dark and light and remember the choice."""
        if self.settings.theme == ThemeMode.DARK.value:
            self.settings.theme = ThemeMode.LIGHT.value
        else:
            self.settings.theme = ThemeMode.DARK.value
        self._apply_theme()
        self._save_theme()

    def _save_theme(self) -> None:
        # Only the theme is persisted; session overrides such as the endpoint are not.
        try:
            stored = ConfigManager.load(self.config_path)
        except ConfigLoadError:
            stored = AppSettings()
        stored.theme = self.settings.theme
        try:
            ConfigManager.save(stored, self.config_path)
        except ConfigSaveError as exc:
            logger.warning("Could not save theme preference: %s", exc)
            self.notify(str(exc), title="Theme not saved", severity="warning")
