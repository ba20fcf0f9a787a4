"""State models: view state, settings and settings persistence."""

from nodeboard.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
    ConfigSaveError,
)
from nodeboard.models.state.config_manager import ConfigManager
from nodeboard.models.state.view_state import (
    InvalidPageSizeError,
    SortConfig,
    UnknownSortKeyError,
    ViewParameterError,
    ViewState,
    parse_sort_key,
)

__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ConfigSaveError",
    "InvalidPageSizeError",
    "SortConfig",
    "UnknownSortKeyError",
    "ViewParameterError",
    "ViewState",
    "parse_sort_key",
]
