"""Constants module for the node dashboard.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings with Final)
- timeouts.py: Timeout values (seconds)
- limits.py: Limit values and enumerated options
- defaults.py: Default values for settings and view state
"""

from nodeboard.constants.defaults import (
    ENDPOINT_URL_DEFAULT,
    PAGE_SIZE_DEFAULT,
    THEME_DEFAULT,
)
from nodeboard.constants.enums import (
    FetchState,
    SortDirection,
    SortKey,
    ThemeMode,
)
from nodeboard.constants.limits import (
    FIRST_PAGE,
    PAGE_SIZE_OPTIONS,
)
from nodeboard.constants.timeouts import (
    NODES_REQUEST_TIMEOUT,
    SEARCH_DEBOUNCE_SECONDS,
)
from nodeboard.constants.values import (
    APP_TITLE,
    DARK_THEME,
    LIGHT_THEME,
)

__all__ = [
    # Application
    "APP_TITLE",
    # Themes
    "DARK_THEME",
    "LIGHT_THEME",
    "THEME_DEFAULT",
    # Defaults
    "ENDPOINT_URL_DEFAULT",
    "PAGE_SIZE_DEFAULT",
    # Limits
    "FIRST_PAGE",
    "PAGE_SIZE_OPTIONS",
    # Timeouts
    "NODES_REQUEST_TIMEOUT",
    "SEARCH_DEBOUNCE_SECONDS",
    # Enums
    "FetchState",
    "SortDirection",
    "SortKey",
    "ThemeMode",
]
