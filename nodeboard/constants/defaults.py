"""Default values for settings and view state.

All default values used in the AppSettings model and the initial ViewState.
"""

from pathlib import Path
from typing import Final

from nodeboard.constants.enums import SortDirection, SortKey

# ============================================================================
# Data source defaults
# ============================================================================

ENDPOINT_URL_DEFAULT: Final = "https://monitor.sophon.xyz/nodes"

# ============================================================================
# View defaults
# ============================================================================

SEARCH_TERM_DEFAULT: Final = ""
SORT_KEY_DEFAULT: Final = SortKey.UPTIME
SORT_DIRECTION_DEFAULT: Final = SortDirection.DESC
PAGE_SIZE_DEFAULT: Final = 50

# ============================================================================
# UI defaults
# ============================================================================

THEME_DEFAULT: Final = "dark"

# ============================================================================
# File locations
# ============================================================================

CONFIG_DIR_DEFAULT: Final = Path.home() / ".config" / "nodeboard"
CONFIG_FILE_DEFAULT: Final = CONFIG_DIR_DEFAULT / "settings.json"
LOG_FILE_DEFAULT: Final = CONFIG_DIR_DEFAULT / "nodeboard.log"

__all__ = [
    "CONFIG_DIR_DEFAULT",
    "CONFIG_FILE_DEFAULT",
    "ENDPOINT_URL_DEFAULT",
    "LOG_FILE_DEFAULT",
    "PAGE_SIZE_DEFAULT",
    "SEARCH_TERM_DEFAULT",
    "SORT_DIRECTION_DEFAULT",
    "SORT_KEY_DEFAULT",
    "THEME_DEFAULT",
]
