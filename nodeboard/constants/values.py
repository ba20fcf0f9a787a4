"""Scalar constants for the dashboard."""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "Node Dashboard"
APP_NAME: Final = "nodeboard"

# Environment variable that overrides the settings file location
CONFIG_PATH_ENV: Final = "NODEBOARD_CONFIG"

# ============================================================================
# Textual theme names
# ============================================================================

DARK_THEME: Final = "textual-dark"
LIGHT_THEME: Final = "textual-light"

# ============================================================================
# Status labels
# ============================================================================

STATUS_ACTIVE: Final = "Active"
STATUS_INACTIVE: Final = "Inactive"

__all__ = [
    "APP_NAME",
    "APP_TITLE",
    "CONFIG_PATH_ENV",
    "DARK_THEME",
    "LIGHT_THEME",
    "STATUS_ACTIVE",
    "STATUS_INACTIVE",
]
