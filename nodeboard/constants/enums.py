"""All enum definitions for the dashboard.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum, auto

# =============================================================================
# Sort Enums
# =============================================================================

class SortKey(Enum):
    """Node record fields the node list can be sorted by."""

    OPERATOR = "operator"
    STATUS = "status"
    UPTIME = "uptime"
    FEE = "fee"


class SortDirection(Enum):
    """Sort direction for the node list."""

    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> "SortDirection":
        """Return the opposite direction."""
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


# =============================================================================
# Fetch State Enums
# =============================================================================

class FetchState(Enum):
    """Data fetch state values."""

    IDLE = auto()  # Not yet started
    LOADING = auto()  # Request in flight
    LOADED = auto()  # Records available
    ERROR = auto()  # Fetch failed, store stays empty


# =============================================================================
# Theme Enums
# =============================================================================

class ThemeMode(Enum):
    """Theme mode values."""

    DARK = "dark"
    LIGHT = "light"


__all__ = [
    "FetchState",
    "SortDirection",
    "SortKey",
    "ThemeMode",
]
