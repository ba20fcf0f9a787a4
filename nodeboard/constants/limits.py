"""Limit and threshold constants for the dashboard.

All limit values, enumerated options, and validation ranges.
"""

from typing import Final

# ============================================================================
# Pagination limits
# ============================================================================

PAGE_SIZE_OPTIONS: Final = (50, 100, 200)
FIRST_PAGE: Final = 1

# ============================================================================
# Display limits
# ============================================================================

HISTOGRAM_BAR_WIDTH: Final = 40
UPTIME_BAR_WIDTH: Final = 10

__all__ = [
    "FIRST_PAGE",
    "HISTOGRAM_BAR_WIDTH",
    "PAGE_SIZE_OPTIONS",
    "UPTIME_BAR_WIDTH",
]
