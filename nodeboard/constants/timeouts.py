"""Timeout constants for the dashboard.

All timeout and interval values for HTTP requests and debounced input.
"""

from typing import Final

# ============================================================================
# HTTP timeouts (float, in seconds)
# ============================================================================

NODES_REQUEST_TIMEOUT: Final = 15.0

# Used for the single retry after a timed out request
NODES_RETRY_REQUEST_TIMEOUT: Final = 30.0

# ============================================================================
# Input timeouts (float, in seconds)
# ============================================================================

SEARCH_DEBOUNCE_SECONDS: Final = 0.3

__all__ = [
    "NODES_REQUEST_TIMEOUT",
    "NODES_RETRY_REQUEST_TIMEOUT",
    "SEARCH_DEBOUNCE_SECONDS",
]
