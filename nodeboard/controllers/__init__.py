"""Controllers module for the node dashboard.

This module provides the controller that fetches the participant list from
the monitor endpoint and parses it into records.
"""

from __future__ import annotations

# Shared types
from nodeboard.controllers.base import WorkerResult

# Nodes domain
from nodeboard.controllers.nodes.controller import NodesController
from nodeboard.controllers.nodes.fetchers import NodeFetcher, NodeFetchError
from nodeboard.controllers.nodes.parsers import NodeParser, NodePayloadError

__all__ = [
    # Shared
    "WorkerResult",
    # Nodes domain
    "NodeFetchError",
    "NodeFetcher",
    "NodeParser",
    "NodePayloadError",
    "NodesController",
]
