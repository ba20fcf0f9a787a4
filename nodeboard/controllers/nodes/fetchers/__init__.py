"""Fetchers for the nodes domain."""

from nodeboard.controllers.nodes.fetchers.node_fetcher import (
    NodeFetcher,
    NodeFetchError,
    request_json,
)

__all__ = ["NodeFetchError", "NodeFetcher", "request_json"]
