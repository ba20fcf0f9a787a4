"""Screens for the node dashboard."""

from nodeboard.screens.nodes import NodesScreen

__all__ = ["NodesScreen"]
