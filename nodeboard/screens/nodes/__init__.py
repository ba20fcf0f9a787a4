"""Nodes screen."""

from nodeboard.screens.nodes.nodes_screen import NodesScreen

__all__ = ["NodesScreen"]
