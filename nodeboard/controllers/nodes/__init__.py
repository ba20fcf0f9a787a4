"""Nodes domain: fetcher, parser and controller."""

from nodeboard.controllers.nodes.controller import NodesController

__all__ = ["NodesController"]
