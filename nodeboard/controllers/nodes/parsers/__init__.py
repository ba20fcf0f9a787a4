"""Parsers for the nodes domain."""

from nodeboard.controllers.nodes.parsers.node_parser import NodeParser, NodePayloadError

__all__ = ["NodeParser", "NodePayloadError"]
