"""Core record models."""

from nodeboard.models.core.node_record import NodeRecord

__all__ = ["NodeRecord"]
