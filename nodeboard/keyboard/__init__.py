"""Keyboard bindings for the node dashboard."""

from nodeboard.keyboard.app import APP_BINDINGS
from nodeboard.keyboard.navigation import NODES_SCREEN_BINDINGS

__all__ = [
    "APP_BINDINGS",
    "NODES_SCREEN_BINDINGS",
]
