"""Shared controller types."""

from nodeboard.controllers.base.worker_result import WorkerResult

__all__ = ["WorkerResult"]
