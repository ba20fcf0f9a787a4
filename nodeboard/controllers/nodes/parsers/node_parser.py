"""Node parser - turns the raw nodes payload into NodeRecord objects."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from nodeboard.models.core.node_record import NodeRecord

logger = logging.getLogger(__name__)


class NodePayloadError(Exception):
    """Raised when the payload does not contain a node list."""


class NodeParser:
    """Parses the monitor payload into structured records."""

    _NODES_KEY = "nodes"

    def extract_entries(self, payload: Any) -> list[Any]:
        """Return the raw node entries from ``{"nodes": [...]}`` or a bare list."""
        if isinstance(payload, dict):
            entries = payload.get(self._NODES_KEY)
        else:
            entries = payload
        if not isinstance(entries, list):
            raise NodePayloadError(
                f"Expected a list under '{self._NODES_KEY}', got {type(entries).__name__}"
            )
        return entries

    def parse_node(self, entry: Any) -> NodeRecord | None:
        """Parse one entry, returning None when it is not a valid node."""
        if not isinstance(entry, dict):
            return None
        try:
            return NodeRecord.model_validate(entry)
        except ValidationError as exc:
            logger.debug("Invalid node entry %r: %s", entry.get("operator"), exc)
            return None

    def parse_payload(self, payload: Any) -> list[NodeRecord]:
        """Parse all valid entries in payload order; invalid ones are skipped.

        Raises:
            NodePayloadError: If the payload has no node list.
        """
        entries = self.extract_entries(payload)
        records: list[NodeRecord] = []
        skipped = 0
        for entry in entries:
            record = self.parse_node(entry)
            if record is None:
                skipped += 1
                continue
            records.append(record)
        if skipped:
            logger.warning("Skipped %d invalid node entr%s", skipped, "y" if skipped == 1 else "ies")
        return records
