"""Search filter - operator substring matching."""

from __future__ import annotations

from collections.abc import Sequence

from nodeboard.models.core.node_record import NodeRecord


class SearchFilter:
    """Derives the filtered view from the record store."""

    @staticmethod
    def matches(record: NodeRecord, term: str) -> bool:
        """Return True when ``term`` occurs in the record's operator, ignoring case."""
        return term.lower() in record.operator.lower()

    @staticmethod
    def apply(records: Sequence[NodeRecord], term: str) -> list[NodeRecord]:
        """Return the records whose operator contains ``term``, in input order.

        An empty term keeps every record.
        """
        if not term:
            return list(records)
        needle = term.lower()
        return [record for record in records if needle in record.operator.lower()]
