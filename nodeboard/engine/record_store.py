"""Record store - the immutable snapshot of fetched node records."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from nodeboard.models.core.node_record import NodeRecord

logger = logging.getLogger(__name__)


class RecordStore:
    """Holds the node records fetched for the current session.

    ``load`` swaps in a new tuple in one assignment, so readers always see
    either the previous snapshot or the complete new one.
    """

    def __init__(self) -> None:
        self._records: tuple[NodeRecord, ...] = ()
        self._revision = 0

    def load(self, records: Iterable[NodeRecord]) -> None:
        """Replace the snapshot.

        Records whose operator was already seen are dropped (first one wins)
        so operators stay usable as row identities.
        """
        unique: list[NodeRecord] = []
        seen: set[str] = set()
        duplicates = 0
        for record in records:
            if record.operator in seen:
                duplicates += 1
                continue
            seen.add(record.operator)
            unique.append(record)
        if duplicates:
            logger.warning("Dropped %d record(s) with duplicate operator", duplicates)

        self._records = tuple(unique)
        self._revision += 1
        logger.debug("Record store loaded %d records (revision %d)", len(unique), self._revision)

    def get_all(self) -> tuple[NodeRecord, ...]:
        return self._records

    @property
    def revision(self) -> int:
        """Number of completed loads."""
        return self._revision

    @property
    def is_loaded(self) -> bool:
        return self._revision > 0

    def __len__(self) -> int:
        return len(self._records)
