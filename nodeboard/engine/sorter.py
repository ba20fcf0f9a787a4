"""Sorter - ordered view of the filtered records."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from nodeboard.constants.enums import SortKey
from nodeboard.models.core.node_record import NodeRecord
from nodeboard.models.state.view_state import SortConfig


class Sorter:
    """Orders records by one field.

    Python's sort is stable, including with ``reverse=True``, so records with
    equal keys keep their filtered order in both directions.
    """

    # status sorts False before True; numeric fields sort numerically;
    # operator sorts by plain string comparison.
    _KEY_FUNCS: dict[SortKey, Callable[[NodeRecord], bool | float | str]] = {
        SortKey.OPERATOR: lambda record: record.operator,
        SortKey.STATUS: lambda record: bool(record.status),
        SortKey.UPTIME: lambda record: float(record.uptime),
        SortKey.FEE: lambda record: float(record.fee),
    }

    @classmethod
    def sort_value(cls, record: NodeRecord, key: SortKey) -> bool | float | str:
        return cls._KEY_FUNCS[key](record)

    @classmethod
    def apply(
        cls,
        records: Sequence[NodeRecord],
        sort_config: SortConfig,
    ) -> list[NodeRecord]:
        """Return a new list of ``records`` ordered per ``sort_config``."""
        if not records:
            return []
        return sorted(
            records,
            key=cls._KEY_FUNCS[sort_config.key],
            reverse=sort_config.descending,
        )

    @staticmethod
    def toggle(sort_config: SortConfig, key: SortKey | str) -> SortConfig:
        """Same key flips the direction, a new key starts ascending."""
        return sort_config.toggled(key)
