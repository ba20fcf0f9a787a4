"""Aggregator - summary statistics and fee histogram over all records."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from nodeboard.models.core.node_record import NodeRecord


@dataclass(frozen=True)
class NodeStats:
    """Summary numbers shown above the node list."""

    total_nodes: int = 0
    active_nodes: int = 0
    avg_uptime: float = 0.0
    avg_fee: float = 0.0


@dataclass(frozen=True)
class FeeBucket:
    """Number of nodes charging exactly one fee value."""

    fee_label: str
    count: int
    fee: float


def round_half_up(value: float, places: int = 2) -> float:
    """Round to ``places`` decimals with ties going away from zero (2.125 -> 2.13)."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP))


def format_number(value: float) -> str:
    """Render a number the way it is shown as a fee label.

    Integral values drop the decimal part (``2.0`` -> ``"2"``); others use
    the shortest round-tripping form (``2.5`` -> ``"2.5"``).
    """
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)


class Aggregator:
    """Computes aggregates over the whole record store."""

    @staticmethod
    def compute_stats(records: Iterable[NodeRecord]) -> NodeStats:
        """Return node counts and mean uptime/fee rounded to two decimals.

        Uses a single pass for all accumulators; an empty input gives zeros.
        """
        total = 0
        active = 0
        uptime_sum = 0.0
        fee_sum = 0.0
        for record in records:
            total += 1
            if record.status:
                active += 1
            uptime_sum += record.uptime
            fee_sum += record.fee

        if total == 0:
            return NodeStats()
        return NodeStats(
            total_nodes=total,
            active_nodes=active,
            avg_uptime=round_half_up(uptime_sum / total),
            avg_fee=round_half_up(fee_sum / total),
        )

    @staticmethod
    def compute_fee_histogram(records: Iterable[NodeRecord]) -> list[FeeBucket]:
        """Count nodes per distinct fee value, lowest fee first."""
        counts: dict[str, int] = {}
        fees: dict[str, float] = {}
        for record in records:
            label = format_number(record.fee)
            counts[label] = counts.get(label, 0) + 1
            fees.setdefault(label, float(record.fee))

        return [
            FeeBucket(fee_label=f"{label}%", count=counts[label], fee=fees[label])
            for label in sorted(counts, key=fees.__getitem__)
        ]
