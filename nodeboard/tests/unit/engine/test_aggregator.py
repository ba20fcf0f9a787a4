"""Unit tests for Aggregator."""

from __future__ import annotations

from nodeboard.engine.aggregator import Aggregator, NodeStats, format_number, round_half_up
from nodeboard.models.core.node_record import NodeRecord


def _make_node(
    operator: str,
    status: bool = True,
    uptime: float = 50.0,
    fee: float = 1.0,
) -> NodeRecord:
    return NodeRecord(operator=operator, status=status, uptime=uptime, fee=fee)


SAMPLE = [
    _make_node("0xAAA", status=True, uptime=99.5, fee=2),
    _make_node("0xBBB", status=False, uptime=50.0, fee=2),
    _make_node("0xCCC", status=True, uptime=75.25, fee=5),
]


class TestComputeStats:
    """Tests for Aggregator.compute_stats()."""

    def test_means_round_ties_up(self) -> None:
        stats = Aggregator.compute_stats(
            [
                _make_node("0x1", uptime=0.25, fee=2),
                _make_node("0x2", uptime=0.0, fee=2.25),
            ]
        )
        assert stats.avg_uptime == 0.13
        assert stats.avg_fee == 2.13

    def test_empty(self) -> None:
        stats = Aggregator.compute_stats([])
        assert stats == NodeStats(total_nodes=0, active_nodes=0, avg_uptime=0, avg_fee=0)

    def test_sample(self) -> None:
        stats = Aggregator.compute_stats(SAMPLE)
        assert stats.total_nodes == 3
        assert stats.active_nodes == 2
        assert stats.avg_uptime == 74.92
        assert stats.avg_fee == 3

    def test_no_active_nodes(self) -> None:
        stats = Aggregator.compute_stats([_make_node("0x1", status=False)])
        assert stats.active_nodes == 0
        assert stats.total_nodes == 1

    def test_accepts_iterator(self) -> None:
        stats = Aggregator.compute_stats(iter(SAMPLE))
        assert stats.total_nodes == 3


class TestComputeFeeHistogram:
    """Tests for Aggregator.compute_fee_histogram()."""

    def test_sample(self) -> None:
        buckets = Aggregator.compute_fee_histogram(SAMPLE)
        assert [(b.fee_label, b.count) for b in buckets] == [("2%", 2), ("5%", 1)]

    def test_empty(self) -> None:
        assert Aggregator.compute_fee_histogram([]) == []

    def test_fractional_fee_label(self) -> None:
        buckets = Aggregator.compute_fee_histogram([_make_node("0x1", fee=2.5)])
        assert buckets[0].fee_label == "2.5%"

    def test_exact_value_buckets_not_binned(self) -> None:
        nodes = [
            _make_node("0x1", fee=2.5),
            _make_node("0x2", fee=2.55),
            _make_node("0x3", fee=2.5),
        ]
        buckets = Aggregator.compute_fee_histogram(nodes)
        assert [(b.fee_label, b.count) for b in buckets] == [("2.5%", 2), ("2.55%", 1)]

    def test_ordered_by_fee_value(self) -> None:
        nodes = [
            _make_node("0x1", fee=10),
            _make_node("0x2", fee=2),
            _make_node("0x3", fee=5),
        ]
        labels = [b.fee_label for b in Aggregator.compute_fee_histogram(nodes)]
        assert labels == ["2%", "5%", "10%"]

    def test_deterministic(self) -> None:
        first = Aggregator.compute_fee_histogram(SAMPLE)
        second = Aggregator.compute_fee_histogram(list(reversed(SAMPLE)))
        assert first == second

    def test_counts_sum_to_total(self) -> None:
        buckets = Aggregator.compute_fee_histogram(SAMPLE)
        assert sum(b.count for b in buckets) == len(SAMPLE)


class TestFormatNumber:
    """Tests for format_number()."""

    def test_integral_float(self) -> None:
        assert format_number(2.0) == "2"

    def test_int(self) -> None:
        assert format_number(5) == "5"

    def test_fraction(self) -> None:
        assert format_number(2.5) == "2.5"

    def test_zero(self) -> None:
        assert format_number(0.0) == "0"


class TestRoundHalfUp:
    """Tests for round_half_up()."""

    def test_ties_round_up(self) -> None:
        assert round_half_up(2.125) == 2.13
        assert round_half_up(0.125) == 0.13
        assert round_half_up(0.005) == 0.01

    def test_non_ties(self) -> None:
        assert round_half_up(74.91666) == 74.92
        assert round_half_up(3.0) == 3.0
        assert round_half_up(2.124) == 2.12

    def test_places(self) -> None:
        assert round_half_up(2.5, places=0) == 3.0
