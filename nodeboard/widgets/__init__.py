"""Widgets for the node dashboard.

- kpi: StatCard summary value with a loading placeholder
- fee_histogram: FeeHistogram bar chart
"""

from nodeboard.widgets.fee_histogram import FeeHistogram, build_bar
from nodeboard.widgets.kpi import StatCard

__all__ = [
    "FeeHistogram",
    "StatCard",
    "build_bar",
]
