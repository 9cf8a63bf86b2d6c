"""
Axis planning algorithm.

Chooses the value range and tick spacing for the y axis from the quartile
summaries of every series:

  1. range_min / range_max = smallest min_value / largest max_value over all series.
  2. interval = 10 ** ceil(log10(span)) / 20, i.e. the enclosing power of ten
     cut into 20 ticks.
  3. decimal_precision = digits after the decimal point needed to print the
     interval (0 for intervals >= 1).
  4. Snap range_min down and range_max up to multiples of interval.

A zero span (every value equal) uses DEFAULT_INTERVAL instead of log10(0).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from boxplotchart.chart.algorithms.quartile import QuartileSummary

# Sub-intervals per power-of-ten bucket.
TICKS_PER_DECADE = 20

# Tick interval used when all values are equal.
DEFAULT_INTERVAL = 1.0

# Relative slack (in intervals) when snapping bounds to the tick grid.
SNAP_EPSILON = 1e-9


@dataclass(frozen=True)
class AxisPlan:
    """Snapped y axis range and tick spacing."""
    range_min: float
    range_max: float
    interval: float
    decimal_precision: int

    @property
    def span(self) -> float:
        return self.range_max - self.range_min

    def ticks(self) -> list[float]:
        """Tick values from range_min to range_max inclusive."""
        count = int(round(self.span / self.interval))
        return [
            round(self.range_min + i * self.interval, self.decimal_precision)
            for i in range(count + 1)
        ]

    def format_tick(self, value: float) -> str:
        return f"{value:.{self.decimal_precision}f}"


def tick_interval(span: float) -> float:
    """Power of ten enclosing span, divided into TICKS_PER_DECADE steps."""
    if span <= 0:
        return DEFAULT_INTERVAL
    return 10 ** math.ceil(math.log10(span)) / TICKS_PER_DECADE


def decimal_precision(interval: float) -> int:
    """Number of decimals needed to print interval without noise."""
    if interval >= 1:
        return 0
    return int(math.ceil(-math.log10(interval)))


def plan_axis(summaries: Sequence[QuartileSummary]) -> AxisPlan:
    """
    Build the axis plan covering every series.

    Args:
        summaries: One QuartileSummary per series, any order.

    Returns:
        AxisPlan whose bounds are multiples of its interval.

    Raises:
        ValueError: If summaries is empty.
    """
    if not summaries:
        raise ValueError("At least one series is needed to plan an axis")

    lo = min(s.min_value for s in summaries)
    hi = max(s.max_value for s in summaries)

    interval = tick_interval(hi - lo)
    precision = decimal_precision(interval)

    # Tolerate float error in the division so exact multiples stay put
    range_min = round(math.floor(lo / interval + SNAP_EPSILON) * interval, precision)
    range_max = round(math.ceil(hi / interval - SNAP_EPSILON) * interval, precision)
    if range_max <= range_min:
        # Degenerate range lands on a tick; open it up by one interval
        range_max = round(range_min + interval, precision)

    return AxisPlan(
        range_min=range_min,
        range_max=range_max,
        interval=interval,
        decimal_precision=precision,
    )
