"""Exception types raised while building a box plot chart."""

from __future__ import annotations

from typing import Optional

# Fewest values a series may hold and still produce a quartile range.
MIN_QUARTILE_VALUES = 3


class BoxPlotChartError(Exception):
    """Base class for all chart errors."""


class InsufficientData(BoxPlotChartError):
    """A series has fewer than MIN_QUARTILE_VALUES values.

    Fatal for the whole chart. ``key`` is filled in by the pipeline once the
    failing series is known.
    """

    def __init__(self, count: int, key: Optional[str] = None):
        self.count = count
        self.key = key
        super().__init__(count, key)

    def __str__(self) -> str:
        where = f"Series {self.key!r}" if self.key is not None else "Sample set"
        return (
            f"{where} has {self.count} value(s); minimum of "
            f"{MIN_QUARTILE_VALUES} values needed for a quartile range"
        )


class ChartDataError(BoxPlotChartError, ValueError):
    """The chart document is structurally invalid (missing fields, bad values)."""
