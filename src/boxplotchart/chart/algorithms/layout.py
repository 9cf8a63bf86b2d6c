"""
Layout algorithm: canvas size, series slots and the value -> y pixel map.

    canvas_width  = left + series_count * slot_width + right
    canvas_height = top + plot_height + bottom
    value_to_y(v) = canvas_height - bottom - (v - range_min) * plot_height / span
    slot_center(i) = left + slot_width * i + slot_width / 2
"""

from __future__ import annotations

from dataclasses import dataclass

from boxplotchart.chart.algorithms.axis import AxisPlan
from boxplotchart.chart.chart_config import ChartConfig


@dataclass(frozen=True)
class LayoutPlan:
    """Pixel geometry shared by every primitive in the scene."""
    canvas_width: float
    canvas_height: float
    left_gutter: float
    right_gutter: float
    top_gutter: float
    bottom_gutter: float
    slot_width: float
    plot_height: float
    range_min: float
    range_max: float

    @property
    def plot_bottom(self) -> float:
        """y pixel of the x axis."""
        return self.canvas_height - self.bottom_gutter

    @property
    def plot_right(self) -> float:
        return self.canvas_width - self.right_gutter

    @property
    def y_scale(self) -> float:
        """Pixels per value unit; 0 when the range is empty."""
        span = self.range_max - self.range_min
        if span == 0:
            return 0.0
        return self.plot_height / span

    def value_to_y(self, value: float) -> float:
        return self.plot_bottom - (value - self.range_min) * self.y_scale

    def slot_center(self, index: int) -> float:
        return self.left_gutter + self.slot_width * index + self.slot_width / 2


def layout(series_count: int, axis_plan: AxisPlan, config: ChartConfig = ChartConfig()) -> LayoutPlan:
    """
    Build the layout plan for series_count box plots on axis_plan's range.

    Raises:
        ValueError: If series_count is negative.
    """
    if series_count < 0:
        raise ValueError(f"series_count must be >= 0, got {series_count}")

    canvas_width = config.left_gutter + series_count * config.slot_width + config.right_gutter
    canvas_height = config.top_gutter + config.plot_height + config.bottom_gutter

    return LayoutPlan(
        canvas_width=canvas_width,
        canvas_height=canvas_height,
        left_gutter=config.left_gutter,
        right_gutter=config.right_gutter,
        top_gutter=config.top_gutter,
        bottom_gutter=config.bottom_gutter,
        slot_width=config.slot_width,
        plot_height=config.plot_height,
        range_min=axis_plan.range_min,
        range_max=axis_plan.range_max,
    )
