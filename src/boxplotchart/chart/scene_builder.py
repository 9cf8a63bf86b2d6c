"""Build the drawing primitives of a box plot chart.

Draw order:
  1. stylesheet
  2. axis polyline (left edge + bottom edge)
  3. one rotated label per series under the x axis
  4. one tick mark and label per y tick
  5. one group per series: outlier circles + whisker/box path
  6. title above the plot
"""

from __future__ import annotations

from typing import Sequence

from boxplotchart.chart.algorithms.axis import AxisPlan
from boxplotchart.chart.algorithms.layout import LayoutPlan
from boxplotchart.chart.algorithms.quartile import QuartileSummary
from boxplotchart.chart.chart_config import ChartConfig
from boxplotchart.chart.scene import (
    Circle,
    Group,
    Line,
    Path,
    PathCommand,
    Polyline,
    Scene,
    Style,
    Text,
)

# (key, summary) pairs in display order.
SeriesEntry = tuple[str, QuartileSummary]

X_LABEL_ANGLE = -45.0


def box_plot_path(
    x: float,
    quartile: QuartileSummary,
    layout_plan: LayoutPlan,
    box_width: float,
    whisker_width: float,
) -> Path:
    """
    One continuous pen path for a single box plot centred on x.

    Upper cap and stem, the box (closed on its start point), the median line,
    then the lower stem and cap. Caps are centred on the stem.
    """
    y = layout_plan.value_to_y
    y_max = y(quartile.max_before_upper_fence)
    y_upper = y(quartile.upper_median)
    y_median = y(quartile.median)
    y_lower = y(quartile.lower_median)
    y_min = y(quartile.min_before_lower_fence)
    half_cap = whisker_width / 2
    half_box = box_width / 2

    commands = (
        # upper cap, then back to its centre and down the stem
        PathCommand("M", (x - half_cap, y_max)),
        PathCommand("h", (whisker_width,)),
        PathCommand("m", (-half_cap, 0.0)),
        PathCommand("V", (y_upper,)),
        # box from upper median to lower median
        PathCommand("m", (-half_box, 0.0)),
        PathCommand("h", (box_width,)),
        PathCommand("V", (y_lower,)),
        PathCommand("h", (-box_width,)),
        PathCommand("Z"),
        # median split
        PathCommand("M", (x - half_box, y_median)),
        PathCommand("h", (box_width,)),
        # lower stem and cap
        PathCommand("M", (x, y_lower)),
        PathCommand("V", (y_min,)),
        PathCommand("m", (-half_cap, 0.0)),
        PathCommand("h", (whisker_width,)),
    )
    return Path(commands=commands, css_class="box-plot")


def box_plot_group(
    x: float,
    quartile: QuartileSummary,
    layout_plan: LayoutPlan,
    config: ChartConfig,
) -> Group:
    """Outlier markers plus the whisker/box path for one series."""
    markers = tuple(
        Circle(cx=x, cy=layout_plan.value_to_y(v), r=config.outlier_radius, css_class="outlier")
        for v in quartile.outliers
    )
    path = box_plot_path(x, quartile, layout_plan, config.box_width, config.whisker_width)
    return Group(children=markers + (path,), css_class="box-plot-group")


def chart_title(title: str, units: str) -> str:
    if units:
        return f"{title} ({units})"
    return title


def build_scene(
    series: Sequence[SeriesEntry],
    axis_plan: AxisPlan,
    layout_plan: LayoutPlan,
    title: str,
    units: str = "",
    config: ChartConfig = ChartConfig(),
) -> Scene:
    """
    Produce the ordered primitives for a full chart.

    Args:
        series: (key, QuartileSummary) pairs; slot i is the i-th entry.
        axis_plan: Output of plan_axis() over the same series.
        layout_plan: Output of layout() for len(series) and axis_plan.
        title: Chart title.
        units: Value units, appended to the title when non-empty.
        config: Widths, radii and stylesheet.

    Returns:
        Scene sized to the layout canvas.
    """
    scene = Scene(width=layout_plan.canvas_width, height=layout_plan.canvas_height)
    left = layout_plan.left_gutter
    bottom = layout_plan.plot_bottom

    scene.add(Style(rules=tuple(config.styles)))

    scene.add(
        Polyline(
            points=(
                (left, layout_plan.top_gutter),
                (left, bottom),
                (layout_plan.plot_right, bottom),
            ),
            css_class="axis",
        )
    )

    label_y = bottom + config.x_label_offset
    for i, (key, _quartile) in enumerate(series):
        x = layout_plan.slot_center(i)
        scene.add(Text(x=x, y=label_y, text=key, css_class="x-label", rotate=X_LABEL_ANGLE))

    for tick in axis_plan.ticks():
        ty = layout_plan.value_to_y(tick)
        scene.add(Line(x1=left - config.tick_length, y1=ty, x2=left, y2=ty, css_class="tick"))
        scene.add(
            Text(
                x=left - config.tick_length - config.y_label_offset,
                y=ty,
                text=axis_plan.format_tick(tick),
                css_class="y-label",
            )
        )

    for i, (_key, quartile) in enumerate(series):
        scene.add(box_plot_group(layout_plan.slot_center(i), quartile, layout_plan, config))

    scene.add(
        Text(
            x=(layout_plan.left_gutter + layout_plan.plot_right) / 2,
            y=layout_plan.top_gutter / 2,
            text=chart_title(title, units),
            css_class="title",
        )
    )
    return scene
