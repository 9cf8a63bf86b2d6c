"""Box plot chart pipeline.

    chart document -> summarize (per series) -> plan_axis -> layout
                   -> build_scene -> to_svg

The run either fully succeeds and writes a complete chart, or fails with the
specific cause and writes nothing.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from boxplotchart.chart.algorithms.axis import AxisPlan, plan_axis
from boxplotchart.chart.algorithms.layout import LayoutPlan, layout
from boxplotchart.chart.algorithms.quartile import QuartileSummary, summarize
from boxplotchart.chart.chart_config import ChartConfig
from boxplotchart.chart.chart_data import ChartData, read_chart_file
from boxplotchart.chart.errors import ChartDataError, InsufficientData
from boxplotchart.chart.scene import Scene
from boxplotchart.chart.scene_builder import build_scene
from boxplotchart.chart.svg import to_svg
from boxplotchart.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class RenderData:
    """Everything computed for one chart, ready to serialize."""
    chart_data: ChartData
    quartiles: tuple[tuple[str, QuartileSummary], ...]
    axis_plan: AxisPlan
    layout_plan: LayoutPlan
    scene: Scene


def summarize_series(chart_data: ChartData) -> tuple[tuple[str, QuartileSummary], ...]:
    """Quartile summary per series, in input order.

    Raises:
        InsufficientData: With ``key`` set to the first failing series.
    """
    quartiles = []
    for item in chart_data.data:
        try:
            quartiles.append((item.key, summarize(item.values)))
        except InsufficientData as e:
            e.key = item.key
            raise
    return tuple(quartiles)


def process_chart_data(chart_data: ChartData, config: ChartConfig = ChartConfig()) -> RenderData:
    """
    Run the statistics and geometry stages for a parsed chart document.

    Raises:
        ChartDataError: If the document has no series.
        InsufficientData: If any series has fewer than 3 values.
    """
    if not chart_data.data:
        raise ChartDataError("Chart document has no series to plot")

    quartiles = summarize_series(chart_data)
    axis_plan = plan_axis([q for _, q in quartiles])
    layout_plan = layout(len(quartiles), axis_plan, config)
    scene = build_scene(
        quartiles,
        axis_plan,
        layout_plan,
        title=chart_data.title,
        units=chart_data.units,
        config=config,
    )
    logger.debug(
        f"axis range=[{axis_plan.range_min}, {axis_plan.range_max}] interval={axis_plan.interval} "
        f"canvas={layout_plan.canvas_width}x{layout_plan.canvas_height}"
    )
    return RenderData(
        chart_data=chart_data,
        quartiles=quartiles,
        axis_plan=axis_plan,
        layout_plan=layout_plan,
        scene=scene,
    )


def render_chart(render_data: RenderData) -> str:
    """SVG document text for the computed scene."""
    return to_svg(render_data.scene)


def run(
    input_file: Union[str, Path],
    output_file: Union[str, Path],
    config: Optional[ChartConfig] = None,
) -> RenderData:
    """
    Read input_file, build the chart and write it to output_file as SVG.

    The output file is only created once rendering has succeeded.

    Raises:
        OSError: If the input cannot be read or the output cannot be written.
        ValueError: If the input is not valid JSON5 or not a valid chart document.
        InsufficientData: If any series has fewer than 3 values.
    """
    if config is None:
        config = ChartConfig.load()

    chart_data = read_chart_file(input_file)
    render_data = process_chart_data(chart_data, config)
    output = render_chart(render_data)

    output_path = Path(output_file)
    output_path.write_text(output, encoding="utf-8")
    logger.info(f"Wrote {len(render_data.quartiles)} box plot(s) to {output_path}")
    return render_data
