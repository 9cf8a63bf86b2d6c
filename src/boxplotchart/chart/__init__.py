"""Box plot chart: quartile statistics, axis/layout geometry and SVG scene."""

from boxplotchart.chart.algorithms.axis import AxisPlan, plan_axis
from boxplotchart.chart.algorithms.layout import LayoutPlan, layout
from boxplotchart.chart.algorithms.quartile import QuartileSummary, summarize
from boxplotchart.chart.chart_config import ChartConfig
from boxplotchart.chart.chart_data import ChartData, SeriesData, read_chart_file
from boxplotchart.chart.errors import BoxPlotChartError, ChartDataError, InsufficientData
from boxplotchart.chart.scene import Scene
from boxplotchart.chart.scene_builder import build_scene
from boxplotchart.chart.svg import to_svg
from boxplotchart.chart.tool import RenderData, process_chart_data, render_chart, run

__all__ = [
    "AxisPlan",
    "BoxPlotChartError",
    "ChartConfig",
    "ChartData",
    "ChartDataError",
    "InsufficientData",
    "LayoutPlan",
    "QuartileSummary",
    "RenderData",
    "Scene",
    "SeriesData",
    "build_scene",
    "layout",
    "plan_axis",
    "process_chart_data",
    "read_chart_file",
    "render_chart",
    "run",
    "summarize",
    "to_svg",
]
