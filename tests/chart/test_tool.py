"""End-to-end tests for the chart pipeline (document -> scene -> SVG file)."""

from __future__ import annotations

from pathlib import Path
from xml.etree import ElementTree as ET

import pytest

from boxplotchart.chart.chart_config import ChartConfig
from boxplotchart.chart.chart_data import ChartData
from boxplotchart.chart.errors import ChartDataError, InsufficientData
from boxplotchart.chart.scene import Circle, Group, Path as PathPrimitive
from boxplotchart.chart.svg import SVG_NS
from boxplotchart.chart.tool import process_chart_data, render_chart, run

NS = {"svg": SVG_NS}

DOC = {
    "title": "Response time",
    "units": "ms",
    "data": [
        {"key": "v1", "values": [48, 52, 57, 64, 72, 76, 77, 81, 85, 88]},
        {"key": "v2", "values": [5, 6, 48, 52, 57, 61, 64, 72, 76, 77, 81, 85, 88]},
    ],
}


def test_one_series_without_outliers():
    chart = ChartData.from_dict({"title": "t", "data": [DOC["data"][0]]})
    render_data = process_chart_data(chart)

    groups = render_data.scene.of_type(Group)
    assert len(groups) == 1
    assert not any(isinstance(c, Circle) for c in groups[0].children)
    assert sum(isinstance(c, PathPrimitive) for c in groups[0].children) == 1


def test_series_keep_input_order():
    render_data = process_chart_data(ChartData.from_dict(DOC))
    assert [k for k, _ in render_data.quartiles] == ["v1", "v2"]
    assert render_data.quartiles[1][1].lower_outliers == (5.0, 6.0)
    assert render_data.axis_plan.range_min == 5.0
    assert render_data.axis_plan.range_max == 90.0


def test_insufficient_data_names_the_series():
    doc = dict(DOC, data=DOC["data"] + [{"key": "tiny", "values": [1, 2]}])
    with pytest.raises(InsufficientData) as exc_info:
        process_chart_data(ChartData.from_dict(doc))
    assert exc_info.value.key == "tiny"
    assert "'tiny'" in str(exc_info.value)


def test_no_series_is_an_error():
    with pytest.raises(ChartDataError):
        process_chart_data(ChartData.from_dict({"title": "t", "data": []}))


def test_all_values_equal_renders():
    chart = ChartData.from_dict({"title": "t", "data": [{"key": "flat", "values": [3, 3, 3]}]})
    render_data = process_chart_data(chart)
    assert render_data.axis_plan.span > 0
    ET.fromstring(render_chart(render_data))


def test_config_drives_canvas_size():
    cfg = ChartConfig(slot_width=100.0, left_gutter=10.0, right_gutter=10.0)
    render_data = process_chart_data(ChartData.from_dict(DOC), cfg)
    assert render_data.layout_plan.canvas_width == 220.0


def test_run_writes_svg(tmp_path: Path) -> None:
    src = tmp_path / "chart.json5"
    src.write_text("{title: 'Response time', units: 'ms', data: [{key: 'v1', values: [48, 52, 57, 64, 72]}]}")
    out = tmp_path / "chart.svg"

    run(src, out, ChartConfig())

    root = ET.fromstring(out.read_text())
    assert root.tag == f"{{{SVG_NS}}}svg"
    assert len(root.findall("svg:g", NS)) == 1
    title = root.findall("svg:text", NS)[-1]
    assert title.text.strip() == "Response time (ms)"


def test_run_failure_writes_nothing(tmp_path: Path) -> None:
    src = tmp_path / "chart.json5"
    src.write_text("{title: 't', data: [{key: 'a', values: [1]}]}")
    out = tmp_path / "chart.svg"

    with pytest.raises(InsufficientData):
        run(src, out, ChartConfig())
    assert not out.exists()
