"""Unit tests for the pandas quartile summary table and TSV report."""

from __future__ import annotations

from boxplotchart.chart.algorithms.quartile import summarize
from boxplotchart.chart.algorithms.summary_table import STATS_COLUMNS, summary_report, summary_table


def _series():
    return [
        ("zeta", summarize([48.0, 52.0, 57.0, 64.0, 72.0, 76.0, 77.0, 81.0, 85.0, 88.0])),
        ("alpha", summarize([5.0, 6.0, 48.0, 52.0, 57.0, 61.0, 64.0, 72.0, 76.0, 77.0, 81.0, 85.0, 88.0])),
    ]


def test_summary_table_keeps_input_order():
    df = summary_table(_series())
    assert list(df.columns) == ["key"] + STATS_COLUMNS
    assert df["key"].tolist() == ["zeta", "alpha"]


def test_summary_table_values_match_summaries():
    df = summary_table(_series())
    row = df.iloc[1]
    assert row["count"] == 13
    assert row["min"] == 5.0
    assert row["median"] == 64.0
    assert row["iqr"] == 29.0
    assert row["n_lower_outliers"] == 2
    assert row["n_upper_outliers"] == 0


def test_summary_table_empty():
    df = summary_table([])
    assert len(df) == 0
    assert "median" in df.columns


def test_summary_report_sections():
    report = summary_report("Latency", "ms", _series())
    assert report.startswith("# Parameters")
    assert "title\tLatency" in report
    assert "units\tms" in report
    assert "# Stats (one row per series)" in report
    assert "key\tcount\tmin" in report
    assert "\nzeta\t10\t" in report


def test_summary_report_no_series():
    assert "(no data)" in summary_report("t", "", [])
