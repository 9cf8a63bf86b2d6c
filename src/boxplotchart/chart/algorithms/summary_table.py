"""
Quartile summary table (pandas).

Turns the per-series quartile summaries into a stats table (one row per
series, input order) and a TSV report suitable for copy/paste into a
spreadsheet. Uses the same numbers that are drawn, so the report documents
exactly what the chart shows.
"""

from __future__ import annotations

from typing import Sequence

import pandas as pd

from boxplotchart.chart.algorithms.quartile import QuartileSummary

# Stats columns for the summary table.
STATS_COLUMNS = [
    "count",
    "min",
    "lower_fence",
    "lower_median",
    "median",
    "upper_median",
    "upper_fence",
    "max",
    "iqr",
    "n_lower_outliers",
    "n_upper_outliers",
]


def summary_table(series: Sequence[tuple[str, QuartileSummary]]) -> pd.DataFrame:
    """
    One row per series with the box plot landmarks.

    Args:
        series: (key, QuartileSummary) pairs in display order.

    Returns:
        DataFrame with a "key" column followed by STATS_COLUMNS. Row order is
        input order (not sorted by key or value).
    """
    if not series:
        return pd.DataFrame(columns=["key"] + STATS_COLUMNS)

    rows = [
        {
            "key": key,
            "count": q.count,
            "min": q.min_value,
            "lower_fence": q.lower_fence,
            "lower_median": q.lower_median,
            "median": q.median,
            "upper_median": q.upper_median,
            "upper_fence": q.upper_fence,
            "max": q.max_value,
            "iqr": q.iqr,
            "n_lower_outliers": len(q.lower_outliers),
            "n_upper_outliers": len(q.upper_outliers),
        }
        for key, q in series
    ]
    return pd.DataFrame(rows, columns=["key"] + STATS_COLUMNS)


def summary_report(
    title: str,
    units: str,
    series: Sequence[tuple[str, QuartileSummary]],
) -> str:
    """
    Produce a TSV report: parameters then the stats table.

    Returns:
        Multi-section TSV string suitable for print() or copy/paste.
    """
    lines: list[str] = []

    lines.append("# Parameters")
    lines.append(f"title\t{title}")
    lines.append(f"units\t{units}")
    lines.append(f"series\t{len(series)}")
    lines.append("")

    lines.append("# Stats (one row per series)")
    stats_df = summary_table(series)
    if len(stats_df) > 0:
        lines.append(stats_df.to_csv(sep="\t", index=False))
    else:
        lines.append("(no data)")

    return "\n".join(lines)
