"""Command line entry point: ``box-plot-chart INPUT_FILE OUTPUT_FILE``.

Reads a JSON5 chart document and writes the box plot chart as SVG.
Exits with status 1 and an error log line if the chart cannot be built.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from boxplotchart import __version__
from boxplotchart.chart.algorithms.summary_table import summary_report
from boxplotchart.chart.chart_config import ChartConfig, default_config_path
from boxplotchart.chart.errors import BoxPlotChartError
from boxplotchart.chart.tool import run
from boxplotchart.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="box-plot-chart",
        description="Render a box-and-whisker chart (SVG) from a JSON5 data file.",
    )
    parser.add_argument("input_file", metavar="INPUT_FILE", type=Path,
                        help="JSON5 document with title, units and data")
    parser.add_argument("output_file", metavar="OUTPUT_FILE", type=Path,
                        help="SVG file to write")
    parser.add_argument("--config", type=Path, default=None,
                        help=f"Chart config JSON (default: {default_config_path()})")
    parser.add_argument("--stats", action="store_true",
                        help="Print the quartile stats table (TSV) to stdout")
    parser.add_argument("--log-level", default=None,
                        help="DEBUG, INFO, WARNING or ERROR (default: $BOXPLOTCHART_LOG_LEVEL or INFO)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the tool; returns the process exit status."""
    args = build_parser().parse_args(argv)
    configure_logging(level=args.log_level)

    try:
        config = ChartConfig.load(args.config)
        render_data = run(args.input_file, args.output_file, config)
    except (BoxPlotChartError, OSError, ValueError) as e:
        logger.error(f"{e}")
        return 1

    if args.stats:
        chart_data = render_data.chart_data
        print(summary_report(chart_data.title, chart_data.units, render_data.quartiles))
    return 0


if __name__ == "__main__":
    sys.exit(main())
