"""
boxplotchart: Render grouped numeric samples as a box-and-whisker SVG chart.

This package provides:
- Quartile statistics with Tukey fences and outlier partitioning
- Axis planning, layout geometry and an abstract drawing scene
- An SVG serializer and the ``box-plot-chart`` command line tool
- Logging utilities for library and application use

For logging configuration in scripts:
    ```python
    from boxplotchart.utils.logging import configure_logging
    configure_logging(level="DEBUG")
    ```
"""

import logging

from boxplotchart.utils.logging import configure_logging, get_logger

from boxplotchart.chart import (
    ChartConfig,
    ChartData,
    InsufficientData,
    QuartileSummary,
    process_chart_data,
    render_chart,
    run,
    summarize,
)

# Ensure boxplotchart logger has NullHandler so logs don't propagate to root
# when no application has configured logging. The CLI calls
# configure_logging() to add a real handler.
_logger = logging.getLogger("boxplotchart")
if not _logger.handlers:
    _logger.addHandler(logging.NullHandler())

__all__ = [
    "ChartConfig",
    "ChartData",
    "InsufficientData",
    "QuartileSummary",
    "configure_logging",
    "get_logger",
    "process_chart_data",
    "render_chart",
    "run",
    "summarize",
]

__version__ = "2.1.0"
