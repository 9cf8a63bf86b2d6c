"""
Logging setup for boxplotchart.

Modules get their logger with ``get_logger(__name__)``; only the
``box-plot-chart`` command calls ``configure_logging()``, which attaches a
stderr handler to the ``boxplotchart`` logger (never root). The quartile,
axis, layout and scene modules do not log.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, Union

# Default format for boxplotchart logs
DEFAULT_FMT = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d:%(funcName)s: %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"

LOG_LEVEL_ENV = "BOXPLOTCHART_LOG_LEVEL"


def configure_logging(
    level: Optional[Union[str, int]] = None,
    *,
    fmt: Optional[str] = None,
    datefmt: Optional[str] = None,
    force: bool = False,
) -> None:
    """
    Configure logging for the boxplotchart logger only (never root).

    Parameters
    ----------
    level:
        Logging level (e.g. "DEBUG", "INFO"). Defaults to BOXPLOTCHART_LOG_LEVEL
        env var, or "INFO" if unset.
    fmt:
        Log message format. Defaults to a standard format.
    datefmt:
        Date format. Defaults to "%Y-%m-%d %H:%M:%S".
    force:
        If True, remove existing handlers before adding new ones (allows
        reconfiguration). If False, skip if handler already present.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "INFO")
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("boxplotchart")
    logger.setLevel(level)

    if fmt is None:
        fmt = DEFAULT_FMT
    if datefmt is None:
        datefmt = DEFAULT_DATEFMT

    formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

    if force:
        for h in logger.handlers[:]:
            h.close()
            logger.removeHandler(h)
    else:
        # Skip if we already have a stderr StreamHandler (e.g. from a previous call)
        for h in logger.handlers:
            if isinstance(h, logging.StreamHandler) and h.stream is sys.stderr:
                return

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(formatter)
    logger.addHandler(console)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger by name.

    If name is None, returns the 'boxplotchart' logger.
    Otherwise, returns logging.getLogger(name).
    """
    if name is None:
        name = "boxplotchart"
    return logging.getLogger(name)
