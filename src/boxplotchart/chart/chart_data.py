"""Chart input document: title, units and the ordered sample sets.

The document is JSON5, e.g.::

    {
      title: "Response time",
      units: "ms",
      data: [
        { key: "v1", values: [48, 52, 57, 64] },
      ],
    }
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Union

import json5

from boxplotchart.chart.errors import ChartDataError
from boxplotchart.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class SeriesData:
    """One named sample set."""
    key: str
    values: tuple[float, ...]

    @classmethod
    def from_dict(cls, data: Any, index: int = 0) -> "SeriesData":
        """Validate one ``{key, values}`` entry.

        Raises:
            ChartDataError: If the entry is not an object, key is not a string,
                or values is not a list of finite numbers.
        """
        if not isinstance(data, dict):
            raise ChartDataError(f"data[{index}] must be an object with 'key' and 'values'")
        key = data.get("key")
        if not isinstance(key, str):
            raise ChartDataError(f"data[{index}].key must be a string, got {key!r}")
        raw_values = data.get("values")
        if not isinstance(raw_values, list):
            raise ChartDataError(f"Series {key!r}: 'values' must be a list of numbers")

        values: list[float] = []
        for v in raw_values:
            # bool is an int subclass; reject it explicitly
            if isinstance(v, bool) or not isinstance(v, (int, float)):
                raise ChartDataError(f"Series {key!r}: value {v!r} is not a number")
            try:
                f = float(v)
            except OverflowError:
                raise ChartDataError(f"Series {key!r}: integer value is out of range for a float") from None
            if not math.isfinite(f):
                raise ChartDataError(f"Series {key!r}: value {v!r} is not finite")
            values.append(f)
        return cls(key=key, values=tuple(values))

    def to_dict(self) -> dict[str, Any]:
        return {"key": self.key, "values": list(self.values)}


@dataclass(frozen=True)
class ChartData:
    """Parsed chart document. Series order is display order."""
    title: str
    units: str = ""
    data: tuple[SeriesData, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Any) -> "ChartData":
        """Validate a parsed document.

        Raises:
            ChartDataError: On a missing title, a non-list data field or any bad series.
        """
        if not isinstance(data, dict):
            raise ChartDataError("Chart document must be an object")
        title = data.get("title")
        if not isinstance(title, str):
            raise ChartDataError(f"'title' must be a string, got {title!r}")
        units = data.get("units", "")
        if units is None:
            units = ""
        if not isinstance(units, str):
            raise ChartDataError(f"'units' must be a string, got {units!r}")
        raw_series = data.get("data")
        if not isinstance(raw_series, list):
            raise ChartDataError("'data' must be a list of series")

        series = tuple(SeriesData.from_dict(item, i) for i, item in enumerate(raw_series))

        seen: set[str] = set()
        for s in series:
            if s.key in seen:
                logger.warning(f"Duplicate series key {s.key!r}; series are drawn in input order")
            seen.add(s.key)

        for key in data.keys():
            if key not in ("title", "units", "data"):
                logger.warning(f"Unknown key '{key}' in chart document, ignoring")

        return cls(title=title, units=units, data=series)

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "units": self.units,
            "data": [s.to_dict() for s in self.data],
        }


def read_chart_file(path: Union[str, Path]) -> ChartData:
    """
    Read and validate a JSON5 chart document.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the file is not valid JSON5 (ChartDataError if the
            structure is wrong).
    """
    path = Path(path)
    logger.debug(f"Reading chart data from {path}")
    content = path.read_text(encoding="utf-8")
    chart_data = ChartData.from_dict(json5.loads(content))
    logger.info(f"Read {len(chart_data.data)} series from {path}")
    return chart_data
