# src/boxplotchart/chart/chart_config.py
"""
Chart geometry and style config (platformdirs + JSON).

Persisted items (schema v1):
- gutters, slot width, plot height, box and whisker widths, outlier radius,
  tick and label offsets
- styles: the static stylesheet rules embedded in every chart

Behavior:
- If config file missing or unreadable -> defaults are used
- If schema_version mismatches -> defaults are used
- Unknown keys in loaded JSON are ignored with warnings
- Values that are not positive numbers fall back to their default with a warning
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional

from platformdirs import user_config_dir

from boxplotchart.utils.logging import get_logger

logger = get_logger(__name__)

# Increment when you make a breaking change to the on-disk JSON schema.
SCHEMA_VERSION: int = 1

CONFIG_FILE_NAME = "chart_config.json"

DEFAULT_STYLES: tuple[str, ...] = (
    ".box-plot { fill: none; stroke: rgb(0,0,0); stroke-width: 1; }",
    ".outlier { fill: none; stroke: rgb(0,0,0); stroke-width: 1; }",
    ".axis { fill: none; stroke: rgb(0,0,0); stroke-width: 1; }",
    ".tick { stroke: rgb(0,0,0); stroke-width: 1; }",
    ".x-label { font-family: sans-serif; font-size: 12px; text-anchor: end; }",
    ".y-label { font-family: sans-serif; font-size: 12px; text-anchor: end; dominant-baseline: middle; }",
    ".title { font-family: sans-serif; font-size: 18px; text-anchor: middle; }",
)


@dataclass(frozen=True)
class ChartConfig:
    """
    Fixed geometry of a chart. All lengths are in pixels.

    Keep fields JSON-friendly: numbers, plus a list of CSS rule strings.
    """
    left_gutter: float = 80.0
    right_gutter: float = 80.0
    top_gutter: float = 80.0
    bottom_gutter: float = 80.0
    slot_width: float = 60.0        # horizontal space per series
    plot_height: float = 400.0
    box_width: float = 30.0
    whisker_width: float = 15.0     # width of the whisker caps
    outlier_radius: float = 3.0
    tick_length: float = 5.0
    y_label_offset: float = 8.0     # gap between tick mark and y label
    x_label_offset: float = 15.0    # gap between x axis and series label
    styles: tuple[str, ...] = field(default=DEFAULT_STYLES)

    def to_json_dict(self) -> Dict[str, Any]:
        """Convert to JSON-serializable dict."""
        d: Dict[str, Any] = {"schema_version": SCHEMA_VERSION}
        for f in fields(self):
            value = getattr(self, f.name)
            d[f.name] = list(value) if f.name == "styles" else value
        return d

    @classmethod
    def from_json_dict(cls, d: Dict[str, Any]) -> "ChartConfig":
        """
        Tolerant loader:
        - ignores unknown keys
        - tolerates partially missing values
        - resets to defaults on schema_version mismatch
        """
        raw_version = d.get("schema_version", -1)
        try:
            schema_version = int(raw_version)
        except (TypeError, ValueError):
            schema_version = raw_version
        if schema_version != SCHEMA_VERSION:
            logger.warning(
                f"Chart config schema mismatch (file={schema_version}, expected={SCHEMA_VERSION}); using defaults"
            )
            return cls()

        known = {f.name for f in fields(cls)}
        for key in d.keys():
            if key not in known and key != "schema_version":
                logger.warning(f"Unknown key '{key}' in chart config, ignoring")

        kwargs: Dict[str, Any] = {}
        for f in fields(cls):
            if f.name not in d:
                continue
            raw = d[f.name]
            if f.name == "styles":
                if isinstance(raw, list) and all(isinstance(s, str) for s in raw):
                    kwargs["styles"] = tuple(raw)
                else:
                    logger.warning("styles is not a list of strings, using defaults")
                continue
            try:
                value = float(raw)
            except (TypeError, ValueError):
                logger.warning(f"Invalid value {raw!r} for '{f.name}', using default")
                continue
            if value < 0 or (value == 0 and f.name in ("slot_width", "plot_height")):
                logger.warning(f"Out of range value {raw!r} for '{f.name}', using default")
                continue
            kwargs[f.name] = value

        return cls(**kwargs)

    @staticmethod
    def load(path: Optional[Path] = None) -> "ChartConfig":
        """
        Load config from disk, or defaults if missing/unreadable.

        Args:
            path: Config file. Defaults to default_config_path().
        """
        explicit = path is not None
        if path is None:
            path = default_config_path()

        if not path.exists():
            if explicit:
                logger.warning(f"Chart config {path} does not exist, using defaults")
            else:
                logger.debug(f"No chart config at {path}, using defaults")
            return ChartConfig()

        try:
            parsed = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to read chart config {path}: {e}; using defaults")
            return ChartConfig()

        if not isinstance(parsed, dict):
            logger.warning(f"Chart config {path} is not a JSON object; using defaults")
            return ChartConfig()

        logger.info(f"Loaded chart config from {path}")
        return ChartConfig.from_json_dict(parsed)

    def save(self, path: Path) -> None:
        """Write config as pretty-printed JSON, creating parent folders."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self.to_json_dict(), indent=2), encoding="utf-8")
        logger.info(f"Saved chart config to {path}")


def default_config_path(app_name: str = "boxplotchart") -> Path:
    """Per-user config file location (platformdirs)."""
    return Path(user_config_dir(app_name)) / CONFIG_FILE_NAME
