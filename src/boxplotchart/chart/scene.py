"""Scene primitives for box plot charts.

A Scene is an ordered list of drawing primitives with no further semantics.
Later primitives are drawn on top of earlier ones. Serializers (see svg.py)
turn a Scene into concrete markup.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass(frozen=True)
class Style:
    """Stylesheet declaration; rules are raw CSS strings."""
    rules: tuple[str, ...]


@dataclass(frozen=True)
class Line:
    x1: float
    y1: float
    x2: float
    y2: float
    css_class: Optional[str] = None


@dataclass(frozen=True)
class Polyline:
    points: tuple[tuple[float, float], ...]
    css_class: Optional[str] = None


@dataclass(frozen=True)
class Circle:
    cx: float
    cy: float
    r: float
    css_class: Optional[str] = None


@dataclass(frozen=True)
class PathCommand:
    """One pen command, e.g. PathCommand("M", (10, 20)) or PathCommand("h", (5,)).

    Upper case ops are absolute, lower case relative (SVG path semantics).
    """
    op: str
    args: tuple[float, ...] = ()


@dataclass(frozen=True)
class Path:
    commands: tuple[PathCommand, ...]
    css_class: Optional[str] = None


@dataclass(frozen=True)
class Text:
    x: float
    y: float
    text: str
    css_class: Optional[str] = None
    rotate: Optional[float] = None  # degrees, about (x, y)


@dataclass(frozen=True)
class Group:
    children: tuple["Primitive", ...]
    css_class: Optional[str] = None


Primitive = Union[Style, Line, Polyline, Circle, Path, Text, Group]


@dataclass
class Scene:
    """Canvas size plus primitives in draw order."""
    width: float
    height: float
    primitives: list[Primitive] = field(default_factory=list)

    def add(self, *primitives: Primitive) -> "Scene":
        self.primitives.extend(primitives)
        return self

    def of_type(self, kind: type) -> list[Primitive]:
        """Top level primitives of the given type, in draw order."""
        return [p for p in self.primitives if isinstance(p, kind)]
