"""Serialize a Scene to a standalone SVG document.

Elements are kept in insertion order so the output is deterministic, which
keeps exported charts stable for regression tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from boxplotchart.chart.scene import (
    Circle,
    Group,
    Line,
    Path,
    PathCommand,
    Polyline,
    Primitive,
    Scene,
    Style,
    Text,
)

SVG_NS = "http://www.w3.org/2000/svg"
BACKGROUND_STYLE = "background-color: white;"


def format_number(value: float) -> str:
    """Compact number text: 20.0 -> '20', 2.5 -> '2.5'."""
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    if text == "-0":
        text = "0"
    return text


def _escape(value: str) -> str:
    return (
        value.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&apos;")
    )


@dataclass
class SvgElement:
    """A minimal SVG node. Attribute values are stored as strings."""

    tag: str
    attributes: Dict[str, str] = field(default_factory=dict)
    children: List["SvgElement"] = field(default_factory=list)
    text: Optional[str] = None

    def set(self, **attrs: object) -> "SvgElement":
        """Assign attributes (None values skipped) and return ``self``."""
        for key, value in attrs.items():
            if value is None:
                continue
            name = key.rstrip("_").replace("_", "-")
            if isinstance(value, (int, float)) and not isinstance(value, bool):
                self.attributes[name] = format_number(value)
            else:
                self.attributes[name] = str(value)
        return self

    def add(self, *children: "SvgElement") -> "SvgElement":
        self.children.extend(children)
        return self

    def to_string(self, indent: int = 0, pretty: bool = True) -> str:
        pad = "  " * indent if pretty else ""
        child_pad = "  " * (indent + 1) if pretty else ""
        sep = "\n" if pretty else ""
        attrs = "".join(f' {name}="{_escape(value)}"' for name, value in self.attributes.items())
        if not self.children and self.text is None:
            return f"{pad}<{self.tag}{attrs}/>"

        parts = [f"{pad}<{self.tag}{attrs}>"]
        if self.text is not None:
            parts.append(f"{child_pad}{_escape(self.text)}")
        for child in self.children:
            parts.append(child.to_string(indent + 1, pretty=pretty))
        parts.append(f"{pad}</{self.tag}>")
        return sep.join(parts)


def path_data(commands: tuple[PathCommand, ...]) -> str:
    """Render pen commands as an SVG ``d`` attribute."""
    return " ".join(
        " ".join([cmd.op] + [format_number(a) for a in cmd.args]) for cmd in commands
    )


def to_element(primitive: Primitive) -> SvgElement:
    """Convert one scene primitive (recursively for groups)."""
    if isinstance(primitive, Style):
        return SvgElement("style", text=" ".join(primitive.rules))
    if isinstance(primitive, Line):
        return SvgElement("line").set(
            class_=primitive.css_class,
            x1=primitive.x1, y1=primitive.y1, x2=primitive.x2, y2=primitive.y2,
        )
    if isinstance(primitive, Polyline):
        points = " ".join(f"{format_number(x)},{format_number(y)}" for x, y in primitive.points)
        return SvgElement("polyline").set(class_=primitive.css_class, points=points)
    if isinstance(primitive, Circle):
        return SvgElement("circle").set(
            class_=primitive.css_class, cx=primitive.cx, cy=primitive.cy, r=primitive.r
        )
    if isinstance(primitive, Path):
        return SvgElement("path").set(class_=primitive.css_class, d=path_data(primitive.commands))
    if isinstance(primitive, Text):
        transform = None
        if primitive.rotate is not None:
            transform = (
                f"rotate({format_number(primitive.rotate)} "
                f"{format_number(primitive.x)} {format_number(primitive.y)})"
            )
        return SvgElement("text", text=primitive.text).set(
            class_=primitive.css_class, x=primitive.x, y=primitive.y, transform=transform
        )
    if isinstance(primitive, Group):
        group = SvgElement("g").set(class_=primitive.css_class)
        group.add(*(to_element(child) for child in primitive.children))
        return group
    raise TypeError(f"Unsupported scene primitive: {type(primitive).__name__}")


def to_svg(scene: Scene, pretty: bool = True) -> str:
    """Serialize scene as a complete SVG document string."""
    root = SvgElement("svg").set(
        xmlns=SVG_NS,
        width=scene.width,
        height=scene.height,
        viewBox=f"0 0 {format_number(scene.width)} {format_number(scene.height)}",
        style=BACKGROUND_STYLE,
    )
    root.add(*(to_element(p) for p in scene.primitives))
    return root.to_string(pretty=pretty) + "\n"
