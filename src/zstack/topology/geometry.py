"""Geometry resolution: declared box properties to slab geometry."""

from __future__ import annotations

import re
from dataclasses import dataclass

from zstack.stylesheet.model import DEFAULT_VALUE
from zstack.topology.matcher import MatchedEntry

__all__ = [
    "GeometryRecord",
    "edge_contribution",
    "elevation",
    "parse_length",
    "parse_number",
    "parse_z_index",
    "resolve",
]

# Leading numeric prefix, as read by a lenient float parser ("10px" -> 10).
_NUMBER_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INTEGER_RE = re.compile(r"\s*([+-]?\d+)")

ELEVATION_SCALE = 0.2
ELEVATION_BASE = 0.01


def parse_number(value: str) -> float | None:
    """Return the leading number of *value*, ignoring trailing units."""
    match = _NUMBER_RE.match(value)
    if match is None:
        return None
    return float(match.group(1))


def parse_length(value: str) -> float:
    """Parse a width, height or offset; non-numeric values count as 1."""
    number = parse_number(value)
    return 1.0 if number is None else number


def parse_z_index(value: str) -> int:
    """Parse a z-index; non-numeric values such as ``auto`` count as 0."""
    match = _INTEGER_RE.match(value)
    if match is None:
        return 0
    return int(match.group(1))


def edge_contribution(directional: str, shorthand: str) -> float:
    """Margin or padding contribution on one edge.

    The directional value wins when it is numeric and non-zero; otherwise the
    shorthand's value applies, or 0 if that is not numeric either.  An explicit
    zero longhand therefore reads the same as an unset one.
    """
    number = parse_number(directional)
    if number is not None and number != 0:
        return number
    fallback = parse_number(shorthand)
    return 0.0 if fallback is None else fallback


def elevation(z_index: int) -> float:
    """Map a z-index onto slab height. Linear and strictly increasing."""
    return z_index * ELEVATION_SCALE + ELEVATION_BASE


@dataclass(frozen=True)
class GeometryRecord:
    """Computed box and stacking geometry for a matched element."""

    z_index: int
    width: float
    height: float
    effective_width: float
    effective_height: float
    effective_left: float
    effective_right: float
    effective_top: float
    effective_bottom: float
    elevation: float

    @property
    def position(self) -> tuple[float, float, float]:
        """Slab centre as (x, y, z): horizontal offset, half height, depth offset."""
        return (
            self.effective_left - self.effective_right,
            self.elevation / 2,
            self.effective_top - self.effective_bottom,
        )

    def to_dict(self) -> dict[str, object]:
        return {
            "zIndex": self.z_index,
            "width": self.width,
            "height": self.height,
            "effectiveWidth": self.effective_width,
            "effectiveHeight": self.effective_height,
            "effectiveLeft": self.effective_left,
            "effectiveRight": self.effective_right,
            "effectiveTop": self.effective_top,
            "effectiveBottom": self.effective_bottom,
            "elevation": self.elevation,
            "position": list(self.position),
        }


def resolve(entry: MatchedEntry) -> GeometryRecord:
    """Resolve the effective box and elevation for one matched entry."""
    declared = entry.rule.properties

    def prop(name: str) -> str:
        return declared.get(name, DEFAULT_VALUE)

    margin = prop("margin")
    padding = prop("padding")

    def edge(side: str) -> float:
        return edge_contribution(prop(f"margin-{side}"), margin) + edge_contribution(
            prop(f"padding-{side}"), padding
        )

    left, right, top, bottom = edge("left"), edge("right"), edge("top"), edge("bottom")
    width = parse_length(prop("width"))
    height = parse_length(prop("height"))
    z_index = parse_z_index(prop("z-index"))

    return GeometryRecord(
        z_index=z_index,
        width=width,
        height=height,
        effective_width=width + left + right,
        effective_height=height + top + bottom,
        effective_left=parse_length(prop("left")) + left,
        effective_right=parse_length(prop("right")) + right,
        effective_top=parse_length(prop("top")) + top,
        effective_bottom=parse_length(prop("bottom")) + bottom,
        elevation=elevation(z_index),
    )
