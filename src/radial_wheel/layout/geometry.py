"""Polar to cartesian conversion and SVG path construction."""

import math
from typing import NamedTuple


class Point(NamedTuple):
    x: float
    y: float


def cartesian(center_x: float, center_y: float, degrees: float, length: float) -> Point:
    """Convert a polar coordinate to cartesian coordinates.

    Angles are measured clockwise from 12 o'clock, so 0 points up and 90 points
    right (SVG y axis grows downwards).

    Args:
        center_x: X coordinate of the centre.
        center_y: Y coordinate of the centre.
        degrees: Angle in degrees, clockwise from the top.
        length: Distance from the centre.

    Returns:
        The point at that angle and distance.
    """
    radians = math.radians(degrees - 90)
    return Point(
        center_x + length * math.cos(radians),
        center_y + length * math.sin(radians),
    )


def format_number(value: float) -> str:
    """Format a coordinate compactly: at most 4 decimals, no trailing zeros."""
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    # Avoid "-0" for tiny negative values
    return "0" if text in ("-0", "") else text


def _pt(point: Point) -> str:
    return f"{format_number(point.x)},{format_number(point.y)}"


def sector_arc_path(
    start_degrees: float,
    end_degrees: float,
    radius: float,
    center: tuple[float, float],
) -> str:
    """Pie wedge anchored at the centre between two angles.

    Traces centre -> point at ``end_degrees`` -> small arc back to the point at
    ``start_degrees`` -> close. Equal angles give a zero-area closed path.
    """
    cx, cy = center
    start = cartesian(cx, cy, end_degrees, radius)
    end = cartesian(cx, cy, start_degrees, radius)
    r = format_number(radius)
    return f"M{_pt(Point(cx, cy))} L{_pt(start)} A{r} {r} 0 0 0 {_pt(end)} z"


def spoke_path(
    degrees: float,
    inner_radius: float,
    outer_radius: float,
    center: tuple[float, float],
) -> str:
    """Straight radial segment at ``degrees`` between two radii."""
    cx, cy = center
    start = cartesian(cx, cy, degrees, inner_radius)
    end = cartesian(cx, cy, degrees, outer_radius)
    return f"M{_pt(start)} L{_pt(end)}"
