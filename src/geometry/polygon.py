"""
Pure-Python polygon geometry utilities.

Coordinates are plan units, origin bottom-left, X = width, Y = depth.
Points carry a Z component that planar tests ignore.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class Point:
    """A 3-D position.  Floor plans are planar, so z is normally 0."""

    x: float
    y: float
    z: float = 0.0


Polygon = Sequence[Point]


# ── core primitives ─────────────────────────────────────────────────


def distance(a: Point, b: Point) -> float:
    """Euclidean distance over all three components."""
    return math.sqrt(
        (b.x - a.x) ** 2
        + (b.y - a.y) ** 2
        + (b.z - a.z) ** 2
    )


def close_polygon(polygon: Polygon) -> list[Point]:
    """Return a copy whose last vertex repeats the first."""
    poly = list(polygon)
    if poly and poly[0] != poly[-1]:
        poly.append(poly[0])
    return poly


def point_in_polygon(p: Point, polygon: Polygon) -> bool:
    """Even-odd ray-casting test on the XY projection.

    Horizontal edges never count as a crossing.
    """
    poly = close_polygon(polygon)
    n = len(poly)
    inside = False
    j = n - 1
    for i in range(n):
        xi, yi = poly[i].x, poly[i].y
        xj, yj = poly[j].x, poly[j].y
        if yi != yj and ((yi > p.y) != (yj > p.y)):
            if p.x < (xj - xi) * (p.y - yi) / (yj - yi) + xi:
                inside = not inside
        j = i
    return inside


def polygon_bounds(polygon: Polygon) -> tuple[float, float, float, float]:
    """Return (min_x, min_y, max_x, max_y)."""
    xs = [p.x for p in polygon]
    ys = [p.y for p in polygon]
    return min(xs), min(ys), max(xs), max(ys)


def polygon_area(polygon: Polygon) -> float:
    """Signed area via shoelace formula (positive = CCW)."""
    n = len(polygon)
    if n < 3:
        return 0.0
    area = 0.0
    for i in range(n):
        a = polygon[i]
        b = polygon[(i + 1) % n]
        area += a.x * b.y - b.x * a.y
    return area / 2.0
