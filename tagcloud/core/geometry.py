# tagcloud/core/geometry.py
"""
Geometry helpers: rect accessors, center-to-corner mapping, shapely collision geometry.
Overlap means positive-area intersection; touching edges do not collide.
"""

from __future__ import annotations

import math

from shapely.geometry import Polygon, box

from tagcloud.core.types import Point, Rect, Size


def bottom(rect: Rect) -> int:
    """Lowest y covered by the rect."""
    return rect.y - rect.height


def rect_center(rect: Rect) -> tuple[float, float]:
    """Geometric center (x + width/2, y - height/2); halves may be fractional."""
    return (rect.x + rect.width / 2, rect.y - rect.height / 2)


def rect_centered_at(point: Point, size: Size) -> Rect:
    """Rect of the given size whose center is at point, truncated to the integer grid."""
    return Rect(
        x=point.x - size.width // 2,
        y=point.y + size.height // 2,
        width=size.width,
        height=size.height,
    )


def rect_to_polygon(rect: Rect) -> Polygon:
    """Collision polygon for a rect (shapely box in y-up coordinates)."""
    return box(rect.x, bottom(rect), rect.x + rect.width, rect.y)


def intersection_area(a: Rect, b: Rect) -> float:
    """Area shared by two rects; 0.0 when they are disjoint, touching or degenerate."""
    if a.width == 0 or a.height == 0 or b.width == 0 or b.height == 0:
        return 0.0
    # Disjoint extents: skip building polygons
    if a.x >= b.x + b.width or b.x >= a.x + a.width:
        return 0.0
    if bottom(a) >= b.y or bottom(b) >= a.y:
        return 0.0
    return float(rect_to_polygon(a).intersection(rect_to_polygon(b)).area)


def rects_intersect(a: Rect, b: Rect) -> bool:
    return intersection_area(a, b) > 0.0


def distance_to_center(rect: Rect, center: Point) -> float:
    """Euclidean distance from the rect's geometric center to center."""
    cx, cy = rect_center(rect)
    return math.hypot(cx - center.x, cy - center.y)
