# tagcloud/core/metrics.py
"""
Cloud quality metrics: how much of the enclosing circle is filled, how round the
cloud is, and whether any pair of rects overlaps.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import asdict, dataclass

import numpy as np
from shapely.ops import unary_union

from tagcloud.core.geometry import bottom, rect_to_polygon, rects_intersect
from tagcloud.core.types import Point, Rect


@dataclass
class CloudMetrics:
    """Summary of a laid-out cloud."""
    n_rects: int
    total_area: float
    enclosing_radius: float
    fill_ratio: float
    bbox: tuple[float, float, float, float]  # (minx, miny, maxx, maxy)
    aspect_ratio: float
    overlap_pairs: int

    def to_dict(self) -> dict:
        out = asdict(self)
        out["bbox"] = list(self.bbox)
        return out


def _corners(rects: Sequence[Rect]) -> np.ndarray:
    """All rect corners as an (N*4, 2) array."""
    if not rects:
        return np.zeros((0, 2))
    xy = []
    for r in rects:
        xy.extend([
            (r.x, r.y),
            (r.x + r.width, r.y),
            (r.x + r.width, bottom(r)),
            (r.x, bottom(r)),
        ])
    return np.array(xy, dtype=float)


def enclosing_radius(rects: Sequence[Rect], center: Point) -> float:
    """Largest distance from center to any rect corner."""
    xy = _corners(rects)
    if xy.shape[0] == 0:
        return 0.0
    d = np.hypot(xy[:, 0] - center.x, xy[:, 1] - center.y)
    return float(d.max())


def count_overlap_pairs(rects: Sequence[Rect]) -> int:
    """Number of rect pairs with positive-area intersection."""
    n = 0
    for i, a in enumerate(rects):
        for b in rects[i + 1:]:
            if rects_intersect(a, b):
                n += 1
    return n


def cloud_metrics(rects: Sequence[Rect], center: Point) -> CloudMetrics:
    """Compute CloudMetrics for rects placed around center."""
    if not rects:
        return CloudMetrics(
            n_rects=0,
            total_area=0.0,
            enclosing_radius=0.0,
            fill_ratio=0.0,
            bbox=(float(center.x), float(center.y), float(center.x), float(center.y)),
            aspect_ratio=1.0,
            overlap_pairs=0,
        )
    total_area = float(sum(r.width * r.height for r in rects))
    radius = enclosing_radius(rects, center)
    fill = total_area / (math.pi * radius * radius) if radius > 0 else 0.0

    # Zero-area rects add nothing to the union; an all-degenerate cloud collapses to the center
    polys = [rect_to_polygon(r) for r in rects if r.width > 0 and r.height > 0]
    union = unary_union(polys) if polys else None
    if union is None or union.is_empty:
        minx, miny, maxx, maxy = float(center.x), float(center.y), float(center.x), float(center.y)
    else:
        minx, miny, maxx, maxy = (float(v) for v in union.bounds)
    w, h = maxx - minx, maxy - miny
    aspect = w / h if w > 0 and h > 0 else 1.0

    return CloudMetrics(
        n_rects=len(rects),
        total_area=total_area,
        enclosing_radius=radius,
        fill_ratio=fill,
        bbox=(minx, miny, maxx, maxy),
        aspect_ratio=aspect,
        overlap_pairs=count_overlap_pairs(rects),
    )
