# tagcloud/core/sizes.py
"""
Size sources for demo runs: parse 'WxH' lists, generate deterministic tag-like boxes,
order by area.
"""

from __future__ import annotations

import numpy as np

from tagcloud.core.config import DEFAULT_ASPECT_RANGE, MAX_RECT_SIDE, MIN_RECT_SIDE, SEED
from tagcloud.core.types import Size


def parse_sizes(s: str) -> list[Size]:
    """Parse comma-separated sizes, e.g. '40x20, 30x10'. Malformed parts are skipped."""
    out: list[Size] = []
    for part in (s or "").split(","):
        part = part.strip().lower()
        if not part:
            continue
        w, sep, h = part.partition("x")
        if not sep:
            continue
        try:
            out.append(Size(int(w), int(h)))
        except ValueError:
            continue
    return out


def random_sizes(
    count: int,
    min_side: int = MIN_RECT_SIDE,
    max_side: int = MAX_RECT_SIDE,
    seed: int | None = SEED,
    aspect_range: tuple[float, float] = DEFAULT_ASPECT_RANGE,
) -> list[Size]:
    """
    Deterministic tag-like boxes: height uniform in [min_side, max_side], width = height * aspect.
    Same seed -> same sizes.
    """
    if count <= 0:
        return []
    if min_side > max_side:
        min_side, max_side = max_side, min_side
    rng = np.random.default_rng(seed)
    heights = rng.integers(min_side, max_side, endpoint=True, size=count)
    aspects = rng.uniform(aspect_range[0], aspect_range[1], size=count)
    return [Size(int(round(h * a)), int(h)) for h, a in zip(heights, aspects)]


def sort_by_area(sizes: list[Size]) -> list[Size]:
    """Larger boxes first; ties keep input order."""
    return sorted(sizes, key=lambda sz: -(sz.width * sz.height))
