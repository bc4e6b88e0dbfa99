# tagcloud/core/layout.py
"""
Circular cloud placement with collision avoidance.
First rect sits on the center; later rects walk the spiral until they fit,
then get pulled back toward the center while they stay collision-free.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from tagcloud.core.config import COMPACTION_STEP, MAX_COMPACTION_STEPS, MAX_SPIRAL_STEPS
from tagcloud.core.error_codes import InvalidSizeError, LayoutInvariantError
from tagcloud.core.geometry import distance_to_center, rect_center, rect_centered_at, rects_intersect
from tagcloud.core.spiral import Spiral
from tagcloud.core.types import Point, Rect, Size

logger = logging.getLogger(__name__)


def _collides(rect: Rect, placed: Sequence[Rect]) -> bool:
    return any(rects_intersect(rect, other) for other in placed)


def move_from_center(rect: Rect, step: int, center: Point) -> Rect:
    """
    Shift rect by step on each axis, away from center for positive step.
    Axes are handled independently: +step where the rect center lies beyond
    the cloud center on that axis, -step otherwise (ties go negative).
    """
    cx, cy = rect_center(rect)
    dx = step if cx > center.x else -step
    dy = step if cy > center.y else -step
    return Rect(rect.x + dx, rect.y + dy, rect.width, rect.height)


def find_free_rect(
    placed: Sequence[Rect],
    size: Size,
    spiral: Spiral,
    max_steps: int = MAX_SPIRAL_STEPS,
) -> tuple[Rect, int]:
    """
    Rewind the spiral, then walk it until a rect of size centered on the point overlaps nothing.
    Returns (rect, spiral steps taken). Raises LayoutInvariantError past max_steps.
    """
    spiral.rewind()
    for steps in range(1, max_steps + 1):
        candidate = rect_centered_at(next(spiral), size)
        if not _collides(candidate, placed):
            return candidate, steps
    raise LayoutInvariantError(
        f"No free position for {size.width}x{size.height} within {max_steps} spiral steps "
        f"(radius {spiral.radius:.1f}, {len(placed)} rects placed)"
    )


def compact_rect(
    rect: Rect,
    placed: Sequence[Rect],
    center: Point,
    step: int = COMPACTION_STEP,
    max_moves: int = MAX_COMPACTION_STEPS,
) -> tuple[Rect, int]:
    """
    Pull rect toward center: try the diagonal move, then its x-only and y-only parts.
    A move is kept only if it brings the rect strictly closer and overlaps nothing.
    Returns (rect, moves applied).
    """
    moves = 0
    current = rect
    dist = distance_to_center(current, center)
    while moves < max_moves:
        diagonal = move_from_center(current, -step, center)
        options = (
            diagonal,
            Rect(diagonal.x, current.y, current.width, current.height),
            Rect(current.x, diagonal.y, current.width, current.height),
        )
        for option in options:
            option_dist = distance_to_center(option, center)
            if option_dist < dist and not _collides(option, placed):
                current, dist = option, option_dist
                moves += 1
                break
        else:
            break
    return current, moves


class CircularCloudLayouter:
    """Owns the placed rects (in placement order) and the spiral cursor of one cloud."""

    def __init__(self, center: Point | None = None) -> None:
        self._center = center if center is not None else Point()
        self._rectangles: list[Rect] = []
        self._spiral: Spiral | None = None

    @property
    def center(self) -> Point:
        return self._center

    @property
    def rectangles(self) -> tuple[Rect, ...]:
        """All placed rects, read-only, in placement order."""
        return tuple(self._rectangles)

    @property
    def spiral(self) -> Spiral | None:
        return self._spiral

    def initialize_spiral(self, size: Size) -> None:
        """(Re)seed the spiral from size around the cloud center."""
        self._spiral = Spiral.from_size(size, self._center)

    def put_next_rectangle(self, size: Size) -> Rect:
        """
        Place the next rect of the given size and return it.
        Raises InvalidSizeError for negative width or height (no state change).
        """
        if size.width < 0 or size.height < 0:
            raise InvalidSizeError(f"Size must be non-negative, got {size.width}x{size.height}")

        if not self._rectangles or self._spiral is None:
            self.initialize_spiral(size)
            rect = rect_centered_at(self._center, size)
            logger.debug("Placed first rect %s on center %s", rect, self._center)
        else:
            found, steps = find_free_rect(self._rectangles, size, self._spiral)
            rect, moves = compact_rect(found, self._rectangles, self._center)
            logger.debug(
                "Placed rect %s after %d spiral steps and %d compaction moves",
                rect, steps, moves,
            )
        self._rectangles.append(rect)
        return rect


def layout_sizes(sizes: Sequence[Size], center: Point | None = None) -> CircularCloudLayouter:
    """Place every size in order on a fresh layouter and return it."""
    layouter = CircularCloudLayouter(center)
    for size in sizes:
        layouter.put_next_rectangle(size)
    logger.info("Laid out %d rects around %s", len(sizes), layouter.center)
    return layouter
