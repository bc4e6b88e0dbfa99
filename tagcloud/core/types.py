# tagcloud/core/types.py
"""
Dataclasses for points, size requests and placed rectangles.
Vertical axis grows upward; a Rect stores its top-left corner.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """Integer 2D coordinate."""
    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class Size:
    """Requested box dimensions. Negative values are rejected by the layouter, not here."""
    width: int = 0
    height: int = 0


@dataclass(frozen=True)
class Rect:
    """
    A placed tag box. (x, y) is the highest corner on the left edge;
    the box spans x..x+width horizontally and y-height..y vertically.
    """
    x: int
    y: int
    width: int
    height: int

    @property
    def location(self) -> Point:
        return Point(self.x, self.y)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)
