# tagcloud/core/spiral.py
"""
Archimedean spiral of integer candidate points around the cloud center.
radius = first_layer_radius + density * angle, so it never shrinks as the angle advances.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from tagcloud.core.config import ANGLE_STEP_RAD, MIN_LAYER_SPACING
from tagcloud.core.types import Point, Size


def calculate_density(size: Size) -> float:
    """
    Radial growth per radian for a spiral seeded by size.
    One revolution adds at least the box height (and at least the side of a square
    of the same area), so wide and tall seeds both get enough room between layers.
    """
    footprint_side = math.sqrt(max(size.width, 0) * max(size.height, 0))
    layer_spacing = max(float(size.height), footprint_side, MIN_LAYER_SPACING)
    return layer_spacing / (2 * math.pi)


@dataclass
class Spiral:
    """Lazy, infinite point source. Equal iff all parameters and the cursor angle match."""
    angle_step: float
    first_layer_radius: int
    density: float
    center: Point = field(default_factory=Point)
    angle: float = 0.0

    @classmethod
    def from_size(cls, size: Size, center: Point | None = None) -> Spiral:
        """Seed a spiral from the first requested size."""
        return cls(
            angle_step=ANGLE_STEP_RAD,
            first_layer_radius=size.width // 2 + 1,
            density=calculate_density(size),
            center=center if center is not None else Point(),
        )

    def rewind(self) -> None:
        """Move the cursor back to the first layer; seeded parameters stay."""
        self.angle = 0.0

    @property
    def radius(self) -> float:
        return self.first_layer_radius + self.density * self.angle

    def __iter__(self) -> Spiral:
        return self

    def __next__(self) -> Point:
        self.angle += self.angle_step
        r = self.radius
        return Point(
            self.center.x + round(r * math.cos(self.angle)),
            self.center.y + round(r * math.sin(self.angle)),
        )
