# tests/test_spiral.py
"""
Deterministic tests for spiral seeding, density and point generation.
"""

from __future__ import annotations

import itertools
import math

import pytest

from tagcloud.core.spiral import Spiral, calculate_density
from tagcloud.core.types import Point, Size


def test_calculate_density_is_positive_for_zero_size() -> None:
    assert calculate_density(Size(0, 0)) > 0


def test_calculate_density_spaces_layers_by_height() -> None:
    # One revolution must add at least the box height
    for size in (Size(2, 2), Size(5, 3), Size(3, 5), Size(100, 1), Size(1, 100)):
        assert calculate_density(size) * 2 * math.pi >= size.height


def test_calculate_density_grows_with_footprint() -> None:
    assert calculate_density(Size(10, 10)) > calculate_density(Size(4, 4))
    assert calculate_density(Size(40, 10)) > calculate_density(Size(10, 10))


def test_from_size_is_reproducible() -> None:
    a = Spiral.from_size(Size(5, 3), Point(1, 2))
    b = Spiral.from_size(Size(5, 3), Point(1, 2))
    assert a == b
    assert a.angle_step == pytest.approx(math.pi / 4)
    assert a.first_layer_radius == 3
    assert a.angle == 0.0
    assert a.radius == a.first_layer_radius


def test_spirals_differ_after_advancing() -> None:
    a = Spiral.from_size(Size(2, 2))
    b = Spiral.from_size(Size(2, 2))
    next(a)
    assert a != b


def test_first_point_for_square_seed() -> None:
    spiral = Spiral.from_size(Size(2, 2))
    # angle pi/4, radius 2 + (1/pi) * (pi/4) = 2.25
    assert next(spiral) == Point(2, 2)
    assert spiral.radius == pytest.approx(2.25)


def test_points_are_offset_by_center() -> None:
    a = Spiral.from_size(Size(6, 4))
    b = Spiral.from_size(Size(6, 4), Point(10, -5))
    for pa, pb in zip(itertools.islice(a, 30), itertools.islice(b, 30)):
        assert pb == Point(pa.x + 10, pa.y - 5)


def test_radius_is_non_decreasing() -> None:
    spiral = Spiral.from_size(Size(3, 5))
    radii = []
    for _ in range(50):
        next(spiral)
        radii.append(spiral.radius)
    assert all(r2 >= r1 for r1, r2 in zip(radii, radii[1:]))


def test_one_revolution_is_eight_points() -> None:
    spiral = Spiral.from_size(Size(4, 4))
    for _ in range(8):
        next(spiral)
    assert spiral.angle == pytest.approx(2 * math.pi)


def test_spiral_moves_outward() -> None:
    spiral = Spiral.from_size(Size(2, 2))
    pts = list(itertools.islice(spiral, 80))
    first = math.hypot(pts[0].x, pts[0].y)
    last = math.hypot(pts[-1].x, pts[-1].y)
    assert last > first + 10


def test_rewind_restarts_from_first_layer() -> None:
    spiral = Spiral.from_size(Size(2, 2))
    first = next(spiral)
    for _ in range(40):
        next(spiral)
    spiral.rewind()
    assert spiral == Spiral.from_size(Size(2, 2))
    assert next(spiral) == first
