"""Tests for the Vec2 value type and polygon helpers."""

import math

import numpy as np

from pentagrid.utils.geometry import centroid, closed_ring, sample_grid, signed_area
from pentagrid.utils.vector import ORIGIN, Vec2, as_array

SQUARE = np.array([[0.0, 0.0], [2.0, 0.0], [2.0, 2.0], [0.0, 2.0]])


def test_vec2_arithmetic():
    a = Vec2(1.0, 2.0)
    b = Vec2(0.5, -1.0)
    assert a + b == Vec2(1.5, 1.0)
    assert a - b == Vec2(0.5, 3.0)
    assert a.scale(2) == Vec2(2.0, 4.0)
    assert a.dot(b) == 0.5 - 2.0
    assert a.cross(b) == -1.0 - 1.0


def test_vec2_value_semantics():
    assert Vec2(1.0, 2.0) == Vec2(1.0, 2.0)
    assert len({Vec2(1.0, 2.0), Vec2(1.0, 2.0)}) == 1
    assert ORIGIN + Vec2(3.0, 4.0) == Vec2(3.0, 4.0)


def test_vec2_polar_and_length():
    v = Vec2.polar(math.pi / 2, 3.0)
    assert v.isclose(Vec2(0.0, 3.0))
    assert math.isclose(Vec2(3.0, 4.0).length(), 5.0)


def test_vec2_is_finite():
    assert Vec2(1.0, 2.0).is_finite()
    assert not Vec2(float("nan"), 0.0).is_finite()
    assert not Vec2(0.0, float("inf")).is_finite()


def test_as_array():
    arr = as_array([Vec2(1.0, 2.0), Vec2(3.0, 4.0)])
    assert arr.shape == (2, 2)
    assert as_array([]).shape == (0, 2)


def test_signed_area_sign_follows_orientation():
    assert signed_area(SQUARE) == 4.0
    assert signed_area(SQUARE[::-1]) == -4.0


def test_centroid():
    assert centroid(SQUARE) == (1.0, 1.0)
    assert centroid(np.empty((0, 2))) == (0.0, 0.0)


def test_closed_ring():
    ring = closed_ring(SQUARE)
    assert len(ring) == 5
    assert (ring[0] == ring[-1]).all()
    assert len(closed_ring(ring)) == 5


def test_sample_grid_is_cell_centred():
    xs, ys = sample_grid((0.0, 0.0, 4.0, 4.0), 2)
    assert sorted(set(xs.tolist())) == [1.0, 3.0]
    assert sorted(set(ys.tolist())) == [1.0, 3.0]
    assert len(xs) == 4
