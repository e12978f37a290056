"""Tests for shape classification and colour keys."""

import math

import pytest

from pentagrid.engine.classifier import acute_angle, color_key, shape_class
from pentagrid.engine.errors import TilingError
from pentagrid.engine.families import family_pairs


@pytest.mark.parametrize("n", range(3, 11))
def test_shape_class_is_symmetric(n):
    for i in range(n):
        for j in range(n):
            if i != j:
                assert shape_class(i, j, n) == shape_class(j, i, n)


def test_penrose_has_two_classes():
    classes = {shape_class(i, j, 5) for i, j in family_pairs(5)}
    assert classes == {"thick", "thin"}


def test_penrose_classes_by_family_distance():
    # Neighbouring families meet at 72 deg (thick rhombus); next-but-one at 36 deg (thin).
    for i, j in family_pairs(5):
        delta = abs(i - j)
        expected = "thick" if delta in (1, 4) else "thin"
        assert shape_class(i, j, 5) == expected


def test_acute_angle_values():
    assert math.isclose(acute_angle(0, 1, 5), 2 * math.pi / 5)
    assert math.isclose(acute_angle(0, 2, 5), math.pi / 5)
    assert math.isclose(acute_angle(0, 1, 4), math.pi / 2)
    assert math.isclose(acute_angle(0, 2, 4), 0.0, abs_tol=1e-12)


def test_color_key_unique_per_pair():
    keys = [color_key(i, j, 0, 0, 5) for i, j in family_pairs(5)]
    assert keys == list(range(10))


def test_color_key_symmetric_and_stable():
    assert color_key(1, 3, 0, 0, 5) == color_key(3, 1, 0, 0, 5)
    assert color_key(1, 3, -4, 7, 5) == color_key(1, 3, 2, 2, 5)


@pytest.mark.parametrize("i, j", [(2, 2), (-1, 0), (0, 5)])
def test_color_key_invalid_pair(i, j):
    with pytest.raises(TilingError):
        color_key(i, j, 0, 0, 5)


def test_acute_angle_rejects_small_family_count():
    with pytest.raises(TilingError):
        acute_angle(0, 1, 2)
