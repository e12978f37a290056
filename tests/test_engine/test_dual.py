"""Tests for the dual vertex map and rhombus construction."""

import math

import pytest

from pentagrid.engine.dual import crossing_index, rhombus_at, vertex_from_index
from pentagrid.engine.errors import TilingError
from pentagrid.engine.families import build_families, family_pairs
from pentagrid.utils.vector import ORIGIN

OFFSETS5 = (0.1, 0.2, 0.3, 0.15, 0.25)


@pytest.fixture
def families():
    return build_families(5, 60.0, OFFSETS5)


def test_vertex_from_zero_index_is_origin(families):
    assert vertex_from_index((0, 0, 0, 0, 0), families).isclose(ORIGIN)


def test_vertex_is_linear_in_index(families):
    e = [f.edge_vector for f in families.families]
    v = vertex_from_index((1, 2, 0, 0, -1), families)
    expected = e[0] + e[1].scale(2) - e[4]
    assert v.isclose(expected, abs_tol=1e-9)


def test_vertex_of_full_ones_index_is_origin(families):
    # Fifth roots of unity sum to zero
    assert vertex_from_index((1, 1, 1, 1, 1), families).isclose(ORIGIN, abs_tol=1e-9)


def test_vertex_rejects_wrong_length(families):
    with pytest.raises(TilingError):
        vertex_from_index((0, 0, 0), families)


def test_crossing_index_pins_active_components(families):
    idx = crossing_index(families, 1, 3, -2, 4)
    assert idx[1] == -2
    assert idx[3] == 4
    assert len(idx) == 5


@pytest.mark.parametrize("i, j", family_pairs(5))
def test_rhombus_closure(families, i, j):
    e_i = families[i].edge_vector
    e_j = families[j].edge_vector
    for k in range(-2, 3):
        for l in range(-2, 3):
            v0, v1, v2, v3 = rhombus_at(families, i, j, k, l)
            assert (v1 - v0).isclose(e_i, abs_tol=1e-9)
            assert (v3 - v0).isclose(e_j, abs_tol=1e-9)
            assert (v2 - v0).isclose(e_i + e_j, abs_tol=1e-9)


def test_rhombus_area_matches_family_angle(families):
    v0, v1, v2, v3 = rhombus_at(families, 0, 1, 0, 0)
    area = abs((v1 - v0).cross(v3 - v0))
    assert math.isclose(area, 60.0**2 * math.sin(2 * math.pi / 5))


def test_rhombus_first_corner_is_vertex_of_crossing_index(families):
    idx = crossing_index(families, 0, 2, 1, -1)
    v0, *_ = rhombus_at(families, 0, 2, 1, -1)
    assert v0.isclose(vertex_from_index(idx, families))


def test_parallel_families_have_no_rhombus():
    fam = build_families(6, 50.0, [0.1, 0.2, 0.3, 0.1, 0.2, 0.1])
    assert rhombus_at(fam, 0, 3, 0, 0) is None
    assert rhombus_at(fam, 2, 5, 1, -1) is None
    assert rhombus_at(fam, 0, 1, 0, 0) is not None


@pytest.mark.parametrize("i, j", [(0, 0), (-1, 2), (0, 5)])
def test_invalid_family_pair(families, i, j):
    with pytest.raises(TilingError):
        rhombus_at(families, i, j, 0, 0)
