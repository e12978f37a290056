"""Tests for the offset generator."""

import numpy as np
import pytest

from pentagrid.engine.errors import TilingError
from pentagrid.engine.generation import Viewport, build_generation
from pentagrid.engine.offsets import check_seed, closure_error, generate_offsets, make_rng, offsets_for_seed


@pytest.mark.parametrize("family_count", range(3, 11))
@pytest.mark.parametrize("seed", [0, 1, 2, 17, 12345])
def test_offsets_sum_to_zero_mod_one(seed, family_count):
    offsets = offsets_for_seed(seed, family_count)
    assert len(offsets) == family_count
    assert closure_error(offsets) < 1e-9


def test_offsets_in_unit_interval():
    for seed in range(50):
        for value in offsets_for_seed(seed, 5):
            assert 0.0 <= value < 1.0


def test_offsets_deterministic_per_seed():
    assert offsets_for_seed(3, 5) == offsets_for_seed(3, 5)
    assert offsets_for_seed(3, 5) != offsets_for_seed(4, 5)


def test_generators_are_independent():
    a = make_rng(9)
    b = make_rng(9)
    first = generate_offsets(5, a)
    # Consuming another generator must not disturb this one
    generate_offsets(5, make_rng(10))
    assert generate_offsets(5, b) == first


def test_closure_error_wraps_around():
    assert closure_error([0.4, 0.6]) < 1e-12
    assert closure_error([0.999999]) == pytest.approx(1e-6)
    assert closure_error([0.25]) == pytest.approx(0.25)


@pytest.mark.parametrize("seed", [-1, 1.5, "7", True])
def test_invalid_seed_rejected(seed):
    with pytest.raises(TilingError):
        make_rng(seed)
    with pytest.raises(TilingError):
        check_seed(seed)


@pytest.mark.parametrize("seed", [0, 5, np.int64(9)])
def test_valid_seed_accepted(seed):
    assert check_seed(seed) is None


def test_explicit_offsets_still_check_seed():
    with pytest.raises(TilingError):
        build_generation(-1, 5, 60.0, 2, Viewport(400.0, 400.0), offsets=[0.0] * 5)
