"""Shared test fixtures."""

from __future__ import annotations

import pytest

from pentagrid.engine.enumerator import enumerate_tiles
from pentagrid.engine.generation import Viewport, build_generation

# Worked example: five families, 60-unit spacing, two lines either side of the
# origin, culled against the square [-200, 200]^2.
EXAMPLE_SEED = 1
EXAMPLE_SPACING = 60.0
EXAMPLE_LINE_RANGE = 2
EXAMPLE_VIEWPORT = Viewport(400.0, 400.0, margin=0.5)

# Wide line range around a small window, for gap/overlap sampling.
COVERAGE_REGION = (-120.0, -120.0, 120.0, 120.0)


@pytest.fixture(scope="session")
def example_generation():
    return build_generation(
        EXAMPLE_SEED, 5, EXAMPLE_SPACING, EXAMPLE_LINE_RANGE, EXAMPLE_VIEWPORT
    )


@pytest.fixture(scope="session")
def example_tiles(example_generation):
    return list(enumerate_tiles(example_generation))


@pytest.fixture(scope="session")
def coverage_generation():
    return build_generation(7, 5, 60.0, 6, Viewport(400.0, 400.0))


@pytest.fixture(scope="session")
def coverage_tiles(coverage_generation):
    return list(enumerate_tiles(coverage_generation))


@pytest.fixture(scope="session")
def hexagrid_generation():
    """Six families: opposite families are parallel."""
    return build_generation(3, 6, 50.0, 3, Viewport(600.0, 600.0))
