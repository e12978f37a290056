"""Tiling sanity checks.

Per-tile: corners are finite and close the parallelogram spanned by the two
family edge vectors. Whole tiling: a sampled point grid over a region counts
how many tile interiors cover each sample; zero means a gap, two or more an
overlap.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
import shapely
from shapely.geometry import box

from pentagrid.engine.enumerator import Tile, corner_array
from pentagrid.engine.errors import TilingError
from pentagrid.engine.generation import Generation
from pentagrid.utils.geometry import sample_grid

logger = logging.getLogger(__name__)


@dataclass
class CoverageReport:
    samples: int
    covered_fraction: float
    overlap_fraction: float
    max_depth: int

    @property
    def gap_fraction(self) -> float:
        return 1.0 - self.covered_fraction


def check_tile(tile: Tile, generation: Generation) -> None:
    """Raise TilingError if the tile is not a finite, closed parallelogram."""
    if not all(p.is_finite() for p in tile.corners):
        raise TilingError(f"Tile {tile.key} has non-finite corners: {tile.corners}")

    fam = generation.families
    e_i = fam[tile.family_i].edge_vector
    e_j = fam[tile.family_j].edge_vector
    v0, v1, v2, v3 = tile.corners
    tol = generation.config.closure_tolerance * max(1.0, generation.spacing)

    if not (v2 - v0).isclose(e_i + e_j, abs_tol=tol):
        raise TilingError(f"Tile {tile.key} does not close: v2-v0={v2 - v0}, expected {e_i + e_j}")
    if not (v1 - v0).isclose(e_i, abs_tol=tol) or not (v3 - v0).isclose(e_j, abs_tol=tol):
        raise TilingError(f"Tile {tile.key} edges do not match families ({tile.family_i}, {tile.family_j})")


def check_tiles(tiles: list[Tile], generation: Generation) -> int:
    """Check every tile; returns how many were checked."""
    for tile in tiles:
        check_tile(tile, generation)
    return len(tiles)


def coverage_report(
    tiles: list[Tile],
    region: tuple[float, float, float, float],
    samples_per_axis: int = 64,
) -> CoverageReport:
    """Sample ``region`` on a regular grid and count covering tile interiors per sample."""
    if samples_per_axis < 1:
        raise TilingError(f"samples_per_axis must be >= 1, got {samples_per_axis}")
    xs, ys = sample_grid(region, samples_per_axis)
    depth = np.zeros(len(xs), dtype=np.int64)

    area = box(*region)
    polygons = shapely.polygons(corner_array(tiles)) if tiles else []
    for poly in polygons:
        if not poly.intersects(area):
            continue
        shapely.prepare(poly)
        depth += shapely.contains_xy(poly, xs, ys)

    n = len(xs)
    report = CoverageReport(
        samples=n,
        covered_fraction=float(np.count_nonzero(depth >= 1) / n),
        overlap_fraction=float(np.count_nonzero(depth >= 2) / n),
        max_depth=int(depth.max()) if n else 0,
    )
    logger.debug(
        "Coverage over %s: covered=%.4f overlap=%.4f (%d samples)",
        region,
        report.covered_fraction,
        report.overlap_fraction,
        n,
    )
    return report
