"""Tiling Enumerator — walks every crossing in range and yields visible rhombi.

Order is fixed: family pairs ascending, then ``k`` ascending, then ``l``
ascending. Each crossing depends only on the immutable Generation, so the
index space can be split per family pair and computed in parallel.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterator
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any

import numpy as np
from shapely.geometry import Polygon

from pentagrid.engine.classifier import ShapeClass, color_key, shape_class
from pentagrid.engine.dual import Corners, rhombus_at
from pentagrid.engine.families import family_pairs
from pentagrid.engine.generation import Generation
from pentagrid.utils.geometry import centroid, signed_area
from pentagrid.utils.vector import as_array

logger = logging.getLogger(__name__)

TileKey = tuple[int, int, int, int]


@dataclass(frozen=True)
class Tile:
    """One rhombus of the tiling, dual to a single two-family line crossing."""

    family_i: int
    family_j: int
    line_k: int
    line_l: int
    corners: Corners
    shape_class: ShapeClass
    color_key: int

    @property
    def key(self) -> TileKey:
        return (self.family_i, self.family_j, self.line_k, self.line_l)

    @property
    def area(self) -> float:
        return abs(signed_area(as_array(self.corners)))

    @property
    def centroid(self) -> tuple[float, float]:
        return centroid(as_array(self.corners))

    @property
    def ccw_corners(self) -> Corners:
        """Corners in counter-clockwise order, starting from ``v0``."""
        if signed_area(as_array(self.corners)) < 0:
            v0, v1, v2, v3 = self.corners
            return (v0, v3, v2, v1)
        return self.corners

    @property
    def polygon(self) -> Polygon:
        return Polygon([(p.x, p.y) for p in self.corners])

    def as_dict(self) -> dict[str, Any]:
        return {
            "family_i": self.family_i,
            "family_j": self.family_j,
            "line_k": self.line_k,
            "line_l": self.line_l,
            "corners": [[p.x, p.y] for p in self.corners],
            "shape_class": self.shape_class,
            "color_key": self.color_key,
        }


@dataclass
class TilingStats:
    emitted: int = 0
    culled: int = 0
    parallel: int = 0

    @property
    def crossings(self) -> int:
        return self.emitted + self.culled + self.parallel


def _walk_pair(generation: Generation, i: int, j: int, stats: TilingStats | None) -> Iterator[Tile]:
    n = generation.family_count
    families = generation.families
    config = generation.config
    viewport = generation.viewport
    klass = shape_class(i, j, n, config)
    indices = generation.line_indices

    for k in indices:
        for l in indices:
            corners = rhombus_at(families, i, j, k, l, config)
            if corners is None:
                if stats is not None:
                    stats.parallel += 1
                continue
            if not viewport.any_inside(corners):
                if stats is not None:
                    stats.culled += 1
                continue
            if stats is not None:
                stats.emitted += 1
            yield Tile(
                family_i=i,
                family_j=j,
                line_k=k,
                line_l=l,
                corners=corners,
                shape_class=klass,
                color_key=color_key(i, j, k, l, n),
            )


def enumerate_pair(generation: Generation, i: int, j: int) -> Iterator[Tile]:
    """Visible tiles dual to crossings between families ``i`` and ``j``."""
    return _walk_pair(generation, i, j, None)


def enumerate_tiles(generation: Generation, stats: TilingStats | None = None) -> Iterator[Tile]:
    """Lazily yield every visible tile of the generation in canonical order.

    Stopping iteration early abandons the enumeration; calling again restarts
    from the beginning and reproduces the same sequence.
    """
    for i, j in family_pairs(generation.family_count):
        yield from _walk_pair(generation, i, j, stats)


def count_tiles(generation: Generation) -> TilingStats:
    """Exhaust the enumeration and report emitted / culled / parallel crossings."""
    start = time.perf_counter()
    stats = TilingStats()
    for _ in enumerate_tiles(generation, stats):
        pass
    elapsed = (time.perf_counter() - start) * 1000
    logger.info(
        "Enumerated seed=%d N=%d: %d tiles, %d culled, %d parallel in %.1fms",
        generation.seed,
        generation.family_count,
        stats.emitted,
        stats.culled,
        stats.parallel,
        elapsed,
    )
    return stats


def sort_tiles(tiles: "list[Tile] | Iterator[Tile]") -> list[Tile]:
    """Canonical ``(i, j, k, l)`` order for callers needing deterministic draw order."""
    return sorted(tiles, key=lambda t: t.key)


def enumerate_tiles_parallel(generation: Generation, max_workers: int | None = None) -> list[Tile]:
    """Compute each family pair on a worker thread, then restore canonical order."""
    start = time.perf_counter()
    pairs = family_pairs(generation.family_count)

    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        chunks = list(pool.map(lambda p: list(enumerate_pair(generation, *p)), pairs))

    tiles = sort_tiles(t for chunk in chunks for t in chunk)
    elapsed = (time.perf_counter() - start) * 1000
    logger.info("Parallel enumeration: %d tiles over %d pairs in %.1fms", len(tiles), len(pairs), elapsed)
    return tiles


def corner_array(tiles: "list[Tile]") -> np.ndarray:
    """Stack tile corners into a (T, 4, 2) float array for renderers."""
    if not tiles:
        return np.empty((0, 4, 2))
    return np.array([[(p.x, p.y) for p in t.corners] for t in tiles], dtype=np.float64)
