"""Intersection & Cell-Index Resolver.

``intersect`` solves the 2x2 system ``n1·p = d1, n2·p = d2``. Parallel or
anti-parallel families give ``None``, which callers treat as "no tile here".

``cell_index`` classifies a point into the strip it occupies in every family:
the multi-index that the dual construction turns into a vertex.
"""

from __future__ import annotations

import math

import numpy as np

from pentagrid.engine.config import DEFAULT_CONFIG, TilingConfig
from pentagrid.engine.errors import TilingError
from pentagrid.engine.families import LineFamilies
from pentagrid.utils.vector import Vec2

MultiIndex = tuple[int, ...]


def intersect(
    normal1: Vec2,
    offset1: float,
    normal2: Vec2,
    offset2: float,
    epsilon: float = DEFAULT_CONFIG.parallel_epsilon,
) -> Vec2 | None:
    """Intersection of the lines ``normal1·p = offset1`` and ``normal2·p = offset2``."""
    det = normal1.x * normal2.y - normal1.y * normal2.x
    if abs(det) < epsilon:
        return None
    x = (offset1 * normal2.y - offset2 * normal1.y) / det
    y = (normal1.x * offset2 - normal2.x * offset1) / det
    point = Vec2(x, y)
    if not point.is_finite():
        raise TilingError(
            f"Non-finite intersection for offsets ({offset1}, {offset2}) with det={det:.3e}"
        )
    return point


def intersect_lines(
    families: LineFamilies,
    i: int,
    k: int,
    j: int,
    l: int,
    config: TilingConfig = DEFAULT_CONFIG,
) -> Vec2 | None:
    """Crossing point of line ``k`` of family ``i`` with line ``l`` of family ``j``."""
    return intersect(
        families[i].normal,
        families.line_offset(i, k),
        families[j].normal,
        families.line_offset(j, l),
        epsilon=config.parallel_epsilon,
    )


def strip_positions(point: Vec2, families: LineFamilies) -> np.ndarray:
    """Continuous per-family coordinate ``(normal·p)/spacing - offset`` of a point."""
    proj = families.normals @ np.array([point.x, point.y], dtype=np.float64)
    return proj / families.spacing - families.offset_array


def cell_index(
    point: Vec2,
    families: LineFamilies,
    config: TilingConfig = DEFAULT_CONFIG,
) -> MultiIndex:
    """Strip index of ``point`` in every family.

    A point exactly on a line belongs to the strip on its upper side.
    """
    if not point.is_finite():
        raise TilingError(f"Cannot classify non-finite point {point}")
    t = strip_positions(point, families)
    return tuple(int(v) for v in np.ceil(t - config.strip_bias))


def lies_on_line(
    point: Vec2,
    families: LineFamilies,
    family: int,
    tolerance: float = 1e-7,
) -> bool:
    """True if the point sits on some line of ``family`` (within tolerance, in strip units)."""
    t = float(strip_positions(point, families)[family])
    return math.isclose(t, round(t), abs_tol=tolerance)
