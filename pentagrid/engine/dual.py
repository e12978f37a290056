"""Dual Vertex & Rhombus Constructor.

A multi-index ``K`` maps to the planar vertex ``sum_i K_i * e_i`` where ``e_i``
is the edge vector of family ``i``. Every crossing of line ``k`` (family i)
with line ``l`` (family j) is dual to the rhombus spanned by ``e_i`` and
``e_j`` whose first corner is the image of the crossing's multi-index with
components i and j pinned to ``k`` and ``l``.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from pentagrid.engine.config import DEFAULT_CONFIG, TilingConfig
from pentagrid.engine.errors import TilingError
from pentagrid.engine.families import LineFamilies
from pentagrid.engine.resolver import MultiIndex, cell_index, intersect_lines
from pentagrid.utils.vector import Vec2

Corners = tuple[Vec2, Vec2, Vec2, Vec2]


def vertex_from_index(index: Sequence[int], families: LineFamilies) -> Vec2:
    """Linear combination of the family edge vectors weighted by ``index``."""
    if len(index) != len(families):
        raise TilingError(f"Multi-index has {len(index)} components, expected {len(families)}")
    out = np.asarray(index, dtype=np.float64) @ families.edge_vectors
    return Vec2(float(out[0]), float(out[1]))


def crossing_index(
    families: LineFamilies,
    i: int,
    j: int,
    k: int,
    l: int,
    config: TilingConfig = DEFAULT_CONFIG,
) -> MultiIndex | None:
    """Multi-index of the crossing with the two active components set exactly."""
    point = intersect_lines(families, i, k, j, l, config)
    if point is None:
        return None
    index = list(cell_index(point, families, config))
    index[i] = k
    index[j] = l
    return tuple(index)


def _check_pair(families: LineFamilies, i: int, j: int) -> None:
    n = len(families)
    if not (0 <= i < n and 0 <= j < n):
        raise TilingError(f"Family pair ({i}, {j}) out of range for N={n}")
    if i == j:
        raise TilingError(f"A rhombus needs two distinct families, got ({i}, {j})")


def rhombus_at(
    families: LineFamilies,
    i: int,
    j: int,
    k: int,
    l: int,
    config: TilingConfig = DEFAULT_CONFIG,
) -> Corners | None:
    """Four corners of the rhombus dual to line ``k`` of ``i`` crossing line ``l`` of ``j``.

    Corners are ``v0, v0+e_i, v0+e_i+e_j, v0+e_j``. The ring runs counter-clockwise
    when ``e_i x e_j > 0`` and clockwise otherwise, so the winding is fixed per
    family pair but not across pairs. Returns ``None`` when the two families are
    parallel.
    """
    _check_pair(families, i, j)
    index = crossing_index(families, i, j, k, l, config)
    if index is None:
        return None

    e_i = families[i].edge_vector
    e_j = families[j].edge_vector
    v0 = vertex_from_index(index, families)
    v1 = v0 + e_i
    v2 = v1 + e_j
    v3 = v0 + e_j
    corners = (v0, v1, v2, v3)

    if not all(p.is_finite() for p in corners):
        raise TilingError(f"Non-finite rhombus corners for (i={i}, j={j}, k={k}, l={l})")
    return corners
