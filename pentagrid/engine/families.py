"""Line Family Model — normals, edge vectors and line positions per family."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from pentagrid.engine.errors import TilingError
from pentagrid.utils.vector import Vec2


@dataclass(frozen=True)
class LineFamily:
    """One set of parallel, evenly spaced lines sharing a normal direction."""

    index: int
    angle: float
    normal: Vec2
    edge_vector: Vec2
    offset: float


@dataclass(frozen=True)
class LineFamilies:
    """All N families of a multigrid plus the spacing shared between them.

    ``normals``, ``edge_vectors`` and ``offset_array`` are read-only numpy views
    of the same data, used by the vectorised resolver and vertex map.
    """

    families: tuple[LineFamily, ...]
    spacing: float
    edge_length: float

    normals: NDArray[np.float64] = field(init=False, repr=False, compare=False)
    edge_vectors: NDArray[np.float64] = field(init=False, repr=False, compare=False)
    offset_array: NDArray[np.float64] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        normals = np.array([(f.normal.x, f.normal.y) for f in self.families], dtype=np.float64)
        edges = np.array([(f.edge_vector.x, f.edge_vector.y) for f in self.families], dtype=np.float64)
        offsets = np.array([f.offset for f in self.families], dtype=np.float64)
        for arr in (normals, edges, offsets):
            arr.setflags(write=False)
        object.__setattr__(self, "normals", normals)
        object.__setattr__(self, "edge_vectors", edges)
        object.__setattr__(self, "offset_array", offsets)

    def __len__(self) -> int:
        return len(self.families)

    def __getitem__(self, index: int) -> LineFamily:
        return self.families[index]

    @property
    def count(self) -> int:
        return len(self.families)

    def line_offset(self, family: int, k: int) -> float:
        """Signed perpendicular distance from the origin to line ``k`` of ``family``."""
        return (k + self.families[family].offset) * self.spacing

    def are_parallel(self, i: int, j: int) -> bool:
        """True when families i and j share (or oppose) a direction: only for even N."""
        n = len(self.families)
        return n % 2 == 0 and abs(i - j) == n // 2


def build_families(
    family_count: int,
    spacing: float,
    offsets: tuple[float, ...] | list[float],
    edge_length: float | None = None,
) -> LineFamilies:
    """Derive normals at ``i * 2pi/N`` and edge vectors ``normal * edge_length``.

    ``edge_length`` defaults to ``spacing``.
    """
    if family_count < 3:
        raise TilingError(f"Family count must be >= 3, got {family_count}")
    if not math.isfinite(spacing) or spacing <= 0:
        raise TilingError(f"Line spacing must be positive and finite, got {spacing}")
    if len(offsets) != family_count:
        raise TilingError(f"Expected {family_count} offsets, got {len(offsets)}")
    if not all(math.isfinite(o) for o in offsets):
        raise TilingError(f"Offsets must be finite, got {list(offsets)}")

    length = spacing if edge_length is None else edge_length
    if not math.isfinite(length) or length <= 0:
        raise TilingError(f"Edge length must be positive and finite, got {length}")

    step = 2 * math.pi / family_count
    families = []
    for i in range(family_count):
        angle = step * i
        normal = Vec2.polar(angle)
        families.append(
            LineFamily(
                index=i,
                angle=angle,
                normal=normal,
                edge_vector=normal.scale(length),
                offset=float(offsets[i]),
            )
        )
    return LineFamilies(families=tuple(families), spacing=float(spacing), edge_length=float(length))


def family_pairs(family_count: int) -> list[tuple[int, int]]:
    """Unordered family pairs (i < j) in ascending order."""
    return [(i, j) for i in range(family_count) for j in range(i + 1, family_count)]
