"""Tile Classifier — shape class and deterministic colour key.

The shape class follows from the acute angle between the two families'
directions: above pi/5 the rhombus is "thick", otherwise "thin". For N = 5
this yields the two Penrose rhombi (72 deg thick, 36 deg thin); for other N the
same rule still picks the smaller of the two angle representations.
"""

from __future__ import annotations

import math
from typing import Literal

from pentagrid.engine.config import DEFAULT_CONFIG, TilingConfig
from pentagrid.engine.errors import TilingError

ShapeClass = Literal["thick", "thin"]

SHAPE_CLASSES: tuple[ShapeClass, ShapeClass] = ("thick", "thin")

# Angles are multiples of 2pi/N; this keeps exact-threshold pairs (N=5, |i-j|=2) stable.
_ANGLE_TOL = 1e-12


def acute_angle(i: int, j: int, family_count: int) -> float:
    """Acute angle (radians) between the directions of families i and j."""
    if family_count < 3:
        raise TilingError(f"Family count must be >= 3, got {family_count}")
    delta = abs(i - j)
    angle = min(delta, family_count - delta) * (2 * math.pi / family_count)
    return min(angle, math.pi - angle)


def shape_class(
    i: int,
    j: int,
    family_count: int,
    config: TilingConfig = DEFAULT_CONFIG,
) -> ShapeClass:
    """Return thick when the acute inter-family angle exceeds the threshold, else thin."""
    acute = acute_angle(i, j, family_count)
    return "thick" if acute > config.thick_threshold + _ANGLE_TOL else "thin"


def color_key(i: int, j: int, k: int, l: int, family_count: int) -> int:
    """Palette index for a tile: position of its family pair in ascending pair order.

    ``k`` and ``l`` are accepted so the key stays a function of the full tile
    identity; tiles of the same pair share a colour.
    """
    a, b = (i, j) if i < j else (j, i)
    if a == b or a < 0 or b >= family_count:
        raise TilingError(f"Invalid family pair ({i}, {j}) for N={family_count}")
    return a * family_count - a * (a + 1) // 2 + (b - a - 1)
