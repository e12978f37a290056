"""Vec2 — immutable 2D point/vector value type. No engine imports."""

from __future__ import annotations

import math
from typing import NamedTuple

import numpy as np
from numpy.typing import NDArray


class Vec2(NamedTuple):
    x: float
    y: float

    def __add__(self, other: "Vec2") -> "Vec2":  # type: ignore[override]
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def scale(self, factor: float) -> "Vec2":
        return Vec2(self.x * factor, self.y * factor)

    def dot(self, other: "Vec2") -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Vec2") -> float:
        """z-component of the 3D cross product (2x2 determinant)."""
        return self.x * other.y - self.y * other.x

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def isclose(self, other: "Vec2", abs_tol: float = 1e-9) -> bool:
        return math.isclose(self.x, other.x, abs_tol=abs_tol) and math.isclose(
            self.y, other.y, abs_tol=abs_tol
        )

    @classmethod
    def polar(cls, angle: float, radius: float = 1.0) -> "Vec2":
        return cls(radius * math.cos(angle), radius * math.sin(angle))


ORIGIN = Vec2(0.0, 0.0)


def as_array(points: "list[Vec2] | tuple[Vec2, ...]") -> NDArray[np.float64]:
    """Stack points into an Nx2 float array."""
    if len(points) == 0:
        return np.empty((0, 2))
    return np.array([(p.x, p.y) for p in points], dtype=np.float64)
