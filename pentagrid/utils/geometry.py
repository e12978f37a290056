"""Leaf-node polygon helpers. No engine imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def closed_ring(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Append the first point if the ring is open."""
    if len(points) == 0 or np.array_equal(points[0], points[-1]):
        return points
    return np.vstack([points, points[:1]])


def signed_area(points: NDArray[np.float64]) -> float:
    """Shoelace formula for signed area. Positive = CCW, Negative = CW."""
    ring = closed_ring(points)
    x = ring[:, 0]
    y = ring[:, 1]
    return float(0.5 * np.sum(x[:-1] * y[1:] - x[1:] * y[:-1]))


def centroid(points: NDArray[np.float64]) -> tuple[float, float]:
    """Vertex centroid of a point set (equals the area centroid for parallelograms)."""
    if len(points) == 0:
        return (0.0, 0.0)
    return (float(np.mean(points[:, 0])), float(np.mean(points[:, 1])))


def sample_grid(
    region: tuple[float, float, float, float],
    samples_per_axis: int,
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Cell-centred sample grid over (xmin, ymin, xmax, ymax); returns flat xs, ys."""
    xmin, ymin, xmax, ymax = region
    step_x = (xmax - xmin) / samples_per_axis
    step_y = (ymax - ymin) / samples_per_axis
    xs = xmin + step_x * (np.arange(samples_per_axis) + 0.5)
    ys = ymin + step_y * (np.arange(samples_per_axis) + 0.5)
    gx, gy = np.meshgrid(xs, ys)
    return gx.ravel(), gy.ravel()
