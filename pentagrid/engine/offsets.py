"""Offset Generator — one phase offset per line family, summing to 0 (mod 1).

The sum-zero constraint places the multigrid in the family that yields the
classic Penrose tiling for N = 5. Randomness comes from an explicit
``numpy.random.Generator`` so the same seed always reproduces the same grid.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from pentagrid.engine.errors import TilingError

logger = logging.getLogger(__name__)


def check_seed(seed: int) -> None:
    """Raise TilingError unless ``seed`` is a non-negative integer."""
    if isinstance(seed, bool) or not isinstance(seed, (int, np.integer)):
        raise TilingError(f"Seed must be an integer, got {seed!r}")
    if seed < 0:
        raise TilingError(f"Seed must be non-negative, got {seed}")


def make_rng(seed: int) -> np.random.Generator:
    """Fresh generator keyed by ``seed``; never shared between generations."""
    check_seed(seed)
    return np.random.default_rng(int(seed))


def generate_offsets(family_count: int, rng: np.random.Generator) -> tuple[float, ...]:
    """Draw N-1 uniform offsets and close the last one so the sum is 0 (mod 1)."""
    if family_count < 1:
        raise TilingError(f"Family count must be positive, got {family_count}")

    base = [float(v) for v in rng.random(family_count - 1)]
    total = math.fsum(base)
    last = (1.0 - (total % 1.0)) % 1.0
    offsets = tuple(base + [last])

    for value in offsets:
        if not math.isfinite(value):
            raise TilingError(f"Non-finite offset generated: {offsets}")

    logger.debug("Offsets (N=%d): %s", family_count, ", ".join(f"{v:.6f}" for v in offsets))
    return offsets


def offsets_for_seed(seed: int, family_count: int) -> tuple[float, ...]:
    """Convenience wrapper: offsets for a seed with a freshly seeded generator."""
    return generate_offsets(family_count, make_rng(seed))


def closure_error(offsets: tuple[float, ...] | list[float]) -> float:
    """Distance of ``sum(offsets)`` from the nearest integer."""
    frac = math.fsum(offsets) % 1.0
    return min(frac, 1.0 - frac)
