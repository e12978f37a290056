"""Tiling configuration — numeric constants and control clamps."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class TilingConfig:
    """Constants shared by every stage of the dual construction."""

    # Family count bounds for interactive controls (the math holds for any N >= 3)
    min_family_count: int = 3
    max_family_count: int = 10

    # Line range bounds for interactive controls
    min_line_range: int = 6
    max_line_range: int = 24

    # spacing = max(min_spacing, min(viewport) / spacing_divisor)
    spacing_divisor: float = 18.0
    min_spacing: float = 40.0

    # line_range = ceil(min(viewport) / spacing) + line_range_padding, then clamped
    line_range_padding: int = 10

    # Culling window half-extent as a fraction of the viewport size
    viewport_margin: float = 0.55

    # |det| below this means the two families are parallel
    parallel_epsilon: float = 1e-6
    # Pushes points lying exactly on a line into the upper strip
    strip_bias: float = 1e-9

    # Acute inter-family angle above this is "thick" (36 deg)
    thick_threshold: float = math.pi / 5

    # Tolerance for closure checks on emitted tiles, relative to spacing
    closure_tolerance: float = 1e-9


DEFAULT_CONFIG = TilingConfig()
