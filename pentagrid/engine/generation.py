"""Generation — the immutable tuple that fully determines one tile set.

``(seed, family_count, spacing, offsets, line_range, viewport)`` plus the line
families derived from them. Equal generations always enumerate identical
tiles; any parameter change produces a new Generation.
"""

from __future__ import annotations

import dataclasses
import logging
import math
from dataclasses import dataclass, field

from pentagrid.engine.config import DEFAULT_CONFIG, TilingConfig
from pentagrid.engine.errors import TilingError
from pentagrid.engine.families import LineFamilies, build_families
from pentagrid.engine.offsets import check_seed, closure_error, generate_offsets, make_rng
from pentagrid.utils.vector import Vec2

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Viewport:
    """Visible area centred on the origin.

    Tiles are kept when a corner falls strictly inside the window
    ``|x| < width * margin, |y| < height * margin``.
    """

    width: float
    height: float
    margin: float = DEFAULT_CONFIG.viewport_margin

    def __post_init__(self) -> None:
        for name in ("width", "height", "margin"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise TilingError(f"Viewport {name} must be positive and finite, got {value}")

    @property
    def min_dimension(self) -> float:
        return min(self.width, self.height)

    @property
    def limits(self) -> tuple[float, float]:
        return (self.width * self.margin, self.height * self.margin)

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """Culling window as (xmin, ymin, xmax, ymax)."""
        lx, ly = self.limits
        return (-lx, -ly, lx, ly)

    def contains(self, point: Vec2) -> bool:
        lx, ly = self.limits
        return abs(point.x) < lx and abs(point.y) < ly

    def any_inside(self, points: "tuple[Vec2, ...] | list[Vec2]") -> bool:
        return any(self.contains(p) for p in points)


@dataclass(frozen=True)
class Generation:
    seed: int
    family_count: int
    spacing: float
    offsets: tuple[float, ...]
    line_range: int
    viewport: Viewport
    families: LineFamilies = field(repr=False, compare=False)
    config: TilingConfig = field(default=DEFAULT_CONFIG, repr=False, compare=False)

    @property
    def line_indices(self) -> range:
        """Line indices ``-line_range .. line_range`` inclusive."""
        return range(-self.line_range, self.line_range + 1)

    @property
    def edge_length(self) -> float:
        return self.families.edge_length

    def replace(self, **changes) -> "Generation":
        """New Generation with fields changed; families are rebuilt from the result."""
        params = {
            "seed": self.seed,
            "family_count": self.family_count,
            "spacing": self.spacing,
            "line_range": self.line_range,
            "viewport": self.viewport,
            "offsets": self.offsets,
            "config": self.config,
        }
        unknown = set(changes) - set(params)
        if unknown:
            raise TilingError(f"Unknown generation fields: {sorted(unknown)}")
        params.update(changes)
        return build_generation(**params)

    def summary(self) -> dict:
        return {
            "seed": self.seed,
            "family_count": self.family_count,
            "spacing": self.spacing,
            "line_range": self.line_range,
            "offsets": list(self.offsets),
            "viewport": dataclasses.asdict(self.viewport),
        }


def derive_spacing(viewport: Viewport, config: TilingConfig = DEFAULT_CONFIG) -> float:
    return max(config.min_spacing, viewport.min_dimension / config.spacing_divisor)


def derive_line_range(
    viewport: Viewport,
    spacing: float,
    config: TilingConfig = DEFAULT_CONFIG,
) -> int:
    raw = math.ceil(viewport.min_dimension / spacing) + config.line_range_padding
    return clamp(raw, config.min_line_range, config.max_line_range)


def clamp(value: int, lo: int, hi: int) -> int:
    return max(lo, min(value, hi))


def build_generation(
    seed: int,
    family_count: int,
    spacing: float,
    line_range: int,
    viewport: Viewport,
    offsets: tuple[float, ...] | list[float] | None = None,
    config: TilingConfig | None = None,
) -> Generation:
    """Assemble a Generation from explicit parameters (no clamping).

    Offsets are drawn from a generator seeded with ``seed`` unless given.
    """
    config = config or DEFAULT_CONFIG
    if isinstance(family_count, bool) or not isinstance(family_count, int) or family_count < 3:
        raise TilingError(f"Family count must be an integer >= 3, got {family_count!r}")
    if isinstance(line_range, bool) or not isinstance(line_range, int) or line_range < 0:
        raise TilingError(f"Line range must be a non-negative integer, got {line_range!r}")

    if offsets is None:
        offsets = generate_offsets(family_count, make_rng(seed))
    else:
        check_seed(seed)
        offsets = tuple(float(o) for o in offsets)

    families = build_families(family_count, spacing, offsets)
    generation = Generation(
        seed=int(seed),
        family_count=family_count,
        spacing=float(spacing),
        offsets=tuple(offsets),
        line_range=line_range,
        viewport=viewport,
        families=families,
        config=config,
    )
    logger.debug(
        "Generation seed=%d N=%d spacing=%.3f range=%d closure_err=%.2e",
        generation.seed,
        family_count,
        generation.spacing,
        line_range,
        closure_error(generation.offsets),
    )
    return generation


def new_generation(
    seed: int,
    family_count: int,
    viewport_size: "Viewport | tuple[float, float]",
    line_range: int | None = None,
    config: TilingConfig | None = None,
) -> Generation:
    """Generation for a viewport: spacing and line range follow its smaller side."""
    config = config or DEFAULT_CONFIG
    if isinstance(viewport_size, Viewport):
        viewport = viewport_size
    else:
        width, height = viewport_size
        viewport = Viewport(float(width), float(height), margin=config.viewport_margin)

    spacing = derive_spacing(viewport, config)
    if line_range is None:
        line_range = derive_line_range(viewport, spacing, config)
    return build_generation(seed, family_count, spacing, line_range, viewport, config=config)
