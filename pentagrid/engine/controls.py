"""Parameter controls — translate shell actions into a new Generation.

Nothing is mutated: every action returns a fresh ViewState. Family count and
line range are clamped to the configured bounds. A family-count change
re-derives spacing and line range from the viewport, changing the line range
keeps the offsets, reseeding advances the seed and redraws them.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

from pentagrid.engine.errors import TilingError
from pentagrid.engine.generation import (
    Generation,
    Viewport,
    build_generation,
    clamp,
    derive_line_range,
    derive_spacing,
    new_generation,
)
from pentagrid.engine.palette import DEFAULT_PALETTE, get_palette, next_palette

logger = logging.getLogger(__name__)


class Control(str, enum.Enum):
    FAMILIES_UP = "families_up"
    FAMILIES_DOWN = "families_down"
    LINES_UP = "lines_up"
    LINES_DOWN = "lines_down"
    RESEED = "reseed"
    RESIZE = "resize"
    NEXT_PALETTE = "next_palette"


@dataclass(frozen=True)
class ViewState:
    """What the shell holds between frames: the generation plus presentation choices."""

    generation: Generation
    palette: str = DEFAULT_PALETTE

    def __post_init__(self) -> None:
        get_palette(self.palette)


def initial_state(
    seed: int = 1,
    family_count: int = 5,
    viewport_size: "tuple[float, float]" = (1280.0, 800.0),
    palette: str = DEFAULT_PALETTE,
) -> ViewState:
    return ViewState(generation=new_generation(seed, family_count, viewport_size), palette=palette)


def _with_family_count(gen: Generation, family_count: int) -> Generation:
    cfg = gen.config
    family_count = clamp(family_count, cfg.min_family_count, cfg.max_family_count)
    if family_count == gen.family_count:
        return gen
    return new_generation(gen.seed, family_count, gen.viewport, config=cfg)


def _with_line_range(gen: Generation, line_range: int) -> Generation:
    cfg = gen.config
    line_range = clamp(line_range, cfg.min_line_range, cfg.max_line_range)
    if line_range == gen.line_range:
        return gen
    return gen.replace(line_range=line_range)


def _resized(gen: Generation, width: float, height: float) -> Generation:
    cfg = gen.config
    viewport = Viewport(float(width), float(height), margin=gen.viewport.margin)
    spacing = derive_spacing(viewport, cfg)
    return gen.replace(
        viewport=viewport,
        spacing=spacing,
        line_range=derive_line_range(viewport, spacing, cfg),
    )


def apply_control(
    state: ViewState,
    action: "Control | str",
    width: float | None = None,
    height: float | None = None,
) -> ViewState:
    """Return the state that results from one shell action."""
    action = Control(action)
    gen = state.generation

    if action is Control.FAMILIES_UP:
        gen = _with_family_count(gen, gen.family_count + 1)
    elif action is Control.FAMILIES_DOWN:
        gen = _with_family_count(gen, gen.family_count - 1)
    elif action is Control.LINES_UP:
        gen = _with_line_range(gen, gen.line_range + 1)
    elif action is Control.LINES_DOWN:
        gen = _with_line_range(gen, gen.line_range - 1)
    elif action is Control.RESEED:
        gen = build_generation(
            gen.seed + 1, gen.family_count, gen.spacing, gen.line_range, gen.viewport, config=gen.config
        )
    elif action is Control.RESIZE:
        if width is None or height is None:
            raise TilingError("Resize requires both width and height")
        gen = _resized(gen, width, height)
    elif action is Control.NEXT_PALETTE:
        return ViewState(generation=gen, palette=next_palette(state.palette))

    logger.debug(
        "Control %s -> seed=%d N=%d range=%d spacing=%.2f",
        action.value,
        gen.seed,
        gen.family_count,
        gen.line_range,
        gen.spacing,
    )
    return ViewState(generation=gen, palette=state.palette)


def export_name(state: ViewState) -> str:
    """File stem the shell uses when saving the rendered image."""
    return f"penrose-pentagrid-{state.generation.seed}"
