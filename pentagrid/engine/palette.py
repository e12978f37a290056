"""Tile palettes — presentation only, no effect on geometry."""

from __future__ import annotations

from dataclasses import dataclass

from pentagrid.engine.classifier import ShapeClass
from pentagrid.engine.errors import TilingError


@dataclass(frozen=True)
class Palette:
    name: str
    thick: str
    thin: str
    # Per-pair accents indexed by color key (cycled)
    accents: tuple[str, ...] = ()
    stroke: str = "#0d0f1a"
    background: str = "#0c0e18"

    def fill(self, shape_class: ShapeClass, color_key: int = 0) -> str:
        if self.accents:
            return self.accents[color_key % len(self.accents)]
        return self.thick if shape_class == "thick" else self.thin


PALETTES: dict[str, Palette] = {
    "sunset": Palette(name="sunset", thick="#ee964b", thin="#f4d35e"),
    "ocean": Palette(name="ocean", thick="#1d4e89", thin="#7dcfb6"),
    "mono": Palette(name="mono", thick="#d9d9d9", thin="#8c8c8c", stroke="#202020", background="#ffffff"),
    "spectrum": Palette(
        name="spectrum",
        thick="#ee964b",
        thin="#f4d35e",
        accents=(
            "#ef476f", "#f78c6b", "#ffd166", "#83d483", "#06d6a0",
            "#0cb0a9", "#118ab2", "#073b4c", "#8e7dbe", "#f2a1b3",
        ),
    ),
}

DEFAULT_PALETTE = "sunset"


def get_palette(name: str) -> Palette:
    try:
        return PALETTES[name]
    except KeyError:
        raise TilingError(f"Unknown palette {name!r}; choose from {sorted(PALETTES)}") from None


def next_palette(name: str) -> str:
    """Name of the palette after ``name`` in declaration order (wraps around)."""
    names = list(PALETTES)
    get_palette(name)
    return names[(names.index(name) + 1) % len(names)]
