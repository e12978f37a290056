"""pentagrid tiling engine — pure functions from a Generation to rhombi."""

from pentagrid.engine.classifier import color_key, shape_class
from pentagrid.engine.config import TilingConfig
from pentagrid.engine.controls import Control, ViewState, apply_control, export_name, initial_state
from pentagrid.engine.dual import rhombus_at, vertex_from_index
from pentagrid.engine.enumerator import (
    Tile,
    TilingStats,
    count_tiles,
    enumerate_pair,
    enumerate_tiles,
    enumerate_tiles_parallel,
)
from pentagrid.engine.errors import TilingError
from pentagrid.engine.families import LineFamilies, LineFamily, build_families, family_pairs
from pentagrid.engine.generation import Generation, Viewport, build_generation, new_generation
from pentagrid.engine.offsets import generate_offsets
from pentagrid.engine.resolver import cell_index, intersect

__all__ = [
    "Control",
    "Generation",
    "LineFamilies",
    "LineFamily",
    "Tile",
    "TilingConfig",
    "TilingError",
    "TilingStats",
    "ViewState",
    "Viewport",
    "apply_control",
    "build_families",
    "build_generation",
    "cell_index",
    "color_key",
    "count_tiles",
    "enumerate_pair",
    "enumerate_tiles",
    "enumerate_tiles_parallel",
    "export_name",
    "family_pairs",
    "generate_offsets",
    "initial_state",
    "intersect",
    "new_generation",
    "rhombus_at",
    "shape_class",
    "vertex_from_index",
]
