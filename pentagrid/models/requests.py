"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from pentagrid.engine.config import DEFAULT_CONFIG
from pentagrid.engine.controls import Control

_MIN_FAMILIES = DEFAULT_CONFIG.min_family_count
_MAX_FAMILIES = DEFAULT_CONFIG.max_family_count
_MAX_LINE_RANGE = DEFAULT_CONFIG.max_line_range


class GenerationRequest(BaseModel):
    seed: int = Field(default=1, ge=0, description="Seed for the offset generator")
    family_count: int | None = Field(
        default=None,
        ge=_MIN_FAMILIES,
        le=_MAX_FAMILIES,
        description="Number of line families (N)",
    )
    width: float | None = Field(default=None, gt=0, description="Viewport width")
    height: float | None = Field(default=None, gt=0, description="Viewport height")
    line_range: int | None = Field(
        default=None,
        ge=0,
        le=_MAX_LINE_RANGE,
        description="Lines per family on each side of the origin; derived from the viewport if omitted",
    )


class TilesRequest(GenerationRequest):
    palette: str = Field(default="sunset", description="Palette used to resolve tile fills")


class StateModel(BaseModel):
    seed: int = Field(default=1, ge=0)
    family_count: int = Field(default=5, ge=_MIN_FAMILIES, le=_MAX_FAMILIES)
    width: float = Field(default=1280.0, gt=0)
    height: float = Field(default=800.0, gt=0)
    line_range: int | None = Field(default=None, ge=0, le=_MAX_LINE_RANGE)
    palette: str = "sunset"


class ControlRequest(BaseModel):
    state: StateModel = Field(default_factory=StateModel)
    action: Control = Field(..., description="Shell action to apply")
    width: float | None = Field(default=None, gt=0, description="New width (resize only)")
    height: float | None = Field(default=None, gt=0, description="New height (resize only)")
