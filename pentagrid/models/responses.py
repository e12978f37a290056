"""API response models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    env: str = "development"


class ViewportModel(BaseModel):
    width: float
    height: float
    margin: float


class GenerationResponse(BaseModel):
    seed: int
    family_count: int
    spacing: float
    line_range: int
    offsets: list[float]
    viewport: ViewportModel


class TileModel(BaseModel):
    family_i: int
    family_j: int
    line_k: int
    line_l: int
    corners: list[list[float]]
    shape_class: Literal["thick", "thin"]
    color_key: int
    fill: str = ""


class TilesResponse(BaseModel):
    generation: GenerationResponse
    tiles: list[TileModel] = Field(default_factory=list)
    count: int = 0
    truncated: bool = False
    processing_time_ms: float = 0.0


class ControlResponse(BaseModel):
    generation: GenerationResponse
    palette: str
    export_name: str
