"""Generation, tile enumeration and control endpoints."""

from __future__ import annotations

import itertools
import json
import logging
import time
from collections.abc import Iterator

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from pentagrid.config import Settings
from pentagrid.dependencies import get_settings
from pentagrid.engine.controls import ViewState, apply_control, export_name
from pentagrid.engine.enumerator import Tile, enumerate_tiles
from pentagrid.engine.errors import TilingError
from pentagrid.engine.families import family_pairs
from pentagrid.engine.generation import Generation, new_generation
from pentagrid.engine.palette import Palette, get_palette
from pentagrid.models.requests import ControlRequest, GenerationRequest, TilesRequest
from pentagrid.models.responses import (
    ControlResponse,
    GenerationResponse,
    TileModel,
    TilesResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _check_crossing_budget(gen: Generation, cfg: Settings) -> None:
    crossings = len(family_pairs(gen.family_count)) * len(gen.line_indices) ** 2
    if crossings > cfg.max_crossings_per_request:
        raise TilingError(
            f"Request would walk {crossings} line crossings, "
            f"limit is {cfg.max_crossings_per_request}; lower family_count or line_range"
        )


def _generation_from_request(req: GenerationRequest, cfg: Settings) -> Generation:
    gen = new_generation(
        req.seed,
        req.family_count or cfg.default_family_count,
        (req.width or cfg.default_viewport_width, req.height or cfg.default_viewport_height),
        line_range=req.line_range,
    )
    _check_crossing_budget(gen, cfg)
    return gen


def _tile_model(tile: Tile, palette: Palette) -> TileModel:
    return TileModel(**tile.as_dict(), fill=palette.fill(tile.shape_class, tile.color_key))


@router.post("/generation", response_model=GenerationResponse)
async def generation(req: GenerationRequest, cfg: Settings = Depends(get_settings)) -> GenerationResponse:
    gen = _generation_from_request(req, cfg)
    return GenerationResponse(**gen.summary())


@router.post("/tiles", response_model=TilesResponse)
def tiles(req: TilesRequest, cfg: Settings = Depends(get_settings)) -> TilesResponse:
    start = time.perf_counter()
    palette = get_palette(req.palette)
    gen = _generation_from_request(req, cfg)

    limit = cfg.max_tiles_per_request
    batch = list(itertools.islice(enumerate_tiles(gen), limit + 1))
    truncated = len(batch) > limit
    if truncated:
        batch = batch[:limit]
        logger.warning("Tile request truncated at %d tiles (seed=%d)", limit, gen.seed)

    elapsed = (time.perf_counter() - start) * 1000
    return TilesResponse(
        generation=GenerationResponse(**gen.summary()),
        tiles=[_tile_model(t, palette) for t in batch],
        count=len(batch),
        truncated=truncated,
        processing_time_ms=round(elapsed, 1),
    )


def _stream_tiles(gen: Generation, palette: Palette) -> Iterator[str]:
    """Server-sent events: one ``tile`` event per rhombus, then ``done``."""
    meta = GenerationResponse(**gen.summary()).model_dump()
    yield f"event: generation\ndata: {json.dumps(meta)}\n\n"

    count = 0
    for tile in enumerate_tiles(gen):
        count += 1
        yield f"event: tile\ndata: {_tile_model(tile, palette).model_dump_json()}\n\n"

    yield f"event: done\ndata: {json.dumps({'type': 'done', 'count': count})}\n\n"


@router.post("/tiles/stream")
def tiles_stream(req: TilesRequest, cfg: Settings = Depends(get_settings)) -> StreamingResponse:
    palette = get_palette(req.palette)
    gen = _generation_from_request(req, cfg)
    return StreamingResponse(
        _stream_tiles(gen, palette),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",
        },
    )


@router.post("/control", response_model=ControlResponse)
async def control(req: ControlRequest) -> ControlResponse:
    s = req.state
    state = ViewState(
        generation=new_generation(s.seed, s.family_count, (s.width, s.height), line_range=s.line_range),
        palette=s.palette,
    )
    state = apply_control(state, req.action, width=req.width, height=req.height)
    return ControlResponse(
        generation=GenerationResponse(**state.generation.summary()),
        palette=state.palette,
        export_name=export_name(state),
    )
