"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from pentagrid import __version__
from pentagrid.config import Settings
from pentagrid.dependencies import get_settings
from pentagrid.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(cfg: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(status="ok", version=__version__, env=cfg.pentagrid_env)
