"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from excalidraw_ascii.config import Settings
from excalidraw_ascii.dependencies import get_settings
from excalidraw_ascii.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(status="ok", environment=settings.excalidraw_ascii_env)
