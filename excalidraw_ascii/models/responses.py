"""API response models."""

from __future__ import annotations

from pydantic import BaseModel

from excalidraw_ascii import __version__
from excalidraw_ascii.engine.formatter import RenderResult


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = __version__
    environment: str = "development"


class RenderResponse(BaseModel):
    text: str
    stats: str
    grid_width: int = 0
    grid_height: int = 0
    element_count: int = 0

    @classmethod
    def from_result(cls, result: RenderResult) -> RenderResponse:
        return cls(
            text=result.text,
            stats=result.stats,
            grid_width=result.grid_width,
            grid_height=result.grid_height,
            element_count=result.element_count,
        )
