"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from excalidraw_ascii.engine.config import RenderOptions
from excalidraw_ascii.models.document import ExcalidrawDocument


class RenderRequest(BaseModel):
    document: ExcalidrawDocument = Field(..., description="Parsed Excalidraw JSON object")
    options: RenderOptions = Field(default_factory=RenderOptions)


class RenderFileRequest(BaseModel):
    filename: str = Field(..., description="Original file name (.excalidraw or .json)")
    content: str = Field(..., description="Raw file contents")
    options: RenderOptions = Field(default_factory=RenderOptions)
