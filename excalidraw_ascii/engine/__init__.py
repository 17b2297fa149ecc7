"""Excalidraw → ASCII rendering engine."""

from excalidraw_ascii.engine.config import RenderOptions
from excalidraw_ascii.engine.formatter import RenderResult
from excalidraw_ascii.engine.mapper import GridTooLargeError
from excalidraw_ascii.engine.renderer import render

__all__ = [
    "GridTooLargeError",
    "RenderOptions",
    "RenderResult",
    "render",
]
