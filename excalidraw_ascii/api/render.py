"""POST /api/render — Excalidraw document → ASCII grid.

Every request is a full, independent render; nothing is kept between calls.
"""

from __future__ import annotations

import asyncio
import functools
import logging

from fastapi import APIRouter, Depends, HTTPException

from excalidraw_ascii.config import Settings
from excalidraw_ascii.dependencies import get_settings
from excalidraw_ascii.engine.config import RenderOptions
from excalidraw_ascii.engine.mapper import GridTooLargeError
from excalidraw_ascii.engine.renderer import render
from excalidraw_ascii.excalidraw.loader import DocumentLoadError, check_filename, parse_document
from excalidraw_ascii.models.document import ExcalidrawDocument
from excalidraw_ascii.models.requests import RenderFileRequest, RenderRequest
from excalidraw_ascii.models.responses import RenderResponse

router = APIRouter()
logger = logging.getLogger(__name__)


async def _render_off_loop(
    document: ExcalidrawDocument, options: RenderOptions, settings: Settings
) -> RenderResponse:
    """Run the synchronous renderer in a worker thread, capped at the configured grid size."""
    job = functools.partial(render, document, options, max_cells=settings.max_grid_cells)
    try:
        result = await asyncio.get_running_loop().run_in_executor(None, job)
    except GridTooLargeError as e:
        logger.info("Rejected render: %s", e)
        raise HTTPException(status_code=413, detail=str(e)) from e
    return RenderResponse.from_result(result)


@router.post("/render", response_model=RenderResponse)
async def render_document(
    req: RenderRequest, settings: Settings = Depends(get_settings)
) -> RenderResponse:
    return await _render_off_loop(req.document, req.options, settings)


@router.post("/render/file", response_model=RenderResponse)
async def render_file(
    req: RenderFileRequest, settings: Settings = Depends(get_settings)
) -> RenderResponse:
    """Same flow as a file upload: check the name, parse the contents, render."""
    try:
        check_filename(req.filename)
        document = parse_document(req.content)
    except DocumentLoadError as e:
        logger.info("Rejected %r: %s", req.filename, e)
        raise HTTPException(status_code=400, detail=str(e)) from e

    return await _render_off_loop(document, req.options, settings)
