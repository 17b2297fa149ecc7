"""Render an Excalidraw document to a monospace character grid.

Pure and synchronous: the same document and options always give the same
text and stats. Each call owns a fresh canvas.
"""

from __future__ import annotations

import logging

from excalidraw_ascii.engine.bounds import compute_bounds
from excalidraw_ascii.engine.canvas import GridCanvas
from excalidraw_ascii.engine.config import RenderOptions
from excalidraw_ascii.engine.formatter import RenderResult, format_output
from excalidraw_ascii.engine.mapper import CoordinateMapper
from excalidraw_ascii.engine.rasterizer import ShapeRasterizer, index_by_id
from excalidraw_ascii.engine.zorder import z_sorted
from excalidraw_ascii.models.document import ExcalidrawDocument

logger = logging.getLogger(__name__)


def render(
    document: ExcalidrawDocument,
    options: RenderOptions | None = None,
    *,
    max_cells: int | None = None,
) -> RenderResult:
    """Render ``document`` and return the trimmed grid text with its stats line.

    Raises GridTooLargeError when the scaled grid is unbounded or has more
    than ``max_cells`` cells. Nothing is allocated in that case.
    """
    options = options or RenderOptions()
    elements = document.elements

    bounds = compute_bounds(elements)
    if bounds is None:
        logger.debug("Render skipped: document has no elements")
        return RenderResult.empty()

    bounds = bounds.padded()
    mapper = CoordinateMapper.for_bounds(bounds, options.scale)
    grid_w, grid_h = mapper.grid_size(bounds, max_cells)
    canvas = GridCanvas(grid_w, grid_h)

    rasterizer = ShapeRasterizer(canvas, mapper, options, index_by_id(elements))
    for el in z_sorted(elements):
        rasterizer.draw(el)

    result = format_output(canvas.rows(), len(elements), grid_w, grid_h)
    logger.debug(
        "Rendered %d elements into %d×%d grid (scale=%.2f)",
        len(elements),
        grid_w,
        grid_h,
        options.scale,
    )
    return result
