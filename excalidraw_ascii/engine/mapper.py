"""Document-to-grid projection.

A monospace cell is roughly twice as tall as it is wide, so one column covers
8 document units and one row covers 16. Every rasterizer goes through
``CoordinateMapper.to_grid``; nothing else converts coordinates.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from excalidraw_ascii.engine.bounds import Bounds

CELL_WIDTH = 8
CELL_HEIGHT = 16


class GridTooLargeError(ValueError):
    """Raised when the scaled document needs more cells than can be allocated."""


@dataclass(frozen=True)
class CoordinateMapper:
    origin_x: float
    origin_y: float
    scale: float = 1.0

    @classmethod
    def for_bounds(cls, bounds: Bounds, scale: float) -> CoordinateMapper:
        return cls(bounds.min_x, bounds.min_y, scale)

    def grid_size(self, bounds: Bounds, max_cells: int | None = None) -> tuple[int, int]:
        """(columns, rows) needed to cover ``bounds``."""
        cols = bounds.width * self.scale / CELL_WIDTH
        rows = bounds.height * self.scale / CELL_HEIGHT
        if not (math.isfinite(cols) and math.isfinite(rows)):
            raise GridTooLargeError(f"Grid for scale {self.scale:g} is unbounded")

        cols, rows = math.ceil(cols), math.ceil(rows)
        if max_cells is not None and cols * rows > max_cells:
            raise GridTooLargeError(f"Grid of {cols}×{rows} cells exceeds the limit of {max_cells}")
        return cols, rows

    def to_grid(self, x: float, y: float) -> tuple[int, int]:
        gx = math.floor((x - self.origin_x) * self.scale / CELL_WIDTH)
        gy = math.floor((y - self.origin_y) * self.scale / CELL_HEIGHT)
        return gx, gy
