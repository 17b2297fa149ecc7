"""Character grid the rasterizers draw into. One instance per render call."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

BLANK = " "


class GridCanvas:
    """rows × cols buffer of single characters, initialised to spaces.

    Writes outside the grid are dropped. A later write to a cell replaces the
    earlier one, which is how draw order and label overlay become visible.
    Cells are object dtype, since a ``<U1`` array stores NUL as an empty string.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.cells: NDArray[np.object_] = np.full((height, width), BLANK, dtype=object)

    def set(self, x: int, y: int, char: str) -> None:
        if 0 <= x < self.width and 0 <= y < self.height:
            self.cells[y, x] = char

    def get(self, x: int, y: int) -> str:
        if 0 <= x < self.width and 0 <= y < self.height:
            return str(self.cells[y, x])
        return BLANK

    def rows(self) -> list[str]:
        return ["".join(row) for row in self.cells.tolist()]
