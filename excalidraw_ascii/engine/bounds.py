"""Bounding box of a document in document units, padded for the grid margin."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from excalidraw_ascii.models.document import ElementBase

# Margin added on every side, in document units
PADDING = 20.0


@dataclass(frozen=True)
class Bounds:
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def padded(self, padding: float = PADDING) -> Bounds:
        return Bounds(
            self.min_x - padding,
            self.min_y - padding,
            self.max_x + padding,
            self.max_y + padding,
        )


def compute_bounds(elements: Sequence[ElementBase]) -> Bounds | None:
    """Union of every element's (x, y, x+width, y+height) box, or None when empty.

    Every element contributes, including kinds that are never drawn and
    text that is only rendered through its container.
    """
    if not elements:
        return None

    min_x = min_y = float("inf")
    max_x = max_y = float("-inf")
    for el in elements:
        min_x = min(min_x, el.x)
        min_y = min(min_y, el.y)
        max_x = max(max_x, el.x + el.width)
        max_y = max(max_y, el.y + el.height)

    return Bounds(min_x, min_y, max_x, max_y)
