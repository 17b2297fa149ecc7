"""Shape rasterizers — turn element geometry into box-drawing characters.

A stroke is either ``─`` or ``│`` depending on which axis dominates; there
are no diagonal glyphs, so slanted strokes come out as staircases.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence

from excalidraw_ascii.engine.canvas import GridCanvas
from excalidraw_ascii.engine.config import RenderOptions
from excalidraw_ascii.engine.mapper import CoordinateMapper
from excalidraw_ascii.models.document import (
    ArrowElement,
    DiamondElement,
    ElementBase,
    EllipseElement,
    LinearElement,
    RectangleElement,
    TextElement,
)

H_LINE = "─"
V_LINE = "│"

# (horizontal, vertical, top-left, top-right, bottom-left, bottom-right)
SINGLE_BORDER = ("─", "│", "┌", "┐", "└", "┘")
DOUBLE_BORDER = ("═", "║", "╔", "╗", "╚", "╝")

# Open-ended connectors placed on a diamond's four tips
DIAMOND_TOP = "╷"
DIAMOND_BOTTOM = "╵"
DIAMOND_LEFT = "╶"
DIAMOND_RIGHT = "╴"

_MIN_ELLIPSE_STEPS = 16
# One ellipse sample per this many units of (width + height)
_ELLIPSE_UNITS_PER_STEP = 10


def index_by_id(elements: Sequence[ElementBase]) -> dict[str, ElementBase]:
    """Map element id → first element carrying it."""
    index: dict[str, ElementBase] = {}
    for el in elements:
        if el.id is not None:
            index.setdefault(el.id, el)
    return index


class ShapeRasterizer:
    """Draws elements onto a canvas through a single coordinate mapper.

    ``elements_by_id`` indexes the full, unsorted element list and
    is only used to resolve a container's bound text.
    """

    def __init__(
        self,
        canvas: GridCanvas,
        mapper: CoordinateMapper,
        options: RenderOptions,
        elements_by_id: Mapping[str, ElementBase] | None = None,
    ) -> None:
        self.canvas = canvas
        self.mapper = mapper
        self.options = options
        self.elements_by_id = elements_by_id or {}

    def draw(self, el: ElementBase) -> None:
        """Dispatch on element kind. Kinds with no rasterizer draw nothing."""
        if isinstance(el, RectangleElement):
            self.rectangle(el.x, el.y, el.width, el.height)
            self.bound_text(el)
        elif isinstance(el, DiamondElement):
            self.diamond(el.x, el.y, el.width, el.height)
        elif isinstance(el, EllipseElement):
            self.ellipse(el.x, el.y, el.width, el.height)
        elif isinstance(el, LinearElement):
            self.polyline(el)
        elif isinstance(el, TextElement):
            # Labels owned by a container are drawn by that container
            if el.container_id is None:
                self.text(el.x, el.y, el.text)

    def line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        """Bresenham walk between the mapped endpoints, both inclusive."""
        gx1, gy1 = self.mapper.to_grid(x1, y1)
        gx2, gy2 = self.mapper.to_grid(x2, y2)

        dx = abs(gx2 - gx1)
        dy = abs(gy2 - gy1)
        sx = 1 if gx1 < gx2 else -1
        sy = 1 if gy1 < gy2 else -1
        glyph = H_LINE if dy < dx else V_LINE
        err = dx - dy

        x, y = gx1, gy1
        while True:
            self.canvas.set(x, y, glyph)
            if x == gx2 and y == gy2:
                break
            e2 = 2 * err
            if e2 > -dy:
                err -= dy
                x += sx
            if e2 < dx:
                err += dx
                y += sy

    def rectangle(self, x: float, y: float, w: float, h: float) -> None:
        gx1, gy1 = self.mapper.to_grid(x, y)
        gx2, gy2 = self.mapper.to_grid(x + w, y + h)
        # Negative width/height flip the corners
        left, right = min(gx1, gx2), max(gx1, gx2)
        top, bottom = min(gy1, gy2), max(gy1, gy2)

        h_line, v_line, tl, tr, bl, br = DOUBLE_BORDER if self.options.double_lines else SINGLE_BORDER
        set_char = self.canvas.set

        for i in range(left + 1, right):
            set_char(i, top, h_line)
            set_char(i, bottom, h_line)
        for i in range(top + 1, bottom):
            set_char(left, i, v_line)
            set_char(right, i, v_line)

        set_char(left, top, tl)
        set_char(right, top, tr)
        set_char(left, bottom, bl)
        set_char(right, bottom, br)

    def bound_text(self, container: ElementBase) -> None:
        """Draw each bound text element at its own stored position."""
        for ref in container.bound_elements:
            if ref.id is None:
                continue
            target = self.elements_by_id.get(ref.id)
            if isinstance(target, TextElement):
                self.text(target.x, target.y, target.text)

    def diamond(self, x: float, y: float, w: float, h: float) -> None:
        cx = x + w / 2
        cy = y + h / 2

        self.line(cx, y, x + w, cy)
        self.line(x + w, cy, cx, y + h)
        self.line(cx, y + h, x, cy)
        self.line(x, cy, cx, y)

        set_char = self.canvas.set
        set_char(*self.mapper.to_grid(cx, y), DIAMOND_TOP)
        set_char(*self.mapper.to_grid(cx, y + h), DIAMOND_BOTTOM)
        set_char(*self.mapper.to_grid(x, cy), DIAMOND_LEFT)
        set_char(*self.mapper.to_grid(x + w, cy), DIAMOND_RIGHT)

    def ellipse(self, x: float, y: float, w: float, h: float) -> None:
        """Blocky outline from evenly spaced parametric samples.

        The sample at 2π repeats the first one, so the closing segment is
        drawn too. Nothing is written for the very first sample.
        """
        cx = x + w / 2
        cy = y + h / 2
        rx = w / 2
        ry = h / 2
        steps = max(_MIN_ELLIPSE_STEPS, math.floor((w + h) / _ELLIPSE_UNITS_PER_STEP))

        prev: tuple[int, int] | None = None
        for i in range(steps + 1):
            angle = (i / steps) * math.pi * 2
            gx, gy = self.mapper.to_grid(cx + rx * math.cos(angle), cy + ry * math.sin(angle))
            if prev is not None:
                glyph = H_LINE if abs(gx - prev[0]) > abs(gy - prev[1]) else V_LINE
                self.canvas.set(gx, gy, glyph)
            prev = (gx, gy)

    def polyline(self, el: LinearElement) -> None:
        points = el.points
        for (px1, py1), (px2, py2) in zip(points, points[1:]):
            self.line(el.x + px1, el.y + py1, el.x + px2, el.y + py2)

        if isinstance(el, ArrowElement) and len(points) >= 2:
            (prev_x, prev_y), (last_x, last_y) = points[-2], points[-1]
            self.canvas.set(
                *self.mapper.to_grid(el.x + last_x, el.y + last_y),
                arrow_head(last_x - prev_x, last_y - prev_y),
            )

    def text(self, x: float, y: float, text: str) -> None:
        if not self.options.show_text or not text:
            return
        gx, gy = self.mapper.to_grid(x, y)
        for i, char in enumerate(text):
            self.canvas.set(gx + i, gy, char)


def arrow_head(dx: float, dy: float) -> str:
    """Marker for an arrow whose last segment points along (dx, dy)."""
    if abs(dx) > abs(dy):
        return ">" if dx > 0 else "<"
    return "v" if dy > 0 else "^"
