"""Excalidraw document model — one pydantic model per element kind."""

from __future__ import annotations

import math
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag, field_validator, model_validator

# Element kinds the renderer knows how to rasterize.
_KNOWN_KINDS = frozenset({"rectangle", "diamond", "ellipse", "line", "arrow", "text"})


class BoundElement(BaseModel):
    """Reference from a container to an element bound to it (usually its label)."""

    id: str | None = None
    type: str | None = None


class ElementBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str | None = None
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    # Only used as the draw-order key
    seed: int = 0
    bound_elements: list[BoundElement] = Field(default_factory=list, alias="boundElements")

    @field_validator("x", "y", "width", "height", "seed", mode="before")
    @classmethod
    def _missing_number_is_zero(cls, value: Any) -> Any:
        if value is None:
            return 0
        if isinstance(value, float) and not math.isfinite(value):
            return 0
        return value

    # Lax parsing turns strings such as "NaN" or "Infinity" into non-finite floats
    @field_validator("x", "y", "width", "height")
    @classmethod
    def _non_finite_is_zero(cls, value: float) -> float:
        return value if math.isfinite(value) else 0.0

    @field_validator("bound_elements", mode="before")
    @classmethod
    def _null_bound_elements(cls, value: Any) -> Any:
        return [] if value is None else value


class RectangleElement(ElementBase):
    type: Literal["rectangle"] = "rectangle"


class DiamondElement(ElementBase):
    type: Literal["diamond"] = "diamond"


class EllipseElement(ElementBase):
    type: Literal["ellipse"] = "ellipse"


class LinearElement(ElementBase):
    # [dx, dy] offsets relative to (x, y)
    points: list[tuple[float, float]] = Field(default_factory=list)

    @field_validator("points", mode="before")
    @classmethod
    def _null_points(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("points")
    @classmethod
    def _finite_points(cls, value: list[tuple[float, float]]) -> list[tuple[float, float]]:
        return [(x if math.isfinite(x) else 0.0, y if math.isfinite(y) else 0.0) for x, y in value]


class LineElement(LinearElement):
    type: Literal["line"] = "line"


class ArrowElement(LinearElement):
    type: Literal["arrow"] = "arrow"


class TextElement(ElementBase):
    type: Literal["text"] = "text"
    text: str = ""
    # Set when the text is a label owned by another shape
    container_id: str | None = Field(default=None, alias="containerId")

    @field_validator("text", mode="before")
    @classmethod
    def _null_text(cls, value: Any) -> Any:
        return "" if value is None else value


class UnknownElement(ElementBase):
    """Any element kind the renderer does not draw (frame, image, freedraw, ...)."""

    type: Any = None


def _element_kind(value: Any) -> str:
    if isinstance(value, dict):
        kind = value.get("type")
    else:
        kind = getattr(value, "type", None)
    if isinstance(kind, str) and kind in _KNOWN_KINDS:
        return kind
    return "unknown"


Element = Annotated[
    Union[
        Annotated[RectangleElement, Tag("rectangle")],
        Annotated[DiamondElement, Tag("diamond")],
        Annotated[EllipseElement, Tag("ellipse")],
        Annotated[LineElement, Tag("line")],
        Annotated[ArrowElement, Tag("arrow")],
        Annotated[TextElement, Tag("text")],
        Annotated[UnknownElement, Tag("unknown")],
    ],
    Discriminator(_element_kind),
]


class ExcalidrawDocument(BaseModel):
    """Represents a parsed .excalidraw file. Only ``elements`` is used for rendering."""

    model_config = ConfigDict(extra="ignore")

    type: str | None = None
    version: int | None = None
    source: str | None = None
    elements: list[Element] = Field(default_factory=list)

    @field_validator("elements", mode="before")
    @classmethod
    def _null_elements(cls, value: Any) -> Any:
        return [] if value is None else value

    @model_validator(mode="after")
    def _finite_extent(self) -> ExcalidrawDocument:
        """Reject documents whose coordinates overflow once offsets are added."""
        xs: list[float] = []
        ys: list[float] = []
        for el in self.elements:
            xs += (el.x, el.x + el.width)
            ys += (el.y, el.y + el.height)
            if isinstance(el, LinearElement):
                xs.extend(el.x + px for px, _ in el.points)
                ys.extend(el.y + py for _, py in el.points)
        if xs and not (math.isfinite(max(xs) - min(xs)) and math.isfinite(max(ys) - min(ys))):
            raise ValueError("document extent is too large to render")
        return self
