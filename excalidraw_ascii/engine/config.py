"""Render configuration — the small options record supplied per render call."""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_SCALE = 1.0


class RenderOptions(BaseModel):
    """Controls text overlay, border glyph set and grid scale."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    # When False no text is written at all (standalone or bound)
    show_text: bool = Field(default=True, alias="showText")
    # Double-line glyphs for rectangle borders only
    double_lines: bool = Field(default=False, alias="doubleLines")
    # Uniform multiplier applied before quantizing to grid cells
    scale: float = DEFAULT_SCALE

    @field_validator("scale", mode="before")
    @classmethod
    def _fallback_scale(cls, value: Any) -> Any:
        if value is None:
            return DEFAULT_SCALE
        try:
            number = float(value)
        except (TypeError, ValueError):
            return value
        if not math.isfinite(number) or number <= 0:
            return DEFAULT_SCALE
        return number
