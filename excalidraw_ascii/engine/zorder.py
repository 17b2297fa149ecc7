"""Draw order. The file format has no z-index, so ``seed`` stands in for one."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from excalidraw_ascii.models.document import ElementBase

E = TypeVar("E", bound=ElementBase)


def z_sorted(elements: Sequence[E]) -> list[E]:
    """Ascending by seed. Equal seeds keep input order, so later elements draw on top."""
    return sorted(elements, key=lambda el: el.seed)
