"""Canvas rows → final text and the one-line statistics summary."""

from __future__ import annotations

from dataclasses import dataclass

EMPTY_PLACEHOLDER = "(empty result)"
NO_ELEMENTS_STATS = "No elements found"


@dataclass(frozen=True)
class RenderResult:
    """Rendered grid text plus summary stats. ``text`` may be the display placeholder."""

    text: str
    stats: str
    grid_width: int = 0
    grid_height: int = 0
    element_count: int = 0

    @classmethod
    def empty(cls) -> RenderResult:
        return cls(text="", stats=NO_ELEMENTS_STATS)


def trim_rows(rows: list[str]) -> list[str]:
    """Strip trailing whitespace per row, then drop blank rows at both ends."""
    lines = [row.rstrip() for row in rows]
    start = 0
    while start < len(lines) and not lines[start].strip():
        start += 1
    end = len(lines)
    while end > start and not lines[end - 1].strip():
        end -= 1
    return lines[start:end]


def format_stats(element_count: int, grid_width: int, grid_height: int, char_count: int) -> str:
    return f"{element_count} elements · {grid_width}×{grid_height} grid · {char_count} chars"


def format_output(rows: list[str], element_count: int, grid_width: int, grid_height: int) -> RenderResult:
    text = "\n".join(trim_rows(rows))
    return RenderResult(
        text=text or EMPTY_PLACEHOLDER,
        # Counted before the placeholder is substituted
        stats=format_stats(element_count, grid_width, grid_height, len(text)),
        grid_width=grid_width,
        grid_height=grid_height,
        element_count=element_count,
    )
