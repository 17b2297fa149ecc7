"""End-to-end tests for render()."""

import pytest

from excalidraw_ascii.engine import GridTooLargeError, RenderOptions, RenderResult, render
from excalidraw_ascii.models.document import ExcalidrawDocument
from tests.conftest import (
    DIAMOND,
    FLOWCHART,
    LABELLED_RECT,
    RIGHT_ARROW,
    SINGLE_RECT,
    SINGLE_RECT_TEXT,
    STANDALONE_TEXT,
    make_document,
)

_PLAIN_GLYPHS = set("─│┌┐└┘")
_DOUBLE_GLYPHS = set("═║╔╗╚╝")


def test_empty_document():
    result = render(ExcalidrawDocument())
    assert result == RenderResult(text="", stats="No elements found")


def test_null_elements_is_empty():
    result = render(make_document({"elements": None}))
    assert result.text == ""
    assert result.stats == "No elements found"


def test_single_rectangle(single_rect):
    result = render(single_rect)
    assert result.text == SINGLE_RECT_TEXT
    assert result.stats == "1 elements · 15×5 grid · 41 chars"
    assert (result.grid_width, result.grid_height) == (15, 5)


def test_double_lines(single_rect):
    result = render(single_rect, RenderOptions(double_lines=True))
    assert result.text == "  ╔═════════╗\n  ║         ║\n  ╚═════════╝"
    assert not _PLAIN_GLYPHS & set(result.text)


def test_default_options_use_plain_glyphs(single_rect):
    assert not _DOUBLE_GLYPHS & set(render(single_rect).text)


def test_deterministic(flowchart):
    first = render(flowchart, RenderOptions(scale=1.5))
    second = render(flowchart, RenderOptions(scale=1.5))
    assert first.text == second.text
    assert first.stats == second.stats


def test_scale_doubles_grid(single_rect):
    base = render(single_rect)
    doubled = render(single_rect, RenderOptions(scale=2))
    assert (doubled.grid_width, doubled.grid_height) == (30, 9)
    assert abs(doubled.grid_width - 2 * base.grid_width) <= 1
    assert abs(doubled.grid_height - 2 * base.grid_height) <= 1


@pytest.mark.parametrize("scale", [0, -3, float("nan"), None])
def test_invalid_scale_falls_back_to_one(single_rect, scale):
    assert render(single_rect, RenderOptions(scale=scale)) == render(single_rect)


def test_standalone_text():
    result = render(make_document(STANDALONE_TEXT))
    assert result.text == "  Hi"
    assert result.stats == "1 elements · 10×4 grid · 4 chars"


def test_hidden_text_only_document_is_empty():
    result = render(make_document(STANDALONE_TEXT), RenderOptions(show_text=False))
    assert result.text == "(empty result)"
    assert result.stats == "1 elements · 10×4 grid · 0 chars"


def test_bound_text_drawn_inside_container(labelled_rect):
    lines = render(labelled_rect).text.split("\n")
    assert lines[1] == "  │  Box    │"
    assert render(labelled_rect).text.count("Box") == 1


def test_show_text_false_hides_labels(labelled_rect, flowchart):
    for document in (labelled_rect, flowchart):
        text = render(document, RenderOptions(show_text=False)).text
        assert not any(char.isalpha() for char in text)


def test_contained_text_without_container_reference_is_not_drawn():
    document = make_document(
        {"elements": [{"id": "t1", "type": "text", "x": 0, "y": 0, "text": "orphan", "containerId": "gone"}]}
    )
    assert render(document).text == "(empty result)"


def test_right_arrow():
    result = render(make_document(RIGHT_ARROW))
    assert result.text == "  ───>"
    assert not set("<^v") & set(result.text)


def test_left_and_down_arrows():
    left = make_document({"elements": [{"type": "arrow", "width": 20, "points": [[20, 0], [0, 0]]}]})
    down = make_document({"elements": [{"type": "arrow", "height": 40, "points": [[0, 0], [0, 40]]}]})
    assert render(left).text == "  <───"
    assert render(down).text == "  │\n  │\n  v"


def test_diamond_tips():
    lines = render(make_document(DIAMOND)).text.split("\n")
    assert len(lines) == 5
    assert lines[0][7] == "╷"
    assert lines[2][2] == "╶"
    assert lines[2][12] == "╴"
    assert lines[4][7] == "╵"


def _overlapping(seed_a: int, seed_b: int) -> ExcalidrawDocument:
    return make_document(
        {
            "elements": [
                {"id": "a", "type": "rectangle", "x": 0, "y": 0, "width": 80, "height": 32, "seed": seed_a},
                {"id": "b", "type": "rectangle", "x": 40, "y": 0, "width": 80, "height": 32, "seed": seed_b},
            ]
        }
    )


def test_higher_seed_draws_on_top():
    # Column 7 is a's top edge and b's top-left corner; column 12 the reverse
    top = render(_overlapping(2, 1)).text.split("\n")[0]
    assert top[7] == "─"
    assert top[12] == "┐"

    top = render(_overlapping(1, 2)).text.split("\n")[0]
    assert top[7] == "┌"
    assert top[12] == "─"


def test_equal_seeds_keep_input_order():
    top = render(_overlapping(0, 0)).text.split("\n")[0]
    assert top[7] == "┌"


def test_stats_count_every_input_element(flowchart):
    result = render(flowchart, RenderOptions(show_text=False))
    assert result.element_count == 7
    assert result.stats.startswith("7 elements · ")


def test_unknown_kinds_count_but_are_not_drawn():
    result = render(make_document({"elements": [{"type": "image", "width": 16, "height": 16}]}))
    assert result.text == "(empty result)"
    assert result.stats == "1 elements · 7×4 grid · 0 chars"


def test_flowchart_renders_every_shape(flowchart):
    text = render(flowchart).text
    assert "Start" in text
    assert "a note" in text
    assert ">" in text
    assert "╷" in text
    assert "┌" in text
    assert text.count("Start") == 1


def test_stats_length_matches_text(flowchart):
    result = render(flowchart)
    assert result.stats.endswith(f"· {len(result.text)} chars")


def test_input_document_not_modified(flowchart):
    before = flowchart.model_dump()
    render(flowchart)
    assert flowchart.model_dump() == before


def test_rows_have_no_trailing_whitespace(flowchart):
    for line in render(flowchart, RenderOptions(scale=0.75)).text.split("\n"):
        assert line == line.rstrip()


def test_non_finite_strings_render_at_origin(single_rect):
    doc = make_document(
        {"elements": [{"type": "rectangle", "x": "NaN", "y": "-Infinity", "width": 80, "height": 32, "seed": 1}]}
    )
    assert render(doc) == render(single_rect)


def test_nul_in_text_keeps_columns():
    doc = make_document({"elements": [{"type": "text", "x": 0, "y": 0, "width": 40, "height": 16, "text": "a\x00b"}]})
    assert render(doc).text == "  a\x00b"


def test_unbounded_scale_raises(single_rect):
    with pytest.raises(GridTooLargeError):
        render(single_rect, RenderOptions(scale=1e308))


def test_max_cells(single_rect):
    assert render(single_rect, max_cells=75).text == SINGLE_RECT_TEXT
    with pytest.raises(GridTooLargeError):
        render(single_rect, max_cells=74)
