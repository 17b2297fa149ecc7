"""Shared test fixtures."""

from __future__ import annotations

import json

import pytest

from excalidraw_ascii.models.document import ExcalidrawDocument


# Sample documents (Excalidraw JSON shape, trimmed to the fields that matter)

SINGLE_RECT = {
    "type": "excalidraw",
    "version": 2,
    "elements": [
        {"id": "r1", "type": "rectangle", "x": 0, "y": 0, "width": 80, "height": 32, "seed": 1},
    ],
}

# Rendered form of SINGLE_RECT at default options: 15×5 grid, rows 1..3 kept
SINGLE_RECT_TEXT = "  ┌─────────┐\n  │         │\n  └─────────┘"

LABELLED_RECT = {
    "type": "excalidraw",
    "version": 2,
    "elements": [
        {
            "id": "r1",
            "type": "rectangle",
            "x": 0,
            "y": 0,
            "width": 80,
            "height": 32,
            "seed": 5,
            "boundElements": [{"id": "t1", "type": "text"}],
        },
        {
            "id": "t1",
            "type": "text",
            "x": 24,
            "y": 16,
            "width": 24,
            "height": 16,
            "seed": 1,
            "text": "Box",
            "containerId": "r1",
        },
    ],
}

RIGHT_ARROW = {
    "elements": [
        {"id": "a1", "type": "arrow", "x": 0, "y": 0, "width": 20, "height": 0, "points": [[0, 0], [20, 0]]},
    ],
}

STANDALONE_TEXT = {
    "elements": [
        {"id": "t1", "type": "text", "x": 0, "y": 0, "width": 40, "height": 16, "text": "Hi"},
    ],
}

DIAMOND = {
    "elements": [
        {"id": "d1", "type": "diamond", "x": 0, "y": 0, "width": 80, "height": 64},
    ],
}

FLOWCHART = {
    "type": "excalidraw",
    "version": 2,
    "source": "https://excalidraw.com",
    "elements": [
        {
            "id": "start",
            "type": "rectangle",
            "x": 0,
            "y": 0,
            "width": 120,
            "height": 48,
            "seed": 10,
            "strokeColor": "#1e1e1e",
            "boundElements": [{"id": "start-label", "type": "text"}, {"id": "link", "type": "arrow"}],
        },
        {
            "id": "start-label",
            "type": "text",
            "x": 24,
            "y": 16,
            "width": 40,
            "height": 16,
            "seed": 11,
            "text": "Start",
            "containerId": "start",
        },
        {
            "id": "link",
            "type": "arrow",
            "x": 120,
            "y": 24,
            "width": 64,
            "height": 0,
            "seed": 12,
            "points": [[0, 0], [64, 0]],
        },
        {"id": "check", "type": "diamond", "x": 200, "y": 0, "width": 96, "height": 48, "seed": 13},
        {"id": "done", "type": "ellipse", "x": 320, "y": 0, "width": 96, "height": 48, "seed": 14},
        {"id": "note", "type": "text", "x": 0, "y": 80, "width": 80, "height": 16, "seed": 15, "text": "a note"},
        {"id": "pic", "type": "image", "x": 0, "y": 120, "width": 16, "height": 16, "seed": 16},
    ],
    "appState": {"viewBackgroundColor": "#ffffff"},
    "files": {},
}


def make_document(data: dict) -> ExcalidrawDocument:
    return ExcalidrawDocument.model_validate(data)


@pytest.fixture
def single_rect() -> ExcalidrawDocument:
    return make_document(SINGLE_RECT)


@pytest.fixture
def labelled_rect() -> ExcalidrawDocument:
    return make_document(LABELLED_RECT)


@pytest.fixture
def flowchart() -> ExcalidrawDocument:
    return make_document(FLOWCHART)


@pytest.fixture
def flowchart_file(tmp_path):
    path = tmp_path / "flowchart.excalidraw"
    path.write_text(json.dumps(FLOWCHART), encoding="utf-8")
    return path
