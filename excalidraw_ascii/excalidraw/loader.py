"""Excalidraw file loading — filename check + JSON → ExcalidrawDocument.

The renderer never sees raw bytes; anything that fails here is reported to
the caller and rendering does not happen.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from excalidraw_ascii.models.document import ExcalidrawDocument

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".excalidraw", ".json")


class DocumentLoadError(ValueError):
    """Raised when a file cannot be turned into an ExcalidrawDocument."""


def check_filename(filename: str | None) -> None:
    if not filename:
        raise DocumentLoadError("No file selected")
    if not filename.endswith(SUPPORTED_EXTENSIONS):
        raise DocumentLoadError("Please select an .excalidraw or .json file")


def parse_document(source: str | bytes) -> ExcalidrawDocument:
    try:
        document = ExcalidrawDocument.model_validate_json(source)
    except ValidationError as e:
        logger.warning("Failed to parse document: %s", e)
        raise DocumentLoadError(f"Invalid JSON file: {_first_error(e)}") from e
    return document


def load_document(path: str | Path) -> ExcalidrawDocument:
    """Read and parse an .excalidraw / .json file from disk."""
    path = Path(path)
    check_filename(path.name)
    if not path.is_file():
        raise DocumentLoadError(f"File not found: {path}")

    try:
        source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentLoadError(f"Could not read {path}: {e}") from e

    document = parse_document(source)
    logger.info("Loaded %s: %d elements", path.name, len(document.elements))
    return document


def _first_error(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "invalid value")
    return f"{location}: {message}" if location else message
