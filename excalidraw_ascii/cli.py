"""Command-line converter: .excalidraw file → ASCII art on stdout."""

from __future__ import annotations

import argparse
import logging
import sys

from excalidraw_ascii.engine.config import DEFAULT_SCALE, RenderOptions
from excalidraw_ascii.engine.mapper import GridTooLargeError
from excalidraw_ascii.engine.renderer import render
from excalidraw_ascii.excalidraw.loader import DocumentLoadError, load_document

logger = logging.getLogger(__name__)

_RULE_WIDTH = 60

_EPILOG = """\
examples:
  %(prog)s test-wireframe.excalidraw
  %(prog)s wireframe.excalidraw --scale 1.5 --double-lines
"""


def _scale(value: str) -> float:
    """Lenient --scale: anything that is not a number means the default."""
    try:
        return float(value)
    except ValueError:
        return DEFAULT_SCALE


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="excalidraw-ascii",
        description="Convert Excalidraw files to ASCII",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("file", nargs="?", help="Path to .excalidraw or .json file")
    parser.add_argument("--scale", type=_scale, default=DEFAULT_SCALE, help="Scale factor (default: 1)")
    parser.add_argument("--no-text", action="store_true", help="Hide text labels")
    parser.add_argument("--double-lines", action="store_true", help="Use double-line borders")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.file is None:
        parser.print_help()
        return 0

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    options = RenderOptions(
        show_text=not args.no_text,
        double_lines=args.double_lines,
        scale=args.scale,
    )

    try:
        document = load_document(args.file)
    except DocumentLoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.debug("Rendering %s with %r", args.file, options)
    try:
        result = render(document, options)
    except GridTooLargeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("\n" + "=" * _RULE_WIDTH)
    print("ASCII OUTPUT")
    print("=" * _RULE_WIDTH + "\n")
    print(result.text)
    print("\n" + "-" * _RULE_WIDTH)
    print(result.stats)
    print("-" * _RULE_WIDTH + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
