"""
Entry point for the deckedit package.

This allows running the package with:
    python -m deckedit edit --src in.pptx --dst out.pptx --image earth.jpg
    python -m deckedit outline out.pptx
"""

from __future__ import annotations

import argparse
import sys

from deckedit.config import get_settings
from deckedit.core.log import setup_logging
from deckedit.services.edit import run
from deckedit.services.outline import outline_file


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        description="Apply a fixed sequence of edits to a PowerPoint deck",
        prog="deckedit",
    )
    parser.add_argument("--verbose", action="store_true", help="Mirror log records to stderr")
    sub = parser.add_subparsers(dest="command", required=True)

    edit = sub.add_parser("edit", help="Copy a deck and apply the edit sequence")
    edit.add_argument("--src", default=settings.source_path, help=f"Source deck (default: {settings.source_path})")
    edit.add_argument("--dst", default=settings.output_path, help=f"Output deck (default: {settings.output_path})")
    edit.add_argument("--image", default=settings.image_path, help=f"Image to embed (default: {settings.image_path})")

    outline = sub.add_parser("outline", help="Print the typed outline of a deck as JSON")
    outline.add_argument("path", help="Deck to describe")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the deckedit CLI."""
    args = build_parser().parse_args(argv)
    setup_logging(console=args.verbose)

    if args.command == "edit":
        dst = run(args.src, args.dst, args.image)
        print(f"Saved as {dst}")
    else:
        print(outline_file(args.path).model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
