"""
Command line entry point for the Mystery Letter builder.

Usage:
    mystery-letter letter.jpg --grid 20 --pages 5 --output out/
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from mystery_letter import __version__
from mystery_letter.builder import BuildError, LetterConfig, build_letter
from mystery_letter.builder.config import (
    DEFAULT_GRID_SIZE,
    DEFAULT_NUM_GROUPS,
    DEFAULT_OUTPUT_NAME,
    IMAGE_FORMATS,
    PAGE_SIZES,
)

logger = logging.getLogger("mystery_letter")


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the mystery-letter command."""
    parser = argparse.ArgumentParser(
        prog="mystery-letter",
        description=(
            "Split a letter image into a grid of tiles spread across several "
            "PDF pages. Print every page and overlay them to read the letter."
        ),
    )
    parser.add_argument("image", type=Path, nargs="?", help="Letter image to split")
    parser.add_argument("--grid", "-g", type=int, default=DEFAULT_GRID_SIZE,
                        help=f"Tiles per side (default {DEFAULT_GRID_SIZE})")
    parser.add_argument("--pages", "-n", type=int, default=DEFAULT_NUM_GROUPS,
                        help=f"Number of pages (default {DEFAULT_NUM_GROUPS})")
    parser.add_argument("--output", "-o", type=Path, default=None,
                        help="Output directory (default: current directory)")
    parser.add_argument("--name", default=DEFAULT_OUTPUT_NAME,
                        help=f"PDF file name (default {DEFAULT_OUTPUT_NAME})")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for a reproducible tile shuffle")
    parser.add_argument("--page-size", choices=sorted(PAGE_SIZES), default="A4",
                        help="Page size, portrait (default A4)")
    parser.add_argument("--format", choices=IMAGE_FORMATS, default="JPEG",
                        dest="image_format", help="Page image encoding (default JPEG)")
    parser.add_argument("--quality", type=int, default=100,
                        help="JPEG quality 1-100 (default 100)")
    parser.add_argument("--metadata", action="store_true",
                        help="Also write a JSON answer key next to the PDF")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run the command line builder.

    Args:
        argv: Arguments to parse (None = sys.argv)

    Returns:
        Exit code: 0 on success, 1 if the build fails.
        Invalid options exit with code 2 via argparse.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = LetterConfig(
            image_path=args.image,
            grid_size=args.grid,
            num_groups=args.pages,
            seed=args.seed,
            output_dir=args.output,
            output_name=args.name,
            page_size=args.page_size,
            image_format=args.image_format,
            jpeg_quality=args.quality,
            write_metadata=args.metadata,
        )
    except ValueError as e:
        parser.error(str(e))

    try:
        result = build_letter(config)
    except BuildError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Wrote {result.page_count} pages to {result.output_pdf}")
    if result.metadata_path:
        print(f"Answer key: {result.metadata_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
