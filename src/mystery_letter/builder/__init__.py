"""
Module: builder

Purpose:
    Letter building pipeline: splits an image into a grid of tiles,
    spreads the tiles across pages so no page is readable alone, and
    renders the pages to a single PDF.

Key Functions:
    - build_letter(): Main entry point for letter generation
    - partition_image(): Tile partitioning

Key Classes:
    - LetterConfig: Configuration for building
    - BuildResult: Output paths and metadata

Dependencies:
    - PIL: Image manipulation
    - reportlab: PDF generation

Used By:
    - mystery_letter.cli: Command line interface
"""

from .config import LetterConfig
from .partition import partition_image, PartitionError
from .controller import build_letter, BuildResult, BuildError

__all__ = [
    # Config
    "LetterConfig",
    # Partition
    "partition_image",
    "PartitionError",
    # Controller
    "build_letter",
    "BuildResult",
    "BuildError",
]
