"""
Module: builder.config

Purpose:
    Configuration dataclass for the letter building pipeline. Immutable
    configuration with validation on construction.

Key Classes:
    - LetterConfig: Main configuration for building a letter

Key Functions:
    - LetterConfig.make_rng(): Random source for the tile shuffle

Dependencies:
    - dataclasses (std)
    - pathlib (std)
    - random (std)
    - reportlab: Named page sizes

Used By:
    - builder.controller: Main build controller
    - cli: Argument parsing
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from reportlab.lib.pagesizes import A4, LETTER

# A 20x20 grid over 5 pages
DEFAULT_GRID_SIZE = 20
DEFAULT_NUM_GROUPS = 5
DEFAULT_OUTPUT_NAME = "combined_images.pdf"

PAGE_SIZES = {
    "A4": A4,
    "LETTER": LETTER,
}
IMAGE_FORMATS = ("JPEG", "PNG")


@dataclass(frozen=True)
class LetterConfig:
    """
    Configuration for building a mystery letter (immutable).

    Attributes:
        image_path: Source image, None until the user supplies one
        grid_size: Tiles per side (grid_size ** 2 tiles in total)
        num_groups: Number of output pages
        seed: Seed for the tile shuffle (None = fresh randomness per run)
        output_dir: Directory for the PDF (None = current directory)
        output_name: PDF file name
        page_size: Named page size ("A4" or "LETTER"), portrait
        image_format: Encoding of page images inside the PDF
        jpeg_quality: JPEG quality when image_format is "JPEG"
        write_metadata: Also write a JSON answer key next to the PDF

    Example:
        >>> config = LetterConfig(
        ...     image_path=Path("letter.jpg"),
        ...     grid_size=10,
        ...     num_groups=3,
        ... )
    """

    image_path: Optional[Path] = None

    # Partitioning
    grid_size: int = DEFAULT_GRID_SIZE
    num_groups: int = DEFAULT_NUM_GROUPS
    seed: Optional[int] = None

    # Output
    output_dir: Optional[Path] = None
    output_name: str = DEFAULT_OUTPUT_NAME
    write_metadata: bool = False

    # Pages
    page_size: str = "A4"
    image_format: str = "JPEG"
    jpeg_quality: int = 100

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.grid_size <= 0:
            raise ValueError(f"grid_size must be positive: {self.grid_size}")
        if self.num_groups <= 0:
            raise ValueError(f"num_groups must be positive: {self.num_groups}")
        if self.page_size.upper() not in PAGE_SIZES:
            raise ValueError(
                f"page_size must be one of {sorted(PAGE_SIZES)}: {self.page_size!r}"
            )
        if self.image_format.upper() not in IMAGE_FORMATS:
            raise ValueError(
                f"image_format must be one of {IMAGE_FORMATS}: {self.image_format!r}"
            )
        if not 1 <= self.jpeg_quality <= 100:
            raise ValueError(f"jpeg_quality must be 1-100: {self.jpeg_quality}")
        if not self.output_name.lower().endswith(".pdf"):
            raise ValueError(f"output_name must end with .pdf: {self.output_name!r}")

    @property
    def total_tiles(self) -> int:
        """Number of tiles in the grid."""
        return self.grid_size * self.grid_size

    @property
    def page_dimensions(self) -> tuple[float, float]:
        """(width, height) of the page in PDF points."""
        return PAGE_SIZES[self.page_size.upper()]

    @property
    def output_path(self) -> Path:
        """Full path of the PDF to write."""
        base = Path(self.output_dir) if self.output_dir else Path(".")
        return base / self.output_name

    def make_rng(self) -> random.Random:
        """
        Create the random source for the tile shuffle.

        Seeded configs reproduce the same assignment on every run.
        """
        return random.Random(self.seed)
