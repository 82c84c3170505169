"""
Module: builder.layout.config

Purpose:
    Configuration for page layout and PDF embedding.
    Defines page dimensions and how page images are encoded.

Key Classes:
    - PageConfig: Immutable page configuration

Dependencies:
    - dataclasses (std)
    - reportlab: Standard page sizes

Used By:
    - builder.layout.fitter: Aspect-fit placement
    - builder.output.renderer: PDF rendering
"""

from __future__ import annotations

from dataclasses import dataclass

from reportlab.lib.pagesizes import A4

# A4 portrait in PDF points (1/72 inch)
DEFAULT_PAGE_WIDTH_PT, DEFAULT_PAGE_HEIGHT_PT = A4


@dataclass(frozen=True)
class PageConfig:
    """
    Configuration for output pages (immutable).

    Attributes:
        page_width: Page width in points
        page_height: Page height in points
        image_format: "JPEG" or "PNG" for embedded page images
        jpeg_quality: JPEG quality (1-100)

    Example:
        >>> config = PageConfig()
        >>> round(config.page_width), round(config.page_height)
        (595, 842)
    """

    page_width: float = DEFAULT_PAGE_WIDTH_PT
    page_height: float = DEFAULT_PAGE_HEIGHT_PT
    image_format: str = "JPEG"
    jpeg_quality: int = 100

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.page_width <= 0:
            raise ValueError(f"page_width must be positive: {self.page_width}")
        if self.page_height <= 0:
            raise ValueError(f"page_height must be positive: {self.page_height}")
        if self.image_format not in ("JPEG", "PNG"):
            raise ValueError(f"Unsupported image_format: {self.image_format!r}")
        if not 1 <= self.jpeg_quality <= 100:
            raise ValueError(f"jpeg_quality must be 1-100: {self.jpeg_quality}")

    @property
    def page_size(self) -> tuple[float, float]:
        """(width, height) tuple for reportlab."""
        return (self.page_width, self.page_height)
