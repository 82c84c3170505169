"""
Module: builder.layout.models

Purpose:
    Data models for page layout.
    Immutable dataclasses for masked group images and their placement.

Key Classes:
    - GroupPage: Full-size masked composite for one group
    - PagePlacement: Where an image sits on a page
    - PagePlan: A group page with its placement
    - DocumentPlan: Ordered pages of the output document

Dependencies:
    - PIL: Image type
    - dataclasses (std)

Used By:
    - builder.layout.compositor: Creates GroupPages
    - builder.layout.fitter: Creates PagePlans
    - builder.output.renderer: Renders DocumentPlans
"""

from __future__ import annotations

from dataclasses import dataclass

from PIL import Image


@dataclass(frozen=True)
class GroupPage:
    """
    Masked composite of one group (immutable).

    Attributes:
        index: Group index, also the page index (0-indexed)
        image: W x H RGB image, white except for this group's tiles
        tile_indices: Linear indices of the tiles drawn on it
    """

    index: int
    image: Image.Image
    tile_indices: tuple[int, ...]

    @property
    def is_blank(self) -> bool:
        """True if no tiles were drawn on this page."""
        return not self.tile_indices

    @property
    def size(self) -> tuple[int, int]:
        """(width, height) of the composite in pixels."""
        return self.image.size


@dataclass(frozen=True)
class PagePlacement:
    """
    An image scaled and centred on a page.

    Offsets are measured from the page's top-left corner, in the same
    unit as the page size.

    Attributes:
        x: Left offset
        y: Top offset
        width: Rendered width
        height: Rendered height
        scale: Uniform scale applied to the source image

    Example:
        >>> placement = fit_to_page(1000, 2000, 210, 297)
        >>> placement.scale
        0.1485
    """

    x: float
    y: float
    width: float
    height: float
    scale: float

    @property
    def right(self) -> float:
        """Right edge."""
        return self.x + self.width

    @property
    def bottom(self) -> float:
        """Bottom edge."""
        return self.y + self.height


@dataclass(frozen=True)
class PagePlan:
    """
    Complete layout plan for a single page.

    Attributes:
        index: Page number (0-indexed)
        group: The masked composite shown on this page
        placement: Where the composite sits
    """

    index: int
    group: GroupPage
    placement: PagePlacement


@dataclass(frozen=True)
class DocumentPlan:
    """
    Final layout output.

    Attributes:
        pages: Tuple of PagePlans in group order
        page_size: (width, height) shared by every page

    Example:
        >>> plan = DocumentPlan(pages=(page1, page2), page_size=A4)
        >>> plan.page_count
        2
    """

    pages: tuple[PagePlan, ...]
    page_size: tuple[float, float]

    @property
    def page_count(self) -> int:
        """Number of pages in the document."""
        return len(self.pages)

    @property
    def blank_pages(self) -> list[int]:
        """Indices of pages carrying no tiles."""
        return [p.index for p in self.pages if p.group.is_blank]
