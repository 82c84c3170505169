"""
Module: builder.layout

Purpose:
    Group compositing and page layout.
    Turns partitioned tiles into positioned, full-size page images.

Key Functions:
    - compose_pages(): Masked composite per group
    - fit_to_page(): Aspect-fit and centre an image on a page
    - plan_document(): One page per group

Key Classes:
    - PageConfig: Page size and image encoding
    - GroupPage: Masked composite of one group
    - DocumentPlan: Ordered page plans

Dependencies:
    - PIL: Image manipulation
    - builder.images: TileDecoder

Used By:
    - builder.controller: Main build controller
"""

from .config import PageConfig
from .models import GroupPage, PagePlacement, PagePlan, DocumentPlan
from .compositor import compose_pages, composite_group, new_canvas, CanvasError
from .fitter import fit_to_page, plan_document

__all__ = [
    # Config
    "PageConfig",
    # Models
    "GroupPage",
    "PagePlacement",
    "PagePlan",
    "DocumentPlan",
    # Functions
    "compose_pages",
    "composite_group",
    "new_canvas",
    "fit_to_page",
    "plan_document",
    # Errors
    "CanvasError",
]
