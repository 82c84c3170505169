"""
Module: builder.layout.fitter

Purpose:
    Aspect-preserving fit of full-size group images onto fixed pages.

Key Functions:
    - fit_to_page(): Scale and centre one image on a page
    - plan_document(): One PagePlan per group, in group order

Dependencies:
    - builder.layout.models: GroupPage, PagePlan, DocumentPlan
    - builder.layout.config: PageConfig

Used By:
    - builder.controller: Main build controller
"""

from __future__ import annotations

import logging
from typing import Sequence

from .config import PageConfig
from .models import DocumentPlan, GroupPage, PagePlacement, PagePlan

logger = logging.getLogger(__name__)


def fit_to_page(
    image_width: float,
    image_height: float,
    page_width: float,
    page_height: float,
) -> PagePlacement:
    """
    Scale an image uniformly to fit a page and centre it.

    The scale is ``min(page_width / image_width, page_height / image_height)``,
    so one dimension fills the page and the other gets equal margins.
    Units only need to agree between the two page dimensions.

    Args:
        image_width: Source width in pixels
        image_height: Source height in pixels
        page_width: Page width
        page_height: Page height

    Returns:
        PagePlacement with top-left offsets

    Raises:
        ValueError: If any dimension is not positive

    Example:
        >>> p = fit_to_page(1000, 2000, 210, 297)
        >>> round(p.width, 2), round(p.height, 2), round(p.x, 2), round(p.y, 2)
        (148.5, 297.0, 30.75, 0.0)
    """
    if image_width <= 0 or image_height <= 0:
        raise ValueError(f"Image size must be positive: {image_width}x{image_height}")
    if page_width <= 0 or page_height <= 0:
        raise ValueError(f"Page size must be positive: {page_width}x{page_height}")

    scale = min(page_width / image_width, page_height / image_height)
    width = image_width * scale
    height = image_height * scale

    return PagePlacement(
        x=(page_width - width) / 2,
        y=(page_height - height) / 2,
        width=width,
        height=height,
        scale=scale,
    )


def plan_document(groups: Sequence[GroupPage], config: PageConfig) -> DocumentPlan:
    """
    Lay out one page per group.

    Group 0 becomes page 1 and the rest follow in group order.

    Args:
        groups: Masked composites in group order
        config: Page configuration

    Returns:
        DocumentPlan with a PagePlan per group
    """
    pages = []
    for index, group in enumerate(groups):
        width, height = group.size
        placement = fit_to_page(width, height, config.page_width, config.page_height)
        pages.append(PagePlan(index=index, group=group, placement=placement))

    if pages:
        first = pages[0].placement
        logger.debug(
            f"Page fit: scale {first.scale:.4f}, "
            f"{first.width:.1f}x{first.height:.1f} spanning "
            f"({first.x:.1f}, {first.y:.1f})-({first.right:.1f}, {first.bottom:.1f})"
        )

    return DocumentPlan(pages=tuple(pages), page_size=config.page_size)
