"""
Module: builder.output.renderer

Purpose:
    Render a DocumentPlan to PDF using ReportLab.
    Each PagePlan becomes one PDF page with its group image scaled and
    centred.

Key Functions:
    - render_to_pdf(): Main rendering function

Dependencies:
    - reportlab: PDF generation
    - PIL: Image encoding

Used By:
    - builder.controller: Pipeline orchestration
"""

from __future__ import annotations

import io
import logging
import tempfile
from pathlib import Path

from PIL import Image
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from mystery_letter.builder.layout.config import PageConfig
from mystery_letter.builder.layout.models import DocumentPlan, PagePlan

logger = logging.getLogger(__name__)


def render_to_pdf(
    document: DocumentPlan,
    output_path: Path,
    config: PageConfig,
) -> Path:
    """
    Render a document plan to a PDF file.

    The PDF is built in a temporary file next to the target and moved
    into place only once every page has been written, so a failed run
    never leaves a partial document behind.

    Args:
        document: Page plans in output order
        output_path: Path to write PDF
        config: Page size and image encoding

    Returns:
        The written path

    Raises:
        OSError: If PDF cannot be written

    Example:
        >>> render_to_pdf(plan, Path("out/combined_images.pdf"), PageConfig())
    """
    if document.page_count == 0:
        logger.warning("Empty document, creating empty PDF")

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with tempfile.NamedTemporaryFile(
        mode="wb",
        suffix=".pdf",
        dir=output_path.parent,
        delete=False,
    ) as f:
        temp_path = Path(f.name)

    try:
        c = canvas.Canvas(str(temp_path), pagesize=config.page_size)
        for page in document.pages:
            _render_page(c, page, config)
            c.showPage()
        c.save()
        temp_path.replace(output_path)
    except BaseException:
        temp_path.unlink(missing_ok=True)
        raise

    logger.info(f"Rendered {document.page_count} pages to {output_path}")
    return output_path


def _render_page(c: canvas.Canvas, page: PagePlan, config: PageConfig) -> None:
    """
    Draw one group image onto the current page.

    Args:
        c: ReportLab canvas
        page: Page plan with placement
        config: Page configuration
    """
    placement = page.placement
    reader = _pil_to_reader(page.group.image, config.image_format, config.jpeg_quality)

    c.drawImage(
        reader,
        placement.x,
        _transform_y(config.page_height, placement.y, placement.height),
        width=placement.width,
        height=placement.height,
    )


def _pil_to_reader(img: Image.Image, fmt: str = "JPEG", quality: int = 100) -> ImageReader:
    """
    Convert PIL image to ReportLab ImageReader.

    Args:
        img: PIL Image object
        fmt: "JPEG" or "PNG"
        quality: JPEG quality

    Returns:
        ImageReader for use with ReportLab
    """
    buf = io.BytesIO()
    if fmt == "JPEG":
        img.convert("RGB").save(buf, format="JPEG", quality=quality)
    else:
        img.save(buf, format="PNG")
    buf.seek(0)
    return ImageReader(buf)


def _transform_y(page_height: float, y_top: float, height: float) -> float:
    """
    Convert a top-down Y offset to ReportLab's bottom-up Y.

    Args:
        page_height: Page height in points
        y_top: Offset of the element's top edge from the page top
        height: Element height in points

    Returns:
        Y of the element's bottom edge from the page bottom
    """
    return page_height - y_top - height
