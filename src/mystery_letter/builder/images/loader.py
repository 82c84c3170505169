"""
Module: builder.images.loader

Purpose:
    Load the user's source image into memory, oriented and in a mode the
    compositor can paste from.

Key Functions:
    - load_source_image(): Open, orient and normalize the source image

Dependencies:
    - PIL: Image decoding, EXIF orientation

Used By:
    - builder.controller: First pipeline step
"""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image, ImageOps, UnidentifiedImageError

logger = logging.getLogger(__name__)


class ImageLoadError(Exception):
    """Source image missing or not decodable."""
    pass


def load_source_image(path: Path) -> Image.Image:
    """
    Load the source image.

    EXIF orientation is applied so the grid is cut from the image as the
    user sees it. The result is RGBA: transparent regions stay transparent
    in the tiles and show the white page background once composited.

    Args:
        path: Image file in any format Pillow can decode

    Returns:
        Fully loaded RGBA image

    Raises:
        ImageLoadError: If the file is missing or cannot be decoded
    """
    path = Path(path)
    if not path.is_file():
        raise ImageLoadError(f"Image not found: {path}")

    try:
        with Image.open(path) as img:
            img.load()
            oriented = ImageOps.exif_transpose(img)
            source = oriented.convert("RGBA")
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
        raise ImageLoadError(f"Cannot decode image {path}: {e}") from e

    logger.info(f"Loaded {path.name}: {source.width}x{source.height}")
    return source
