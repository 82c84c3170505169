"""
Module: builder.images.cropper

Purpose:
    Utilities for cutting grid tiles out of the source image and encoding
    them as standalone images.

Key Functions:
    - crop_tile(): Crop one tile region from the source
    - encode_tile(): Encode a tile image as PNG bytes

Dependencies:
    - PIL: Image manipulation
    - core.models.tiles: TileRect

Used By:
    - builder.partition.partitioner: Tile extraction
"""

from __future__ import annotations

import io

from PIL import Image

from mystery_letter.core.models import TileRect


def crop_tile(source: Image.Image, rect: TileRect) -> Image.Image:
    """
    Crop a tile from the source image.

    Args:
        source: Source image
        rect: Tile geometry (fractional edges are floored)

    Returns:
        Cropped image (new copy, not a view)

    Raises:
        ValueError: If the pixel box is empty or outside the image

    Example:
        >>> tile = crop_tile(source, TileRect(0, 0, 50, 50))
        >>> tile.size
        (50, 50)
    """
    left, top, right, bottom = rect.pixel_box()

    if right > source.width:
        raise ValueError(
            f"Tile right {right} exceeds image width {source.width}"
        )
    if bottom > source.height:
        raise ValueError(
            f"Tile bottom {bottom} exceeds image height {source.height}"
        )
    if right <= left or bottom <= top:
        raise ValueError(
            f"Tile {rect} covers no pixels (box {left},{top},{right},{bottom})"
        )

    return source.crop((left, top, right, bottom))


def encode_tile(tile: Image.Image) -> bytes:
    """
    Encode a tile as PNG bytes.

    PNG keeps the tile lossless and preserves alpha, so compositing the
    decoded tile reproduces the source pixels exactly.
    """
    buf = io.BytesIO()
    tile.save(buf, format="PNG")
    return buf.getvalue()
