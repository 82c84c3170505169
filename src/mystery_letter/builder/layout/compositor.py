"""
Module: builder.layout.compositor

Purpose:
    Build the masked composite for each group: a full-size white canvas
    with only that group's tiles drawn at their original positions.

Key Functions:
    - new_canvas(): Blank white canvas of the source size
    - composite_group(): Paint decoded tiles onto a canvas
    - compose_pages(): One GroupPage per group, in group order

Dependencies:
    - PIL: Image manipulation
    - builder.images.decoder: Asynchronous tile decoding

Used By:
    - builder.controller: Main build controller
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from PIL import Image

from mystery_letter.core.models import PartitionResult, Tile
from mystery_letter.builder.images.decoder import TileDecoder

from .models import GroupPage

logger = logging.getLogger(__name__)

BACKGROUND = "white"


class CanvasError(Exception):
    """Composite canvas could not be created."""
    pass


def new_canvas(size: tuple[int, int]) -> Image.Image:
    """
    Create a blank white RGB canvas.

    Args:
        size: (width, height) in pixels

    Returns:
        New white image

    Raises:
        CanvasError: If Pillow cannot allocate the canvas
    """
    try:
        return Image.new("RGB", size, BACKGROUND)
    except (ValueError, MemoryError) as e:
        raise CanvasError(f"Failed to create {size[0]}x{size[1]} canvas: {e}") from e


def composite_group(
    tiles: Sequence[Tile],
    images: Sequence[Image.Image],
    size: tuple[int, int],
) -> Image.Image:
    """
    Paint one group's decoded tiles onto a fresh canvas.

    Each tile is pasted at the top-left of its pixel box using its own
    alpha as the mask, so transparent source pixels stay white.

    Args:
        tiles: The group's tiles
        images: Decoded tile images, same order as tiles
        size: (width, height) of the source image

    Returns:
        Masked composite, RGB

    Raises:
        CanvasError: If the canvas cannot be created
        ValueError: If tiles and images differ in length
    """
    if len(tiles) != len(images):
        raise ValueError(f"{len(tiles)} tiles but {len(images)} decoded images")

    canvas = new_canvas(size)
    for tile, img in zip(tiles, images):
        left, top, _, _ = tile.rect.pixel_box()
        mask = img if img.mode == "RGBA" else None
        canvas.paste(img, (left, top), mask)
    return canvas


def compose_pages(
    partition: PartitionResult,
    decoder: Optional[TileDecoder] = None,
) -> tuple[GroupPage, ...]:
    """
    Create the masked composite for every group.

    All tile decodes are queued up front; each group is then composited
    as soon as all of its own decodes have completed, strictly in group
    order. Any failure aborts the whole run and nothing is returned.

    Args:
        partition: Partitioned tiles
        decoder: Decode queue to use (None = a private one for this call)

    Returns:
        Tuple of GroupPages, index i for group i

    Raises:
        CanvasError: If a canvas cannot be created
        DecodeError: If a tile cannot be decoded
    """
    if decoder is None:
        with TileDecoder() as own_decoder:
            return compose_pages(partition, own_decoder)

    pending = [decoder.submit_group(group) for group in partition.groups]
    pages: List[GroupPage] = []

    for index, (tiles, futures) in enumerate(zip(partition.groups, pending)):
        images = decoder.wait_group(futures)
        canvas = composite_group(tiles, images, partition.image_size)
        pages.append(GroupPage(
            index=index,
            image=canvas,
            tile_indices=tuple(tile.index for tile in tiles),
        ))
        if not tiles:
            logger.debug(f"Group {index} has no tiles, page will be blank")
        else:
            logger.debug(f"Composited group {index}: {len(tiles)} tiles")

    logger.info(
        f"Composited {len(pages)} group pages from {decoder.submitted} decoded tiles"
    )
    return tuple(pages)
