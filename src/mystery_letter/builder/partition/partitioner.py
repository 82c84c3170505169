"""
Module: builder.partition.partitioner

Purpose:
    Split the source image into a square grid of tiles and bucket the
    tiles into groups using the shuffled balanced assignment.

Key Functions:
    - tile_rect(): Geometry of one grid cell
    - partition_image(): Main partitioning function

Algorithm:
    1. cell size = (W / grid_size, H / grid_size), no rounding
    2. assignment = round-robin group ids, Fisher-Yates shuffled
    3. walk the grid row-major, crop each cell into a standalone tile
       and append it to the group its linear index is assigned to

Dependencies:
    - PIL: Image type
    - builder.images.cropper: Tile extraction
    - builder.partition.assigner: Group assignment

Used By:
    - builder.controller: Main build controller
"""

from __future__ import annotations

import logging
import random
from typing import List, Optional

from PIL import Image

from mystery_letter.core.models import PartitionResult, Tile, TileRect
from mystery_letter.builder.images.cropper import crop_tile, encode_tile

from .assigner import assign_tiles

logger = logging.getLogger(__name__)


class PartitionError(Exception):
    """Image cannot be split into the requested grid."""
    pass


def tile_rect(column: int, row: int, cell_width: float, cell_height: float) -> TileRect:
    """
    Geometry of the cell at (column, row).

    Example:
        >>> tile_rect(1, 2, 10.5, 20.0)
        TileRect(x=10.5, y=40.0, width=10.5, height=20.0)
    """
    return TileRect(
        x=column * cell_width,
        y=row * cell_height,
        width=cell_width,
        height=cell_height,
    )


def partition_image(
    image: Image.Image,
    grid_size: int,
    num_groups: int,
    rng: Optional[random.Random] = None,
) -> PartitionResult:
    """
    Partition an image into ``num_groups`` groups of grid tiles.

    Every tile lands in exactly one group and group sizes differ by at
    most one. With more groups than tiles the surplus groups are empty.

    Args:
        image: Source image
        grid_size: Tiles per side
        num_groups: Number of groups
        rng: Random source for the shuffle (None = unseeded)

    Returns:
        PartitionResult with the assignment and per-group tiles

    Raises:
        ValueError: If grid_size or num_groups is not positive
        PartitionError: If the grid is finer than the image's pixels

    Example:
        >>> result = partition_image(img, grid_size=2, num_groups=2)
        >>> result.group_sizes
        (2, 2)
    """
    if grid_size <= 0:
        raise ValueError(f"grid_size must be positive: {grid_size}")
    if num_groups <= 0:
        raise ValueError(f"num_groups must be positive: {num_groups}")

    width, height = image.size
    if grid_size > width or grid_size > height:
        raise PartitionError(
            f"Grid of {grid_size}x{grid_size} tiles is finer than the "
            f"{width}x{height} image"
        )

    cell_width = width / grid_size
    cell_height = height / grid_size

    assignment = assign_tiles(grid_size, num_groups, rng)

    groups: List[List[Tile]] = [[] for _ in range(num_groups)]

    for row in range(grid_size):
        for column in range(grid_size):
            rect = tile_rect(column, row, cell_width, cell_height)
            index = row * grid_size + column
            tile = Tile(
                index=index,
                column=column,
                row=row,
                rect=rect,
                data=encode_tile(crop_tile(image, rect)),
            )
            groups[assignment[index]].append(tile)

    result = PartitionResult(
        grid_size=grid_size,
        num_groups=num_groups,
        image_size=(width, height),
        assignment=assignment,
        groups=tuple(tuple(group) for group in groups),
    )

    logger.info(
        f"Partitioned {width}x{height} image into {result.total_tiles} tiles "
        f"({cell_width:.2f}x{cell_height:.2f}px) across {num_groups} groups"
    )
    logger.debug(
        f"Group sizes: {result.group_sizes}, "
        f"{sum(tile.byte_size for group in result.groups for tile in group)} bytes encoded"
    )

    return result
