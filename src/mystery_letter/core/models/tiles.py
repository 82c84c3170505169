"""
Module: tiles

Purpose:
    Provides the TileRect and Tile dataclasses - a single grid cell of the
    source image, its original position, and its standalone encoded pixels.

Key Functions:
    - TileRect.pixel_box(): Integer (left, top, right, bottom) box for PIL
    - TileRect.to_dict(): Serialize for JSON
    - Tile.byte_size: Size of the encoded tile

Dependencies:
    - dataclasses (std)
    - math (std)

Used By:
    - builder.partition.partitioner: Creates Tiles
    - builder.layout.compositor: Places Tiles on group canvases
    - builder.controller: Build metadata
"""

from __future__ import annotations

import math
from dataclasses import dataclass

# Absorbs float drift in column * (W / grid_size) before flooring
EDGE_EPSILON = 1e-9


def _floor_edge(value: float) -> int:
    return math.floor(value + EDGE_EPSILON)


@dataclass(frozen=True, slots=True)
class TileRect:
    """
    Tile geometry in source-image pixels.

    Width and height are ``W / grid_size`` and ``H / grid_size`` exactly,
    so every coordinate may be fractional.

    Attributes:
        x: Left edge
        y: Top edge
        width: Tile width
        height: Tile height

    Invariants:
        - x >= 0, y >= 0
        - width > 0, height > 0

    Example:
        >>> rect = TileRect(x=33.5, y=0.0, width=33.5, height=20.0)
        >>> rect.pixel_box()
        (33, 0, 67, 20)
    """

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        """Validate geometry on construction."""
        if self.x < 0 or self.y < 0:
            raise ValueError(f"origin must be non-negative: ({self.x}, {self.y})")
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"size must be positive: {self.width}x{self.height}"
            )

    @property
    def right(self) -> float:
        """Right edge (exclusive)."""
        return self.x + self.width

    @property
    def bottom(self) -> float:
        """Bottom edge (exclusive)."""
        return self.y + self.height

    def pixel_box(self) -> tuple[int, int, int, int]:
        """
        Get the (left, top, right, bottom) pixel box for this tile.

        Every edge is floored. Neighbouring tiles share the same float
        edge, so they also share the same pixel edge: the boxes tile the
        image with no gaps and no overlap.

        Returns:
            Tuple suitable for ``Image.crop`` and ``Image.paste``
        """
        return (
            _floor_edge(self.x),
            _floor_edge(self.y),
            _floor_edge(self.right),
            _floor_edge(self.bottom),
        )

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON output."""
        return {
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
        }


@dataclass(frozen=True)
class Tile:
    """
    One grid cell extracted as a standalone image.

    Attributes:
        index: Linear index in row-major order (row * grid_size + column)
        column: Grid column (0-indexed)
        row: Grid row (0-indexed)
        rect: Original position in the source image
        data: Tile pixels encoded as PNG
    """

    index: int
    column: int
    row: int
    rect: TileRect
    data: bytes

    @property
    def byte_size(self) -> int:
        """Size of the encoded tile in bytes."""
        return len(self.data)
