"""
Module: partition

Purpose:
    Result model for tile partitioning: the shuffled assignment and the
    tiles bucketed per group.

Key Classes:
    - PartitionResult: Immutable partition of a grid into groups

Dependencies:
    - dataclasses (std)
    - core.models.tiles: Tile

Used By:
    - builder.partition.partitioner: Creates PartitionResult
    - builder.layout.compositor: Composites each group
    - builder.controller: Build metadata
"""

from __future__ import annotations

from dataclasses import dataclass

from .tiles import Tile


@dataclass(frozen=True)
class PartitionResult:
    """
    Tiles of one image distributed across groups (immutable).

    Attributes:
        grid_size: Tiles per side
        num_groups: Number of groups (output pages)
        image_size: (width, height) of the source image
        assignment: Group id per tile linear index
        groups: One tuple of tiles per group, tiles in row-major order

    Invariants:
        - len(assignment) == grid_size ** 2
        - len(groups) == num_groups
        - every tile index appears in exactly one group

    Example:
        >>> result.group_sizes
        (2, 2)
    """

    grid_size: int
    num_groups: int
    image_size: tuple[int, int]
    assignment: tuple[int, ...]
    groups: tuple[tuple[Tile, ...], ...]

    def __post_init__(self) -> None:
        """Validate structure on construction."""
        if len(self.assignment) != self.grid_size * self.grid_size:
            raise ValueError(
                f"assignment covers {len(self.assignment)} tiles, "
                f"expected {self.grid_size * self.grid_size}"
            )
        if len(self.groups) != self.num_groups:
            raise ValueError(
                f"got {len(self.groups)} groups, expected {self.num_groups}"
            )

    @property
    def total_tiles(self) -> int:
        """Number of tiles in the grid."""
        return len(self.assignment)

    @property
    def group_sizes(self) -> tuple[int, ...]:
        """Tile count per group, in group order."""
        return tuple(len(group) for group in self.groups)

    @property
    def empty_groups(self) -> list[int]:
        """Indices of groups that received no tiles."""
        return [i for i, group in enumerate(self.groups) if not group]

    def tile_indices(self, group: int) -> list[int]:
        """Linear tile indices held by a group."""
        return [tile.index for tile in self.groups[group]]
