"""
Module: builder.partition

Purpose:
    Grid decomposition and balanced random tile-to-group assignment.

Key Functions:
    - partition_image(): Split an image and bucket its tiles
    - assign_tiles(): Shuffled balanced assignment
    - balanced_assignments(): Round-robin assignment
    - shuffle_in_place(): Fisher-Yates shuffle

Dependencies:
    - PIL: Image type

Used By:
    - builder.controller: Main build controller
"""

from .assigner import balanced_assignments, shuffle_in_place, assign_tiles
from .partitioner import partition_image, tile_rect, PartitionError

__all__ = [
    "balanced_assignments",
    "shuffle_in_place",
    "assign_tiles",
    "partition_image",
    "tile_rect",
    "PartitionError",
]
