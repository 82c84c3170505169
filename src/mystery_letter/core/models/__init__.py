"""
Core Models Package

Immutable, validated data models shared by the partitioning, compositing
and rendering stages. All models are frozen dataclasses, so they are safe
to hand to decode threads.
"""

from .tiles import TileRect, Tile
from .partition import PartitionResult

__all__ = [
    "TileRect",
    "Tile",
    "PartitionResult",
]
