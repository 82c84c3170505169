"""
Mystery Letter Core Package

Shared data models for the letter builder.
"""

from .models import TileRect, Tile, PartitionResult

__all__ = [
    "TileRect",
    "Tile",
    "PartitionResult",
]
