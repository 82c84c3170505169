"""
Module: builder.images

Purpose:
    Image access for the letter pipeline: loading the source image,
    cutting and encoding tiles, and decoding tiles asynchronously.

Key Classes:
    - TileDecoder: Thread pool decode queue

Key Functions:
    - load_source_image(): Load and orient the source image
    - crop_tile(): Crop one tile from the source
    - encode_tile(): Encode a tile as PNG

Dependencies:
    - PIL: Image manipulation

Used By:
    - builder.partition: Tile extraction
    - builder.layout: Group compositing
    - builder.controller: Image loading
"""

from .loader import load_source_image, ImageLoadError
from .cropper import crop_tile, encode_tile
from .decoder import TileDecoder, DecodeError

__all__ = [
    "load_source_image",
    "ImageLoadError",
    "crop_tile",
    "encode_tile",
    "TileDecoder",
    "DecodeError",
]
