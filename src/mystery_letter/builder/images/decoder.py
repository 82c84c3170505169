"""
Module: builder.images.decoder

Purpose:
    Asynchronous tile decoding. Tiles are decoded on a thread pool; a
    group is only composited once every one of its decodes has finished.

Key Classes:
    - TileDecoder: Thread pool-based decode queue
    - DecodeError: A tile could not be decoded

Dependencies:
    - concurrent.futures: Thread pool execution
    - PIL.Image: Image decoding

Used By:
    - builder.layout.compositor: Group compositing
"""

from __future__ import annotations

import io
import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Iterable, List, Optional

from PIL import Image

from mystery_letter.core.models import Tile

logger = logging.getLogger(__name__)


class DecodeError(Exception):
    """Tile image data could not be decoded."""
    pass


class TileDecoder:
    """
    Thread pool-based decode queue for tile images.

    Decodes for later groups may already be running while an earlier
    group is being composited; ``wait_group`` is the barrier that makes a
    group's tiles available all at once.

    Usage:
        with TileDecoder(max_workers=4) as decoder:
            pending = [decoder.submit_group(g) for g in groups]
            for futures in pending:
                images = decoder.wait_group(futures)
                # ... composite ...

    Attributes:
        max_workers: Maximum concurrent decode threads.
    """

    def __init__(self, max_workers: int = 4):
        """
        Initialize decode queue.

        Args:
            max_workers: Maximum concurrent decode threads.
        """
        self.max_workers = max_workers
        self._executor = ThreadPoolExecutor(max_workers=max_workers)
        self._submitted = 0

    def submit(self, tile: Tile) -> Future:
        """
        Queue a tile decode.

        Args:
            tile: Tile with encoded image data

        Returns:
            Future resolving to the decoded RGBA image
        """
        self._submitted += 1
        return self._executor.submit(_decode_sync, tile)

    def submit_group(self, tiles: Iterable[Tile]) -> List[Future]:
        """Queue decodes for every tile of a group, in tile order."""
        return [self.submit(tile) for tile in tiles]

    def wait_group(
        self,
        futures: List[Future],
        timeout: Optional[float] = None,
    ) -> List[Image.Image]:
        """
        Wait for all decodes of one group.

        Args:
            futures: Futures returned by ``submit_group``
            timeout: Max seconds to wait per tile (None = indefinite)

        Returns:
            Decoded images, in the same order as the futures

        Raises:
            DecodeError: If any tile failed to decode
        """
        images = []
        for future in futures:
            try:
                images.append(future.result(timeout=timeout))
            except DecodeError:
                raise
            except Exception as e:
                raise DecodeError(f"Tile decode failed: {e}") from e
        return images

    @property
    def submitted(self) -> int:
        """Number of decodes queued so far."""
        return self._submitted

    def shutdown(self) -> None:
        """Shutdown the thread pool, dropping decodes not yet started."""
        self._executor.shutdown(wait=True, cancel_futures=True)

    def __enter__(self) -> "TileDecoder":
        return self

    def __exit__(self, *args) -> None:
        self.shutdown()


def _decode_sync(tile: Tile) -> Image.Image:
    """Synchronous decode of one tile into a fully loaded RGBA image."""
    try:
        with Image.open(io.BytesIO(tile.data)) as img:
            img.load()
            return img.convert("RGBA")
    except OSError as e:
        raise DecodeError(f"Tile {tile.index} is not a valid image: {e}") from e
