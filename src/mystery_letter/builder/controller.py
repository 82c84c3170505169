"""
Module: builder.controller

Purpose:
    Orchestrate the complete letter building pipeline.
    Load → Partition → Composite → Fit → Render

Key Functions:
    - build_letter(): Main entry point for building a letter

Key Classes:
    - BuildResult: Complete build result
    - BuildError: Exception for build failures

Dependencies:
    - builder.images: Source loading, tile decoding
    - builder.partition: Tile assignment
    - builder.layout: Compositing and page fit
    - builder.output: PDF rendering

Used By:
    - mystery_letter.cli: Command line entry point
"""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from mystery_letter.core.models import PartitionResult

from .config import LetterConfig
from .images import load_source_image, ImageLoadError, TileDecoder, DecodeError
from .partition import partition_image, PartitionError
from .layout import PageConfig, DocumentPlan, compose_pages, plan_document, CanvasError
from .output import render_to_pdf

logger = logging.getLogger(__name__)


class BuildError(Exception):
    """Error during build pipeline."""
    pass


@dataclass(frozen=True)
class BuildResult:
    """
    Complete build result (immutable).

    Attributes:
        output_pdf: Path to the generated PDF
        page_count: Number of pages generated (== num_groups)
        tile_counts: Tiles per page, in page order
        metadata: Build metadata dictionary
        warnings: Any warnings during build
        metadata_path: Path to the JSON answer key (if written)

    Example:
        >>> result = build_letter(config)
        >>> print(f"Generated {result.page_count} pages: {result.tile_counts}")
    """
    output_pdf: Path
    page_count: int
    tile_counts: tuple[int, ...]
    metadata: dict
    warnings: tuple[str, ...]
    metadata_path: Optional[Path] = None


def build_letter(config: LetterConfig) -> BuildResult:
    """
    Build a mystery letter PDF from start to finish.

    Pipeline:
    1. Load the source image
    2. Partition it into tiles bucketed across groups
    3. Composite one masked full-size image per group
    4. Fit each image onto a page
    5. Render the PDF
    6. (Optional) Write the metadata answer key

    Nothing is written unless every step succeeds.

    Args:
        config: Build configuration

    Returns:
        BuildResult with paths and metadata

    Raises:
        BuildError: If any step fails

    Example:
        >>> config = LetterConfig(
        ...     image_path=Path("letter.jpg"),
        ...     grid_size=20,
        ...     num_groups=5,
        ...     output_dir=Path("output"),
        ... )
        >>> result = build_letter(config)
        >>> print(f"Generated {result.page_count} pages")
    """
    if config.image_path is None:
        raise BuildError("Please upload an image first.")

    warnings: List[str] = []
    start_time = time.perf_counter()

    logger.info(
        f"Starting build for {config.image_path} with a "
        f"{config.grid_size}x{config.grid_size} grid over {config.num_groups} pages"
    )

    # 1. Load source image
    try:
        source = load_source_image(config.image_path)
    except ImageLoadError as e:
        raise BuildError(f"Failed to load image: {e}") from e

    # 2. Partition
    try:
        partition = partition_image(
            source,
            grid_size=config.grid_size,
            num_groups=config.num_groups,
            rng=config.make_rng(),
        )
    except PartitionError as e:
        raise BuildError(f"Failed to partition image: {e}") from e

    # 3. Composite group pages
    try:
        with TileDecoder() as decoder:
            groups = compose_pages(partition, decoder)
    except CanvasError as e:
        raise BuildError(f"Failed to create canvas context: {e}") from e
    except DecodeError as e:
        raise BuildError(f"Failed to decode tiles: {e}") from e

    # 4. Fit onto pages
    page_width, page_height = config.page_dimensions
    page_config = PageConfig(
        page_width=page_width,
        page_height=page_height,
        image_format=config.image_format.upper(),
        jpeg_quality=config.jpeg_quality,
    )
    document = plan_document(groups, page_config)

    blank = document.blank_pages
    if blank:
        warnings.append(
            f"{len(blank)} of {config.num_groups} pages receive no tiles "
            f"({config.total_tiles} tiles in the grid)"
        )

    # 5. Render PDF
    output_pdf = config.output_path
    try:
        render_to_pdf(document, output_pdf, page_config)
    except (OSError, MemoryError, ValueError) as e:
        raise BuildError(f"Failed to write PDF {output_pdf}: {e}") from e

    elapsed = time.perf_counter() - start_time
    logger.info(f"Letter generation completed in {elapsed:.2f}s")

    # 6. Metadata
    metadata = _build_metadata(config, partition, document)
    metadata_path = None
    if config.write_metadata:
        metadata_path = output_pdf.with_suffix(".json")
        try:
            _write_metadata(metadata_path, metadata)
        except BuildError:
            output_pdf.unlink(missing_ok=True)
            raise
        logger.info(f"Wrote build metadata to {metadata_path}")

    for warning in warnings:
        logger.warning(warning)

    return BuildResult(
        output_pdf=output_pdf,
        page_count=document.page_count,
        tile_counts=partition.group_sizes,
        metadata=metadata,
        warnings=tuple(warnings),
        metadata_path=metadata_path,
    )


def _build_metadata(
    config: LetterConfig,
    partition: PartitionResult,
    document: DocumentPlan,
) -> dict:
    """
    Build metadata dictionary for a generated letter.

    The ``pages`` entry is the answer key: which tiles each page carries.

    Args:
        config: Build configuration used
        partition: Partition result
        document: Document plan

    Returns:
        Metadata dictionary ready for JSON serialization
    """
    from mystery_letter import __version__

    width, height = partition.image_size
    pages = []
    for page in document.pages:
        placement = page.placement
        pages.append({
            "page": page.index + 1,  # 1-indexed for humans
            "tile_count": len(page.group.tile_indices),
            "tiles": list(page.group.tile_indices),
            "tile_rects": [
                tile.rect.to_dict() for tile in partition.groups[page.index]
            ],
            "placement": {
                "x": placement.x,
                "y": placement.y,
                "width": placement.width,
                "height": placement.height,
                "scale": placement.scale,
            },
        })

    return {
        "generated_at": datetime.now().isoformat(),
        "builder_version": __version__,
        "source_image": str(config.image_path),
        "image_size": {"width": width, "height": height},
        "grid_size": partition.grid_size,
        "num_groups": partition.num_groups,
        "total_tiles": partition.total_tiles,
        "seed": config.seed,
        "page_size": config.page_size.upper(),
        "page_count": document.page_count,
        "tile_counts": list(partition.group_sizes),
        "assignment": list(partition.assignment),
        "pages": pages,
    }


def _write_metadata(metadata_path: Path, metadata: dict) -> None:
    """
    Write metadata JSON file.

    Args:
        metadata_path: Target path
        metadata: Metadata dictionary

    Raises:
        BuildError: If writing fails
    """
    try:
        with open(metadata_path, "w") as f:
            json.dump(metadata, f, indent=2)
    except OSError as e:
        raise BuildError(f"Failed to write metadata: {e}") from e
