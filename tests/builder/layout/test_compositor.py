"""
Tests for builder.layout.compositor

Test Coverage:
- Masked composites: only the group's tiles drawn, rest white
- Overlaying all pages reconstructs the source
- Blank pages for empty groups
- Canvas creation failure
"""

import random
from unittest.mock import patch

import pytest
from PIL import Image

from mystery_letter.builder.images.decoder import DecodeError, TileDecoder
from mystery_letter.builder.layout import (
    CanvasError,
    compose_pages,
    composite_group,
    new_canvas,
)
from mystery_letter.builder.partition import partition_image
from mystery_letter.core.models import Tile
from conftest import QUADRANT_COLORS, WHITE, gradient_image

QUADRANT_CENTRES = [(10, 10), (30, 10), (10, 30), (30, 30)]


class TestComposePages:

    def test_two_by_two_over_two_pages(self, quadrant_image):
        # Arrange
        partition = partition_image(quadrant_image, 2, 2, random.Random(5))

        # Act
        pages = compose_pages(partition)

        # Assert
        assert len(pages) == 2
        for page in pages:
            assert page.size == (40, 40)
            assert len(page.tile_indices) == 2
            for index, centre in enumerate(QUADRANT_CENTRES):
                expected = QUADRANT_COLORS[index] if index in page.tile_indices else WHITE
                assert page.image.getpixel(centre) == expected

    def test_overlay_of_all_pages_reconstructs_source(self):
        """Every pixel is drawn on exactly one page, with the source value."""
        # Arrange - fractional 53/4 x 37/4 cells
        source = gradient_image(53, 37)
        partition = partition_image(source, 4, 3, random.Random(8))

        # Act
        pages = compose_pages(partition)

        # Assert
        page_pixels = [list(p.image.getdata()) for p in pages]
        for i, expected in enumerate(source.getdata()):
            drawn = [pixels[i] for pixels in page_pixels if pixels[i] != WHITE]
            assert drawn == [expected]

    def test_single_group_is_whole_image(self, quadrant_image):
        partition = partition_image(quadrant_image, 2, 1, random.Random(0))

        (page,) = compose_pages(partition)

        assert list(page.image.getdata()) == list(quadrant_image.getdata())

    def test_empty_groups_give_blank_pages(self):
        partition = partition_image(gradient_image(20, 20), 2, 6, random.Random(1))

        pages = compose_pages(partition)

        assert len(pages) == 6
        blank = [p for p in pages if p.is_blank]
        assert len(blank) == 2
        for page in blank:
            assert page.image.getcolors() == [(400, WHITE)]

    def test_pages_in_group_order(self, quadrant_image):
        partition = partition_image(quadrant_image, 2, 3, random.Random(2))

        pages = compose_pages(partition)

        assert [p.index for p in pages] == [0, 1, 2]
        for page in pages:
            assert list(page.tile_indices) == partition.tile_indices(page.index)

    def test_uses_supplied_decoder(self, quadrant_image):
        partition = partition_image(quadrant_image, 2, 2, random.Random(3))

        with TileDecoder(max_workers=2) as decoder:
            compose_pages(partition, decoder)
            assert decoder.submitted == 4

    def test_decode_failure_aborts(self, quadrant_image):
        partition = partition_image(quadrant_image, 2, 2, random.Random(3))
        broken = Tile(
            index=0,
            column=0,
            row=0,
            rect=partition.groups[0][0].rect,
            data=b"garbage",
        )
        groups = ((broken,) + partition.groups[0][1:],) + partition.groups[1:]
        damaged = type(partition)(
            grid_size=partition.grid_size,
            num_groups=partition.num_groups,
            image_size=partition.image_size,
            assignment=partition.assignment,
            groups=groups,
        )

        with pytest.raises(DecodeError):
            compose_pages(damaged)

    def test_canvas_failure_aborts(self, quadrant_image):
        partition = partition_image(quadrant_image, 2, 2, random.Random(3))

        with patch(
            "mystery_letter.builder.layout.compositor.new_canvas",
            side_effect=CanvasError("no context"),
        ):
            with pytest.raises(CanvasError):
                compose_pages(partition)


class TestCompositeGroup:

    def test_transparent_tile_pixels_stay_white(self):
        # Arrange
        partition = partition_image(
            Image.new("RGBA", (10, 10), (0, 0, 0, 0)), 1, 1, random.Random(0)
        )
        tile = partition.groups[0][0]
        decoded = Image.new("RGBA", (10, 10), (0, 0, 0, 0))

        # Act
        canvas = composite_group([tile], [decoded], (10, 10))

        # Assert
        assert canvas.mode == "RGB"
        assert canvas.getcolors() == [(100, WHITE)]

    def test_length_mismatch(self):
        with pytest.raises(ValueError, match="decoded images"):
            composite_group([], [Image.new("RGBA", (1, 1))], (10, 10))


class TestNewCanvas:

    def test_white_canvas(self):
        canvas = new_canvas((3, 2))

        assert canvas.size == (3, 2)
        assert canvas.getcolors() == [(6, WHITE)]

    def test_allocation_failure_raises_canvas_error(self):
        with patch(
            "mystery_letter.builder.layout.compositor.Image.new",
            side_effect=MemoryError("out of memory"),
        ):
            with pytest.raises(CanvasError, match="Failed to create 10x10 canvas"):
                new_canvas((10, 10))
