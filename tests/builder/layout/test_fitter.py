"""
Unit tests for the page fitting math.
"""

import pytest
from PIL import Image
from reportlab.lib.pagesizes import A4

from mystery_letter.builder.layout import (
    GroupPage,
    PageConfig,
    fit_to_page,
    plan_document,
)


class TestFitToPage:

    def test_tall_image_on_a4_millimetres(self):
        """1000x2000 on 210x297mm fills the height with equal side margins."""
        # Act
        placement = fit_to_page(1000, 2000, 210, 297)

        # Assert
        assert placement.scale == pytest.approx(0.1485)
        assert placement.width == pytest.approx(148.5)
        assert placement.height == pytest.approx(297)
        assert placement.x == pytest.approx(30.75)
        assert placement.y == pytest.approx(0)
        assert placement.right == pytest.approx(210 - 30.75)

    def test_wide_image_fills_width(self):
        placement = fit_to_page(400, 100, 200, 300)

        assert placement.scale == pytest.approx(0.5)
        assert placement.width == pytest.approx(200)
        assert placement.height == pytest.approx(50)
        assert placement.x == pytest.approx(0)
        assert placement.y == pytest.approx(125)
        assert placement.bottom == pytest.approx(175)

    def test_small_image_scaled_up_to_fit(self):
        placement = fit_to_page(10, 10, 100, 200)

        assert placement.scale == pytest.approx(10)
        assert placement.y == pytest.approx(50)

    def test_same_aspect_fills_page(self):
        placement = fit_to_page(420, 594, 210, 297)

        assert (placement.x, placement.y) == (pytest.approx(0), pytest.approx(0))

    @pytest.mark.parametrize("args", [(0, 10, 10, 10), (10, 10, 10, -1)])
    def test_rejects_non_positive_sizes(self, args):
        with pytest.raises(ValueError):
            fit_to_page(*args)


class TestPageConfig:

    def test_defaults_to_a4_portrait(self):
        config = PageConfig()

        assert config.page_size == A4
        assert config.page_width < config.page_height

    def test_rejects_unknown_format(self):
        with pytest.raises(ValueError, match="image_format"):
            PageConfig(image_format="GIF")

    @pytest.mark.parametrize("quality", [0, 101])
    def test_rejects_out_of_range_quality(self, quality):
        with pytest.raises(ValueError, match="jpeg_quality"):
            PageConfig(jpeg_quality=quality)

    def test_default_quality_is_maximum(self):
        assert PageConfig().jpeg_quality == 100


class TestPlanDocument:

    def test_one_page_per_group_in_order(self):
        # Arrange
        groups = [
            GroupPage(index=i, image=Image.new("RGB", (100, 200), "white"), tile_indices=(i,))
            for i in range(3)
        ]

        # Act
        plan = plan_document(groups, PageConfig(page_width=210, page_height=297))

        # Assert
        assert plan.page_count == 3
        assert [p.index for p in plan.pages] == [0, 1, 2]
        assert [p.group.tile_indices for p in plan.pages] == [(0,), (1,), (2,)]
        assert plan.pages[0].placement.x == pytest.approx(30.75)
        assert plan.page_size == (210, 297)

    def test_blank_pages_reported(self):
        groups = [
            GroupPage(index=0, image=Image.new("RGB", (10, 10), "white"), tile_indices=(0,)),
            GroupPage(index=1, image=Image.new("RGB", (10, 10), "white"), tile_indices=()),
        ]

        plan = plan_document(groups, PageConfig())

        assert plan.blank_pages == [1]

    def test_no_groups(self):
        plan = plan_document([], PageConfig())

        assert plan.page_count == 0
