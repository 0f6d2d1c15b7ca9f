"""Tests for geomedian.core.marker — cross rendering."""

import numpy as np
import pytest
from geomedian.core.marker import draw_cross
from geomedian.core.types import PixelGrid, Point
from PIL import Image

WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)


def _count(img: Image.Image, colour) -> int:
    arr = np.array(img)
    return int(np.all(arr == np.array(colour, dtype=np.uint8), axis=-1).sum())


def _white_grid(size: int = 32, origin=(0, 0)) -> PixelGrid:
    return PixelGrid(Image.new('RGBA', (size, size), WHITE), origin=origin)


class TestDrawCross:
    def test_arms(self):
        # 32 // 16 = 2: arms cover [14, 18) on each axis, sharing the centre
        out = draw_cross(_white_grid(), Point(16, 16))
        assert _count(out, BLACK) == 7
        for x in (14, 15, 16, 17):
            assert out.getpixel((x, 16)) == BLACK
        for y in (14, 15, 16, 17):
            assert out.getpixel((16, y)) == BLACK
        assert out.getpixel((13, 16)) == WHITE
        assert out.getpixel((18, 16)) == WHITE
        assert out.getpixel((16, 18)) == WHITE

    def test_source_untouched(self):
        grid = _white_grid()
        draw_cross(grid, Point(16, 16))
        assert grid.rgba_at(16, 16) == WHITE

    def test_output_is_rgba_and_same_size(self):
        out = draw_cross(PixelGrid(Image.new('RGB', (20, 10), (255, 255, 255))), Point(5, 5))
        assert out.mode == 'RGBA'
        assert out.size == (20, 10)

    def test_clipped_at_corner(self):
        out = draw_cross(_white_grid(), Point(0, 0))
        # x in [-2, 2) and y in [-2, 2): only (0,0), (1,0), (0,1) land
        assert _count(out, BLACK) == 3

    def test_uses_grid_coordinates(self):
        out = draw_cross(_white_grid(origin=(100, 200)), Point(116, 216))
        assert out.getpixel((16, 16)) == BLACK
        assert _count(out, BLACK) == 7

    def test_point_outside_grid_draws_nothing(self):
        out = draw_cross(_white_grid(), Point(-50, -50))
        assert _count(out, BLACK) == 0

    def test_non_square_sizes(self):
        grid = PixelGrid(Image.new('RGBA', (64, 16), WHITE))
        out = draw_cross(grid, Point(32, 8))
        # h_size = 4 -> 8 pixels; v_size = 1 -> 2 pixels; one shared
        assert _count(out, BLACK) == 9

    def test_small_image_has_no_cross(self):
        out = draw_cross(_white_grid(size=8), Point(4, 4))
        assert _count(out, BLACK) == 0

    def test_divisor_and_colour(self):
        red = (255, 0, 0, 255)
        out = draw_cross(_white_grid(), Point(16, 16), divisor=8, colour=red)
        assert _count(out, red) == 15

    def test_bad_divisor(self):
        with pytest.raises(ValueError):
            draw_cross(_white_grid(), Point(1, 1), divisor=0)
