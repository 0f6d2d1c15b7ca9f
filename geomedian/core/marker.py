"""Cross marker rendering.

The cross is sized as a fraction of the grid: each arm spans
width // divisor pixels either side of the point horizontally and
height // divisor pixels vertically. Arm pixels outside the grid are
dropped.
"""

from PIL import Image

from geomedian.core.types import RGBA, PixelGrid, Point

DEFAULT_DIVISOR = 16
BLACK: RGBA = (0, 0, 0, 255)


def draw_cross(
    grid: PixelGrid,
    point: Point,
    divisor: int = DEFAULT_DIVISOR,
    colour: RGBA = BLACK,
) -> Image.Image:
    """Return a new RGBA image of the grid with a cross centred on `point`.

    `point` is in grid coordinates. The grid itself is not modified.
    """
    if divisor < 1:
        raise ValueError(f'divisor must be >= 1, got {divisor}')

    dst = grid.to_image()
    pixels = dst.load()
    ox, oy = grid.origin
    h_size = grid.width // divisor
    v_size = grid.height // divisor

    for x in range(point.x - h_size, point.x + h_size):
        if grid.contains(x, point.y):
            pixels[x - ox, point.y - oy] = colour
    for y in range(point.y - v_size, point.y + v_size):
        if grid.contains(point.x, y):
            pixels[point.x - ox, y - oy] = colour
    return dst
