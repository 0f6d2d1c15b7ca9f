"""Geographic median of a binary-mask image.

"Geographic median is the point that divides the nation into equal area
north-south regions and equal area east-west regions."

Every pixel that differs from the background colour weighs 1, every
background pixel weighs 0. Counting those weights per column and per row
gives two projections; the median index of each projection is one
coordinate of the median point. The two axes are independent, so the
result is the product of two 1D medians, not a true 2D geometric median.
"""

from collections.abc import Callable, Sequence

import numpy as np

from geomedian.core.types import RGBA, PixelGrid, Point

COLUMNS = 'columns'
ROWS = 'rows'


def corner_colour(grid: PixelGrid) -> RGBA:
    """Background colour: the sample at the grid's minimum-coordinate corner."""
    min_x, min_y, _, _ = grid.bounds
    return grid.colour_at(min_x, min_y)


def compute_projection(grid: PixelGrid, axis: str, reference: RGBA) -> list[int]:
    """Count, per column or per row, the samples differing from `reference`.

    axis='columns' gives one count per column, left to right (horizontal
    projection). axis='rows' gives one count per row, top to bottom
    (vertical projection). A sample differs when any of its four channels
    is not exactly equal to the reference channel. `reference` is a
    16-bit premultiplied sample, as returned by PixelGrid.colour_at; use
    colour.premultiply to turn an 8-bit RGBA colour into one.
    """
    if axis == COLUMNS:
        sum_over = 0
    elif axis == ROWS:
        sum_over = 1
    else:
        raise ValueError(f'Unknown axis: {axis!r}. Expected {COLUMNS!r} or {ROWS!r}')

    arr = grid.to_array()
    differs = np.any(arr != np.asarray(reference, dtype=arr.dtype), axis=-1)
    return [int(n) for n in differs.sum(axis=sum_over)]


def horizontal_projection(grid: PixelGrid, reference: RGBA) -> list[int]:
    return compute_projection(grid, COLUMNS, reference)


def vertical_projection(grid: PixelGrid, reference: RGBA) -> list[int]:
    return compute_projection(grid, ROWS, reference)


def median_index(values: Sequence[int]) -> int:
    """Index where the running sum first reaches half the total.

    half is the floor of total / 2, and the threshold is inclusive, so even
    splits land on the lower side: [1, 1, 1, 1] -> 1, [5, 0, 0, 0, 5] -> 0.
    An all-zero sequence returns 0.
    """
    if len(values) == 0:
        raise ValueError('median_index needs at least one value')

    half = sum(int(v) for v in values) // 2
    running = 0
    for index, value in enumerate(values):
        running += int(value)
        if running >= half:
            return index
    # unreachable for non-negative input, but never step past the end
    return len(values) - 1


def median_point(grid: PixelGrid, background: Callable[[PixelGrid], RGBA] = corner_colour) -> Point:
    """Geographic median of the grid, in the grid's coordinate space."""
    reference = background(grid)
    min_x, min_y, _, _ = grid.bounds
    x = min_x + median_index(horizontal_projection(grid, reference))
    y = min_y + median_index(vertical_projection(grid, reference))
    return Point(x, y)
