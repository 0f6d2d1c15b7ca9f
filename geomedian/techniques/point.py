"""Compute the geographic median point of a mask image.

The background colour is the pixel at the image's top-left corner. Every
other-coloured pixel weighs 1. The median x splits the weight into equal
left/right halves, the median y into equal top/bottom halves; each axis
is solved on its own.

Coordinates are reported in grid space, i.e. shifted by --origin.

Example:
    geomedian point map.png
    geomedian point map.png --origin 100,50 --json
"""

from geomedian.core.colour import rgba_to_hex
from geomedian.core.median import median_point
from geomedian.core.types import PixelGrid, Report, Technique

technique = Technique(
    name='point',
    help='Compute the geographic median point and report it.',
)


@technique.run
def run(grid: PixelGrid, report: Report, args) -> None:
    pt = median_point(grid)
    report.add(
        'point',
        {
            'x': pt.x,
            'y': pt.y,
            'background': rgba_to_hex(grid.rgba_at(grid.bounds[0], grid.bounds[1])),
        },
    )
