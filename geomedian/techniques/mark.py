"""Draw a cross on the geographic median and save the result as a new image.

Requires --output. The cross arms span width/divisor and height/divisor
pixels either side of the median (default divisor 16, or
GEOMEDIAN_DIVISOR). Colour defaults to black (or GEOMEDIAN_COLOUR). The
output is always RGBA; the input file is never touched.

Example:
    geomedian mark map.png --output map_median.png
    geomedian mark map.png -o out.png --divisor 8 --colour '#ff0000'
"""

import os
import sys

from geomedian.core.colour import rgba_to_hex
from geomedian.core.marker import draw_cross
from geomedian.core.median import median_point
from geomedian.core.types import PixelGrid, Report, Technique

technique = Technique(
    name='mark',
    help='Draw a cross on the median point and save a new image. Requires --output.',
)


@technique.run
def run(grid: PixelGrid, report: Report, args) -> None:
    output = getattr(args, 'output', None)
    if not output:
        report.add('mark', {'error': '--output path required'})
        return

    pt = median_point(grid)
    marked = draw_cross(grid, pt, divisor=args.divisor, colour=args.marker_colour)

    parent = os.path.dirname(output)
    if parent:
        os.makedirs(parent, exist_ok=True)
    marked.save(output)
    print(f'geomedian: wrote {output}', file=sys.stderr)

    report.add(
        'mark',
        {
            'file': output,
            'x': pt.x,
            'y': pt.y,
            'h_size': grid.width // args.divisor,
            'v_size': grid.height // args.divisor,
            'colour': rgba_to_hex(args.marker_colour),
        },
    )
