"""Report the per-column and per-row foreground counts.

horizontal: one count per column, left to right.
vertical:   one count per row, top to bottom.

For each projection also reports the total, half (floor of total / 2)
and the median index: the first index where the running count reaches
half. Useful for checking why a median landed where it did.

Example:
    geomedian projections map.png --json
"""

from geomedian.core.median import corner_colour, horizontal_projection, median_index, vertical_projection
from geomedian.core.types import PixelGrid, Report, Technique

technique = Technique(
    name='projections',
    help='Report column/row foreground counts and the median index of each.',
)


def _summarise(counts: list[int]) -> dict:
    total = sum(counts)
    return {
        'counts': counts,
        'total': total,
        'half': total // 2,
        'index': median_index(counts),
    }


@technique.run
def run(grid: PixelGrid, report: Report, args) -> None:
    reference = corner_colour(grid)
    report.add(
        'projections',
        {
            'horizontal': _summarise(horizontal_projection(grid, reference)),
            'vertical': _summarise(vertical_projection(grid, reference)),
        },
    )
