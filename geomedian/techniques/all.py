"""Run every technique, combine into a single report.

Runs: point, projections.
Runs mark too if --output is provided.

Example:
    geomedian all map.png
    geomedian all map.png --output marked.png --json
"""

from geomedian.core.types import PixelGrid, Report, Technique

technique = Technique(
    name='all',
    help='Run every technique (mark only with --output). Combine into a single report.',
)

# Techniques never run automatically
SKIP = {'all'}


@technique.run
def run(grid: PixelGrid, report: Report, args) -> None:
    from geomedian.registry import all_techniques

    has_output = bool(getattr(args, 'output', None))
    for name, tech in sorted(all_techniques().items()):
        if name in SKIP:
            continue
        if name == 'mark' and not has_output:
            continue
        tech.execute(grid, report, args)
