"""geomedian — Find the geographic median of a mask image and mark it.

Usage: geomedian <technique> <image> [options]

Techniques are auto-discovered from geomedian/techniques/.
Each technique module's docstring is its documentation.
Run `geomedian help <technique>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, geomedian looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import os
import sys

from PIL import Image, UnidentifiedImageError

from geomedian import registry
from geomedian.core.colour import hex_to_rgba
from geomedian.core.env import env_int, env_str, load_env
from geomedian.core.marker import DEFAULT_DIVISOR
from geomedian.core.report import format_json, format_text
from geomedian.core.types import PixelGrid, Report


def _parse_origin(text: str) -> tuple[int, int]:
    """'X,Y' -> (X, Y). Used as an argparse type."""
    parts = text.split(',')
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f'origin must be X,Y, got {text!r}')
    try:
        return (int(parts[0]), int(parts[1]))
    except ValueError:
        raise argparse.ArgumentTypeError(f'origin must be two integers, got {text!r}') from None


def _build_parser() -> argparse.ArgumentParser:
    techniques = registry.all_techniques()

    epilog = (
        'Examples:\n'
        '  geomedian point map.png\n'
        '  geomedian mark map.png --output map_median.png\n'
        '  geomedian mark map.png -o out.png --divisor 8 --colour "#ff0000"\n'
        '  geomedian projections map.png --json\n'
        '  geomedian all map.png -o out.png --origin 100,50\n'
        '  geomedian help mark\n'
        '\n'
        'Env vars (set in .env or environment):\n'
        '  GEOMEDIAN_DIVISOR  cross size divisor (default 16)\n'
        '  GEOMEDIAN_COLOUR   cross colour hex (default #000000)\n'
    )
    parser = argparse.ArgumentParser(
        prog='geomedian',
        description='Find the geographic median of a mask image and mark it with a cross.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='technique', help='Technique to run')

    for name in sorted(techniques):
        p = sub.add_parser(name, help=registry.summary(name))
        p.add_argument('image', help='Path to the mask image (PNG or anything PIL reads)')
        p.add_argument('-o', '--output', help='Where to write the marked image')
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
        p.add_argument(
            '--origin',
            type=_parse_origin,
            default=(0, 0),
            metavar='X,Y',
            help='Grid coordinates of the top-left pixel (default: 0,0)',
        )
        p.add_argument(
            '-d',
            '--divisor',
            type=int,
            default=None,
            metavar='N',
            help=f'Cross arm length is image size / N (default: $GEOMEDIAN_DIVISOR or {DEFAULT_DIVISOR})',
        )
        p.add_argument(
            '-c',
            '--colour',
            default=None,
            metavar='HEX',
            help='Cross colour (default: $GEOMEDIAN_COLOUR or #000000)',
        )

    help_parser = sub.add_parser('help', help='Print full docs for a technique')
    help_parser.add_argument('command', nargs='?', help='Technique name')

    return parser


def _print_help(command: str | None) -> None:
    """Print full module docstring for a technique."""
    techniques = registry.all_techniques()

    if command is None:
        print('Available techniques:\n')
        for name in sorted(techniques):
            print(f'  {name:<14} {registry.summary(name)}')
        print('\nRun: geomedian help <technique> for full docs.')
        return

    if command not in techniques:
        print(f'Unknown technique: {command}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(techniques))}', file=sys.stderr)
        sys.exit(1)

    doc = registry.doc(command)
    if not doc:
        print(f'(No module docs for {command!r})')
        return
    print(doc)


def _resolve_marker_options(args: argparse.Namespace) -> None:
    """Fill divisor and marker colour from options, then env, then defaults."""
    if args.divisor is None:
        args.divisor = env_int('DIVISOR', DEFAULT_DIVISOR)
    if args.divisor < 1:
        raise ValueError(f'divisor must be >= 1, got {args.divisor}')
    args.marker_colour = hex_to_rgba(args.colour or env_str('COLOUR', '#000000'))


def _load_grid(path: str, origin: tuple[int, int]) -> PixelGrid:
    with Image.open(path) as image:
        image.load()
        return PixelGrid(image, origin=origin)


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else — OS env vars always win
    env_path = load_env(env_file=args.env_file)
    if env_path:
        print(f'geomedian: loaded {env_path}', file=sys.stderr)

    if not args.technique:
        parser.print_help()
        sys.exit(1)

    if args.technique == 'help':
        _print_help(args.command)
        return

    try:
        _resolve_marker_options(args)
    except ValueError as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)

    if not os.path.isfile(args.image):
        print(f'Error: image not found: {args.image}', file=sys.stderr)
        sys.exit(1)

    try:
        grid = _load_grid(args.image, args.origin)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
        print(f'Error: cannot use {args.image}: {e}', file=sys.stderr)
        sys.exit(1)

    report = Report(
        image_path=args.image,
        image_width=grid.width,
        image_height=grid.height,
        origin=grid.origin,
    )

    tech = registry.get(args.technique)
    tech.execute(grid, report, args)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report))

    # Exit status must come after output so the report is visible on failure
    if report.errors:
        sys.exit(1)


if __name__ == '__main__':
    main()
