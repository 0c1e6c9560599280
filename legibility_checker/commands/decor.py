"""Reproducible positions for decorative shapes on a slide.

Seeds the generator from the slide key, so the same key always yields the
same shapes and snapshot tests of rendered templates stay stable.

Example:
    legibility-tool decor carousel-42-slide-3 5 --width 1080 --height 1080
"""

from legibility_checker.core.decor import decor_positions
from legibility_checker.core.types import Command, Report

command = Command(name='decor', help='Seeded decorative shape positions for a slide key.')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('slide_key', help='Stable per-slide key')
    parser.add_argument('count', type=int, help='Number of shapes')
    parser.add_argument('--width', type=float, default=100.0, help='Canvas width (default: 100)')
    parser.add_argument('--height', type=float, default=100.0, help='Canvas height (default: 100)')


@command.run
def run(args, report: Report) -> None:
    positions = decor_positions(args.slide_key, args.count, args.width, args.height)
    report.add(
        args.slide_key,
        'decor',
        {'shapes': [{'x': x, 'y': y, 'rotation': r} for x, y, r in positions]},
    )
