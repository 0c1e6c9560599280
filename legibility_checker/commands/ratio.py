"""WCAG contrast ratio between two colours.

Ratio is (L_lighter + 0.05) / (L_darker + 0.05) over relative luminance,
so it runs from 1 (identical) to 21 (black on white) and does not depend on
argument order. Counts as a pass when it meets --min-ratio.

Example:
    legibility-tool ratio '#FFFFFF' '#767676'
"""

from legibility_checker.core.color import contrast_ratio, to_hex
from legibility_checker.core.types import Command, Report

command = Command(name='ratio', help='Contrast ratio between two colours.')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('first', help='First colour (hex or CSS colour)')
    parser.add_argument('second', help='Second colour (hex or CSS colour)')


@command.run
def run(args, report: Report) -> None:
    ratio = contrast_ratio(args.first, args.second)
    report.add(
        'pair',
        'ratio',
        {
            'first': to_hex(args.first),
            'second': to_hex(args.second),
            'contrastRatio': round(ratio, 2),
        },
    )
    report.record('pair', ratio)
