"""Composite an overlay colour over a base colour.

The overlay's own alpha (#rrggbbaa) is used unless --alpha is given. A plain
#rrggbb overlay is opaque and comes back unchanged. Overlay-over-base is
not the same as base-over-overlay.

With --probe, prints the black-over-first / white-over-second probe pair
instead: the darkest and lightest tones an overlay may land on.

Example:
    legibility-tool blend '#00000080' '#3366CC'
    legibility-tool blend '#000000' '#FFFFFF' --alpha 0.25
    legibility-tool blend '#3366CC' '#F0E0D0' --probe
"""

import math

from legibility_checker.core.blend import blend_colors, probe_extremes
from legibility_checker.core.color import BLACK, WHITE, coerce_color, to_hex
from legibility_checker.core.types import Command, Report

command = Command(name='blend', help='Alpha-composite an overlay colour over a base colour.')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('overlay', help='Overlay colour (#rrggbb or #rrggbbaa)')
    parser.add_argument('base', help='Base colour underneath')
    parser.add_argument('-a', '--alpha', type=float, default=None, help='Overlay opacity 0-1 (overrides its alpha)')
    parser.add_argument('--probe', action='store_true', help='Show black/white probe estimates instead')


@command.run
def run(args, report: Report) -> None:
    if args.probe:
        dark, light = probe_extremes(args.overlay, args.base, args.probe_alpha)
        report.add('probe-dark', 'blend', {'overlay': BLACK.hex, 'base': to_hex(args.overlay), 'result': dark})
        report.add('probe-light', 'blend', {'overlay': WHITE.hex, 'base': to_hex(args.base), 'result': light})
        return

    top = coerce_color(args.overlay, label='overlay colour')
    alpha = top.alpha if args.alpha is None or not math.isfinite(args.alpha) else min(max(args.alpha, 0.0), 1.0)
    result = blend_colors(top, args.base, alpha=args.alpha)
    report.add(
        'blend',
        'blend',
        {'overlay': top.hex, 'alpha': round(alpha, 3), 'base': to_hex(args.base), 'result': result},
    )
