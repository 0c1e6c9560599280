"""Pick a readable text colour for a backdrop.

Keeps the foreground when it already meets --min-ratio against the
backdrop. Otherwise pushes a coloured foreground lighter or darker (keeping
its hue) until it does, and snaps to white or black when nothing works.

With --logo, the logo's complement and its blend over the backdrop are
tried before that snap.

Also lists saturated swatches (and the --logo colour) that would be
unreadable on the backdrop.

Example:
    legibility-tool contrast '#3366CC' '#1A1A1A'
    legibility-tool contrast '#777777' '#808080' --min-ratio 7 --json
"""

from legibility_checker.core.color import contrast_ratio, to_hex
from legibility_checker.core.contrast import ensure_contrast
from legibility_checker.core.types import Command, Report

command = Command(name='contrast', help='Guaranteed-legible text colour for a backdrop.')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('foreground', help='Candidate text colour')
    parser.add_argument('backdrop', help='Backdrop colour the text sits on')
    parser.add_argument('-l', '--logo', default=None, help='Logo colour to check against the backdrop too')


@command.run
def run(args, report: Report) -> None:
    decision = ensure_contrast(args.foreground, args.backdrop, args.min_ratio, logo_color=args.logo)
    report.add(
        'input',
        'given',
        {
            'foreground': to_hex(args.foreground),
            'backdrop': to_hex(args.backdrop),
            'ratio': round(contrast_ratio(args.foreground, args.backdrop), 2),
        },
    )
    report.add('text', 'contrast', decision.to_dict())
    report.record('text', decision.contrast_ratio)
