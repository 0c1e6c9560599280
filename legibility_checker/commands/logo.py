"""Check whether a logo stays legible over an image palette.

Palette colours are given most-prominent first. A palette colour clashes
when neither the logo's primary colour nor its glow meets --min-ratio
against it. When at least half of the (dominance-weighted) palette clashes,
suggests a gradient scrim plus a backing plate, border and shadow
for the logo. An empty palette never needs enhancement.

Example:
    legibility-tool logo '#101010' '#FF0000' '#202020' '#1A1A1A'
"""

from legibility_checker.core.advisor import check_logo_contrast
from legibility_checker.core.types import Command, Report

command = Command(name='logo', help='Logo legibility advisory (gradient scrim / backing plate).')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('logo_primary', help='Logo primary colour')
    parser.add_argument('glow', help='Glow colour around the logo, also used for its border')
    parser.add_argument('palette', nargs='*', help='Image palette colours, most prominent first')


@command.run
def run(args, report: Report) -> None:
    advisory = check_logo_contrast(args.palette, args.logo_primary, args.glow, args.min_ratio)
    report.add('logo', 'advisory', advisory.to_dict())
    # Pass = no reinforcement required
    if advisory.needs_enhancement:
        report.record_fail('logo')
    else:
        report.record_pass('logo')
