"""Evaluate a whole render colour context from a JSON file.

The file holds what upstream image analysis produced for one render:

    {
      "imageColors": ["#202020", "#1a1a1a"],
      "logoColors": {"primary": "#101010", "secondary": "#50E3C2", "accent": ["#F5A623"]},
      "glowColor": "#FF0000",
      "backgroundColor": "#FFFFFF"
    }

Missing keys take the generator defaults; invalid colours become white.
Reports the body text colour (probed from the two most prominent palette
colours), the footer colour (logo secondary on the dominant colour) and the
logo advisory.

Example:
    legibility-tool context slide.json --json --fail-under 4.5
"""

from legibility_checker.core.context import parse_context_file
from legibility_checker.core.types import Command, Report

command = Command(name='context', help='Text, footer and logo decisions for a JSON colour context.')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('path', help='Path to the colour context JSON file')


@command.run
def run(args, report: Report) -> None:
    ctx = parse_context_file(args.path, min_ratio=args.min_ratio, probe_alpha=args.probe_alpha)

    text = ctx.text_color()
    report.add('text', 'contrast', text.to_dict())
    report.record('text', text.contrast_ratio)

    footer = ctx.footer_color()
    report.add('footer', 'contrast', footer.to_dict())
    report.record('footer', footer.contrast_ratio)

    report.add('logo', 'advisory', ctx.logo_advisory().to_dict())
