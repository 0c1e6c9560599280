"""Report builder: text and JSON output for legibility-tool results."""

import json
from typing import Any

from legibility_checker.core.types import Report


def _contrast_line(data: dict[str, Any], min_ratio: float) -> str:
    colour = data.get('suggestedTextColor', '?')
    ratio = data.get('contrastRatio')
    if ratio is None:
        return f'  colour: {colour}'
    mark = '✓' if ratio >= min_ratio else '✗'
    line = f'  colour: {colour}  ratio {ratio:.2f}:1  {mark}'
    unsuitable = data.get('unsuitableColors')
    if unsuitable:
        line += f'\n  avoid: {", ".join(unsuitable)}'
    return line


def _advisory_lines(data: dict[str, Any]) -> list[str]:
    if not data.get('needsEnhancement'):
        return ['  logo: readable as is']
    lines = ['  logo: needs enhancement', f'  gradient: {data.get("suggestedGradient")}']
    effect = data.get('suggestedLogoEffect') or {}
    for key in ('background', 'border', 'shadow'):
        if effect.get(key):
            lines.append(f'  {key}: {effect[key]}')
    return lines


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = [f'legibility-tool: {report.command} (min ratio {report.min_ratio:g}:1)', '']

    for subject, sections in report.subjects.items():
        lines.append(f'── {subject}')
        for section, data in sections.items():
            if section == 'contrast':
                lines.append(_contrast_line(data, report.min_ratio))
            elif section == 'advisory':
                lines.extend(_advisory_lines(data))
            elif section == 'blend':
                alpha = f' at {data["alpha"]:g}' if 'alpha' in data else ''
                lines.append(f'  blend: {data["overlay"]}{alpha} over {data["base"]} → {data["result"]}')
            elif section == 'ratio':
                lines.append(f'  ratio: {data["contrastRatio"]:.2f}:1  ({data["first"]} vs {data["second"]})')
            else:
                # Generic fallback
                for k, v in data.items():
                    lines.append(f'  {section}.{k}: {v}')
        lines.append('')

    total = report.pass_count + report.fail_count
    if total > 0:
        lines.append(f'PASS {report.pass_count}/{total}  FAIL {report.fail_count}/{total}')
    return '\n'.join(lines)


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {
        'command': report.command,
        'minRatio': report.min_ratio,
        'subjects': [{'name': name, **sections} for name, sections in report.subjects.items()],
        'summary': {
            'total': report.pass_count + report.fail_count,
            'pass': report.pass_count,
            'fail': report.fail_count,
        },
    }
    return json.dumps(obj, indent=2)
