"""legibility-tool: readable text and logo colours over arbitrary images.

Usage: legibility-tool <command> <colours...> [options]

Commands are auto-discovered from legibility_checker/commands/.
Each command module's docstring is its documentation.
Run `legibility-tool help <command>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, legibility-tool looks for a .env file starting
  from the current directory and walking up, stopping at the nearest .git
  boundary. Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import logging
import sys

from legibility_checker import registry
from legibility_checker.core.config import load_env, load_settings
from legibility_checker.core.report import format_json, format_text
from legibility_checker.core.types import Report


def _load_command_module(name: str) -> object:
    """Load the raw module for a command (for docstring access)."""
    return importlib.import_module(f'legibility_checker.commands.{name}')


def _short_help(name: str, fallback: str) -> str:
    doc = (_load_command_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        "  legibility-tool ratio '#FFFFFF' '#767676'\n"
        "  legibility-tool contrast '#000000' '#050505'\n"
        "  legibility-tool blend '#00000080' '#3366CC'\n"
        "  legibility-tool logo '#101010' '#FF0000' '#202020' '#1A1A1A' --json\n"
        '  legibility-tool context slide.json --fail-under 4.5\n'
        '  legibility-tool decor slide-3 5 --width 1080 --height 1080\n'
        '  legibility-tool help contrast\n'
        '\n'
        'Settings env vars (set in .env or environment):\n'
        '  LEGIBILITY_MIN_RATIO    default --min-ratio (4.5)\n'
        '  LEGIBILITY_PROBE_ALPHA  black/white probe opacity (0.5)\n'
        '  LEGIBILITY_LOG_LEVEL    DEBUG, INFO, WARNING (default), ERROR\n'
    )
    parser = argparse.ArgumentParser(
        prog='legibility-tool',
        description='Readable text and logo colours over arbitrary images.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    # Global --env-file option before subcommand
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    # Auto-register each command as a subcommand using module docstring
    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_help(name, cmd.help))
        cmd.configure(p)
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
        p.add_argument(
            '-m',
            '--min-ratio',
            type=float,
            default=None,
            metavar='N',
            help='Minimum contrast ratio (default: LEGIBILITY_MIN_RATIO or 4.5)',
        )
        p.add_argument(
            '-f',
            '--fail-under',
            type=float,
            default=None,
            metavar='N',
            help='Exit 1 if any reported contrast ratio is below N (CI gating)',
        )

    # `help` subcommand prints full module docstring for a command
    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name, cmd in sorted(commands.items()):
            print(f'  {name:<10} {_short_help(name, cmd.help)}')
        print('\nRun: legibility-tool help <command> for full docs.')
        return

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_command_module(topic).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {topic!r})')
        return
    print(doc)


def _check_fail_under(report: Report, threshold: float) -> bool:
    """Return True if any reported contrast ratio is below threshold."""
    failures = [(subject, ratio) for subject, ratio in report.ratios() if ratio < threshold]
    if failures:
        print(f'\nFAIL: {len(failures)} ratio(s) below {threshold}:')
        for subject, ratio in failures:
            print(f'  {subject}: {ratio:.3f}:1')
        return True
    return False


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Load .env before anything else; OS env vars always win
    env_path = load_env(env_file=args.env_file)
    settings = load_settings()
    logging.basicConfig(level=settings.log_level, format='%(levelname)s %(name)s: %(message)s')
    if env_path:
        logging.getLogger(__name__).info('loaded %s', env_path)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(args.topic)
        return

    if args.min_ratio is None:
        args.min_ratio = settings.min_ratio
    args.probe_alpha = settings.probe_alpha

    report = Report(command=args.command, min_ratio=args.min_ratio)
    cmd = registry.get(args.command)
    try:
        cmd.execute(args, report)
    except (OSError, ValueError) as exc:
        # Unreadable or malformed input files (json.JSONDecodeError is a ValueError)
        print(f'Error: {exc}', file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report))

    # CI gate, after output so the report is visible even on failure
    if args.fail_under is not None and _check_fail_under(report, args.fail_under):
        sys.exit(1)


if __name__ == '__main__':
    main()
