"""swatch-tool — Rank the most frequent exact colours in an image.

Usage: uv run swatch-tool <technique> [image] [options]

Techniques are auto-discovered from swatch_tool/techniques/.
Each technique module's docstring is its documentation.
Run `swatch-tool help <technique>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, swatch-tool looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import sys

from swatch_tool import registry
from swatch_tool.core.acquire import grab_clipboard, load_image
from swatch_tool.core.env import load_env, settings_from_env
from swatch_tool.core.grid import PixelGrid
from swatch_tool.core.report import format_json, format_text
from swatch_tool.core.types import InvalidInput, Report


def _load_technique_module(name: str) -> object:
    """Load the raw module for a technique (for docstring access)."""
    return importlib.import_module(f'swatch_tool.techniques.{name}')


def _short_doc(name: str, fallback: str) -> str:
    doc = (_load_technique_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _non_negative_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f'not an integer: {value!r}') from None
    if n < 0:
        raise argparse.ArgumentTypeError(f'must be >= 0: {n}')
    return n


def _build_parser() -> argparse.ArgumentParser:
    techniques = registry.all_techniques()

    epilog = (
        'Examples:\n'
        '  swatch-tool top photo.png\n'
        '  swatch-tool top photo.png --top 5 --json\n'
        '  swatch-tool top --paste --alpha\n'
        '  swatch-tool swatches photo.png --out ./tmp\n'
        '  swatch-tool all photo.png --out ./tmp\n'
        '  swatch-tool help top\n'
        '\n'
        'Env vars (set in .env or environment):\n'
        '  SWATCH_TOP_N=20          default for --top\n'
        '  SWATCH_INCLUDE_ALPHA=1   default for --alpha\n'
    )
    parser = argparse.ArgumentParser(
        prog='swatch-tool',
        description='Rank the most frequent exact colours in an image.',
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

    for name, tech in sorted(techniques.items()):
        p = sub.add_parser(name, help=_short_doc(name, tech.help))
        p.add_argument('image', nargs='?', help='Path to image file (omit with --paste)')
        p.add_argument('-c', '--paste', action='store_true', help='Read the image from the clipboard')
        p.add_argument(
            '-n',
            '--top',
            type=_non_negative_int,
            default=None,
            metavar='N',
            help='Number of colours to rank (default: $SWATCH_TOP_N or 20)',
        )
        p.add_argument(
            '-a',
            '--alpha',
            action=argparse.BooleanOptionalAction,
            default=None,
            help='Count colours differing only in alpha separately (--no-alpha overrides $SWATCH_INCLUDE_ALPHA)',
        )
        p.add_argument('-o', '--out', help='Output directory for artefacts (swatch sheet)')
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')

    help_parser = sub.add_parser('help', help='Print full docs for a technique')
    help_parser.add_argument('command', nargs='?', help='Technique name')

    return parser


def _print_help(command: str | None) -> None:
    """Print full module docstring for a technique."""
    techniques = registry.all_techniques()

    if command is None:
        print('Available techniques:\n')
        for name, tech in sorted(techniques.items()):
            print(f'  {name:<10} {_short_doc(name, tech.help)}')
        print('\nRun: swatch-tool help <technique> for full docs.')
        return

    if command not in techniques:
        print(f'Unknown technique: {command}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(techniques))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_technique_module(command).__doc__ or '').strip()
    print(doc if doc else f'(No module docs for {command!r})')


def _acquire(args: argparse.Namespace) -> tuple[str, PixelGrid]:
    """Return (source label, grid) from the clipboard or the image argument."""
    if args.paste:
        return '<clipboard>', PixelGrid.from_image(grab_clipboard())
    if not args.image:
        raise InvalidInput('no image given (pass a path or --paste)')
    return args.image, PixelGrid.from_image(load_image(args.image))


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else; OS env vars always win
    env_path = load_env(env_file=getattr(args, 'env_file', None))
    if env_path:
        print(f'swatch-tool: loaded {env_path}', file=sys.stderr)

    if not args.technique:
        parser.print_help()
        sys.exit(1)

    if args.technique == 'help':
        _print_help(getattr(args, 'command', None))
        return

    settings = settings_from_env()
    top_n = args.top if args.top is not None else settings.top_n
    include_alpha = args.alpha if args.alpha is not None else settings.include_alpha

    try:
        source, grid = _acquire(args)
        report = Report(
            source=source,
            image_width=grid.width,
            image_height=grid.height,
            top_n=top_n,
            include_alpha=include_alpha,
        )
        registry.get(args.technique).execute(grid, report, args)
    except InvalidInput as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report), end='')


if __name__ == '__main__':
    main()
