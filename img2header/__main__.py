"""img2header — Embed images in C/C++ headers as compile-time data.

Usage: img2header <dialect> <image> [options]

Dialects are auto-discovered from img2header/dialects/.
Each dialect module's docstring is its documentation.
Run `img2header help <dialect>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, img2header looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import os
import sys

from img2header import registry
from img2header.conversion import convert_image
from img2header.core.env import Settings, load_env
from img2header.core.loader import load_image
from img2header.core.quantizer import NEAREST_STRATEGIES
from img2header.core.report import format_json, format_text
from img2header.core.types import ConversionError, ConversionReport

PROG = 'img2header'


def _short_doc(name: str) -> str:
    mod = registry.module_for(name)
    doc = (mod.__doc__ or '').strip()
    return doc.splitlines()[0] if doc else registry.get(name).help


def _build_parser(settings: Settings) -> argparse.ArgumentParser:
    dialects = registry.all_dialects()

    epilog = (
        'Examples:\n'
        '  img2header plain-array logo.png\n'
        '  img2header plain-array logo.png --direct --stdout\n'
        '  img2header struct-wrapped sprite.png -c 4 -o include/\n'
        '  img2header namespaced-constexpr tiles.png -c 256 --nearest numpy\n'
        '  img2header help struct-wrapped\n'
        '\n'
        'Settings env vars (set in .env or environment):\n'
        '  IMG2HEADER_COLORS   default colour limit (16)\n'
        '  IMG2HEADER_NEAREST  default nearest-colour strategy (linear)\n'
    )
    parser = argparse.ArgumentParser(
        prog=PROG,
        description='Embed images in C/C++ headers, optionally reduced to an indexed palette.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='dialect', help='Output dialect')

    for name in sorted(dialects):
        p = sub.add_parser(name, help=_short_doc(name))
        p.add_argument('image', help='Path to source image (any format Pillow reads)')
        p.add_argument(
            '-c',
            '--colors',
            type=int,
            default=settings.colors,
            metavar='N',
            help=f'Maximum palette size in indexed mode (default: {settings.colors})',
        )
        p.add_argument('--direct', action='store_true', help='Emit packed RGBA per pixel, no palette')
        p.add_argument('-n', '--name', help='Symbol name to use instead of the file name')
        p.add_argument('-o', '--output-dir', default='.', help='Directory for the generated header (default: .)')
        p.add_argument('--stdout', action='store_true', help='Print the header instead of writing a file')
        p.add_argument(
            '--nearest',
            choices=NEAREST_STRATEGIES,
            default=settings.nearest,
            help=f'Nearest-colour search for palette overflow (default: {settings.nearest})',
        )
        p.add_argument('-f', '--force', action='store_true', help='Overwrite an existing output file')
        p.add_argument('-j', '--json', action='store_true', help='Print the summary as JSON')

    help_parser = sub.add_parser('help', help='Print full docs for a dialect')
    help_parser.add_argument('command', nargs='?', help='Dialect name')

    return parser


def _print_help(command: str | None) -> int:
    """Print full module docstring for a dialect."""
    dialects = registry.all_dialects()

    if command is None:
        print('Available dialects:\n')
        for name in sorted(dialects):
            print(f'  {name:<22} {_short_doc(name)}')
        print(f'\nRun: {PROG} help <dialect> for full docs.')
        return 0

    if command not in dialects:
        print(f'Unknown dialect: {command}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(dialects))}', file=sys.stderr)
        return 1

    doc = (registry.module_for(command).__doc__ or '').strip()
    print(doc if doc else f'(No module docs for {command!r})')
    return 0


def _run(args: argparse.Namespace) -> int:
    image = load_image(args.image)
    result = convert_image(
        image,
        os.path.basename(args.image),
        color_limit=args.colors,
        indexed=not args.direct,
        dialect=args.dialect,
        name=args.name,
        nearest=args.nearest,
    )

    report = ConversionReport(
        source=args.image,
        width=result.image.width,
        height=result.image.height,
        dialect=result.dialect.name,
        indexed=result.image.indexed,
        color_limit=None if args.direct else args.colors,
        palette_size=len(result.image.palette) if result.image.indexed else 0,
        overflow_pixels=result.image.overflow_pixels if result.image.indexed else 0,
        identifier=result.identifier,
    )

    if args.stdout:
        sys.stdout.write(result.text)
        summary_stream = sys.stderr
    else:
        target = os.path.join(args.output_dir, result.file_name)
        if os.path.exists(target) and not args.force:
            raise ConversionError(f'output file already exists (use --force to overwrite): {target}')
        os.makedirs(args.output_dir, exist_ok=True)
        with open(target, 'w', encoding='utf-8', newline='\n') as f:
            f.write(result.text)
        print(f'{PROG}: wrote {target}', file=sys.stderr)
        report.output_path = target
        summary_stream = sys.stdout

    print(format_json(report) if args.json else format_text(report), file=summary_stream)
    return 0


def main(argv: list[str] | None = None) -> int:
    # .env must be loaded before settings feed the parser defaults; peek at --env-file first
    pre = argparse.ArgumentParser(add_help=False)
    pre.add_argument('--env-file', default=None)
    known, _rest = pre.parse_known_args(argv)

    env_path = load_env(env_file=known.env_file)
    if env_path:
        print(f'{PROG}: loaded {env_path}', file=sys.stderr)

    try:
        settings = Settings.from_environ()
    except ConversionError as e:
        print(f'{PROG}: error: {e}', file=sys.stderr)
        return 1

    parser = _build_parser(settings)
    args = parser.parse_args(argv)

    if not args.dialect:
        parser.print_help()
        return 1

    if args.dialect == 'help':
        return _print_help(getattr(args, 'command', None))

    try:
        return _run(args)
    except ConversionError as e:
        print(f'{PROG}: error: {e}', file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
