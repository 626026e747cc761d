#!/usr/bin/env python3
"""
Command-line front end for bibliographic title sorting.

Commands:
    key   - Print the sort key of each title given on the command line
    sort  - Read titles (one per line) from files or stdin, print them sorted

Usage (either form works):
    python3 bibsort/titles/cli.py sort titles.txt
    python3 -m bibsort.titles key "The 501st Legion"
"""

import argparse
import logging
import sys
from pathlib import Path

# Ensure project root is on sys.path so this file also runs as a script
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from bibsort.shared.colors import Colors
from bibsort.shared.config import load_config, output_settings, validate_config
from bibsort.shared.logging_config import configure_file_logging, setup_logging
from bibsort.titles.collate import keyed_titles
from bibsort.titles.keys import title_key

logger = logging.getLogger(__name__)


def read_titles(paths):
    """Collect non-blank lines from the given files, or stdin if none.

    Returns:
        (titles, ok) where ok is False if any file could not be read.
    """
    titles = []
    ok = True
    if not paths:
        titles.extend(line.rstrip('\n') for line in sys.stdin)
    for path in paths:
        try:
            with open(path, encoding='utf-8') as f:
                titles.extend(line.rstrip('\n') for line in f)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Cannot read %s: %s", path, e)
            ok = False
    return [t for t in titles if t.strip()], ok


def _format_line(sort_key, title, show_keys):
    if not show_keys:
        return title
    return f"{Colors.DIM}{sort_key}{Colors.NC}\t{title}"


def cmd_key(args):
    """Print one key per title argument."""
    for title in args.titles:
        print(title_key(title))
    return 0


def cmd_sort(args):
    """Print titles from files/stdin in bibliographic order."""
    titles, ok = read_titles(args.files)
    logger.debug("Read %d titles", len(titles))
    for sort_key, title in keyed_titles(titles, reverse=args.reverse):
        print(_format_line(sort_key, title, args.keys))
    return 0 if ok else 1


def build_parser():
    parser = argparse.ArgumentParser(
        prog='bibsort',
        description='Bibliographic sorting of English-language titles',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python3 -m bibsort.titles key "The 600th Floor"
    python3 -m bibsort.titles sort --keys titles.txt
    cat titles.txt | python3 -m bibsort.titles sort --reverse
        """
    )
    parser.add_argument('--no-color', action='store_true', help='Disable colored output')
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument('-v', '--verbose', action='store_true', help='Show debug logging')
    verbosity.add_argument('-q', '--quiet', action='store_true', help='Only show warnings and errors')

    subparsers = parser.add_subparsers(dest='command', required=True)

    # key
    key_parser = subparsers.add_parser('key', help='Print the sort key of each title')
    key_parser.add_argument('titles', nargs='+', metavar='TITLE', help='Title to convert')

    # sort
    sort_parser = subparsers.add_parser('sort', help='Sort titles read from files or stdin')
    sort_parser.add_argument('files', nargs='*', metavar='FILE', help='Files with one title per line (default: stdin)')
    sort_parser.add_argument(
        '--keys', action=argparse.BooleanOptionalAction, default=None,
        help='Prefix each title with its key, tab separated',
    )
    sort_parser.add_argument(
        '--reverse', action=argparse.BooleanOptionalAction, default=None,
        help='Sort in descending order',
    )

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging('bibsort', verbose=args.verbose, quiet=args.quiet)
    config = load_config(fallback={})
    for issue in validate_config(config):
        log = logger.error if issue['level'] == 'error' else logger.warning
        log("%s: %s", issue['file'], issue['message'])
    configure_file_logging(config)

    settings = output_settings(config)
    if args.no_color or not settings['color']:
        Colors.disable()
    else:
        Colors.auto()

    if args.command == 'sort':
        if args.keys is None:
            args.keys = settings['show_keys']
        if args.reverse is None:
            args.reverse = settings['reverse']

    commands = {
        'key': cmd_key,
        'sort': cmd_sort,
    }

    return commands[args.command](args)


if __name__ == '__main__':
    sys.exit(main() or 0)
