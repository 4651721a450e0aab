"""
difflines CLI.

Usage:
    difflines parse [FILE]         Parse a unified diff and print its lines as JSON
    difflines serve                Run the HTTP API

Examples:
    git diff -- main.py | difflines parse
    difflines parse change.patch --format jsonl
    difflines parse change.patch --stats
    difflines serve --port 8123
"""

import os
import sys
import json
import argparse
from typing import List, Optional

from difflines import __version__
from difflines.utils.diff_utils.core.exceptions import DiffParseError
from difflines.utils.diff_utils.parsing.diff_parser import iter_diff_hunks, summarize_lines
from difflines.utils.logging_utils import configure_server_logging, logger


def read_stdin_if_available() -> Optional[str]:
    """Read from stdin if data is being piped in."""
    if not sys.stdin.isatty():
        return sys.stdin.read()
    return None


def read_diff_input(path: Optional[str]) -> Optional[str]:
    """Read the diff from a file, '-' or piped stdin."""
    if path and path != '-':
        with open(path, 'r', encoding='utf-8', newline='') as f:
            return f.read()
    return read_stdin_if_available()


def print_parse_error(error: DiffParseError) -> None:
    """Show the offending line and where it was found."""
    print(f"Error: {error.message}", file=sys.stderr)
    print(f"  at {error.describe_position()}", file=sys.stderr)
    print(f"  > {error.raw_line}", file=sys.stderr)


# ============================================================================
# Commands
# ============================================================================

def cmd_parse(args) -> int:
    """Parse a diff and print the normalized lines."""
    try:
        diff_text = read_diff_input(args.file)
    except OSError as e:
        print(f"Error: cannot read {args.file}: {e}", file=sys.stderr)
        return 1

    if diff_text is None:
        print("Error: no diff given (pass a file or pipe one on stdin)", file=sys.stderr)
        return 1

    collapse = False if args.no_collapse else None
    allow_marker = True if args.allow_no_newline_marker else None

    lines = []
    hunks = 0
    try:
        for hunk_lines in iter_diff_hunks(diff_text, collapse_identical=collapse,
                                          allow_no_newline_marker=allow_marker):
            lines.extend(hunk_lines)
            hunks += 1
    except DiffParseError as e:
        print_parse_error(e)
        return 1

    if args.stats:
        stats = summarize_lines(lines, hunks=hunks)
        print(json.dumps(stats.model_dump(), indent=2))
    elif args.format == 'jsonl':
        for line in lines:
            print(line.model_dump_json())
    else:
        print(json.dumps([line.model_dump(mode='json') for line in lines], indent=2))
    return 0


def cmd_serve(args) -> int:
    """Run the HTTP API."""
    import uvicorn

    if args.log_level:
        os.environ["DIFFLINES_LOG_LEVEL"] = args.log_level.upper()
        logger.setLevel(args.log_level.upper())
    configure_server_logging()
    uvicorn.run("difflines.server:app", host=args.host, port=args.port)
    return 0


# ============================================================================
# Argument parsing
# ============================================================================

def create_parser():
    """Create the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog='difflines',
        description='Unified diff parser and normalizer',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  git diff -- main.py | difflines parse
  difflines parse change.patch --format jsonl
  difflines parse change.patch --no-collapse
  difflines serve --port 8123
"""
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # parse
    parse_parser = subparsers.add_parser('parse', help='Parse a unified diff')
    parse_parser.add_argument('file', nargs='?', help="Diff file (default: stdin, or '-')")
    parse_parser.add_argument('--format', '-f', choices=['json', 'jsonl'], default='json',
                              help='Output format')
    parse_parser.add_argument('--no-collapse', action='store_true',
                              help='Keep identical delete/add pairs as separate lines')
    parse_parser.add_argument('--allow-no-newline-marker', action='store_true',
                              help='Skip "\\ No newline at end of file" lines')
    parse_parser.add_argument('--stats', action='store_true',
                              help='Print line counts per kind instead of the lines')
    parse_parser.set_defaults(func=cmd_parse)

    # serve
    serve_parser = subparsers.add_parser('serve', help='Run the HTTP API')
    serve_parser.add_argument('--host', default='127.0.0.1', help='Bind address')
    serve_parser.add_argument('--port', '-p', type=int, default=8123, help='Port')
    serve_parser.add_argument('--log-level', help='Log level (overrides DIFFLINES_LOG_LEVEL)')
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print()
        return 130


if __name__ == '__main__':
    sys.exit(main())
