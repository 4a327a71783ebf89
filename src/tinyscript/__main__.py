#!/usr/bin/env python3
"""
CLI for tinyscript.

Usage:
    python -m tinyscript run FILE [--config FILE] [--verbose]
    python -m tinyscript check FILE
    python -m tinyscript tokens FILE
    python -m tinyscript ast FILE

Examples:
    # Execute a script
    python -m tinyscript run examples/fib.tiny

    # Check syntax without running
    python -m tinyscript check examples/fib.tiny

    # Inspect the lexer and parser output
    python -m tinyscript tokens examples/fib.tiny
    python -m tinyscript ast examples/fib.tiny

Settings come from --config, else from a tinyscript.yaml next to the
script, else the defaults.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import Settings, load_settings, find_settings
from .errors import ScriptError


def load_source(args) -> Optional[tuple]:
    """Read the script and its settings; print an error and return None on failure."""
    source_path = Path(args.file)
    if not source_path.exists():
        print(f"Error: File not found: {source_path}", file=sys.stderr)
        return None

    try:
        if args.config:
            settings = load_settings(args.config)
        else:
            found = find_settings(source_path.resolve().parent)
            settings = load_settings(found) if found else Settings()
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return None

    try:
        source = source_path.read_text(encoding=settings.encoding)
    except (OSError, UnicodeDecodeError, LookupError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return None
    return source_path, source, settings


def cmd_run(args):
    """Execute a script."""
    from . import run

    loaded = load_source(args)
    if loaded is None:
        return 1
    source_path, source, settings = loaded

    if sys.getrecursionlimit() < settings.recursion_limit:
        sys.setrecursionlimit(settings.recursion_limit)

    try:
        run(source, filename=str(source_path), strict_strings=settings.strict_strings)
    except ScriptError as e:
        print(e, file=sys.stderr)
        return 1
    except RecursionError:
        print("Error: maximum recursion depth exceeded", file=sys.stderr)
        return 1

    return 0


def cmd_check(args):
    """Check a script for lexical and syntax errors."""
    from . import tokenize, parse

    loaded = load_source(args)
    if loaded is None:
        return 1
    source_path, source, settings = loaded

    try:
        tokens = tokenize(source, str(source_path), strict_strings=settings.strict_strings)
        program = parse(tokens, source=source)
    except ScriptError as e:
        print(e, file=sys.stderr)
        return 1

    print(f"OK: {source_path.name} - {len(program.statements)} statement(s), "
          f"{len(program.functions)} function(s)")
    return 0


def cmd_tokens(args):
    """Print the token list of a script."""
    from . import tokenize

    loaded = load_source(args)
    if loaded is None:
        return 1
    source_path, source, settings = loaded

    try:
        tokens = tokenize(source, str(source_path), strict_strings=settings.strict_strings)
    except ScriptError as e:
        print(e, file=sys.stderr)
        return 1

    for token in tokens:
        print(f"{token.location.line}:{token.location.column}\t{token}")
    return 0


def cmd_ast(args):
    """Print the syntax tree of a script."""
    from . import tokenize, parse, print_ast

    loaded = load_source(args)
    if loaded is None:
        return 1
    source_path, source, settings = loaded

    try:
        tokens = tokenize(source, str(source_path), strict_strings=settings.strict_strings)
        program = parse(tokens, source=source)
    except ScriptError as e:
        print(e, file=sys.stderr)
        return 1

    print_ast(program)
    return 0


def main(argv: Optional[Sequence[str]] = None):
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('file', help='Script source file')
    common.add_argument('-c', '--config', metavar='FILE',
                        help='Settings file (YAML)')
    common.add_argument('-v', '--verbose', action='store_true',
                        help='Log interpreter activity to stderr')

    parser = argparse.ArgumentParser(
        prog='tinyscript',
        description='tinyscript interpreter',
    )

    subparsers = parser.add_subparsers(dest='action', required=True)
    subparsers.add_parser('run', parents=[common], help='Execute a script')
    subparsers.add_parser('check', parents=[common], help='Check a script for syntax errors')
    subparsers.add_parser('tokens', parents=[common], help='Print the tokens of a script')
    subparsers.add_parser('ast', parents=[common], help='Print the syntax tree of a script')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )

    if args.action == 'run':
        return cmd_run(args)
    elif args.action == 'check':
        return cmd_check(args)
    elif args.action == 'tokens':
        return cmd_tokens(args)
    elif args.action == 'ast':
        return cmd_ast(args)
    else:
        parser.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main())
