#!/usr/bin/env python
# cli.py - Command line entry point

import sys
import json
import argparse
import logging
from typing import List, Optional

from .config import log, TRANSPORTS
from .ast_utils import format_tree_for_output, tokens_for_output
from .errors import LexerError, ParseError
from .lexer import tokenize
from .transpiler import Transpiler

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_LEXER_ERROR = 3
EXIT_PARSE_ERROR = 4


def _read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def _write_output(text: str, output: Optional[str]) -> None:
    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(text)
        log.info(f"Wrote {output}")
    else:
        sys.stdout.write(text)
        if not text.endswith("\n"):
            sys.stdout.write("\n")


# --- Command Handlers ---

def handle_transpile(args: argparse.Namespace) -> int:
    """Handle the transpile command."""
    try:
        source = _read_source(args.input)
    except OSError as e:
        print(f"Error reading file: {e}", file=sys.stderr)
        return EXIT_IO_ERROR

    transpiler = Transpiler()
    try:
        if args.tokens:
            text = json.dumps(tokens_for_output(tokenize(source)), ensure_ascii=False, indent=2)
        elif args.tree:
            tree = format_tree_for_output(transpiler.parse(source))
            text = json.dumps(tree, ensure_ascii=False, indent=2)
        else:
            text = transpiler.transpile(source)
    except LexerError as e:
        print(f"Error transpiling: {e}", file=sys.stderr)
        return EXIT_LEXER_ERROR
    except ParseError as e:
        print(f"Error transpiling: {e}", file=sys.stderr)
        return EXIT_PARSE_ERROR

    try:
        _write_output(text, args.output)
    except OSError as e:
        print(f"Error writing file: {e}", file=sys.stderr)
        return EXIT_IO_ERROR
    return EXIT_OK


def handle_dictionary(args: argparse.Namespace) -> int:
    """Handle the dictionary command."""
    vocabulary = Transpiler().vocabulary
    if args.json:
        print(json.dumps(vocabulary.as_dict(), ensure_ascii=False, indent=2))
        return EXIT_OK

    for title, table in (("Tags", vocabulary.tags), ("Attributes", vocabulary.attributes)):
        print(f"{title}:")
        width = max(len(name) for name in table)
        for name, html_name in sorted(table.items()):
            print(f"  {name:<{width}}  ->  {html_name}")
        print()
    return EXIT_OK


def handle_serve(args: argparse.Namespace) -> int:
    """Handle the serve command."""
    from .server import main as run_server

    run_server(transport=args.transport, host=args.host, port=args.port)
    return EXIT_OK


# --- Main Execution ---

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dhtml-transpiler",
        description="D.Ö.N.E.R: transpile German HTML into standard HTML.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  dhtml-transpiler transpile beispiel.dhtml            # Print formatted HTML
  dhtml-transpiler transpile beispiel.dhtml -o out.html
  cat beispiel.dhtml | dhtml-transpiler transpile -    # Read from stdin
  dhtml-transpiler transpile beispiel.dhtml --tree     # Dump the parsed tree as JSON
  dhtml-transpiler dictionary                          # List supported German names
  dhtml-transpiler serve --transport sse --port 8080   # Run the server
""",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging."
    )

    subparsers = parser.add_subparsers(dest="command", required=True, help="Sub-command help")

    # transpile
    parser_transpile = subparsers.add_parser("transpile", aliases=["t"], help="Transpile a German HTML file.")
    parser_transpile.add_argument("input", help="Path to the .dhtml file, or '-' for stdin.")
    parser_transpile.add_argument("-o", "--output", help="Write the result to this file instead of stdout.")
    group_dump = parser_transpile.add_mutually_exclusive_group()
    group_dump.add_argument("--tokens", action="store_true", help="Print the token stream as JSON.")
    group_dump.add_argument("--tree", action="store_true", help="Print the parsed tree as JSON.")
    parser_transpile.set_defaults(func=handle_transpile)

    # dictionary
    parser_dictionary = subparsers.add_parser("dictionary", aliases=["dict"], help="List supported tags and attributes.")
    parser_dictionary.add_argument("--json", action="store_true", help="Print the vocabulary as JSON.")
    parser_dictionary.set_defaults(func=handle_dictionary)

    # serve
    parser_serve = subparsers.add_parser("serve", help="Run the MCP / HTTP server.")
    parser_serve.add_argument("--transport", choices=TRANSPORTS, help="Server transport (default from DHTML_TRANSPORT).")
    parser_serve.add_argument("--host", help="Bind address for HTTP transports.")
    parser_serve.add_argument("--port", type=int, help="Port for HTTP transports.")
    parser_serve.set_defaults(func=handle_serve)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        log.setLevel(logging.DEBUG)
        log.debug("Debug logging enabled.")

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
