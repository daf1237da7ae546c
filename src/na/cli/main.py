# Copyright 2026 na Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the na command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from na.compiler.build import RENDERERS, compile_file
from na.parser.errors import NaError
from na.parser.lexer import Lexer
from na.workspace.config import OUTPUT_FORMATS, WorkspaceConfigError, find_workspace_config

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the na CLI."""
    parser = argparse.ArgumentParser(
        prog="na",
        description="Compiler for na, an indentation-sensitive data notation.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # compile subcommand
    compile_parser = subparsers.add_parser(
        "compile",
        help="Compile na files to normalized na or JSON",
        description="Compile na source files and print or write the rendered output.",
    )
    compile_parser.add_argument("files", nargs="+", help="na source files to compile")
    compile_parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (default: from .na-workspace.yaml, else normalized)",
    )
    compile_parser.add_argument(
        "--output-directory",
        default=None,
        help="Write one output file per source into this directory instead of printing",
    )

    # tokens subcommand
    tokens_parser = subparsers.add_parser(
        "tokens",
        help="Print the tokens of a na file",
        description="Print one token per line: type, text and source span.",
    )
    tokens_parser.add_argument("file", help="na source file to tokenize")

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    sys.exit(_dispatch(args))


# ################
# Implementation
# ################

_log = logging.getLogger(__name__)

_SUFFIXES: dict[str, str] = {"normalized": ".na", "json": ".json"}


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "compile":
        return _cmd_compile(args)
    if args.command == "tokens":
        return _cmd_tokens(args)
    return 0


def _cmd_compile(args: argparse.Namespace) -> int:
    """Handle the compile subcommand."""
    try:
        config = find_workspace_config(Path.cwd())
    except WorkspaceConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    output_format = args.format or config.format
    output_directory = args.output_directory or config.output_directory
    render = RENDERERS[output_format]
    _log.debug("format=%s output_directory=%s", output_format, output_directory)

    for name in args.files:
        path = Path(name)
        if not path.is_file():
            print(f"Error: file '{path}' does not exist.", file=sys.stderr)
            return 1
        try:
            output = compile_file(path, render)
        except NaError as exc:
            print(f"Error: {path}: {exc}", file=sys.stderr)
            return 1
        except (OSError, UnicodeDecodeError) as exc:
            print(f"Error: cannot read '{path}': {exc}", file=sys.stderr)
            return 1

        if output_directory is None:
            print(output)
            continue

        target = Path(output_directory) / (path.stem + _SUFFIXES[output_format])
        if target.resolve() == path.resolve():
            print(f"Error: refusing to overwrite source file '{path}'.", file=sys.stderr)
            return 1
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(f"{output}\n", encoding="utf-8")
        _log.debug("wrote %s", target)

    return 0


def _cmd_tokens(args: argparse.Namespace) -> int:
    """Handle the tokens subcommand."""
    path = Path(args.file)
    if not path.is_file():
        print(f"Error: file '{path}' does not exist.", file=sys.stderr)
        return 1

    try:
        for token in Lexer(path.read_text(encoding="utf-8")):
            print(f"{token.type.value}\t{token.text!r}\t{token.span.start}\t{token.span.end}")
    except NaError as exc:
        print(f"Error: {path}: {exc}", file=sys.stderr)
        return 1
    return 0
