# Copyright 2026 na Contributors
# SPDX-License-Identifier: Apache-2.0

"""Compile entry points: parse na source and render the resulting tree.

Errors from the lexer and parser are not caught here. A call either returns
the fully rendered text or raises the first error found in the source.
"""

from __future__ import annotations

import logging
from pathlib import Path

from na.compiler.render import RenderFunction, to_json, to_normalized
from na.parser.parser import Parser

# ###############
# Public Interface
# ###############

RENDERERS: dict[str, RenderFunction] = {
    "normalized": to_normalized,
    "json": to_json,
}


def compile(source: str, render: RenderFunction = to_normalized) -> str | None:  # noqa: A001
    """Compile na *source*, passing the parse tree through *render*.

    Args:
        source: The full na source text.
        render: Function turning the root block into text. Defaults to the
            normalized na renderer.

    Returns:
        The rendered text.

    Raises:
        LexerError: If the source contains invalid characters.
        GrammarError: If a literal or the block structure is malformed.
    """
    block = _parser.parse(source)
    _log.debug("parsed %d top-level node(s) from %d character(s)", len(block.children), len(source))
    return render(block)


def compile_json(source: str) -> str | None:
    """Compile na *source* to JSON."""
    return compile(source, to_json)


def compile_file(path: Path, render: RenderFunction = to_normalized) -> str | None:
    """Read a UTF-8 na file and compile it with *render*.

    Raises:
        OSError: If the file cannot be read.
        LexerError: If the source contains invalid characters.
        GrammarError: If a literal or the block structure is malformed.
    """
    _log.debug("compiling %s", path)
    return compile(path.read_text(encoding="utf-8"), render)


# ################
# Implementation
# ################

_log = logging.getLogger(__name__)

# One parser instance is reused; parse() fully resets it.
_parser = Parser()
