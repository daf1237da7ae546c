# Copyright 2026 na Contributors
# SPDX-License-Identifier: Apache-2.0

"""na: a compiler front end for an indentation-sensitive data notation."""

from na.compiler import compile, compile_file, compile_json, to_json, to_normalized
from na.parser import GrammarError, LexerError, NaError, parse, tokenize

__all__ = [
    "compile",
    "compile_json",
    "compile_file",
    "to_normalized",
    "to_json",
    "parse",
    "tokenize",
    "NaError",
    "LexerError",
    "GrammarError",
]
