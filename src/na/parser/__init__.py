# Copyright 2026 na Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexer and parser for na source text."""

from na.model.tokens import NumberType, Span, Token, TokenType
from na.parser.errors import ErrorKind, GrammarError, LexerError, NaError
from na.parser.lexer import Lexer, tokenize
from na.parser.parser import Parser, parse

__all__ = [
    "Lexer",
    "tokenize",
    "Parser",
    "parse",
    "Token",
    "TokenType",
    "NumberType",
    "Span",
    "NaError",
    "LexerError",
    "GrammarError",
    "ErrorKind",
]
