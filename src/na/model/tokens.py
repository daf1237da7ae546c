# Copyright 2026 na Contributors
# SPDX-License-Identifier: Apache-2.0

"""Token model shared by the na lexer, parser and syntax tree."""

import enum
from dataclasses import dataclass, field
from typing import Any

# ###############
# Public Interface
# ###############


class TokenType(enum.Enum):
    """All token types produced by the na lexer."""

    # Sentinels
    START = "(top)"
    END = "(end)"

    # Structure
    OPEN = "open"
    CLOSE = "close"
    NEWLINE = "newline"
    INDENT = "indent"
    OUTDENT = "outdent"
    COMMA = "comma"
    COMMENT = "comment"

    # Literals
    NUMBER = "number"
    TEXT = "text"
    NAME = "name"
    TRUTH = "truth"

    # Operators
    PLUS = "plus"
    MINUS = "minus"
    HASH = "hash"
    BULLET = "bullet"
    PERCENT = "percent"
    COLON = "colon"
    DOT = "dot"


class NumberType(enum.Enum):
    """The shape of a number literal, stored in the token metadata under ``type``."""

    INTEGER = "integer"
    DECIMAL = "decimal"
    SCIENTIFIC = "scientific"
    RATIO = "ratio"
    BASE = "base"


@dataclass(frozen=True)
class Span:
    """Half-open source range ``[start, end)`` covered by a token."""

    start: int
    end: int


@dataclass(frozen=True)
class Token:
    """A lexical token with its source span.

    Attributes:
        type: The kind of token.
        text: The matched source text.
        span: Source range of the match.
        meta: Open metadata bag (indentation for newlines, binding for
            operators, literal details for numbers and text).
    """

    type: TokenType
    text: str
    span: Span
    meta: dict[str, Any] = field(default_factory=dict, compare=False)

    @property
    def is_end(self) -> bool:
        """Return True for the end-of-source sentinel."""
        return self.type == TokenType.END


def start_token() -> Token:
    """Return the sentinel used before the first real token."""
    return Token(TokenType.START, "", Span(-1, -1))


def end_token(position: int) -> Token:
    """Return the sentinel terminating a token stream at *position*."""
    return Token(TokenType.END, "", Span(position, position))
