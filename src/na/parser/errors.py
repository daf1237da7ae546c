# Copyright 2026 na Contributors
# SPDX-License-Identifier: Apache-2.0

"""Errors raised while compiling na source text.

There are two tiers: :class:`LexerError` for characters and tokens that cannot
be scanned at all, and :class:`GrammarError` for literals and structures that
scan but are malformed. Both abort compilation at the first violation.
"""

import enum

# ###############
# Public Interface
# ###############


class ErrorKind(enum.Enum):
    """Machine-readable category of a compile error."""

    UNKNOWN_CHARACTER = "unknown-character"
    UNSUPPORTED_CHARACTER = "unsupported-character"
    UNEXPECTED_TOKEN = "unexpected-token"
    MISSING_TOKEN = "missing-token"
    EXPECTED_TOKEN = "expected-token"
    MISSING_CLOSING_MARKER = "missing-closing-marker"
    DIGIT_GROUPING = "digit-grouping"
    INVALID_NUMBER = "invalid-number"
    INVALID_RADIX = "invalid-radix"
    EXCESSIVE_INDENTATION = "excessive-indentation"
    MISPLACED_COMMA = "misplaced-comma"
    MISPLACED_BULLET = "misplaced-bullet"
    EMPTY_BULLET = "empty-bullet"
    INVALID_TYPE_NAME = "invalid-type-name"
    UNMATCHED_BRACKET = "unmatched-bracket"


class NaError(Exception):
    """Base class of every na compile error.

    Attributes:
        kind: The error category.
        position: 0-based source offset of the violation.
        variables: Named values substituted into the message template.
    """

    kind: ErrorKind
    template: str

    def __init__(self, position: int, **variables: object) -> None:
        self.position = position
        self.variables = variables
        super().__init__(format_message(self.template, position=position, **variables))


class LexerError(NaError):
    """Raised when the scanner meets a character or token it cannot accept."""


class GrammarError(NaError):
    """Raised when a literal or structure is syntactically malformed."""


# Lexical tier


class UnknownCharacterError(LexerError):
    kind = ErrorKind.UNKNOWN_CHARACTER
    template = "Unknown character {char} ({position})"

    def __init__(self, char: str, position: int) -> None:
        super().__init__(position, char=char)


class UnsupportedCharacterError(LexerError):
    kind = ErrorKind.UNSUPPORTED_CHARACTER
    template = "Unsupported character {char} ({position})"

    def __init__(self, char: str, position: int) -> None:
        super().__init__(position, char=char)


class UnexpectedTokenError(LexerError):
    kind = ErrorKind.UNEXPECTED_TOKEN
    template = "Unexpected {char} ({position})"

    def __init__(self, char: str, position: int) -> None:
        super().__init__(position, char=char)


class MissingTokenError(LexerError):
    kind = ErrorKind.MISSING_TOKEN
    template = "Missing {expected} ({position})"

    def __init__(self, expected: str, position: int) -> None:
        super().__init__(position, expected=expected)


class ExpectedTokenError(LexerError):
    kind = ErrorKind.EXPECTED_TOKEN
    template = "Expected {expected}, got {received} ({position})"

    def __init__(self, expected: str, received: str, position: int) -> None:
        super().__init__(position, expected=expected, received=received)


# Grammar tier


class MissingClosingMarkerError(GrammarError):
    kind = ErrorKind.MISSING_CLOSING_MARKER
    template = "Text is missing a closing {marker} ({position})"

    def __init__(self, marker: str, position: int) -> None:
        super().__init__(position, marker=marker)


class DigitGroupingError(GrammarError):
    kind = ErrorKind.DIGIT_GROUPING
    template = "Digit grouping can only be between numerals or before a suffix ({position})"


class InvalidNumberError(GrammarError):
    kind = ErrorKind.INVALID_NUMBER
    template = "Invalid number, unexpected {char} ({position})"

    def __init__(self, char: str, position: int) -> None:
        super().__init__(position, char=char)


class InvalidRadixError(GrammarError):
    kind = ErrorKind.INVALID_RADIX
    template = "Invalid radix {radix} ({position})"

    def __init__(self, radix: int, position: int) -> None:
        super().__init__(position, radix=radix)


class ExcessiveIndentationError(GrammarError):
    kind = ErrorKind.EXCESSIVE_INDENTATION
    template = "Indentation can only increase by one level, got {dent} ({position})"

    def __init__(self, dent: int, position: int) -> None:
        super().__init__(position, dent=dent)


class MisplacedCommaError(GrammarError):
    kind = ErrorKind.MISPLACED_COMMA
    template = "Comma can only end a line outside of brackets ({position})"


class MisplacedBulletError(GrammarError):
    kind = ErrorKind.MISPLACED_BULLET
    template = "Bullet can only be at the start of an item ({position})"


class EmptyBulletError(GrammarError):
    kind = ErrorKind.EMPTY_BULLET
    template = "Bullet is missing an item ({position})"


class InvalidTypeNameError(GrammarError):
    kind = ErrorKind.INVALID_TYPE_NAME
    template = "Invalid type name {name} ({position})"

    def __init__(self, name: str, position: int) -> None:
        super().__init__(position, name=name)


class UnmatchedBracketError(GrammarError):
    """Raised for a `[` left open, or a `]` with no matching `[`."""

    kind = ErrorKind.UNMATCHED_BRACKET
    template = "{problem} {bracket} ({position})"

    def __init__(self, bracket: str, position: int, missing: bool = True) -> None:
        super().__init__(position, problem="Missing" if missing else "Unexpected", bracket=bracket)


def format_message(template: str, **variables: object) -> str:
    """Substitute named ``{variables}`` into *template*.

    Whitespace characters are spelled out so that messages stay readable.
    """
    return template.format_map({key: _friendly(value) for key, value in variables.items()})


# ################
# Implementation
# ################

_FRIENDLY_NAMES: dict[str, str] = {
    " ": "space",
    "\t": "tab",
    "\n": "end of line",
    "": "end of input",
}


def _friendly(value: object) -> str:
    if isinstance(value, str) and value in _FRIENDLY_NAMES:
        return _FRIENDLY_NAMES[value]
    return str(value)
