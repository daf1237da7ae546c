# Copyright 2026 na Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for na source text.

Converts raw source text into tokens on demand. Indentation is significant:
every newline token carries the tab depth of the following line, and is
followed by one indent or outdent token per level of change.
"""

import unicodedata
from collections import deque
from collections.abc import Callable, Iterator

from na.model.tokens import NumberType, Span, Token, TokenType, end_token
from na.parser.errors import (
    DigitGroupingError,
    InvalidNumberError,
    InvalidRadixError,
    MissingClosingMarkerError,
    UnexpectedTokenError,
    UnknownCharacterError,
    UnsupportedCharacterError,
)

# ###############
# Public Interface
# ###############

OPERATORS: dict[str, TokenType] = {
    "[": TokenType.OPEN,
    "]": TokenType.CLOSE,
    ":": TokenType.COLON,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "#": TokenType.HASH,
    "•": TokenType.BULLET,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "%": TokenType.PERCENT,
}

TRUTH_GLYPHS: dict[str, bool] = {"⊤": True, "⊥": False}


def is_syntax(char: str) -> bool:
    """Return True for the 32 reserved ASCII punctuation characters."""
    return len(char) == 1 and ("!" <= char <= "/" or ":" <= char <= "@" or "[" <= char <= "`" or "{" <= char <= "~")


def is_unsupported(char: str) -> bool:
    """Return True for characters that may not appear outside text literals.

    These are control, private-use, surrogate and noncharacter code points,
    plus the line and paragraph separators.
    """
    if len(char) != 1:
        return False
    if char in "\u2028\u2029":
        return True
    if unicodedata.category(char) in ("Cc", "Co", "Cs"):
        return True
    code = ord(char)
    return 0xFDD0 <= code <= 0xFDEF or code & 0xFFFE == 0xFFFE


def is_word(char: str) -> bool:
    """Return True for any character that can be part of a name.

    That is everything except significant whitespace, reserved syntax, the
    bullet operator and unsupported characters.
    """
    return (
        len(char) == 1
        and char not in "\t\n "
        and char not in OPERATORS
        and not is_syntax(char)
        and not is_unsupported(char)
    )


class Lexer:
    """Pull-based scanner producing one token per :meth:`next` call.

    A single scan step may produce several tokens (a newline followed by its
    indent or outdent tokens); these wait in a FIFO queue until requested.
    """

    def __init__(self, source: str | None = None) -> None:
        self._source = ""
        self._pos = 0
        self._depth = 0
        self._out: deque[Token] = deque()
        if source is not None:
            self.load(source)

    def load(self, source: str) -> "Lexer":
        """Load *source*, resetting position, depth and the output queue."""
        self._source = source
        self._pos = 0
        self._depth = 0
        self._out.clear()
        return self

    def next(self) -> Token:
        """Scan and return the next token.

        Once the source is exhausted every further call returns an end token.

        Raises:
            LexerError: On unknown, unsupported or misplaced characters.
            GrammarError: On malformed number or text literals.
        """
        if self._out:
            return self._out.popleft()

        while self._current() == " ":
            if self._pos == 0:
                raise UnexpectedTokenError(" ", 0)
            self._pos += 1

        start = self._pos
        ch = self._current()

        if start >= len(self._source):
            self._emit(end_token(len(self._source)))
        elif ch == "\n":
            self._scan_newline(start)
        elif ch == "-" and self._char(start + 1) == "-":
            self._scan_comment(start)
        elif ch in "'\"":
            if self._char(start + 1) == ch and self._char(start + 2) == ch:
                self._scan_multiline_text(start, ch)
            else:
                self._scan_inline_text(start, ch)
        elif _is_numeral(ch):
            self._scan_number(start)
        elif ch in OPERATORS:
            self._scan_operator(start)
        elif is_syntax(ch):
            raise UnknownCharacterError(ch, start)
        elif ch == "\t":
            raise UnexpectedTokenError(ch, start)
        elif is_unsupported(ch):
            raise UnsupportedCharacterError(ch, start)
        else:
            self._scan_word(start)

        return self._out.popleft()

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens until (not including) the end token."""
        while not (token := self.next()).is_end:
            yield token

    # ------------------------------------------------------------------
    # Low-level character access helpers
    # ------------------------------------------------------------------

    def _char(self, position: int) -> str:
        """Return the character at *position*, or '' outside the source."""
        if 0 <= position < len(self._source):
            return self._source[position]
        return ""

    def _current(self) -> str:
        """Return the character at the current position, or '' at end of input."""
        return self._char(self._pos)

    def _emit(self, token: Token) -> None:
        """Queue *token* and move the position to its end."""
        self._out.append(token)
        self._pos = token.span.end

    def _match(self, start: int, predicate: Callable[[str], bool]) -> int:
        """Advance from *start* while *predicate* holds; return the end position."""
        end = start
        while end < len(self._source) and predicate(self._source[end]):
            end += 1
        return end

    def _match_integer(self, start: int) -> int:
        """Match a run of numerals with single '_' separators; return its end.

        The character at *start* begins the run (a numeral, or the sign of an
        exponent). A trailing '_' is only allowed directly before a suffix.
        """
        if self._char(start) == "_":
            raise DigitGroupingError(start)
        end = start + 1
        while True:
            ch = self._char(end)
            if _is_numeral(ch):
                end += 1
            elif ch == "_":
                following = self._char(end + 1)
                if _is_numeral(following):
                    end += 1
                elif _is_suffix(following):
                    return end + 1
                elif following == "_":
                    raise DigitGroupingError(end + 1)
                else:
                    raise DigitGroupingError(end)
            else:
                return end

    # ------------------------------------------------------------------
    # Indentation and comments
    # ------------------------------------------------------------------

    def _scan_newline(self, start: int) -> None:
        """Scan a newline and any change in indentation depth."""
        if self._char(start + 1) == " ":
            raise UnexpectedTokenError(" ", start + 1)

        tabs_end = self._match(start + 1, lambda char: char == "\t")
        depth = tabs_end - start - 1
        if depth and self._char(tabs_end) == " ":
            raise UnexpectedTokenError(" ", tabs_end)
        dent = depth - self._depth

        meta = {"depth": depth, "dent": dent}
        self._out.append(Token(TokenType.NEWLINE, "\n", Span(start, start + 1), meta))
        for i in range(dent):
            position = tabs_end - dent + i
            self._out.append(Token(TokenType.INDENT, "\t", Span(position, position + 1)))
        for _ in range(-dent):
            self._out.append(Token(TokenType.OUTDENT, "", Span(tabs_end, tabs_end)))

        self._depth = depth
        self._pos = tabs_end

    def _scan_comment(self, start: int) -> None:
        """Scan a line comment up to (excluding) the next newline."""
        end = self._match(start + 2, lambda char: char != "\n")
        self._emit(Token(TokenType.COMMENT, self._source[start:end], Span(start, end)))

    # ------------------------------------------------------------------
    # Literal scanners
    # ------------------------------------------------------------------

    def _scan_inline_text(self, start: int, marker: str) -> None:
        """Scan an inline text literal.

        Single quotes are verbatim and may not contain a newline; double quotes
        allow an escaped marker and may span lines.
        """
        verbatim = marker == "'"
        end = start + 1
        while end < len(self._source) and self._source[end] != marker:
            ch = self._source[end]
            if verbatim and ch == "\n":
                raise MissingClosingMarkerError(marker, start)
            if not verbatim and ch == "\\" and self._char(end + 1) == marker:
                end += 1  # skip the escaped marker
            end += 1

        if end >= len(self._source):
            raise MissingClosingMarkerError(marker, start)

        meta = {"multiline": False, "escaped": not verbatim, "closed": True}
        self._emit(Token(TokenType.TEXT, self._source[start : end + 1], Span(start, end + 1), meta))

    def _scan_multiline_text(self, start: int, marker: str) -> None:
        """Scan a triple-quoted text literal, which may run to the end of input."""
        found = self._source.find(marker * 3, start + 3)
        end = len(self._source) if found < 0 else found + 3
        meta = {"multiline": True, "escaped": marker == '"', "closed": found >= 0}
        self._emit(Token(TokenType.TEXT, self._source[start:end], Span(start, end), meta))

    def _scan_number(self, start: int) -> None:
        """Scan a number literal: integer, decimal, scientific, ratio or base."""
        meta: dict[str, object] = {}
        end = self._match_integer(start)
        ch = self._char(end)

        if ch == ".":
            meta["type"] = NumberType.DECIMAL
            if not _is_numeral(self._char(end + 1)):
                raise InvalidNumberError(self._char(end + 1), end + 1)
            end = self._match_integer(end + 1)
            meta["number"] = _trim_integer(self._source[start:end])

            if self._char(end) == "\\":
                meta["type"] = NumberType.SCIENTIFIC
                exponent = end + 1
                digits = exponent + 1 if self._char(exponent) in ("+", "-") else exponent
                if not _is_numeral(self._char(digits)):
                    raise InvalidNumberError(self._char(digits), digits)
                end = self._match_integer(exponent)
                meta["exponent"] = _trim_integer(self._source[exponent:end])
        elif ch == "/":
            if not _is_numeral(self._char(end + 1)):
                raise InvalidNumberError(self._char(end + 1), end + 1)
            meta["type"] = NumberType.RATIO
            meta["numerator"] = _trim_integer(self._source[start:end])
            denominator = end + 1
            end = self._match_integer(denominator)
            meta["denominator"] = _trim_integer(self._source[denominator:end])
        elif ch == "\\":
            meta["type"] = NumberType.BASE
            meta["radix"] = _trim_integer(self._source[start:end])
            radix = int(self._source[start:end].replace("_", ""))
            if radix < 2 or radix > 36:
                raise InvalidRadixError(radix, start)
            valid = _radix_predicate(radix)
            if not valid(self._char(end + 1)):
                raise InvalidNumberError(self._char(end + 1), end + 1)
            digits = end + 1
            end = self._match(digits, valid)
            meta["number"] = self._source[digits:end]
        else:
            meta["type"] = NumberType.INTEGER
            meta["number"] = _trim_integer(self._source[start:end])

        # Bases have no suffix: letters are digits there.
        if meta["type"] != NumberType.BASE:
            suffix = end
            end = self._match(end, _is_suffix)
            if end > suffix:
                meta["suffix"] = self._source[suffix:end]

        if is_word(self._char(end)):
            raise InvalidNumberError(self._char(end), end)

        self._emit(Token(TokenType.NUMBER, self._source[start:end], Span(start, end), meta))

    # ------------------------------------------------------------------
    # Operators and words
    # ------------------------------------------------------------------

    def _scan_operator(self, start: int) -> None:
        """Scan a single-character operator, recording which sides bind."""
        ch = self._source[start]
        meta = {
            "bind": {
                "left": not _is_boundary(self._char(start - 1)),
                "right": not _is_boundary(self._char(start + 1)),
            }
        }
        self._emit(Token(OPERATORS[ch], ch, Span(start, start + 1), meta))

    def _scan_word(self, start: int) -> None:
        """Scan a name, or a truth literal when the word is a truth glyph."""
        end = self._match(start + 1, is_word)
        text = self._source[start:end]
        token_type = TokenType.TRUTH if text in TRUTH_GLYPHS else TokenType.NAME
        self._emit(Token(token_type, text, Span(start, end)))


def tokenize(source: str) -> list[Token]:
    """Tokenize na source text.

    Args:
        source: The full na source text.

    Returns:
        A list of Token objects ending with a single end token.

    Raises:
        LexerError: On unknown, unsupported or misplaced characters.
        GrammarError: On malformed number or text literals.
    """
    lexer = Lexer(source)
    tokens = list(lexer)
    tokens.append(end_token(len(source)))
    return tokens


# ################
# Implementation
# ################


def _is_numeral(char: str) -> bool:
    return len(char) == 1 and "0" <= char <= "9"


def _is_suffix(char: str) -> bool:
    return not _is_numeral(char) and is_word(char)


def _is_boundary(char: str) -> bool:
    return char == "" or not is_word(char)


def _radix_predicate(radix: int) -> Callable[[str], bool]:
    """Return a predicate accepting the digits valid in *radix* (case-insensitive)."""

    def predicate(char: str) -> bool:
        return len(char) == 1 and char.isascii() and char.isalnum() and int(char, 36) < radix

    return predicate


def _trim_integer(number: str) -> str:
    """Drop a trailing '_' kept in front of a suffix."""
    return number[:-1] if number.endswith("_") else number
