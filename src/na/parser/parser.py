# Copyright 2026 na Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recursive-descent parser for na source text.

Consumes the lexer's token stream with one token of lookahead and builds a
tree of :mod:`na.model.nodes`. Blocks are opened either by ``[`` (bracketed)
or by one level of tab indentation; both may nest inside each other.
"""

import enum

from na.model.nodes import (
    Block,
    Comment,
    Definition,
    Name,
    Node,
    Numeric,
    Operator,
    Separator,
    Text,
    Truth,
    Type,
    ValueNode,
)
from na.model.tokens import Token, TokenType, start_token
from na.parser.errors import (
    EmptyBulletError,
    ExcessiveIndentationError,
    ExpectedTokenError,
    InvalidTypeNameError,
    MisplacedBulletError,
    MisplacedCommaError,
    MissingTokenError,
    UnexpectedTokenError,
    UnmatchedBracketError,
)
from na.parser.lexer import TRUTH_GLYPHS, Lexer

# ###############
# Public Interface
# ###############

TRUTH_WORDS: dict[str, bool] = {"true": True, "false": False}


class Parser:
    """Recursive-descent parser over a three-token window.

    The window holds the previously consumed token, the current token and one
    token of lookahead. A parser may be reused for any number of sources, one
    at a time.
    """

    def __init__(self) -> None:
        self.lexer = Lexer()
        self._previous = start_token()
        self._current = start_token()
        self._lookahead = start_token()
        self._depth = 0
        self._absorb = 0

    def parse(self, source: str) -> Block:
        """Parse *source* and return its root block.

        Raises:
            LexerError: If the source contains invalid characters.
            GrammarError: If a literal or the block structure is malformed.
        """
        self.lexer.load(source)
        self._previous = start_token()
        self._current = start_token()
        self._lookahead = self.lexer.next()
        self._depth = 0
        self._absorb = 0
        return self._block(self._current, _Mode.ROOT)

    # ------------------------------------------------------------------
    # Token access helpers
    # ------------------------------------------------------------------

    def _advance(self) -> Token:
        """Shift the window by one token and return the new current token.

        The end token is never shifted past.
        """
        if not self._current.is_end:
            self._previous = self._current
            self._current = self._lookahead
            if not self._lookahead.is_end:
                self._lookahead = self.lexer.next()
        return self._current

    # ------------------------------------------------------------------
    # Blocks
    # ------------------------------------------------------------------

    def _block(self, opening: Token, mode: "_Mode") -> Block:
        """Parse the children of a block until the token that closes it.

        Args:
            opening: The token that opened the block (``[``, an indent, or the
                start sentinel for the root).
            mode: How the block is delimited; see :class:`_Mode`.
        """
        state = _BlockState(opening, mode, self._depth)

        while True:
            token = self._advance()
            kind = token.type

            if kind == TokenType.END:
                if mode == _Mode.BRACKET:
                    raise UnmatchedBracketError("]", token.span.start)
                state.require_no_definition(token)
                return state.finish()

            if kind == TokenType.CLOSE:
                if mode != _Mode.BRACKET:
                    raise UnmatchedBracketError(token.text, token.span.start, missing=False)
                state.require_no_definition(token)
                if state.indented:
                    # The bracket closes on an indented line; the outdent that
                    # ends that line has no block left to close.
                    self._absorb += self._depth - state.base_depth
                return state.finish()

            if kind == TokenType.OPEN:
                state.append(self._block(token, _Mode.BRACKET))
                continue

            if kind == TokenType.NEWLINE:
                self._newline(token, state)
                continue

            if kind == TokenType.OUTDENT:
                if self._absorb:
                    self._absorb -= 1
                    continue
                if mode == _Mode.INDENT:
                    state.require_no_definition(token)
                    return state.finish()
                if state.indented and self._depth < state.depth:
                    state.indented = False
                    continue
                if mode == _Mode.BRACKET:
                    raise UnmatchedBracketError("]", token.span.start)
                raise UnexpectedTokenError(token.text, token.span.start)

            if kind == TokenType.COMMA:
                if mode == _Mode.INDENT:
                    self._check_trailing_comma(token, state)
                state.require_no_definition(token)
                state.append(Separator(token=token))
                continue

            if kind == TokenType.BULLET:
                self._bullet(token)
                continue

            state.append(self._item(token))

    def _newline(self, token: Token, state: "_BlockState") -> None:
        """Handle a newline: a separator, or the start of an indented block."""
        depth = token.meta["depth"]
        dent = token.meta["dent"]
        self._depth = depth

        if state.trailing_comma is not None:
            comma, state.trailing_comma = state.trailing_comma, None
            if depth > state.depth:
                raise MisplacedCommaError(comma.span.start)
        if dent > 1:
            raise ExcessiveIndentationError(dent, token.span.start)
        if dent == 0:
            state.require_no_definition(token)
            state.append(Separator(token=token))
            return
        if dent < 0:
            # The outdent tokens that follow close the blocks.
            return

        opened = state.mode == _Mode.BRACKET and self._previous == state.opening
        indent = self._advance()
        if opened:
            # An indented body directly after '[' belongs to the bracket itself.
            state.indented = True
            state.depth = depth
            return
        state.append(self._block(indent, _Mode.INDENT))

    def _check_trailing_comma(self, token: Token, state: "_BlockState") -> None:
        """Raise unless a comma is the last item of its line.

        Outside of brackets a comma may only trail a line: it must be followed
        by the end of the source or by a newline no deeper than the block,
        optionally with a comment in between. The newline after such a comment
        is checked by :meth:`_newline`.
        """
        following = self._lookahead
        if following.type == TokenType.COMMENT:
            state.trailing_comma = token
            return
        if following.is_end:
            return
        if following.type == TokenType.NEWLINE and following.meta["depth"] <= state.depth:
            return
        raise MisplacedCommaError(token.span.start)

    def _bullet(self, token: Token) -> None:
        """Validate a bullet; it is transparent and introduces the next item."""
        if self._previous.type not in _LINE_STARTS:
            raise MisplacedBulletError(token.span.start)
        if self._lookahead.type in _ITEM_ENDS:
            raise EmptyBulletError(token.span.start)

    # ------------------------------------------------------------------
    # Items
    # ------------------------------------------------------------------

    def _item(self, token: Token) -> Node:
        """Build the node for a single item token, using the lookahead where needed."""
        kind = token.type

        if kind == TokenType.NAME:
            if token.text in TRUTH_WORDS:
                return Truth(token=token, value=TRUTH_WORDS[token.text])
            if self._lookahead.type == TokenType.COLON:
                return Definition(token=token, key=token.text, operator=self._advance())
            return Name(token=token, value=token.text)

        if kind == TokenType.NUMBER:
            if self._lookahead.type == TokenType.COLON:
                return Definition(token=token, key=token.text, operator=self._advance())
            return Numeric(token=token, value=token.text)

        if kind in (TokenType.PLUS, TokenType.MINUS):
            following = self._lookahead
            if following.type != TokenType.NUMBER or not token.meta["bind"]["right"]:
                raise ExpectedTokenError("number", following.text, following.span.start)
            number = self._advance()
            return Numeric(token=number, value=token.text + number.text, sign=token)

        if kind == TokenType.HASH:
            following = self._lookahead
            if following.type != TokenType.NAME or not token.meta["bind"]["right"]:
                raise InvalidTypeNameError(following.text, following.span.start)
            name = self._advance()
            return Type(token=name, value=name.text, operator=token)

        if kind == TokenType.TRUTH:
            return Truth(token=token, value=TRUTH_GLYPHS[token.text])
        if kind == TokenType.TEXT:
            return Text(token=token, value=_text_content(token))
        if kind == TokenType.COMMENT:
            return Comment(token=token, value=token.text[2:].strip())
        if kind in (TokenType.DOT, TokenType.PERCENT):
            return Operator(token=token, value=token.text)

        raise UnexpectedTokenError(token.text, token.span.start)


def parse(source: str) -> Block:
    """Parse na source text into its root block.

    Args:
        source: The full na source text.

    Returns:
        The root Block of the syntax tree.

    Raises:
        LexerError: If the source contains invalid characters.
        GrammarError: If a literal or the block structure is malformed.
    """
    return Parser().parse(source)


# ################
# Implementation
# ################

# Tokens after which a bullet starts an item.
_LINE_STARTS: frozenset[TokenType] = frozenset(
    {TokenType.START, TokenType.NEWLINE, TokenType.INDENT, TokenType.OUTDENT, TokenType.OPEN}
)

# Tokens that cannot follow a bullet.
_ITEM_ENDS: frozenset[TokenType] = frozenset(
    {
        TokenType.END,
        TokenType.NEWLINE,
        TokenType.OUTDENT,
        TokenType.CLOSE,
        TokenType.COMMA,
        TokenType.BULLET,
        TokenType.COMMENT,
    }
)


class _Mode(enum.Enum):
    """How a block is delimited."""

    ROOT = "root"
    BRACKET = "bracket"
    INDENT = "indent"


class _BlockState:
    """Children and bookkeeping of the block currently being parsed.

    Attributes:
        base_depth: Indentation depth of the line that opened the block.
        depth: Indentation depth of the block's items.
        indented: True while a bracketed block holds an indented body.
        pending: A definition still waiting for its value.
        trailing_comma: A comma followed by a comment, waiting for the
            newline that ends its line.
    """

    def __init__(self, opening: Token, mode: _Mode, depth: int) -> None:
        self.opening = opening
        self.mode = mode
        self.base_depth = depth
        self.depth = depth
        self.indented = False
        self.children: list[Node] = []
        self.pending: Definition | None = None
        self.trailing_comma: Token | None = None
        self._deferred: list[Node] = []

    def append(self, node: Node) -> None:
        """Append *node*, keeping each definition directly before its value."""
        if self.pending is not None:
            if isinstance(node, Comment):
                self._deferred.append(node)
                return
            if isinstance(node, Definition) or not isinstance(node, ValueNode):
                raise MissingTokenError("value", node.span.start)
            self.children.append(node)
            self.children.extend(self._deferred)
            self._deferred.clear()
            self.pending = None
            return
        self.children.append(node)
        if isinstance(node, Definition):
            self.pending = node

    def require_no_definition(self, token: Token) -> None:
        """Raise if a definition is still waiting for its value at *token*."""
        if self.pending is not None:
            raise MissingTokenError("value", token.span.start)

    def finish(self) -> Block:
        return Block(token=self.opening, children=self.children)


def _text_content(token: Token) -> str:
    """Return the content of a text literal without markers or escapes."""
    width = 3 if token.meta["multiline"] else 1
    marker = token.text[0]
    end = len(token.text) - width if token.meta["closed"] else len(token.text)
    content = token.text[width:end]
    if token.meta["escaped"]:
        content = content.replace("\\" + marker, marker)
    return content
