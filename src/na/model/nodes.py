# Copyright 2026 na Contributors
# SPDX-License-Identifier: Apache-2.0

"""Syntax tree nodes produced by the na parser."""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel
from pydantic import Field as _Field

from na.model.tokens import NumberType, Span, Token

# ###############
# Public Interface
# ###############


class SyntaxNode(BaseModel):
    """Common base of all nodes; every node keeps the token it was built from."""

    token: Token

    @property
    def span(self) -> Span:
        return self.token.span


class StructuralNode(SyntaxNode):
    """A node that shapes the source layout but produces no value."""


class ValueNode(SyntaxNode):
    """A node that produces a value by itself."""


# Structural nodes


class Separator(StructuralNode):
    """A newline or comma between items."""

    kind: Literal["separator"] = "separator"


class Indent(StructuralNode):
    kind: Literal["indent"] = "indent"


class Outdent(StructuralNode):
    kind: Literal["outdent"] = "outdent"


class Comment(StructuralNode):
    """A line comment; ``value`` is the text after ``--`` with surrounding spaces removed."""

    kind: Literal["comment"] = "comment"
    value: str


class Ignored(StructuralNode):
    """A node already accounted for by a sibling; renderers skip it."""

    kind: Literal["ignored"] = "ignored"


# Value nodes


class Truth(ValueNode):
    kind: Literal["truth"] = "truth"
    value: bool


class Numeric(ValueNode):
    """A number literal, optionally signed.

    ``value`` is the literal text including its sign; the literal details
    (type, digits, suffix, ...) live in the number token's metadata.
    """

    kind: Literal["numeric"] = "numeric"
    value: str
    sign: Token | None = None

    @property
    def span(self) -> Span:
        start = self.sign.span.start if self.sign is not None else self.token.span.start
        return Span(start, self.token.span.end)

    @property
    def meta(self) -> dict[str, Any]:
        return self.token.meta

    @property
    def number_type(self) -> NumberType:
        return self.token.meta["type"]


class Text(ValueNode):
    """A text literal; ``value`` is its content without markers or escapes."""

    kind: Literal["text"] = "text"
    value: str

    @property
    def meta(self) -> dict[str, Any]:
        return self.token.meta


class Name(ValueNode):
    kind: Literal["name"] = "name"
    value: str


class Type(ValueNode):
    """A ``#name`` type reference; ``operator`` is the ``#`` token."""

    kind: Literal["type"] = "type"
    value: str
    operator: Token

    @property
    def span(self) -> Span:
        return Span(self.operator.span.start, self.token.span.end)


class Operator(ValueNode):
    """A free-standing operator such as ``.`` or ``%``."""

    kind: Literal["operator"] = "operator"
    value: str


class Definition(ValueNode):
    """The ``key:`` half of a key/value pair.

    The bound value is the next sibling in the parent block, never a child of
    this node.
    """

    kind: Literal["definition"] = "definition"
    key: str
    operator: Token


class Block(ValueNode):
    """An ordered sequence of nodes, opened by ``[``, an indent or the start of the source."""

    kind: Literal["block"] = "block"
    children: list[Node] = _Field(default_factory=list)

    def values(self) -> list[Node]:
        """Return the children that produce values, skipping structural nodes."""
        return [child for child in self.children if isinstance(child, ValueNode)]


# Any syntax node. The `kind` discriminator keeps the union closed.
Node = Annotated[
    Block
    | Truth
    | Numeric
    | Text
    | Name
    | Type
    | Operator
    | Definition
    | Separator
    | Indent
    | Outdent
    | Comment
    | Ignored,
    _Field(discriminator="kind"),
]

# Resolve forward references for models that use Node.
Block.model_rebuild()
