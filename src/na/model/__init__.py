# Copyright 2026 na Contributors
# SPDX-License-Identifier: Apache-2.0

"""Syntax tree model for na (blocks, values and structural nodes)."""

from na.model.nodes import (
    Block,
    Comment,
    Definition,
    Ignored,
    Indent,
    Name,
    Node,
    Numeric,
    Operator,
    Outdent,
    Separator,
    StructuralNode,
    SyntaxNode,
    Text,
    Truth,
    Type,
    ValueNode,
)
from na.model.tokens import NumberType, Span, Token, TokenType

__all__ = [
    # Tokens
    "Token",
    "TokenType",
    "NumberType",
    "Span",
    # Bases
    "SyntaxNode",
    "StructuralNode",
    "ValueNode",
    "Node",
    # Structural nodes
    "Separator",
    "Indent",
    "Outdent",
    "Comment",
    "Ignored",
    # Value nodes
    "Block",
    "Truth",
    "Numeric",
    "Text",
    "Name",
    "Type",
    "Operator",
    "Definition",
]
