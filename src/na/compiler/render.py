# Copyright 2026 na Contributors
# SPDX-License-Identifier: Apache-2.0

"""Renderers turning a na syntax tree back into text.

Two forms are supported: normalized na (bracketed, comma-joined) and JSON
(objects keyed by position or definition key). Renderers never modify the
tree: a definition looks one sibling ahead for its value and the renderer
skips that sibling, so the same tree can be rendered any number of times.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Iterator

from na.model.nodes import (
    Block,
    Definition,
    Node,
    Numeric,
    StructuralNode,
    SyntaxNode,
    Truth,
    Type,
)

# ###############
# Public Interface
# ###############

RenderFunction = Callable[[SyntaxNode], str | None]


def to_normalized(node: SyntaxNode) -> str | None:
    """Render *node* and its children as normalized na.

    A block holding nothing but a single block renders as that inner block,
    so normalizing normalized output gives the same text back.
    """
    return _normalized(_unwrap(node))


def to_json(node: SyntaxNode) -> str | None:
    """Render *node* and its children as JSON.

    Blocks become objects: positional items are keyed by their index among
    positional items, definitions by their key. Scalar literals become JSON
    strings holding their source text; truth values become ``true``/``false``.
    """
    return _json(_unwrap(node))


# ################
# Implementation
# ################


def _unwrap(node: SyntaxNode) -> SyntaxNode:
    if isinstance(node, Block):
        values = node.values()
        if len(values) == 1 and isinstance(values[0], Block):
            return values[0]
    return node


def _pairs(block: Block) -> Iterator[tuple[Node, Node | None]]:
    """Yield ``(item, bound value)`` pairs, skipping structural nodes.

    The bound value is only set for definitions; it is the sibling right
    after the definition and is not yielded on its own.
    """
    children = block.children
    index = 0
    while index < len(children):
        child = children[index]
        index += 1
        if isinstance(child, StructuralNode):
            continue
        if isinstance(child, Definition):
            if index >= len(children):
                raise ValueError(f"Definition {child.key!r} has no value")
            yield child, children[index]
            index += 1
        else:
            yield child, None


def _normalized(node: SyntaxNode) -> str | None:
    if isinstance(node, Block):
        items: list[str] = []
        for child, value in _pairs(node):
            if isinstance(child, Definition):
                items.append(f"{child.key}: {_normalized(value)}")
            else:
                items.append(_normalized(child))
        return "[" + ", ".join(items) + "]"
    if isinstance(node, Truth):
        return "⊤" if node.value else "⊥"
    if isinstance(node, StructuralNode):
        return None
    return _source_text(node)


def _json(node: SyntaxNode) -> str | None:
    if isinstance(node, Block):
        items: list[str] = []
        position = 0
        for child, value in _pairs(node):
            if isinstance(child, Definition):
                items.append(f"{json.dumps(child.key, ensure_ascii=False)}: {_json(value)}")
            else:
                items.append(f'"{position}": {_json(child)}')
                position += 1
        return "{" + ", ".join(items) + "}"
    if isinstance(node, Truth):
        return "true" if node.value else "false"
    if isinstance(node, StructuralNode):
        return None
    return json.dumps(_source_text(node), ensure_ascii=False)


def _source_text(node: SyntaxNode) -> str:
    """Return the literal source text of a scalar node."""
    if isinstance(node, Numeric):
        return node.value
    if isinstance(node, Type):
        return node.operator.text + node.value
    return node.token.text
