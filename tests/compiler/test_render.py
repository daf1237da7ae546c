# Copyright 2026 na Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the normalized na and JSON renderers."""

import json

import pytest

from na.compiler.render import to_json, to_normalized
from na.model.nodes import Block, Comment, Definition, Name
from na.model.tokens import Span, Token, TokenType, start_token
from na.parser.parser import parse

# ###############
# Helpers
# ###############


def _normalized(source: str) -> str | None:
    return to_normalized(parse(source))


def _json(source: str) -> object:
    rendered = to_json(parse(source))
    assert rendered is not None
    return json.loads(rendered)


# ###############
# Normalized Output
# ###############


class TestNormalized:
    @pytest.mark.parametrize("source", ["⊤, ⊥, +42", "[⊤, ⊥, +42]"])
    def test_truth_and_signed_numbers(self, source: str) -> None:
        assert _normalized(source) == "[⊤, ⊥, +42]"

    def test_truth_words_render_as_glyphs(self) -> None:
        assert _normalized("true, false") == "[⊤, ⊥]"

    def test_definition(self) -> None:
        assert _normalized("foo: [1, 2]") == "[foo: [1, 2]]"

    def test_indented_definition(self) -> None:
        assert _normalized("foo:\n\t1\n\t2\nbar: x") == "[foo: [1, 2], bar: x]"

    def test_comment_is_dropped(self) -> None:
        assert _normalized("-- comment\n42") == "[42]"

    def test_comment_after_definition_is_dropped(self) -> None:
        assert _normalized("foo: -- note\n\tbar") == "[foo: [bar]]"

    def test_literals_keep_source_text(self) -> None:
        source = "'a', \"b\", #c, 1/3, 16\\ff, 2.5\\-3, 5km, 50%"
        assert _normalized(source) == "['a', \"b\", #c, 1/3, 16\\ff, 2.5\\-3, 5km, 50, %]"

    def test_dotted_path(self) -> None:
        assert _normalized("a.b: true") == "[a, ., b: ⊤]"

    def test_bullets_are_dropped(self) -> None:
        assert _normalized("• a\n• b") == "[a, b]"

    def test_empty_source(self) -> None:
        assert _normalized("") == "[]"

    def test_single_block_is_unwrapped(self) -> None:
        assert _normalized("[a, b]") == "[a, b]"
        assert _normalized("[[a]]") == "[[a]]"

    def test_scalar_node(self) -> None:
        name = Name(token=Token(TokenType.NAME, "a", Span(0, 1)), value="a")
        assert to_normalized(name) == "a"

    def test_structural_node_renders_nothing(self) -> None:
        comment = Comment(token=Token(TokenType.COMMENT, "-- c", Span(0, 4)), value="c")
        assert to_normalized(comment) is None

    @pytest.mark.parametrize(
        "source",
        [
            "a, b",
            "[a, [b, c]]",
            "foo: [1, 2]",
            "x:\n\ta\n\tb",
            "'''multi\nline'''",
            "[[a]]",
            "a.b: true, -7, #t",
        ],
    )
    def test_normalizing_is_idempotent(self, source: str) -> None:
        once = _normalized(source)
        assert once is not None
        assert _normalized(once) == once

    def test_rendering_does_not_modify_tree(self) -> None:
        root = parse("a: 1, b: [c: d]")
        before = root.model_dump()
        first = to_normalized(root)
        assert to_normalized(root) == first
        assert root.model_dump() == before

    def test_definition_without_value(self) -> None:
        key = Token(TokenType.NAME, "k", Span(0, 1))
        colon = Token(TokenType.COLON, ":", Span(1, 2))
        block = Block(token=start_token(), children=[Definition(token=key, key="k", operator=colon)])
        with pytest.raises(ValueError, match="'k'"):
            to_normalized(block)


# ###############
# JSON Output
# ###############


class TestJson:
    def test_definition(self) -> None:
        assert to_json(parse("foo: [1, 2]")) == '{"foo": {"0": "1", "1": "2"}}'

    def test_positional_and_keyed_items(self) -> None:
        assert _json("a, k: v, b") == {"0": "a", "k": "v", "1": "b"}

    def test_truth_values(self) -> None:
        assert _json("⊤, false") == {"0": True, "1": False}

    def test_scalars_are_source_strings(self) -> None:
        assert _json("+42, #name, 'text', 1/3") == {"0": "+42", "1": "#name", "2": "'text'", "3": "1/3"}

    def test_text_with_quotes_is_escaped(self) -> None:
        assert _json("'say \"hi\"'") == {"0": "'say \"hi\"'"}

    def test_non_ascii_is_kept(self) -> None:
        rendered = to_json(parse("clé: 日本"))
        assert rendered == '{"clé": "日本"}'

    def test_nested_indentation(self) -> None:
        assert _json("a:\n\tb:\n\t\tc\n\td") == {"a": {"b": {"0": "c"}, "0": "d"}}

    def test_comments_are_dropped(self) -> None:
        assert _json("-- comment\n42") == {"0": "42"}

    def test_empty_source(self) -> None:
        assert to_json(parse("")) == "{}"

    def test_rendering_twice_gives_same_output(self) -> None:
        root = parse("x: [1, 2], y")
        assert to_json(root) == to_json(root)
