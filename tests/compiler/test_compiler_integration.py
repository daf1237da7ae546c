# Copyright 2026 na Contributors
# SPDX-License-Identifier: Apache-2.0

"""Integration tests for the na compiler pipeline.

These tests run scanning, parsing and rendering against real .na files
stored in tests/data/. Every positive file has a sibling .expected file with
its normalized form; every negative file must be rejected with a specific
error.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from na.compiler.build import compile, compile_file, compile_json
from na.parser.errors import (
    DigitGroupingError,
    EmptyBulletError,
    ExcessiveIndentationError,
    ExpectedTokenError,
    InvalidNumberError,
    InvalidRadixError,
    InvalidTypeNameError,
    MisplacedBulletError,
    MisplacedCommaError,
    MissingClosingMarkerError,
    MissingTokenError,
    NaError,
    UnexpectedTokenError,
    UnknownCharacterError,
    UnmatchedBracketError,
    UnsupportedCharacterError,
)

# ###############
# Helpers
# ###############

DATA_DIR = Path(__file__).parent.parent / "data"
POSITIVE_DIR = DATA_DIR / "positive"
NEGATIVE_DIR = DATA_DIR / "negative"

POSITIVE_FILES = sorted(POSITIVE_DIR.rglob("*.na"))


def _case_id(path: Path) -> str:
    return path.relative_to(DATA_DIR).with_suffix("").as_posix()


def _expected(path: Path) -> str:
    return path.with_suffix(".expected").read_text(encoding="utf-8").rstrip("\n")


# ###############
# Positive Examples
# ###############


class TestPositiveExamples:
    """All files in tests/data/positive/ compile to their expected normalized form."""

    def test_examples_present(self) -> None:
        assert len(POSITIVE_FILES) >= 5

    @pytest.mark.parametrize("path", POSITIVE_FILES, ids=_case_id)
    def test_normalized_output(self, path: Path) -> None:
        assert compile_file(path) == _expected(path)

    @pytest.mark.parametrize("path", POSITIVE_FILES, ids=_case_id)
    def test_normalized_output_is_stable(self, path: Path) -> None:
        expected = _expected(path)
        assert compile(expected) == expected

    @pytest.mark.parametrize("path", POSITIVE_FILES, ids=_case_id)
    def test_json_output_is_valid(self, path: Path) -> None:
        rendered = compile_json(path.read_text(encoding="utf-8"))
        assert rendered is not None
        assert isinstance(json.loads(rendered), dict)

    def test_document_as_json(self) -> None:
        rendered = compile_json((POSITIVE_DIR / "document.na").read_text(encoding="utf-8"))
        assert json.loads(rendered) == {
            "name": "'na'",
            "version": "1",
            "authors": {"0": "'Ada'", "1": "'Grace'"},
            "stable": False,
        }


# ###############
# Negative Examples
# ###############


class TestNegativeExamples:
    """All files in tests/data/negative/ are rejected with the listed error."""

    @pytest.mark.parametrize(
        ("name", "error"),
        [
            ("unknown_character", UnknownCharacterError),
            ("unsupported_character", UnsupportedCharacterError),
            ("leading_space", UnexpectedTokenError),
            ("unterminated_text", MissingClosingMarkerError),
            ("digit_grouping", DigitGroupingError),
            ("invalid_radix", InvalidRadixError),
            ("invalid_number", InvalidNumberError),
            ("excessive_indentation", ExcessiveIndentationError),
            ("misplaced_comma", MisplacedCommaError),
            ("misplaced_bullet", MisplacedBulletError),
            ("empty_bullet", EmptyBulletError),
            ("invalid_type_name", InvalidTypeNameError),
            ("missing_value", MissingTokenError),
            ("missing_close", UnmatchedBracketError),
            ("stray_close", UnmatchedBracketError),
            ("detached_sign", ExpectedTokenError),
        ],
    )
    def test_rejected(self, name: str, error: type[NaError]) -> None:
        with pytest.raises(error):
            compile_file(NEGATIVE_DIR / f"{name}.na")

    def test_every_negative_file_is_listed(self) -> None:
        names = {path.stem for path in NEGATIVE_DIR.glob("*.na")}
        assert len(names) == 16
