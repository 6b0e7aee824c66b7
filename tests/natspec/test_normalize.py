"""Tests for starterdoc.natspec.normalize."""

from __future__ import annotations

from starterdoc.natspec import normalize_docblock


def test_block_comment_strips_markers_and_blank_lines() -> None:
    doc = """/**
     * @title Counter
     *
     * @notice Counts things.
     */"""

    assert normalize_docblock(doc) == ["@title Counter", "@notice Counts things."]


def test_triple_slash_lines_are_collected() -> None:
    doc = "/// @notice Returns the value.\n///   @return The value.\n"

    assert normalize_docblock(doc) == ["@notice Returns the value.", "@return The value."]


def test_single_line_block_with_several_tags_is_split() -> None:
    doc = "/** @notice Adds a value. @param value The amount. @return The new total. */"

    assert normalize_docblock(doc) == [
        "@notice Adds a value.",
        "@param value The amount.",
        "@return The new total.",
    ]


def test_email_addresses_do_not_split_lines() -> None:
    doc = "/// @author Jane <jane@example.com>"

    assert normalize_docblock(doc) == ["@author Jane <jane@example.com>"]


def test_text_without_comment_markers_yields_nothing() -> None:
    assert normalize_docblock("just some text") == []
    assert normalize_docblock("") == []
    assert normalize_docblock("/* plain comment */") == []
