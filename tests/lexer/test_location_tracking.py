"""Tests for source location tracking in the lexer.

Locations end up in every StructuralError, so authoring mistakes in a
translated string can be found by line and column.
"""

import pytest

from tagspan.errors import ParseError
from tagspan.lexer import Lexer
from tagspan.tokens import TokenType


class TestSingleLineLocations:
    """Location tracking on one line."""

    def test_greeting(self) -> None:
        tokens = list(Lexer("Hello, <name>Bob</name>").tokenize())

        positions = [(t.type, t.location.lineno, t.location.col_offset) for t in tokens]
        assert positions == [
            (TokenType.TEXT, 1, 1),
            (TokenType.START_TAG, 1, 8),
            (TokenType.TEXT, 1, 14),
            (TokenType.END_TAG, 1, 17),
            (TokenType.EOF, 1, 24),
        ]

    def test_offsets(self) -> None:
        tokens = list(Lexer("Hello, <name>Bob</name>").tokenize())

        spans = [(t.location.offset, t.location.end_offset) for t in tokens]
        assert spans == [(0, 7), (7, 13), (13, 16), (16, 23), (23, 23)]

    def test_source_file_is_carried(self) -> None:
        token = next(Lexer("Hi", source_file="greeting").tokenize())
        assert str(token.location) == "greeting:1:1"


class TestMultiLineLocations:
    """Location tracking across newlines."""

    def test_tag_on_second_line(self) -> None:
        tokens = list(Lexer("Hello,\n<b>Bob</b>").tokenize())

        assert tokens[0].location.end_lineno == 2
        assert tokens[0].location.end_col_offset == 1
        assert (tokens[1].lineno, tokens[1].col) == (2, 1)
        assert (tokens[2].lineno, tokens[2].col) == (2, 4)
        assert (tokens[3].lineno, tokens[3].col) == (2, 7)

    def test_multi_line_comment(self) -> None:
        tokens = list(Lexer("<!--\n\n-->x").tokenize())

        text = tokens[1]
        assert text.type == TokenType.TEXT
        assert (text.lineno, text.col) == (3, 4)

    def test_tag_spanning_lines(self) -> None:
        tokens = list(Lexer('<a\n  href="x">y</a>').tokenize())

        assert (tokens[0].lineno, tokens[0].col) == (1, 1)
        assert (tokens[1].lineno, tokens[1].col) == (2, 12)


class TestErrorLocations:
    """ParseError positions point at the offending character."""

    @pytest.mark.parametrize(
        ("source", "lineno", "col"),
        [
            ("ab <1>", 1, 5),
            ("line one\nA <1>", 2, 4),
            ("<b\nx>", 2, 1),
            ("first\nsecond <!-- open", 2, 8),
        ],
    )
    def test_position(self, source: str, lineno: int, col: int) -> None:
        with pytest.raises(ParseError) as exc_info:
            list(Lexer(source).tokenize())
        assert (exc_info.value.lineno, exc_info.value.col_offset) == (lineno, col)

    def test_formatted_message(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            list(Lexer("ab <1>", source_file="greeting").tokenize())
        assert str(exc_info.value) == "greeting:1:5 Invalid name start character '1'"
