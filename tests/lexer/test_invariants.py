"""Property-based tests for lexer invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from tagspan.errors import ParseError
from tagspan.lexer import Lexer
from tagspan.tokens import Token, TokenType

# Text that can never start markup or an entity reference
plain_text = st.text(
    alphabet=st.characters(exclude_characters="<&", exclude_categories=("Cs",)),
    max_size=200,
)

tag_names = st.from_regex(r"[a-zA-Z][a-zA-Z0-9\-]{0,8}", fullmatch=True)

# Fragments of markup, well-formed or not
markup_fragments = st.lists(
    st.one_of(
        plain_text,
        st.sampled_from(["<", ">", "&", "&amp;", "<!--", "-->", "</", "/>", '"', "\n"]),
        tag_names.map(lambda name: f"<{name}>"),
        tag_names.map(lambda name: f"</{name}>"),
    ),
    max_size=20,
).map("".join)


def tokenize_or_none(source: str) -> list[Token] | None:
    try:
        return list(Lexer(source).tokenize())
    except ParseError:
        return None


class TestBasicInvariants:
    """Test basic invariants that should always hold."""

    @given(markup_fragments)
    @settings(max_examples=200)
    def test_always_ends_with_eof(self, source: str) -> None:
        """Every successful tokenization ends with exactly one EOF token."""
        tokens = tokenize_or_none(source)
        if tokens is None:
            return

        assert tokens[-1].type == TokenType.EOF, "Last token must be EOF"
        eof_count = sum(1 for t in tokens if t.type == TokenType.EOF)
        assert eof_count == 1, "Must have exactly one EOF token"

    @given(markup_fragments)
    @settings(max_examples=200)
    def test_offsets_are_contiguous(self, source: str) -> None:
        """Tokens cover the content without gaps or overlaps."""
        tokens = tokenize_or_none(source)
        if tokens is None:
            return

        offset = 0
        for token in tokens:
            assert token.location.offset == offset
            offset = token.location.end_offset
        assert offset == len(source)

    @given(markup_fragments)
    @settings(max_examples=100)
    def test_position_never_negative(self, source: str) -> None:
        """Token positions start at 1:1 and never go below it."""
        tokens = tokenize_or_none(source)
        if tokens is None:
            return

        for token in tokens:
            loc = token.location
            assert loc.lineno >= 1, f"Line number must be >= 1, got {loc.lineno}"
            assert loc.col_offset >= 1, f"Column must be >= 1, got {loc.col_offset}"

    @given(markup_fragments)
    @settings(max_examples=100)
    def test_errors_carry_location(self, source: str) -> None:
        """A rejected string always reports where the problem is."""
        try:
            list(Lexer(source).tokenize())
        except ParseError as e:
            assert e.lineno is not None and e.lineno >= 1
            assert e.col_offset is not None and e.col_offset >= 1


class TestPlainText:
    """Content without markup."""

    @given(plain_text)
    @settings(max_examples=200)
    def test_single_text_token(self, source: str) -> None:
        """Text without '<' or '&' is one TEXT token with the value unchanged."""
        tokens = list(Lexer(source).tokenize())

        if source:
            assert [t.type for t in tokens] == [TokenType.TEXT, TokenType.EOF]
            assert tokens[0].value == source
        else:
            assert [t.type for t in tokens] == [TokenType.EOF]

    @given(plain_text)
    @settings(max_examples=100)
    def test_line_count(self, source: str) -> None:
        """EOF sits on the last line."""
        eof = list(Lexer(source).tokenize())[-1]
        assert eof.lineno == source.count("\n") + 1
