"""Single-pass markup lexer with O(n) guaranteed performance.

Splits tagged content into text runs and markup constructs. Every scan
advances the position; there are no rewinds and no regex in the hot path.

Recognized constructs:
- Text runs, with XML entities and numeric character references decoded;
  an ``&`` that does not start a recognized reference is kept as literal text
- Start tags ``<name attr="v">``, end tags ``</name>``, empty tags ``<name/>``
- Comments ``<!-- ... -->``
- Processing instructions ``<? ... ?>``
- Declarations ``<!DOCTYPE ...>``
- CDATA sections ``<![CDATA[ ... ]]>``

Anything else that starts with ``<`` is malformed and raises ParseError.

Thread Safety:
Lexer instances are single-use. Create one per content string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from tagspan.errors import ParseError
from tagspan.tokens import Token, TokenType

# Predefined XML entities. Other names (&nbsp; etc.) are left as literal text.
XML_ENTITIES = {
    "lt": "<",
    "gt": ">",
    "amp": "&",
    "quot": '"',
    "apos": "'",
}

_NAME_PUNCTUATION = frozenset("-._:")
_WHITESPACE = frozenset(" \t\r\n")
_QUOTES = frozenset("\"'")
_DECIMAL_DIGITS = frozenset("0123456789")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

# Longest entity reference we look at before giving up on finding ';'
_MAX_ENTITY_LENGTH = 32


class Lexer:
    """Tokenizer for tagged content.

    Usage:
            >>> lexer = Lexer('Hello, <name>Bob</name>')
            >>> for token in lexer.tokenize():
            ...     print(token)
        Token(TEXT, 'Hello, ', 1:1)
        Token(START_TAG, '<name>', 1:8)
        Token(TEXT, 'Bob', 1:14)
        Token(END_TAG, '</name>', 1:17)
        Token(EOF, '', 1:24)

    Thread Safety:
        Lexer instances are single-use. Create one per content string.

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_pos",
        "_lineno",
        "_col",
        "_source_file",
        "_saved_pos",
        "_saved_lineno",
        "_saved_col",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize lexer with content.

        Args:
            source: Tagged content string
            source_file: Optional path or message id for error messages
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._lineno = 1
        self._col = 1
        self._source_file = source_file

        self._saved_pos = 0
        self._saved_lineno = 1
        self._saved_col = 1

    def tokenize(self) -> Iterator[Token]:
        """Tokenize content into a token stream.

        Yields:
            Token objects one at a time, ending with EOF

        Raises:
            ParseError: If the content contains malformed markup
        """
        source = self._source
        source_len = self._source_len
        while self._pos < source_len:
            self._save_location()
            if source[self._pos] == "<":
                yield self._scan_markup()
            else:
                yield self._scan_text()

        self._save_location()
        yield self._make_token(TokenType.EOF, "", self._pos)

    # =========================================================================
    # Scanners
    # =========================================================================

    def _scan_text(self) -> Token:
        """Scan a text run up to the next '<' or end of content."""
        start = self._pos
        end = self._source.find("<", start)
        if end == -1:
            end = self._source_len

        value = self._decode_entities(self._source[start:end])
        self._commit_to(end)
        return self._make_token(TokenType.TEXT, value, start)

    def _scan_markup(self) -> Token:
        """Scan a construct starting at '<'."""
        source = self._source
        start = self._pos

        if source.startswith("<!--", start):
            return self._scan_delimited(TokenType.COMMENT, "<!--", "-->", "comment")
        if source.startswith("<![CDATA[", start):
            return self._scan_delimited(TokenType.CDATA, "<![CDATA[", "]]>", "CDATA section")
        if source.startswith("<?", start):
            return self._scan_delimited(
                TokenType.PROCESSING_INSTRUCTION, "<?", "?>", "processing instruction"
            )
        if source.startswith("<!", start):
            return self._scan_delimited(TokenType.DECLARATION, "<!", ">", "declaration")
        if source.startswith("</", start):
            return self._scan_end_tag()
        return self._scan_start_tag()

    def _scan_delimited(
        self,
        token_type: TokenType,
        opener: str,
        closer: str,
        what: str,
    ) -> Token:
        """Scan a construct with fixed open/close delimiters.

        The token value is the text between the delimiters, undecoded.
        """
        start = self._pos
        inner_start = start + len(opener)
        close = self._source.find(closer, inner_start)
        if close == -1:
            raise self._error(f"Unterminated {what}", start)

        value = self._source[inner_start:close]
        self._commit_to(close + len(closer))
        return self._make_token(token_type, value, start)

    def _scan_end_tag(self) -> Token:
        """Scan ``</name>``."""
        start = self._pos
        name_start = start + 2
        name_end = self._scan_name(name_start)
        pos = self._skip_whitespace(name_end)

        if pos >= self._source_len:
            raise self._error("Unterminated end tag", start)
        if self._source[pos] != ">":
            raise self._error(f"Unexpected {self._source[pos]!r} in end tag", pos)

        self._commit_to(pos + 1)
        return self._make_token(
            TokenType.END_TAG,
            self._source[start : pos + 1],
            start,
            name=self._source[name_start:name_end],
        )

    def _scan_start_tag(self) -> Token:
        """Scan ``<name attr="value" ...>`` or ``<name .../>``."""
        source = self._source
        start = self._pos
        name_start = start + 1
        name_end = self._scan_name(name_start)
        name = source[name_start:name_end]

        attributes: list[tuple[str, str]] = []
        seen: set[str] = set()
        pos = name_end

        while True:
            after_ws = self._skip_whitespace(pos)
            if after_ws >= self._source_len:
                raise self._error(f"Unterminated tag <{name}>", start)

            char = source[after_ws]
            if char == ">":
                token_type = TokenType.START_TAG
                end = after_ws + 1
                break
            if source.startswith("/>", after_ws):
                token_type = TokenType.EMPTY_TAG
                end = after_ws + 2
                break

            # Attributes must be separated from the name and from each other
            if after_ws == pos:
                raise self._error(f"Unexpected {char!r} in tag <{name}>", after_ws)

            attr_name, value, pos = self._scan_attribute(after_ws, name)
            if attr_name in seen:
                raise self._error(
                    f"Duplicate attribute {attr_name!r} in tag <{name}>", after_ws
                )
            seen.add(attr_name)
            attributes.append((attr_name, value))

        self._commit_to(end)
        return self._make_token(
            token_type,
            source[start:end],
            start,
            name=name,
            attributes=tuple(attributes),
        )

    def _scan_attribute(self, pos: int, tag: str) -> tuple[str, str, int]:
        """Scan ``name="value"`` starting at pos.

        Returns:
            (attribute name, decoded value, position after closing quote)
        """
        source = self._source
        name_end = self._scan_name(pos)
        attr_name = source[pos:name_end]

        eq = self._skip_whitespace(name_end)
        if eq >= self._source_len or source[eq] != "=":
            raise self._error(f"Attribute {attr_name!r} in tag <{tag}> has no value", pos)

        quote_pos = self._skip_whitespace(eq + 1)
        if quote_pos >= self._source_len or source[quote_pos] not in _QUOTES:
            raise self._error(
                f"Value of attribute {attr_name!r} in tag <{tag}> must be quoted",
                quote_pos,
            )

        quote = source[quote_pos]
        close = source.find(quote, quote_pos + 1)
        if close == -1:
            raise self._error(f"Unterminated value for attribute {attr_name!r}", quote_pos)

        raw = source[quote_pos + 1 : close]
        lt = raw.find("<")
        if lt != -1:
            raise self._error("'<' is not allowed in attribute values", quote_pos + 1 + lt)

        # XML attribute-value normalization: literal whitespace becomes a space
        raw = raw.replace("\r\n", " ").translate({9: " ", 10: " ", 13: " "})
        value = self._decode_entities(raw)
        return attr_name, value, close + 1

    def _scan_name(self, pos: int) -> int:
        """Scan an XML name starting at pos.

        Returns:
            Position just past the name

        Raises:
            ParseError: If no valid name starts at pos
        """
        source = self._source
        source_len = self._source_len
        if pos >= source_len or not (source[pos].isalpha() or source[pos] in "_:"):
            if pos >= source_len:
                raise self._error("Unexpected end of content in tag", pos)
            raise self._error(f"Invalid name start character {source[pos]!r}", pos)

        pos += 1
        while pos < source_len:
            char = source[pos]
            if char.isalnum() or char in _NAME_PUNCTUATION:
                pos += 1
            else:
                break
        return pos

    def _skip_whitespace(self, pos: int) -> int:
        """Return the first non-whitespace position at or after pos."""
        source = self._source
        source_len = self._source_len
        while pos < source_len and source[pos] in _WHITESPACE:
            pos += 1
        return pos

    # =========================================================================
    # Entities
    # =========================================================================

    def _decode_entities(self, raw: str) -> str:
        """Decode entity and character references in raw.

        An ``&`` that does not begin a recognized reference is kept as is,
        so "Terms & Conditions" and "&nbsp;" pass through unchanged.

        Args:
            raw: Undecoded text

        Returns:
            Decoded text
        """
        amp = raw.find("&")
        if amp == -1:
            return raw

        parts: list[str] = []
        pos = 0
        while amp != -1:
            parts.append(raw[pos:amp])
            semi = raw.find(";", amp + 1, amp + _MAX_ENTITY_LENGTH)
            value = self._decode_reference(raw[amp + 1 : semi]) if semi != -1 else None
            if value is None:
                parts.append("&")
                pos = amp + 1
            else:
                parts.append(value)
                pos = semi + 1
            amp = raw.find("&", pos)

        parts.append(raw[pos:])
        return "".join(parts)

    def _decode_reference(self, ref: str) -> str | None:
        """Decode the body of a single ``&...;`` reference.

        Returns:
            The referenced text, or None if ref is not a recognized entity
            or a valid character reference
        """
        if ref.startswith("#"):
            digits = ref[1:]
            base, allowed = 10, _DECIMAL_DIGITS
            if digits[:1] in ("x", "X"):
                digits = digits[1:]
                base, allowed = 16, _HEX_DIGITS
            if not digits or not all(char in allowed for char in digits):
                return None
            codepoint = int(digits, base)
            if not 0 < codepoint <= 0x10FFFF or 0xD800 <= codepoint <= 0xDFFF:
                return None
            return chr(codepoint)

        return XML_ENTITIES.get(ref)

    # =========================================================================
    # Position and location tracking
    # =========================================================================

    def _commit_to(self, end: int) -> None:
        """Advance position to end, updating line and column."""
        segment = self._source[self._pos : end]
        newline_count = segment.count("\n")

        if newline_count > 0:
            last_nl = segment.rfind("\n")
            self._lineno += newline_count
            self._col = len(segment) - last_nl
        else:
            self._col += len(segment)

        self._pos = end

    def _save_location(self) -> None:
        """Save current location as the start of the next token."""
        self._saved_pos = self._pos
        self._saved_lineno = self._lineno
        self._saved_col = self._col

    def _make_token(
        self,
        token_type: TokenType,
        value: str,
        start_pos: int,
        *,
        name: str = "",
        attributes: tuple[tuple[str, str], ...] = (),
    ) -> Token:
        """Create a Token spanning from the saved location to the current one."""
        return Token(
            type=token_type,
            value=value,
            _lineno=self._saved_lineno,
            _col=self._saved_col,
            _start_offset=start_pos,
            _end_offset=self._pos,
            name=name,
            attributes=attributes,
            _end_lineno=self._lineno,
            _end_col=self._col,
            _source_file=self._source_file,
        )

    def _error(self, message: str, offset: int) -> ParseError:
        """Build a ParseError located at an offset within the current token.

        Offsets are always at or after the saved token start, so line and
        column are derived from the saved location.
        """
        source = self._source
        start = self._saved_pos
        offset = min(offset, self._source_len)
        newlines = source.count("\n", start, offset)
        if newlines:
            col = offset - source.rfind("\n", start, offset)
        else:
            col = self._saved_col + (offset - start)
        return ParseError(
            message,
            lineno=self._saved_lineno + newlines,
            col_offset=col,
            source_file=self._source_file,
        )
