"""Stack-based parser producing a typed Document.

Consumes the token stream from Lexer and builds immutable nodes. The whole
content string becomes the children of an implicit root Document, so any
number of top-level text runs and tag regions are legal.

The parser only checks well-formedness. It builds nested elements faithfully;
the single-level rule is enforced later by the resolver, which can name both
offending tags.

Thread Safety:
- Parser instances are single-use and not thread-safe
- The resulting Document is immutable and safe to share

"""

from __future__ import annotations

from dataclasses import dataclass, field

from tagspan.errors import ParseError
from tagspan.lexer import Lexer
from tagspan.location import SourceLocation
from tagspan.nodes import Document, Element, Text
from tagspan.tokens import Token, TokenType

# Token types that carry no content
_DISCARDED = frozenset(
    {
        TokenType.COMMENT,
        TokenType.PROCESSING_INSTRUCTION,
        TokenType.DECLARATION,
    }
)


@dataclass(slots=True)
class _OpenElement:
    """Element whose end tag has not been seen yet."""

    token: Token
    children: list[Element | Text] = field(default_factory=list)


class Parser:
    """Parser for tagged content.

    Usage:
            >>> doc = Parser("Hello, <name>Bob</name>").parse()
            >>> [type(child).__name__ for child in doc.children]
            ['Text', 'Element']

    Thread Safety:
        Parser instances are single-use. Create one per parse operation.

    """

    __slots__ = ("_source", "_source_file", "_stack", "_children")

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize parser with content.

        Args:
            source: Tagged content string
            source_file: Optional path or message id for error messages
        """
        self._source = source
        self._source_file = source_file
        self._stack: list[_OpenElement] = []
        self._children: list[Element | Text] = []

    def parse(self) -> Document:
        """Parse content into a Document.

        Returns:
            Document whose children are the top-level nodes

        Raises:
            ParseError: If the content is not well-formed
        """
        lexer = Lexer(self._source, source_file=self._source_file)
        for token in lexer.tokenize():
            if token.type is TokenType.EOF:
                break
            self._handle(token)

        if self._stack:
            unclosed = self._stack[-1].token
            raise ParseError(
                f"Unclosed tag <{unclosed.name}>",
                lineno=unclosed.lineno,
                col_offset=unclosed.col,
                source_file=self._source_file,
            )

        location = SourceLocation(
            lineno=1,
            col_offset=1,
            offset=0,
            end_offset=len(self._source),
            source_file=self._source_file,
        )
        return Document(location=location, children=tuple(self._children))

    def _handle(self, token: Token) -> None:
        """Dispatch a single token."""
        token_type = token.type

        if token_type is TokenType.TEXT or token_type is TokenType.CDATA:
            if token.value:
                self._append(Text(location=token.location, content=token.value))
        elif token_type is TokenType.START_TAG:
            self._stack.append(_OpenElement(token))
        elif token_type is TokenType.EMPTY_TAG:
            self._append(
                Element(
                    location=token.location,
                    tag=token.name,
                    attributes=token.attributes,
                )
            )
        elif token_type is TokenType.END_TAG:
            self._close(token)
        elif token_type in _DISCARDED:
            pass
        else:  # pragma: no cover - exhaustive over TokenType
            raise ParseError(f"Unexpected token {token_type.name}")

    def _close(self, token: Token) -> None:
        """Close the innermost open element with an end tag."""
        if not self._stack:
            raise ParseError(
                f"Unexpected end tag </{token.name}>",
                lineno=token.lineno,
                col_offset=token.col,
                source_file=self._source_file,
            )

        open_element = self._stack[-1]
        start = open_element.token
        # Names match exactly, as in XML; only builder lookup folds case
        if token.name != start.name:
            raise ParseError(
                f"End tag </{token.name}> does not match <{start.name}> "
                f"opened at {start.lineno}:{start.col}",
                lineno=token.lineno,
                col_offset=token.col,
                source_file=self._source_file,
            )

        self._stack.pop()
        self._append(
            Element(
                location=start.location.span_to(token.location),
                tag=start.name,
                attributes=start.attributes,
                children=tuple(open_element.children),
            )
        )

    def _append(self, node: Element | Text) -> None:
        """Append node to the innermost open element or the root."""
        if self._stack:
            self._stack[-1].children.append(node)
        else:
            self._children.append(node)
