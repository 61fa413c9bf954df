"""
tagspan: tagged strings to styled spans

Turns translated strings marked up with a small, single-level tag vocabulary
into an ordered tuple of span descriptors for a renderer to lay out.

Quick Start:
    >>> from tagspan import resolve_spans, styled, TextStyle
    >>> name_style = TextStyle(color="teal")
    >>> resolve_spans("Hello, <name>Bob</name>", {"name": styled(name_style)})
    (TextSpan(text='Hello, ', ...), TextSpan(text='Bob', style=TextStyle(...), ...))

    >>> # Built-in tags need no configuration
    >>> resolve_spans("<b>Hi</b> <i>there</i>")
    (TextSpan(text='Hi', ...), TextSpan(text=' '), TextSpan(text='there', ...))

    >>> # Or hold content and builders together
    >>> from tagspan import TaggedText
    >>> tagged = TaggedText("Hello, <name>Bob</name>", {"name": styled(name_style)})
    >>> tagged.plain_text
    'Hello, Bob'

Rules:
    - Tags never nest. ``<a><b>x</b></a>`` raises NestedTagError.
    - Every tag in the content needs a builder. Unknown tags raise
      UnresolvedTagError.
    - Custom tag names are lower-case and are not HTML element names.
      Violations raise ConfigurationError as soon as the mapping is supplied.
"""

from collections.abc import Mapping

from tagspan.builders import (
    DEFAULT_BUILDERS,
    LinkCallback,
    SpanBuilder,
    TagContext,
    create_default_builders,
    make_link_builder,
    styled,
)
from tagspan.cache import DictDocumentCache, DocumentCache, hash_content
from tagspan.config import (
    ResolveConfig,
    get_resolve_config,
    reset_resolve_config,
    resolve_config_context,
    set_resolve_config,
)
from tagspan.errors import (
    ConfigurationError,
    NestedTagError,
    ParseError,
    StructuralError,
    TagSpanError,
    UnresolvedTagError,
)
from tagspan.lexer import Lexer
from tagspan.location import SourceLocation
from tagspan.nodes import Document, Element, Node, Text
from tagspan.parser import Parser
from tagspan.registry import BuilderRegistry, create_registry
from tagspan.resolver import SpanResolver, resolve
from tagspan.spans import (
    NO_SPAN,
    CompositeSpan,
    FocusableLink,
    InlineSpan,
    NoSpan,
    SpanResult,
    TextSpan,
)
from tagspan.styles import FontStyle, FontWeight, TextDecoration, TextStyle
from tagspan.text import extract_text, semantics_text
from tagspan.tokens import Token, TokenType
from tagspan.utils.logger import get_logger
from tagspan.validation import RESERVED_TAGS, validate_builders

__version__ = "0.1.0"

logger = get_logger(__name__)


def parse(
    content: str,
    *,
    source_file: str | None = None,
    cache: DocumentCache | None = None,
) -> Document:
    """Parse tagged content into a Document.

    Args:
        content: Tagged content string
        source_file: Optional path or message id for error messages
        cache: Optional content-addressed document cache

    Returns:
        Document whose children are the top-level text and element nodes

    Raises:
        ParseError: If the content is not well-formed
    """
    if cache is not None:
        content_hash = hash_content(content)
        cached = cache.get(content_hash, source_file)
        if cached is not None:
            logger.debug("Document cache hit for %s", content_hash[:12])
            return cached
        logger.debug("Document cache miss for %s", content_hash[:12])

    doc = Parser(content, source_file=source_file).parse()

    if cache is not None:
        cache.put(content_hash, source_file, doc)

    return doc


def resolve_spans(
    content: str,
    builders: Mapping[str, SpanBuilder] | None = None,
    *,
    on_tap_link: LinkCallback | None = None,
    config: ResolveConfig | None = None,
    source_file: str | None = None,
    cache: DocumentCache | None = None,
) -> tuple[InlineSpan, ...]:
    """Validate builders, parse content and resolve it into spans.

    Args:
        content: Tagged content string
        builders: Custom builders by lower-case tag name
        on_tap_link: Link activation callback; enables the ``a`` tag
        config: Ambient configuration passed to builders
        source_file: Optional path or message id for error messages
        cache: Optional content-addressed document cache

    Returns:
        Spans in document order

    Raises:
        ConfigurationError: If the builder mapping is invalid
        StructuralError: If the content is malformed, nests tags, or uses a
            tag without a builder
    """
    registry = create_registry(builders, on_tap_link=on_tap_link)
    doc = parse(content, source_file=source_file, cache=cache)
    return resolve(doc, registry, config=config)


class TaggedText:
    """Tagged content bound to its builders, resolved eagerly.

    Mirrors how a text widget holds its content: the builder mapping is
    validated at construction, the content is parsed and resolved right away,
    and ``update()`` redoes only the work an input change requires.

    Usage:
        >>> tagged = TaggedText(
        ...     '<a href="https://example.com">Docs</a>',
        ...     on_tap_link=open_url,
        ...     focusable_links=True,
        ... )
        >>> tagged.semantics_label
        'Docs'
        >>> tagged.update(content="<b>Bold</b>")
        True

    Thread Safety:
        Not thread-safe; the resolved spans it hands out are immutable.

    """

    __slots__ = (
        "_builders",
        "_config",
        "_content",
        "_document",
        "_on_tap_link",
        "_registry",
        "_source_file",
        "_spans",
    )

    def __init__(
        self,
        content: str,
        builders: Mapping[str, SpanBuilder] | None = None,
        *,
        style: TextStyle | None = None,
        link_style: TextStyle | None = None,
        on_tap_link: LinkCallback | None = None,
        focusable_links: bool = False,
        text_scale_factor: float | None = None,
        source_file: str | None = None,
    ) -> None:
        """Validate builders, then parse and resolve content.

        Args:
            content: Tagged content string
            builders: Custom builders by lower-case tag name
            style: Default style of the surrounding text
            link_style: Style for link text
            on_tap_link: Link activation callback; enables the ``a`` tag
            focusable_links: Render links as focusable composite units
            text_scale_factor: Font pixels per logical pixel (default 1.0)
            source_file: Optional path or message id for error messages

        Raises:
            ConfigurationError: If the builder mapping is invalid
            StructuralError: If the content cannot be resolved
        """
        self._builders: dict[str, SpanBuilder] = dict(builders or {})
        self._on_tap_link = on_tap_link
        self._registry = create_registry(self._builders, on_tap_link=on_tap_link)
        self._config = ResolveConfig(
            style=style,
            link_style=link_style,
            focusable_links=focusable_links,
            text_scale_factor=text_scale_factor if text_scale_factor is not None else 1.0,
        )
        self._content = content
        self._source_file = source_file
        self._document = parse(content, source_file=source_file)
        self._spans = resolve(self._document, self._registry, config=self._config)

    @property
    def content(self) -> str:
        return self._content

    @property
    def builders(self) -> Mapping[str, SpanBuilder]:
        """Custom builders as supplied."""
        return dict(self._builders)

    @property
    def config(self) -> ResolveConfig:
        return self._config

    @property
    def document(self) -> Document:
        return self._document

    @property
    def spans(self) -> tuple[InlineSpan, ...]:
        return self._spans

    @property
    def plain_text(self) -> str:
        """Visible text of all spans."""
        return extract_text(self._spans)

    @property
    def semantics_label(self) -> str:
        """Reading-order text of all spans."""
        return semantics_text(self._spans)

    def update(
        self,
        *,
        content: str | None = None,
        builders: Mapping[str, SpanBuilder] | None = None,
    ) -> bool:
        """Replace content and/or builders.

        Content that differs is re-parsed and re-resolved. A builder mapping
        that compares unequal is validated and the existing document is
        re-resolved. Equal inputs do no work. On error the previous state is
        kept.

        Args:
            content: New content, or None to keep the current one
            builders: New custom builders, or None to keep the current ones

        Returns:
            True if the spans were recomputed

        Raises:
            ConfigurationError: If the new builder mapping is invalid
            StructuralError: If the new inputs cannot be resolved
        """
        new_content = content if content is not None else self._content
        new_builders = dict(builders) if builders is not None else self._builders
        content_changed = new_content != self._content
        builders_changed = new_builders != self._builders
        if not (content_changed or builders_changed):
            logger.debug("TaggedText inputs unchanged; keeping resolved spans")
            return False

        registry = self._registry
        if builders_changed:
            registry = create_registry(new_builders, on_tap_link=self._on_tap_link)
            logger.debug("TaggedText builders changed; re-validated")

        document = self._document
        if content_changed:
            document = parse(new_content, source_file=self._source_file)
            logger.debug("TaggedText content changed; re-parsed")

        spans = resolve(document, registry, config=self._config)

        self._builders = new_builders
        self._registry = registry
        self._content = new_content
        self._document = document
        self._spans = spans
        return True

    def __repr__(self) -> str:
        return f"TaggedText({self._content!r}, spans={len(self._spans)})"


__all__ = [  # noqa: RUF022 - grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "parse",
    "resolve",
    "resolve_spans",
    "TaggedText",
    # Builders
    "BuilderRegistry",
    "DEFAULT_BUILDERS",
    "LinkCallback",
    "SpanBuilder",
    "TagContext",
    "create_default_builders",
    "create_registry",
    "make_link_builder",
    "styled",
    # Validation
    "RESERVED_TAGS",
    "validate_builders",
    # Spans
    "CompositeSpan",
    "FocusableLink",
    "InlineSpan",
    "NO_SPAN",
    "NoSpan",
    "SpanResult",
    "TextSpan",
    # Styles
    "FontStyle",
    "FontWeight",
    "TextDecoration",
    "TextStyle",
    # Text extraction
    "extract_text",
    "semantics_text",
    # Nodes
    "Document",
    "Element",
    "Node",
    "Text",
    # Parser components
    "Lexer",
    "Parser",
    "SpanResolver",
    "Token",
    "TokenType",
    "SourceLocation",
    # Document cache
    "DictDocumentCache",
    "DocumentCache",
    "hash_content",
    # Configuration (ContextVar-based)
    "ResolveConfig",
    "get_resolve_config",
    "set_resolve_config",
    "reset_resolve_config",
    "resolve_config_context",
    # Errors
    "ConfigurationError",
    "NestedTagError",
    "ParseError",
    "StructuralError",
    "TagSpanError",
    "UnresolvedTagError",
]
