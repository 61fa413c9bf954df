"""Exception classes for tagspan.

Two families of failure exist, and both are always fatal:

- ConfigurationError: the caller's builder mapping is invalid. Raised when the
  mapping is supplied, before any content is parsed.
- StructuralError: the content cannot be turned into spans. Raised while
  parsing or resolving a particular content string.

Nothing here is retried or recovered internally. Callers that prefer to render
something degraded catch the exception and decide for themselves.
"""

from __future__ import annotations


class TagSpanError(Exception):
    """Base exception for all tagspan errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigurationError(TagSpanError):
    """Invalid custom builder mapping.

    Raised when a custom tag name is not lower-case, collides with a
    reserved HTML element name, or is bound to something that is not callable.
    """

    def __init__(self, message: str, tags: tuple[str, ...] = ()) -> None:
        """Initialize configuration error.

        Args:
            message: Description of the problem
            tags: The offending tag names, in mapping order
        """
        self.message = message
        self.tags = tags
        super().__init__(message)


class StructuralError(TagSpanError):
    """Content that cannot be resolved into spans.

    Carries an optional source location so authoring mistakes in translated
    strings can be traced back to the offending position.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize structural error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path or message id of the content (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        # Build formatted message
        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class ParseError(StructuralError):
    """Malformed markup.

    Raised by the lexer and parser for unbalanced tags, bad attribute syntax,
    unknown entities and similar problems.
    """

    pass


class NestedTagError(StructuralError):
    """An element was found inside another element."""

    def __init__(
        self,
        tag: str,
        nested_tag: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        self.tag = tag
        self.nested_tag = nested_tag
        super().__init__(
            f"Tags must not be nested: <{nested_tag}> found inside <{tag}>",
            lineno,
            col_offset,
            source_file,
        )


class UnresolvedTagError(StructuralError):
    """A tag in the content has neither a custom nor a built-in builder."""

    def __init__(
        self,
        tag: str,
        available: frozenset[str] = frozenset(),
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        self.tag = tag
        self.available = available
        known = ", ".join(sorted(available)) or "none"
        super().__init__(
            f"No span builder for tag <{tag}> (available: {known})",
            lineno,
            col_offset,
            source_file,
        )
