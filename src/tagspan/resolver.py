"""Span resolution: Document to ordered spans.

Walks the root's immediate children in document order:

- Text becomes an unstyled TextSpan.
- Element must not contain another element (NestedTagError). Its tag name is
  folded to lower case and looked up in the registry, custom builders first
  (UnresolvedTagError if neither mapping has it). The builder is called with
  the element's text and a TagContext. NO_SPAN drops the region.

Every failure is raised. No partial span tuple is ever returned.

Thread Safety:
SpanResolver holds only an immutable registry. The active ResolveConfig is
set in a ContextVar for the duration of resolve(), so concurrent calls in
different threads are isolated.

"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from tagspan.builders import TagContext
from tagspan.config import ResolveConfig, get_resolve_config, resolve_config_context
from tagspan.errors import NestedTagError, UnresolvedTagError
from tagspan.nodes import Element, Text
from tagspan.spans import CompositeSpan, InlineSpan, NoSpan, TextSpan
from tagspan.utils.logger import get_logger

if TYPE_CHECKING:
    from tagspan.nodes import Document
    from tagspan.registry import BuilderRegistry

logger = get_logger(__name__)


class SpanResolver:
    """Resolves a Document against a BuilderRegistry.

    Usage:
            >>> resolver = SpanResolver(create_registry({"name": styled(name_style)}))
            >>> resolver.resolve(Parser("Hello, <name>Bob</name>").parse())
        (TextSpan(text='Hello, ', ...), TextSpan(text='Bob', ...))

    """

    __slots__ = ("_registry",)

    def __init__(self, registry: BuilderRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> BuilderRegistry:
        return self._registry

    def resolve(
        self,
        document: Document,
        config: ResolveConfig | None = None,
    ) -> tuple[InlineSpan, ...]:
        """Resolve every top-level node of document into spans.

        Args:
            document: Parsed content
            config: Ambient configuration for builders; defaults to the
                config active in the current context

        Returns:
            Spans in document order

        Raises:
            NestedTagError: If an element contains another element
            UnresolvedTagError: If a tag has no builder
            TypeError: If a builder returns something other than a span or
                NO_SPAN
        """
        if config is None:
            config = get_resolve_config()

        spans: list[InlineSpan] = []
        with resolve_config_context(config):
            for node in document.children:
                if isinstance(node, Text):
                    spans.append(TextSpan(text=node.content))
                    continue

                span = self._resolve_element(node, config)
                if span is not None:
                    spans.append(span)

        logger.debug(
            "Resolved %d spans from %d nodes",
            len(spans),
            len(document.children),
        )
        return tuple(spans)

    def _resolve_element(self, element: Element, config: ResolveConfig) -> InlineSpan | None:
        """Resolve a single top-level element."""
        nested = element.elements
        if nested:
            inner = nested[0]
            raise NestedTagError(
                element.tag,
                inner.tag,
                lineno=inner.location.lineno,
                col_offset=inner.location.col_offset,
                source_file=inner.location.source_file,
            )

        name = element.name
        builder = self._registry.get(name)
        if builder is None:
            raise UnresolvedTagError(
                name,
                self._registry.names,
                lineno=element.location.lineno,
                col_offset=element.location.col_offset,
                source_file=element.location.source_file,
            )

        text = element.text
        context = TagContext(
            name=name,
            text=text,
            attributes=MappingProxyType(dict(element.attributes)),
            location=element.location,
            config=config,
        )
        result = builder(text, context)

        if isinstance(result, NoSpan):
            return None
        if isinstance(result, (TextSpan, CompositeSpan)):
            return result

        msg = (
            f"Builder for <{name}> returned {type(result).__name__}; "
            "expected TextSpan, CompositeSpan or NO_SPAN"
        )
        raise TypeError(msg)


def resolve(
    document: Document,
    registry: BuilderRegistry,
    *,
    config: ResolveConfig | None = None,
) -> tuple[InlineSpan, ...]:
    """Resolve document against registry.

    Convenience wrapper around SpanResolver.
    """
    return SpanResolver(registry).resolve(document, config)


__all__ = ["SpanResolver", "resolve"]
