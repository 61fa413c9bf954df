"""Span builders: the functions that turn a tag region into a span.

A builder is any callable ``(text, context) -> TextSpan | CompositeSpan |
NoSpan``. ``text`` is the element's literal text; ``context`` carries the tag
name, its attributes, its location and the active ResolveConfig.

Built-in builders (always available unless shadowed by a custom builder):
- b, strong: bold text
- i, em: italic text
- u: underlined text
- br: a line break; any element text is ignored
- span: unstyled text, used to attach an ``aria-label``
- a: link text, only installed when a link callback is supplied

Every built-in reads ``aria-label`` into ``semantics_label``.

Example:
    >>> builders = {"name": styled(TextStyle(color="teal"))}
    >>> resolve_spans("Hello, <name>Bob</name>", builders)
    (TextSpan(text='Hello, ', ...), TextSpan(text='Bob', style=TextStyle(..., color='teal', ...)))

"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from functools import partial
from types import MappingProxyType
from typing import TypeAlias

from tagspan.config import ResolveConfig
from tagspan.location import SourceLocation
from tagspan.spans import CompositeSpan, FocusableLink, SpanResult, TextSpan
from tagspan.styles import BOLD, ITALIC, LINK, PRIMARY_COLOR, UNDERLINE, TextStyle

ARIA_LABEL = "aria-label"
HREF = "href"

LinkCallback: TypeAlias = Callable[[str], None]


@dataclass(frozen=True, slots=True)
class TagContext:
    """Everything a builder may read about the region it is resolving.

    Attributes:
        name: Case-folded tag name
        text: Literal text of the element
        attributes: Attribute values by name, as written
        location: Where the element starts in the content
        config: The active ResolveConfig (ambient style, link style, scale)

    """

    name: str
    text: str
    attributes: Mapping[str, str]
    location: SourceLocation
    config: ResolveConfig

    def get(self, attribute: str, default: str | None = None) -> str | None:
        """Return an attribute value, or default when absent."""
        return self.attributes.get(attribute, default)

    @property
    def aria_label(self) -> str | None:
        return self.attributes.get(ARIA_LABEL)


SpanBuilder: TypeAlias = Callable[[str, TagContext], SpanResult]


def styled(style: TextStyle | None) -> SpanBuilder:
    """Create a builder that renders text with a fixed style.

    The element's ``aria-label`` becomes the span's semantics label.

    Args:
        style: Style for the resulting TextSpan

    Returns:
        A SpanBuilder
    """

    def build(text: str, context: TagContext) -> TextSpan:
        return TextSpan(text=text, style=style, semantics_label=context.aria_label)

    return build


# =============================================================================
# Built-in builders
# =============================================================================


def build_bold(text: str, context: TagContext) -> TextSpan:
    return TextSpan(text=text, style=BOLD, semantics_label=context.aria_label)


def build_italic(text: str, context: TagContext) -> TextSpan:
    return TextSpan(text=text, style=ITALIC, semantics_label=context.aria_label)


def build_underline(text: str, context: TagContext) -> TextSpan:
    return TextSpan(text=text, style=UNDERLINE, semantics_label=context.aria_label)


def build_line_break(text: str, context: TagContext) -> TextSpan:
    """Emit a newline regardless of the element's text."""
    return TextSpan(text="\n", semantics_label=context.aria_label)


def build_span(text: str, context: TagContext) -> TextSpan:
    return TextSpan(text=text, semantics_label=context.aria_label)


def make_link_builder(on_tap_link: LinkCallback) -> SpanBuilder:
    """Create the builder for ``<a href="...">`` regions.

    The link strategy is read from ``context.config.focusable_links`` at
    resolution time:

    - False: a TextSpan whose ``on_tap`` calls ``on_tap_link(href)``
    - True: a CompositeSpan wrapping a FocusableLink that activates on tap
      or on the "enter" key

    Both read the same text in reading order. When ``href`` is absent the
    link is still styled but has no activation behavior.

    Args:
        on_tap_link: Called with the href when a link is activated

    Returns:
        A SpanBuilder for the ``a`` tag
    """

    def build_link(text: str, context: TagContext) -> TextSpan | CompositeSpan:
        href = context.get(HREF)
        on_activate = partial(on_tap_link, href) if href is not None else None
        config = context.config

        if config.focusable_links:
            if config.link_style is not None:
                style = config.link_style
            elif config.style is not None:
                style = config.style.copy_with(color=PRIMARY_COLOR)
            else:
                style = LINK
            return CompositeSpan(
                child=FocusableLink(text=text, style=style, on_activate=on_activate),
                semantics_label=context.aria_label,
                alignment="middle",
            )

        return TextSpan(
            text=text,
            style=config.link_style or LINK,
            semantics_label=context.aria_label,
            on_tap=on_activate,
        )

    return build_link


DEFAULT_BUILDERS: Mapping[str, SpanBuilder] = MappingProxyType(
    {
        "b": build_bold,
        "strong": build_bold,
        "u": build_underline,
        "i": build_italic,
        "em": build_italic,
        "br": build_line_break,
        "span": build_span,
    }
)


def create_default_builders(on_tap_link: LinkCallback | None = None) -> dict[str, SpanBuilder]:
    """Return the built-in builders, plus the link builder when requested.

    Args:
        on_tap_link: Link activation callback. The ``a`` tag only resolves
            when this is supplied.

    Returns:
        A new dict of built-in builders by tag name
    """
    builders = dict(DEFAULT_BUILDERS)
    if on_tap_link is not None:
        builders["a"] = make_link_builder(on_tap_link)
    return builders


__all__ = [
    "DEFAULT_BUILDERS",
    "LinkCallback",
    "SpanBuilder",
    "TagContext",
    "create_default_builders",
    "make_link_builder",
    "styled",
]
