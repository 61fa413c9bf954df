"""Validation of custom builder mappings.

Custom tag names are an authoring surface for translated strings, so they are
held to two rules that are checked as soon as a mapping is supplied:

1. Names are written in lower case. Content matches tags case-insensitively,
   but configuration keys are never folded.
2. Names are not standard HTML element names. This library is not an HTML
   renderer, and reusing HTML names would suggest otherwise.

Both checks run whether or not the tag appears in any content.

Example:
    >>> validate_builders({"name": styled(name_style)})  # ok
    >>> validate_builders({"Name": styled(name_style)})
    Traceback (most recent call last):
    ...
    tagspan.errors.ConfigurationError: Custom tag names must be lower-case: 'Name'

"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from tagspan.errors import ConfigurationError

if TYPE_CHECKING:
    from tagspan.builders import SpanBuilder

# Standard and deprecated HTML element names that custom builders may not use.
# The built-in names (a, b, br, em, i, span, strong, u) are deliberately absent
# so callers can override them.
RESERVED_TAGS = frozenset(
    {
        "abbr",
        "acronym",
        "address",
        "applet",
        "area",
        "article",
        "aside",
        "audio",
        "base",
        "basefont",
        "bdi",
        "bdo",
        "bgsound",
        "big",
        "blink",
        "blockquote",
        "body",
        "button",
        "canvas",
        "caption",
        "center",
        "cite",
        "code",
        "col",
        "colgroup",
        "command",
        "content",
        "data",
        "datalist",
        "dd",
        "del",
        "details",
        "dfn",
        "dialog",
        "dir",
        "div",
        "dl",
        "dt",
        "element",
        "embed",
        "fieldset",
        "figcaption",
        "figure",
        "font",
        "footer",
        "form",
        "frame",
        "frameset",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "head",
        "header",
        "hgroup",
        "hr",
        "html",
        "iframe",
        "image",
        "img",
        "input",
        "ins",
        "isindex",
        "kbd",
        "keygen",
        "label",
        "legend",
        "li",
        "link",
        "listing",
        "main",
        "map",
        "mark",
        "marquee",
        "menu",
        "menuitem",
        "meta",
        "meter",
        "multicol",
        "nav",
        "nextid",
        "nobr",
        "noembed",
        "noframes",
        "noscript",
        "object",
        "ol",
        "optgroup",
        "option",
        "output",
        "p",
        "param",
        "picture",
        "plaintext",
        "pre",
        "progress",
        "q",
        "rb",
        "rp",
        "rt",
        "rtc",
        "ruby",
        "s",
        "samp",
        "script",
        "section",
        "select",
        "shadow",
        "slot",
        "small",
        "source",
        "spacer",
        "strike",
        "style",
        "sub",
        "summary",
        "sup",
        "table",
        "tbody",
        "td",
        "template",
        "textarea",
        "tfoot",
        "th",
        "thead",
        "time",
        "title",
        "tr",
        "track",
        "tt",
        "ul",
        "var",
        "video",
        "wbr",
        "xmp",
    }
)


def validate_builders(builders: Mapping[str, SpanBuilder]) -> None:
    """Check a custom builder mapping.

    Every problem in the mapping is reported at once.

    Args:
        builders: Mapping of custom tag name to builder

    Raises:
        ConfigurationError: If any key is not a lower-case string, is a
            reserved HTML element name, or maps to a non-callable
    """
    not_strings: list[str] = []
    not_lower: list[str] = []
    reserved: list[str] = []
    not_callable: list[str] = []

    for key, builder in builders.items():
        if not isinstance(key, str):
            not_strings.append(repr(key))
            continue
        if key != key.lower():
            not_lower.append(key)
        elif key in RESERVED_TAGS:
            reserved.append(key)
        if not callable(builder):
            not_callable.append(key)

    problems: list[str] = []
    if not_strings:
        problems.append(f"Custom tag names must be strings: {', '.join(not_strings)}")
    if not_lower:
        problems.append(
            "Custom tag names must be lower-case: " + ", ".join(repr(k) for k in not_lower)
        )
    if reserved:
        problems.append(
            "HTML element names are reserved and cannot be custom tags: "
            + ", ".join(repr(k) for k in reserved)
        )
    if not_callable:
        problems.append(
            "Builders must be callable: " + ", ".join(repr(k) for k in not_callable)
        )

    if problems:
        raise ConfigurationError(
            "; ".join(problems),
            tags=tuple(dict.fromkeys(not_strings + not_lower + reserved + not_callable)),
        )


def is_reserved(name: str) -> bool:
    """Return True if name is a reserved HTML element name."""
    return name.lower() in RESERVED_TAGS


__all__ = ["RESERVED_TAGS", "is_reserved", "validate_builders"]
