"""Text style values attached to spans.

Styles are plain immutable data. The library never interprets them; a
renderer maps them onto whatever its toolkit uses. Colors are opaque strings,
and ``PRIMARY_COLOR`` names the theme's primary color role so a renderer can
resolve it against its own theme.

Example:
    >>> bold = TextStyle(font_weight=FontWeight.BOLD)
    >>> bold.copy_with(color="red")
    TextStyle(font_weight=<FontWeight.BOLD: 'bold'>, font_style=None, ...)

"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any

PRIMARY_COLOR = "primary"


class FontWeight(Enum):
    NORMAL = "normal"
    BOLD = "bold"


class FontStyle(Enum):
    NORMAL = "normal"
    ITALIC = "italic"


class TextDecoration(Enum):
    NONE = "none"
    UNDERLINE = "underline"
    OVERLINE = "overline"
    LINE_THROUGH = "line-through"


@dataclass(frozen=True, slots=True)
class TextStyle:
    """Immutable text style.

    Every attribute is optional; None means "inherit from the enclosing
    style" when the renderer composes spans.

    Attributes:
        font_weight: Font weight
        font_style: Normal or italic
        decoration: Underline, overline, line-through
        color: Opaque color value or theme role name
        font_size: Font size in logical pixels

    """

    font_weight: FontWeight | None = None
    font_style: FontStyle | None = None
    decoration: TextDecoration | None = None
    color: str | None = None
    font_size: float | None = None

    def copy_with(self, **changes: Any) -> TextStyle:
        """Return a copy with the given attributes replaced."""
        return replace(self, **changes)

    def merge(self, other: TextStyle | None) -> TextStyle:
        """Return this style overlaid with the non-None attributes of other."""
        if other is None:
            return self
        changes = {
            f.name: getattr(other, f.name)
            for f in fields(other)
            if getattr(other, f.name) is not None
        }
        return replace(self, **changes)


BOLD = TextStyle(font_weight=FontWeight.BOLD)
ITALIC = TextStyle(font_style=FontStyle.ITALIC)
UNDERLINE = TextStyle(decoration=TextDecoration.UNDERLINE)
LINK = TextStyle(color=PRIMARY_COLOR)


__all__ = [
    "BOLD",
    "FontStyle",
    "FontWeight",
    "ITALIC",
    "LINK",
    "PRIMARY_COLOR",
    "TextDecoration",
    "TextStyle",
    "UNDERLINE",
]
