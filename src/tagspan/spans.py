"""Span descriptors: the output of resolution.

A builder returns one of three variants:

- TextSpan: literal text with an optional style, accessibility label and
  low-level activation hook
- CompositeSpan: an embedded non-text unit (a focusable link, an icon, any
  object the renderer knows how to place inline)
- NoSpan: explicit suppression; the region contributes nothing

Only TextSpan and CompositeSpan (both conforming to InlineSpan) appear in
resolved output.

Thread Safety:
All spans are frozen. Callbacks they carry are invoked by the renderer, never
during resolution.

"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Literal, Protocol, TypeAlias, runtime_checkable

from tagspan.styles import TextStyle

# Keys the focusable link treats as activation
ACTIVATION_KEYS = frozenset({"enter"})


@runtime_checkable
class InlineSpan(Protocol):
    """Protocol for spans that take part in layout.

    TextSpan and CompositeSpan conform to this protocol. Renderers and the
    text helpers only rely on these two views.

    """

    @property
    def reading_text(self) -> str:
        """Text read by assistive technology, in reading order."""
        ...

    @property
    def plain_text(self) -> str:
        """Visible text of the span."""
        ...


@dataclass(frozen=True, slots=True)
class TextSpan:
    """A run of text.

    Attributes:
        text: Literal text
        style: Style for the run, or None to inherit
        semantics_label: Replacement text for assistive technology
        on_tap: Called by the renderer when the run is activated

    """

    text: str
    style: TextStyle | None = None
    semantics_label: str | None = None
    on_tap: Callable[[], None] | None = None

    @property
    def reading_text(self) -> str:
        if self.semantics_label is not None:
            return self.semantics_label
        return self.text

    @property
    def plain_text(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class CompositeSpan:
    """An embedded non-text unit placed inline.

    ``child`` is opaque to the library. When it exposes ``reading_text`` or
    ``text`` those are used for reading order unless ``semantics_label`` is
    given.

    Attributes:
        child: The embedded unit
        semantics_label: Text read by assistive technology
        alignment: Vertical placement relative to the surrounding text

    """

    child: Any
    semantics_label: str | None = None
    alignment: Literal["baseline", "top", "middle", "bottom"] = "middle"

    @property
    def reading_text(self) -> str:
        if self.semantics_label is not None:
            return self.semantics_label
        for attr in ("reading_text", "text"):
            value = getattr(self.child, attr, None)
            if isinstance(value, str):
                return value
        return ""

    @property
    def plain_text(self) -> str:
        value = getattr(self.child, "text", None)
        return value if isinstance(value, str) else ""


@dataclass(frozen=True, slots=True)
class NoSpan:
    """Builder result that suppresses the tag region entirely."""

    def __repr__(self) -> str:
        return "NO_SPAN"


NO_SPAN = NoSpan()

SpanResult: TypeAlias = TextSpan | CompositeSpan | NoSpan


@dataclass(frozen=True, slots=True)
class FocusableLink:
    """A link rendered as a focusable unit with keyboard activation.

    The renderer forwards taps to ``activate`` and key presses to
    ``handle_key`` while the unit has focus.

    Attributes:
        text: Link text
        style: Link style
        on_activate: Called on tap or activation key; None when the link
            has no destination

    """

    text: str
    style: TextStyle | None = None
    on_activate: Callable[[], None] | None = None

    @property
    def reading_text(self) -> str:
        return self.text

    @property
    def is_link(self) -> bool:
        return True

    def activate(self) -> None:
        """Fire the activation callback, if any."""
        if self.on_activate is not None:
            self.on_activate()

    def handle_key(self, key: str) -> bool:
        """Handle a key press while focused.

        Args:
            key: Logical key name, e.g. "enter"

        Returns:
            True if the key was handled
        """
        if key.lower() not in ACTIVATION_KEYS:
            return False
        self.activate()
        return True


__all__ = [
    "CompositeSpan",
    "FocusableLink",
    "InlineSpan",
    "NO_SPAN",
    "NoSpan",
    "SpanResult",
    "TextSpan",
]
