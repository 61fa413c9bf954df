"""Typed document nodes for tagspan.

All nodes are frozen dataclasses with slots, so a parsed Document can be
cached and shared between threads.

Node Hierarchy:
Node (base)
├── Document   implicit root container for the whole content string
├── Element    a tag region with attributes and children
└── Text       literal character data

Comments, processing instructions and declarations never become nodes; the
parser discards them.

"""

from __future__ import annotations

from dataclasses import dataclass

from tagspan.location import SourceLocation


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all nodes.

    All nodes track their source location for error messages.

    """

    location: SourceLocation


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Literal text with entities already decoded."""

    content: str

    @property
    def text(self) -> str:
        return self.content


@dataclass(frozen=True, slots=True)
class Element(Node):
    """A tag region.

    ``tag`` is the name exactly as written in the content; lookups fold it
    to lower case. ``attributes`` preserves source order.

    """

    tag: str
    attributes: tuple[tuple[str, str], ...]
    children: tuple[Element | Text, ...] = ()

    @property
    def name(self) -> str:
        """Case-folded tag name used for builder lookup."""
        return self.tag.lower()

    @property
    def text(self) -> str:
        """Concatenated text of all descendants."""
        return "".join(child.text for child in self.children)

    @property
    def elements(self) -> tuple[Element, ...]:
        """Direct element children."""
        return tuple(child for child in self.children if isinstance(child, Element))

    def get_attribute(self, name: str) -> str | None:
        """Return the value of attribute ``name``, or None when absent."""
        for key, value in self.attributes:
            if key == name:
                return value
        return None


@dataclass(frozen=True, slots=True)
class Document(Node):
    """Root container of a parsed content string."""

    children: tuple[Element | Text, ...]

    @property
    def text(self) -> str:
        return "".join(child.text for child in self.children)


__all__ = ["Document", "Element", "Node", "Text"]
