"""Content-addressed document cache for tagspan.

Provides (content_hash, source_file) -> Document caching so the same
translated string is parsed once no matter how often it is resolved.
Documents are immutable, so a cached value can be resolved against any
builder mapping.

Thread Safety:
    DictDocumentCache is not thread-safe. For parallel use, wrap get/put in a
    lock or supply your own DocumentCache implementation.

Example:
    >>> from tagspan import parse, DictDocumentCache
    >>> cache = DictDocumentCache()
    >>> doc1 = parse("Hello, <name>Bob</name>", cache=cache)
    >>> doc2 = parse("Hello, <name>Bob</name>", cache=cache)  # Cache hit
    >>> doc1 is doc2
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from tagspan.utils.hashing import hash_str

if TYPE_CHECKING:
    from tagspan.nodes import Document


class DocumentCache(Protocol):
    """Protocol for content-addressed document caches."""

    def get(self, content_hash: str, source_file: str | None) -> Document | None:
        """Return cached Document if present, else None."""
        ...

    def put(self, content_hash: str, source_file: str | None, doc: Document) -> None:
        """Store Document in cache."""
        ...


class DictDocumentCache:
    """In-memory document cache using a dict.

    Not thread-safe.
    """

    __slots__ = ("_data",)

    def __init__(self) -> None:
        self._data: dict[tuple[str, str | None], Document] = {}

    def get(self, content_hash: str, source_file: str | None) -> Document | None:
        """Return cached Document if present, else None."""
        return self._data.get((content_hash, source_file))

    def put(self, content_hash: str, source_file: str | None, doc: Document) -> None:
        """Store Document in cache."""
        self._data[(content_hash, source_file)] = doc

    def clear(self) -> None:
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)


def hash_content(content: str) -> str:
    """Compute SHA256 hash of content for cache key."""
    return hash_str(content)


__all__ = [
    "DictDocumentCache",
    "DocumentCache",
    "hash_content",
]
