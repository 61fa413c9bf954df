"""Builder registry for tag lookup.

The registry merges two mappings with a fixed precedence: custom builders
shadow built-in builders of the same name. Lookup is by case-folded tag name.

Thread Safety:
BuilderRegistry is immutable after creation. Safe to share.

Example:
    >>> registry = create_registry({"name": styled(name_style)})
    >>> registry.get("name") is not None
    True
    >>> registry.is_custom("b")
    False

"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from tagspan.builders import create_default_builders
from tagspan.validation import validate_builders

if TYPE_CHECKING:
    from tagspan.builders import LinkCallback, SpanBuilder


class BuilderRegistry:
    """Immutable mapping of tag name to builder with custom-over-default lookup.

    Thread Safety:
        Immutable after creation. Safe to share across threads.

    """

    __slots__ = ("_custom", "_defaults", "_names")

    def __init__(
        self,
        custom: Mapping[str, SpanBuilder],
        defaults: Mapping[str, SpanBuilder],
    ) -> None:
        """Initialize registry from already-validated mappings.

        Use create_registry() to validate custom builders first.
        """
        self._custom: Mapping[str, SpanBuilder] = MappingProxyType(dict(custom))
        self._defaults: Mapping[str, SpanBuilder] = MappingProxyType(dict(defaults))
        self._names = frozenset(self._custom) | frozenset(self._defaults)

    def get(self, name: str) -> SpanBuilder | None:
        """Get builder for a tag name.

        Args:
            name: Tag name; folded to lower case before lookup

        Returns:
            Custom builder if registered, else built-in builder, else None
        """
        name = name.lower()
        builder = self._custom.get(name)
        if builder is None:
            builder = self._defaults.get(name)
        return builder

    def has(self, name: str) -> bool:
        """Check if a tag name resolves."""
        return name.lower() in self._names

    def is_custom(self, name: str) -> bool:
        """Check if a tag name resolves to a custom builder."""
        return name.lower() in self._custom

    @property
    def names(self) -> frozenset[str]:
        """All resolvable tag names."""
        return self._names

    @property
    def custom(self) -> Mapping[str, SpanBuilder]:
        """Read-only view of the custom builders."""
        return self._custom

    @property
    def defaults(self) -> Mapping[str, SpanBuilder]:
        """Read-only view of the built-in builders."""
        return self._defaults

    def __contains__(self, name: object) -> bool:
        """Support 'name in registry' syntax."""
        return isinstance(name, str) and self.has(name)

    def __len__(self) -> int:
        """Number of resolvable tag names."""
        return len(self._names)

    def __repr__(self) -> str:
        return (
            f"BuilderRegistry(custom={sorted(self._custom)}, "
            f"defaults={sorted(self._defaults)})"
        )


def create_registry(
    builders: Mapping[str, SpanBuilder] | None = None,
    *,
    on_tap_link: LinkCallback | None = None,
) -> BuilderRegistry:
    """Validate custom builders and merge them over the built-ins.

    Args:
        builders: Custom builders by lower-case tag name
        on_tap_link: Link activation callback; installs the ``a`` builder

    Returns:
        Immutable BuilderRegistry

    Raises:
        ConfigurationError: If the custom mapping is invalid
    """
    custom = builders or {}
    validate_builders(custom)
    return BuilderRegistry(custom, create_default_builders(on_tap_link))


__all__ = ["BuilderRegistry", "create_registry"]
