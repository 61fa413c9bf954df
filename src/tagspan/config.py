"""ContextVar-based resolve configuration for tagspan.

Holds the ambient values a renderer would otherwise pass down implicitly:
the default text style, the link style, the text scale factor and the link
strategy. The resolver does not interpret them; it exposes the active config
to builders through ``TagContext.config`` and ``get_resolve_config()``.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so concurrent resolutions never observe each other's configuration.

Usage:
    from tagspan.config import ResolveConfig, resolve_config_context

    with resolve_config_context(ResolveConfig(focusable_links=True)):
        spans = resolver.resolve(document)

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator

from tagspan.styles import TextStyle


@dataclass(frozen=True, slots=True)
class ResolveConfig:
    """Immutable resolve configuration.

    Attributes:
        style: Default style of the surrounding text
        link_style: Style for link text; None selects the theme primary color
        focusable_links: Render links as focusable composite units instead of
            text runs with a tap hook
        text_scale_factor: Font pixels per logical pixel

    """

    style: TextStyle | None = None
    link_style: TextStyle | None = None
    focusable_links: bool = False
    text_scale_factor: float = 1.0

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ResolveConfig":
        """Create ResolveConfig from dictionary.

        Only includes keys that are valid ResolveConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                ResolveConfig attribute names.

        Returns:
            New ResolveConfig instance with values from dict.

        Example:
            >>> config = ResolveConfig.from_dict({
            ...     "focusable_links": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.focusable_links
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ResolveConfig = ResolveConfig()

_resolve_config: ContextVar[ResolveConfig] = ContextVar(
    "resolve_config",
    default=_DEFAULT_CONFIG,
)


def get_resolve_config() -> ResolveConfig:
    """Get current resolve configuration (thread-local)."""
    return _resolve_config.get()


def set_resolve_config(config: ResolveConfig) -> None:
    """Set resolve configuration for current context.

    Args:
        config: ResolveConfig instance to use for this context.

    """
    _resolve_config.set(config)


def reset_resolve_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.

    """
    _resolve_config.set(_DEFAULT_CONFIG)


@contextmanager
def resolve_config_context(config: ResolveConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Args:
        config: ResolveConfig to use within the context.

    Yields:
        None

    """
    previous = _resolve_config.get()
    _resolve_config.set(config)
    try:
        yield
    finally:
        _resolve_config.set(previous)


__all__ = [
    "ResolveConfig",
    "get_resolve_config",
    "reset_resolve_config",
    "resolve_config_context",
    "set_resolve_config",
]
