"""ContextVar-based resolution configuration for Partial Emphasis.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is read once at the start of every resolve call, so a region is
always resolved under a single, consistent configuration.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from partial_emphasis.config import ResolveConfig, resolve_config_context

    with resolve_config_context(ResolveConfig(extend_unclosed=False)):
        parts = parse_inline("*open but never closed")

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class ResolveConfig:
    """Immutable resolution configuration.

    Attributes:
        max_nesting_depth: Deepest span nesting the tree builder recurses into.
            Spans at the limit keep their marks but lose their nested children.
        strict_depth: Raise NestingDepthError at the limit instead of flattening.
        unicode_punctuation: Treat every Unicode P* and S* character as
            punctuation for flanking. When False, only ASCII punctuation,
            U+00A1 and U+2010..U+2027 count.
        extend_unclosed: Extend openers that never close to the end of the
            block. When False, leftover runs are dropped as plain text.

    """

    max_nesting_depth: int = 64
    strict_depth: bool = False
    unicode_punctuation: bool = True
    extend_unclosed: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ResolveConfig":
        """Create ResolveConfig from dictionary.

        Only includes keys that are valid ResolveConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ResolveConfig.from_dict({
            ...     "max_nesting_depth": 8,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.max_nesting_depth
            8

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
    """Get current resolution configuration (thread-local)."""
    return _resolve_config.get()


def set_resolve_config(config: ResolveConfig) -> None:
    """Set resolution configuration for current context.

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

    Properly restores the previous config even if an exception is raised.

    Example:
        >>> with resolve_config_context(ResolveConfig(max_nesting_depth=4)):
        ...     get_resolve_config().max_nesting_depth
        4

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
    "set_resolve_config",
    "reset_resolve_config",
    "resolve_config_context",
]
