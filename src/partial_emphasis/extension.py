"""Extension system for the inline parser.

An extension bundles everything it contributes to a host parser:

1. Node types: names (and style tags) added to the host's type registry
2. Inline hooks: called at every position of a region, in order; the first
   hook returning a position >= 0 consumes the text up to that position
3. Delimiter resolvers: called once per region after scanning, free to
   rewrite the region's parts

Usage:
    >>> from partial_emphasis import InlineParser
    >>> parser = InlineParser(extensions=["partial_emphasis"])
    >>> cx = parser.parse("*open emphasis")

Thread Safety:
Extensions are frozen and hold no state. Multiple threads can use the same
extension instances concurrently.

"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from partial_emphasis.errors import ExtensionError
from partial_emphasis.nodes import NodeType

if TYPE_CHECKING:
    from partial_emphasis.context import InlineContext

InlineParse: TypeAlias = "Callable[[InlineContext, str, int], int]"
DelimiterResolver: TypeAlias = "Callable[[InlineContext], None]"

__all__ = [
    "DelimiterResolver",
    "EXTENSIONS",
    "InlineHook",
    "InlineParse",
    "InlineExtension",
    "get_extension",
    "register_extension",
]


@dataclass(frozen=True, slots=True)
class InlineHook:
    """A named inline parse function.

    Attributes:
        name: Hook identifier, referenced by other hooks' ``before``.
        parse: ``parse(cx, next_char, start)`` returning -1 when nothing was
            recognized at ``start``, or the offset just past the consumed text.
        before: Name of a hook this one must run ahead of.

    """

    name: str
    parse: InlineParse
    before: str | None = None


@dataclass(frozen=True, slots=True)
class InlineExtension:
    """Everything an extension contributes to an inline parser."""

    name: str
    node_types: tuple[NodeType, ...] = ()
    inline_hooks: tuple[InlineHook, ...] = ()
    delimiter_resolvers: tuple[DelimiterResolver, ...] = ()


# Registry of extensions by name
EXTENSIONS: dict[str, InlineExtension] = {}


def register_extension(extension: InlineExtension) -> InlineExtension:
    """Register an extension under its name.

    Raises:
        ExtensionError: If another extension already uses the name.

    """
    existing = EXTENSIONS.get(extension.name)
    if existing is not None and existing is not extension:
        raise ExtensionError(extension.name, "already registered")
    EXTENSIONS[extension.name] = extension
    return extension


def get_extension(name: str) -> InlineExtension:
    """Get a registered extension by name.

    Raises:
        ExtensionError: If the name is not recognized.

    """
    try:
        return EXTENSIONS[name]
    except KeyError:
        available = ", ".join(sorted(EXTENSIONS))
        raise ExtensionError(name, f"unknown extension. Available: {available}") from None


# Import built-in extensions to register them
from partial_emphasis.emphasis import PartialEmphasis  # noqa: E402

__all__ += ["PartialEmphasis"]
