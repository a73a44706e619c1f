"""Minimal inline host parser.

Drives inline hooks across one region of text and then runs the delimiter
resolvers, the way an editor's incremental Markdown parser does for every
paragraph. Only two built-in hooks exist so that emphasis has foreign nodes
to interleave with:

- Escape: a backslash before ASCII punctuation (``\\*`` is never a delimiter)
- InlineCode: a backtick code span (markers inside code are never scanned)

Block structure is the caller's business: pass each block's inline text and
its absolute offset.

Example:
    >>> from partial_emphasis.inline import parse_inline
    >>> [part.name for part in parse_inline("*open `code`")]
    ['Emphasis']

"""

from __future__ import annotations

from collections.abc import Iterable

from partial_emphasis.charsets import ASCII_PUNCTUATION
from partial_emphasis.context import InlineContext
from partial_emphasis.extension import (
    DelimiterResolver,
    InlineExtension,
    InlineHook,
    get_extension,
)
from partial_emphasis.nodes import HostNode, NodeType, NodeTypeRegistry
from partial_emphasis.tokens import InlinePart
from partial_emphasis.utils.logger import get_logger

logger = get_logger(__name__)

ESCAPE = "Escape"
INLINE_CODE = "InlineCode"


def parse_escape(cx: InlineContext, next_char: str, start: int) -> int:
    if next_char != "\\" or cx.char(start + 1) not in ASCII_PUNCTUATION:
        return -1
    return cx.append(HostNode(ESCAPE, start, start + 2))


def parse_inline_code(cx: InlineContext, next_char: str, start: int) -> int:
    """Code span: a backtick run closed by a run of the same length.

    An unclosed run is consumed as plain text so its tail can't open a
    shorter span.
    """
    if next_char != "`":
        return -1
    pos = start + 1
    while cx.char(pos) == "`":
        pos += 1
    size = pos - start

    scan = pos
    while scan < cx.end:
        if cx.char(scan) != "`":
            scan += 1
            continue
        run_start = scan
        while cx.char(scan) == "`":
            scan += 1
        if scan - run_start == size:
            return cx.append(HostNode(INLINE_CODE, start, scan))
    return pos


BUILTIN_NODE_TYPES: tuple[NodeType, ...] = (
    NodeType(ESCAPE, style="escape"),
    NodeType(INLINE_CODE, style="monospace"),
)

BUILTIN_HOOKS: tuple[InlineHook, ...] = (
    InlineHook(ESCAPE, parse_escape),
    InlineHook(INLINE_CODE, parse_inline_code),
)


def _insert_hook(hooks: list[InlineHook], hook: InlineHook) -> None:
    if hook.before is not None:
        for i, existing in enumerate(hooks):
            if existing.name == hook.before:
                hooks.insert(i, hook)
                return
        logger.debug("Hook %r: no hook named %r, appending", hook.name, hook.before)
    hooks.append(hook)


class InlineParser:
    """Inline parser assembled from the built-in hooks and extensions.

    Assembly happens once; ``parse`` may then be called for any number of
    regions.

    Args:
        extensions: Extension names or instances, applied in order.

    """

    __slots__ = ("hooks", "resolvers", "node_types")

    def __init__(
        self,
        extensions: Iterable[str | InlineExtension] = ("partial_emphasis",),
    ) -> None:
        hooks = list(BUILTIN_HOOKS)
        resolvers: list[DelimiterResolver] = []
        node_types = list(BUILTIN_NODE_TYPES)

        for ext in extensions:
            if isinstance(ext, str):
                ext = get_extension(ext)
            node_types.extend(ext.node_types)
            for hook in ext.inline_hooks:
                _insert_hook(hooks, hook)
            resolvers.extend(ext.delimiter_resolvers)

        self.hooks: tuple[InlineHook, ...] = tuple(hooks)
        self.resolvers: tuple[DelimiterResolver, ...] = tuple(resolvers)
        self.node_types: tuple[NodeType, ...] = tuple(node_types)

    def parse(self, text: str, offset: int = 0) -> InlineContext:
        """Scan one region and resolve its delimiters.

        Args:
            text: The region's inline text.
            offset: Absolute offset of ``text`` in the document.

        Returns:
            The context, whose ``parts`` hold the resolved content.
        """
        cx = InlineContext(text, offset, NodeTypeRegistry(self.node_types))

        pos = offset
        while pos < cx.end:
            next_char = cx.char(pos)
            for hook in self.hooks:
                result = hook.parse(cx, next_char, pos)
                if result >= 0:
                    pos = result if result > pos else pos + 1
                    break
            else:
                pos += 1

        for resolve in self.resolvers:
            resolve(cx)
        return cx


def parse_inline(
    text: str,
    extensions: Iterable[str | InlineExtension] = ("partial_emphasis",),
    *,
    offset: int = 0,
) -> list[InlinePart]:
    """Parse one inline region and return its resolved parts."""
    return InlineParser(extensions).parse(text, offset).parts


__all__ = [
    "BUILTIN_HOOKS",
    "BUILTIN_NODE_TYPES",
    "ESCAPE",
    "INLINE_CODE",
    "InlineParser",
    "parse_escape",
    "parse_inline",
    "parse_inline_code",
]
