"""Inline parsing context for one region of text.

The context is the seam between the host's inline tokenizer and the emphasis
extension: hooks read characters through it, register the parts they
recognize, and delimiter resolvers rewrite its ordered ``parts`` in place.

Thread Safety:
A context is owned by a single parse call. Never share one across threads.

"""

from __future__ import annotations

from collections.abc import Iterable

from partial_emphasis.charsets import EMPHASIS_MARKERS
from partial_emphasis.errors import DelimiterError
from partial_emphasis.nodes import Element, HostNode, NodeType, NodeTypeRegistry
from partial_emphasis.tokens import DelimiterRun, InlinePart, Side


class InlineContext:
    """Character access and part collection over one inline region.

    Offsets are absolute: the region's first character sits at ``offset`` and
    ``end`` is one past its last character.

    Example:
        >>> cx = InlineContext("a *b*", offset=10)
        >>> cx.char(12)
        '*'
        >>> cx.end
        15

    """

    __slots__ = ("text", "offset", "parts", "node_types", "_next_index")

    def __init__(
        self,
        text: str,
        offset: int = 0,
        node_types: NodeTypeRegistry | None = None,
    ) -> None:
        self.text = text
        self.offset = offset
        self.parts: list[InlinePart] = []
        self.node_types = node_types if node_types is not None else NodeTypeRegistry()
        self._next_index = 0

    @property
    def end(self) -> int:
        return self.offset + len(self.text)

    def char(self, pos: int) -> str:
        """Character at absolute ``pos``, or "" outside the region."""
        if pos < self.offset or pos >= self.end:
            return ""
        return self.text[pos - self.offset]

    def slice(self, start: int, end: int) -> str:
        """Text between absolute offsets, clamped to the region."""
        start = max(start, self.offset) - self.offset
        end = min(end, self.end) - self.offset
        if end <= start:
            return ""
        return self.text[start:end]

    def append(self, part: InlinePart) -> int:
        """Add a part to the content sequence.

        Returns:
            The offset just past the part, which inline hooks return to the
            host loop.
        """
        self.parts.append(part)
        return part.end

    def add_delimiter(self, marker: str, start: int, end: int, side: Side) -> DelimiterRun:
        """Register a delimiter run and give it the next stable index.

        Raises:
            DelimiterError: If the run is empty, lies outside the region, or
                uses a character that is not an emphasis marker.
        """
        if marker not in EMPHASIS_MARKERS:
            raise DelimiterError(f"not an emphasis marker: {marker!r}", start, end)
        if end <= start:
            raise DelimiterError("delimiter run must not be empty", start, end)
        if start < self.offset or end > self.end:
            raise DelimiterError(
                f"delimiter run outside region [{self.offset}:{self.end}]", start, end
            )
        run = DelimiterRun(marker, start, end, side, self._next_index)  # type: ignore[arg-type]
        self._next_index += 1
        self.parts.append(run)
        return run

    def delimiters(self) -> list[DelimiterRun]:
        """Registered delimiter runs, in content order."""
        return [part for part in self.parts if isinstance(part, DelimiterRun)]

    def elt(
        self,
        name: str,
        start: int,
        end: int,
        children: Iterable[Element | HostNode] = (),
    ) -> Element:
        """Create an element of a declared node type.

        Raises:
            NodeTypeError: If ``name`` is not in the node type registry.
        """
        self.node_types.get(name)
        return Element(name, start, end, tuple(children))

    def define_nodes(self, node_types: Iterable[NodeType]) -> None:
        for node_type in node_types:
            self.node_types.define(node_type)
