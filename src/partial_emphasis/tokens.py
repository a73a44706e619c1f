"""Typed inline parts for Partial Emphasis.

The host's content sequence for one inline region is a list of parts, each
one of three variants:

- DelimiterRun: a candidate emphasis run registered by the scanner
- HostNode: an opaque node produced by another inline parser
- Element: a node produced by resolving emphasis

Usage:
    match part:
        case DelimiterRun(marker="*", side=side) if side & Side.OPEN:
            ...
        case HostNode(name="InlineCode"):
            ...
        case Element(name="Emphasis", children=children):
            ...

Thread Safety:
All parts are immutable and safe to share across threads.

"""

from __future__ import annotations

from enum import IntFlag
from typing import Literal, NamedTuple, TypeAlias

from partial_emphasis.nodes import Element, HostNode

DelimiterChar: TypeAlias = Literal["*", "_"]


class Side(IntFlag):
    """Which edges a delimiter run may form."""

    NONE = 0
    OPEN = 1
    CLOSE = 2
    BOTH = OPEN | CLOSE


class DelimiterRun(NamedTuple):
    """A maximal run of one emphasis marker character.

    Immutable: the matcher tracks consumption on private working copies, so
    the host's parts are never altered by resolution.

    Attributes:
        marker: The marker character; runs of different markers never pair.
        start: Offset of the first marker character.
        end: Offset just past the last marker character.
        side: Edges this run may form (Side.OPEN, Side.CLOSE, both, neither).
        index: Stable index assigned by the context at registration time.

    """

    marker: DelimiterChar
    start: int
    end: int
    side: Side
    index: int = 0

    @property
    def width(self) -> int:
        return self.end - self.start

    @property
    def can_open(self) -> bool:
        return bool(self.side & Side.OPEN)

    @property
    def can_close(self) -> bool:
        return bool(self.side & Side.CLOSE)


InlinePart: TypeAlias = DelimiterRun | HostNode | Element


__all__ = [
    "DelimiterChar",
    "DelimiterRun",
    "InlinePart",
    "Side",
]
