"""Typed output nodes for Partial Emphasis.

All nodes are frozen dataclasses with slots for:
- Immutability: produced trees are safe to share across threads
- Memory efficiency: __slots__ reduces memory footprint
- Pattern matching: match statements work naturally

Node Hierarchy:
Element (emitted region with children)
├── Emphasis        (weak span, marker width 1)
├── StrongEmphasis  (strong span, marker width 2)
└── EmphasisMark    (the literal marker characters)
HostNode (opaque node produced by another inline parser)

Offsets are absolute positions in the host document, half-open.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from partial_emphasis.errors import NodeTypeError

EMPHASIS = "Emphasis"
STRONG_EMPHASIS = "StrongEmphasis"
EMPHASIS_MARK = "EmphasisMark"


class SpanKind(Enum):
    """Kind of an emphasis span, valued by the node name it is emitted as."""

    WEAK = EMPHASIS
    STRONG = STRONG_EMPHASIS

    @classmethod
    def for_width(cls, width: int) -> SpanKind:
        """Strong for a two-character marker, weak otherwise."""
        return cls.STRONG if width == 2 else cls.WEAK


@dataclass(frozen=True, slots=True)
class HostNode:
    """Node produced by some other inline parser (code span, escape, link).

    The emphasis resolver never looks inside a host node. It only moves it
    under a new span when the node lies entirely within that span.

    """

    name: str
    start: int
    end: int


@dataclass(frozen=True, slots=True)
class Element:
    """Named region with ordered children.

    Markdown: *text* or **text**
    Children: EmphasisMark for each marker edge, nested elements, host nodes.

    """

    name: str
    start: int
    end: int
    children: tuple[Element | HostNode, ...] = ()

    @property
    def is_span(self) -> bool:
        """True for Emphasis and StrongEmphasis, False for marks."""
        return self.name in (EMPHASIS, STRONG_EMPHASIS)


@dataclass(frozen=True, slots=True)
class NodeType:
    """Declared node type with an optional highlighting style tag."""

    name: str
    style: str | None = None


class NodeTypeRegistry:
    """Name-to-type registry consulted whenever an element is created.

    Hosts declare their own node types; extensions add theirs through
    ``define``. Redefining a name replaces its style.

    """

    __slots__ = ("_types",)

    def __init__(self, types: tuple[NodeType, ...] = ()) -> None:
        self._types: dict[str, NodeType] = {t.name: t for t in types}

    def define(self, node_type: NodeType) -> None:
        self._types[node_type.name] = node_type

    def get(self, name: str) -> NodeType:
        """Resolve a node type by name.

        Raises:
            NodeTypeError: If the name was never declared.
        """
        try:
            return self._types[name]
        except KeyError:
            raise NodeTypeError(name) from None

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def __len__(self) -> int:
        return len(self._types)

    @property
    def names(self) -> frozenset[str]:
        return frozenset(self._types)


__all__ = [
    "EMPHASIS",
    "EMPHASIS_MARK",
    "STRONG_EMPHASIS",
    "Element",
    "HostNode",
    "NodeType",
    "NodeTypeRegistry",
    "SpanKind",
]
