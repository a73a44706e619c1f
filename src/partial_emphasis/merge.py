"""Splice resolved emphasis elements into an inline content sequence.

The merge drops the delimiter runs that were resolved, inserts each new
element ahead of the first remaining part at or after its start, and moves
parts that lie inside the most recently inserted span into that span.

Thread Safety:
Pure functions over immutable parts.

"""

from __future__ import annotations

from collections.abc import Collection, Sequence
from dataclasses import replace

from partial_emphasis.nodes import Element, HostNode
from partial_emphasis.tokens import DelimiterRun, InlinePart
from partial_emphasis.utils.logger import get_logger

logger = get_logger(__name__)


def _contains(outer: Element, part: InlinePart) -> bool:
    return part.start >= outer.start and part.end <= outer.end


def adopt(element: Element, part: Element | HostNode) -> Element:
    """Return ``element`` with ``part`` placed in its deepest containing span.

    ``part`` must lie within ``element``. It is inserted among the children
    of the innermost span that fully contains it, ordered by start offset.
    """
    children = list(element.children)
    for i, child in enumerate(children):
        if isinstance(child, Element) and child.is_span and _contains(child, part):
            children[i] = adopt(child, part)
            return replace(element, children=tuple(children))

    pos = len(children)
    for i, child in enumerate(children):
        if child.start >= part.end:
            pos = i
            break
    children.insert(pos, part)
    return replace(element, children=tuple(children))


def merge_parts(
    parts: Sequence[InlinePart],
    elements: Sequence[Element],
    resolved: Collection[int],
) -> list[InlinePart]:
    """Merge resolved elements into a region's parts.

    Args:
        parts: The region's content sequence, in offset order.
        elements: Top-level elements from the tree builder, in offset order.
        resolved: Indices of the delimiter runs the elements were built from.

    Returns:
        The new content sequence.
    """
    merged: list[InlinePart] = []
    elt_idx = 0
    adopted = 0

    for part in parts:
        if isinstance(part, DelimiterRun) and part.index in resolved:
            continue

        while elt_idx < len(elements) and elements[elt_idx].start <= part.start:
            merged.append(elements[elt_idx])
            elt_idx += 1

        last = merged[-1] if merged else None
        if (
            isinstance(last, Element)
            and last.is_span
            and not isinstance(part, DelimiterRun)
            and _contains(last, part)
        ):
            merged[-1] = adopt(last, part)
            adopted += 1
            continue

        merged.append(part)

    merged.extend(elements[elt_idx:])

    logger.debug(
        "Merged %d element(s) into %d part(s); %d part(s) moved into spans",
        len(elements),
        len(parts),
        adopted,
    )
    return merged


__all__ = [
    "adopt",
    "merge_parts",
]
