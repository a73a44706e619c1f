"""Nested element construction from overlapping spans.

Matched and unterminated spans may cross each other: an unterminated ``**``
runs to the block end straight through a closed ``*...*``. This module turns
the flat span list into a properly nested element tree. A span that crosses
its parent's boundary is clipped to the parent's content, and the part that
sticks out past the parent becomes a new sibling span without an opening mark.

Example:
    ``*a **b* c`` gives the spans Emphasis[0:7] and StrongEmphasis[3:9]
    (unterminated). The result is Emphasis[0:7] containing StrongEmphasis[3:6]
    (open mark only), followed by StrongEmphasis[7:9] with no marks at all.

"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from typing import TYPE_CHECKING

from partial_emphasis.config import get_resolve_config
from partial_emphasis.errors import NestingDepthError
from partial_emphasis.matcher import Span
from partial_emphasis.nodes import EMPHASIS_MARK, Element
from partial_emphasis.utils.logger import get_logger

if TYPE_CHECKING:
    from partial_emphasis.context import InlineContext

logger = get_logger(__name__)


def _sort_key(span: Span) -> tuple[int, int]:
    # Outer spans first when two share a start
    return (span.start, -span.end)


def _clip_children(spans: list[Span], parent_idx: int) -> list[Span]:
    """Collect the spans overlapping the parent's content, clipped to it.

    Rewrites ``spans`` past ``parent_idx`` so nothing already placed inside the
    parent is visited again: a span reaching past the parent's end keeps only
    that remainder (without an opening mark); any other span is emptied.
    """
    parent = spans[parent_idx]
    content_start = parent.content_start
    content_end = parent.content_end
    children: list[Span] = []

    for j in range(parent_idx + 1, len(spans)):
        other = spans[j]
        if other.start >= parent.end:
            break

        if other.start < content_end and other.end > content_start:
            clipped_start = max(other.start, content_start)
            clipped_end = min(other.end, content_end)
            if clipped_start < clipped_end:
                children.append(
                    replace(
                        other,
                        start=clipped_start,
                        end=clipped_end,
                        open_mark=other.open_mark if clipped_start == other.start else 0,
                        close_mark=other.close_mark if clipped_end == other.end else 0,
                    )
                )

        if other.end > parent.end:
            spans[j] = replace(other, start=parent.end, open_mark=0)
        else:
            spans[j] = replace(other, start=other.end)

    return children


def build_nested_elements(
    spans: Sequence[Span],
    cx: InlineContext,
    *,
    depth: int = 0,
) -> list[Element]:
    """Build one nesting level of elements, recursing into children.

    Args:
        spans: Spans at this level, in any order. Not modified.
        cx: Context used to create elements.
        depth: Current nesting depth (0 for the region's top level).

    Returns:
        Non-overlapping elements in offset order.

    Raises:
        NestingDepthError: If ``depth`` reaches the configured limit while
            ``strict_depth`` is set.
    """
    config = get_resolve_config()
    ordered = sorted(spans, key=_sort_key)

    result: list[Element] = []
    processed = ordered[0].start if ordered else 0

    for i in range(len(ordered)):
        span = ordered[i]
        if span.start < processed or span.start >= span.end:
            continue

        children = _clip_children(ordered, i)

        el_children: list[Element] = []
        if span.open_mark > 0:
            el_children.append(cx.elt(EMPHASIS_MARK, span.start, span.content_start))
        if children:
            if depth + 1 >= config.max_nesting_depth:
                if config.strict_depth:
                    raise NestingDepthError(depth + 1, span.start, span.end)
                logger.warning(
                    "Emphasis nesting depth %d reached at [%d:%d]; dropping %d nested span(s)",
                    config.max_nesting_depth,
                    span.start,
                    span.end,
                    len(children),
                )
            else:
                el_children.extend(build_nested_elements(children, cx, depth=depth + 1))
        if span.close_mark > 0:
            el_children.append(cx.elt(EMPHASIS_MARK, span.content_end, span.end))

        result.append(cx.elt(span.kind.value, span.start, span.end, el_children))
        processed = span.end

    return result


__all__ = [
    "build_nested_elements",
]
