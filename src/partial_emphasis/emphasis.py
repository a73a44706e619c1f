"""Partial emphasis extension.

Parses ``*`` and ``_`` emphasis and extends markers that are never closed
to the end of their block, so emphasis shows up while it is being typed.

Syntax:
*text*    → Emphasis
**text**  → StrongEmphasis
*text     → Emphasis running to the end of the block
**a *b**  → StrongEmphasis, with an unterminated Emphasis nested inside

Thread Safety:
This extension is stateless and thread-safe.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from partial_emphasis.charsets import EMPHASIS_MARKERS
from partial_emphasis.config import get_resolve_config
from partial_emphasis.extension import InlineExtension, InlineHook, register_extension
from partial_emphasis.matcher import match_delimiters
from partial_emphasis.merge import merge_parts
from partial_emphasis.nodes import EMPHASIS, EMPHASIS_MARK, STRONG_EMPHASIS, NodeType
from partial_emphasis.scanner import scan_delimiter
from partial_emphasis.tree import build_nested_elements

if TYPE_CHECKING:
    from partial_emphasis.context import InlineContext


def parse_partial_emphasis(cx: InlineContext, next_char: str, start: int) -> int:
    """Inline hook: register the marker run at ``start``.

    Returns:
        -1 when ``next_char`` is not an emphasis marker, else the offset just
        past the run.
    """
    if next_char not in EMPHASIS_MARKERS:
        return -1
    run = scan_delimiter(cx, start)
    if run is None:
        return -1
    return run.end


def resolve_partial_emphasis(cx: InlineContext) -> None:
    """Delimiter resolver: replace the region's runs with emphasis elements."""
    runs = [run for run in cx.delimiters() if run.marker in EMPHASIS_MARKERS]
    if not runs:
        return

    config = get_resolve_config()
    spans = match_delimiters(runs, cx.end, extend_unclosed=config.extend_unclosed)
    if not spans:
        return

    elements = build_nested_elements(spans, cx)
    cx.parts = merge_parts(cx.parts, elements, {run.index for run in runs})


PartialEmphasis = register_extension(
    InlineExtension(
        name="partial_emphasis",
        node_types=(
            NodeType(EMPHASIS, style="emphasis"),
            NodeType(STRONG_EMPHASIS, style="strong"),
            NodeType(EMPHASIS_MARK, style="processingInstruction"),
        ),
        inline_hooks=(
            InlineHook("PartialEmphasis", parse_partial_emphasis, before="Emphasis"),
        ),
        delimiter_resolvers=(resolve_partial_emphasis,),
    )
)


__all__ = [
    "PartialEmphasis",
    "parse_partial_emphasis",
    "resolve_partial_emphasis",
]
