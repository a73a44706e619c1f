"""Serialization of inline parts for inspection and snapshots.

Converts parts to JSON-compatible dicts and flattens a resolved region back
into labelled text segments. Useful for:
- Debugging resolver output
- Snapshot tests
- Checking that a resolved tree still covers its text exactly once

All output is deterministic (sorted keys).

Example:
    from partial_emphasis import parse_inline
    from partial_emphasis.serialization import segments

    parts = parse_inline("*a* b")
    segments("*a* b", parts)
    # [('EmphasisMark', '*'), ('text', 'a'), ('EmphasisMark', '*'), ('text', ' b')]

Thread Safety:
    All functions are pure — safe to call from any thread.

"""

import json
from collections.abc import Iterable, Sequence
from typing import Any

from partial_emphasis.nodes import Element, HostNode
from partial_emphasis.tokens import DelimiterRun, InlinePart

TEXT = "text"


def to_dict(part: InlinePart) -> dict[str, Any]:
    """Convert one part to a JSON-compatible dict."""
    if isinstance(part, DelimiterRun):
        return {
            "_type": "DelimiterRun",
            "marker": part.marker,
            "start": part.start,
            "end": part.end,
            "side": int(part.side),
            "index": part.index,
        }
    if isinstance(part, Element):
        return {
            "_type": "Element",
            "name": part.name,
            "start": part.start,
            "end": part.end,
            "children": [to_dict(child) for child in part.children],
        }
    if isinstance(part, HostNode):
        return {"_type": "HostNode", "name": part.name, "start": part.start, "end": part.end}
    raise TypeError(f"Cannot serialize {type(part).__name__}")


def to_json(parts: Iterable[InlinePart], *, indent: int | None = None) -> str:
    """Serialize a sequence of parts to a JSON string."""
    return json.dumps([to_dict(part) for part in parts], sort_keys=True, indent=indent)


def _walk(
    text: str,
    offset: int,
    nodes: Sequence[Element | HostNode | DelimiterRun],
    start: int,
    end: int,
    out: list[tuple[str, str]],
) -> None:
    pos = start
    for node in nodes:
        if node.start > pos:
            out.append((TEXT, text[pos - offset : node.start - offset]))
        if isinstance(node, Element) and node.children:
            _walk(text, offset, node.children, node.start, node.end, out)
        elif isinstance(node, Element):
            # Childless span or mark
            label = node.name if not node.is_span else TEXT
            out.append((label, text[node.start - offset : node.end - offset]))
        elif isinstance(node, HostNode):
            out.append((node.name, text[node.start - offset : node.end - offset]))
        else:
            out.append((TEXT, text[node.start - offset : node.end - offset]))
        pos = max(pos, node.end)
    if pos < end:
        out.append((TEXT, text[pos - offset : end - offset]))


def segments(text: str, parts: Sequence[InlinePart], offset: int = 0) -> list[tuple[str, str]]:
    """Flatten resolved parts into ``(label, text)`` leaf segments.

    Leaves are marks (labelled ``EmphasisMark``), host nodes (labelled by
    name), and the plain text between them (labelled ``text``). Unresolved
    delimiter runs count as plain text.
    """
    out: list[tuple[str, str]] = []
    _walk(text, offset, parts, offset, offset + len(text), out)
    return out


def leaf_text(text: str, parts: Sequence[InlinePart], offset: int = 0) -> str:
    """Concatenate every leaf segment; equals ``text`` for a well-formed tree."""
    return "".join(segment for _, segment in segments(text, parts, offset))


__all__ = [
    "leaf_text",
    "segments",
    "to_dict",
    "to_json",
]
