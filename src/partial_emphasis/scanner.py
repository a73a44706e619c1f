"""Delimiter scanning for emphasis runs.

Computes the extent of a run of ``*`` or ``_`` and whether it may open or
close emphasis, using CommonMark flanking rules.
See: https://spec.commonmark.org/0.31.2/#left-flanking-delimiter-run

Thread Safety:
All functions are pure apart from registering the run on the given context.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from partial_emphasis.charsets import (
    ASTERISK,
    EMPHASIS_MARKERS,
    is_punctuation,
    is_whitespace_or_boundary,
)
from partial_emphasis.config import get_resolve_config
from partial_emphasis.tokens import DelimiterRun, Side

if TYPE_CHECKING:
    from partial_emphasis.context import InlineContext


def is_left_flanking(before: str, after: str, *, unicode: bool = True) -> bool:
    """Check if delimiter run is left-flanking.

    Left-flanking: not followed by whitespace, and either:
    - not followed by punctuation, OR
    - preceded by whitespace or punctuation
    """
    if is_whitespace_or_boundary(after):
        return False
    if not is_punctuation(after, unicode=unicode):
        return True
    return is_whitespace_or_boundary(before) or is_punctuation(before, unicode=unicode)


def is_right_flanking(before: str, after: str, *, unicode: bool = True) -> bool:
    """Check if delimiter run is right-flanking.

    Right-flanking: not preceded by whitespace, and either:
    - not preceded by punctuation, OR
    - followed by whitespace or punctuation
    """
    if is_whitespace_or_boundary(before):
        return False
    if not is_punctuation(before, unicode=unicode):
        return True
    return is_whitespace_or_boundary(after) or is_punctuation(after, unicode=unicode)


def classify_run(marker: str, before: str, after: str, *, unicode: bool = True) -> Side:
    """Open/close capability of a run given its neighbouring characters.

    ``*`` opens when left-flanking and closes when right-flanking. ``_`` is
    additionally barred from opening or closing inside a word, so ``a_b_c``
    contains no emphasis.

    Args:
        marker: The run's marker character.
        before: Character preceding the run ("" at the region start).
        after: Character following the run ("" at the region end).
        unicode: Use Unicode punctuation categories.
    """
    left = is_left_flanking(before, after, unicode=unicode)
    right = is_right_flanking(before, after, unicode=unicode)

    if marker == ASTERISK:
        can_open = left
        can_close = right
    else:
        can_open = left and (not right or is_punctuation(before, unicode=unicode))
        can_close = right and (not left or is_punctuation(after, unicode=unicode))

    side = Side.NONE
    if can_open:
        side |= Side.OPEN
    if can_close:
        side |= Side.CLOSE
    return side


def scan_delimiter(cx: InlineContext, start: int) -> DelimiterRun | None:
    """Scan the marker run beginning at ``start`` and register it.

    Returns:
        The registered run, or None when the character at ``start`` is not an
        emphasis marker.
    """
    marker = cx.char(start)
    if marker not in EMPHASIS_MARKERS:
        return None

    end = start + 1
    while cx.char(end) == marker:
        end += 1

    before = cx.slice(start - 1, start)
    after = cx.slice(end, end + 1)
    side = classify_run(
        marker, before, after, unicode=get_resolve_config().unicode_punctuation
    )
    return cx.add_delimiter(marker, start, end, side)
