"""Delimiter matching for partial emphasis.

A variant of the CommonMark delimiter algorithm
(https://spec.commonmark.org/0.31.2/#process-emphasis) with two changes:

1. Atomic matching: an opener and a closer pair only when their remaining
   widths are equal, so ``**`` never borrows one character from ``*``.
2. Unterminated spans: every opener still holding characters after the
   pairing pass becomes one or more spans running to the end of the block.

Thread Safety:
All state lives in per-call working copies. The caller's runs are never
mutated, so one list of runs may be matched from several threads.

"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from partial_emphasis.nodes import SpanKind
from partial_emphasis.tokens import DelimiterRun, Side
from partial_emphasis.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Span:
    """A matched or unterminated emphasis region.

    Attributes:
        kind: WEAK for single-character marks, STRONG for double.
        start: Offset of the opening mark.
        end: Offset past the closing mark, or the block end when unterminated.
        open_mark: Width of the opening mark rendered as EmphasisMark (0-2).
        close_mark: Width of the closing mark (0 when unterminated).

    """

    kind: SpanKind
    start: int
    end: int
    open_mark: int
    close_mark: int

    @property
    def content_start(self) -> int:
        return self.start + self.open_mark

    @property
    def content_end(self) -> int:
        return self.end - self.close_mark

    @property
    def unterminated(self) -> bool:
        return self.close_mark == 0


@dataclass(slots=True)
class _WorkingRun:
    """Mutable copy of a DelimiterRun that shrinks as marks are consumed."""

    marker: str
    start: int
    end: int
    side: Side

    @property
    def width(self) -> int:
        return self.end - self.start


def _violates_rule_of_three(opener: _WorkingRun, closer: _WorkingRun) -> bool:
    # CommonMark "multiple of 3" rule: a run that can both open and close
    # may not pair when the widths sum to a multiple of 3, unless both are.
    if not (closer.side & Side.OPEN or opener.side & Side.CLOSE):
        return False
    open_size = opener.width
    close_size = closer.width
    return (open_size + close_size) % 3 == 0 and (
        open_size % 3 != 0 or close_size % 3 != 0
    )


def match_delimiters(
    runs: Sequence[DelimiterRun],
    block_end: int,
    *,
    extend_unclosed: bool = True,
) -> list[Span]:
    """Pair delimiter runs into spans.

    Args:
        runs: Delimiter runs of one inline region, in content order.
        block_end: Offset where unterminated spans end.
        extend_unclosed: Turn leftover openers into unterminated spans.

    Returns:
        Matched spans in the order they were found, followed by unterminated
        spans in run order.
    """
    work = [_WorkingRun(r.marker, r.start, r.end, r.side) for r in runs]
    spans: list[Span] = []

    closer_idx = 0
    count = len(work)
    while closer_idx < count:
        closer = work[closer_idx]
        if not (closer.side & Side.CLOSE) or closer.width <= 0:
            closer_idx += 1
            continue

        matched = False
        for opener_idx in range(closer_idx - 1, -1, -1):
            opener = work[opener_idx]
            if opener.marker != closer.marker or not (opener.side & Side.OPEN):
                continue
            if opener.width == 0:
                continue
            if _violates_rule_of_three(opener, closer):
                continue
            if opener.width != closer.width:
                continue

            size = min(2, opener.width, closer.width)
            spans.append(
                Span(
                    SpanKind.for_width(size),
                    opener.end - size,
                    closer.start + size,
                    size,
                    size,
                )
            )
            opener.end -= size
            closer.start += size

            # A run of the other marker can't straddle this pair
            for mid_idx in range(opener_idx + 1, closer_idx):
                between = work[mid_idx]
                if between.marker != opener.marker:
                    between.start = between.end

            matched = True
            break

        if not (matched and closer.width > 0):
            closer_idx += 1

    matched_count = len(spans)
    if extend_unclosed:
        for run in work:
            if not (run.side & Side.OPEN):
                continue
            pos = run.start
            remaining = run.width
            while remaining > 0:
                size = 2 if remaining >= 2 else 1
                spans.append(Span(SpanKind.for_width(size), pos, block_end, size, 0))
                pos += size
                remaining -= size

    logger.debug(
        "Matched %d span(s), %d unterminated, from %d run(s)",
        matched_count,
        len(spans) - matched_count,
        len(runs),
    )
    return spans


__all__ = [
    "Span",
    "match_delimiters",
]
