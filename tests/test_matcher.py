"""Tests for delimiter matching.

Covers CommonMark pairing, atomic (equal-width) matching, the rule of three,
cross-marker isolation, and the unterminated-span sweep.
"""

import pytest

from partial_emphasis.matcher import Span, _violates_rule_of_three, _WorkingRun, match_delimiters
from partial_emphasis.nodes import SpanKind
from partial_emphasis.tokens import Side

WEAK = SpanKind.WEAK
STRONG = SpanKind.STRONG


def match(runs_of, text: str, **kwargs) -> list[Span]:
    return match_delimiters(runs_of(text), len(text), **kwargs)


class TestBasicPairs:
    """Well-formed pairs."""

    def test_weak_pair(self, runs_of) -> None:
        assert match(runs_of, "*x*") == [Span(WEAK, 0, 3, 1, 1)]

    def test_strong_pair(self, runs_of) -> None:
        assert match(runs_of, "**x**") == [Span(STRONG, 0, 5, 2, 2)]

    def test_underscore_pair(self, runs_of) -> None:
        assert match(runs_of, "_x_ y") == [Span(WEAK, 0, 3, 1, 1)]

    def test_triple_run_splits_into_strong_then_weak(self, runs_of) -> None:
        """***foo*** pairs twice on the same closer: strong inside weak."""
        assert match(runs_of, "***foo***") == [
            Span(STRONG, 1, 8, 2, 2),
            Span(WEAK, 0, 9, 1, 1),
        ]

    def test_nested_pairs(self, runs_of) -> None:
        assert match(runs_of, "*a **b** c*") == [
            Span(STRONG, 3, 8, 2, 2),
            Span(WEAK, 0, 11, 1, 1),
        ]

    def test_no_runs(self) -> None:
        assert match_delimiters([], 10) == []

    def test_span_properties(self) -> None:
        span = Span(STRONG, 4, 20, 2, 0)
        assert span.content_start == 6
        assert span.content_end == 20
        assert span.unterminated is True


class TestUnterminated:
    """Openers that never close extend to the block end."""

    def test_unclosed_weak(self, runs_of) -> None:
        assert match(runs_of, "*abc") == [Span(WEAK, 0, 4, 1, 0)]

    def test_unclosed_strong(self, runs_of) -> None:
        assert match(runs_of, "**abc") == [Span(STRONG, 0, 5, 2, 0)]

    def test_unclosed_triple_chunks_strong_then_weak(self, runs_of) -> None:
        assert match(runs_of, "***abc") == [
            Span(STRONG, 0, 6, 2, 0),
            Span(WEAK, 2, 6, 1, 0),
        ]

    def test_unclosed_quad_chunks_into_two_strong(self, runs_of) -> None:
        assert match(runs_of, "****a") == [
            Span(STRONG, 0, 5, 2, 0),
            Span(STRONG, 2, 5, 2, 0),
        ]

    def test_block_end_is_caller_supplied(self, runs_of) -> None:
        spans = match_delimiters(runs_of("*abc"), 42)
        assert spans == [Span(WEAK, 0, 42, 1, 0)]

    def test_closer_only_run_produces_nothing(self, runs_of) -> None:
        assert match(runs_of, "abc*") == []

    def test_matched_pair_then_unclosed_opener(self, runs_of) -> None:
        assert match(runs_of, "*a* *b") == [
            Span(WEAK, 0, 3, 1, 1),
            Span(WEAK, 4, 6, 1, 0),
        ]

    def test_extend_unclosed_disabled(self, runs_of) -> None:
        assert match(runs_of, "*a* *b", extend_unclosed=False) == [Span(WEAK, 0, 3, 1, 1)]


class TestAtomicMatching:
    """Only equal remaining widths pair."""

    def test_strong_opener_single_closer(self, runs_of) -> None:
        """**a* has no matched span; the opener runs to the end."""
        spans = match(runs_of, "**a*")
        assert [s for s in spans if s.close_mark > 0] == []
        assert spans == [Span(STRONG, 0, 4, 2, 0)]

    def test_single_opener_strong_closer(self, runs_of) -> None:
        spans = match(runs_of, "*a**")
        assert spans == [Span(WEAK, 0, 4, 1, 0)]

    def test_closer_skips_unequal_opener_for_equal_one(self, runs_of) -> None:
        """*a **b* pairs the outer single stars and leaves ** unterminated."""
        assert match(runs_of, "*a **b* c") == [
            Span(WEAK, 0, 7, 1, 1),
            Span(STRONG, 3, 9, 2, 0),
        ]


class TestRuleOfThree:
    """CommonMark's multiple-of-three rule for runs that can open and close."""

    def test_strong_inside_weak_with_intraword_runs(self, runs_of) -> None:
        """*foo**bar**baz* → <em>foo<strong>bar</strong>baz</em>"""
        assert match(runs_of, "*foo**bar**baz*") == [
            Span(STRONG, 4, 11, 2, 2),
            Span(WEAK, 0, 15, 1, 1),
        ]

    def test_both_capable_middle_run_is_skipped(self, runs_of) -> None:
        """*foo**bar* → <em>foo**bar</em>; the ** is left to extend."""
        assert match(runs_of, "*foo**bar*") == [
            Span(WEAK, 0, 10, 1, 1),
            Span(STRONG, 4, 10, 2, 0),
        ]

    def test_three_single_intraword_runs(self, runs_of) -> None:
        """a*b*c*d: the first two pair, the third is left open."""
        assert match(runs_of, "a*b*c*d") == [
            Span(WEAK, 1, 4, 1, 1),
            Span(WEAK, 5, 7, 1, 0),
        ]

    @pytest.mark.parametrize(
        ("open_width", "close_width", "open_side", "close_side", "rejected"),
        [
            (1, 2, Side.OPEN, Side.BOTH, True),
            (2, 1, Side.BOTH, Side.CLOSE, True),
            (2, 4, Side.OPEN, Side.BOTH, True),
            (3, 3, Side.BOTH, Side.BOTH, False),
            (3, 6, Side.BOTH, Side.BOTH, False),
            (1, 1, Side.BOTH, Side.BOTH, False),
            (1, 2, Side.OPEN, Side.CLOSE, False),
        ],
    )
    def test_rule_of_three_vectors(
        self,
        open_width: int,
        close_width: int,
        open_side: Side,
        close_side: Side,
        rejected: bool,
    ) -> None:
        opener = _WorkingRun("*", 0, open_width, open_side)
        closer = _WorkingRun("*", 10, 10 + close_width, close_side)
        assert _violates_rule_of_three(opener, closer) is rejected


class TestMarkerClasses:
    """Runs of different markers never pair or straddle each other."""

    def test_interleaved_classes_do_not_cross_match(self, runs_of) -> None:
        text = "_a*b_c*"
        spans = match(runs_of, text)
        assert spans == [
            Span(WEAK, 2, 7, 1, 1),
            Span(WEAK, 0, 7, 1, 0),
        ]
        for span in spans:
            if span.close_mark:
                assert text[span.start] == text[span.end - 1]

    def test_mismatched_markers_never_pair(self, runs_of) -> None:
        assert match(runs_of, "*a_") == [Span(WEAK, 0, 3, 1, 0)]

    def test_other_marker_inside_pair_is_zeroed(self, runs_of) -> None:
        """*a _b* c_: the underscore opener is consumed by the asterisk pair.

        Observed behavior: the zeroed run is not reconsidered, so it neither
        closes with the trailing underscore nor extends as unterminated.
        """
        assert match(runs_of, "*a _b* c_") == [Span(WEAK, 0, 6, 1, 1)]

    def test_same_marker_inside_pair_survives(self, runs_of) -> None:
        assert match(runs_of, "*a *b* c") == [
            Span(WEAK, 3, 6, 1, 1),
            Span(WEAK, 0, 8, 1, 0),
        ]


class TestInputsUntouched:
    """The caller's runs are never mutated."""

    def test_runs_are_unchanged(self, runs_of) -> None:
        runs = runs_of("***foo*** *bar")
        before = list(runs)
        match_delimiters(runs, 14)
        assert runs == before

    def test_matching_twice_gives_same_result(self, runs_of) -> None:
        runs = runs_of("*a **b** c* **d")
        assert match_delimiters(runs, 15) == match_delimiters(runs, 15)
