"""Shared fixtures for Partial Emphasis tests."""

from collections.abc import Callable

import pytest

from partial_emphasis.context import InlineContext
from partial_emphasis.emphasis import PartialEmphasis
from partial_emphasis.nodes import NodeTypeRegistry
from partial_emphasis.scanner import scan_delimiter
from partial_emphasis.tokens import DelimiterRun


def make_context(text: str, offset: int = 0) -> InlineContext:
    """Context that knows the emphasis node types."""
    return InlineContext(text, offset, NodeTypeRegistry(PartialEmphasis.node_types))


def scan_all(cx: InlineContext) -> list[DelimiterRun]:
    """Register every marker run in the context, like the host loop would."""
    pos = cx.offset
    while pos < cx.end:
        run = scan_delimiter(cx, pos)
        pos = run.end if run is not None else pos + 1
    return cx.delimiters()


@pytest.fixture
def context() -> Callable[..., InlineContext]:
    return make_context


@pytest.fixture
def runs_of() -> Callable[[str], list[DelimiterRun]]:
    def runs_of(text: str) -> list[DelimiterRun]:
        return scan_all(make_context(text))

    return runs_of
