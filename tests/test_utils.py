"""Tests for Partial Emphasis utility modules."""

import logging

from partial_emphasis import parse_inline


class TestGetLogger:
    """Tests for get_logger function."""

    def test_adds_prefix(self) -> None:
        from partial_emphasis.utils.logger import get_logger

        assert get_logger("matcher").name == "partial_emphasis.matcher"

    def test_keeps_existing_prefix(self) -> None:
        from partial_emphasis.utils.logger import get_logger

        assert get_logger("partial_emphasis.tree").name == "partial_emphasis.tree"
        assert get_logger("partial_emphasis").name == "partial_emphasis"

    def test_similar_name_still_prefixed(self) -> None:
        from partial_emphasis.utils.logger import get_logger

        assert get_logger("partial_emphasisx").name == "partial_emphasis.partial_emphasisx"

    def test_returns_stdlib_logger(self) -> None:
        from partial_emphasis.utils import get_logger

        assert isinstance(get_logger("x"), logging.Logger)

    def test_resolution_logs_at_debug(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="partial_emphasis"):
            parse_inline("*a* **b")

        messages = [r.getMessage() for r in caplog.records]
        assert any("Matched 1 span(s), 1 unterminated, from 3 run(s)" in m for m in messages)
        assert any(m.startswith("Merged 2 element(s)") for m in messages)
