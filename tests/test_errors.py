"""Tests for the Partial Emphasis exception hierarchy."""

import pytest

from partial_emphasis.errors import (
    DelimiterError,
    ExtensionError,
    NestingDepthError,
    NodeTypeError,
    PartialEmphasisError,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "error",
        [
            DelimiterError("bad"),
            ExtensionError("x", "bad"),
            NestingDepthError(3, 0, 9),
            NodeTypeError("X"),
        ],
    )
    def test_all_derive_from_base(self, error: Exception) -> None:
        assert isinstance(error, PartialEmphasisError)


class TestMessages:
    def test_delimiter_error_with_extent(self) -> None:
        error = DelimiterError("delimiter run must not be empty", 4, 4)
        assert str(error) == "[4:4] delimiter run must not be empty"
        assert error.message == "delimiter run must not be empty"

    def test_delimiter_error_without_extent(self) -> None:
        assert str(DelimiterError("bad marker")) == "bad marker"

    def test_nesting_depth_error(self) -> None:
        error = NestingDepthError(65, 10, 40)
        assert str(error) == "Emphasis nesting depth 65 exceeded at [10:40]"
        assert error.depth == 65

    def test_node_type_error(self) -> None:
        assert str(NodeTypeError("Weak")) == "Unknown node type: 'Weak'"

    def test_extension_error(self) -> None:
        error = ExtensionError("partial_emphasis", "already registered")
        assert str(error) == "Extension 'partial_emphasis': already registered"
        assert error.extension_name == "partial_emphasis"
