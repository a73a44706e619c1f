"""Exception classes for Partial Emphasis.

Text never produces an error: malformed or adversarial input degrades into
more (or fewer) spans. These exceptions signal misuse at the host boundary.
"""

from __future__ import annotations


class PartialEmphasisError(Exception):
    """Base exception for all Partial Emphasis errors.

    Subclass this for specific error categories.
    """

    pass


class DelimiterError(PartialEmphasisError):
    """A delimiter run was registered with an invalid extent or marker.

    Raised by the inline context when a host hands over a run that the
    scanner could never have produced.
    """

    def __init__(
        self,
        message: str,
        start: int | None = None,
        end: int | None = None,
    ) -> None:
        """Initialize delimiter error with the offending extent.

        Args:
            message: Error description
            start: Start offset of the run (optional)
            end: End offset of the run (optional)
        """
        self.message = message
        self.start = start
        self.end = end

        location = ""
        if start is not None:
            location = f"[{start}:{end if end is not None else '?'}] "

        super().__init__(f"{location}{message}")


class NestingDepthError(PartialEmphasisError):
    """Span nesting exceeded the configured depth limit.

    Only raised when ``ResolveConfig.strict_depth`` is set; otherwise the
    tree builder flattens the excess levels and logs a warning.
    """

    def __init__(self, depth: int, start: int, end: int) -> None:
        self.depth = depth
        self.start = start
        self.end = end
        super().__init__(
            f"Emphasis nesting depth {depth} exceeded at [{start}:{end}]"
        )


class NodeTypeError(PartialEmphasisError):
    """A node was requested under a name the type registry does not know."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown node type: {name!r}")


class ExtensionError(PartialEmphasisError):
    """Error in extension lookup or registration.

    Raised for unknown extension names and duplicate registrations.
    """

    def __init__(self, extension_name: str, message: str) -> None:
        """Initialize extension error.

        Args:
            extension_name: Name of the failing extension
            message: Description of the error
        """
        self.extension_name = extension_name
        super().__init__(f"Extension '{extension_name}': {message}")
