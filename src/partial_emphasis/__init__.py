"""Partial Emphasis — emphasis resolution that tolerates unclosed markers.

A CommonMark-style emphasis resolver for live editing: ``*`` and ``_`` runs
pair up as usual, and an opener that is never closed is rendered as emphasis
running to the end of its block instead of falling back to plain text.

Quick Start:
    >>> from partial_emphasis import parse_inline
    >>> parts = parse_inline("*closed* and **open")
    >>> [(p.name, p.start, p.end) for p in parts]
    [('Emphasis', 0, 8), ('StrongEmphasis', 13, 19)]

Pipeline:
    scan_delimiter          → DelimiterRun (per marker run)
    match_delimiters        → Span (matched + unterminated)
    build_nested_elements   → Element tree (clipped, properly nested)
    merge_parts             → the region's new content sequence

Host integration:
    Hosts that run their own tokenizer use the ``PartialEmphasis`` extension:
    its inline hook registers runs on an ``InlineContext`` and its resolver
    rewrites ``cx.parts`` once the region has been scanned.

Configuration:
    >>> from partial_emphasis import ResolveConfig, resolve_config_context
    >>> with resolve_config_context(ResolveConfig(extend_unclosed=False)):
    ...     parts = parse_inline("*open")

"""

from partial_emphasis.config import (
    ResolveConfig,
    get_resolve_config,
    reset_resolve_config,
    resolve_config_context,
    set_resolve_config,
)
from partial_emphasis.context import InlineContext
from partial_emphasis.errors import (
    DelimiterError,
    ExtensionError,
    NestingDepthError,
    NodeTypeError,
    PartialEmphasisError,
)
from partial_emphasis.extension import (
    EXTENSIONS,
    InlineExtension,
    InlineHook,
    get_extension,
    register_extension,
)
from partial_emphasis.emphasis import (
    PartialEmphasis,
    parse_partial_emphasis,
    resolve_partial_emphasis,
)
from partial_emphasis.inline import InlineParser, parse_inline
from partial_emphasis.matcher import Span, match_delimiters
from partial_emphasis.merge import merge_parts
from partial_emphasis.nodes import (
    EMPHASIS,
    EMPHASIS_MARK,
    STRONG_EMPHASIS,
    Element,
    HostNode,
    NodeType,
    NodeTypeRegistry,
    SpanKind,
)
from partial_emphasis.scanner import classify_run, scan_delimiter
from partial_emphasis.tokens import DelimiterRun, InlinePart, Side
from partial_emphasis.tree import build_nested_elements

__version__ = "0.1.0"

__all__ = [
    # Pipeline
    "build_nested_elements",
    "classify_run",
    "match_delimiters",
    "merge_parts",
    "scan_delimiter",
    # Host integration
    "EXTENSIONS",
    "InlineContext",
    "InlineExtension",
    "InlineHook",
    "InlineParser",
    "PartialEmphasis",
    "get_extension",
    "parse_inline",
    "parse_partial_emphasis",
    "register_extension",
    "resolve_partial_emphasis",
    # Data types
    "DelimiterRun",
    "EMPHASIS",
    "EMPHASIS_MARK",
    "Element",
    "HostNode",
    "InlinePart",
    "NodeType",
    "NodeTypeRegistry",
    "STRONG_EMPHASIS",
    "Side",
    "Span",
    "SpanKind",
    # Configuration
    "ResolveConfig",
    "get_resolve_config",
    "reset_resolve_config",
    "resolve_config_context",
    "set_resolve_config",
    # Errors
    "DelimiterError",
    "ExtensionError",
    "NestingDepthError",
    "NodeTypeError",
    "PartialEmphasisError",
    "__version__",
]
