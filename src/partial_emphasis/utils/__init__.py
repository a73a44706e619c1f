"""Utility modules for Partial Emphasis.

Provides:
- logger: get_logger for namespaced logging
"""

from partial_emphasis.utils.logger import get_logger

__all__ = [
    "get_logger",
]
