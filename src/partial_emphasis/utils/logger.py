"""Minimal logging utilities for Partial Emphasis.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from partial_emphasis.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Resolving inline region")
"""

from __future__ import annotations

import logging

_ROOT = "partial_emphasis"


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "partial_emphasis." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("matcher")
        >>> logger.name
        'partial_emphasis.matcher'
    """
    if not (name == _ROOT or name.startswith(f"{_ROOT}.")):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
