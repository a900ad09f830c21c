"""Compatibility and configuration layer for the parsers.

This module provides context managers that adjust how strictly content
is parsed, e.g. to read files from producers with known defects.
"""

from .parser_compat import (
    enable_relaxed_end,
    get_max_nesting_depth,
    is_relaxed_end_enabled,
    max_nesting_depth,
)

__all__ = [
    "enable_relaxed_end",
    "get_max_nesting_depth",
    "is_relaxed_end_enabled",
    "max_nesting_depth",
]
