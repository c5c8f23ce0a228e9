"""Stream framing utilities for zwcodec.

This module provides the strategy marker that prefixes an encoded stream.
"""

from __future__ import annotations

from .markers import apply_marker, strip_marker

__all__ = [
    "apply_marker",
    "strip_marker",
]
