"""Utility functions for zwcodec.

This module provides invisible character analysis and size calculation.
"""

from __future__ import annotations

from .invisible import (
    INVISIBLE_CHARACTERS,
    InvisibleCharacter,
    InvisiblePosition,
    InvisibleReport,
    analyze_invisibles,
    lookup,
    remove_invisibles,
)
from .sizing import SYMBOLS_PER_BYTE, encoded_size, encoded_symbols

__all__ = [
    # Invisible characters
    "INVISIBLE_CHARACTERS",
    "InvisibleCharacter",
    "InvisiblePosition",
    "InvisibleReport",
    "analyze_invisibles",
    "lookup",
    "remove_invisibles",
    # Sizing functions
    "SYMBOLS_PER_BYTE",
    "encoded_size",
    "encoded_symbols",
]
