"""Alphabet and strategy models for zwcodec."""

from __future__ import annotations

from .alphabet import (
    DEFAULT_ALPHABET,
    WORD_JOINER,
    ZERO_WIDTH_JOINER,
    ZERO_WIDTH_NON_JOINER,
    ZERO_WIDTH_SPACE,
    Alphabet,
)
from .strategy import BASIC_STRATEGIES, EXTENDED_STRATEGIES, TIE_BREAK_PRIORITY, Strategy

__all__ = [
    "Alphabet",
    "DEFAULT_ALPHABET",
    "Strategy",
    "BASIC_STRATEGIES",
    "EXTENDED_STRATEGIES",
    "TIE_BREAK_PRIORITY",
    "ZERO_WIDTH_SPACE",
    "ZERO_WIDTH_NON_JOINER",
    "ZERO_WIDTH_JOINER",
    "WORD_JOINER",
]
