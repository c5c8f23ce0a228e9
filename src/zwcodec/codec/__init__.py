"""Invisible-character bit codec for zwcodec.

This module converts bytes to and from streams of zero-width symbols.
Compression and strategy selection live in zwcodec.selector and
zwcodec.pipeline.
"""

from __future__ import annotations

from .bitpack import SymbolReader, SymbolWriter, encode_bits
from .decoder import DecodeResult, decode_bits

__all__ = [
    "encode_bits",
    "decode_bits",
    "DecodeResult",
    "SymbolWriter",
    "SymbolReader",
]
