"""Compression backends for zwcodec."""

from __future__ import annotations

from .base import Compressor
from .brotli_codec import DEFAULT_COMPRESSOR, MAX_QUALITY, BrotliCompressor, compress, decompress

__all__ = [
    "Compressor",
    "BrotliCompressor",
    "DEFAULT_COMPRESSOR",
    "MAX_QUALITY",
    "compress",
    "decompress",
]
