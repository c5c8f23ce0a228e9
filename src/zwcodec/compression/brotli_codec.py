"""Brotli compressor configured for maximum compression ratio."""

from __future__ import annotations

import logging

import brotli

from ..exceptions import CompressionError, CorruptPayloadError
from .base import Compressor

logger = logging.getLogger(__name__)

MAX_QUALITY = 11


class BrotliCompressor(Compressor):
    """Brotli backend.

    Defaults trade speed for size (quality 11, generic mode), so compress()
    can take noticeable CPU time on large inputs.

    Args:
        quality: Brotli quality level (0-11)
        mode: Brotli mode (brotli.MODE_GENERIC, MODE_TEXT or MODE_FONT)
    """

    name = "brotli"

    def __init__(self, quality: int = MAX_QUALITY, mode: int = brotli.MODE_GENERIC) -> None:
        if not 0 <= quality <= MAX_QUALITY:
            raise ValueError(f"quality must be 0-{MAX_QUALITY}, got {quality}")
        self.quality = quality
        self.mode = mode

    def compress(self, data: bytes) -> bytes:
        try:
            return brotli.compress(data, mode=self.mode, quality=self.quality)
        except Exception as e:
            logger.debug("Brotli compression of %d bytes failed: %s", len(data), e)
            raise CompressionError(f"Brotli compression failed: {e}") from e

    def decompress(self, data: bytes) -> bytes:
        try:
            return brotli.decompress(data)
        except brotli.error as e:
            logger.debug("Brotli decompression of %d bytes failed: %s", len(data), e)
            raise CorruptPayloadError(f"Payload is not valid Brotli data: {e}") from e

    def __repr__(self) -> str:
        return f"BrotliCompressor(quality={self.quality}, mode={self.mode})"


DEFAULT_COMPRESSOR = BrotliCompressor()


def compress(data: bytes) -> bytes:
    """Compress ``data`` with the default maximum-ratio Brotli settings."""
    return DEFAULT_COMPRESSOR.compress(data)


def decompress(data: bytes) -> bytes:
    """Decompress Brotli ``data``.

    Raises:
        CorruptPayloadError: If ``data`` is not valid Brotli data
    """
    return DEFAULT_COMPRESSOR.decompress(data)
