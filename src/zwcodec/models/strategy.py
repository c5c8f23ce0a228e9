"""Compression strategies that can produce an encoded stream."""

from __future__ import annotations

import enum


class Strategy(enum.Enum):
    """How a payload was produced.

    Attributes:
        NONE: Raw bytes run straight through the bit codec (no marker)
        COMPRESS_THEN_ENCODE: Bytes compressed first, then bit-encoded
        ENCODE_THEN_COMPRESS: Bytes bit-encoded first, then the UTF-8 text is
            compressed (the output is binary, not text)
    """

    NONE = "none"
    COMPRESS_THEN_ENCODE = "compress_then_encode"
    ENCODE_THEN_COMPRESS = "encode_then_compress"

    @property
    def is_text(self) -> bool:
        """Whether this strategy serializes to an encoded text stream."""
        return self is not Strategy.ENCODE_THEN_COMPRESS


# Lower rank wins when two candidates serialize to the same size.
TIE_BREAK_PRIORITY: dict[Strategy, int] = {
    Strategy.COMPRESS_THEN_ENCODE: 0,
    Strategy.ENCODE_THEN_COMPRESS: 1,
    Strategy.NONE: 2,
}

BASIC_STRATEGIES: tuple[Strategy, ...] = (Strategy.NONE, Strategy.COMPRESS_THEN_ENCODE)
EXTENDED_STRATEGIES: tuple[Strategy, ...] = (
    Strategy.NONE,
    Strategy.COMPRESS_THEN_ENCODE,
    Strategy.ENCODE_THEN_COMPRESS,
)
