"""Configuration for encoding and decoding.

This module provides the CodecConfig dataclass that carries the alphabet, the
set of strategies the selector may choose from, and the compressor settings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, cast

from .compression.base import Compressor
from .compression.brotli_codec import MAX_QUALITY, BrotliCompressor
from .models.alphabet import DEFAULT_ALPHABET, Alphabet
from .models.strategy import BASIC_STRATEGIES, EXTENDED_STRATEGIES, Strategy


@dataclass(frozen=True)
class CodecConfig:
    """Configuration shared by the selector and the payload decoder.

    Attributes:
        alphabet: Data symbols and strategy markers (default: U+200B/U+200C
            for bits, U+200D and U+2060 as markers)

        strategies: Strategies the selector may choose from when compression
            is enabled (default: NONE and COMPRESS_THEN_ENCODE).
            Strategy.NONE is always computed as the baseline, whether listed
            or not. Add ENCODE_THEN_COMPRESS to allow binary output.

        brotli_quality: Brotli quality level, 0-11 (default 11, maximum ratio).
            Ignored when an explicit compressor is given.

        strict: Reject characters that are neither data symbol while
            decoding (default True). When False they decode as bit 0.

        compressor: Compressor backend. Built from brotli_quality if omitted.

    Examples:
        ```python
        from zwcodec import CodecConfig, encode

        # Smallest output over all three strategies
        result = encode(data, compress=True, config=CodecConfig.extended())

        # Faster compression, lenient decoding
        config = CodecConfig(brotli_quality=5, strict=False)
        ```

    Instances are immutable; derive variants with dataclasses.replace().
    """

    alphabet: Alphabet = DEFAULT_ALPHABET
    strategies: tuple[Strategy, ...] = BASIC_STRATEGIES
    brotli_quality: int = MAX_QUALITY
    strict: bool = True
    compressor: Optional[Compressor] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if not 0 <= self.brotli_quality <= MAX_QUALITY:
            raise ValueError(
                f"brotli_quality must be 0-{MAX_QUALITY}, got {self.brotli_quality}"
            )

        object.__setattr__(self, "strategies", tuple(self.strategies))
        if not self.strategies:
            raise ValueError("strategies must not be empty")

        for strategy in self.strategies:
            if not isinstance(strategy, Strategy):
                raise ValueError(f"Unknown strategy: {strategy!r}")
            if not self.alphabet.supports(strategy):
                raise ValueError(f"Alphabet has no marker for strategy {strategy.name}")

        if self.compressor is None:
            object.__setattr__(self, "compressor", BrotliCompressor(quality=self.brotli_quality))

    @property
    def backend(self) -> Compressor:
        """The compressor in use, never None after construction."""
        return cast(Compressor, self.compressor)

    @classmethod
    def extended(cls, **kwargs: object) -> CodecConfig:
        """Configuration that also considers Encode-then-Compress."""
        return cls(strategies=EXTENDED_STRATEGIES, **kwargs)  # type: ignore[arg-type]


DEFAULT_CONFIG = CodecConfig()
