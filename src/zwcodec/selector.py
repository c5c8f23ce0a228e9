"""Compression strategy selection.

This module builds one candidate output per enabled strategy, measures the
serialized size of each, and keeps the smallest. Sizes are measured in UTF-8
bytes, not characters: every zero-width symbol occupies 3 bytes on disk.

Ties are resolved by a fixed priority so the result never depends on
comparison order:

    COMPRESS_THEN_ENCODE  >  ENCODE_THEN_COMPRESS  >  NONE

With the default two-strategy configuration this means an exact tie between
the compressed and the direct stream selects the compressed one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .codec.bitpack import encode_bits
from .config import DEFAULT_CONFIG, CodecConfig
from .exceptions import EncodeError
from .framing.markers import apply_marker
from .models.strategy import TIE_BREAK_PRIORITY, Strategy

logger = logging.getLogger(__name__)

TEXT_ENCODING = "utf-8"


@dataclass(frozen=True)
class Candidate:
    """One strategy's serialized output.

    Attributes:
        strategy: Strategy that produced the output
        data: Serialized output (UTF-8 text for text strategies)
    """

    strategy: Strategy
    data: bytes

    @property
    def size(self) -> int:
        """Serialized size in bytes."""
        return len(self.data)

    def sort_key(self) -> tuple[int, int]:
        """Selection order: smaller size first, then tie-break priority."""
        return (self.size, TIE_BREAK_PRIORITY[self.strategy])


@dataclass(frozen=True)
class EncodeResult:
    """Outcome of encoding a payload.

    Attributes:
        strategy: Strategy that was selected
        data: Serialized output, ready to be written to a file
        input_size: Size of the original payload in bytes
        candidates: Every candidate that was measured, in selection order
    """

    strategy: Strategy
    data: bytes
    input_size: int
    candidates: tuple[Candidate, ...] = ()

    @property
    def size(self) -> int:
        """Serialized output size in bytes."""
        return len(self.data)

    @property
    def ratio(self) -> float:
        """Output size relative to input size (0.0 for empty input)."""
        if self.input_size == 0:
            return 0.0
        return self.size / self.input_size

    @property
    def text(self) -> str:
        """The encoded stream as text.

        Raises:
            EncodeError: If the selected strategy produces binary output
        """
        if not self.strategy.is_text:
            raise EncodeError(
                f"Strategy {self.strategy.name} produces binary output, not an encoded stream"
            )
        return self.data.decode(TEXT_ENCODING)


def _build_candidate(
    strategy: Strategy,
    data: bytes,
    direct_stream: str,
    config: CodecConfig,
) -> Candidate:
    alphabet = config.alphabet
    compressor = config.backend

    if strategy is Strategy.NONE:
        stream = direct_stream
    elif strategy is Strategy.COMPRESS_THEN_ENCODE:
        stream = apply_marker(strategy, encode_bits(compressor.compress(data), alphabet), alphabet)
    elif strategy is Strategy.ENCODE_THEN_COMPRESS:
        text = apply_marker(strategy, direct_stream, alphabet)
        return Candidate(strategy, compressor.compress(text.encode(TEXT_ENCODING)))
    else:
        raise EncodeError(f"Unsupported strategy: {strategy!r}")

    return Candidate(strategy, stream.encode(TEXT_ENCODING))


def compare_strategies(
    data: bytes,
    config: Optional[CodecConfig] = None,
    *,
    text_only: bool = False,
) -> list[Candidate]:
    """Build and measure a candidate for every configured strategy.

    Strategy.NONE is always included. A strategy whose compressor call fails
    is left out (with a warning) instead of failing the whole operation.

    Args:
        data: Payload to encode
        config: Codec configuration (default: DEFAULT_CONFIG)
        text_only: Skip strategies whose output is binary

    Returns:
        Candidates sorted in selection order (winner first)
    """
    config = config or DEFAULT_CONFIG
    direct_stream = encode_bits(data, config.alphabet)

    strategies = [Strategy.NONE]
    for strategy in config.strategies:
        if strategy in strategies or (text_only and not strategy.is_text):
            continue
        strategies.append(strategy)

    candidates: list[Candidate] = []
    for strategy in strategies:
        try:
            candidate = _build_candidate(strategy, data, direct_stream, config)
        except EncodeError:
            raise
        except Exception as e:
            # Direct encoding cannot fail, so NONE always survives
            logger.warning("Skipping %s: compression failed (%s)", strategy.name, e)
            continue
        logger.debug("%s candidate: %d bytes", strategy.name, candidate.size)
        candidates.append(candidate)

    candidates.sort(key=Candidate.sort_key)
    return candidates


def choose_and_encode(
    data: bytes,
    enable_compression: bool = False,
    *,
    config: Optional[CodecConfig] = None,
    text_only: bool = False,
) -> EncodeResult:
    """Encode ``data`` with the smallest available strategy.

    Without compression the output is the plain symbol stream. With
    compression every configured strategy is measured and the smallest
    serialized output wins; ties follow TIE_BREAK_PRIORITY. The result is a
    pure function of ``data`` and the configuration.

    Args:
        data: Payload to encode
        enable_compression: Consider compressed strategies
        config: Codec configuration (default: DEFAULT_CONFIG)
        text_only: Only consider strategies that produce an encoded stream

    Returns:
        EncodeResult describing the selected output

    Example:
        >>> result = choose_and_encode(b"abc" * 1000, enable_compression=True)
        >>> result.strategy
        <Strategy.COMPRESS_THEN_ENCODE: 'compress_then_encode'>
    """
    config = config or DEFAULT_CONFIG

    if not enable_compression:
        stream = encode_bits(data, config.alphabet)
        candidate = Candidate(Strategy.NONE, stream.encode(TEXT_ENCODING))
        return EncodeResult(Strategy.NONE, candidate.data, len(data), (candidate,))

    candidates = compare_strategies(data, config, text_only=text_only)
    winner = candidates[0]
    logger.debug(
        "Selected %s (%d bytes) for %d input bytes", winner.strategy.name, winner.size, len(data)
    )
    return EncodeResult(winner.strategy, winner.data, len(data), tuple(candidates))
