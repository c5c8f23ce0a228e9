"""Symbol stream decoder.

This module provides decode_bits(), which turns an encoded stream back into
bytes and reports the strategy its marker declares. It does not decompress;
see zwcodec.pipeline for the full payload decoder.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..framing.markers import strip_marker
from ..models.alphabet import DEFAULT_ALPHABET, Alphabet
from ..models.strategy import Strategy
from .bitpack import SymbolReader


@dataclass(frozen=True)
class DecodeResult:
    """Outcome of decoding a stream.

    Attributes:
        data: Reconstructed bytes
        strategy: Strategy declared by the stream's marker
        dropped_symbols: Trailing symbols that did not form a complete byte
    """

    data: bytes
    strategy: Strategy
    dropped_symbols: int = 0

    @property
    def truncated(self) -> bool:
        """Whether an incomplete trailing byte was discarded."""
        return self.dropped_symbols > 0


def decode_bits(
    stream: str,
    alphabet: Alphabet = DEFAULT_ALPHABET,
    *,
    strict: bool = True,
) -> DecodeResult:
    """Decode a (possibly marked) symbol stream into bytes.

    The leading marker, if any, is stripped and reported. The remaining symbols
    are read in groups of 8, most significant bit first. A trailing group
    shorter than 8 symbols is discarded silently and counted in
    ``dropped_symbols``; this is never an error.

    Args:
        stream: Encoded stream
        alphabet: Alphabet the stream was encoded with
        strict: If True, a character that is neither data symbol raises
            UnrecognizedCharacterError; if False it decodes as bit 0

    Returns:
        DecodeResult with the bytes and the detected strategy

    Raises:
        UnrecognizedCharacterError: Foreign character in strict mode

    Example:
        >>> decode_bits(encode_bits(b"hi")).data
        b'hi'
    """
    strategy, remainder = strip_marker(stream, alphabet)
    offset = len(stream) - len(remainder)

    reader = SymbolReader(remainder, alphabet, strict=strict, offset=offset)
    data = reader.read_bytes()
    dropped = reader.symbols_remaining()

    # Dropped symbols still have to be valid in strict mode
    if strict and dropped:
        while reader.symbols_remaining():
            reader.read_bit()

    return DecodeResult(data=data, strategy=strategy, dropped_symbols=dropped)
