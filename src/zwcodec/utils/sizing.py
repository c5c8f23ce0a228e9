"""Encoded size calculation utilities.

This module provides functions to calculate the size of an uncompressed
encoded stream without actually encoding it.
"""

from __future__ import annotations

from typing import Union

from ..models.alphabet import DEFAULT_ALPHABET, Alphabet

SYMBOLS_PER_BYTE = 8


def encoded_symbols(data_or_length: Union[bytes, int]) -> int:
    """Number of symbols the uncompressed stream needs.

    Args:
        data_or_length: Payload or its length in bytes

    Returns:
        Symbol count (8 per byte)

    Example:
        >>> encoded_symbols(b"abc")
        24
    """
    length = data_or_length if isinstance(data_or_length, int) else len(data_or_length)
    if length < 0:
        raise ValueError(f"Length must be >= 0, got {length}")
    return length * SYMBOLS_PER_BYTE


def encoded_size(
    data_or_length: Union[bytes, int],
    alphabet: Alphabet = DEFAULT_ALPHABET,
) -> int:
    """Size in UTF-8 bytes of the uncompressed stream.

    Both data symbols must encode to the same number of bytes for the result
    to be exact; with the default alphabet every symbol is 3 bytes.

    Args:
        data_or_length: Payload or its length in bytes
        alphabet: Alphabet the stream would use

    Returns:
        Serialized size in bytes

    Example:
        >>> encoded_size(b"abc")
        72  # 24 symbols * 3 bytes
    """
    symbol_bytes = max(len(alphabet.zero.encode("utf-8")), len(alphabet.one.encode("utf-8")))
    return encoded_symbols(data_or_length) * symbol_bytes
