"""Bit-level conversion between bytes and invisible symbols.

This module provides the low-level writer and reader used by the bit codec.
Bytes are always emitted most significant bit first (big-endian bit order).
"""

from __future__ import annotations

from ..exceptions import UnrecognizedCharacterError
from ..models.alphabet import DEFAULT_ALPHABET, Alphabet


class SymbolWriter:
    """Writes bits as data symbols into a text buffer.

    Example:
        >>> writer = SymbolWriter()
        >>> writer.write_bytes(b"\\xff")
        >>> len(writer.to_text())
        8
    """

    def __init__(self, alphabet: Alphabet = DEFAULT_ALPHABET) -> None:
        """Initialize an empty writer for the given alphabet."""
        self._alphabet = alphabet
        self._symbols: list[str] = []

    def write_bit(self, bit: int) -> None:
        """Write a single bit.

        Args:
            bit: Bit value (0 or 1)

        Raises:
            ValueError: If bit is not 0 or 1
        """
        if bit not in (0, 1):
            raise ValueError(f"Bit must be 0 or 1, got {bit}")
        self._symbols.append(self._alphabet.symbol_for(bit))

    def write_byte(self, value: int) -> None:
        """Write one byte as 8 symbols, most significant bit first.

        Args:
            value: Byte value (0-255)

        Raises:
            ValueError: If value is out of range
        """
        if not 0 <= value <= 255:
            raise ValueError(f"Byte value must be 0-255, got {value}")

        zero, one = self._alphabet.zero, self._alphabet.one
        for i in range(7, -1, -1):
            self._symbols.append(one if (value >> i) & 1 else zero)

    def write_bytes(self, data: bytes) -> None:
        """Write every byte of ``data``."""
        for byte in data:
            self.write_byte(byte)

    def symbol_count(self) -> int:
        """Return the number of symbols written so far."""
        return len(self._symbols)

    def to_text(self) -> str:
        """Return the written symbols as a string."""
        return "".join(self._symbols)


class SymbolReader:
    """Reads bits back out of a string of data symbols.

    Characters are validated lazily as they are read. In strict mode a
    character that is neither data symbol raises UnrecognizedCharacterError;
    otherwise it reads as bit 0.

    Example:
        >>> reader = SymbolReader(encode_bits(b"A"))
        >>> reader.read_byte()
        65
    """

    def __init__(
        self,
        text: str,
        alphabet: Alphabet = DEFAULT_ALPHABET,
        *,
        strict: bool = True,
        offset: int = 0,
    ) -> None:
        """Initialize a reader over ``text``.

        Args:
            text: Symbol string to read
            alphabet: Alphabet the symbols belong to
            strict: Reject characters that are not data symbols
            offset: Position of ``text`` inside the caller's stream, used in errors
        """
        self._text = text
        self._alphabet = alphabet
        self._strict = strict
        self._offset = offset
        self._position = 0

    def read_bit(self) -> int:
        """Read a single bit.

        Raises:
            IndexError: If no more symbols are available
            UnrecognizedCharacterError: If the symbol is foreign (strict mode)
        """
        if self._position >= len(self._text):
            raise IndexError("Attempted to read past end of symbol stream")

        character = self._text[self._position]
        bit = self._alphabet.bit_for(character)
        if bit is None:
            if self._strict:
                raise UnrecognizedCharacterError(character, self._offset + self._position)
            bit = 0
        self._position += 1
        return bit

    def read_byte(self) -> int:
        """Read 8 symbols as one byte.

        Raises:
            IndexError: If fewer than 8 symbols remain
        """
        if self.symbols_remaining() < 8:
            raise IndexError(f"Not enough symbols: need 8, have {self.symbols_remaining()}")

        value = 0
        for _ in range(8):
            value = (value << 1) | self.read_bit()
        return value

    def read_bytes(self) -> bytes:
        """Read every complete byte left in the stream.

        A trailing group of fewer than 8 symbols is left unread.
        """
        result = bytearray()
        while self.symbols_remaining() >= 8:
            result.append(self.read_byte())
        return bytes(result)

    def symbols_remaining(self) -> int:
        """Return the number of unread symbols."""
        return len(self._text) - self._position

    def position(self) -> int:
        """Return the current read position in symbols."""
        return self._position


def encode_bits(data: bytes, alphabet: Alphabet = DEFAULT_ALPHABET) -> str:
    """Encode bytes as a stream of data symbols (no marker).

    Args:
        data: Bytes to encode
        alphabet: Alphabet to draw symbols from

    Returns:
        String of exactly ``8 * len(data)`` symbols
    """
    writer = SymbolWriter(alphabet)
    writer.write_bytes(data)
    return writer.to_text()
