"""Unit tests for symbol writer/reader."""

from __future__ import annotations

import pytest

from zwcodec.codec.bitpack import SymbolReader, SymbolWriter, encode_bits
from zwcodec.exceptions import UnrecognizedCharacterError
from zwcodec.models import DEFAULT_ALPHABET

ZERO = DEFAULT_ALPHABET.zero
ONE = DEFAULT_ALPHABET.one


class TestSymbolWriter:
    """Test SymbolWriter functionality."""

    def test_write_bit(self) -> None:
        """Test writing single bits."""
        writer = SymbolWriter()
        writer.write_bit(1)
        writer.write_bit(0)
        writer.write_bit(1)

        assert writer.symbol_count() == 3
        assert writer.to_text() == ONE + ZERO + ONE

    def test_write_bit_bounds(self) -> None:
        """Test bit value checking."""
        writer = SymbolWriter()

        with pytest.raises(ValueError, match="0 or 1"):
            writer.write_bit(2)

    def test_write_byte_msb_first(self) -> None:
        """Test bytes are written most significant bit first."""
        writer = SymbolWriter()
        writer.write_byte(0xA0)  # 10100000

        assert writer.to_text() == ONE + ZERO + ONE + ZERO * 5

    def test_write_byte_bounds(self) -> None:
        """Test byte range checking."""
        writer = SymbolWriter()

        with pytest.raises(ValueError, match="0-255"):
            writer.write_byte(256)

        with pytest.raises(ValueError, match="0-255"):
            writer.write_byte(-1)

    def test_write_bytes(self) -> None:
        """Test writing raw bytes."""
        writer = SymbolWriter()
        writer.write_bytes(b"\x12\x34")

        assert writer.symbol_count() == 16

    def test_empty_writer(self) -> None:
        """Test empty symbol writer."""
        writer = SymbolWriter()
        assert writer.symbol_count() == 0
        assert writer.to_text() == ""


class TestSymbolReader:
    """Test SymbolReader functionality."""

    def test_read_bit(self) -> None:
        """Test reading single bits."""
        reader = SymbolReader(ONE + ZERO + ONE)

        assert reader.read_bit() == 1
        assert reader.read_bit() == 0
        assert reader.read_bit() == 1

    def test_read_byte(self) -> None:
        """Test reading a byte."""
        reader = SymbolReader(encode_bits(b"\xfc"))

        assert reader.read_byte() == 0xFC

    def test_read_bytes_leaves_partial_group(self) -> None:
        """Test read_bytes stops before an incomplete byte."""
        reader = SymbolReader(encode_bits(b"\x12\x34") + ONE * 3)

        assert reader.read_bytes() == b"\x12\x34"
        assert reader.symbols_remaining() == 3
        assert reader.position() == 16

    def test_not_enough_symbols(self) -> None:
        """Test error on reading an incomplete byte."""
        reader = SymbolReader(ONE * 7)

        with pytest.raises(IndexError, match="Not enough symbols"):
            reader.read_byte()

    def test_read_past_end(self) -> None:
        """Test error on reading past end."""
        reader = SymbolReader(ONE)
        reader.read_bit()

        with pytest.raises(IndexError, match="past end"):
            reader.read_bit()

    def test_strict_rejects_foreign_character(self) -> None:
        """Test strict mode raises with the offending position."""
        reader = SymbolReader(ZERO + "x" + ZERO, offset=10)
        reader.read_bit()

        with pytest.raises(UnrecognizedCharacterError) as excinfo:
            reader.read_bit()

        assert excinfo.value.character == "x"
        assert excinfo.value.position == 11

    def test_lenient_reads_foreign_character_as_zero(self) -> None:
        """Test lenient mode maps foreign characters to bit 0."""
        reader = SymbolReader("x" + ONE * 7, strict=False)

        assert reader.read_byte() == 0x7F


class TestRoundTrip:
    """Test round-trip writing/reading."""

    def test_roundtrip_bits(self) -> None:
        """Test bit round-trip."""
        writer = SymbolWriter()
        for bit in (1, 0, 0, 1, 1):
            writer.write_bit(bit)

        reader = SymbolReader(writer.to_text())
        assert [reader.read_bit() for _ in range(5)] == [1, 0, 0, 1, 1]

    def test_roundtrip_bytes(self) -> None:
        """Test byte round-trip."""
        writer = SymbolWriter()
        writer.write_bytes(b"\x00\x7f\x80\xff")

        reader = SymbolReader(writer.to_text())
        assert reader.read_bytes() == b"\x00\x7f\x80\xff"
        assert reader.symbols_remaining() == 0
