"""Unit tests for full payload encode/decode."""

from __future__ import annotations

import pytest

from zwcodec import (
    DEFAULT_ALPHABET,
    CodecConfig,
    CorruptPayloadError,
    DecodeError,
    Strategy,
    UnrecognizedCharacterError,
    decode,
    decode_container,
    decode_text,
    encode,
    encode_bits,
)
from zwcodec.compression import compress

CTE_MARKER = DEFAULT_ALPHABET.markers[Strategy.COMPRESS_THEN_ENCODE]
ETC_MARKER = DEFAULT_ALPHABET.markers[Strategy.ENCODE_THEN_COMPRESS]


class TestEncodeDecode:
    """Test round-trips through every strategy."""

    def test_uncompressed(self, sample_payload: bytes) -> None:
        """Plain stream round-trip."""
        result = encode(sample_payload)
        decoded = decode(result.text)

        assert decoded.data == sample_payload
        assert decoded.strategy is Strategy.NONE

    def test_compressed(self, repetitive_payload: bytes) -> None:
        """Compress-then-encode round-trip."""
        result = encode(repetitive_payload, compress=True)
        decoded = decode(result.text)

        assert result.strategy is Strategy.COMPRESS_THEN_ENCODE
        assert decoded.strategy is Strategy.COMPRESS_THEN_ENCODE
        assert decoded.data == repetitive_payload

    def test_serialized_bytes(self, repetitive_payload: bytes) -> None:
        """The UTF-8 bytes of a stream decode like the stream itself."""
        result = encode(repetitive_payload, compress=True)

        assert decode(result.data).data == repetitive_payload

    def test_all_byte_values_both_paths(self, all_byte_values: bytes) -> None:
        """Every byte value survives the plain and the compressed path."""
        plain = encode_bits(all_byte_values)
        compressed = CTE_MARKER + encode_bits(compress(all_byte_values))

        assert decode(plain).data == all_byte_values
        assert decode(compressed).data == all_byte_values
        assert decode(compressed).strategy is Strategy.COMPRESS_THEN_ENCODE

    def test_empty(self) -> None:
        """Empty payloads round-trip."""
        assert decode(encode(b"").text).data == b""
        assert decode(b"").data == b""
        assert decode("").strategy is Strategy.NONE

    def test_compressed_empty(self) -> None:
        """Empty input still round-trips with compression enabled."""
        result = encode(b"", compress=True, config=CodecConfig.extended())
        assert decode(result.data, config=CodecConfig.extended()).data == b""


class TestEncodeThenCompress:
    """Test the binary container strategy."""

    def test_container_roundtrip(self, repetitive_payload: bytes) -> None:
        """A container decodes back to the original bytes."""
        container = compress((ETC_MARKER + encode_bits(repetitive_payload)).encode("utf-8"))
        decoded = decode(container)

        assert decoded.strategy is Strategy.ENCODE_THEN_COMPRESS
        assert decoded.data == repetitive_payload

    def test_decode_container_directly(self, sample_payload: bytes) -> None:
        """decode_container accepts the compressed bytes."""
        container = compress((ETC_MARKER + encode_bits(sample_payload)).encode("utf-8"))

        assert decode_container(container).data == sample_payload

    def test_container_without_marker(self, sample_payload: bytes) -> None:
        """A container must declare Encode-then-Compress."""
        container = compress(encode_bits(sample_payload).encode("utf-8"))

        with pytest.raises(DecodeError, match="ENCODE_THEN_COMPRESS"):
            decode_container(container)

    def test_container_not_text(self) -> None:
        """Decompressed content must be UTF-8."""
        with pytest.raises(CorruptPayloadError, match="UTF-8"):
            decode_container(compress(b"\xff\xfe\xfd"))

    def test_encode_selects_container(self) -> None:
        """encode() produces a decodable container when it is smallest."""
        data = bytes(range(16)) * 200
        config = CodecConfig.extended()
        result = encode(data, compress=True, config=config)

        assert decode(result.data, config=config).data == data


class TestDecodeErrors:
    """Test decode failure modes."""

    def test_corrupt_compressed_stream(self) -> None:
        """A compression marker over garbage raises CorruptPayloadError."""
        stream = CTE_MARKER + encode_bits(b"\xff\xff\xff\xff not brotli")

        with pytest.raises(CorruptPayloadError):
            decode(stream)

    def test_corrupt_container(self) -> None:
        """Binary input that is not Brotli raises CorruptPayloadError."""
        with pytest.raises(CorruptPayloadError):
            decode(b"\xff\xff\xff\xff not brotli")

    def test_foreign_character_strict(self) -> None:
        """Strict decoding rejects foreign characters."""
        with pytest.raises(UnrecognizedCharacterError):
            decode_text(encode_bits(b"ab") + "!")

    def test_foreign_character_lenient(self) -> None:
        """Lenient decoding maps them to bit 0."""
        stream = "!" + encode_bits(b"\xff")[1:] + encode_bits(b"b")
        result = decode_text(stream, config=CodecConfig(strict=False))

        assert result.data == b"\x7fb"

    def test_foreign_leading_character_bytes_lenient(self) -> None:
        """Serialized streams with a foreign first character decode leniently too."""
        stream = "!" + encode_bits(b"\xff")[1:] + encode_bits(b"b")
        result = decode(stream.encode("utf-8"), config=CodecConfig(strict=False))

        assert result.data == b"\x7fb"
        assert result.strategy is Strategy.NONE

    def test_foreign_leading_character_bytes_strict(self) -> None:
        """Cover text that is not a container reports the foreign character."""
        stream = "Hi" + encode_bits(b"secret")

        with pytest.raises(UnrecognizedCharacterError) as exc_info:
            decode(stream.encode("utf-8"))

        assert exc_info.value.character == "H"
        assert exc_info.value.position == 0
