"""Unit tests for CodecConfig."""

from __future__ import annotations

import dataclasses

import pytest

from zwcodec import (
    BASIC_STRATEGIES,
    DEFAULT_CONFIG,
    EXTENDED_STRATEGIES,
    Alphabet,
    BrotliCompressor,
    CodecConfig,
    Strategy,
    UnrecognizedCharacterError,
    decode_text,
)


class TestCodecConfig:
    """Tests for CodecConfig validation."""

    def test_defaults(self) -> None:
        """Test default configuration values."""
        config = CodecConfig()

        assert config.strategies == BASIC_STRATEGIES
        assert config.brotli_quality == 11
        assert config.strict is True
        assert isinstance(config.backend, BrotliCompressor)
        assert config.backend.quality == 11

    def test_compressor_follows_quality(self) -> None:
        """The default compressor is built from brotli_quality."""
        assert CodecConfig(brotli_quality=4).backend.quality == 4

    def test_explicit_compressor(self) -> None:
        """An explicit compressor is used as given."""
        compressor = BrotliCompressor(quality=1)
        assert CodecConfig(compressor=compressor).backend is compressor

    def test_extended(self) -> None:
        """The extended preset enables all three strategies."""
        config = CodecConfig.extended(strict=False)

        assert config.strategies == EXTENDED_STRATEGIES
        assert config.strict is False

    def test_strategies_list_becomes_tuple(self) -> None:
        """Strategies given as a list are stored as a tuple."""
        config = CodecConfig(strategies=[Strategy.COMPRESS_THEN_ENCODE])  # type: ignore[arg-type]
        assert config.strategies == (Strategy.COMPRESS_THEN_ENCODE,)

    def test_invalid_quality_raises(self) -> None:
        """Test that out-of-range quality raises ValueError."""
        with pytest.raises(ValueError, match="brotli_quality must be 0-11"):
            CodecConfig(brotli_quality=12)

    def test_empty_strategies_raises(self) -> None:
        """Test that an empty strategy set raises ValueError."""
        with pytest.raises(ValueError, match="must not be empty"):
            CodecConfig(strategies=())

    def test_unsupported_strategy_raises(self) -> None:
        """Every strategy needs a marker in the alphabet."""
        alphabet = Alphabet(zero="0", one="1")
        with pytest.raises(ValueError, match="no marker"):
            CodecConfig(alphabet=alphabet)


class TestImmutability:
    """The shared default configuration cannot be changed."""

    def test_default_stays_strict(self) -> None:
        """A failed mutation leaves decoding strict."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_CONFIG.strict = False  # type: ignore[misc]

        assert DEFAULT_CONFIG.strict is True
        with pytest.raises(UnrecognizedCharacterError):
            decode_text("x" * 8)

    def test_replace(self) -> None:
        """Variants are derived with dataclasses.replace()."""
        lenient = dataclasses.replace(DEFAULT_CONFIG, strict=False)

        assert lenient.strict is False
        assert DEFAULT_CONFIG.strict is True
        assert decode_text("x" * 8, config=lenient).data == b"\x00"
