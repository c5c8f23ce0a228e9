"""Full payload encode/decode.

encode() selects a strategy and serializes the payload. decode() accepts
whatever encode() produced (an encoded stream as text, its UTF-8 bytes, or
the binary Encode-then-Compress container) and returns the original bytes.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from .codec.decoder import DecodeResult, decode_bits
from .config import DEFAULT_CONFIG, CodecConfig
from .exceptions import CorruptPayloadError, DecodeError
from .models.strategy import Strategy
from .selector import TEXT_ENCODING, EncodeResult, choose_and_encode

logger = logging.getLogger(__name__)


def encode(
    data: bytes,
    compress: bool = False,
    *,
    config: Optional[CodecConfig] = None,
    text_only: bool = False,
) -> EncodeResult:
    """Encode a payload into invisible characters.

    Args:
        data: Payload to encode
        compress: Try compressed strategies and keep the smallest output
        config: Codec configuration (default: DEFAULT_CONFIG)
        text_only: Never select a strategy with binary output

    Returns:
        EncodeResult; ``result.data`` is what should be stored

    Examples:
        ```python
        from zwcodec import decode, encode

        result = encode(b"Hello World!", compress=True)
        hidden = result.text
        assert decode(hidden).data == b"Hello World!"
        ```
    """
    return choose_and_encode(data, compress, config=config, text_only=text_only)


def decode_text(stream: str, *, config: Optional[CodecConfig] = None) -> DecodeResult:
    """Decode an encoded stream, decompressing if its marker says so.

    Args:
        stream: Encoded stream
        config: Codec configuration (default: DEFAULT_CONFIG)

    Returns:
        DecodeResult with the original payload

    Raises:
        UnrecognizedCharacterError: Foreign character in strict mode
        CorruptPayloadError: Marker claims compression but decompression fails
    """
    config = config or DEFAULT_CONFIG
    result = decode_bits(stream, config.alphabet, strict=config.strict)

    if result.strategy is not Strategy.COMPRESS_THEN_ENCODE:
        return result

    logger.debug("Decompressing %d bytes", len(result.data))
    data = config.backend.decompress(result.data)
    return DecodeResult(data, result.strategy, result.dropped_symbols)


def _starts_like_stream(text: str, config: CodecConfig) -> bool:
    if not text:
        return True
    alphabet = config.alphabet
    leading = {alphabet.zero, alphabet.one}
    marker = alphabet.marker_for(Strategy.COMPRESS_THEN_ENCODE)
    if marker is not None:
        leading.add(marker)
    return text[0] in leading


def decode_container(payload: bytes, *, config: Optional[CodecConfig] = None) -> DecodeResult:
    """Decode a binary Encode-then-Compress container.

    Raises:
        CorruptPayloadError: If decompression fails or the result is not text
        DecodeError: If the decompressed stream lacks the container marker
    """
    config = config or DEFAULT_CONFIG
    inner = config.backend.decompress(payload)
    try:
        stream = inner.decode(TEXT_ENCODING)
    except UnicodeDecodeError as e:
        raise CorruptPayloadError(f"Decompressed container is not UTF-8 text: {e}") from e

    result = decode_bits(stream, config.alphabet, strict=config.strict)
    if result.strategy is not Strategy.ENCODE_THEN_COMPRESS:
        raise DecodeError(
            f"Compressed container declares {result.strategy.name}, "
            f"expected {Strategy.ENCODE_THEN_COMPRESS.name}"
        )
    return result


def decode(
    payload: Union[bytes, str],
    *,
    config: Optional[CodecConfig] = None,
) -> DecodeResult:
    """Decode anything produced by encode().

    Text, or bytes that are UTF-8 text starting with a data symbol or the
    Compress-then-Encode marker, is treated as an encoded stream. Other bytes
    are tried as an Encode-then-Compress container first; if that fails and
    they are valid UTF-8, they are decoded as a plain stream so an
    unrecognized leading character is handled by the strict/lenient policy.

    Args:
        payload: Encoded stream or serialized output
        config: Codec configuration (default: DEFAULT_CONFIG)

    Returns:
        DecodeResult with the original payload and the strategy used

    Raises:
        CorruptPayloadError: If binary data cannot be decompressed
        UnrecognizedCharacterError: Foreign character in strict mode
        DecodeError: If a container does not carry the expected marker
    """
    config = config or DEFAULT_CONFIG

    if isinstance(payload, str):
        return decode_text(payload, config=config)

    try:
        text: Optional[str] = payload.decode(TEXT_ENCODING)
    except UnicodeDecodeError:
        text = None

    if text is not None and _starts_like_stream(text, config):
        return decode_text(text, config=config)

    logger.debug("Payload is not an encoded stream, treating it as a compressed container")
    try:
        return decode_container(payload, config=config)
    except DecodeError:
        if text is None:
            raise
        logger.debug("Not a compressed container, decoding as a plain stream")
        return decode_text(text, config=config)
