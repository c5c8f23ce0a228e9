"""File-level encode, decode and cleanup helpers."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Union

from .codec.decoder import DecodeResult
from .config import DEFAULT_CONFIG, CodecConfig
from .exceptions import DecodeError
from .pipeline import decode, decode_text, encode
from .runnable import extract_stream, generate_runnable, is_runnable
from .selector import TEXT_ENCODING, EncodeResult
from .utils.invisible import remove_invisibles

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]

ENCODED_SUFFIX = ".encoded"
DECODED_SUFFIX = ".decoded"


def default_encoded_path(input_path: PathLike) -> Path:
    """``<input>.encoded``"""
    path = Path(input_path)
    return path.with_name(path.name + ENCODED_SUFFIX)


def default_decoded_path(input_path: PathLike) -> Path:
    """Replace a trailing ``.encoded`` with ``.decoded``, else append ``.decoded``."""
    path = Path(input_path)
    if path.name.endswith(ENCODED_SUFFIX) and len(path.name) > len(ENCODED_SUFFIX):
        return path.with_name(path.name[: -len(ENCODED_SUFFIX)] + DECODED_SUFFIX)
    return path.with_name(path.name + DECODED_SUFFIX)


def default_cleaned_path(input_path: PathLike) -> Path:
    """Insert ``.cleaned`` before the last suffix (``doc.txt`` -> ``doc.cleaned.txt``)."""
    path = Path(input_path)
    if path.suffix:
        return path.with_name(f"{path.stem}.cleaned{path.suffix}")
    return path.with_name(path.name + ".cleaned")


def encode_file(
    input_path: PathLike,
    output_path: Optional[PathLike] = None,
    *,
    compress: bool = False,
    runnable: bool = False,
    config: Optional[CodecConfig] = None,
) -> tuple[Path, EncodeResult]:
    """Encode a file into invisible characters.

    Args:
        input_path: File to encode
        output_path: Destination (default: ``<input>.encoded``)
        compress: Try compressed strategies and keep the smallest
        runnable: Write a self-extracting script instead of the bare stream.
            Only text strategies are considered in this mode.
        config: Codec configuration (default: DEFAULT_CONFIG)

    Returns:
        Tuple of (output path, EncodeResult)
    """
    config = config or DEFAULT_CONFIG
    source = Path(input_path)
    target = Path(output_path) if output_path is not None else default_encoded_path(source)

    data = source.read_bytes()
    result = encode(data, compress, config=config, text_only=runnable)
    logger.info(
        "Encoded %s (%d bytes) with %s: %d bytes",
        source,
        len(data),
        result.strategy.name,
        result.size,
    )

    if runnable:
        script = generate_runnable(result.text, source.name, config.alphabet)
        target.write_text(script, encoding=TEXT_ENCODING)
        try:
            target.chmod(0o755)
        except OSError as e:
            logger.debug("Could not mark %s executable: %s", target, e)
    else:
        target.write_bytes(result.data)

    return target, result


def decode_file(
    input_path: PathLike,
    output_path: Optional[PathLike] = None,
    *,
    config: Optional[CodecConfig] = None,
) -> tuple[Path, DecodeResult]:
    """Decode a file written by encode_file().

    Runnable scripts are recognized and their embedded stream extracted.

    Args:
        input_path: Encoded file
        output_path: Destination (default: see default_decoded_path())
        config: Codec configuration (default: DEFAULT_CONFIG)

    Returns:
        Tuple of (output path, DecodeResult)

    Raises:
        FramingError: If a runnable script has no extractable payload
        CorruptPayloadError: If compressed content cannot be decompressed
        UnrecognizedCharacterError: Foreign character in strict mode
    """
    source = Path(input_path)
    target = Path(output_path) if output_path is not None else default_decoded_path(source)

    payload = source.read_bytes()
    result = _decode_payload(payload, config)
    if result.truncated:
        logger.warning("%s: dropped %d trailing symbols", source, result.dropped_symbols)

    target.write_bytes(result.data)
    logger.info(
        "Decoded %s with %s: %d bytes", source, result.strategy.name, len(result.data)
    )
    return target, result


def _decode_payload(payload: bytes, config: Optional[CodecConfig]) -> DecodeResult:
    try:
        text = payload.decode(TEXT_ENCODING)
    except UnicodeDecodeError:
        return decode(payload, config=config)

    if is_runnable(text):
        logger.debug("Runnable script detected, extracting embedded stream")
        return decode_text(extract_stream(text), config=config)
    return decode(payload, config=config)


def clean_file(input_path: PathLike, output_path: Optional[PathLike] = None) -> tuple[Path, int]:
    """Write a copy of a text file with invisible characters removed.

    Args:
        input_path: UTF-8 text file
        output_path: Destination (default: see default_cleaned_path())

    Returns:
        Tuple of (output path, number of characters removed)
    """
    source = Path(input_path)
    target = Path(output_path) if output_path is not None else default_cleaned_path(source)

    try:
        content = source.read_text(encoding=TEXT_ENCODING)
    except UnicodeDecodeError as e:
        raise DecodeError(f"{source} is not UTF-8 text: {e}") from e

    cleaned = remove_invisibles(content)
    target.write_text(cleaned, encoding=TEXT_ENCODING)
    removed = len(content) - len(cleaned)
    logger.info("Cleaned %s: removed %d characters", source, removed)
    return target, removed
