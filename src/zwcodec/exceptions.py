"""Exception hierarchy for zwcodec.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from ZwcodecError for easy catching of any zwcodec-specific error.
"""

from __future__ import annotations


class ZwcodecError(Exception):
    """Base exception for all zwcodec errors."""

    pass


class EncodeError(ZwcodecError):
    """Raised when encoding a payload fails.

    Examples:
        - Strategy has no marker in the configured alphabet
        - Text requested for a strategy whose output is binary
    """

    pass


class DecodeError(ZwcodecError):
    """Raised when decoding an encoded stream fails.

    Examples:
        - Foreign character inside the data region (strict mode)
        - Compressed payload that cannot be decompressed
        - Container that does not carry the expected marker
    """

    pass


class CorruptPayloadError(DecodeError):
    """Raised when a stream claims compression but does not decompress.

    Retrying cannot help: the same bytes will fail the same way.
    """

    pass


class UnrecognizedCharacterError(DecodeError):
    """Raised in strict mode for a character that is neither data symbol.

    Attributes:
        character: The offending character
        position: Index of the character in the stream passed to the decoder
    """

    def __init__(self, character: str, position: int) -> None:
        self.character = character
        self.position = position
        super().__init__(
            f"Unrecognized character U+{ord(character):04X} at position {position}"
        )


class CompressionError(ZwcodecError):
    """Raised when the compressor fails while compressing.

    The strategy selector catches this and falls back to direct encoding.
    """

    pass


class FramingError(ZwcodecError):
    """Raised when a wrapper around an encoded stream cannot be parsed.

    Examples:
        - Runnable script without an embedded payload literal
        - Payload literal containing non-stream characters
    """

    pass
