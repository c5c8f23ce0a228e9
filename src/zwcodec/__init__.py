"""zwcodec: Invisible Character Codec

A Python library that hides arbitrary bytes in zero-width Unicode characters
and recovers them losslessly. Each byte becomes eight invisible symbols; an
optional Brotli layer is tried and kept only when it makes the output smaller,
and a single invisible marker at the start of the stream tells the decoder
which strategy was used.

Key Features:
- Two-symbol bit codec (U+200B = 0, U+200C = 1), most significant bit first
- Size-driven strategy selection with a fixed, documented tie-break
- Self-describing streams: no external metadata needed to decode
- Self-extracting runnable scripts, invisible character analysis and cleanup

Quick Start:
    >>> from zwcodec import decode, encode
    >>>
    >>> result = encode(b"Hello World!", compress=True)
    >>> hidden = result.text
    >>> decode(hidden).data
    b'Hello World!'

Not an encryption system: anyone with this library can read a hidden payload.
"""

from __future__ import annotations

from .codec import DecodeResult, SymbolReader, SymbolWriter, decode_bits, encode_bits
from .compression import BrotliCompressor, Compressor
from .config import DEFAULT_CONFIG, CodecConfig
from .exceptions import (
    CompressionError,
    CorruptPayloadError,
    DecodeError,
    EncodeError,
    FramingError,
    UnrecognizedCharacterError,
    ZwcodecError,
)
from .files import clean_file, decode_file, encode_file
from .framing import apply_marker, strip_marker
from .models import (
    BASIC_STRATEGIES,
    DEFAULT_ALPHABET,
    EXTENDED_STRATEGIES,
    TIE_BREAK_PRIORITY,
    Alphabet,
    Strategy,
)
from .pipeline import decode, decode_container, decode_text, encode
from .runnable import extract_stream, generate_runnable, is_runnable
from .selector import Candidate, EncodeResult, choose_and_encode, compare_strategies
from .utils import (
    INVISIBLE_CHARACTERS,
    analyze_invisibles,
    encoded_size,
    encoded_symbols,
    remove_invisibles,
)

__version__ = "0.1.0"

__all__ = [
    # Core API
    "encode",
    "decode",
    "decode_text",
    "decode_container",
    "EncodeResult",
    "DecodeResult",
    # Bit codec
    "encode_bits",
    "decode_bits",
    "SymbolWriter",
    "SymbolReader",
    # Strategy selection
    "choose_and_encode",
    "compare_strategies",
    "Candidate",
    "Strategy",
    "BASIC_STRATEGIES",
    "EXTENDED_STRATEGIES",
    "TIE_BREAK_PRIORITY",
    # Framing
    "apply_marker",
    "strip_marker",
    # Configuration
    "Alphabet",
    "DEFAULT_ALPHABET",
    "CodecConfig",
    "DEFAULT_CONFIG",
    "Compressor",
    "BrotliCompressor",
    # Exceptions
    "ZwcodecError",
    "EncodeError",
    "DecodeError",
    "CorruptPayloadError",
    "UnrecognizedCharacterError",
    "CompressionError",
    "FramingError",
    # Files
    "encode_file",
    "decode_file",
    "clean_file",
    # Runnable scripts
    "generate_runnable",
    "extract_stream",
    "is_runnable",
    # Utilities
    "INVISIBLE_CHARACTERS",
    "analyze_invisibles",
    "remove_invisibles",
    "encoded_size",
    "encoded_symbols",
    # Version
    "__version__",
]
