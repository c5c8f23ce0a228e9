"""Abstract interface for byte compressors.

The strategy selector only needs two operations from a compressor, so any
backend can be swapped in without touching the codec. BrotliCompressor is
the default; tests substitute their own implementations to exercise the
fallback path.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class Compressor(ABC):
    """Interface for a general-purpose byte compressor.

    Implementations must be deterministic: the same input always compresses
    to the same output, so encoded sizes are reproducible.

    Examples:
        ```python
        class IdentityCompressor(Compressor):
            name = "identity"

            def compress(self, data: bytes) -> bytes:
                return data

            def decompress(self, data: bytes) -> bytes:
                return data
        ```
    """

    name: str = "compressor"

    @abstractmethod
    def compress(self, data: bytes) -> bytes:
        """Compress ``data``.

        Raises:
            CompressionError: If the backend fails
        """
        pass

    @abstractmethod
    def decompress(self, data: bytes) -> bytes:
        """Decompress ``data`` produced by compress().

        Raises:
            CorruptPayloadError: If ``data`` is not valid compressed data
        """
        pass
