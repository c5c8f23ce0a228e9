"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import random

import pytest

from zwcodec.compression import Compressor
from zwcodec.exceptions import CompressionError


class FailingCompressor(Compressor):
    """Compressor whose compress() always fails."""

    name = "failing"

    def compress(self, data: bytes) -> bytes:
        raise CompressionError("out of memory")

    def decompress(self, data: bytes) -> bytes:
        raise AssertionError("decompress should not be called")


@pytest.fixture
def sample_payload() -> bytes:
    """Sample text payload for testing."""
    return b"Hello World!"


@pytest.fixture
def repetitive_payload() -> bytes:
    """2,800 bytes of a repeated phrase."""
    return b"Lorem ipsum dolor sit amet, " * 100


@pytest.fixture
def random_payload() -> bytes:
    """256 bytes of uniformly distributed (seeded) random data."""
    rng = random.Random(1234)
    return bytes(rng.randrange(256) for _ in range(256))


@pytest.fixture
def all_byte_values() -> bytes:
    """Every byte value 0x00-0xFF exactly once."""
    return bytes(range(256))


@pytest.fixture
def failing_compressor() -> Compressor:
    """Compressor that raises on every compress() call."""
    return FailingCompressor()
