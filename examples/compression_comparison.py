#!/usr/bin/env python3
"""Compression strategy comparison for zwcodec.

Shows how the selector measures every strategy and keeps the smallest output
for payloads with very different compressibility.
"""

from __future__ import annotations

import os

from zwcodec import CodecConfig, compare_strategies, decode, encode

PAYLOADS = {
    "short text": b"Hi!",
    "repetitive text": b"All work and no play makes Jack a dull boy. " * 50,
    "random bytes": os.urandom(512),
}


def main() -> None:
    """Compare strategies for several payloads."""
    config = CodecConfig.extended()

    print("=" * 70)
    print("zwcodec Compression Comparison")
    print("=" * 70)

    for label, payload in PAYLOADS.items():
        print()
        print(f"{label} ({len(payload):,} bytes)")
        print("-" * 70)

        for candidate in compare_strategies(payload, config):
            print(f"  {candidate.strategy.name:<22} {candidate.size:>10,} bytes")

        result = encode(payload, compress=True, config=config)
        print(f"  -> selected {result.strategy.name} ({result.ratio:.1f}x input size)")

        assert decode(result.data, config=config).data == payload

    print()
    print("=" * 70)


if __name__ == "__main__":
    main()
