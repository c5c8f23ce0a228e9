#!/usr/bin/env python3
"""Basic usage example for zwcodec.

This example demonstrates:
1. Encoding bytes into invisible characters
2. Hiding the stream inside ordinary text
3. Decoding it back
4. Detecting and removing hidden characters
"""

from __future__ import annotations

from zwcodec import (
    analyze_invisibles,
    decode,
    encode,
    encoded_size,
    remove_invisibles,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("zwcodec Basic Usage Example")
    print("=" * 60)
    print()

    secret = b"Meet at the north gate at 7pm"

    # Encode without compression
    print("1. Encoding a secret message...")
    result = encode(secret)
    print(f"   Input:   {len(secret)} bytes")
    print(f"   Symbols: {len(result.text)}")
    print(f"   Output:  {result.size} bytes (predicted {encoded_size(secret)})")
    print()

    # Hide it in a cover text
    print("2. Hiding the stream in ordinary text...")
    cover = "Thanks for the update," + result.text + " see you tomorrow."
    print(f"   Visible text: {cover!r}"[:80] + "...")
    print(f"   Length: {len(cover)} characters")
    print()

    # Recover it
    print("3. Decoding...")
    start = cover.index(result.text)
    decoded = decode(cover[start : start + len(result.text)])
    print(f"   Strategy: {decoded.strategy.name}")
    print(f"   Payload:  {decoded.data.decode('utf-8')}")
    assert decoded.data == secret
    print()

    # Analysis and cleanup
    print("4. Detecting hidden characters...")
    report = analyze_invisibles(cover)
    print(f"   Invisible characters: {report.count}")
    print(f"   Types: {', '.join(report.found)}")
    print(f"   Cleaned: {remove_invisibles(cover)!r}")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
