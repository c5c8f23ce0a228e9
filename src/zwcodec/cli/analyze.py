"""Report printing for the CLI."""

from __future__ import annotations

from pathlib import Path

from ..models.alphabet import DEFAULT_ALPHABET, Alphabet
from ..models.strategy import Strategy
from ..selector import Candidate
from ..utils.invisible import INVISIBLE_CHARACTERS, analyze_invisibles

MAX_POSITIONS = 20

STRATEGY_LABELS = {
    Strategy.COMPRESS_THEN_ENCODE: "Compress -> Encode",
    Strategy.ENCODE_THEN_COMPRESS: "Encode -> Compress",
    Strategy.NONE: "Encode only (no compression)",
}


def _banner(title: str) -> None:
    print(f"{'=' * 19} {title} {'=' * 19}")


def _percent(size: int, original: int) -> str:
    if original == 0:
        return "n/a"
    return f"{size / original * 100:.2f}%"


def analyze_file(file_path: Path) -> None:
    """Print the invisible characters found in a UTF-8 text file.

    Args:
        file_path: File to analyze
    """
    content = file_path.read_text(encoding="utf-8")
    report = analyze_invisibles(content)

    _banner("Invisible characters analysis")
    print(f"File: {file_path}")
    print(f"Size: {report.length:,} characters / {report.byte_length:,} bytes")
    print()

    if not report.has_invisibles:
        print("Contains invisible characters: NO")
        return

    print("Contains invisible characters: YES")
    print(f"Total count: {report.count:,}")
    print(f"Different types: {len(report.found)}")
    print()

    print("Types found:")
    for i, name in enumerate(report.found, 1):
        print(f"    {i}. {name}")
    print()

    shown = report.positions[:MAX_POSITIONS]
    if len(report.positions) > MAX_POSITIONS:
        print(f"First {MAX_POSITIONS} positions of {len(report.positions)}:")
    else:
        print("Positions:")
    for pos in shown:
        print(f"    Pos {pos.position}: {pos.name} ({pos.unicode})")
    if len(report.positions) > MAX_POSITIONS:
        print(f"    ... and {len(report.positions) - MAX_POSITIONS} more")


def print_catalogue(alphabet: Alphabet = DEFAULT_ALPHABET) -> None:
    """Print the encoding alphabet and every catalogued invisible character."""
    _banner("Available invisible characters")

    print("Encoding characters:")
    print(f"    0: U+{ord(alphabet.zero):04X}")
    print(f"    1: U+{ord(alphabet.one):04X}")
    print()

    print("Compression markers:")
    for strategy, marker in alphabet.markers.items():
        print(f"    {STRATEGY_LABELS[strategy]}: U+{ord(marker):04X}")
    print()

    print("Invisible characters dictionary:")
    for i, info in enumerate(INVISIBLE_CHARACTERS.values(), 1):
        print(f"    {i:2d}. {info.key:<8} {info.unicode:<10} {info.name}")
    print()
    print(f"Total: {len(INVISIBLE_CHARACTERS)} documented invisible characters")


def print_comparison(candidates: list[Candidate], input_size: int) -> None:
    """Print every measured strategy, smallest first.

    Args:
        candidates: Candidates in selection order
        input_size: Size of the original payload in bytes
    """
    _banner("Method comparison")
    print(f"Original size: {input_size:,} bytes")
    print()

    for rank, candidate in enumerate(candidates, 1):
        label = STRATEGY_LABELS[candidate.strategy]
        marker = " (selected)" if rank == 1 else ""
        print(f"{rank}. {label}{marker}")
        print(
            f"    Size: {candidate.size:,} bytes "
            f"({_percent(candidate.size, input_size)} of original)"
        )
    print()
