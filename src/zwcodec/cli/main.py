"""Main CLI entry point for zwcodec."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .. import __version__
from ..cli.analyze import STRATEGY_LABELS, analyze_file, print_catalogue, print_comparison
from ..config import CodecConfig
from ..exceptions import ZwcodecError
from ..files import clean_file, decode_file, encode_file
from ..models.strategy import Strategy

EPILOG = """
Examples:
  zwcodec encode document.txt                      Encode without compression
  zwcodec encode document.txt --compress           Pick the smallest strategy
  zwcodec encode image.png --compress --extended   Also try Encode -> Compress
  zwcodec encode script.py --compress --runnable   Self-extracting script
  zwcodec decode document.txt.encoded              Decode (strategy auto-detected)
  zwcodec analyze suspicious.txt                   Find invisible characters
  zwcodec clean document.txt                       Strip invisible characters
  zwcodec list                                     Show the character catalogue
"""


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="zwcodec",
        description="zwcodec: Invisible Character Codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=EPILOG,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"zwcodec {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    encode_parser = subparsers.add_parser("encode", help="Encode a file into invisible characters")
    encode_parser.add_argument("file", help="File to encode")
    encode_parser.add_argument(
        "--compress",
        action="store_true",
        help="Use Brotli compression (auto-selects the smallest method)",
    )
    encode_parser.add_argument(
        "--extended",
        action="store_true",
        help="Also consider Encode -> Compress (binary output)",
    )
    encode_parser.add_argument(
        "--runnable",
        action="store_true",
        help="Generate a self-extracting Python script",
    )
    encode_parser.add_argument("-o", "--output", help="Output file (default: <file>.encoded)")
    encode_parser.add_argument("-v", "--verbose", action="store_true", help="Show details")

    decode_parser = subparsers.add_parser("decode", help="Decode an encoded file")
    decode_parser.add_argument("file", help="File to decode")
    decode_parser.add_argument("-o", "--output", help="Output file (default: <file>.decoded)")
    decode_parser.add_argument("-v", "--verbose", action="store_true", help="Show details")

    analyze_parser = subparsers.add_parser("analyze", help="Show invisible characters in a file")
    analyze_parser.add_argument("file", help="File to analyze")

    clean_parser = subparsers.add_parser("clean", help="Remove invisible characters from a file")
    clean_parser.add_argument("file", help="File to clean")
    clean_parser.add_argument("-o", "--output", help="Output file (default: <file>.cleaned)")

    subparsers.add_parser("list", help="Show the invisible character catalogue")

    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _run_encode(args: argparse.Namespace) -> int:
    config = CodecConfig.extended() if args.extended else CodecConfig()
    output, result = encode_file(
        args.file,
        args.output,
        compress=args.compress,
        runnable=args.runnable,
        config=config,
    )

    if args.verbose:
        print_comparison(list(result.candidates), result.input_size)
        print(f"Method used: {STRATEGY_LABELS[result.strategy]}")
        marker = config.alphabet.marker_for(result.strategy)
        if marker is not None:
            print(f"Marker: {result.strategy.name} (U+{ord(marker):04X})")
        if args.runnable:
            print(f"Run with: python {output}")

    size = output.stat().st_size
    print(f"Encoded: {args.file} -> {output} ({size:,} bytes)")
    return 0


def _run_decode(args: argparse.Namespace) -> int:
    output, result = decode_file(args.file, args.output)

    if args.verbose:
        if result.strategy is Strategy.NONE:
            print("No compression detected")
        else:
            print(f"Marker detected: {result.strategy.name}")
        if result.truncated:
            print(f"Dropped {result.dropped_symbols} trailing symbols")

    print(f"Decoded: {args.file} -> {output} ({len(result.data):,} bytes)")
    return 0


def _run_clean(args: argparse.Namespace) -> int:
    output, removed = clean_file(args.file, args.output)
    print(f"Cleaned: {args.file} -> {output} ({removed:,} characters removed)")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the zwcodec CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "list":
        print_catalogue()
        return 0

    file_path = Path(args.file)
    if not file_path.exists():
        print(f"Error: File not found: {file_path}", file=sys.stderr)
        return 1

    _configure_logging(getattr(args, "verbose", False))

    try:
        if args.command == "encode":
            return _run_encode(args)
        if args.command == "decode":
            return _run_decode(args)
        if args.command == "analyze":
            analyze_file(file_path)
            return 0
        return _run_clean(args)
    except (ZwcodecError, OSError, UnicodeDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
