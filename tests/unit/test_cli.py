"""Tests for CLI tool."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

import pytest

from zwcodec.cli.main import main


def _run(*args: str) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        [sys.executable, "-m", "zwcodec.cli.main", *args],
        capture_output=True,
        text=True,
    )


def test_cli_help() -> None:
    """Test CLI --help flag."""
    result = _run("--help")
    assert result.returncode == 0
    assert "zwcodec: Invisible Character Codec" in result.stdout
    assert "encode" in result.stdout


def test_cli_version() -> None:
    """Test CLI --version flag."""
    result = _run("--version")
    assert result.returncode == 0
    assert "zwcodec 0.1.0" in result.stdout


def test_cli_no_args() -> None:
    """Test CLI with no arguments (should show help)."""
    result = _run()
    assert result.returncode == 0
    assert "zwcodec: Invisible Character Codec" in result.stdout


def test_cli_list() -> None:
    """Test the catalogue listing."""
    result = _run("list")
    assert result.returncode == 0
    assert "U+200B" in result.stdout
    assert "Total: 21 documented invisible characters" in result.stdout


def test_cli_missing_file() -> None:
    """Test CLI with missing file."""
    result = _run("decode", "nonexistent.encoded")
    assert result.returncode == 1
    assert "File not found" in result.stderr


def test_cli_encode_decode(tmp_path: Path) -> None:
    """Test encode then decode through the CLI."""
    source = tmp_path / "message.txt"
    source.write_bytes(b"Secret message " * 20)

    result = _run("encode", str(source), "--compress", "-v")
    assert result.returncode == 0
    assert "Method comparison" in result.stdout
    assert "Method used: Compress -> Encode" in result.stdout
    assert "Encoded:" in result.stdout

    encoded = tmp_path / "message.txt.encoded"
    assert encoded.exists()

    result = _run("decode", str(encoded), "-v")
    assert result.returncode == 0
    assert "Marker detected: COMPRESS_THEN_ENCODE" in result.stdout
    assert (tmp_path / "message.txt.decoded").read_bytes() == source.read_bytes()


def test_cli_decode_corrupt(tmp_path: Path) -> None:
    """Decode errors are reported, not raised."""
    bad = tmp_path / "bad.encoded"
    bad.write_text("\u200b\u200cnot invisible", encoding="utf-8")

    result = _run("decode", str(bad))
    assert result.returncode == 1
    assert "Error:" in result.stderr
    assert "Unrecognized character" in result.stderr


def test_cli_analyze(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test analysis output (in-process)."""
    source = tmp_path / "doc.txt"
    source.write_text("Hello\u200bWorld\u200d", encoding="utf-8")

    assert main(["analyze", str(source)]) == 0
    out = capsys.readouterr().out
    assert "Contains invisible characters: YES" in out
    assert "Total count: 2" in out
    assert "Pos 5: Zero Width Space (U+200B)" in out


def test_cli_analyze_clean_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Files without invisible characters are reported as clean."""
    source = tmp_path / "doc.txt"
    source.write_text("Hello World", encoding="utf-8")

    assert main(["analyze", str(source)]) == 0
    assert "Contains invisible characters: NO" in capsys.readouterr().out


def test_cli_clean(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test invisible character removal (in-process)."""
    source = tmp_path / "doc.txt"
    source.write_text("Hel\u200blo\u2060", encoding="utf-8")

    assert main(["clean", str(source)]) == 0
    assert (tmp_path / "doc.cleaned.txt").read_text(encoding="utf-8") == "Hello"
    assert "2 characters removed" in capsys.readouterr().out
