"""Self-extracting runnable scripts.

generate_runnable() wraps an encoded stream in a small Python 3 script. When
the script runs it decodes the embedded stream, writes the payload to a
temporary file and runs it according to the original file extension:

    .py                 python (the interpreter running the script)
    .sh / .bash         bash
    .js / .mjs          node
    .rb                 ruby
    .txt / no suffix    printed to stdout
    anything else       marked executable and run directly

Streams produced with Strategy.COMPRESS_THEN_ENCODE need the ``brotli``
package on the machine that runs the script.
"""

from __future__ import annotations

import re
from pathlib import PurePath
from string import Template

from .exceptions import EncodeError, FramingError
from .models.alphabet import DEFAULT_ALPHABET, Alphabet
from .models.strategy import Strategy

RUNNABLE_HEADER = "# Self-extracting payload generated by zwcodec"

_FORBIDDEN = frozenset('"\\\r\n')

_PAYLOAD_LINE = re.compile(r'^PAYLOAD = "([^"\\\r\n]*)"$', re.MULTILINE)

_TEMPLATE = Template(
    '''#!/usr/bin/env python3
$header
import os
import subprocess
import sys
import tempfile

PAYLOAD = "$payload"
NAME = $name
ZERO = $zero
ONE = $one
MARKER = $marker


def unpack(stream):
    out = bytearray()
    for i in range(0, len(stream) - len(stream) % 8, 8):
        value = 0
        for ch in stream[i:i + 8]:
            if ch == ONE:
                value = (value << 1) | 1
            elif ch == ZERO:
                value <<= 1
            else:
                raise ValueError("unrecognized character U+%04X" % ord(ch))
        out.append(value)
    return bytes(out)


def main():
    try:
        if MARKER is not None and PAYLOAD[:1] == MARKER:
            import brotli

            data = brotli.decompress(unpack(PAYLOAD[1:]))
        else:
            data = unpack(PAYLOAD)
    except Exception as e:
        print("Extraction error:", e, file=sys.stderr)
        return 1

    ext = os.path.splitext(NAME)[1].lower()
    if ext in ("", ".txt"):
        sys.stdout.write(data.decode("utf-8", errors="replace"))
        return 0

    fd, path = tempfile.mkstemp(suffix=ext)
    with os.fdopen(fd, "wb") as f:
        f.write(data)
    try:
        if ext == ".py":
            cmd = [sys.executable, path]
        elif ext in (".sh", ".bash"):
            cmd = ["bash", path]
        elif ext in (".js", ".mjs"):
            cmd = ["node", path]
        elif ext == ".rb":
            cmd = ["ruby", path]
        else:
            os.chmod(path, 0o755)
            cmd = [path]
        return subprocess.call(cmd + sys.argv[1:])
    except OSError as e:
        print("Execution error:", e, file=sys.stderr)
        return 1
    finally:
        os.unlink(path)


if __name__ == "__main__":
    sys.exit(main())
'''
)


def generate_runnable(
    stream: str,
    original_name: str,
    alphabet: Alphabet = DEFAULT_ALPHABET,
) -> str:
    """Wrap an encoded stream in a self-extracting Python script.

    Args:
        stream: Encoded stream (NONE or COMPRESS_THEN_ENCODE)
        original_name: Name of the original file; its suffix selects how the
            payload is run
        alphabet: Alphabet the stream was encoded with

    Returns:
        Script source

    Raises:
        EncodeError: If the stream contains characters outside the alphabet,
            or a character that would end the embedded string literal
    """
    allowed = {alphabet.zero, alphabet.one}
    marker = alphabet.marker_for(Strategy.COMPRESS_THEN_ENCODE)
    if marker is not None and stream[:1] == marker:
        body = stream[1:]
    else:
        body = stream

    for index, character in enumerate(body):
        if character not in allowed:
            raise EncodeError(
                f"Stream character U+{ord(character):04X} at {index} cannot be embedded"
            )
    if _FORBIDDEN & alphabet.characters:
        raise EncodeError("Alphabet contains characters that cannot be embedded in a literal")

    return _TEMPLATE.substitute(
        header=RUNNABLE_HEADER,
        payload=stream,
        name=repr(PurePath(original_name).name),
        zero=repr(alphabet.zero),
        one=repr(alphabet.one),
        marker=repr(marker),
    )


def is_runnable(text: str) -> bool:
    """Whether ``text`` is a script produced by generate_runnable()."""
    return RUNNABLE_HEADER in text


def extract_stream(text: str) -> str:
    """Pull the embedded encoded stream out of a runnable script.

    Raises:
        FramingError: If the script has no payload literal
    """
    if not is_runnable(text):
        raise FramingError("Text is not a zwcodec runnable script")

    match = _PAYLOAD_LINE.search(text)
    if match is None:
        raise FramingError("Could not extract payload from runnable script")
    return match.group(1)
