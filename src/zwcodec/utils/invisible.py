"""Invisible character catalogue, analysis and cleanup.

This module lists the invisible code points zwcodec knows about and provides
helpers to find them in text or strip them out.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class InvisibleCharacter:
    """A named invisible code point.

    Attributes:
        key: Short abbreviation (e.g. "ZWSP")
        char: The character itself
        name: Human-readable Unicode name
    """

    key: str
    char: str
    name: str

    @property
    def code(self) -> int:
        """Unicode code point."""
        return ord(self.char)

    @property
    def unicode(self) -> str:
        """Code point in U+XXXX notation."""
        return f"U+{self.code:04X}"


INVISIBLE_CHARACTERS: dict[str, InvisibleCharacter] = {
    c.key: c
    for c in (
        InvisibleCharacter("ZWSP", "\u200b", "Zero Width Space"),
        InvisibleCharacter("ZWNJ", "\u200c", "Zero Width Non-Joiner"),
        InvisibleCharacter("ZWJ", "\u200d", "Zero Width Joiner"),
        InvisibleCharacter("ZWNBSP", "\ufeff", "Zero Width No-Break Space (BOM)"),
        InvisibleCharacter("LRM", "\u200e", "Left-to-Right Mark"),
        InvisibleCharacter("RLM", "\u200f", "Right-to-Left Mark"),
        InvisibleCharacter("LRE", "\u202a", "Left-to-Right Embedding"),
        InvisibleCharacter("RLE", "\u202b", "Right-to-Left Embedding"),
        InvisibleCharacter("PDF", "\u202c", "Pop Directional Formatting"),
        InvisibleCharacter("LRO", "\u202d", "Left-to-Right Override"),
        InvisibleCharacter("RLO", "\u202e", "Right-to-Left Override"),
        InvisibleCharacter("LRI", "\u2066", "Left-to-Right Isolate"),
        InvisibleCharacter("RLI", "\u2067", "Right-to-Left Isolate"),
        InvisibleCharacter("FSI", "\u2068", "First Strong Isolate"),
        InvisibleCharacter("PDI", "\u2069", "Pop Directional Isolate"),
        InvisibleCharacter("NBSP", "\u00a0", "No-Break Space"),
        InvisibleCharacter("WJ", "\u2060", "Word Joiner"),
        InvisibleCharacter("ALM", "\u061c", "Arabic Letter Mark"),
        InvisibleCharacter("MVS", "\u180e", "Mongolian Vowel Separator"),
        InvisibleCharacter("SHY", "\u00ad", "Soft Hyphen"),
        InvisibleCharacter("CGJ", "\u034f", "Combining Grapheme Joiner"),
    )
}

_BY_CHAR: dict[str, InvisibleCharacter] = {c.char: c for c in INVISIBLE_CHARACTERS.values()}

# Format characters, fillers, variation selectors and non-standard spaces
_REMOVABLE = re.compile(
    "[\u00ad\u034f\u061c\u070f\u115f\u1160\u17b4\u17b5\u180b-\u180e\u200b-\u200f"
    "\u202a-\u202e\u2060-\u2064\u2066-\u206f\u3164\ufe00-\ufe0f\ufeff\uffa0"
    "\ufff9-\ufffc\u00a0\u1680\u2000-\u200a\u202f\u205f\u3000]"
)


class InvisiblePosition(BaseModel):
    """Location of one invisible character in a text."""

    model_config = ConfigDict(frozen=True)

    position: int = Field(ge=0)
    name: str
    unicode: str


class InvisibleReport(BaseModel):
    """Summary of the invisible characters found in a text.

    Attributes:
        length: Length of the text in characters
        byte_length: Length of the text in UTF-8 bytes
        count: Number of catalogued invisible characters found
        found: Distinct character names, in order of first appearance
        positions: Every occurrence, in order
    """

    model_config = ConfigDict(frozen=True)

    length: int = Field(ge=0)
    byte_length: int = Field(ge=0)
    count: int = Field(ge=0)
    found: list[str] = Field(default_factory=list)
    positions: list[InvisiblePosition] = Field(default_factory=list)

    @property
    def has_invisibles(self) -> bool:
        return self.count > 0


def lookup(character: str) -> InvisibleCharacter | None:
    """Return catalogue information for ``character``, if it is catalogued."""
    return _BY_CHAR.get(character)


def analyze_invisibles(text: str) -> InvisibleReport:
    """Find every catalogued invisible character in ``text``.

    Example:
        >>> report = analyze_invisibles("a\\u200bb")
        >>> report.count, report.found
        (1, ['Zero Width Space'])
    """
    found: list[str] = []
    positions: list[InvisiblePosition] = []

    for index, character in enumerate(text):
        info = _BY_CHAR.get(character)
        if info is None:
            continue
        positions.append(InvisiblePosition(position=index, name=info.name, unicode=info.unicode))
        if info.name not in found:
            found.append(info.name)

    return InvisibleReport(
        length=len(text),
        byte_length=len(text.encode("utf-8")),
        count=len(positions),
        found=found,
        positions=positions,
    )


def remove_invisibles(text: str) -> str:
    """Strip invisible, formatting and non-standard space characters.

    This covers a broader class than INVISIBLE_CHARACTERS (e.g. Hangul
    fillers, variation selectors and the U+2000 space block).
    """
    return _REMOVABLE.sub("", text)
