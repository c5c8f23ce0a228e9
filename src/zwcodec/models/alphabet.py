"""Symbol and marker alphabet for encoded streams.

The alphabet binds the two data symbols to bit values and reserves one marker
character per compression strategy. It is validated once on construction and
never mutated afterwards, so a single instance can be shared by every encode
and decode call in the process.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .strategy import Strategy


class Alphabet(BaseModel):
    """Immutable table of data symbols and strategy markers.

    Example:
        >>> alphabet = Alphabet(zero="\\u200b", one="\\u200c", markers={})
        >>> alphabet.symbol_for(1)
        '\\u200c'

    Attributes:
        zero: Symbol bound to bit value 0
        one: Symbol bound to bit value 1
        markers: Marker character for each non-NONE strategy the alphabet supports
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    zero: str = Field(description="Symbol for bit 0")
    one: str = Field(description="Symbol for bit 1")
    markers: dict[Strategy, str] = Field(default_factory=dict)

    @field_validator("zero", "one")
    @classmethod
    def _single_symbol(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError(f"Symbols must be exactly one character, got {value!r}")
        return value

    @field_validator("markers")
    @classmethod
    def _valid_markers(cls, value: dict[Strategy, str]) -> dict[Strategy, str]:
        if Strategy.NONE in value:
            raise ValueError("Strategy.NONE is signalled by the absence of a marker")
        for strategy, marker in value.items():
            if len(marker) != 1:
                raise ValueError(
                    f"Marker for {strategy.name} must be exactly one character, got {marker!r}"
                )
        return value

    @model_validator(mode="after")
    def _disjoint(self) -> Alphabet:
        characters = [self.zero, self.one, *self.markers.values()]
        if len(set(characters)) != len(characters):
            raise ValueError("Symbols and markers must be mutually disjoint")
        return self

    def symbol_for(self, bit: int) -> str:
        """Return the data symbol for a bit value (0 or 1)."""
        return self.one if bit else self.zero

    def bit_for(self, character: str) -> int | None:
        """Return the bit bound to a data symbol, or None for any other character."""
        if character == self.zero:
            return 0
        if character == self.one:
            return 1
        return None

    def marker_for(self, strategy: Strategy) -> str | None:
        """Return the marker for a strategy (None for Strategy.NONE)."""
        if strategy is Strategy.NONE:
            return None
        return self.markers.get(strategy)

    def strategy_for(self, character: str) -> Strategy | None:
        """Return the strategy a marker character declares, or None."""
        for strategy, marker in self.markers.items():
            if marker == character:
                return strategy
        return None

    def supports(self, strategy: Strategy) -> bool:
        """Whether streams produced under ``strategy`` can be framed."""
        return strategy is Strategy.NONE or strategy in self.markers

    @property
    def characters(self) -> frozenset[str]:
        """Every character a stream in this alphabet may contain."""
        return frozenset((self.zero, self.one, *self.markers.values()))


ZERO_WIDTH_SPACE = "\u200b"
ZERO_WIDTH_NON_JOINER = "\u200c"
ZERO_WIDTH_JOINER = "\u200d"
WORD_JOINER = "\u2060"

DEFAULT_ALPHABET = Alphabet(
    zero=ZERO_WIDTH_SPACE,
    one=ZERO_WIDTH_NON_JOINER,
    markers={
        Strategy.COMPRESS_THEN_ENCODE: ZERO_WIDTH_JOINER,
        Strategy.ENCODE_THEN_COMPRESS: WORD_JOINER,
    },
)
