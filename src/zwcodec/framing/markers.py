"""Strategy marker framing.

An encoded stream may start with a single marker character declaring which
strategy produced it. No marker at position 0 means the stream is
uncompressed.
"""

from __future__ import annotations

from ..exceptions import EncodeError
from ..models.alphabet import DEFAULT_ALPHABET, Alphabet
from ..models.strategy import Strategy


def apply_marker(
    strategy: Strategy,
    stream: str,
    alphabet: Alphabet = DEFAULT_ALPHABET,
) -> str:
    """Prepend the marker for ``strategy`` to ``stream``.

    Args:
        strategy: Strategy that produced the stream
        stream: Encoded data symbols
        alphabet: Alphabet that defines the markers

    Returns:
        The framed stream (unchanged for Strategy.NONE)

    Raises:
        EncodeError: If the alphabet has no marker for ``strategy``

    Example:
        >>> apply_marker(Strategy.NONE, "")
        ''
    """
    if strategy is Strategy.NONE:
        return stream

    marker = alphabet.marker_for(strategy)
    if marker is None:
        raise EncodeError(f"Alphabet has no marker for strategy {strategy.name}")
    return marker + stream


def strip_marker(
    stream: str,
    alphabet: Alphabet = DEFAULT_ALPHABET,
) -> tuple[Strategy, str]:
    """Split a stream into its declared strategy and the remaining symbols.

    Only the first character is examined. An empty stream, or one whose first
    character is not a known marker, is reported as Strategy.NONE and returned
    unchanged.

    Args:
        stream: Possibly framed stream
        alphabet: Alphabet that defines the markers

    Returns:
        Tuple of (strategy, remainder)
    """
    if not stream:
        return Strategy.NONE, ""

    strategy = alphabet.strategy_for(stream[0])
    if strategy is None:
        return Strategy.NONE, stream
    return strategy, stream[1:]
