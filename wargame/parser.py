"""Strict, fail-fast decoding of line-oriented deck sources.

Each record is ``<Suit>,<Rank>`` or ``Joker,<Label>``. The parser rejects
the whole source on the first bad record: there is no best-effort deck.
Fields are never trimmed, so ``"Hearts, 5"`` is rejected rather than read
as a five.
"""

from __future__ import annotations

import logging
import re
from os import PathLike
from typing import Iterable

from .cards import JOKER_TOKEN, MAX_RANK, MIN_RANK, Card, JokerCard, card_for
from .deck import Deck
from .errors import EmptySource, MalformedInput, UnreadableSource

__all__ = ["parse_line", "parse_lines", "parse_text", "read_deck", "split_records"]

logger = logging.getLogger(__name__)

_FIELD_SEPARATOR = ","
_RANK_PATTERN = re.compile(r"[+-]?[0-9]+")
# Only "\n" ends a record; a lone "\r" or other Unicode breaks stay in the field.
_RECORD_PATTERN = re.compile(r"[^\n]*\n|[^\n]+")


class _InvalidRecord(ValueError):
    """Internal signal for a record that fails validation."""


def _strip_terminator(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


def _parse_rank(text: str) -> int:
    # int() alone would accept surrounding whitespace, underscores and
    # non-ASCII digits.
    if _RANK_PATTERN.fullmatch(text) is None:
        raise _InvalidRecord(f"rank {text!r} is not an integer")
    rank = int(text)
    if rank < MIN_RANK or rank > MAX_RANK:
        raise _InvalidRecord(f"rank {rank} outside [{MIN_RANK}, {MAX_RANK}]")
    return rank


def parse_line(line: str) -> Card:
    """Decode one non-empty record into a card.

    Raises:
        ValueError: If the record is structurally or semantically invalid.
    """

    suit, separator, value = line.partition(_FIELD_SEPARATOR)
    if not separator:
        raise _InvalidRecord("missing comma")
    if not suit or not value:
        raise _InvalidRecord("empty field")
    if suit == JOKER_TOKEN:
        return JokerCard(label=value)
    return card_for(suit, _parse_rank(value))


def parse_lines(lines: Iterable[str]) -> Deck:
    """Build a deck from ``lines``, top card first.

    Raises:
        MalformedInput: On the first record that fails validation.
        EmptySource: If no line produced a card.
    """

    deck = Deck()
    for line_number, raw in enumerate(lines, start=1):
        line = _strip_terminator(raw)
        if not line:
            continue
        try:
            card = parse_line(line)
        except Exception as exc:
            logger.debug("rejecting line %d %r: %s", line_number, line, exc)
            raise MalformedInput(line_number, line) from exc
        deck.add_to_bottom(card)

    if deck.size() == 0:
        raise EmptySource()
    logger.debug("parsed %d card(s)", deck.size())
    return deck


def split_records(text: str) -> list[str]:
    """Split ``text`` after every "\\n", keeping the terminators."""

    return _RECORD_PATTERN.findall(text)


def parse_text(text: str) -> Deck:
    """Parse an in-memory source."""

    return parse_lines(split_records(text))


def read_deck(path: str | PathLike[str]) -> Deck:
    """Read and parse the deck stored at ``path``.

    The file is read completely and closed before any record is validated.

    Raises:
        UnreadableSource: If the file cannot be opened or decoded.
        MalformedInput: See :func:`parse_lines`.
        EmptySource: See :func:`parse_lines`.
    """

    try:
        with open(path, encoding="utf-8", newline="") as handle:
            text = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise UnreadableSource(path, reason=str(exc)) from exc
    logger.debug("read %d character(s) from %s", len(text), path)
    return parse_text(text)
