"""Helpers for recording War rounds: the CSV round log and match totals."""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from os import PathLike
from types import TracebackType
from typing import IO

from .deck import DEFAULT_SEPARATOR, Deck
from .errors import OutputError
from .game import RoundOutcome, RoundResult

__all__ = ["HEADER", "RoundRecord", "RoundWriter", "PlayerMatchTotal", "MatchHistory"]

logger = logging.getLogger(__name__)

HEADER = ("Round", "PlayerA_Count", "PlayerB_Count", "PlayerA_Cards", "PlayerB_Cards")


@dataclass(frozen=True, slots=True)
class RoundRecord:
    """One row of the round log."""

    round_number: int
    count_a: int
    count_b: int
    cards_a: str
    cards_b: str

    @classmethod
    def from_decks(
        cls,
        round_number: int,
        deck_a: Deck,
        deck_b: Deck,
        separator: str = DEFAULT_SEPARATOR,
    ) -> "RoundRecord":
        return cls(
            round_number=round_number,
            count_a=deck_a.size(),
            count_b=deck_b.size(),
            cards_a=deck_a.render(separator),
            cards_b=deck_b.render(separator),
        )

    def as_row(self) -> tuple[int, int, int, str, str]:
        return (self.round_number, self.count_a, self.count_b, self.cards_a, self.cards_b)


class RoundWriter:
    """Writes the header and one line per round to a CSV file.

    Counts are written bare and rendered decks are always quoted. A quote
    inside a rendered deck is doubled by the ``csv`` module.
    """

    def __init__(self, path: str | PathLike[str], separator: str = DEFAULT_SEPARATOR) -> None:
        self.path = str(path)
        self.separator = separator
        self.rows_written = 0
        try:
            self._handle: IO[str] = open(path, "w", encoding="utf-8", newline="")
        except OSError as exc:
            raise OutputError(path, reason=str(exc)) from exc
        self._writer = csv.writer(self._handle, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")
        try:
            self._write(",".join(HEADER) + "\n")
        except OutputError:
            self._handle.close()
            raise

    def _write(self, text: str) -> None:
        try:
            self._handle.write(text)
        except OSError as exc:
            raise OutputError(self.path, reason=str(exc)) from exc

    def write_record(self, record: RoundRecord) -> None:
        try:
            self._writer.writerow(record.as_row())
        except OSError as exc:
            raise OutputError(self.path, reason=str(exc)) from exc
        self.rows_written += 1

    def write_round(self, round_number: int, deck_a: Deck, deck_b: Deck) -> None:
        """Append the state of both decks after ``round_number``."""

        self.write_record(RoundRecord.from_decks(round_number, deck_a, deck_b, self.separator))

    def on_round(self, round_number: int, deck_a: Deck, deck_b: Deck, result: RoundResult) -> None:
        self.write_round(round_number, deck_a, deck_b)

    @property
    def closed(self) -> bool:
        return self._handle.closed

    def close(self) -> None:
        if not self._handle.closed:
            self._handle.close()
            logger.debug("wrote %d round(s) to %s", self.rows_written, self.path)

    def __enter__(self) -> "RoundWriter":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


@dataclass(frozen=True, slots=True)
class PlayerMatchTotal:
    """Aggregate round wins for one player."""

    player: RoundOutcome
    rounds_won: int


@dataclass(slots=True)
class MatchHistory:
    """Mutable tracker that accumulates round results for a game."""

    rounds: list[RoundResult] = field(default_factory=list)
    ties: int = 0
    wars: int = 0
    _wins: dict[RoundOutcome, int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._wins = {RoundOutcome.PLAYER_A: 0, RoundOutcome.PLAYER_B: 0}

    def record(self, result: RoundResult) -> None:
        """Record ``result`` and update cumulative totals."""

        if self.rounds and result.round_number <= self.rounds[-1].round_number:
            raise ValueError("rounds must be recorded in increasing order")
        self.rounds.append(result)
        self.wars += result.wars
        if result.winner is RoundOutcome.TIE:
            self.ties += 1
        else:
            self._wins[result.winner] += 1

    def on_round(self, round_number: int, deck_a: Deck, deck_b: Deck, result: RoundResult) -> None:
        self.record(result)

    def totals(self) -> list[PlayerMatchTotal]:
        """Return the round-win totals for player A then player B."""

        return [
            PlayerMatchTotal(player=player, rounds_won=wins)
            for player, wins in self._wins.items()
        ]
