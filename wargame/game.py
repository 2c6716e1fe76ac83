"""Round orchestration for a two-player game of War."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Protocol

from .cards import Card
from .deck import DEFAULT_SEPARATOR, Deck

__all__ = [
    "GameConfig",
    "RoundOutcome",
    "RoundResult",
    "GameResult",
    "RoundObserver",
    "WarGame",
    "deal",
]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class GameConfig:
    """Runtime configuration for a single game."""

    max_rounds: int = 1000
    war_face_down: int = 1
    separator: str = DEFAULT_SEPARATOR

    def __post_init__(self) -> None:
        if self.max_rounds < 1:
            raise ValueError("max_rounds must be positive")
        if self.war_face_down < 0:
            raise ValueError("war_face_down must not be negative")


class RoundOutcome(str, Enum):
    """Winner of a round or of the whole game."""

    PLAYER_A = "A"
    PLAYER_B = "B"
    TIE = "tie"

    @property
    def label(self) -> str:
        if self is RoundOutcome.TIE:
            return "Tie"
        return f"Player {self.value}"


@dataclass(frozen=True, slots=True)
class RoundResult:
    """What happened during one round."""

    round_number: int
    card_a: Card
    card_b: Card
    winner: RoundOutcome
    pot_size: int
    wars: int = 0


@dataclass(frozen=True, slots=True)
class GameResult:
    """Final outcome once the game loop stops."""

    rounds_played: int
    winner: RoundOutcome
    reason: str
    count_a: int
    count_b: int


class RoundObserver(Protocol):
    def on_round(self, round_number: int, deck_a: Deck, deck_b: Deck, result: RoundResult) -> None:
        ...


def deal(deck: Deck) -> tuple[Deck, Deck]:
    """Split ``deck`` between two players by alternating draws from the top.

    Player A receives the 1st, 3rd, 5th... card and player B the 2nd, 4th...
    The source deck is emptied.
    """

    deck_a = Deck()
    deck_b = Deck()
    to_a = True
    while not deck.is_empty:
        (deck_a if to_a else deck_b).add_to_bottom(deck.draw_from_top())
        to_a = not to_a
    return deck_a, deck_b


@dataclass(slots=True)
class _Pot:
    """Cards at stake in the current round, in play order."""

    cards: list[Card] = field(default_factory=list)
    from_a: list[Card] = field(default_factory=list)
    from_b: list[Card] = field(default_factory=list)

    def add(self, card: Card, *, owner: RoundOutcome) -> None:
        self.cards.append(card)
        (self.from_a if owner is RoundOutcome.PLAYER_A else self.from_b).append(card)


class WarGame:
    """Plays rounds between two decks until one runs out or the cap is hit."""

    def __init__(
        self,
        deck_a: Deck,
        deck_b: Deck,
        config: GameConfig | None = None,
        observers: Iterable[RoundObserver] = (),
    ) -> None:
        self.deck_a = deck_a
        self.deck_b = deck_b
        self.config = config or GameConfig()
        self.observers = list(observers)
        self.rounds_played = 0

    @property
    def total_cards(self) -> int:
        return self.deck_a.size() + self.deck_b.size()

    @property
    def is_over(self) -> bool:
        return (
            self.deck_a.is_empty
            or self.deck_b.is_empty
            or self.rounds_played >= self.config.max_rounds
        )

    def _place_face_down(self, pot: _Pot) -> None:
        # The last card of each deck is kept back for the deciding card.
        for _ in range(self.config.war_face_down):
            if self.deck_a.size() > 1:
                pot.add(self.deck_a.draw_from_top(), owner=RoundOutcome.PLAYER_A)
            if self.deck_b.size() > 1:
                pot.add(self.deck_b.draw_from_top(), owner=RoundOutcome.PLAYER_B)

    def _settle(self, pot: _Pot, winner: RoundOutcome) -> None:
        if winner is RoundOutcome.PLAYER_A:
            for card in pot.cards:
                self.deck_a.add_to_bottom(card)
        elif winner is RoundOutcome.PLAYER_B:
            for card in pot.cards:
                self.deck_b.add_to_bottom(card)
        else:
            for card in pot.from_a:
                self.deck_a.add_to_bottom(card)
            for card in pot.from_b:
                self.deck_b.add_to_bottom(card)

    def play_round(self) -> RoundResult:
        """Play one round, including any wars triggered by equal cards."""

        if self.is_over:
            raise RuntimeError("game already finished")

        self.rounds_played += 1
        pot = _Pot()
        first_a = card_a = self.deck_a.draw_from_top()
        first_b = card_b = self.deck_b.draw_from_top()
        wars = 0

        while True:
            pot.add(card_a, owner=RoundOutcome.PLAYER_A)
            pot.add(card_b, owner=RoundOutcome.PLAYER_B)
            if card_b < card_a:
                winner = RoundOutcome.PLAYER_A
                break
            if card_a < card_b:
                winner = RoundOutcome.PLAYER_B
                break

            wars += 1
            logger.debug("round %d: war #%d on %s", self.rounds_played, wars, card_a)
            self._place_face_down(pot)
            a_out = self.deck_a.is_empty
            b_out = self.deck_b.is_empty
            if a_out and b_out:
                winner = RoundOutcome.TIE
                break
            if a_out:
                winner = RoundOutcome.PLAYER_B
                break
            if b_out:
                winner = RoundOutcome.PLAYER_A
                break
            card_a = self.deck_a.draw_from_top()
            card_b = self.deck_b.draw_from_top()

        self._settle(pot, winner)
        result = RoundResult(
            round_number=self.rounds_played,
            card_a=first_a,
            card_b=first_b,
            winner=winner,
            pot_size=len(pot.cards),
            wars=wars,
        )
        logger.debug(
            "round %d: %s vs %s -> %s (%d/%d)",
            result.round_number,
            first_a,
            first_b,
            winner.label,
            self.deck_a.size(),
            self.deck_b.size(),
        )
        for observer in self.observers:
            observer.on_round(result.round_number, self.deck_a, self.deck_b, result)
        return result

    def result(self) -> GameResult:
        """Describe the current outcome; meaningful once :attr:`is_over`."""

        count_a = self.deck_a.size()
        count_b = self.deck_b.size()
        if count_a == 0 and count_b == 0:
            winner, reason = RoundOutcome.TIE, "exhausted"
        elif count_a == 0:
            winner, reason = RoundOutcome.PLAYER_B, "cards"
        elif count_b == 0:
            winner, reason = RoundOutcome.PLAYER_A, "cards"
        else:
            reason = "round_limit"
            if count_a > count_b:
                winner = RoundOutcome.PLAYER_A
            elif count_b > count_a:
                winner = RoundOutcome.PLAYER_B
            else:
                winner = RoundOutcome.TIE
        return GameResult(
            rounds_played=self.rounds_played,
            winner=winner,
            reason=reason,
            count_a=count_a,
            count_b=count_b,
        )

    def play(self) -> GameResult:
        """Play rounds until the game is over and return the outcome."""

        while not self.is_over:
            self.play_round()
        outcome = self.result()
        logger.debug("game over after %d round(s): %s", outcome.rounds_played, outcome)
        return outcome
