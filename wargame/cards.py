"""Card abstractions for the War engine."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import total_ordering
from typing import Final

__all__ = [
    "MIN_RANK",
    "MAX_RANK",
    "FIRST_FACE_RANK",
    "JOKER_VALUE",
    "JOKER_TOKEN",
    "FACE_NAMES",
    "Card",
    "StandardCard",
    "FaceCard",
    "JokerCard",
    "card_for",
]

MIN_RANK: Final = 1
MAX_RANK: Final = 13
FIRST_FACE_RANK: Final = 11
JOKER_VALUE: Final = 14
JOKER_TOKEN: Final = "Joker"

FACE_NAMES: Final[dict[int, str]] = {11: "Jack", 12: "Queen", 13: "King"}
_ACE_NAME: Final = "Ace"


@total_ordering
class Card(ABC):
    """Common contract for every card variant.

    Ordering and equality only look at :meth:`value`, so two cards of
    different suits with the same rank compare equal. Suit is never a
    tie-break.
    """

    __slots__ = ()

    @abstractmethod
    def value(self) -> int:
        """Return the comparison key of the card."""

    @abstractmethod
    def render(self) -> str:
        """Return the textual form used for display and the round log."""

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.value() < other.value()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.value() == other.value()

    def __hash__(self) -> int:
        return hash(self.value())

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True, slots=True, eq=False)
class StandardCard(Card):
    """Numbered card with a rank between 1 (ace) and 10."""

    suit: str
    rank: int

    def value(self) -> int:
        return self.rank

    def render(self) -> str:
        label = _ACE_NAME if self.rank == MIN_RANK else str(self.rank)
        return f"{self.suit}:{label}"


@dataclass(frozen=True, slots=True, eq=False)
class FaceCard(Card):
    """Jack, Queen or King; compares exactly like a standard rank 11-13."""

    suit: str
    rank: int

    @property
    def name(self) -> str:
        return FACE_NAMES[self.rank]

    def value(self) -> int:
        return self.rank

    def render(self) -> str:
        return f"{self.suit}:{self.name}"


@dataclass(frozen=True, slots=True, eq=False)
class JokerCard(Card):
    """Joker identified by a free-form label; outranks every other card."""

    label: str

    def value(self) -> int:
        return JOKER_VALUE

    def render(self) -> str:
        return f"{JOKER_TOKEN}:{self.label}"


def card_for(suit: str, rank: int) -> StandardCard | FaceCard:
    """Return the variant matching ``rank``.

    The rank is assumed to be in range already; see
    :func:`wargame.parser.parse_lines` for validation.
    """

    if rank >= FIRST_FACE_RANK:
        return FaceCard(suit=suit, rank=rank)
    return StandardCard(suit=suit, rank=rank)
