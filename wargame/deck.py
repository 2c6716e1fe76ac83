"""Ordered deck container used by both players."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator

from .cards import Card
from .errors import EmptyDeck

__all__ = ["Deck", "DEFAULT_SEPARATOR"]

DEFAULT_SEPARATOR = " "


class Deck:
    """FIFO of owned cards: draws come off the top, inserts go to the bottom.

    A card lives in exactly one deck at a time. Moving a card between decks is
    a :meth:`draw_from_top` on the source followed by :meth:`add_to_bottom` on
    the target; cards are never copied.
    """

    __slots__ = ("_cards",)

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        self._cards: deque[Card] = deque()
        for card in cards:
            self.add_to_bottom(card)

    def add_to_bottom(self, card: Card) -> None:
        """Append ``card`` after the current bottom card."""

        self._cards.append(card)

    def draw_from_top(self) -> Card:
        """Remove and return the top card.

        Raises:
            EmptyDeck: If the deck holds no cards. The deck is left unchanged.
        """

        if not self._cards:
            raise EmptyDeck()
        return self._cards.popleft()

    def size(self) -> int:
        return len(self._cards)

    @property
    def is_empty(self) -> bool:
        return not self._cards

    def cards(self) -> tuple[Card, ...]:
        """Return a top-to-bottom snapshot of the contents."""

        return tuple(self._cards)

    def render(self, separator: str = DEFAULT_SEPARATOR) -> str:
        """Join the renderings of every card, top first."""

        return separator.join(card.render() for card in self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(tuple(self._cards))

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Deck(size={len(self._cards)})"
