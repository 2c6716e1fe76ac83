"""Tests for the FIFO deck container."""

from __future__ import annotations

import pytest

from wargame.cards import FaceCard, JokerCard, StandardCard
from wargame.deck import Deck
from wargame.errors import EmptyDeck, FailureKind


def test_new_deck_is_empty() -> None:
    deck = Deck()
    assert deck.size() == 0
    assert len(deck) == 0
    assert deck.is_empty
    assert deck.render() == ""


def test_draws_follow_insertion_order() -> None:
    c1 = StandardCard("Hearts", 2)
    c2 = JokerCard("Red")
    c3 = FaceCard("Clubs", 12)
    deck = Deck()
    for card in (c1, c2, c3):
        deck.add_to_bottom(card)

    assert deck.draw_from_top() is c1
    assert deck.draw_from_top() is c2
    assert deck.draw_from_top() is c3
    assert deck.is_empty


def test_constructor_inserts_in_order() -> None:
    cards = [StandardCard("Hearts", rank) for rank in (3, 1, 2)]
    deck = Deck(cards)
    assert deck.cards() == tuple(cards)
    assert [card.rank for card in deck] == [3, 1, 2]


def test_draw_from_empty_deck_raises_without_mutation() -> None:
    deck = Deck()
    with pytest.raises(EmptyDeck) as excinfo:
        deck.draw_from_top()
    assert excinfo.value.kind is FailureKind.EMPTY_DECK
    assert deck.size() == 0

    deck.add_to_bottom(StandardCard("Hearts", 4))
    assert deck.size() == 1


def test_move_transfers_card_between_decks() -> None:
    card = StandardCard("Spades", 9)
    source = Deck([card, StandardCard("Spades", 3)])
    target = Deck([JokerCard("Black")])

    target.add_to_bottom(source.draw_from_top())

    assert source.size() == 1
    assert target.size() == 2
    assert target.cards()[-1] is card
    assert all(c is not card for c in source)


def test_render_is_ordered_and_pure() -> None:
    deck = Deck([StandardCard("Hearts", 2), JokerCard("Red"), FaceCard("Clubs", 12)])

    first = deck.render()
    second = deck.render()

    assert first == "Hearts:2 Joker:Red Clubs:Queen"
    assert first == second
    assert str(deck) == first
    assert deck.size() == 3


def test_render_with_custom_separator() -> None:
    deck = Deck([StandardCard("Hearts", 2), StandardCard("Hearts", 3)])
    assert deck.render("|") == "Hearts:2|Hearts:3"


def test_iteration_does_not_consume() -> None:
    deck = Deck([StandardCard("Hearts", 2), StandardCard("Hearts", 3)])
    assert len(list(deck)) == 2
    assert deck.size() == 2


def test_repr_reports_size() -> None:
    assert repr(Deck([JokerCard("Red")])) == "Deck(size=1)"
