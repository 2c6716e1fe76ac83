"""Tests covering dealing and the round loop."""

from __future__ import annotations

import pytest

from wargame.cards import Card, JokerCard, StandardCard
from wargame.deck import Deck
from wargame.game import GameConfig, RoundOutcome, RoundResult, WarGame, deal
from wargame.parser import parse_text


class RecordingObserver:
    def __init__(self) -> None:
        self.calls: list[tuple[int, int, int, RoundResult]] = []

    def on_round(self, round_number: int, deck_a: Deck, deck_b: Deck, result: RoundResult) -> None:
        self.calls.append((round_number, deck_a.size(), deck_b.size(), result))


def _deck(*ranks: int) -> Deck:
    return Deck(StandardCard("Hearts", rank) for rank in ranks)


def _renders(cards: tuple[Card, ...]) -> list[str]:
    return [card.render() for card in cards]


def test_deal_alternates_between_players() -> None:
    source = parse_text("Hearts,1\nSpades,2\nClubs,3\nDiamonds,4\nHearts,5\n")

    deck_a, deck_b = deal(source)

    assert source.is_empty
    assert _renders(deck_a.cards()) == ["Hearts:Ace", "Clubs:3", "Hearts:5"]
    assert _renders(deck_b.cards()) == ["Spades:2", "Diamonds:4"]


@pytest.mark.parametrize(
    ("kwargs", "message"),
    [({"max_rounds": 0}, "max_rounds"), ({"war_face_down": -1}, "war_face_down")],
)
def test_config_validation(kwargs: dict[str, int], message: str) -> None:
    with pytest.raises(ValueError, match=message):
        GameConfig(**kwargs)


def test_higher_card_wins_round() -> None:
    game = WarGame(_deck(9, 2), _deck(4, 3))

    result = game.play_round()

    assert result.winner is RoundOutcome.PLAYER_A
    assert result.round_number == 1
    assert result.pot_size == 2
    assert game.deck_a.size() == 3
    assert game.deck_b.size() == 1
    # Winner takes A's card then B's card at the bottom.
    assert [card.value() for card in game.deck_a] == [2, 9, 4]


def test_ace_is_low() -> None:
    deck_a, deck_b = deal(parse_text("Hearts,1\nSpades,2\n"))
    result = WarGame(deck_a, deck_b).play()

    assert result.winner is RoundOutcome.PLAYER_B
    assert result.reason == "cards"
    assert result.rounds_played == 1


def test_joker_beats_king() -> None:
    deck_a, deck_b = deal(parse_text("Hearts,13\nJoker,Red\n"))
    result = WarGame(deck_a, deck_b).play()

    assert result.winner is RoundOutcome.PLAYER_B
    assert result.count_b == 2


def test_war_moves_the_whole_pot() -> None:
    deck_a = Deck([StandardCard("Hearts", 7), StandardCard("Hearts", 2), StandardCard("Hearts", 9)])
    deck_b = Deck([StandardCard("Clubs", 7), StandardCard("Clubs", 3), StandardCard("Clubs", 4), JokerCard("x")])
    game = WarGame(deck_a, deck_b, GameConfig(war_face_down=1))

    result = game.play_round()

    assert result.wars == 1
    assert result.winner is RoundOutcome.PLAYER_A
    assert result.pot_size == 6
    assert game.deck_a.size() == 6
    assert _renders(game.deck_b.cards()) == ["Joker:x"]
    assert _renders(game.deck_a.cards()) == [
        "Hearts:7",
        "Clubs:7",
        "Hearts:2",
        "Clubs:3",
        "Hearts:9",
        "Clubs:4",
    ]


def test_war_without_cards_loses_the_pot() -> None:
    game = WarGame(_deck(5), _deck(5, 8))

    result = game.play_round()

    assert result.winner is RoundOutcome.PLAYER_B
    assert game.deck_a.is_empty
    assert game.deck_b.size() == 3


def test_war_with_both_decks_dry_returns_cards() -> None:
    game = WarGame(Deck([StandardCard("Hearts", 6)]), Deck([StandardCard("Clubs", 6)]))

    result = game.play_round()

    assert result.winner is RoundOutcome.TIE
    assert game.deck_a.size() == 1
    assert game.deck_b.size() == 1
    assert not game.is_over


def test_cards_are_conserved() -> None:
    lines = "".join(f"{suit},{rank}\n" for suit in ("Hearts", "Diamonds", "Clubs", "Spades") for rank in range(1, 14))
    deck_a, deck_b = deal(parse_text(lines + "Joker,Red\nJoker,Black\n"))
    observer = RecordingObserver()
    game = WarGame(deck_a, deck_b, GameConfig(max_rounds=500), observers=[observer])

    result = game.play()

    assert game.is_over
    assert result.rounds_played == len(observer.calls)
    for _, count_a, count_b, _ in observer.calls:
        assert count_a + count_b == 54
    assert [call[0] for call in observer.calls] == list(range(1, result.rounds_played + 1))


def test_round_limit_compares_counts() -> None:
    game = WarGame(_deck(9, 9, 9), _deck(2, 2, 2), GameConfig(max_rounds=1))

    result = game.play()

    assert result.rounds_played == 1
    assert result.reason == "round_limit"
    assert result.winner is RoundOutcome.PLAYER_A
    assert (result.count_a, result.count_b) == (4, 2)


def test_round_limit_with_equal_counts_is_a_tie() -> None:
    game = WarGame(_deck(9, 2), _deck(2, 9), GameConfig(max_rounds=2))

    result = game.play()

    assert result.reason == "round_limit"
    assert result.winner is RoundOutcome.TIE


def test_play_round_after_game_over_raises() -> None:
    game = WarGame(_deck(9), _deck(2))
    game.play()
    with pytest.raises(RuntimeError):
        game.play_round()


def test_empty_decks_are_exhausted() -> None:
    result = WarGame(Deck(), Deck()).play()
    assert result.winner is RoundOutcome.TIE
    assert result.reason == "exhausted"
    assert result.rounds_played == 0


def test_outcome_labels() -> None:
    assert RoundOutcome.PLAYER_A.label == "Player A"
    assert RoundOutcome.TIE.label == "Tie"
