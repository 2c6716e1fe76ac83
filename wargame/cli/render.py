"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from rich import box
from rich.markup import escape
from rich.table import Table

from ..cards import Card, FaceCard, JokerCard
from ..deck import Deck
from ..game import GameResult, RoundOutcome, RoundResult
from ..scoreboard import MatchHistory

_SUIT_COLOURS = {
    "Hearts": "red",
    "Diamonds": "magenta",
    "Clubs": "green",
    "Spades": "cyan",
}


def variant_name(card: Card) -> str:
    if isinstance(card, JokerCard):
        return "Joker"
    if isinstance(card, FaceCard):
        return "Face"
    return "Standard"


def format_card(card: Card) -> str:
    """Return a Rich-rendered label for ``card``."""

    text = escape(card.render())
    if isinstance(card, JokerCard):
        return f"[bold magenta]{text}[/bold magenta]"
    colour = _SUIT_COLOURS.get(getattr(card, "suit", ""), "white")
    return f"[{colour}]{text}[/{colour}]"


def format_round(result: RoundResult) -> str:
    """One console line describing ``result``."""

    line = (
        f"[bold]Round {result.round_number}[/bold]: "
        f"Player A plays {format_card(result.card_a)}, "
        f"Player B plays {format_card(result.card_b)}"
    )
    if result.wars:
        line += f" [yellow](war x{result.wars}, {result.pot_size} cards)[/yellow]"
    if result.winner is RoundOutcome.TIE:
        return f"{line} -> tie, cards returned"
    return f"{line} -> {result.winner.label} wins the round"


def announce_winner(result: GameResult) -> str:
    if result.winner is RoundOutcome.TIE:
        return "[bold yellow]It's a tie![/bold yellow]"
    return f"[bold green]{result.winner.label} wins![/bold green]"


def deck_table(deck: Deck, *, title: str = "Deck") -> Table:
    """Return a Rich table listing every card of ``deck`` top first."""

    table = Table(title=title, box=box.SIMPLE_HEAVY)
    table.add_column("#", justify="right")
    table.add_column("Card", justify="left")
    table.add_column("Value", justify="right")
    table.add_column("Variant", justify="left")
    for idx, card in enumerate(deck, start=1):
        table.add_row(str(idx), format_card(card), str(card.value()), variant_name(card))
    return table


def match_summary(result: GameResult, history: MatchHistory) -> Table:
    """Return the aggregated game summary table."""

    table = Table(title="Game Summary", box=box.DOUBLE_EDGE)
    table.add_column("Player", justify="center")
    table.add_column("Rounds Won", justify="right")
    table.add_column("Cards Held", justify="right")

    held = {RoundOutcome.PLAYER_A: result.count_a, RoundOutcome.PLAYER_B: result.count_b}
    for total in history.totals():
        label = total.player.label
        if total.player is result.winner:
            label = f"[bold blue]{label}[/bold blue]"
        table.add_row(label, str(total.rounds_won), str(held[total.player]))
    table.caption = (
        f"{result.rounds_played} round(s), {history.ties} tie(s), {history.wars} war(s)"
    )
    return table
