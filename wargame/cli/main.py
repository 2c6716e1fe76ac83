"""Typer entry-point wiring for the War CLI."""

from __future__ import annotations

import logging
from pathlib import Path

import click
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from typer.core import TyperCommand

from ..deck import Deck
from ..errors import WarGameError
from ..game import GameConfig, RoundResult, WarGame, deal
from ..parser import read_deck
from ..scoreboard import MatchHistory, RoundWriter
from .render import announce_winner, deck_table, format_round, match_summary


class _UsageExitsOne(TyperCommand):
    """Command whose usage errors (missing or extra arguments, bad options) exit with 1."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as exc:
            exc.exit_code = 1
            raise


app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger("wargame")


def configure_logging(verbose: bool) -> None:
    """Route engine logs through Rich on stderr."""

    level = logging.DEBUG if verbose else logging.WARNING
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.addHandler(RichHandler(console=err_console, show_path=False, markup=False))
    logger.setLevel(level)
    logger.propagate = False


def _fail(exc: WarGameError) -> typer.Exit:
    logger.debug("aborting: %s (%s)", exc, exc.kind.value)
    err_console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
    return typer.Exit(code=1)


class _ConsoleReporter:
    """Prints one line per round as the game progresses."""

    def on_round(self, round_number: int, deck_a: Deck, deck_b: Deck, result: RoundResult) -> None:
        console.print(format_round(result), soft_wrap=True)


@app.command(cls=_UsageExitsOne)
def play(
    input_path: Path = typer.Argument(..., metavar="INPUT", help="Deck file, one card per line."),
    output_path: Path = typer.Argument(..., metavar="OUTPUT", help="CSV round log to create."),
    max_rounds: int = typer.Option(1000, min=1, help="Stop after this many rounds."),
    war_face_down: int = typer.Option(1, min=0, help="Face-down cards placed during a war."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Hide the per-round lines."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging."),
) -> None:
    """Load a deck, deal it between two players and play War."""

    configure_logging(verbose)
    config = GameConfig(max_rounds=max_rounds, war_face_down=war_face_down)

    try:
        source = read_deck(input_path)
        deck_a, deck_b = deal(source)
        console.print(
            f"[bold cyan]Starting War[/bold cyan]: Player A has {deck_a.size()} card(s), "
            f"Player B has {deck_b.size()} card(s)"
        )
        history = MatchHistory()
        with RoundWriter(output_path, separator=config.separator) as writer:
            observers = [writer, history]
            if not quiet:
                observers.append(_ConsoleReporter())
            game = WarGame(deck_a, deck_b, config, observers=observers)
            result = game.play()
    except WarGameError as exc:
        raise _fail(exc) from exc

    console.print("[bold]Game Over[/bold]")
    if result.reason == "round_limit":
        console.print(f"Round limit of {config.max_rounds} reached; comparing card counts.")
    console.print(announce_winner(result))
    console.print(match_summary(result, history))


@app.command(cls=_UsageExitsOne)
def show(
    input_path: Path = typer.Argument(..., metavar="INPUT", help="Deck file, one card per line."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging."),
) -> None:
    """Parse a deck file and list its cards."""

    configure_logging(verbose)
    try:
        deck = read_deck(input_path)
    except WarGameError as exc:
        raise _fail(exc) from exc
    console.print(deck_table(deck, title=str(input_path)))
    console.print(f"[cyan]{deck.size()} card(s)[/cyan]")


def main() -> None:
    """Entry-point for the ``wargame`` console script."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
