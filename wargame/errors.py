"""Exception hierarchy shared by the War engine and its CLI."""

from __future__ import annotations

from enum import Enum
from os import PathLike

__all__ = [
    "FailureKind",
    "WarGameError",
    "SourceError",
    "UnreadableSource",
    "MalformedInput",
    "EmptySource",
    "EmptyDeck",
    "OutputError",
]


class FailureKind(str, Enum):
    """Machine-readable tag attached to every engine failure."""

    UNREADABLE_SOURCE = "unreadable_source"
    MALFORMED_INPUT = "malformed_input"
    EMPTY_SOURCE = "empty_source"
    EMPTY_DECK = "empty_deck"
    UNWRITABLE_OUTPUT = "unwritable_output"


class WarGameError(Exception):
    """Base class for all errors raised by the engine."""

    kind: FailureKind


class SourceError(WarGameError):
    """Raised when a deck source cannot be turned into a deck."""


class UnreadableSource(SourceError):
    """Raised when the deck source cannot be opened or read."""

    kind = FailureKind.UNREADABLE_SOURCE

    def __init__(self, path: str | PathLike[str], reason: str = "") -> None:
        self.path = str(path)
        message = f"Failed to open input deck: {self.path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class MalformedInput(SourceError):
    """Raised when any line of a deck source fails validation.

    The whole source is rejected; ``line_number`` (1-based) and ``line`` point
    at the first offending record.
    """

    kind = FailureKind.MALFORMED_INPUT

    def __init__(self, line_number: int, line: str) -> None:
        self.line_number = line_number
        self.line = line
        super().__init__(f"Malformed CSV input at line {line_number}: {line!r}")


class EmptySource(SourceError):
    """Raised when a readable source yields no card records."""

    kind = FailureKind.EMPTY_SOURCE

    def __init__(self) -> None:
        super().__init__("Empty or invalid CSV deck")


class EmptyDeck(WarGameError):
    """Raised when drawing from a deck that holds no cards."""

    kind = FailureKind.EMPTY_DECK

    def __init__(self) -> None:
        super().__init__("cannot draw from an empty deck")


class OutputError(WarGameError):
    """Raised when the round log cannot be opened or written."""

    kind = FailureKind.UNWRITABLE_OUTPUT

    def __init__(self, path: str | PathLike[str], reason: str = "") -> None:
        self.path = str(path)
        message = f"Failed to open output CSV: {self.path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
