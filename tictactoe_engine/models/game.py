"""
Domain types for the tic-tac-toe engine.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Marker(str, Enum):
    EMPTY = ""
    X = "x"
    O = "o"

    @property
    def is_player(self) -> bool:
        return self is not Marker.EMPTY

    def other(self) -> "Marker":
        """Return the opposing player's marker."""
        if self is Marker.X:
            return Marker.O
        if self is Marker.O:
            return Marker.X
        raise ValueError("The empty marker has no opponent")


Board = Tuple[Marker, ...]


class StatusKind(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    WON = "won"
    TIED = "tied"
    ENDED = "ended"


@dataclass(frozen=True)
class GameStatus:
    """
    Tagged game status. ``winner`` is only a player marker when ``kind`` is WON.
    """
    kind: StatusKind
    winner: Marker = Marker.EMPTY

    @classmethod
    def won(cls, marker: Marker) -> "GameStatus":
        if not marker.is_player:
            raise ValueError("A game can only be won by a player marker")
        return cls(StatusKind.WON, marker)

    @property
    def is_active(self) -> bool:
        return self.kind is StatusKind.IN_PROGRESS

    @property
    def is_terminal(self) -> bool:
        return self.kind in (StatusKind.WON, StatusKind.TIED, StatusKind.ENDED)


NOT_STARTED = GameStatus(StatusKind.NOT_STARTED)
IN_PROGRESS = GameStatus(StatusKind.IN_PROGRESS)
TIED = GameStatus(StatusKind.TIED)
ENDED = GameStatus(StatusKind.ENDED)


class OutcomeKind(str, Enum):
    NONE = "none"
    WIN = "win"
    TIE = "tie"


@dataclass(frozen=True)
class Outcome:
    """Verdict of a single move."""
    kind: OutcomeKind
    winner: Marker = Marker.EMPTY

    @classmethod
    def win(cls, marker: Marker) -> "Outcome":
        return cls(OutcomeKind.WIN, marker)


NO_OUTCOME = Outcome(OutcomeKind.NONE)
TIE = Outcome(OutcomeKind.TIE)


@dataclass(frozen=True)
class MoveResult:
    cell_index: int
    mover: Marker
    board: Board
    current_player: Marker
    status: GameStatus


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of a game handed to the presentation layer."""
    dimension: int
    board: Board
    current_player: Marker
    status: GameStatus
    move_count: int
