from typing import TYPE_CHECKING

from tictactoe_engine.core.exceptions import (
    InvalidDimension, GameNotActive, CellOccupied, CellOutOfRange, InvalidTransition
)
from tictactoe_engine.core.game_config import is_valid_dimension, get_total_cells
from tictactoe_engine.models.game import Marker, StatusKind

if TYPE_CHECKING:
    from tictactoe_engine.services.game_service import GameStateMachine


class GameValidator:
    """Validates dimensions, moves and state transitions."""

    def validate_dimension(self, dimension) -> None:
        if not is_valid_dimension(dimension):
            raise InvalidDimension(f"Dimension must be a positive integer, got {dimension!r}")

    def validate_move(self, game: "GameStateMachine", cell_index) -> None:
        """Validate a move is legal for any board size."""
        # Check if game is active
        status = game.status
        if not status.is_active:
            if status.kind is StatusKind.NOT_STARTED:
                raise GameNotActive("No game has been started")
            else:
                raise GameNotActive(f"Game is over ({status.kind.value})")

        # Validate index bounds for the active dimension
        total = get_total_cells(game.dimension)
        if isinstance(cell_index, bool) or not isinstance(cell_index, int) \
                or not (0 <= cell_index < total):
            raise CellOutOfRange(
                f"Cell {cell_index!r} is invalid for {game.dimension}x{game.dimension} board"
            )

        # Check if cell is already occupied
        if game.board[cell_index] != Marker.EMPTY:
            raise CellOccupied(f"Cell {cell_index} is already occupied")

    def validate_end(self, game: "GameStateMachine") -> None:
        if not game.status.is_active:
            raise InvalidTransition(
                f"Cannot end a game that is not in progress ({game.status.kind.value})"
            )
