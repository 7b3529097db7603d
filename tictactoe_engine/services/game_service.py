import logging
from typing import List

from tictactoe_engine.core.exceptions import GameException
from tictactoe_engine.core.game_config import STARTING_MARKER, get_total_cells
from tictactoe_engine.models.game import (
    Board, GameSnapshot, GameStatus, Marker, MoveResult, OutcomeKind, StatusKind,
    NOT_STARTED, IN_PROGRESS, TIED, ENDED
)
from tictactoe_engine.services.outcome_evaluator import evaluate
from tictactoe_engine.services.validators import GameValidator

logger = logging.getLogger(__name__)


class GameStateMachine:
    """
    Owns the board, the current player and the game status of a single game.

    All mutation goes through start_game, submit_move and end_game. Each of
    them validates completely before touching state, so a rejected call
    leaves the game exactly as it was. Instances are not thread-safe.
    """

    def __init__(self, starting_marker: Marker = Marker(STARTING_MARKER)):
        if not starting_marker.is_player:
            raise ValueError("Starting marker must be a player marker")
        self.validator = GameValidator()
        self.starting_marker = starting_marker
        self._dimension = 0
        self._board: List[Marker] = []
        self._current_player = Marker.EMPTY
        self._status = NOT_STARTED
        self._move_count = 0

    @property
    def dimension(self) -> int:
        return self._dimension

    @property
    def board(self) -> Board:
        return tuple(self._board)

    @property
    def current_player(self) -> Marker:
        return self._current_player

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def move_count(self) -> int:
        return self._move_count

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            dimension=self._dimension,
            board=self.board,
            current_player=self._current_player,
            status=self._status,
            move_count=self._move_count
        )

    def start_game(self, dimension: int) -> GameSnapshot:
        try:
            self.validator.validate_dimension(dimension)
        except GameException as e:
            logger.debug(f"Rejected new game: {e}")
            raise

        self._dimension = dimension
        self._board = [Marker.EMPTY] * get_total_cells(dimension)
        self._current_player = self.starting_marker
        self._status = IN_PROGRESS
        self._move_count = 0

        logger.info(f"Game ({dimension}x{dimension}) started, {self.starting_marker.value} moves first")
        return self.snapshot()

    def submit_move(self, cell_index: int) -> MoveResult:
        try:
            self.validator.validate_move(self, cell_index)
        except GameException as e:
            logger.debug(f"Rejected move at {cell_index!r}: {e}")
            raise

        mover = self._current_player
        self._board[cell_index] = mover
        self._move_count += 1

        outcome = evaluate(self._board, cell_index, mover, self._dimension)
        if outcome.kind is OutcomeKind.WIN:
            self._status = GameStatus.won(mover)
            self._current_player = Marker.EMPTY
            logger.info(f"Player {mover.value} won after {self._move_count} moves")
        elif outcome.kind is OutcomeKind.TIE:
            self._status = TIED
            self._current_player = Marker.EMPTY
            logger.info(f"Game ended in a tie after {self._move_count} moves")
        else:
            self._current_player = mover.other()

        return MoveResult(
            cell_index=cell_index,
            mover=mover,
            board=self.board,
            current_player=self._current_player,
            status=self._status
        )

    def end_game(self) -> None:
        try:
            self.validator.validate_end(self)
        except GameException as e:
            logger.debug(f"Rejected end of game: {e}")
            raise

        self._status = ENDED
        self._current_player = Marker.EMPTY
        logger.info(f"Game ended by request after {self._move_count} moves")


def describe_status(status: GameStatus) -> str:
    """Human-readable summary of a status, as shown under the board."""
    if status.kind is StatusKind.WON:
        return f"the winner is {status.winner.value}!"
    if status.kind is StatusKind.TIED:
        return "it's a tie!"
    if status.kind is StatusKind.ENDED:
        return "game over"
    if status.kind is StatusKind.IN_PROGRESS:
        return "in progress"
    return "not started"
