from typing import Sequence

from tictactoe_engine.models.game import Marker, Outcome, NO_OUTCOME, TIE
from tictactoe_engine.services.lines import (
    row_indices, col_indices, diagonals, on_main_diagonal, on_anti_diagonal
)


def _line_owned_by(board: Sequence[Marker], line: Sequence[int], mover: Marker) -> bool:
    return all(board[idx] == mover for idx in line)


def evaluate(board: Sequence[Marker], last_move_idx: int, mover: Marker, n: int) -> Outcome:
    """
    Decide the result of the move just played at ``last_move_idx``.

    Only lines through the last move are checked, in a fixed order:
    row, column, main diagonal, anti-diagonal. A full board with no
    completed line is a tie.
    """
    if len(board) != n * n:
        raise ValueError(f"Board of {len(board)} cells does not match {n}x{n}")

    if _line_owned_by(board, row_indices(last_move_idx, n), mover):
        return Outcome.win(mover)

    if _line_owned_by(board, col_indices(last_move_idx, n), mover):
        return Outcome.win(mover)

    main, anti = diagonals(n)
    if on_main_diagonal(last_move_idx, n) and _line_owned_by(board, main, mover):
        return Outcome.win(mover)

    if on_anti_diagonal(last_move_idx, n) and _line_owned_by(board, anti, mover):
        return Outcome.win(mover)

    if all(cell != Marker.EMPTY for cell in board):
        return TIE

    return NO_OUTCOME
