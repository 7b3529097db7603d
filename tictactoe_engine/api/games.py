"""
Game-related API endpoints.
"""
from fastapi import APIRouter, Depends

from tictactoe_engine.api.deps import get_game
from tictactoe_engine.core.exceptions import CellOutOfRange
from tictactoe_engine.models.game import GameSnapshot, StatusKind
from tictactoe_engine.schemas import game as game_schemas
from tictactoe_engine.services.game_service import GameStateMachine, describe_status
from tictactoe_engine.services.lines import cell_index, cell_coordinates

router = APIRouter(
    prefix="/game",
    tags=["game"]
)


def _state_response(snapshot: GameSnapshot) -> dict:
    status = snapshot.status
    return {
        "dimension": snapshot.dimension,
        "board": list(snapshot.board),
        "current_player": snapshot.current_player,
        "status": status.kind,
        "winner": status.winner if status.kind is StatusKind.WON else None,
        "move_count": snapshot.move_count,
        "message": describe_status(status)
    }


def _resolve_cell_index(move: game_schemas.MoveCreate, game: GameStateMachine):
    if move.cell_index is not None:
        return move.cell_index
    if not game.status.is_active:
        # submit_move reports the inactive game
        return None
    try:
        return cell_index(move.row, move.col, game.dimension)
    except ValueError as e:
        raise CellOutOfRange(str(e)) from e


@router.post("", response_model=game_schemas.GameStateResponse)
def start_game(
        game_in: game_schemas.GameCreate,
        game: GameStateMachine = Depends(get_game)
):
    """
    Start a new game on a dimension x dimension board.

    Any previous game is discarded. Player x moves first.
    """
    return _state_response(game.start_game(game_in.dimension))


@router.get("", response_model=game_schemas.GameStateResponse)
def get_game_state(game: GameStateMachine = Depends(get_game)):
    """
    Get the current state of the game.

    Returns:
    - Board as a row-major list of markers
    - Current player (empty unless in progress)
    - Status and winner
    """
    return _state_response(game.snapshot())


@router.post("/moves", response_model=game_schemas.MoveResponse)
def make_move(
        move: game_schemas.MoveCreate,
        game: GameStateMachine = Depends(get_game)
):
    """
    Place the current player's marker.

    The cell is given either as a flattened cell_index or as row and col.
    """
    result = game.submit_move(_resolve_cell_index(move, game))
    row, col = cell_coordinates(result.cell_index, game.dimension)
    status = result.status
    return {
        "cell_index": result.cell_index,
        "row": row,
        "col": col,
        "player": result.mover,
        "board": list(result.board),
        "current_player": result.current_player,
        "status": status.kind,
        "winner": status.winner if status.kind is StatusKind.WON else None,
        "is_tie": status.kind is StatusKind.TIED,
        "message": describe_status(status)
    }


@router.post("/end", response_model=game_schemas.GameStateResponse)
def end_game(game: GameStateMachine = Depends(get_game)):
    """
    End the game in progress without a result.
    """
    game.end_game()
    return _state_response(game.snapshot())
