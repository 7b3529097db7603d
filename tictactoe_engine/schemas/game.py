from pydantic import BaseModel, Field, model_validator
from typing import List, Optional

from tictactoe_engine.core.config import settings
from tictactoe_engine.core.game_config import MIN_DIMENSION
from tictactoe_engine.models.game import Marker, StatusKind


class GameCreate(BaseModel):
    # Range is checked by the engine, which reports INVALID_DIMENSION
    dimension: int = Field(
        settings.DEFAULT_DIMENSION,
        strict=True,
        description=f"Side length of the square board (at least {MIN_DIMENSION})"
    )


class MoveCreate(BaseModel):
    cell_index: Optional[int] = Field(None, strict=True, description="Row-major cell index (row * N + col)")
    row: Optional[int] = Field(None, ge=0, strict=True, description="Row index, used together with col")
    col: Optional[int] = Field(None, ge=0, strict=True, description="Column index, used together with row")

    @model_validator(mode="after")
    def check_one_cell_form(self):
        has_coordinates = self.row is not None or self.col is not None
        if self.cell_index is not None:
            if has_coordinates:
                raise ValueError("Provide either cell_index or row and col, not both")
        elif self.row is None or self.col is None:
            raise ValueError("Provide cell_index or both row and col")
        return self


class GameStateResponse(BaseModel):
    dimension: int
    board: List[Marker]
    current_player: Marker
    status: StatusKind
    winner: Optional[Marker] = None
    move_count: int
    message: str


class MoveResponse(BaseModel):
    cell_index: int
    row: int
    col: int
    player: Marker
    board: List[Marker]
    current_player: Marker
    status: StatusKind
    winner: Optional[Marker] = None
    is_tie: bool = False
    message: str
