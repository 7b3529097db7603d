"""
Exception handlers for the tic-tac-toe API.
"""
import logging
from fastapi import Request, FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from tictactoe_engine.core.config import settings
from tictactoe_engine.core.exceptions import (
    InvalidDimension, GameNotActive, CellOccupied, CellOutOfRange, InvalidTransition
)

logger = logging.getLogger(__name__)


def create_error_response(status_code: int, detail: str, error_code: str) -> JSONResponse:
    """Create a standardized error response."""
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": detail,
            "error_code": error_code
        }
    )


async def invalid_dimension_handler(request: Request, exc: InvalidDimension) -> JSONResponse:
    """Handle invalid dimension exceptions."""
    return create_error_response(422, str(exc), "INVALID_DIMENSION")


async def game_not_active_handler(request: Request, exc: GameNotActive) -> JSONResponse:
    """Handle moves submitted while no game is in progress."""
    return create_error_response(400, str(exc), "GAME_NOT_ACTIVE")


async def cell_occupied_handler(request: Request, exc: CellOccupied) -> JSONResponse:
    """Handle cell occupied exceptions."""
    return create_error_response(400, str(exc), "CELL_OCCUPIED")


async def cell_out_of_range_handler(request: Request, exc: CellOutOfRange) -> JSONResponse:
    """Handle moves outside the board."""
    return create_error_response(400, str(exc), "CELL_OUT_OF_RANGE")


async def invalid_transition_handler(request: Request, exc: InvalidTransition) -> JSONResponse:
    """Handle invalid state transitions."""
    return create_error_response(409, str(exc), "INVALID_TRANSITION")


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle validation errors with better formatting."""
    errors = []
    for error in exc.errors():
        errors.append({
            "field": ".".join(str(x) for x in error["loc"][1:]),
            "message": error["msg"],
            "type": error["type"]
        })

    return JSONResponse(
        status_code=422,
        content={
            "detail": "Validation error",
            "errors": errors,
            "error_code": "VALIDATION_ERROR"
        }
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle generic HTTP exceptions."""
    return create_error_response(exc.status_code, exc.detail, f"HTTP_{exc.status_code}")


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.error(f"Unexpected error: {exc}", exc_info=True)

    # Don't expose internal errors in production
    if settings.DEBUG:
        detail = str(exc)
    else:
        detail = "An unexpected error occurred"

    return create_error_response(500, detail, "INTERNAL_ERROR")


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(InvalidDimension, invalid_dimension_handler)
    app.add_exception_handler(GameNotActive, game_not_active_handler)
    app.add_exception_handler(CellOccupied, cell_occupied_handler)
    app.add_exception_handler(CellOutOfRange, cell_out_of_range_handler)
    app.add_exception_handler(InvalidTransition, invalid_transition_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
