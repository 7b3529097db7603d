"""
Router registration for the tic-tac-toe API.
"""
from fastapi import FastAPI

from tictactoe_engine.api import games


def include_routers(app: FastAPI) -> None:
    """Include all API routers with the FastAPI application."""
    app.include_router(games.router, prefix="/api/v1", tags=["game"])
