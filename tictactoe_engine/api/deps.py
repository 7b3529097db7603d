"""
Dependency injection for API endpoints.
"""
import threading
from typing import Generator

from tictactoe_engine.services.game_service import GameStateMachine

# The API hosts a single game; the engine itself is not thread-safe.
_game = GameStateMachine()
_game_lock = threading.Lock()


def get_game() -> Generator:
    """
    Game dependency that holds the game lock for the whole request.
    """
    with _game_lock:
        yield _game
