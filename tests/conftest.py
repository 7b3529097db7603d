import pytest
from fastapi.testclient import TestClient

from tictactoe_engine.api.deps import get_game
from tictactoe_engine.services.game_service import GameStateMachine
from main import app


@pytest.fixture
def game():
    return GameStateMachine()

@pytest.fixture
def started_game(game):
    game.start_game(3)
    return game

@pytest.fixture
def client(game):
    def override_get_game():
        yield game

    app.dependency_overrides[get_game] = override_get_game
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
