class TestGameAPI:

    def test_state_before_start(self, client):
        response = client.get("api/v1/game")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "not_started"
        assert data["board"] == []
        assert data["current_player"] == ""
        assert data["message"] == "not started"

    def test_start_game(self, client):
        response = client.post("api/v1/game", json={"dimension": 4})
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "in_progress"
        assert data["dimension"] == 4
        assert data["board"] == [""] * 16
        assert data["current_player"] == "x"
        assert data["winner"] is None

    def test_start_game_default_dimension(self, client):
        response = client.post("api/v1/game", json={})
        assert response.status_code == 200
        assert response.json()["dimension"] == 3

    def test_start_game_invalid_dimension(self, client):
        client.post("api/v1/game", json={"dimension": 3})
        client.post("api/v1/game/moves", json={"cell_index": 4})
        for dimension in (0, -2):
            response = client.post("api/v1/game", json={"dimension": dimension})
            assert response.status_code == 422
            assert response.json()["error_code"] == "INVALID_DIMENSION"
        state = client.get("api/v1/game").json()
        assert state["dimension"] == 3
        assert state["board"][4] == "x"

    def test_start_game_dimension_must_be_integer(self, client):
        for dimension in (True, "2", 2.0):
            response = client.post("api/v1/game", json={"dimension": dimension})
            assert response.status_code == 422
            assert response.json()["error_code"] == "VALIDATION_ERROR"
        assert client.get("api/v1/game").json()["status"] == "not_started"

    def test_make_move(self, client):
        client.post("api/v1/game", json={"dimension": 3})
        response = client.post("api/v1/game/moves", json={"cell_index": 4})
        assert response.status_code == 200
        data = response.json()
        assert data["cell_index"] == 4
        assert data["row"] == 1
        assert data["col"] == 1
        assert data["player"] == "x"
        assert data["current_player"] == "o"
        assert data["board"][4] == "x"
        assert data["status"] == "in_progress"

    def test_make_move_by_row_and_col(self, client):
        client.post("api/v1/game", json={"dimension": 3})
        response = client.post("api/v1/game/moves", json={"row": 2, "col": 1})
        assert response.status_code == 200
        assert response.json()["cell_index"] == 7

    def test_move_without_cell(self, client):
        client.post("api/v1/game", json={"dimension": 3})
        response = client.post("api/v1/game/moves", json={"row": 2})
        assert response.status_code == 422
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    def test_move_cell_must_be_integer(self, client):
        client.post("api/v1/game", json={"dimension": 3})
        for body in ({"cell_index": True}, {"cell_index": "1"}, {"row": True, "col": 0}):
            response = client.post("api/v1/game/moves", json=body)
            assert response.status_code == 422
            assert response.json()["error_code"] == "VALIDATION_ERROR"
        state = client.get("api/v1/game").json()
        assert state["board"] == [""] * 9
        assert state["current_player"] == "x"

    def test_move_with_both_cell_forms(self, client):
        client.post("api/v1/game", json={"dimension": 3})
        response = client.post("api/v1/game/moves", json={"cell_index": 0, "row": 1, "col": 1})
        assert response.status_code == 422
        assert response.json()["error_code"] == "VALIDATION_ERROR"
        assert client.get("api/v1/game").json()["move_count"] == 0

    def test_move_on_occupied_cell(self, client):
        client.post("api/v1/game", json={"dimension": 3})
        client.post("api/v1/game/moves", json={"cell_index": 0})
        response = client.post("api/v1/game/moves", json={"cell_index": 0})
        assert response.status_code == 400
        assert response.json()["error_code"] == "CELL_OCCUPIED"
        assert client.get("api/v1/game").json()["current_player"] == "o"

    def test_move_out_of_range(self, client):
        client.post("api/v1/game", json={"dimension": 3})
        response = client.post("api/v1/game/moves", json={"cell_index": 9})
        assert response.status_code == 400
        assert response.json()["error_code"] == "CELL_OUT_OF_RANGE"
        response = client.post("api/v1/game/moves", json={"row": 0, "col": 3})
        assert response.status_code == 400
        assert response.json()["error_code"] == "CELL_OUT_OF_RANGE"

    def test_move_before_start(self, client):
        response = client.post("api/v1/game/moves", json={"row": 0, "col": 0})
        assert response.status_code == 400
        assert response.json()["error_code"] == "GAME_NOT_ACTIVE"

    def test_game_win_detection(self, client):
        client.post("api/v1/game", json={"dimension": 3})
        moves = [0, 1, 3, 4, 6]
        for i, cell in enumerate(moves):
            response = client.post("api/v1/game/moves", json={"cell_index": cell})
            data = response.json()
            if i == len(moves) - 1:
                assert data["status"] == "won"
                assert data["winner"] == "x"
                assert data["is_tie"] is False
                assert data["current_player"] == ""
                assert data["message"] == "the winner is x!"

    def test_game_tie_detection(self, client):
        client.post("api/v1/game", json={"dimension": 3})
        for cell in [0, 1, 2, 4, 3, 5, 7, 6, 8]:
            response = client.post("api/v1/game/moves", json={"cell_index": cell})
        data = response.json()
        assert data["status"] == "tied"
        assert data["is_tie"] is True
        assert data["winner"] is None
        assert data["message"] == "it's a tie!"

    def test_end_game(self, client):
        client.post("api/v1/game", json={"dimension": 3})
        response = client.post("api/v1/game/end")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ended"
        assert data["current_player"] == ""
        assert data["message"] == "game over"

        response = client.post("api/v1/game/moves", json={"cell_index": 0})
        assert response.status_code == 400
        assert response.json()["error_code"] == "GAME_NOT_ACTIVE"

    def test_end_game_not_in_progress(self, client):
        response = client.post("api/v1/game/end")
        assert response.status_code == 409
        assert response.json()["error_code"] == "INVALID_TRANSITION"
