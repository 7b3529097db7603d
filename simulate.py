"""
Simple simulation script. Plays random games against a running server.
"""

import requests
import random
import sys


def main():
    BASE_URL = "http://localhost:8000/api/v1"
    NUM_GAMES = 20

    print("=== Tic-Tac-Toe Simulation ===\n")

    stats = {"x": 0, "o": 0, "tie": 0, "ended": 0}

    print(f"Playing {NUM_GAMES} games...")
    for game_num in range(NUM_GAMES):
        # Random dimension for variety
        dimension = random.choice([1, 2, 3, 4, 5])
        response = requests.post(f"{BASE_URL}/game", json={"dimension": dimension})
        if response.status_code != 200:
            print(f"Failed to start game: {response.text}")
            sys.exit(1)

        available_moves = list(range(dimension * dimension))
        # Occasionally abandon a game part way through
        abandon_after = random.choice([None, None, None, 2])

        status = response.json()["status"]
        moves_made = 0
        while available_moves and status == "in_progress":
            if abandon_after is not None and moves_made == abandon_after:
                response = requests.post(f"{BASE_URL}/game/end")
                status = response.json()["status"]
                break

            cell = random.choice(available_moves)
            response = requests.post(f"{BASE_URL}/game/moves", json={"cell_index": cell})
            if response.status_code != 200:
                print(f"Move failed: {response.text}")
                available_moves.remove(cell)
                continue

            move_result = response.json()
            available_moves.remove(cell)
            moves_made += 1
            status = move_result["status"]

        final = requests.get(f"{BASE_URL}/game").json()
        if final["status"] == "won":
            stats[final["winner"]] += 1
        elif final["status"] == "tied":
            stats["tie"] += 1
        else:
            stats["ended"] += 1
        print(f"  Game {game_num + 1} ({dimension}x{dimension}): {final['message']}")

    # Display results
    print("\n=== Results ===\n")
    print(f"  x wins: {stats['x']}")
    print(f"  o wins: {stats['o']}")
    print(f"  Ties:   {stats['tie']}")
    print(f"  Ended:  {stats['ended']}")

    print("\n Simulation complete!")


if __name__ == "__main__":
    main()
