class GameException(Exception):
    """Base exception for game-related errors."""
    pass


class InvalidDimension(GameException):
    """Raised when a game is started with a dimension that is not a positive integer."""
    pass


class IllegalMove(GameException):
    """Raised when a move cannot be applied to the board."""
    pass


class GameNotActive(IllegalMove):
    """Raised when a move is submitted while no game is in progress."""
    pass


class CellOccupied(IllegalMove):
    """Raised when trying to move to an occupied cell."""
    pass


class CellOutOfRange(IllegalMove):
    """Raised when the cell index is not on the board."""
    pass


class InvalidTransition(GameException):
    """Raised when a game is ended while not in progress."""
    pass
