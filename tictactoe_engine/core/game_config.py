"""
Configuration constants for the tic-tac-toe rules engine.
"""

# Dimension limits (no upper bound is enforced)
MIN_DIMENSION = 1
DEFAULT_DIMENSION = 3

# Marker value of the player who moves first
STARTING_MARKER = "x"


def is_valid_dimension(dimension) -> bool:
    """Check if a dimension is a positive integer."""
    if isinstance(dimension, bool) or not isinstance(dimension, int):
        return False
    return dimension >= MIN_DIMENSION

def get_total_cells(dimension: int) -> int:
    """Get total number of cells on an N x N board."""
    return dimension * dimension
