"""
Line index computations over a row-major flattened N x N board.
"""
from typing import List, Tuple


def _check_dimension(n: int) -> None:
    if n < 1:
        raise ValueError(f"Dimension must be at least 1, got {n}")


def _check_index(idx: int, n: int) -> None:
    _check_dimension(n)
    if not (0 <= idx < n * n):
        raise ValueError(f"Index {idx} is invalid for {n}x{n} board")


def cell_index(row: int, col: int, n: int) -> int:
    """Flatten a (row, col) position into a cell index."""
    _check_dimension(n)
    if not (0 <= row < n and 0 <= col < n):
        raise ValueError(f"Position ({row}, {col}) is invalid for {n}x{n} board")
    return row * n + col


def cell_coordinates(idx: int, n: int) -> Tuple[int, int]:
    """Inverse of cell_index."""
    _check_index(idx, n)
    return divmod(idx, n)


def row_indices(idx: int, n: int) -> List[int]:
    """All cells in the same row as idx, ascending."""
    _check_index(idx, n)
    start = (idx // n) * n
    return list(range(start, start + n))


def col_indices(idx: int, n: int) -> List[int]:
    """All cells in the same column as idx, ascending."""
    _check_index(idx, n)
    return list(range(idx % n, n * n, n))


def diagonals(n: int) -> Tuple[List[int], List[int]]:
    """
    Return the (main, anti) diagonals of the board.

    The main diagonal runs from the top-left corner (0, N+1, 2(N+1), ...),
    the anti-diagonal from the top-right corner (N-1, 2(N-1), ...).
    Both hold exactly N indices; for N = 1 both are [0].
    """
    _check_dimension(n)
    main = [i * (n + 1) for i in range(n)]
    anti = [(i + 1) * (n - 1) for i in range(n)]
    return main, anti


def on_main_diagonal(idx: int, n: int) -> bool:
    _check_index(idx, n)
    row, col = divmod(idx, n)
    return row == col


def on_anti_diagonal(idx: int, n: int) -> bool:
    _check_index(idx, n)
    row, col = divmod(idx, n)
    return row + col == n - 1
