"""N-queens by column-wise backtracking."""

from __future__ import annotations

from collections.abc import Sequence


def solve_n_queens(size: int) -> list[list[int]] | None:
    """Return the first board found, with 1 marking a queen, or None.

    Queens are placed column by column, trying rows from the top.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    rows_by_column: list[int] = []

    def safe(row: int) -> bool:
        column = len(rows_by_column)
        return all(
            placed != row and abs(placed - row) != column - col
            for col, placed in enumerate(rows_by_column)
        )

    def place() -> bool:
        if len(rows_by_column) == size:
            return True
        for row in range(size):
            if safe(row):
                rows_by_column.append(row)
                if place():
                    return True
                rows_by_column.pop()
        return False

    if not place():
        return None
    board = [[0] * size for _ in range(size)]
    for column, row in enumerate(rows_by_column):
        board[row][column] = 1
    return board


def format_board(board: Sequence[Sequence[int]]) -> str:
    """Render a board one row per line, each cell as `` n ``."""
    return "".join("".join(f" {cell} " for cell in row) + "\n" for row in board)