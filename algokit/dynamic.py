"""Dynamic-programming algorithms: 0/1 knapsack and longest common subsequence."""

from __future__ import annotations

from collections.abc import Sequence


def knapsack_01(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Return the best total value of items whose weights fit in ``capacity``."""
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    previous = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        current = [0] * (capacity + 1)
        for room in range(1, capacity + 1):
            if weight <= room:
                current[room] = max(value + previous[room - weight], previous[room])
            else:
                current[room] = previous[room]
        previous = current
    return previous[capacity]


def longest_common_subsequence(first: str, second: str) -> str:
    """Return a longest subsequence common to both strings."""
    rows, cols = len(first), len(second)
    table = [[0] * (cols + 1) for _ in range(rows + 1)]
    for i, left in enumerate(first, start=1):
        for j, right in enumerate(second, start=1):
            if left == right:
                table[i][j] = table[i - 1][j - 1] + 1
            else:
                table[i][j] = max(table[i - 1][j], table[i][j - 1])

    result: list[str] = []
    i, j = rows, cols
    while i > 0 and j > 0:
        if first[i - 1] == second[j - 1]:
            result.append(first[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            i -= 1
        else:
            j -= 1
    return "".join(reversed(result))