"""Binary search over an ascending sequence."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def binary_search(values: Sequence[Any], key: Any) -> int | None:
    """Return an index holding ``key`` in ascending ``values``, or None."""
    low, high = 0, len(values)
    while low <= high:
        middle = (low + high) // 2
        if middle >= len(values):
            break
        current = values[middle]
        if current == key:
            return middle
        if current > key:
            high = middle - 1
        else:
            low = middle + 1
    return None