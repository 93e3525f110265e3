"""An array of fixed capacity with positional insert and delete."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class FixedArray:
    """Holds at most ``CAPACITY`` items.

    Inserting into a full array shifts the later items right and the last
    one falls off the end.
    """

    CAPACITY = 10

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items = list(values)
        if len(self._items) > self.CAPACITY:
            raise ValueError(f"at most {self.CAPACITY} values fit")

    def insert(self, position: int, value: Any) -> Any | None:
        """Insert ``value`` at ``position``; return the item pushed out, if any."""
        if not 0 <= position <= len(self._items) or position >= self.CAPACITY:
            raise IndexError(f"position {position} out of range")
        self._items.insert(position, value)
        if len(self._items) > self.CAPACITY:
            return self._items.pop()
        return None

    def delete(self, position: int) -> Any:
        """Remove and return the item at ``position``."""
        if not 0 <= position < len(self._items):
            raise IndexError(f"position {position} out of range")
        return self._items.pop(position)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int | slice) -> Any:
        return self._items[index]

    def __repr__(self) -> str:
        return f"FixedArray({self._items!r})"