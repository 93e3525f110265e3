"""Huffman coding from symbol frequencies."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Optional

_INTERNAL_SYMBOL = "$"


@dataclass
class HuffmanNode:
    """A node of a Huffman tree; internal nodes carry the symbol ``$``."""

    symbol: str
    frequency: int
    left: Optional["HuffmanNode"] = None
    right: Optional["HuffmanNode"] = None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


class _MinHeap:
    """Array min-heap on node frequency with the classic tie behaviour."""

    def __init__(self, nodes: Iterable[HuffmanNode]) -> None:
        self.items = list(nodes)
        for index in range(len(self.items) // 2 - 1, -1, -1):
            self._sift_down(index)

    def __len__(self) -> int:
        return len(self.items)

    def _sift_down(self, index: int) -> None:
        items = self.items
        while True:
            smallest = index
            left = 2 * index + 1
            right = left + 1
            if left < len(items) and items[left].frequency < items[smallest].frequency:
                smallest = left
            if right < len(items) and items[right].frequency < items[smallest].frequency:
                smallest = right
            if smallest == index:
                return
            items[smallest], items[index] = items[index], items[smallest]
            index = smallest

    def pop(self) -> HuffmanNode:
        top = self.items[0]
        last = self.items.pop()
        if self.items:
            self.items[0] = last
            self._sift_down(0)
        return top

    def push(self, node: HuffmanNode) -> None:
        items = self.items
        items.append(node)
        index = len(items) - 1
        while index and node.frequency < items[(index - 1) // 2].frequency:
            items[index] = items[(index - 1) // 2]
            index = (index - 1) // 2
        items[index] = node


def build_huffman_tree(symbols: Sequence[str], frequencies: Sequence[int]) -> HuffmanNode:
    """Build the Huffman tree by repeatedly joining the two rarest nodes."""
    if len(symbols) != len(frequencies):
        raise ValueError("symbols and frequencies must have the same length")
    if not symbols:
        raise ValueError("at least one symbol is needed")
    if any(frequency < 0 for frequency in frequencies):
        raise ValueError("frequencies must not be negative")

    heap = _MinHeap(HuffmanNode(s, f) for s, f in zip(symbols, frequencies))
    while len(heap) > 1:
        left = heap.pop()
        right = heap.pop()
        heap.push(HuffmanNode(_INTERNAL_SYMBOL, left.frequency + right.frequency, left, right))
    return heap.pop()


def huffman_codes(symbols: Sequence[str], frequencies: Sequence[int]) -> dict[str, str]:
    """Map each symbol to its bit string, in left-to-right leaf order."""
    if len(set(symbols)) != len(symbols):
        raise ValueError("symbols must be distinct")
    root = build_huffman_tree(symbols, frequencies)
    codes: dict[str, str] = {}
    stack: list[tuple[HuffmanNode, str]] = [(root, "")]
    while stack:
        node, path = stack.pop()
        if node.is_leaf():
            codes[node.symbol] = path
            continue
        if node.right is not None:
            stack.append((node.right, path + "1"))
        if node.left is not None:
            stack.append((node.left, path + "0"))
    return codes