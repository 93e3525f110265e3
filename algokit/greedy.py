"""Greedy algorithms: activity selection and fractional knapsack."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field


def select_activities(starts: Sequence[int], finishes: Sequence[int]) -> list[int]:
    """Pick a maximal set of non-overlapping activities.

    Activities are expected in order of finishing time. The first is always
    taken; each later one is taken if it starts no earlier than the finish of
    the last one taken. Returns the chosen indices.
    """
    if len(starts) != len(finishes):
        raise ValueError("starts and finishes must have the same length")
    if not starts:
        return []
    chosen = [0]
    for index, start in enumerate(starts[1:], start=1):
        if start >= finishes[chosen[-1]]:
            chosen.append(index)
    return chosen


@dataclass(frozen=True)
class Placement:
    """One item put into the bag, whole or in part."""

    item: int
    value: int
    weight: int
    fraction: float
    space_left: int

    @property
    def percent(self) -> int:
        return int(self.fraction * 100)

    @property
    def complete(self) -> bool:
        return self.fraction >= 1.0


@dataclass(frozen=True)
class FractionalResult:
    """Placements in the order made and the profit they earn."""

    placements: list[Placement] = field(default_factory=list)
    total_profit: float = 0.0


def fractional_knapsack(
    capacity: int, weights: Sequence[int], values: Sequence[int]
) -> FractionalResult:
    """Fill the bag by best value per weight, splitting the last item."""
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if any(weight <= 0 for weight in weights):
        raise ValueError("every weight must be positive")

    # Highest ratio first; ties keep the lower index.
    order = sorted(range(len(weights)), key=lambda i: -values[i] / weights[i])
    placements: list[Placement] = []
    total = 0.0
    remaining = capacity
    for item in order:
        if remaining <= 0:
            break
        weight, value = weights[item], values[item]
        remaining -= weight
        if remaining >= 0:
            fraction = 1.0
            total += value
        else:
            fraction = 1 + remaining / weight
            total += fraction * value
        placements.append(
            Placement(
                item=item,
                value=value,
                weight=weight,
                fraction=fraction,
                space_left=max(remaining, 0),
            )
        )
    return FractionalResult(placements=placements, total_profit=total)