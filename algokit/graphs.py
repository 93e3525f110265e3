"""Shortest paths and minimum spanning trees on small weighted graphs."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Union

INF = math.inf

Weight = Union[int, float]


@dataclass(frozen=True)
class Edge:
    """A directed, weighted edge from ``u`` to ``v``."""

    u: int
    v: int
    w: Weight


class NegativeCycleError(ValueError):
    """Raised when a negative-weight cycle is reachable from the source."""


def _square(matrix: Sequence[Sequence[Weight]]) -> list[list[Weight]]:
    rows = [list(row) for row in matrix]
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("matrix must be square")
    return rows


def _check_vertex(vertex: int, count: int, what: str) -> None:
    if not 0 <= vertex < count:
        raise ValueError(f"{what} {vertex} is not a vertex of a graph with {count} vertices")


def bellman_ford(
    vertex_count: int, edges: Iterable[Edge | tuple[int, int, Weight]], source: int
) -> tuple[list[Weight], list[int | None]]:
    """Single-source shortest paths allowing negative weights.

    Returns ``(distances, predecessors)``; unreachable vertices have distance
    ``INF`` and, like the source, predecessor None.
    Raises NegativeCycleError if a reachable negative cycle exists.
    """
    if vertex_count < 0:
        raise ValueError("vertex_count must not be negative")
    _check_vertex(source, vertex_count, "source")
    edge_list = [edge if isinstance(edge, Edge) else Edge(*edge) for edge in edges]
    for edge in edge_list:
        _check_vertex(edge.u, vertex_count, "edge start")
        _check_vertex(edge.v, vertex_count, "edge end")

    distances: list[Weight] = [INF] * vertex_count
    predecessors: list[int | None] = [None] * vertex_count
    distances[source] = 0

    for _ in range(vertex_count - 1):
        changed = False
        for edge in edge_list:
            if distances[edge.u] != INF and distances[edge.v] > distances[edge.u] + edge.w:
                distances[edge.v] = distances[edge.u] + edge.w
                predecessors[edge.v] = edge.u
                changed = True
        if not changed:
            break

    for edge in edge_list:
        if distances[edge.u] != INF and distances[edge.v] > distances[edge.u] + edge.w:
            raise NegativeCycleError("Negative weight cycle detected!")
    return distances, predecessors


def dijkstra(matrix: Sequence[Sequence[Weight]], start: int) -> list[Weight]:
    """Shortest distances from ``start`` in an adjacency matrix.

    A zero entry means there is no edge. Unreachable vertices get ``INF``.
    """
    rows = _square(matrix)
    count = len(rows)
    _check_vertex(start, count, "start")

    def cost(i: int, j: int) -> Weight:
        weight = rows[i][j]
        return INF if weight == 0 else weight

    distance = [cost(start, i) for i in range(count)]
    distance[start] = 0
    visited = {start}
    while len(visited) < count:
        candidates = [i for i in range(count) if i not in visited and distance[i] < INF]
        if not candidates:
            break
        nearest = min(candidates, key=distance.__getitem__)
        visited.add(nearest)
        for i in range(count):
            if i not in visited and distance[nearest] + cost(nearest, i) < distance[i]:
                distance[i] = distance[nearest] + cost(nearest, i)
    return distance


def floyd_warshall(matrix: Sequence[Sequence[Weight]]) -> list[list[Weight]]:
    """All-pairs shortest paths; ``INF`` marks a missing edge."""
    dist = _square(matrix)
    for k in range(len(dist)):
        through = dist[k]
        for row in dist:
            to_k = row[k]
            if to_k == INF:
                continue
            for j, onward in enumerate(through):
                if to_k + onward < row[j]:
                    row[j] = to_k + onward
    return dist


def kruskal(matrix: Sequence[Sequence[Weight]]) -> list[Edge]:
    """Minimum spanning forest of an undirected adjacency matrix.

    Only the lower triangle is read and a zero entry means no edge. The
    chosen edges are returned in the order they were accepted.
    """
    rows = _square(matrix)
    candidates = sorted(
        (
            Edge(i, j, weight)
            for i, row in enumerate(rows)
            for j, weight in enumerate(row[:i])
            if weight != 0
        ),
        key=lambda edge: edge.w,
    )
    belongs = list(range(len(rows)))
    chosen: list[Edge] = []
    for edge in candidates:
        first, second = belongs[edge.u], belongs[edge.v]
        if first != second:
            chosen.append(edge)
            belongs = [first if label == second else label for label in belongs]
    return chosen


def format_matrix(matrix: Sequence[Sequence[Weight]]) -> str:
    """Render a matrix with four-character cells, showing ``INF`` for infinity."""
    lines = [
        "".join(f"{'INF' if value == INF else value:>4}" for value in row)
        for row in matrix
    ]
    return "".join(line + "\n" for line in lines)