import pytest

from algokit.graphs import (
    INF,
    Edge,
    NegativeCycleError,
    bellman_ford,
    dijkstra,
    floyd_warshall,
    format_matrix,
    kruskal,
)

SOURCE_EDGES = [Edge(0, 1, 5), Edge(0, 2, 4), Edge(1, 3, 3), Edge(2, 1, 6), Edge(3, 2, 2)]

FLOYD_GRAPH = [
    [0, 3, INF, 5],
    [2, 0, INF, 4],
    [INF, 1, 0, INF],
    [INF, INF, 2, 0],
]

WEIGHTED = [
    [0, 4, 0, 0, 8],
    [4, 0, 8, 0, 11],
    [0, 8, 0, 7, 0],
    [0, 0, 7, 0, 9],
    [8, 11, 0, 9, 0],
]


def _matrix_to_edges(matrix):
    return [
        Edge(i, j, w)
        for i, row in enumerate(matrix)
        for j, w in enumerate(row)
        if w != 0 and i != j
    ]


def test_bellman_ford_source_graph_distances():
    distances, _ = bellman_ford(4, SOURCE_EDGES, 0)
    assert distances == [0, 5, 4, 8]


def test_bellman_ford_invariants_hold():
    distances, predecessors = bellman_ford(4, SOURCE_EDGES, 0)
    assert predecessors[0] is None
    for edge in SOURCE_EDGES:
        assert distances[edge.v] <= distances[edge.u] + edge.w
    for vertex, parent in enumerate(predecessors):
        if parent is not None:
            assert any(
                e.u == parent and e.v == vertex and distances[vertex] == distances[parent] + e.w
                for e in SOURCE_EDGES
            )


def test_bellman_ford_accepts_tuples():
    as_tuples = [(e.u, e.v, e.w) for e in SOURCE_EDGES]
    assert bellman_ford(4, as_tuples, 0) == bellman_ford(4, SOURCE_EDGES, 0)


def test_bellman_ford_unreachable():
    distances, predecessors = bellman_ford(3, [Edge(0, 1, 2)], 0)
    assert distances[2] == INF
    assert predecessors[2] is None


def test_bellman_ford_negative_cycle():
    edges = [Edge(0, 1, 1), Edge(1, 2, -3), Edge(2, 1, 1)]
    with pytest.raises(NegativeCycleError):
        bellman_ford(3, edges, 0)


def test_bellman_ford_bad_vertices():
    with pytest.raises(ValueError):
        bellman_ford(2, [Edge(0, 5, 1)], 0)
    with pytest.raises(ValueError):
        bellman_ford(2, [], 3)


@pytest.mark.parametrize("start", range(5))
def test_dijkstra_agrees_with_bellman_ford(start):
    distances, _ = bellman_ford(5, _matrix_to_edges(WEIGHTED), start)
    assert dijkstra(WEIGHTED, start) == distances


def test_dijkstra_start_is_zero_and_unreachable_is_inf():
    matrix = [[0, 1, 0], [1, 0, 0], [0, 0, 0]]
    result = dijkstra(matrix, 0)
    assert result[0] == 0
    assert result[2] == INF


def test_dijkstra_rejects_non_square():
    with pytest.raises(ValueError):
        dijkstra([[0, 1], [1]], 0)


@pytest.mark.parametrize("start", range(4))
def test_floyd_warshall_agrees_with_dijkstra(start):
    result = floyd_warshall(FLOYD_GRAPH)
    as_dijkstra = [[0 if w == INF else w for w in row] for row in FLOYD_GRAPH]
    assert result[start] == dijkstra(as_dijkstra, start)


def test_floyd_warshall_does_not_modify_input():
    snapshot = [row[:] for row in FLOYD_GRAPH]
    floyd_warshall(FLOYD_GRAPH)
    assert FLOYD_GRAPH == snapshot


def test_floyd_warshall_triangle_inequality():
    result = floyd_warshall(FLOYD_GRAPH)
    for i in range(4):
        for j in range(4):
            for k in range(4):
                assert result[i][j] <= result[i][k] + result[k][j]


def test_kruskal_spans_all_vertices():
    tree = kruskal(WEIGHTED)
    assert len(tree) == len(WEIGHTED) - 1
    reached = {0}
    grown = True
    while grown:
        grown = False
        for edge in tree:
            if (edge.u in reached) != (edge.v in reached):
                reached |= {edge.u, edge.v}
                grown = True
    assert reached == set(range(len(WEIGHTED)))


def test_kruskal_edges_in_weight_order_and_from_lower_triangle():
    tree = kruskal(WEIGHTED)
    weights = [edge.w for edge in tree]
    assert weights == sorted(weights)
    assert all(edge.u > edge.v and WEIGHTED[edge.u][edge.v] == edge.w for edge in tree)


def test_kruskal_triangle_skips_heaviest():
    matrix = [[0, 1, 3], [1, 0, 2], [3, 2, 0]]
    assert sorted(edge.w for edge in kruskal(matrix)) == [1, 2]


def test_kruskal_disconnected_forest():
    matrix = [[0, 5, 0], [5, 0, 0], [0, 0, 0]]
    assert kruskal(matrix) == [Edge(1, 0, 5)]


def test_format_matrix_shows_inf():
    assert format_matrix([FLOYD_GRAPH[0]]) == "   0   3 INF   5\n"


def test_format_matrix_one_line_per_row():
    assert format_matrix(FLOYD_GRAPH).count("\n") == len(FLOYD_GRAPH)