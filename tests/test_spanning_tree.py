import random

import pytest

from dsakit.spanning_tree import kruskal_mst, prim_mst

SAMPLE_EDGES = [
    (0, 1, 7),
    (0, 3, 8),
    (1, 3, 3),
    (1, 2, 6),
    (3, 2, 4),
    (3, 4, 3),
    (2, 4, 2),
    (2, 5, 5),
    (4, 5, 2),
]


def _random_connected_graph(rng, n):
    edges = [(i, rng.randrange(i), rng.randint(1, 50)) for i in range(1, n)]
    for _ in range(rng.randint(0, 2 * n)):
        u, v = rng.randrange(n), rng.randrange(n)
        if u != v:
            edges.append((u, v, rng.randint(1, 50)))
    return edges


def test_kruskal_sample_graph():
    assert kruskal_mst(6, SAMPLE_EDGES) == 17


def test_prim_sample_graph():
    assert prim_mst(6, SAMPLE_EDGES) == 17


def test_edge_order_does_not_matter():
    shuffled = list(reversed(SAMPLE_EDGES))
    assert kruskal_mst(6, shuffled) == kruskal_mst(6, SAMPLE_EDGES)
    assert prim_mst(6, shuffled) == prim_mst(6, SAMPLE_EDGES)


@pytest.mark.parametrize("seed", range(10))
def test_kruskal_and_prim_agree_on_connected_graphs(seed):
    rng = random.Random(seed)
    n = rng.randint(2, 12)
    edges = _random_connected_graph(rng, n)
    assert kruskal_mst(n, edges) == prim_mst(n, edges)


@pytest.mark.parametrize("seed", range(5))
def test_mst_not_heavier_than_any_spanning_tree(seed):
    rng = random.Random(seed)
    n = rng.randint(2, 12)
    edges = _random_connected_graph(rng, n)
    tree = edges[: n - 1]
    assert kruskal_mst(n, edges) <= sum(w for _, _, w in tree)


def test_tree_costs_its_own_weight():
    edges = [(0, 1, 4), (1, 2, 9), (1, 3, 1)]
    expected = sum(w for _, _, w in edges)
    assert kruskal_mst(4, edges) == expected
    assert prim_mst(4, edges) == expected


def test_parallel_edges_take_cheapest():
    edges = [(0, 1, 5), (0, 1, 2)]
    assert kruskal_mst(2, edges) == 2
    assert prim_mst(2, edges) == 2


def test_disconnected_graph():
    first = [(0, 1, 3), (1, 2, 1), (0, 2, 2)]
    second = [(3, 4, 6)]
    forest = kruskal_mst(5, first + second)
    assert forest == kruskal_mst(5, first) + kruskal_mst(5, second)
    assert prim_mst(5, first + second) == prim_mst(3, first)


def test_trivial_graphs():
    assert kruskal_mst(0, []) == 0
    assert prim_mst(0, []) == 0
    assert kruskal_mst(1, []) == 0
    assert prim_mst(1, []) == 0


@pytest.mark.parametrize("func", [kruskal_mst, prim_mst])
def test_vertex_out_of_range(func):
    with pytest.raises(IndexError):
        func(3, [(0, 3, 1)])


@pytest.mark.parametrize("func", [kruskal_mst, prim_mst])
def test_negative_vertex_count(func):
    with pytest.raises(ValueError):
        func(-1, [])