"""Single-source and all-pairs shortest paths."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Sequence

Distance = float

Edge = tuple[int, int, float]


class NegativeCycleError(ValueError):
    """Raised when a graph holds a cycle of negative total weight."""


def _check_vertices(vertex_count: int, edges: Iterable[Edge], source: int) -> list[Edge]:
    if vertex_count < 0:
        raise ValueError("vertex_count must not be negative")
    if not 0 <= source < vertex_count:
        raise IndexError(f"source {source} out of range")
    edges = list(edges)
    for u, v, _ in edges:
        for vertex in (u, v):
            if not 0 <= vertex < vertex_count:
                raise IndexError(f"vertex {vertex} out of range")
    return edges


def dijkstra(vertex_count: int, edges: Iterable[Edge], source: int) -> list[Distance]:
    """Return distances from ``source`` over undirected, non-negative weighted edges.

    Vertices are ``0..vertex_count-1``; unreachable ones get ``math.inf``.
    """
    edges = _check_vertices(vertex_count, edges, source)
    adjacency: list[list[tuple[int, float]]] = [[] for _ in range(vertex_count)]
    for u, v, weight in edges:
        if weight < 0:
            raise ValueError("dijkstra requires non-negative edge weights")
        adjacency[u].append((v, weight))
        adjacency[v].append((u, weight))

    distance: list[Distance] = [math.inf] * vertex_count
    distance[source] = 0
    queue: list[tuple[Distance, int]] = [(0, source)]
    while queue:
        dist, node = heapq.heappop(queue)
        if dist > distance[node]:
            continue
        for neighbor, weight in adjacency[node]:
            candidate = dist + weight
            if candidate < distance[neighbor]:
                distance[neighbor] = candidate
                heapq.heappush(queue, (candidate, neighbor))
    return distance


def bellman_ford(vertex_count: int, edges: Iterable[Edge], source: int) -> list[Distance]:
    """Return distances from ``source`` over directed weighted edges.

    Negative weights are allowed; a reachable negative cycle raises
    :class:`NegativeCycleError`. Unreachable vertices get ``math.inf``.
    """
    edges = _check_vertices(vertex_count, edges, source)
    distance: list[Distance] = [math.inf] * vertex_count
    distance[source] = 0
    for _ in range(vertex_count - 1):
        changed = False
        for u, v, weight in edges:
            if distance[u] != math.inf and distance[u] + weight < distance[v]:
                distance[v] = distance[u] + weight
                changed = True
        if not changed:
            break
    for u, v, weight in edges:
        if distance[u] != math.inf and distance[u] + weight < distance[v]:
            raise NegativeCycleError("negative weight cycle found")
    return distance


def floyd_warshall(matrix: Sequence[Sequence[Distance]]) -> list[list[Distance]]:
    """Return all-pairs shortest distances for a square weight matrix.

    ``matrix[i][j]`` is the weight of the edge from ``i`` to ``j``; use
    ``math.inf`` (or any large value) where there is no edge.
    """
    dist = [list(row) for row in matrix]
    if any(len(row) != len(dist) for row in dist):
        raise ValueError("matrix must be square")
    for k, row_k in enumerate(dist):
        via = list(row_k)
        for row in dist:
            to_k = row[k]
            row[:] = [min(direct, to_k + onward) for direct, onward in zip(row, via)]
    return dist