"""Minimum spanning tree cost by Kruskal's and Prim's algorithms."""

from __future__ import annotations

import heapq
from collections.abc import Iterable

from dsakit.disjoint_set import DisjointSet

Edge = tuple[int, int, float]


def _check_edges(vertex_count: int, edges: Iterable[Edge]) -> list[Edge]:
    if vertex_count < 0:
        raise ValueError("vertex_count must not be negative")
    edges = list(edges)
    for u, v, _ in edges:
        for vertex in (u, v):
            if not 0 <= vertex < vertex_count:
                raise IndexError(f"vertex {vertex} out of range")
    return edges


def kruskal_mst(vertex_count: int, edges: Iterable[Edge]) -> float:
    """Return the total weight of a minimum spanning forest.

    Vertices are ``0..vertex_count-1`` and each edge is ``(u, v, weight)``.
    Edges are taken in order of weight, then endpoints, whenever they join
    two separate components.
    """
    edges = _check_edges(vertex_count, edges)
    components = DisjointSet(vertex_count)
    total = 0
    for u, v, weight in sorted(edges, key=lambda edge: (edge[2], edge[0], edge[1])):
        if components.union(u, v):
            total += weight
    return total


def prim_mst(vertex_count: int, edges: Iterable[Edge]) -> float:
    """Return the total weight of a minimum spanning tree grown from vertex 0.

    Only the component containing vertex 0 is spanned; an empty graph
    costs nothing.
    """
    edges = _check_edges(vertex_count, edges)
    if vertex_count == 0:
        return 0
    adjacency: list[list[tuple[int, float]]] = [[] for _ in range(vertex_count)]
    for u, v, weight in edges:
        adjacency[u].append((v, weight))
        adjacency[v].append((u, weight))

    visited = [False] * vertex_count
    queue: list[tuple[float, int]] = [(0, 0)]
    total = 0
    while queue:
        weight, node = heapq.heappop(queue)
        if visited[node]:
            continue
        visited[node] = True
        total += weight
        for neighbor, edge_weight in adjacency[node]:
            if not visited[neighbor]:
                heapq.heappush(queue, (edge_weight, neighbor))
    return total