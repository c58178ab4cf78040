"""Graphs as adjacency lists, with traversals and topological ordering."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator


class Graph:
    """A graph over the vertices ``0..vertex_count-1`` stored as adjacency lists."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex_count must not be negative")
        self._adjacency: list[list[int]] = [[] for _ in range(vertex_count)]

    @property
    def vertex_count(self) -> int:
        """The number of vertices in the graph."""
        return len(self._adjacency)

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise IndexError(f"vertex {vertex} out of range")

    def add_edge(self, u: int, v: int, bidirectional: bool = True) -> None:
        """Add an edge from ``u`` to ``v``, and back again when ``bidirectional``."""
        self._check(u)
        self._check(v)
        self._adjacency[u].append(v)
        if bidirectional:
            self._adjacency[v].append(u)

    def neighbors(self, vertex: int) -> tuple[int, ...]:
        """Return the neighbours of ``vertex`` in the order their edges were added."""
        self._check(vertex)
        return tuple(self._adjacency[vertex])

    def bfs(self, source: int) -> list[int]:
        """Return the vertices reachable from ``source`` in breadth-first order."""
        self._check(source)
        visited = {source}
        order = []
        queue = deque([source])
        while queue:
            node = queue.popleft()
            order.append(node)
            for neighbor in self._adjacency[node]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)
        return order

    def dfs(self, source: int) -> list[int]:
        """Return the vertices reachable from ``source`` in recursive depth-first order."""
        self._check(source)
        visited = {source}
        order = [source]
        stack: list[Iterator[int]] = [iter(self._adjacency[source])]
        while stack:
            for neighbor in stack[-1]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    order.append(neighbor)
                    stack.append(iter(self._adjacency[neighbor]))
                    break
            else:
                stack.pop()
        return order

    def dfs_iterative(self, source: int) -> list[int]:
        """Return vertices in the order an explicit stack visits them.

        Vertices are marked when pushed, so the order differs from :meth:`dfs`.
        """
        self._check(source)
        visited = {source}
        order = []
        stack = [source]
        while stack:
            node = stack.pop()
            order.append(node)
            for neighbor in self._adjacency[node]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    stack.append(neighbor)
        return order

    @classmethod
    def from_adjacency_matrix(cls, text: str) -> "Graph":
        """Build a graph from text holding ``n`` followed by an ``n`` by ``n`` 0/1 matrix.

        Every cell equal to 1 adds a bidirectional edge.
        """
        try:
            numbers = [int(token) for token in text.split()]
        except ValueError as exc:
            raise ValueError("adjacency matrix must contain only integers") from exc
        if not numbers:
            raise ValueError("adjacency matrix text is empty")
        size, cells = numbers[0], numbers[1:]
        if size < 0:
            raise ValueError("vertex count must not be negative")
        if len(cells) < size * size:
            raise ValueError(
                f"expected {size * size} matrix entries, found {len(cells)}"
            )
        graph = cls(size)
        for index, value in enumerate(cells[: size * size]):
            if value == 1:
                graph.add_edge(*divmod(index, size))
        return graph

    def __len__(self) -> int:
        return len(self._adjacency)


def _check_one_based(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    if vertex_count < 0:
        raise ValueError("vertex_count must not be negative")
    edges = list(edges)
    for u, v in edges:
        for vertex in (u, v):
            if not 1 <= vertex <= vertex_count:
                raise IndexError(f"vertex {vertex} out of range 1..{vertex_count}")
    return edges


def adjacency_list(
    vertex_count: int, edges: Iterable[tuple[int, int]]
) -> dict[int, list[int]]:
    """Return the undirected adjacency list of vertices ``1..vertex_count``."""
    edges = _check_one_based(vertex_count, edges)
    result: dict[int, list[int]] = {vertex: [] for vertex in range(1, vertex_count + 1)}
    for u, v in edges:
        result[u].append(v)
        result[v].append(u)
    return result


def adjacency_matrix(
    vertex_count: int, edges: Iterable[tuple[int, int]]
) -> list[list[int]]:
    """Return the undirected 0/1 adjacency matrix; row and column ``i-1`` hold vertex ``i``."""
    edges = _check_one_based(vertex_count, edges)
    matrix = [[0] * vertex_count for _ in range(vertex_count)]
    for u, v in edges:
        matrix[u - 1][v - 1] = 1
        matrix[v - 1][u - 1] = 1
    return matrix


def topological_sort(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Order the vertices of a directed acyclic graph so every edge points forward.

    Uses Kahn's algorithm over vertices ``0..vertex_count-1``; raises
    ValueError if the graph has a cycle.
    """
    graph = Graph(vertex_count)
    for u, v in edges:
        graph.add_edge(u, v, bidirectional=False)

    indegree = [0] * vertex_count
    for vertex in range(vertex_count):
        for neighbor in graph.neighbors(vertex):
            indegree[neighbor] += 1

    queue = deque(vertex for vertex, degree in enumerate(indegree) if degree == 0)
    order = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbor in graph.neighbors(node):
            indegree[neighbor] -= 1
            if indegree[neighbor] == 0:
                queue.append(neighbor)

    if len(order) < vertex_count:
        raise ValueError("graph has a cycle")
    return order