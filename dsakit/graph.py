"""Graphs as an adjacency matrix and as adjacency lists."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator


class AdjacencyMatrix:
    """An undirected graph on vertices ``0 .. n - 1`` stored as a 0/1 matrix."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self._rows = [[0] * vertices for _ in range(vertices)]

    @property
    def vertex_count(self) -> int:
        return len(self._rows)

    @property
    def rows(self) -> list[list[int]]:
        """A copy of the matrix, row by row."""
        return [list(row) for row in self._rows]

    def _check(self, *vertices: int) -> None:
        for vertex in vertices:
            if not 0 <= vertex < len(self._rows):
                raise IndexError(f"vertex {vertex} out of range")

    def add_edge(self, i: int, j: int) -> None:
        """Connect ``i`` and ``j``."""
        self._check(i, j)
        self._rows[i][j] = 1
        self._rows[j][i] = 1

    def remove_edge(self, i: int, j: int) -> None:
        """Disconnect ``i`` and ``j``."""
        self._check(i, j)
        self._rows[i][j] = 0
        self._rows[j][i] = 0

    def has_edge(self, i: int, j: int) -> bool:
        """Return True if ``i`` and ``j`` are connected."""
        self._check(i, j)
        return self._rows[i][j] == 1

    def __str__(self) -> str:
        return "\n".join(" ".join(map(str, row)) for row in self._rows)


class Graph:
    """A graph kept as a mapping from each node to the list of its neighbours."""

    def __init__(self) -> None:
        self._adjacency: dict[Hashable, list[Hashable]] = {}

    def add_edge(self, u: Hashable, v: Hashable, directed: bool = False) -> None:
        """Add an edge from ``u`` to ``v``, and back again unless ``directed``."""
        self._adjacency.setdefault(u, []).append(v)
        if not directed:
            self._adjacency.setdefault(v, []).append(u)

    def neighbours(self, node: Hashable) -> list[Hashable]:
        """Return the nodes ``node`` has edges to, in the order they were added."""
        return list(self._adjacency.get(node, ()))

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._adjacency)

    def __len__(self) -> int:
        return len(self._adjacency)

    def __contains__(self, node: object) -> bool:
        return node in self._adjacency

    def __str__(self) -> str:
        return "\n".join(
            f"{node}-> " + "".join(f"{neighbour}," for neighbour in neighbours)
            for node, neighbours in self._adjacency.items()
        )


def adjacency_list(
    vertex_count: int, edges: Iterable[tuple[int, int]]
) -> list[list[int]]:
    """Return the neighbours of each vertex of an undirected graph."""
    if vertex_count < 0:
        raise ValueError("number of vertices must not be negative")
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for u, v in edges:
        for vertex in (u, v):
            if not 0 <= vertex < vertex_count:
                raise IndexError(f"vertex {vertex} out of range")
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency