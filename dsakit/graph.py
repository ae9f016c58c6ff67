"""Adjacency-matrix graph with breadth-first and depth-first traversal."""

from __future__ import annotations

import argparse
from collections import deque
from collections.abc import Iterator, Sequence


class Graph:
    """A graph on vertices ``0 .. vertices - 1`` stored as an adjacency matrix."""

    def __init__(self, vertices: int, directed: bool = False) -> None:
        if vertices < 0:
            raise ValueError(f"vertex count must not be negative, got {vertices}")
        self.vertices = vertices
        self.directed = directed
        self._adj = [[False] * vertices for _ in range(vertices)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertices:
            raise IndexError(f"vertex {vertex} out of range 0..{self.vertices - 1}")

    def add_edge(self, u: int, v: int) -> None:
        """Connect ``u`` to ``v`` (and ``v`` to ``u`` when undirected)."""
        self._check(u)
        self._check(v)
        self._adj[u][v] = True
        if not self.directed:
            self._adj[v][u] = True

    def has_edge(self, u: int, v: int) -> bool:
        self._check(u)
        self._check(v)
        return self._adj[u][v]

    def format_matrix(self) -> str:
        """Render the adjacency matrix as rows of 0/1 values."""
        return "".join(
            "".join(f"{int(cell)} " for cell in row) + "\n" for row in self._adj
        )

    def _neighbours(self, u: int) -> Iterator[int]:
        return (v for v, connected in enumerate(self._adj[u]) if connected)

    def bfs(self, start: int) -> list[int]:
        """Return vertices in breadth-first order from ``start``."""
        self._check(start)
        visited = {start}
        pending = deque([start])
        order = []
        while pending:
            u = pending.popleft()
            order.append(u)
            for v in self._neighbours(u):
                if v not in visited:
                    visited.add(v)
                    pending.append(v)
        return order

    def dfs(self, start: int) -> list[int]:
        """Return vertices in stack-based depth-first order from ``start``.

        Vertices are marked when pushed, and neighbours are pushed in
        ascending order, so the highest-numbered neighbour is visited first.
        """
        self._check(start)
        visited = {start}
        pending = [start]
        order = []
        while pending:
            u = pending.pop()
            order.append(u)
            for v in self._neighbours(u):
                if v not in visited:
                    visited.add(v)
                    pending.append(v)
        return order


def _tree_graph() -> Graph:
    graph = Graph(7)
    for u, v in ((0, 1), (0, 2), (1, 3), (1, 4), (2, 5), (2, 6)):
        graph.add_edge(u, v)
    return graph


def _sample_graph() -> Graph:
    graph = Graph(5)
    for u, v in ((0, 1), (0, 2), (0, 3), (1, 3), (2, 3), (2, 4), (3, 4)):
        graph.add_edge(u, v)
    return graph


def main(argv: Sequence[str] | None = None) -> int:
    """Print a traversal of the sample tree or the sample adjacency matrix."""
    parser = argparse.ArgumentParser(
        prog="dsakit-graph",
        description="Demonstrate graph traversal on a sample graph.",
    )
    parser.add_argument(
        "mode",
        nargs="?",
        choices=("bfs", "dfs", "matrix"),
        default="bfs",
        help="what to print (default: bfs)",
    )
    args = parser.parse_args(argv)

    if args.mode == "matrix":
        print(_sample_graph().format_matrix(), end="")
        return 0

    graph = _tree_graph()
    order = graph.bfs(0) if args.mode == "bfs" else graph.dfs(0)
    label = args.mode.upper()
    print(f"Traversal using {label} : " + "".join(f"{v} " for v in order))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())