"""Traversals of graphs given as adjacency matrices.

A matrix entry of exactly 1 marks an edge; any other value means no edge.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

__all__ = [
    "CycleError",
    "ExpansionStep",
    "dfs",
    "bfs",
    "bfs_expansion",
    "topological_sort",
    "topological_sort_edges",
]

Matrix = Sequence[Sequence[int]]


class CycleError(ValueError):
    """Raised when a topological order is asked of a graph with a cycle."""

    def __init__(self, partial_order: Iterable[int]) -> None:
        self.partial_order = tuple(partial_order)
        super().__init__("graph is not a DAG (cycle exists)")


@dataclass(frozen=True)
class ExpansionStep:
    """One expanded node of a breadth-first search and the nodes it made live."""

    node: int
    live: tuple[int, ...]

    @property
    def dead(self) -> bool:
        """True when expanding the node discovered nothing new."""
        return not self.live


def _size(graph: Matrix) -> int:
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("adjacency matrix must be square")
    return size


def _check_vertex(vertex: int, size: int, name: str = "start") -> None:
    if not 0 <= vertex < size:
        raise ValueError(f"{name} vertex {vertex} is out of range 0..{size - 1}")


def _neighbours(graph: Matrix, vertex: int) -> Iterator[int]:
    return (other for other, edge in enumerate(graph[vertex]) if edge == 1)


def dfs(graph: Matrix, start: int) -> list[int]:
    """Return vertices in depth-first order, lower-numbered neighbours first."""
    size = _size(graph)
    _check_vertex(start, size)
    order = [start]
    visited = {start}
    stack = [_neighbours(graph, start)]
    while stack:
        for nxt in stack[-1]:
            if nxt not in visited:
                visited.add(nxt)
                order.append(nxt)
                stack.append(_neighbours(graph, nxt))
                break
        else:
            stack.pop()
    return order


def bfs_expansion(graph: Matrix, start: int) -> list[ExpansionStep]:
    """Return each breadth-first expansion with the live nodes it produced."""
    size = _size(graph)
    _check_vertex(start, size)
    visited = {start}
    queue = deque([start])
    steps: list[ExpansionStep] = []
    while queue:
        node = queue.popleft()
        live = []
        for other in _neighbours(graph, node):
            if other not in visited:
                visited.add(other)
                queue.append(other)
                live.append(other)
        steps.append(ExpansionStep(node, tuple(live)))
    return steps


def bfs(graph: Matrix, start: int) -> list[int]:
    """Return vertices in breadth-first order, lower-numbered neighbours first."""
    return [step.node for step in bfs_expansion(graph, start)]


def topological_sort(graph: Matrix) -> list[int]:
    """Return a topological order by Kahn's algorithm.

    Raises CycleError, carrying the order found so far, if a cycle exists.
    """
    size = _size(graph)
    indegree = [sum(1 for row in graph if row[column] == 1) for column in range(size)]
    queue = deque(vertex for vertex, degree in enumerate(indegree) if degree == 0)
    order: list[int] = []
    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for other in _neighbours(graph, vertex):
            indegree[other] -= 1
            if indegree[other] == 0:
                queue.append(other)
    if len(order) != size:
        raise CycleError(order)
    return order


def topological_sort_edges(
    vertex_count: int, edges: Iterable[tuple[int, int]]
) -> list[int]:
    """Topologically sort a graph given as a vertex count and directed edges."""
    if vertex_count < 0:
        raise ValueError("vertex_count must not be negative")
    matrix = [[0] * vertex_count for _ in range(vertex_count)]
    for source, target in edges:
        _check_vertex(source, vertex_count, "edge")
        _check_vertex(target, vertex_count, "edge")
        matrix[source][target] = 1
    return topological_sort(matrix)