"""Backtracking searches: N queens, graph colouring, Hamiltonian cycles, subset sums.

Graphs are adjacency matrices. For colouring and for closing a Hamiltonian
cycle an entry of exactly 1 marks an edge; while extending a Hamiltonian
path any non-zero entry does.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

__all__ = ["n_queens", "graph_coloring", "hamiltonian_cycle", "subsets_with_sum"]

Matrix = Sequence[Sequence[int]]
Board = list[list[int]]


def _size(graph: Matrix) -> int:
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("adjacency matrix must be square")
    return size


def n_queens(n: int, column_major: bool = False) -> Board | None:
    """Return the first board with ``n`` non-attacking queens, or None.

    The board holds 1 for a queen and 0 for an empty square. By default
    queens are placed row by row, each trying columns left to right; with
    ``column_major`` they are placed column by column, each trying rows top
    to bottom.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    columns: list[int] = []
    used_columns: set[int] = set()
    falling: set[int] = set()
    rising: set[int] = set()

    def place(row: int) -> bool:
        if row == n:
            return True
        for col in range(n):
            if col in used_columns or row - col in falling or row + col in rising:
                continue
            columns.append(col)
            used_columns.add(col)
            falling.add(row - col)
            rising.add(row + col)
            if place(row + 1):
                return True
            columns.pop()
            used_columns.discard(col)
            falling.discard(row - col)
            rising.discard(row + col)
        return False

    if not place(0):
        return None
    board = [[int(columns[row] == col) for col in range(n)] for row in range(n)]
    if column_major:
        # Searching by columns is the row search on the transposed board.
        board = [list(column) for column in zip(*board)]
    return board


def graph_coloring(graph: Matrix, colors: int) -> list[int] | None:
    """Colour vertices with colours 1..``colors`` so no edge joins equal colours.

    Returns the colour of each vertex, or None when no colouring exists.
    """
    size = _size(graph)
    if colors < 0:
        raise ValueError("colors must not be negative")
    assignment = [0] * size

    def safe(vertex: int, color: int) -> bool:
        return not any(
            edge == 1 and assignment[other] == color
            for other, edge in enumerate(graph[vertex])
        )

    def assign(vertex: int) -> bool:
        if vertex == size:
            return True
        for color in range(1, colors + 1):
            if safe(vertex, color):
                assignment[vertex] = color
                if assign(vertex + 1):
                    return True
                assignment[vertex] = 0
        return False

    return assignment if assign(0) else None


def hamiltonian_cycle(graph: Matrix) -> list[int] | None:
    """Return a cycle through every vertex starting and ending at 0, or None."""
    size = _size(graph)
    if size == 0:
        raise ValueError("at least one vertex is required")
    path = [0]
    on_path = {0}

    def extend() -> bool:
        last = path[-1]
        if len(path) == size:
            return graph[last][0] == 1
        for vertex in range(1, size):
            if graph[last][vertex] != 0 and vertex not in on_path:
                path.append(vertex)
                on_path.add(vertex)
                if extend():
                    return True
                path.pop()
                on_path.discard(vertex)
        return False

    return [*path, 0] if extend() else None


def subsets_with_sum(weights: Iterable[int], target: int) -> Iterator[list[int]]:
    """Yield the subsets of ``weights`` that add up to ``target``.

    The pruning assumes positive weights in ascending order; subsets come
    out in the order the search finds them, each listed in input order.
    """
    items = list(weights)
    count = len(items)
    chosen: list[int] = []

    def search(index: int, current: int, remaining: int) -> Iterator[list[int]]:
        weight = items[index]
        chosen.append(weight)
        if current + weight == target:
            yield list(chosen)
        elif current + weight + remaining >= target and index + 1 < count:
            yield from search(index + 1, current + weight, remaining - weight)
        chosen.pop()
        if current + remaining - weight >= target and index + 1 < count:
            yield from search(index + 1, current, remaining - weight)

    if items:
        yield from search(0, 0, sum(items))