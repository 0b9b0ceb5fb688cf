"""Shortest paths, minimum spanning trees and a greedy travelling-salesman tour.

Weighted graphs are adjacency matrices in which 0 means "no edge".
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

__all__ = [
    "Edge",
    "SpanningTree",
    "Tour",
    "dijkstra",
    "prim_mst",
    "kruskal_mst",
    "nearest_neighbour_tour",
]

Matrix = Sequence[Sequence[int]]


@dataclass(frozen=True)
class Edge:
    """A weighted undirected edge."""

    u: int
    v: int
    weight: int


@dataclass(frozen=True)
class SpanningTree:
    """The edges of a spanning tree (or forest), in the order they were chosen."""

    edges: tuple[Edge, ...]

    @property
    def total(self) -> int:
        """Sum of the edge weights."""
        return sum(edge.weight for edge in self.edges)


@dataclass(frozen=True)
class Tour:
    """A closed tour starting and ending at city 0, with its total cost."""

    path: tuple[int, ...]
    cost: int


def _size(graph: Matrix) -> int:
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("adjacency matrix must be square")
    return size


def dijkstra(
    graph: Matrix, source: int, prefer_last: bool = False
) -> list[float]:
    """Return shortest distances from ``source``; unreachable vertices get ``inf``.

    Ties between equally near vertices go to the lowest index, or to the
    highest when ``prefer_last`` is set.
    """
    size = _size(graph)
    if not 0 <= source < size:
        raise ValueError(f"source vertex {source} is out of range")
    dist: list[float] = [math.inf] * size
    dist[source] = 0
    done = [False] * size
    for _ in range(size - 1):
        nearest = None
        for vertex in range(size):
            if done[vertex] or dist[vertex] == math.inf:
                continue
            if (
                nearest is None
                or dist[vertex] < dist[nearest]
                or (prefer_last and dist[vertex] == dist[nearest])
            ):
                nearest = vertex
        if nearest is None:
            break
        done[nearest] = True
        for vertex, weight in enumerate(graph[nearest]):
            if not done[vertex] and weight and dist[nearest] + weight < dist[vertex]:
                dist[vertex] = dist[nearest] + weight
    return dist


def prim_mst(graph: Matrix) -> SpanningTree:
    """Return a minimum spanning tree grown from vertex 0 by Prim's algorithm.

    Raises ValueError if the graph is not connected.
    """
    size = _size(graph)
    if size == 0:
        return SpanningTree(())
    key: list[float] = [math.inf] * size
    parent: list[int | None] = [None] * size
    in_tree = [False] * size
    key[0] = 0
    for _ in range(size - 1):
        nearest = None
        for vertex in range(size):
            if not in_tree[vertex] and key[vertex] < math.inf:
                if nearest is None or key[vertex] < key[nearest]:
                    nearest = vertex
        if nearest is None:
            raise ValueError("graph is not connected")
        in_tree[nearest] = True
        for vertex, weight in enumerate(graph[nearest]):
            if weight and not in_tree[vertex] and weight < key[vertex]:
                parent[vertex] = nearest
                key[vertex] = weight
    edges = []
    for vertex in range(1, size):
        above = parent[vertex]
        if above is None:
            raise ValueError("graph is not connected")
        edges.append(Edge(above, vertex, graph[vertex][above]))
    return SpanningTree(tuple(edges))


def kruskal_mst(
    vertex_count: int, edges: Iterable[Edge | tuple[int, int, int]]
) -> SpanningTree:
    """Return a minimum spanning forest by Kruskal's algorithm.

    Edges of equal weight are considered in the order given.
    """
    if vertex_count < 0:
        raise ValueError("vertex_count must not be negative")
    candidates = [edge if isinstance(edge, Edge) else Edge(*edge) for edge in edges]
    for edge in candidates:
        if not (0 <= edge.u < vertex_count and 0 <= edge.v < vertex_count):
            raise ValueError(f"edge {edge.u}-{edge.v} uses a vertex out of range")
    parent = list(range(vertex_count))

    def find(vertex: int) -> int:
        while parent[vertex] != vertex:
            parent[vertex] = parent[parent[vertex]]
            vertex = parent[vertex]
        return vertex

    chosen: list[Edge] = []
    for edge in sorted(candidates, key=lambda e: e.weight):
        if len(chosen) >= vertex_count - 1:
            break
        root_u, root_v = find(edge.u), find(edge.v)
        if root_u != root_v:
            chosen.append(edge)
            parent[root_u] = root_v
    return SpanningTree(tuple(chosen))


def nearest_neighbour_tour(cost: Matrix) -> Tour:
    """Build a tour from city 0 by always moving to the cheapest unvisited city.

    A cost of 0 means the cities are not connected; cities that cannot be
    reached this way are left out. The tour closes back at city 0.
    """
    size = _size(cost)
    if size == 0:
        raise ValueError("at least one city is required")
    current = 0
    path = [current]
    visited = {current}
    total = 0
    for _ in range(1, size):
        options = [
            (price, city)
            for city, price in enumerate(cost[current])
            if city not in visited and price != 0
        ]
        if not options:
            continue
        price, nxt = min(options)
        visited.add(nxt)
        path.append(nxt)
        total += price
        current = nxt
    total += cost[current][0]
    path.append(0)
    return Tour(tuple(path), total)