"""Mutable undirected graph stored as adjacency lists."""

from __future__ import annotations

import logging
import random as _random
from collections.abc import Iterable, Mapping

import numpy as np

from robingraph.graph_core import IGraph

__all__ = ["AdjListGraph"]

_log = logging.getLogger(__name__)


class AdjListGraph(IGraph):
    """Undirected graph whose vertices are numbered consecutively from 0.

    Requests that make no sense, such as adding an edge to a missing vertex or
    adding an edge twice, are ignored and logged at debug level.
    """

    def __init__(self, adj_list: Iterable[Iterable[int]] | None = None, edge_count: int = 0):
        self._adj: list[list[int]] = []
        self._num_edges = 0
        if adj_list is not None:
            self.set_from_adj_list(adj_list, edge_count)

    @classmethod
    def from_adjacency_map(cls, adjacency: Mapping[int, Iterable[int]]) -> AdjListGraph:
        """Build a graph from ``{vertex: neighbours}``.

        Every edge is expected to appear in both of its vertices' lists; the
        edge count is half the total number of list entries.
        """
        size = len(adjacency)
        adj: list[list[int]] = [[] for _ in range(size)]
        total = 0
        for vertex, neighbours in adjacency.items():
            if not 0 <= vertex < size:
                raise ValueError(
                    f"vertex {vertex} is outside 0..{size - 1}; ids must be consecutive from 0"
                )
            adj[vertex] = list(neighbours)
            total += len(adj[vertex])
        return cls(adj, total // 2)

    @classmethod
    def random(cls, num_vertices: int, prob: float = 0.1, seed: int | None = None) -> AdjListGraph:
        """Erdos-Renyi graph G(num_vertices, prob): each edge is kept with chance ``prob``."""
        rng = _random.Random(seed)
        graph = cls()
        for vertex in range(num_vertices):
            graph.add_vertex(vertex)
        for i in range(num_vertices - 1):
            for j in range(i + 1, num_vertices):
                if rng.random() < prob:
                    graph.add_edge(i, j)
        return graph

    def _resize(self, num_vertices: int) -> None:
        if num_vertices < 0:
            raise ValueError("number of vertices must not be negative")
        if num_vertices < len(self._adj):
            del self._adj[num_vertices:]
        else:
            self._adj.extend([] for _ in range(num_vertices - len(self._adj)))

    def add_vertex(self, vertex: int) -> None:
        """Make sure ``vertex`` exists, adding any lower-numbered vertices too."""
        if vertex < len(self._adj):
            _log.debug("vertex %s already exists", vertex)
            return
        self._resize(vertex + 1)

    def add_edge(self, vertex_1: int, vertex_2: int) -> None:
        """Connect two existing vertices unless they are already connected."""
        if not (self.has_vertex(vertex_1) and self.has_vertex(vertex_2)):
            _log.debug("edge (%s, %s) refers to a missing vertex", vertex_1, vertex_2)
            return
        if self.has_edge(vertex_1, vertex_2):
            _log.debug("edge (%s, %s) already exists", vertex_1, vertex_2)
            return
        self.add_edge_unsafe(vertex_1, vertex_2)

    def add_edge_unsafe(self, vertex_1: int, vertex_2: int) -> None:
        """Connect two vertices without checking for an existing edge."""
        self._adj[vertex_1].append(vertex_2)
        self._adj[vertex_2].append(vertex_1)
        self._num_edges += 1

    def populate_vertices(self, num_vertices: int) -> None:
        """Resize the graph to ``num_vertices`` vertices."""
        self._resize(num_vertices)

    def has_edge(self, vertex_1: int, vertex_2: int) -> bool:
        if not (self.has_vertex(vertex_1) and self.has_vertex(vertex_2)):
            return False
        return vertex_2 in self._adj[vertex_1]

    def has_vertex(self, vertex: int) -> bool:
        return 0 <= vertex < len(self._adj)

    def remove_edge(self, vertex_1: int, vertex_2: int) -> None:
        """Remove the edge between two vertices if it exists."""
        if not (self.has_vertex(vertex_1) and self.has_vertex(vertex_2)):
            _log.debug("cannot remove edge (%s, %s): missing vertex", vertex_1, vertex_2)
            return
        existed = vertex_2 in self._adj[vertex_1]
        self._adj[vertex_1] = [u for u in self._adj[vertex_1] if u != vertex_2]
        self._adj[vertex_2] = [u for u in self._adj[vertex_2] if u != vertex_1]
        if existed:
            self._num_edges -= 1

    def set_from_adj_list(self, adj_list: Iterable[Iterable[int]], edge_count: int) -> None:
        """Replace the whole graph with the given lists and edge count."""
        self._adj = [list(neighbours) for neighbours in adj_list]
        self._num_edges = edge_count

    def vertex_count(self) -> int:
        return len(self._adj)

    def edge_count(self) -> int:
        """Number of undirected edges."""
        return self._num_edges

    def _check_vertex(self, vertex: int) -> None:
        if not self.has_vertex(vertex):
            raise IndexError(f"vertex {vertex} out of range")

    def vertex_degree(self, vertex: int) -> int:
        self._check_vertex(vertex)
        return len(self._adj[vertex])

    def vertex_edge(self, vertex: int, edge_index: int) -> int:
        self._check_vertex(vertex)
        neighbours = self._adj[vertex]
        if not 0 <= edge_index < len(neighbours):
            raise IndexError(f"vertex {vertex} has no edge {edge_index}")
        return neighbours[edge_index]

    def vertices(self) -> list[int]:
        return list(range(len(self._adj)))

    def adj_list(self) -> list[list[int]]:
        """A copy of the adjacency lists."""
        return [list(neighbours) for neighbours in self._adj]

    def adjacency_matrix(self) -> np.ndarray:
        """Dense ``n x n`` matrix with 1.0 where an edge exists."""
        n = len(self._adj)
        matrix = np.zeros((n, n))
        for src, neighbours in enumerate(self._adj):
            for dst in neighbours:
                matrix[src, dst] = 1.0
        return matrix

    def reserve_for_complete_graph(self, num_vertices: int) -> None:
        """Size the graph for ``num_vertices`` vertices ahead of dense filling."""
        self._resize(num_vertices)

    def clear(self) -> None:
        """Remove all vertices and edges."""
        self._adj = []
        self._num_edges = 0