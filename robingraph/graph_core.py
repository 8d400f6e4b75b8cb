"""Undirected graph interface and compressed sparse row storage."""

from __future__ import annotations

import abc
import enum
from collections.abc import Iterable, Sequence

from robingraph.utils import prefix_sum

__all__ = ["GraphsStorageType", "IGraph", "CSRGraph", "AtomicCSRGraph"]


class GraphsStorageType(enum.Enum):
    """How a compatibility graph is stored."""

    ATOMIC_CSR = 0
    CSR = 1
    ADJ_LIST = 2


class IGraph(abc.ABC):
    """Read-only view of an undirected graph with vertices numbered from 0."""

    @abc.abstractmethod
    def vertex_count(self) -> int:
        """Number of vertices."""

    @abc.abstractmethod
    def vertex_degree(self, vertex: int) -> int:
        """Number of edges incident to ``vertex``."""

    @abc.abstractmethod
    def vertex_edge(self, vertex: int, edge_index: int) -> int:
        """The neighbour reached by the ``edge_index``-th edge of ``vertex``."""

    def neighbors(self, vertex: int) -> list[int]:
        """All neighbours of ``vertex`` in storage order."""
        return [self.vertex_edge(vertex, i) for i in range(self.vertex_degree(vertex))]

    def to_edge_list(self) -> list[tuple[int, int]]:
        """Return every edge once as ``(low, high)``, sorted."""
        edges = {
            (min(v, u), max(v, u))
            for v in range(self.vertex_count())
            for u in self.neighbors(v)
        }
        return sorted(edges)

    def to_csr_arrays(self) -> tuple[list[int], list[int]]:
        """Return ``(offsets, edges)`` describing the graph in CSR form.

        ``offsets`` has one entry per vertex plus one; ``edges`` holds each
        undirected edge twice.
        """
        n = self.vertex_count()
        adjacency: list[list[int]] = [[] for _ in range(n)]
        for a, b in self.to_edge_list():
            if b >= n:
                raise ValueError(f"edge ({a}, {b}) refers to a vertex outside the graph")
            adjacency[a].append(b)
            adjacency[b].append(a)
        offsets = prefix_sum([0, *(len(nbrs) for nbrs in adjacency)])
        edges = [u for nbrs in adjacency for u in nbrs]
        return offsets, edges


class CSRGraph(IGraph):
    """Undirected graph in compressed sparse row form.

    ``offsets[v]`` is where the neighbours of ``v`` start in ``edges``;
    every undirected edge is stored twice.
    """

    def __init__(self, offsets: Sequence[int] | None = None, edges: Sequence[int] | None = None):
        if offsets is None:
            self._offsets: list[int] = []
            self._vertex_count = 0
        else:
            if len(offsets) == 0:
                raise ValueError("offsets must hold at least one entry")
            self._offsets = list(offsets)
            self._vertex_count = len(self._offsets) - 1
        self._edges: list[int] = [] if edges is None else list(edges)
        if len(self._edges) % 2:
            raise ValueError("edge array of an undirected graph must have even length")
        self._edge_count = len(self._edges) // 2

    @classmethod
    def from_edge_list(cls, edge_list: Iterable[tuple[int, int]]) -> CSRGraph:
        """Build a graph from pairs; vertex ids must be exactly 0..n-1."""
        pairs = [(int(a), int(b)) for a, b in edge_list]
        vertices = {v for pair in pairs for v in pair}
        n = len(vertices)
        if vertices != set(range(n)):
            raise ValueError("vertex ids must be consecutive integers starting at 0")
        adjacency: list[list[int]] = [[] for _ in range(n)]
        for a, b in pairs:
            adjacency[a].append(b)
            adjacency[b].append(a)
        graph = cls()
        graph.allocate(n, len(pairs))
        graph.copy_offsets_from(prefix_sum([0, *(len(nbrs) for nbrs in adjacency)]))
        graph.copy_edges_from([u for nbrs in adjacency for u in nbrs])
        return graph

    def allocate(self, vertex_count: int, edge_count: int) -> None:
        """Reset the arrays to zeroed storage of the given sizes."""
        if vertex_count < 0 or edge_count < 0:
            raise ValueError("counts must not be negative")
        self._offsets = [0] * (vertex_count + 1)
        self._offsets[vertex_count] = 2 * edge_count
        self._edges = [0] * (2 * edge_count)
        self._vertex_count = vertex_count
        self._edge_count = edge_count

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < self._vertex_count:
            raise IndexError(f"vertex {vertex} out of range")

    def vertex_offset(self, vertex: int) -> int:
        """Start of ``vertex``'s neighbours in the edge array."""
        self._check_vertex(vertex)
        return self._offsets[vertex]

    def set_vertex_offset(self, vertex: int, offset: int) -> None:
        """Set the start of ``vertex``'s neighbours in the edge array."""
        self._check_vertex(vertex)
        self._offsets[vertex] = offset

    def set_offsets(self, vertex_count: int, offsets: Sequence[int]) -> None:
        """Replace the offsets array and the vertex count."""
        if len(offsets) != vertex_count + 1:
            raise ValueError("offsets must hold vertex_count + 1 entries")
        self._vertex_count = vertex_count
        self._offsets = list(offsets)

    def copy_offsets_from(self, offsets: Sequence[int]) -> None:
        """Copy ``vertex_count + 1`` entries into the offsets array."""
        size = self._vertex_count + 1
        if len(offsets) < size:
            raise ValueError(f"need {size} offsets, got {len(offsets)}")
        self._offsets = list(offsets[:size])

    def set_edge(self, offset: int, dst_vertex: int) -> None:
        """Write one slot of the edge array directly."""
        if not 0 <= dst_vertex < self._vertex_count:
            raise ValueError(f"vertex {dst_vertex} out of range")
        if not 0 <= offset < len(self._edges):
            raise IndexError(f"edge slot {offset} out of range")
        self._edges[offset] = dst_vertex

    def set_edges(self, edge_count: int, edges: Sequence[int]) -> None:
        """Replace the edge array; it must hold ``2 * edge_count`` entries."""
        if len(edges) != 2 * edge_count:
            raise ValueError("edges must hold 2 * edge_count entries")
        self._edge_count = edge_count
        self._edges = list(edges)

    def copy_edges_from(self, edges: Sequence[int]) -> None:
        """Copy ``2 * edge_count`` entries into the edge array."""
        size = 2 * self._edge_count
        if len(edges) < size:
            raise ValueError(f"need {size} edges, got {len(edges)}")
        self._edges = list(edges[:size])

    def copy_vertex_edges_from(self, vertex: int, vertex_edges: Sequence[int]) -> None:
        """Fill ``vertex``'s segment of the edge array; offsets must be set."""
        start = self.vertex_offset(vertex)
        degree = self.vertex_degree(vertex)
        if len(vertex_edges) < degree:
            raise ValueError(f"need {degree} edges for vertex {vertex}, got {len(vertex_edges)}")
        self._edges[start:start + degree] = list(vertex_edges[:degree])

    def vertex_count(self) -> int:
        return self._vertex_count

    def edge_count(self) -> int:
        """Number of undirected edges."""
        return self._edge_count

    def vertex_degree(self, vertex: int) -> int:
        self._check_vertex(vertex)
        return self._offsets[vertex + 1] - self._offsets[vertex]

    def vertex_edge(self, vertex: int, edge_index: int) -> int:
        degree = self.vertex_degree(vertex)
        if not 0 <= edge_index < degree:
            raise IndexError(f"vertex {vertex} has no edge {edge_index}")
        return self._edges[self._offsets[vertex] + edge_index]


class AtomicCSRGraph(CSRGraph):
    """CSR graph filled concurrently by the compatibility graph builders."""

    def format_edge_array(self) -> str:
        """The edge array as ``[a, b, ...]``."""
        return "[" + ", ".join(str(e) for e in self._edges[: 2 * self._edge_count]) + "]"

    def format_offsets_array(self) -> str:
        """The offsets array as ``[a, b, ...]``."""
        return "[" + ", ".join(str(o) for o in self._offsets[: self._vertex_count + 1]) + "]"