"""Building compatibility graphs from measurements and a compatibility test."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from itertools import combinations
from typing import Any

from robingraph.adj_list import AdjListGraph
from robingraph.graph_core import AtomicCSRGraph, CSRGraph, GraphsStorageType, IGraph
from robingraph.utils import prefix_sum

__all__ = ["CompGraphConstructor"]

CompCheck = Callable[[Any, Sequence[int]], bool]


def _pair_order(n: int) -> Iterator[tuple[int, int]]:
    """Every pair ``(i, j)`` with ``i < j`` once, in a folded row order.

    A flat index ``k`` below ``n * (n - 1) / 2`` is split into row and column;
    entries on or below the diagonal are folded onto the unused upper part.
    """
    for k in range(n * (n - 1) // 2):
        i, j = divmod(k, n)
        if j <= i:
            i, j = n - i - 2, n - j - 1
        yield i, j


class CompGraphConstructor:
    """Builds the graph whose edges join mutually compatible measurements.

    ``comp_check(measurements, indices)`` decides whether the measurements at
    ``indices`` (a tuple of ``arity`` positions) are compatible. Every pair
    inside a compatible subset becomes an edge.
    """

    def __init__(self, comp_check: CompCheck, measurements: Any, arity: int = 2):
        if arity < 2:
            raise ValueError("arity must be at least 2")
        self.comp_check = comp_check
        self.measurements = measurements
        self.arity = arity

    def _size(self) -> int:
        return len(self.measurements)

    def _compatible(self, indices: Sequence[int]) -> bool:
        return bool(self.comp_check(self.measurements, tuple(indices)))

    def _require_pairwise(self) -> None:
        if self.arity != 2:
            raise ValueError(f"this builder needs a pairwise check, arity is {self.arity}")

    def build_comp_graph_generic(self) -> AdjListGraph:
        """Check every subset of ``arity`` measurements and connect compatible ones."""
        graph = AdjListGraph()
        graph.populate_vertices(self._size())
        for subset in combinations(range(self._size()), self.arity):
            if self._compatible(subset):
                for a, b in combinations(subset, 2):
                    graph.add_edge(a, b)
        return graph

    def build_adj_list_serial(self) -> AdjListGraph:
        """Pairwise build, adding each compatible pair straight into the graph."""
        self._require_pairwise()
        n = self._size()
        graph = AdjListGraph()
        graph.populate_vertices(n)
        for i, j in _pair_order(n):
            if self._compatible((i, j)):
                graph.add_edge_unsafe(i, j)
        return graph

    def build_adj_list_edge_buffer(self) -> AdjListGraph:
        """Pairwise build that collects compatible pairs first, then inserts them."""
        self._require_pairwise()
        n = self._size()
        buffer = [(i, j) for i, j in _pair_order(n) if self._compatible((i, j))]
        graph = AdjListGraph()
        graph.populate_vertices(n)
        for i, j in buffer:
            graph.add_edge_unsafe(i, j)
        return graph

    def build_adj_list_by_vertex(self) -> AdjListGraph:
        """Pairwise build that fills each vertex's list by checking every other vertex."""
        self._require_pairwise()
        n = self._size()
        adjacency = [
            [j for j in range(n) if self._compatible((i, j)) and i != j] for i in range(n)
        ]
        directed = sum(len(neighbours) for neighbours in adjacency)
        return AdjListGraph(adjacency, directed // 2)

    def build_csr_two_passes(self) -> CSRGraph:
        """CSR build: count neighbours per vertex, then write them into place."""
        self._require_pairwise()
        n = self._size()
        adjacency = [
            [j for j in range(n) if self._compatible((i, j)) and i != j] for i in range(n)
        ]
        offsets = prefix_sum([0, *(len(neighbours) for neighbours in adjacency)])
        edges = [j for neighbours in adjacency for j in neighbours]
        return CSRGraph(offsets, edges)

    def build_csr_two_passes_atomic(self) -> AtomicCSRGraph:
        """CSR build over unordered pairs, writing each edge from both ends."""
        self._require_pairwise()
        n = self._size()
        pairs = [(i, j) for i, j in _pair_order(n) if self._compatible((i, j))]
        degrees = [0] * n
        for i, j in pairs:
            degrees[i] += 1
            degrees[j] += 1
        offsets = prefix_sum([0, *degrees])
        edges = [0] * offsets[-1]
        filled = [0] * n
        for i, j in pairs:
            edges[offsets[i] + filled[i]] = j
            filled[i] += 1
            edges[offsets[j] + filled[j]] = i
            filled[j] += 1
        return AtomicCSRGraph(offsets, edges)

    def build_comp_graph(
        self, storage_type: GraphsStorageType = GraphsStorageType.ADJ_LIST
    ) -> IGraph:
        """Build the compatibility graph in the requested storage."""
        storage = GraphsStorageType(storage_type)
        if self.arity != 2:
            if storage is GraphsStorageType.ADJ_LIST:
                return self.build_comp_graph_generic()
            raise ValueError(f"{storage.name} storage needs a pairwise check")
        if storage is GraphsStorageType.ADJ_LIST:
            return self.build_adj_list_by_vertex()
        if storage is GraphsStorageType.ATOMIC_CSR:
            return self.build_csr_two_passes_atomic()
        return self.build_csr_two_passes()