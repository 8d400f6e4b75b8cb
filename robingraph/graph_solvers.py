"""Solvers for k-core decomposition and maximum cliques."""

from __future__ import annotations

import enum
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from robingraph.graph_core import IGraph
from robingraph.pkc import bz_kcores, pkc_original_serial, pkc_parallel

__all__ = [
    "KCoreSolverMode",
    "KCoreDecompositionSolver",
    "CliqueSolverMode",
    "MaxCliqueParams",
    "MaxCliqueSolver",
]


class KCoreSolverMode(enum.Enum):
    """Algorithm used for the k-core decomposition."""

    PKC_PARALLEL = 0
    PKC_PARALLEL_OPTIMIZED = 1
    PKC_SERIAL = 2
    BZ_SERIAL = 3


_KCORE_ALGORITHMS: dict[KCoreSolverMode, Callable[[IGraph], list[int]]] = {
    KCoreSolverMode.PKC_PARALLEL: lambda g: pkc_parallel(g, False),
    KCoreSolverMode.PKC_PARALLEL_OPTIMIZED: lambda g: pkc_parallel(g, True),
    KCoreSolverMode.PKC_SERIAL: pkc_original_serial,
    KCoreSolverMode.BZ_SERIAL: bz_kcores,
}


class KCoreDecompositionSolver:
    """Computes the core number of every vertex of a graph."""

    def __init__(self, mode: KCoreSolverMode = KCoreSolverMode.BZ_SERIAL):
        self.mode = KCoreSolverMode(mode)
        self._core: list[int] = []
        self._max_k_core: list[int] = []
        self._max_core_number = 0

    def solve(self, graph: IGraph) -> None:
        """Decompose ``graph``; results replace those of any earlier call."""
        self._core = list(_KCORE_ALGORITHMS[self.mode](graph))
        if not self._core:
            self._max_core_number = 0
            self._max_k_core = []
            return
        self._max_core_number = max(self._core)
        self._max_k_core = [v for v, c in enumerate(self._core) if c == self._max_core_number]

    def k_core(self, k: int) -> list[int]:
        """Vertices whose core number is at least ``k``."""
        return [v for v, c in enumerate(self._core) if c >= k]

    def max_k_core(self) -> list[int]:
        """Vertices whose core number equals the largest one."""
        return list(self._max_k_core)

    def max_core_number(self) -> int:
        return self._max_core_number

    def core_numbers(self) -> list[int]:
        """Core number of every vertex, indexed by vertex."""
        return list(self._core)


class CliqueSolverMode(enum.Enum):
    """Whether the clique search stops at the heuristic or goes on to an exact search."""

    PMC_EXACT = 0
    PMC_HEU = 1


@dataclass
class MaxCliqueParams:
    """Settings for :class:`MaxCliqueSolver`; ``time_limit`` is in seconds."""

    solver_mode: CliqueSolverMode = CliqueSolverMode.PMC_HEU
    time_limit: float = 3600.0

    def __post_init__(self) -> None:
        self.solver_mode = CliqueSolverMode(self.solver_mode)
        if self.time_limit < 0:
            raise ValueError("time_limit must not be negative")


class _SearchTimeout(Exception):
    pass


def _heuristic_clique(adj: Sequence[set[int]], core: Sequence[int]) -> list[int]:
    """Greedy clique growth from each vertex, highest core numbers first."""
    best: list[int] = []
    for v in sorted(range(len(adj)), key=lambda x: (-core[x], x)):
        if core[v] + 1 <= len(best):
            break
        candidates = sorted(
            (u for u in adj[v] if core[u] >= len(best)), key=lambda x: (-core[x], x)
        )
        clique = [v]
        for u in candidates:
            if all(u in adj[w] for w in clique):
                clique.append(u)
        if len(clique) > len(best):
            best = clique
    return best


def _color_sort(adj: Sequence[set[int]], vertices: Sequence[int]) -> tuple[list[int], list[int]]:
    """Order vertices by greedy colour class; each gets its colour as a clique bound."""
    classes: list[list[int]] = []
    for v in vertices:
        for colour_class in classes:
            if adj[v].isdisjoint(colour_class):
                colour_class.append(v)
                break
        else:
            classes.append([v])
    order: list[int] = []
    bounds: list[int] = []
    for colour, colour_class in enumerate(classes, start=1):
        order.extend(colour_class)
        bounds.extend([colour] * len(colour_class))
    return order, bounds


def _exact_clique(
    adj: Sequence[set[int]], core: Sequence[int], initial: list[int], deadline: float
) -> list[int]:
    """Branch and bound with k-core pruning and colouring bounds."""
    best = list(initial)
    clique: list[int] = []

    def expand(candidates: list[int]) -> None:
        nonlocal best
        if time.monotonic() > deadline:
            raise _SearchTimeout
        order, bounds = _color_sort(adj, candidates)
        for i in range(len(order) - 1, -1, -1):
            if len(clique) + bounds[i] <= len(best):
                return
            v = order[i]
            rest = [u for u in order[:i] if u in adj[v]]
            clique.append(v)
            if rest:
                expand(rest)
            elif len(clique) > len(best):
                best = list(clique)
            clique.pop()

    start = sorted(
        (v for v in range(len(adj)) if core[v] + 1 > len(best)), key=lambda x: (core[x], x)
    )
    try:
        expand(start)
    except _SearchTimeout:
        pass
    return best


class MaxCliqueSolver:
    """Finds a maximum clique, or a large clique when only the heuristic is asked for."""

    def __init__(self, params: MaxCliqueParams | None = None):
        self.params = params if params is not None else MaxCliqueParams()

    def find_max_clique(self, graph: IGraph) -> list[int]:
        """Return the clique's vertices in increasing order; empty if the graph has no edges."""
        n = graph.vertex_count()
        adj = [set(graph.neighbors(v)) - {v} for v in range(n)]
        if not any(adj):
            return []
        core = bz_kcores(graph)
        upper_bound = max(core) + 1
        clique = _heuristic_clique(adj, core)
        if len(clique) >= upper_bound or self.params.solver_mode is not CliqueSolverMode.PMC_EXACT:
            return sorted(clique)
        deadline = time.monotonic() + self.params.time_limit
        return sorted(_exact_clique(adj, core, clique, deadline))