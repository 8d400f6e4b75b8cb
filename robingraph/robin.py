"""Selecting the inlier structure of a compatibility graph."""

from __future__ import annotations

import enum

from robingraph.graph_core import IGraph
from robingraph.graph_solvers import (
    CliqueSolverMode,
    KCoreDecompositionSolver,
    KCoreSolverMode,
    MaxCliqueParams,
    MaxCliqueSolver,
)

__all__ = ["InlierGraphStructure", "find_inlier_structure"]


class InlierGraphStructure(enum.Enum):
    """Which subgraph is taken as the set of inliers."""

    MAX_CORE = 0
    MAX_CLIQUE = 1


def find_inlier_structure(graph: IGraph, graph_structure: InlierGraphStructure) -> list[int]:
    """Return the vertices of the maximum k-core or of an exact maximum clique."""
    structure = InlierGraphStructure(graph_structure)
    if structure is InlierGraphStructure.MAX_CORE:
        solver = KCoreDecompositionSolver(KCoreSolverMode.BZ_SERIAL)
        solver.solve(graph)
        return solver.max_k_core()
    params = MaxCliqueParams(solver_mode=CliqueSolverMode.PMC_EXACT)
    return MaxCliqueSolver(params).find_max_clique(graph)