"""K-core decomposition by level peeling (PKC) and by bin sorting (BZ)."""

from __future__ import annotations

from collections.abc import Sequence

from robingraph.graph_core import IGraph

__all__ = [
    "pkc_optimized",
    "pkc_original",
    "bz_kcores",
    "pkc_original_serial",
    "pkc_parallel",
]

# Once this share of the vertices has been peeled, the optimized variant
# continues on a compacted graph holding only the remaining vertices.
_SMALL_GRAPH_FRACTION = 0.98


def _adjacency(graph: IGraph) -> list[list[int]]:
    return [graph.neighbors(v) for v in range(graph.vertex_count())]


def _peel_level(adjacency: Sequence[Sequence[int]], deg: list[int], level: int) -> int:
    """Peel every vertex whose degree drops to ``level``; return how many were peeled."""
    queue = [v for v, d in enumerate(deg) if d == level]
    start = 0
    while start < len(queue):
        v = queue[start]
        start += 1
        for u in adjacency[v]:
            if deg[u] > level:
                deg[u] -= 1
                if deg[u] == level:
                    queue.append(u)
    return len(queue)


def _peel_all(adjacency: Sequence[Sequence[int]]) -> list[int]:
    deg = [len(neighbours) for neighbours in adjacency]
    n = len(deg)
    visited = 0
    level = 0
    while visited < n:
        visited += _peel_level(adjacency, deg, level)
        level += 1
    return deg


def pkc_optimized(graph: IGraph) -> list[int]:
    """Core numbers by level peeling, finishing on a compacted remainder graph."""
    adjacency = _adjacency(graph)
    n = len(adjacency)
    deg = [len(neighbours) for neighbours in adjacency]
    threshold = int(n * _SMALL_GRAPH_FRACTION)
    visited = 0
    level = 0
    while visited < n:
        if visited >= threshold:
            remaining = [v for v in range(n) if deg[v] >= level]
            index = {v: i for i, v in enumerate(remaining)}
            small_adjacency = [
                [index[u] for u in adjacency[v] if deg[u] >= level] for v in remaining
            ]
            small_deg = [deg[v] for v in remaining]
            while visited < n:
                visited += _peel_level(small_adjacency, small_deg, level)
                level += 1
            for v, d in zip(remaining, small_deg):
                deg[v] = d
            break
        visited += _peel_level(adjacency, deg, level)
        level += 1
    return deg


def pkc_original(graph: IGraph) -> list[int]:
    """Core numbers by level-synchronous peeling over the whole graph."""
    return _peel_all(_adjacency(graph))


def pkc_original_serial(graph: IGraph) -> list[int]:
    """Core numbers by single-queue level peeling."""
    adjacency = _adjacency(graph)
    n = len(adjacency)
    deg = [len(neighbours) for neighbours in adjacency]
    visited = 0
    level = 0
    while visited < n:
        buffer = [v for v in range(n) if deg[v] == level]
        start = 0
        while start < len(buffer):
            v = buffer[start]
            start += 1
            for u in adjacency[v]:
                if deg[u] > level:
                    deg[u] -= 1
                    if deg[u] == level:
                        buffer.append(u)
        visited += len(buffer)
        level += 1
    return deg


def bz_kcores(graph: IGraph) -> list[int]:
    """Core numbers by the Batagelj-Zaversnik bin-sort algorithm."""
    adjacency = _adjacency(graph)
    n = len(adjacency)
    deg = [len(neighbours) for neighbours in adjacency]
    max_deg = max(deg, default=0)

    bins = [0] * (max_deg + 1)
    for d in deg:
        bins[d] += 1
    start = 0
    for d in range(max_deg + 1):
        bins[d], start = start, start + bins[d]

    pos = [0] * n
    vert = [0] * n
    for v, d in enumerate(deg):
        pos[v] = bins[d]
        vert[pos[v]] = v
        bins[d] += 1
    bins = [0, *bins[:-1]]

    for i in range(n):
        v = vert[i]
        for u in adjacency[v]:
            if deg[u] > deg[v]:
                du = deg[u]
                pu = pos[u]
                pw = bins[du]
                w = vert[pw]
                if u != w:
                    pos[u], vert[pu] = pw, w
                    pos[w], vert[pw] = pu, u
                bins[du] += 1
                deg[u] -= 1
    return deg


def pkc_parallel(graph: IGraph, use_optimized: bool = False) -> list[int]:
    """Core numbers by the PKC peeling, optionally the compacting variant."""
    return pkc_optimized(graph) if use_optimized else pkc_original(graph)