import itertools

import pytest

from robingraph.adj_list import AdjListGraph
from robingraph.graph_io import read_adj_list_graph
from robingraph.graph_solvers import (
    CliqueSolverMode,
    KCoreDecompositionSolver,
    KCoreSolverMode,
    MaxCliqueParams,
    MaxCliqueSolver,
)

HEADER = "%%MatrixMarket matrix coordinate pattern symmetric\n"


def _write_mtx(path, n, edges):
    lines = [HEADER, f"{n} {n} {len(edges)}\n"]
    lines += [f"{b + 1} {a + 1}\n" for a, b in edges]
    path.write_text("".join(lines))
    return read_adj_list_graph(path)


@pytest.fixture
def g1(tmp_path):
    # 5 vertices, 7 edges: 3-core 0,1,2,3 and 1-core 4
    edges = [(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3), (3, 4)]
    return _write_mtx(tmp_path / "g1.mtx", 5, edges)


@pytest.fixture
def g2(tmp_path):
    return _write_mtx(tmp_path / "g2.mtx", 5, [])


@pytest.fixture
def g3(tmp_path):
    return _write_mtx(tmp_path / "g3.mtx", 5, [(0, 1), (1, 2), (2, 3), (3, 4)])


def _is_clique(graph, vertices):
    return all(graph.has_edge(a, b) for a, b in itertools.combinations(vertices, 2))


def test_k_core_solver_methods(g1):
    solver = KCoreDecompositionSolver(KCoreSolverMode.BZ_SERIAL)
    solver.solve(g1)
    assert len(solver.k_core(1)) == 5
    core_3 = solver.k_core(3)
    assert len(core_3) == 4
    assert sorted(solver.max_k_core()) == sorted(core_3)
    assert solver.max_core_number() == 3


@pytest.mark.parametrize("mode", list(KCoreSolverMode))
def test_k_core_simple_cases(mode, g1, g2, g3):
    for graph, expected in ((g1, [3, 3, 3, 3, 1]), (g2, [0] * 5), (g3, [1] * 5)):
        solver = KCoreDecompositionSolver(mode)
        solver.solve(graph)
        assert solver.core_numbers() == expected


@pytest.mark.parametrize("n", [50, 100, 150])
def test_k_core_random_graphs_agree(n):
    graph = AdjListGraph.random(n, 0.1, seed=n)
    results = []
    for mode in KCoreSolverMode:
        solver = KCoreDecompositionSolver(mode)
        solver.solve(graph)
        assert len(solver.core_numbers()) == n
        results.append(solver.core_numbers())
    assert all(r == results[0] for r in results)


def test_k_core_empty_graph():
    solver = KCoreDecompositionSolver()
    solver.solve(AdjListGraph())
    assert solver.max_core_number() == 0
    assert solver.max_k_core() == []
    assert solver.core_numbers() == []


def test_solve_twice_does_not_accumulate(g1):
    solver = KCoreDecompositionSolver()
    solver.solve(g1)
    solver.solve(g1)
    assert sorted(solver.max_k_core()) == [0, 1, 2, 3]


def test_max_clique_complete_graph():
    adjacency = {i: [j for j in range(5) if j != i] for i in range(5)}
    graph = AdjListGraph.from_adjacency_map(adjacency)
    clique = MaxCliqueSolver().find_max_clique(graph)
    assert len(clique) == 5
    assert set(clique) == {0, 1, 2, 3, 4}


def test_max_clique_isolated_vertices():
    graph = AdjListGraph()
    for i in range(10):
        graph.add_vertex(i)
    assert MaxCliqueSolver().find_max_clique(graph) == []


@pytest.mark.parametrize("mode", list(CliqueSolverMode))
def test_max_clique_g1(mode, g1):
    clique = MaxCliqueSolver(MaxCliqueParams(solver_mode=mode)).find_max_clique(g1)
    assert clique == [0, 1, 2, 3]


@pytest.mark.parametrize("seed", range(5))
def test_exact_clique_is_clique_and_not_smaller_than_heuristic(seed):
    graph = AdjListGraph.random(40, 0.4, seed=seed)
    heuristic = MaxCliqueSolver(MaxCliqueParams(CliqueSolverMode.PMC_HEU)).find_max_clique(graph)
    exact = MaxCliqueSolver(MaxCliqueParams(CliqueSolverMode.PMC_EXACT)).find_max_clique(graph)
    assert _is_clique(graph, heuristic)
    assert _is_clique(graph, exact)
    assert len(exact) >= len(heuristic)


def test_exact_clique_is_maximum_on_small_random_graph():
    graph = AdjListGraph.random(12, 0.5, seed=7)
    exact = MaxCliqueSolver(MaxCliqueParams(CliqueSolverMode.PMC_EXACT)).find_max_clique(graph)
    best = max(
        size
        for size in range(1, 13)
        if any(_is_clique(graph, combo) for combo in itertools.combinations(range(12), size))
    )
    assert all(graph.has_edge(a, b) for a, b in itertools.combinations(exact, 2))
    assert len(exact) == best


def test_negative_time_limit_rejected():
    with pytest.raises(ValueError):
        MaxCliqueParams(time_limit=-1)