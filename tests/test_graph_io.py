import pytest

from robingraph.adj_list import AdjListGraph
from robingraph.graph_io import MatrixMarketReader, read_adj_list_graph

G1 = """%%MatrixMarket matrix coordinate pattern symmetric
% graph 1: 5 vertices, 7 edges
5 5 7
2 1
3 1
4 1
3 2
4 2
4 3
5 1
"""

G1_EDGES = [(0, 1), (0, 2), (0, 3), (0, 4), (1, 2), (1, 3), (2, 3)]


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def _to_mtx(graph):
    edges = graph.to_edge_list()
    n = graph.vertex_count()
    body = "".join(f"{b + 1} {a + 1}\n" for a, b in edges)
    return f"%%MatrixMarket matrix coordinate pattern symmetric\n{n} {n} {len(edges)}\n{body}"


def test_read_g1(tmp_path):
    path = _write(tmp_path, "g1.mtx", G1)
    graph = MatrixMarketReader().read_adj_list_graph_from_file(path)
    assert graph.vertex_count() == 5
    assert graph.edge_count() == 7
    assert graph.to_edge_list() == G1_EDGES


def test_read_graph_without_edges(tmp_path):
    path = _write(tmp_path, "g2.mtx", "%%MatrixMarket matrix coordinate pattern symmetric\n5 5 0\n")
    graph = read_adj_list_graph(path)
    assert graph.vertex_count() == 5
    assert graph.edge_count() == 0


def test_both_triangles_give_same_graph(tmp_path):
    lines = "".join(f"{a + 1} {b + 1}\n{b + 1} {a + 1}\n" for a, b in G1_EDGES)
    text = f"%%MatrixMarket matrix coordinate pattern general\n5 5 {2 * len(G1_EDGES)}\n{lines}"
    graph = read_adj_list_graph(_write(tmp_path, "full.mtx", text))
    assert graph.to_edge_list() == G1_EDGES
    assert graph.edge_count() == len(G1_EDGES)


def test_values_are_ignored(tmp_path):
    text = "%%MatrixMarket matrix coordinate real general\n3 3 2\n2 1 0.5\n3 2 4.0\n"
    graph = read_adj_list_graph(_write(tmp_path, "real.mtx", text))
    assert graph.to_edge_list() == [(0, 1), (1, 2)]


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_round_trip_random_graph(tmp_path, seed):
    original = AdjListGraph.random(25, 0.3, seed=seed)
    graph = read_adj_list_graph(_write(tmp_path, "rand.mtx", _to_mtx(original)))
    assert graph.vertex_count() == original.vertex_count()
    assert graph.edge_count() == original.edge_count()
    assert graph.to_edge_list() == original.to_edge_list()


def test_non_square_raises(tmp_path):
    path = _write(tmp_path, "rect.mtx", "%%MatrixMarket matrix coordinate pattern general\n4 5 1\n2 1\n")
    with pytest.raises(ValueError):
        read_adj_list_graph(path)


def test_non_square_without_edges_raises(tmp_path):
    path = _write(tmp_path, "rect0.mtx", "%%MatrixMarket matrix coordinate pattern general\n4 5 0\n")
    with pytest.raises(ValueError):
        read_adj_list_graph(path)


def test_entry_out_of_range_raises(tmp_path):
    path = _write(tmp_path, "bad.mtx", "%%MatrixMarket matrix coordinate pattern general\n3 3 1\n4 1\n")
    with pytest.raises(ValueError):
        read_adj_list_graph(path)


def test_missing_entries_raise(tmp_path):
    path = _write(tmp_path, "short.mtx", "%%MatrixMarket matrix coordinate pattern general\n3 3 2\n2 1\n")
    with pytest.raises(ValueError):
        read_adj_list_graph(path)


def test_array_format_rejected(tmp_path):
    path = _write(tmp_path, "dense.mtx", "%%MatrixMarket matrix array real general\n2 2\n0\n1\n1\n0\n")
    with pytest.raises(ValueError):
        read_adj_list_graph(path)


def test_empty_file_raises(tmp_path):
    path = _write(tmp_path, "empty.mtx", "%%MatrixMarket matrix coordinate pattern general\n")
    with pytest.raises(ValueError):
        read_adj_list_graph(path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_adj_list_graph(tmp_path / "absent.mtx")