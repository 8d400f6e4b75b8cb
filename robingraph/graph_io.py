"""Reading graphs stored as Matrix Market coordinate files."""

from __future__ import annotations

import os
from collections.abc import Iterator

from robingraph.adj_list import AdjListGraph

__all__ = ["MatrixMarketReader", "read_adj_list_graph"]


def _content_lines(text: str) -> Iterator[tuple[int, str]]:
    for number, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue
        if line.startswith("%"):
            lowered = line.lower()
            if lowered.startswith("%%matrixmarket"):
                fields = lowered.split()
                if len(fields) > 2 and fields[2] != "coordinate":
                    raise ValueError(f"only coordinate Matrix Market files are supported, got {fields[2]!r}")
            continue
        yield number, line


def _parse_ints(line: str, number: int, count: int) -> list[int]:
    tokens = line.split()
    if len(tokens) < count:
        raise ValueError(f"line {number}: expected {count} integers, got {line!r}")
    try:
        return [int(tok) for tok in tokens[:count]]
    except ValueError:
        raise ValueError(f"line {number}: expected integers, got {line!r}") from None


class MatrixMarketReader:
    """Reads undirected graphs from Matrix Market adjacency matrices."""

    def read_adj_list_graph_from_file(self, path: str | os.PathLike[str]) -> AdjListGraph:
        """Load the square matrix at ``path``; every non-zero entry becomes an edge."""
        with open(path, encoding="utf-8") as handle:
            text = handle.read()

        lines = _content_lines(text)
        try:
            number, size_line = next(lines)
        except StopIteration:
            raise ValueError("Matrix Market file has no size line") from None
        rows, cols, nnz = _parse_ints(size_line, number, 3)
        if rows != cols:
            raise ValueError(f"matrix is not square: {rows} x {cols}")

        graph = AdjListGraph()
        graph.populate_vertices(rows)
        if nnz == 0:
            return graph

        entries: set[tuple[int, int]] = set()
        read = 0
        for number, line in lines:
            if read == nnz:
                break
            row, col = _parse_ints(line, number, 2)
            if not (1 <= row <= rows and 1 <= col <= cols):
                raise ValueError(f"line {number}: entry ({row}, {col}) outside a {rows} x {cols} matrix")
            entries.add((row - 1, col - 1))
            read += 1
        if read < nnz:
            raise ValueError(f"expected {nnz} entries, found {read}")

        for row, col in sorted(entries):
            graph.add_edge(col, row)
        return graph


def read_adj_list_graph(path: str | os.PathLike[str]) -> AdjListGraph:
    """Load an undirected graph from a Matrix Market file."""
    return MatrixMarketReader().read_adj_list_graph_from_file(path)