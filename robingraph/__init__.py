"""Compatibility graphs, k-core decomposition and maximum cliques for outlier rejection."""

__version__ = "1.2.3"

__all__ = [
    "utils",
    "graph_core",
    "adj_list",
    "graph_io",
    "pkc",
    "graph_solvers",
    "robin",
    "comp_graph",
]