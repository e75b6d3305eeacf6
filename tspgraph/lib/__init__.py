"""Graph data structures and I/O for tspgraph."""

from tspgraph.lib.graph import Edge, Graph
from tspgraph.lib.io import GraphFormatError, parse_graph, read_graph
from tspgraph.lib.path import PathTracker, PathUnderflowError

__all__ = [
    "Edge",
    "Graph",
    "GraphFormatError",
    "PathTracker",
    "PathUnderflowError",
    "parse_graph",
    "read_graph",
]
