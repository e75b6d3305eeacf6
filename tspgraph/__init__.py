"""tspgraph: exhaustive Traveling Salesman search over adjacency-list graphs.

Primary API:
    read_graph() / parse_graph() - Load the line-based graph description format
    Graph - Adjacency-list graph with vertex name/index mapping
    solve() - Enumerate every tour from a root and keep the cheapest
    iter_tours() - Lazily yield every tour
    BinaryHeap, HeapNode - Min-priority queue for other graph algorithms

Example:
    from tspgraph import parse_graph, solve

    graph = parse_graph([
        "undirected weighted",
        "A=B=1",
        "B=C=2",
        "C=A=3",
    ])
    result = solve(graph)
    print(result.best.format())
"""

from __future__ import annotations

from tspgraph import cli, logging
from tspgraph._version import __version__
from tspgraph.algorithms.heap import (
    BinaryHeap,
    HeapCapacityError,
    HeapEmptyError,
    HeapNode,
)
from tspgraph.algorithms.tsp import Tour, TourSearch, TspResult, iter_tours, solve
from tspgraph.config import SEARCH_CONFIG, SearchConfig
from tspgraph.lib.graph import Edge, Graph
from tspgraph.lib.io import GraphFormatError, graph_to_lines, parse_graph, read_graph
from tspgraph.lib.nx import from_networkx, to_networkx
from tspgraph.lib.path import PathTracker, PathUnderflowError

__all__ = [
    # Version
    "__version__",
    # Graph
    "Graph",
    "Edge",
    "PathTracker",
    "parse_graph",
    "read_graph",
    "graph_to_lines",
    # Search
    "solve",
    "iter_tours",
    "Tour",
    "TourSearch",
    "TspResult",
    "SearchConfig",
    "SEARCH_CONFIG",
    # Heap
    "BinaryHeap",
    "HeapNode",
    # Errors
    "GraphFormatError",
    "HeapCapacityError",
    "HeapEmptyError",
    "PathUnderflowError",
    # Library integrations (NetworkX)
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
