"""NetworkX graph conversion utilities.

Example:
    >>> import networkx as nx
    >>> from tspgraph.lib.nx import from_networkx, to_networkx
    >>>
    >>> G = nx.Graph()
    >>> G.add_edge("A", "B", weight=2.0)
    >>> G.add_edge("B", "C", weight=1.0)
    >>> graph = from_networkx(G)
    >>> graph.vertex_count
    3
    >>> to_networkx(graph).number_of_edges()
    2
"""

from __future__ import annotations

from typing import Union

import networkx as nx

from tspgraph.lib.graph import Graph

NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]


def to_networkx(
    graph: Graph, weight_attr: str = "weight"
) -> Union[nx.MultiDiGraph, nx.MultiGraph]:
    """
    Convert a Graph into a NetworkX multigraph.

    Directed graphs become `nx.MultiDiGraph`, undirected graphs `nx.MultiGraph`,
    so parallel edges survive the conversion. Nodes are added in index order
    and keep their labels. Weighted edges carry `weight_attr`.

    Args:
        graph: The Graph to convert.
        weight_attr: Edge attribute name used for weights.

    Returns:
        A NetworkX multigraph.
    """
    nx_graph = nx.MultiDiGraph() if graph.directed else nx.MultiGraph()
    nx_graph.add_nodes_from(graph.names())

    for u, v, weight in graph.edges():
        attrs = {weight_attr: weight} if weight is not None else {}
        nx_graph.add_edge(graph.name_of(u), graph.name_of(v), **attrs)
    return nx_graph


def from_networkx(G: NxGraph, weight_attr: str = "weight") -> Graph:
    """
    Build a Graph from any NetworkX graph.

    Directedness follows `G.is_directed()`. The result is weighted if any edge
    carries `weight_attr`; edges without it then get weight 0.0, matching the
    text loader's default. Node labels are converted with `str`, and indices
    follow NetworkX's node iteration order.

    Args:
        G: NetworkX graph (DiGraph, MultiDiGraph, Graph, or MultiGraph).
        weight_attr: Edge attribute name holding weights.

    Returns:
        The populated Graph.

    Raises:
        TypeError: If G is not a NetworkX graph.
    """
    if not isinstance(G, (nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph)):
        raise TypeError(
            f"Expected NetworkX graph (DiGraph, MultiDiGraph, Graph, MultiGraph), "
            f"got {type(G).__name__}"
        )

    weighted = any(weight_attr in data for _, _, data in G.edges(data=True))
    graph = Graph(directed=G.is_directed(), weighted=weighted)

    for node in G.nodes():
        graph.insert_vertex(str(node))

    for u, v, data in G.edges(data=True):
        if weighted:
            graph.insert_edge(str(u), str(v), float(data.get(weight_attr, 0.0)))
        else:
            graph.insert_edge(str(u), str(v))
    return graph
