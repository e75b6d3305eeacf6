from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

VertexName = str
VertexIndex = int
Weight = float
EdgeTuple = Tuple[VertexIndex, VertexIndex, Optional[Weight]]


@dataclass(frozen=True)
class Edge:
    """
    A single adjacency entry.

    Attributes:
        neighbor (VertexIndex): Index of the vertex this edge points to.
        weight (Optional[Weight]): Edge weight, or None on unweighted graphs.
    """

    neighbor: VertexIndex
    weight: Optional[Weight] = None

    @property
    def cost(self) -> Weight:
        """Return the weight used for path costs; unweighted edges count as 1.0."""
        return 1.0 if self.weight is None else self.weight


class Graph:
    """
    An adjacency-list graph with a bidirectional vertex name/index mapping.

    Vertices are identified by text labels and assigned dense integer indices
    in order of first appearance. Each vertex owns an ordered list of outgoing
    `Edge` entries kept in insertion order.

    This class enforces:
      - Inserting an existing vertex is a no-op.
      - Inserting an edge auto-creates missing endpoints.
      - On undirected graphs an edge (a, b) is mirrored as (b, a) unless a == b,
        in which case the self-loop is stored once.
      - Parallel edges are kept; there is no duplicate-edge detection.
    """

    def __init__(self, directed: bool = False, weighted: bool = True) -> None:
        """
        Initialize an empty Graph.

        Args:
            directed (bool): If False, edges are mirrored on insertion.
            weighted (bool): Whether edges carry weights.
        """
        self.directed = directed
        self.weighted = weighted
        self.name_to_index: Dict[VertexName, VertexIndex] = {}
        self.index_to_name: Dict[VertexIndex, VertexName] = {}
        self.adjacency: List[List[Edge]] = []

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        weighting = "weighted" if self.weighted else "unweighted"
        return (
            f"Graph({kind}, {weighting}, vertices={self.vertex_count}, "
            f"edges={self.edge_count()})"
        )

    def __len__(self) -> int:
        return self.vertex_count

    def __contains__(self, name: object) -> bool:
        return name in self.name_to_index

    @property
    def vertex_count(self) -> int:
        """Return the number of distinct vertices."""
        return len(self.adjacency)

    #
    # Mutation
    #
    def insert_vertex(self, name: VertexName) -> VertexIndex:
        """
        Insert a vertex with no neighbors.

        If `name` is already mapped the graph is left untouched.

        Args:
            name (VertexName): The vertex label.

        Returns:
            VertexIndex: The index assigned to `name`.
        """
        index = self.name_to_index.get(name)
        if index is not None:
            return index

        index = len(self.adjacency)
        self.name_to_index[name] = index
        self.index_to_name[index] = name
        self.adjacency.append([])
        return index

    def insert_edge(
        self,
        name_a: VertexName,
        name_b: VertexName,
        weight: Optional[Weight] = None,
    ) -> None:
        """
        Insert an edge from `name_a` to `name_b`.

        Missing endpoints are inserted first. On undirected graphs the reverse
        entry is appended to `name_b`'s list with the same weight, except for
        self-loops.

        Args:
            name_a (VertexName): Source vertex label.
            name_b (VertexName): Target vertex label.
            weight (Optional[Weight]): Edge weight; ignored on unweighted graphs.
        """
        index_a = self.insert_vertex(name_a)
        index_b = self.insert_vertex(name_b)
        if not self.weighted:
            weight = None

        self.adjacency[index_a].append(Edge(index_b, weight))

        if self.directed or name_a == name_b:
            return

        self.adjacency[index_b].append(Edge(index_a, weight))

    #
    # Lookup and traversal
    #
    def index_of(self, name: VertexName) -> VertexIndex:
        """
        Return the index of `name`.

        Raises:
            KeyError: If the vertex does not exist.
        """
        try:
            return self.name_to_index[name]
        except KeyError:
            raise KeyError(f"Vertex '{name}' does not exist.") from None

    def name_of(self, index: VertexIndex) -> VertexName:
        """
        Return the label of vertex `index`.

        Raises:
            KeyError: If the index is out of range.
        """
        try:
            return self.index_to_name[index]
        except KeyError:
            raise KeyError(f"Vertex index {index} does not exist.") from None

    def neighbors(self, index: VertexIndex) -> Iterator[Edge]:
        """
        Iterate the outgoing edges of vertex `index` in insertion order.

        Raises:
            KeyError: If the index is out of range.
        """
        if not 0 <= index < len(self.adjacency):
            raise KeyError(f"Vertex index {index} does not exist.")
        return iter(self.adjacency[index])

    def edge_weight(self, u: VertexIndex, v: VertexIndex) -> Optional[Weight]:
        """
        Return the cost of the first u -> v edge, or None if there is none.

        Unweighted edges report 1.0.
        """
        for edge in self.neighbors(u):
            if edge.neighbor == v:
                return edge.cost
        return None

    def edges(self) -> Iterator[EdgeTuple]:
        """
        Iterate logical edges as (u, v, weight) tuples.

        Edges are produced in adjacency order. On undirected graphs the
        mirrored entry of each edge is skipped, so every inserted edge is
        reported exactly once.
        """
        # Mirrored entries still to be skipped, keyed by (owner, neighbor, weight)
        pending: Dict[Tuple[VertexIndex, VertexIndex, Optional[Weight]], int] = {}

        for u, adj in enumerate(self.adjacency):
            for edge in adj:
                v = edge.neighbor
                if not self.directed and u != v:
                    key = (u, v, edge.weight)
                    if pending.get(key, 0) > 0:
                        pending[key] -= 1
                        continue
                    reverse = (v, u, edge.weight)
                    pending[reverse] = pending.get(reverse, 0) + 1
                yield u, v, edge.weight

    def edge_count(self) -> int:
        """
        Return the number of stored adjacency entries.

        Mirrored entries of undirected edges are counted separately.
        """
        return sum(len(edges) for edges in self.adjacency)

    def names(self) -> List[VertexName]:
        """Return vertex labels in index order."""
        return [self.index_to_name[i] for i in range(self.vertex_count)]
