"""Exhaustive Traveling Salesman search.

Every Hamiltonian cycle that starts and ends at a fixed root vertex is
enumerated by depth-first search with backtracking. There is no pruning, so
the running time is O((n-1)!) on a complete graph of n vertices.

Example:
    >>> from tspgraph.lib.io import parse_graph
    >>> g = parse_graph(["undirected weighted", "A=B=1", "B=C=2", "C=A=3"])
    >>> result = solve(g)
    >>> result.tour_count, result.best_cost
    (2, 6.0)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

from tspgraph.config import SEARCH_CONFIG, SearchConfig
from tspgraph.lib.graph import Graph, VertexIndex, VertexName, Weight
from tspgraph.lib.io import format_weight
from tspgraph.lib.path import PathTracker
from tspgraph.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Tour:
    """
    A completed cycle through every vertex.

    Attributes:
        cost (Weight): Sum of edge weights along the cycle, closing edge included.
        indices (Tuple[VertexIndex, ...]): Vertex indices; the root appears first
            and last.
        labels (Tuple[VertexName, ...]): Vertex labels in the same order.
    """

    cost: Weight
    indices: Tuple[VertexIndex, ...]
    labels: Tuple[VertexName, ...]

    def __len__(self) -> int:
        return len(self.indices)

    def format(self) -> str:
        """Render as ``"<cost> - A -> B -> C -> A"``."""
        return f"{format_weight(self.cost)} - " + " -> ".join(self.labels)

    def to_dict(self) -> Dict[str, Any]:
        return {"cost": self.cost, "sequence": list(self.labels)}


@dataclass
class TspResult:
    """
    Accumulated outcome of a search.

    Attributes:
        best (Optional[Tour]): Cheapest tour seen so far; None until one is found.
        tour_count (int): Number of tours recorded.
        tours (List[Tour]): Every recorded tour, when `keep_tours` is set.
        keep_tours (bool): Whether `record` stores each tour.
    """

    best: Optional[Tour] = None
    tour_count: int = 0
    tours: List[Tour] = field(default_factory=list)
    keep_tours: bool = field(default=True, repr=False)

    @property
    def best_cost(self) -> Optional[Weight]:
        return None if self.best is None else self.best.cost

    def record(self, tour: Tour) -> None:
        """
        Count `tour` and keep it if it beats the current minimum.

        Ties keep the tour found first.
        """
        self.tour_count += 1
        if self.keep_tours:
            self.tours.append(tour)
        if self.best is None or tour.cost < self.best.cost:
            self.best = tour

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tours": [t.to_dict() for t in self.tours],
            "best": None if self.best is None else self.best.to_dict(),
            "tour_count": self.tour_count,
        }


def closing_weights(graph: Graph, root: VertexIndex) -> Dict[VertexIndex, Weight]:
    """
    Map each vertex with an edge into `root` to that edge's cost.

    On undirected graphs this is read straight off the root's neighbor list.
    On directed graphs every vertex's list is scanned for arcs into the root.
    The first parallel edge wins.
    """
    weights: Dict[VertexIndex, Weight] = {}
    if not graph.directed:
        for edge in graph.neighbors(root):
            weights.setdefault(edge.neighbor, edge.cost)
        return weights

    for u in range(graph.vertex_count):
        for edge in graph.neighbors(u):
            if edge.neighbor == root:
                weights.setdefault(u, edge.cost)
                break
    return weights


class TourSearch:
    """
    Depth-first enumeration of rooted Hamiltonian cycles.

    The search owns its backtracking state. A vertex is flagged in `visited`
    exactly while it is on `path`; every descent marks and appends, and the
    matching ascent removes and unmarks.

    Attributes:
        graph (Graph): The graph being searched; not modified.
        root (VertexIndex): Start and end vertex of every tour.
        path (PathTracker): The current partial path.
        visited (List[bool]): Per-vertex on-path flags.
    """

    def __init__(self, graph: Graph, root: VertexIndex = 0) -> None:
        if graph.vertex_count == 0:
            raise ValueError("Cannot search tours in a graph with no vertices.")
        if not 0 <= root < graph.vertex_count:
            raise ValueError(
                f"Root index {root} is out of range for {graph.vertex_count} vertices."
            )
        self.graph = graph
        self.root = root
        self.path = PathTracker(root)
        self.visited: List[bool] = [False] * graph.vertex_count
        self._closing = closing_weights(graph, root)

    def tours(self) -> Iterator[Tour]:
        """
        Yield every tour in depth-first order.

        Raises:
            RuntimeError: If the search is already in progress.
        """
        if self.visited[self.root]:
            raise RuntimeError("Tour search is already running.")

        self.visited[self.root] = True
        try:
            yield from self._descend(self.root, 0.0)
        finally:
            self.visited[self.root] = False

    def _descend(self, current: VertexIndex, cost: Weight) -> Iterator[Tour]:
        if len(self.path) == self.graph.vertex_count and current != self.root:
            back = self._closing.get(current)
            if back is None:
                logger.debug(
                    "Path ending at '%s' has no edge back to the root",
                    self.graph.name_of(current),
                )
                return
            indices = self.path.sequence + (self.root,)
            yield Tour(
                cost=cost + back,
                indices=indices,
                labels=tuple(self.graph.name_of(i) for i in indices),
            )
            return

        for edge in self.graph.neighbors(current):
            nxt = edge.neighbor
            if self.visited[nxt]:
                continue
            self.visited[nxt] = True
            self.path.append(nxt)
            try:
                yield from self._descend(nxt, cost + edge.cost)
            finally:
                self.path.remove_last()
                self.visited[nxt] = False


def iter_tours(graph: Graph, root: VertexIndex = 0) -> Iterator[Tour]:
    """
    Lazily yield every Hamiltonian cycle through `root`.

    Direction-reversed duplicates are not removed, so a complete graph on n
    vertices yields (n-1)! tours.

    Args:
        graph: The graph to search.
        root: Index of the start and end vertex.

    Raises:
        ValueError: If the graph is empty or `root` is out of range.
    """
    return TourSearch(graph, root).tours()


def solve(
    graph: Graph,
    root: Optional[VertexIndex] = None,
    on_tour: Optional[Callable[[Tour], None]] = None,
    config: Optional[SearchConfig] = None,
) -> TspResult:
    """
    Run the full search and collect the result.

    Args:
        graph: The graph to search.
        root: Index of the start and end vertex; defaults to `config.root_index`.
        on_tour: Called with each tour as it is found.
        config: Search settings; defaults to the global `SEARCH_CONFIG`.

    Returns:
        A TspResult. `best` is None when the graph has no Hamiltonian cycle.

    Raises:
        ValueError: If the graph is empty, too large for `config`, or `root`
            is out of range.
    """
    config = config or SEARCH_CONFIG
    if root is None:
        root = config.root_index

    n = graph.vertex_count
    config.check_size(n)
    if n > config.warn_vertices:
        logger.warning(
            "Graph has %d vertices; exhaustive search may enumerate up to %d tours",
            n,
            config.estimate_tours(n),
        )

    search = TourSearch(graph, root)
    logger.info(
        "Searching tours over %d vertices from root '%s'", n, graph.name_of(root)
    )

    result = TspResult(keep_tours=config.keep_tours)
    for tour in search.tours():
        logger.debug("Tour %s", tour.format())
        result.record(tour)
        if on_tour is not None:
            on_tour(tour)

    if result.best is None:
        logger.info("No tour found")
    else:
        logger.info(
            "Enumerated %d tours; minimum cost %s",
            result.tour_count,
            format_weight(result.best_cost),
        )
    return result
