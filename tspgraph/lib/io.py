"""Reading and writing the line-based graph description format.

The first line is a header of two tokens, the direction
(``directed``/``undirected``) and the weighting (``weighted``/``unweighted``).
Every following line is one of::

    name=             an isolated vertex
    a=b               an unweighted edge
    a=b=weight        a weighted edge

Example:
    >>> g = parse_graph(["undirected weighted", "A=B=2", "B=C=1.5", "D="])
    >>> g.vertex_count
    4
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from tspgraph.lib.graph import Graph, VertexIndex
from tspgraph.logging import get_logger

logger = get_logger(__name__)

DIRECTIONS = {"directed": True, "undirected": False}
WEIGHTINGS = {"weighted": True, "unweighted": False}


class GraphFormatError(ValueError):
    """Raised when a graph description cannot be parsed."""


def _parse_header(line: str) -> Tuple[bool, bool]:
    tokens = line.split()
    if len(tokens) < 2:
        raise GraphFormatError(
            f"Header '{line.strip()}' must contain a direction and a weighting."
        )
    direction, weighting = tokens[0].strip(), tokens[1].strip()
    if direction not in DIRECTIONS:
        raise GraphFormatError(
            f"Unknown direction '{direction}' (expected one of {sorted(DIRECTIONS)})."
        )
    if weighting not in WEIGHTINGS:
        raise GraphFormatError(
            f"Unknown weighting '{weighting}' (expected one of {sorted(WEIGHTINGS)})."
        )
    return DIRECTIONS[direction], WEIGHTINGS[weighting]


def _parse_weight(token: str) -> float:
    """Return `token` as a float, or 0.0 when it is missing or unparsable."""
    try:
        return float(token.strip())
    except ValueError:
        return 0.0


def format_weight(value: Optional[float]) -> str:
    """Render a weight without a trailing '.0' for whole numbers.

    Examples:
        2.0 -> "2"; 1.5 -> "1.5"; None -> "".
    """
    if value is None:
        return ""
    if math.isfinite(value) and value == int(value):
        return str(int(value))
    return repr(value)


def parse_graph(lines: Iterable[str]) -> Graph:
    """
    Build a Graph from lines of the graph description format.

    Blank lines are skipped. Tokens are whitespace-trimmed. A weight that is
    missing or cannot be parsed as a float defaults to 0.0.

    Args:
        lines: The header line followed by vertex and edge lines.

    Returns:
        The populated Graph.

    Raises:
        GraphFormatError: If the header is missing or malformed, or a line has
            no '=' separator or an empty vertex name.
    """
    it = iter(lines)
    header = None
    for line in it:
        if line.strip():
            header = line
            break
    if header is None:
        raise GraphFormatError("Graph description is empty.")

    directed, weighted = _parse_header(header)
    graph = Graph(directed=directed, weighted=weighted)

    for lineno, line in enumerate(it, start=2):
        line = line.rstrip("\r\n")
        if not line.strip():
            continue

        fields = line.split("=")
        if len(fields) < 2:
            raise GraphFormatError(f"Line {lineno} '{line}' has no '=' separator.")

        name_a = fields[0].strip()
        name_b = fields[1].strip()
        if not name_a:
            raise GraphFormatError(f"Line {lineno} '{line}' has an empty vertex name.")

        if not name_b:
            graph.insert_vertex(name_a)
        elif weighted:
            weight = _parse_weight(fields[2]) if len(fields) > 2 else 0.0
            graph.insert_edge(name_a, name_b, weight)
        else:
            graph.insert_edge(name_a, name_b)

    logger.debug(
        "Parsed %s graph with %d vertices and %d adjacency entries",
        "directed" if directed else "undirected",
        graph.vertex_count,
        graph.edge_count(),
    )
    return graph


def read_graph(path: Union[str, Path]) -> Graph:
    """
    Read and parse a graph description file.

    Args:
        path: Path to the file.

    Returns:
        The populated Graph.

    Raises:
        OSError: If the file cannot be read.
        GraphFormatError: If the contents are malformed.
    """
    path = Path(path)
    logger.debug("Reading graph from %s", path)
    text = path.read_text(encoding="utf-8")
    return parse_graph(text.splitlines())


def graph_to_lines(graph: Graph) -> List[str]:
    """
    Serialize a Graph back into the description format.

    Each stored edge is written once; the mirrored entry of an undirected edge
    is not repeated. Vertex declarations (``name=``) are emitted wherever they
    are needed for parsing the output to assign the same indices again.

    Args:
        graph: The Graph to export.

    Returns:
        A list of lines, header first.
    """
    header = "{} {}".format(
        "directed" if graph.directed else "undirected",
        "weighted" if graph.weighted else "unweighted",
    )
    lines: List[str] = [header]
    declared = 0

    def declare_for(u: VertexIndex, v: VertexIndex) -> None:
        # Parsing "u=v" assigns the next free index to u, then to v
        nonlocal declared
        nxt = declared
        for x in (u, v):
            if x == nxt:
                nxt += 1
            elif x > nxt:
                break
        else:
            declared = nxt
            return

        top = max(u, v)
        while declared < top:
            lines.append(f"{graph.name_of(declared)}=")
            declared += 1
        declared = top + 1

    for u, v, weight in graph.edges():
        declare_for(u, v)
        name_u, name_v = graph.name_of(u), graph.name_of(v)
        if graph.weighted:
            lines.append(f"{name_u}={name_v}={format_weight(weight)}")
        else:
            lines.append(f"{name_u}={name_v}")

    while declared < graph.vertex_count:
        lines.append(f"{graph.name_of(declared)}=")
        declared += 1

    return lines


def format_adjacency(graph: Graph) -> List[str]:
    """
    Render each vertex's neighbor list as a human-readable line.

    Weighted graphs render as ``A: (B, 2), (C, 1.5)``, unweighted graphs as
    ``A: B, C``. Isolated vertices render as ``A: ``.
    """
    lines: List[str] = []
    for index in range(graph.vertex_count):
        if graph.weighted:
            items = [
                f"({graph.name_of(e.neighbor)}, {format_weight(e.weight)})"
                for e in graph.neighbors(index)
            ]
        else:
            items = [graph.name_of(e.neighbor) for e in graph.neighbors(index)]
        lines.append(f"{graph.name_of(index)}: " + ", ".join(items))
    return lines
