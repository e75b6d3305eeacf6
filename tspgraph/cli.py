"""Command-line interface for tspgraph."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from tspgraph.algorithms.tsp import Tour, solve
from tspgraph.config import SEARCH_CONFIG
from tspgraph.lib.graph import Graph
from tspgraph.lib.io import (
    GraphFormatError,
    format_adjacency,
    format_weight,
    read_graph,
)
from tspgraph.logging import (
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    set_global_log_level,
)

logger = get_logger(__name__)


def _load(path: Path) -> Graph:
    """Read a graph file, exiting with status 1 on failure."""
    try:
        return read_graph(path)
    except OSError as exc:
        logger.error("Cannot read graph file %s: %s", path, exc)
    except GraphFormatError as exc:
        logger.error("Invalid graph description in %s: %s", path, exc)
    raise SystemExit(1)


def _solve_graph(
    path: Path, root_name: Optional[str], as_json: bool, best_only: bool
) -> None:
    """Run the tour search on a graph file and print the tours."""
    graph = _load(path)

    root = 0
    if root_name is not None:
        if root_name not in graph:
            logger.error("Root vertex '%s' is not in %s", root_name, path)
            raise SystemExit(1)
        root = graph.index_of(root_name)

    def print_tour(tour: Tour) -> None:
        print(tour.format())

    # Only the full JSON document reads result.tours
    config = replace(SEARCH_CONFIG, keep_tours=as_json and not best_only)
    try:
        on_tour = None if as_json or best_only else print_tour
        result = solve(graph, root=root, on_tour=on_tour, config=config)
    except ValueError as exc:
        logger.error("Cannot search %s: %s", path, exc)
        raise SystemExit(1) from None

    if as_json:
        data = result.to_dict()
        if best_only:
            data.pop("tours")
        print(json.dumps(data, indent=2))
        return

    if result.best is None:
        print("No tour found")
        return
    if best_only:
        print(result.best.format())
    print(f"Minimum cost: {format_weight(result.best_cost)}")


def _show_graph(path: Path) -> None:
    """Print the adjacency listing of a graph file."""
    graph = _load(path)
    for line in format_adjacency(graph):
        print(line)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``tspgraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="tspgraph",
        description="Solve small Traveling Salesman instances by exhaustive search.",
    )

    # Global options
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{solve,show}",
        help="Available commands",
    )

    solve_parser = subparsers.add_parser(
        "solve", help="Enumerate every tour and report the cheapest"
    )
    solve_parser.add_argument("graph", type=Path, help="Path to graph description")
    solve_parser.add_argument(
        "--root",
        default=None,
        help="Vertex to start and end at (default: first vertex in the file)",
    )
    solve_parser.add_argument(
        "--json", action="store_true", help="Print results as JSON"
    )
    solve_parser.add_argument(
        "--best-only",
        action="store_true",
        help="Only print the cheapest tour",
    )

    show_parser = subparsers.add_parser("show", help="Print a graph's adjacency list")
    show_parser.add_argument("graph", type=Path, help="Path to graph description")

    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        enable_debug_logging()
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        disable_debug_logging()

    if args.command == "solve":
        _solve_graph(args.graph, args.root, args.json, args.best_only)
    elif args.command == "show":
        _show_graph(args.graph)


if __name__ == "__main__":
    main()
