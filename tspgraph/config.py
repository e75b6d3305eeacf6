"""Configuration classes for tspgraph components."""

from dataclasses import dataclass
from math import factorial
from typing import Optional


@dataclass
class SearchConfig:
    """Configuration for the exhaustive tour search."""

    # Index of the vertex every tour starts and ends at
    root_index: int = 0

    # Keep every enumerated tour on the result, not just the best one
    keep_tours: bool = True

    # Log a warning when the graph has more vertices than this
    warn_vertices: int = 10

    # Refuse to search graphs larger than this (None means no limit)
    max_vertices: Optional[int] = None

    def estimate_tours(self, vertex_count: int) -> int:
        """Upper bound on the number of tours for `vertex_count` vertices.

        A complete graph on n vertices has (n-1)! rooted tours when direction
        reversed duplicates are counted separately.
        """
        if vertex_count < 2:
            return 0
        return factorial(vertex_count - 1)

    def check_size(self, vertex_count: int) -> None:
        """Raise ValueError if `vertex_count` exceeds `max_vertices`."""
        if self.max_vertices is not None and vertex_count > self.max_vertices:
            raise ValueError(
                f"Graph has {vertex_count} vertices; exhaustive search is limited "
                f"to {self.max_vertices}."
            )


# Global configuration instance
SEARCH_CONFIG = SearchConfig()
