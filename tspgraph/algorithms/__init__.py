"""Algorithms over tspgraph graphs."""

from tspgraph.algorithms.heap import (
    BinaryHeap,
    HeapCapacityError,
    HeapEmptyError,
    HeapNode,
)
from tspgraph.algorithms.tsp import Tour, TourSearch, TspResult, iter_tours, solve

__all__ = [
    "BinaryHeap",
    "HeapCapacityError",
    "HeapEmptyError",
    "HeapNode",
    "Tour",
    "TourSearch",
    "TspResult",
    "iter_tours",
    "solve",
]
