"""Array-backed binary min-heap over weighted graph nodes.

The heap uses 1-based slots so that the parent of slot ``i`` is ``i // 2`` and
its children are ``2 * i`` and ``2 * i + 1``. A position map tracks where each
node currently lives, which makes deletion and key changes of arbitrary
elements O(log n).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional

from tspgraph.lib.graph import VertexIndex, Weight


class HeapCapacityError(RuntimeError):
    """Raised when inserting into a full heap."""


class HeapEmptyError(IndexError):
    """Raised when reading from an empty heap."""


@dataclass(eq=False)
class HeapNode:
    """
    A heap element keyed by `weight`.

    Nodes compare and hash by identity so that two nodes with equal fields are
    still tracked separately.

    Attributes:
        val (VertexIndex): The graph vertex this entry refers to.
        weight (Weight): Priority; smaller comes out first.
        label (str): Optional vertex label.
    """

    val: VertexIndex
    weight: Weight
    label: str = ""


class BinaryHeap:
    """
    Min-priority queue of HeapNode elements with a fixed capacity.

    Attributes:
        capacity (int): Length of the backing array, one more than the number
            of elements the heap can hold.
    """

    def __init__(self, n: int) -> None:
        """
        Create an empty heap able to hold `n` elements.

        Raises:
            ValueError: If `n` is negative.
        """
        if n < 0:
            raise ValueError(f"Heap size must be non-negative, got {n}.")
        self.capacity = n + 1
        self._arr: List[Optional[HeapNode]] = [None] * self.capacity
        self._size = 0
        self._pos: Dict[HeapNode, int] = {}

    def __repr__(self) -> str:
        return f"BinaryHeap(size={self._size}, capacity={self.capacity})"

    def __len__(self) -> int:
        return self._size

    def __contains__(self, node: object) -> bool:
        return node in self._pos

    def __iter__(self) -> Iterator[HeapNode]:
        """Iterate nodes in slot order (not sorted)."""
        for i in range(1, self._size + 1):
            yield self._arr[i]

    @property
    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size + 1 >= self.capacity

    def position_of(self, node: HeapNode) -> int:
        """
        Return the slot currently holding `node`.

        Raises:
            KeyError: If the node is not in the heap.
        """
        try:
            return self._pos[node]
        except KeyError:
            raise KeyError(f"Node {node!r} is not in the heap.") from None

    #
    # Public operations
    #
    def insert(self, node: HeapNode) -> None:
        """
        Add `node` and restore heap order.

        Raises:
            HeapCapacityError: If the heap is full.
            ValueError: If the node is already in the heap.
        """
        if node in self._pos:
            raise ValueError(f"Node {node!r} is already in the heap.")
        if self.is_full():
            raise HeapCapacityError(
                f"Heap at capacity ({self.capacity - 1} elements)."
            )
        self._size += 1
        self._place(node, self._size)
        self._sift_up(self._size)

    def find_min(self) -> HeapNode:
        """
        Return the minimum node without removing it.

        Raises:
            HeapEmptyError: If the heap is empty.
        """
        if self._size == 0:
            raise HeapEmptyError("find_min on an empty heap.")
        return self._arr[1]

    def extract_min(self) -> HeapNode:
        """
        Remove and return the minimum node.

        Raises:
            HeapEmptyError: If the heap is empty.
        """
        if self._size == 0:
            raise HeapEmptyError("extract_min on an empty heap.")
        return self._remove_at(1)

    def delete(self, i: int) -> HeapNode:
        """
        Remove and return the node at slot `i`.

        Raises:
            IndexError: If `i` is not an occupied slot.
        """
        if not 1 <= i <= self._size:
            raise IndexError(f"Slot {i} is outside the heap (size {self._size}).")
        return self._remove_at(i)

    def delete_node(self, node: HeapNode) -> None:
        """
        Remove `node` wherever it is.

        Raises:
            KeyError: If the node is not in the heap.
        """
        self._remove_at(self.position_of(node))

    def change_key(self, node: HeapNode, new_weight: Weight) -> None:
        """
        Set the weight of `node` and move it to its new place.

        Raises:
            KeyError: If the node is not in the heap.
        """
        i = self.position_of(node)
        old_weight = node.weight
        node.weight = new_weight
        if new_weight < old_weight:
            self._sift_up(i)
        else:
            self._sift_down(i)

    def check_invariant(self) -> bool:
        """Return True if heap order holds and the position map matches the array."""
        if len(self._pos) != self._size:
            return False
        for i in range(1, self._size + 1):
            node = self._arr[i]
            if node is None or self._pos.get(node) != i:
                return False
            if i > 1 and self._arr[i // 2].weight > node.weight:
                return False
        return all(slot is None for slot in self._arr[self._size + 1 :])

    #
    # Internals
    #
    def _place(self, node: HeapNode, i: int) -> None:
        self._arr[i] = node
        self._pos[node] = i

    def _swap(self, i: int, j: int) -> None:
        a, b = self._arr[i], self._arr[j]
        self._place(b, i)
        self._place(a, j)

    def _remove_at(self, i: int) -> HeapNode:
        node = self._arr[i]
        last = self._arr[self._size]
        self._arr[self._size] = None
        self._size -= 1
        del self._pos[node]

        if i <= self._size:
            self._place(last, i)
            # The moved node may belong above or below slot i
            if i > 1 and self._arr[i // 2].weight > last.weight:
                self._sift_up(i)
            else:
                self._sift_down(i)
        return node

    def _sift_up(self, i: int) -> None:
        while i > 1:
            parent = i // 2
            if self._arr[parent].weight <= self._arr[i].weight:
                break
            self._swap(i, parent)
            i = parent

    def _sift_down(self, i: int) -> None:
        while True:
            smallest = i
            left, right = 2 * i, 2 * i + 1
            if (
                left <= self._size
                and self._arr[left].weight < self._arr[smallest].weight
            ):
                smallest = left
            if (
                right <= self._size
                and self._arr[right].weight < self._arr[smallest].weight
            ):
                smallest = right
            if smallest == i:
                return
            self._swap(i, smallest)
            i = smallest
