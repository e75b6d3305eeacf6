from __future__ import annotations

from typing import Iterator, List, Tuple

from tspgraph.lib.graph import VertexIndex


class PathUnderflowError(RuntimeError):
    """Raised when removing the seed vertex from a PathTracker."""


class PathTracker:
    """
    Ordered sequence of visited vertex indices used as backtracking state.

    The tracker is seeded with a root vertex that can never be removed. Every
    `append` during a descent is paired with one `remove_last` on the way back.

    Attributes:
        root (VertexIndex): The seed vertex.
    """

    __slots__ = ("root", "_sequence")

    def __init__(self, root: VertexIndex) -> None:
        self.root = root
        self._sequence: List[VertexIndex] = [root]

    def __repr__(self) -> str:
        return f"PathTracker({list(self._sequence)!r})"

    def __len__(self) -> int:
        return len(self._sequence)

    def __iter__(self) -> Iterator[VertexIndex]:
        return iter(self._sequence)

    def __contains__(self, index: object) -> bool:
        return index in self._sequence

    @property
    def length(self) -> int:
        """Return the number of vertices on the path, root included."""
        return len(self._sequence)

    @property
    def sequence(self) -> Tuple[VertexIndex, ...]:
        """Return a snapshot of the visited indices."""
        return tuple(self._sequence)

    @property
    def last(self) -> VertexIndex:
        """Return the most recently appended vertex."""
        return self._sequence[-1]

    def append(self, index: VertexIndex) -> None:
        """Append `index` to the end of the path."""
        self._sequence.append(index)

    def remove_last(self) -> VertexIndex:
        """
        Remove and return the final vertex.

        Raises:
            PathUnderflowError: If only the root is left.
        """
        if len(self._sequence) <= 1:
            raise PathUnderflowError("Cannot remove the root of a path.")
        return self._sequence.pop()
