from typing import Any, Callable, Iterator, Tuple

import numpy as np

from .exceptions import ArcNotFoundError


class AdjacencyMatrix:
    """
    Dense arc storage: an N x N weight table plus an N x N presence mask.

    Both tables are contiguous row-major numpy arrays. A cell holds an arc
    only when its mask entry is set; the weight table content of an empty
    cell is meaningless. Point operations are O(1), scans over a node's
    successors are O(N) whatever its degree, and memory is O(N^2) whatever
    the number of arcs.

    With the default ``dtype=object`` weights are kept exactly as given.
    A numeric dtype (e.g. ``np.float64``) gives a compact table but weights
    come back as numpy scalars of that dtype.

    The backend stores directed arcs only; the Graph facade does mirroring
    and decides whether a write is an insert or an update.
    """

    def __init__(self, node_count: int, dtype: Any = object) -> None:
        shape = (node_count, node_count)
        self._present = np.zeros(shape, dtype=bool)
        if dtype is object:
            self._weights = np.empty(shape, dtype=object)
        else:
            self._weights = np.zeros(shape, dtype=dtype)

    @property
    def node_count(self) -> int:
        return self._present.shape[0]

    @property
    def arc_count(self) -> int:
        """Number of stored directed arcs."""
        return int(np.count_nonzero(self._present))

    def _write(self, src: int, dst: int, weight: Any) -> None:
        self._weights[src, dst] = weight
        self._present[src, dst] = True

    def insert_arc(self, src: int, dst: int, weight: Any) -> None:
        """Writes the cell [src, dst]."""
        self._write(src, dst, weight)

    def update_arc(self, src: int, dst: int, weight: Any) -> None:
        """
        Writes the cell [src, dst] if it already holds an arc.

        Raises:
            ArcNotFoundError: If the cell is empty.
        """
        if not self._present[src, dst]:
            raise ArcNotFoundError(src, dst)
        self._write(src, dst, weight)

    def get_arc(self, src: int, dst: int) -> Any:
        """
        Returns the weight stored at [src, dst].

        Raises:
            ArcNotFoundError: If the cell is empty.
        """
        if not self._present[src, dst]:
            raise ArcNotFoundError(src, dst)
        return self._weights[src, dst]

    def has_arc(self, src: int, dst: int) -> bool:
        return bool(self._present[src, dst])

    def remove_arc(self, src: int, dst: int) -> None:
        """
        Clears the cell [src, dst].

        Raises:
            ArcNotFoundError: If the cell is empty.
        """
        if not self._present[src, dst]:
            raise ArcNotFoundError(src, dst)
        self._present[src, dst] = False
        if self._weights.dtype == object:
            self._weights[src, dst] = None

    def neighbors(self, node: int) -> Iterator[Tuple[int, Any]]:
        """Yields (neighbor, weight) pairs of node in ascending neighbor order."""
        row = self._weights[node]
        for neighbor in np.flatnonzero(self._present[node]):
            yield int(neighbor), row[neighbor]

    def arcs(self) -> Iterator[Tuple[int, int, Any]]:
        """Yields every stored arc as (src, dst, weight) in row-major order."""
        for src in range(self.node_count):
            for dst, weight in self.neighbors(src):
                yield src, dst, weight

    def map_weights(self, func: Callable[[int, int, Any], Any]) -> None:
        """Replaces every stored weight w of arc (src, dst) by func(src, dst, w)."""
        for src, dst in zip(*np.nonzero(self._present)):
            self._weights[src, dst] = func(int(src), int(dst), self._weights[src, dst])
