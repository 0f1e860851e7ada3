from typing import Any, Callable, Iterator, List, Tuple

from .exceptions import ArcNotFoundError


class AdjacencyList:
    """
    Sparse arc storage: one list of (neighbor, weight) pairs per source node.

    The backend stores directed arcs only. Mirroring for undirected graphs is
    done by the Graph facade, which writes each direction separately.

    Lookups, updates and removals scan the source node's list, so they cost
    O(degree). Appending a new arc is O(1) amortized. Memory grows with the
    number of arcs, which makes this backend the right choice for sparse
    graphs.

    Node indices are not validated: an index outside [0, node_count) raises
    whatever the underlying list raises, or silently misbehaves for negative
    indices.
    """

    def __init__(self, node_count: int) -> None:
        self._lists: List[List[Tuple[int, Any]]] = [[] for _ in range(node_count)]

    @property
    def node_count(self) -> int:
        return len(self._lists)

    @property
    def arc_count(self) -> int:
        """Number of stored directed arcs."""
        return sum(len(arcs) for arcs in self._lists)

    def _position(self, src: int, dst: int) -> int:
        for position, (neighbor, _) in enumerate(self._lists[src]):
            if neighbor == dst:
                return position
        return -1

    def insert_arc(self, src: int, dst: int, weight: Any) -> None:
        """
        Appends the arc src -> dst.

        No duplicate check is done here; the facade checks presence first.
        """
        self._lists[src].append((dst, weight))

    def update_arc(self, src: int, dst: int, weight: Any) -> None:
        """
        Replaces the weight of the existing arc src -> dst, keeping its position.

        Raises:
            ArcNotFoundError: If the arc does not exist. Update never inserts.
        """
        position = self._position(src, dst)
        if position < 0:
            raise ArcNotFoundError(src, dst)
        self._lists[src][position] = (dst, weight)

    def get_arc(self, src: int, dst: int) -> Any:
        """
        Returns the weight of the arc src -> dst.

        Raises:
            ArcNotFoundError: If the arc does not exist.
        """
        for neighbor, weight in self._lists[src]:
            if neighbor == dst:
                return weight
        raise ArcNotFoundError(src, dst)

    def has_arc(self, src: int, dst: int) -> bool:
        return self._position(src, dst) >= 0

    def remove_arc(self, src: int, dst: int) -> None:
        """
        Removes the arc src -> dst.

        Raises:
            ArcNotFoundError: If the arc does not exist.
        """
        position = self._position(src, dst)
        if position < 0:
            raise ArcNotFoundError(src, dst)
        del self._lists[src][position]

    def neighbors(self, node: int) -> Iterator[Tuple[int, Any]]:
        """Yields (neighbor, weight) pairs of node in insertion order."""
        for neighbor, weight in self._lists[node]:
            yield neighbor, weight

    def arcs(self) -> Iterator[Tuple[int, int, Any]]:
        """Yields every stored arc as (src, dst, weight), by source index."""
        for src, arcs in enumerate(self._lists):
            for dst, weight in arcs:
                yield src, dst, weight

    def map_weights(self, func: Callable[[int, int, Any], Any]) -> None:
        """Replaces every stored weight w of arc (src, dst) by func(src, dst, w)."""
        for src, arcs in enumerate(self._lists):
            arcs[:] = [(dst, func(src, dst, weight)) for dst, weight in arcs]
