import logging
from enum import Enum
from numbers import Integral
from typing import Any, Callable, Dict, Iterable, Iterator, List, Sequence, Tuple, Union

from .adjacency_list import AdjacencyList
from .adjacency_matrix import AdjacencyMatrix
from .config import BackendKind, default_backend, parse_backend
from .exceptions import ArcAlreadyExistsError, ArcNotFoundError, SizeMismatchError

logger = logging.getLogger(__name__)

Arc = Tuple[int, int, Any]
BackendSpec = Union[BackendKind, str, None]

_BACKENDS = {
    BackendKind.LIST: AdjacencyList,
    BackendKind.MATRIX: AdjacencyMatrix,
}


class GraphType(Enum):
    DIRECTED = "directed"
    UNDIRECTED = "undirected"


class Graph:
    """
    A graph over a fixed set of node_count nodes, indexed 0..node_count-1,
    with weighted nodes and weighted arcs.

    Arcs live in one of two interchangeable backends, chosen at construction:
    adjacency lists (sparse) or an adjacency matrix (dense). Both answer
    every query the same way.

    In an undirected graph the arc (u, v) always exists together with (v, u)
    carrying the same weight. Every write goes to the primary direction first
    and then to the mirror; a self-loop (u, u) is written once. No
    synchronisation is done: sharing a Graph between threads requires an
    external lock around every call.

    Node indices are never bounds-checked. Passing an index outside
    [0, node_count) is the caller's mistake and its outcome is undefined.
    """

    def __init__(
        self,
        node_count: int,
        directed: bool,
        node_weights: Sequence[Any],
        backend: BackendSpec = None,
    ) -> None:
        """
        Creates a graph with node_count nodes and no arcs.

        Args:
            node_count: The number of nodes. Fixed for the lifetime of the graph.
            directed: True for a directed graph, False for an undirected one.
            node_weights: One weight per node, in index order.
            backend: "list", "matrix" or a BackendKind. Defaults to the
                     backend configured by GRAPH_STORE_BACKEND.

        Raises:
            SizeMismatchError: If len(node_weights) != node_count.
            ValueError: If backend is not a known backend name.
        """
        weights = list(node_weights)
        if len(weights) != node_count:
            raise SizeMismatchError(node_count, len(weights))
        kind = default_backend() if backend is None else parse_backend(backend)

        self._directed = bool(directed)
        self._backend_kind = kind
        self._nodes: List[Any] = weights
        self._arcs = _BACKENDS[kind](node_count)
        logger.debug(
            "Created %s graph with %d nodes on the %s backend",
            self.graph_type.value, node_count, kind.value,
        )

    @classmethod
    def with_default_weights(
        cls, node_count: int, directed: bool, backend: BackendSpec = None
    ) -> "Graph":
        """Creates a graph whose node weights are all 0."""
        return cls(node_count, directed, [0] * node_count, backend=backend)

    @classmethod
    def from_arcs(
        cls,
        node_count: int,
        directed: bool,
        node_weights: Sequence[Any],
        arcs: Iterable[Arc],
        backend: BackendSpec = None,
    ) -> "Graph":
        """
        Creates a graph and inserts every (src, dst, weight) arc in order.

        Raises:
            SizeMismatchError: If len(node_weights) != node_count.
            ArcAlreadyExistsError: If an arc (or, for undirected graphs, its
                                   mirror) appears twice.
        """
        graph = cls(node_count, directed, node_weights, backend=backend)
        for src, dst, weight in arcs:
            graph.insert_arc(src, dst, weight)
        return graph

    # --- Properties ----------------------------------------------------------

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def graph_type(self) -> GraphType:
        return GraphType.DIRECTED if self._directed else GraphType.UNDIRECTED

    @property
    def backend_kind(self) -> BackendKind:
        return self._backend_kind

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def arc_count(self) -> int:
        """Number of arcs; an undirected pair counts once."""
        if self._directed:
            return self._arcs.arc_count
        return sum(1 for _ in self.arcs(unique=True))

    @property
    def total_entries(self) -> int:
        """Number of nodes plus number of arcs."""
        return self.node_count + self.arc_count

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node: Any) -> bool:
        """Checks if node is a valid node index of this graph."""
        if isinstance(node, bool) or not isinstance(node, Integral):
            return False
        return 0 <= node < len(self._nodes)

    # --- Nodes ---------------------------------------------------------------

    def get_node_weight(self, index: int) -> Any:
        return self._nodes[index]

    def set_node_weight(self, index: int, weight: Any) -> None:
        self._nodes[index] = weight

    def nodes(self) -> Iterator[Tuple[int, Any]]:
        """Returns an iterator over (index, weight) pairs in index order."""
        return enumerate(list(self._nodes))

    def set_node_weights(self, weights: Iterable[Any]) -> None:
        """
        Replaces all node weights at once.

        Raises:
            SizeMismatchError: If the number of weights differs from node_count.
        """
        new_weights = list(weights)
        if len(new_weights) != len(self._nodes):
            raise SizeMismatchError(len(self._nodes), len(new_weights))
        self._nodes[:] = new_weights

    def set_indexed_node_weights(self, weights: Iterable[Tuple[int, Any]]) -> None:
        """Sets the weight of each node named by the (index, weight) pairs."""
        for index, weight in weights:
            self._nodes[index] = weight

    def map_node_weights(self, func: Callable[[int, Any], Any]) -> None:
        """Replaces each node weight w at index i by func(i, w)."""
        self._nodes[:] = [func(index, weight) for index, weight in enumerate(self._nodes)]

    # --- Arcs ----------------------------------------------------------------

    def _mirrored(self, src: int, dst: int) -> bool:
        return not self._directed and src != dst

    def insert_arc(self, src: int, dst: int, weight: Any) -> None:
        """
        Adds the arc src -> dst (and dst -> src if the graph is undirected).

        Raises:
            ArcAlreadyExistsError: If the arc already exists. Use update_arc
                                   to change its weight.
        """
        if self._arcs.has_arc(src, dst):
            raise ArcAlreadyExistsError(src, dst)
        # Read both endpoints before the first write, so a bad index fails early
        if self._mirrored(src, dst) and self._arcs.has_arc(dst, src):
            raise ArcAlreadyExistsError(dst, src)
        self._arcs.insert_arc(src, dst, weight)
        if self._mirrored(src, dst):
            self._arcs.insert_arc(dst, src, weight)

    def insert_default_arc(self, src: int, dst: int) -> None:
        """Adds the arc src -> dst with weight 0."""
        self.insert_arc(src, dst, 0)

    def update_arc(self, src: int, dst: int, weight: Any) -> None:
        """
        Changes the weight of the existing arc src -> dst (and of its mirror).

        Raises:
            ArcNotFoundError: If the arc does not exist. Update never inserts.
        """
        if not self._arcs.has_arc(src, dst):
            raise ArcNotFoundError(src, dst)
        self._arcs.update_arc(src, dst, weight)
        if self._mirrored(src, dst):
            self._arcs.update_arc(dst, src, weight)

    def remove_arc(self, src: int, dst: int) -> None:
        """
        Removes the arc src -> dst (and its mirror in an undirected graph).

        Raises:
            ArcNotFoundError: If the arc does not exist.
        """
        if not self._arcs.has_arc(src, dst):
            raise ArcNotFoundError(src, dst)
        self._arcs.remove_arc(src, dst)
        if self._mirrored(src, dst):
            self._arcs.remove_arc(dst, src)

    def get_arc(self, src: int, dst: int) -> Any:
        """
        Returns the weight of the arc src -> dst.

        Raises:
            ArcNotFoundError: If the arc does not exist.
        """
        return self._arcs.get_arc(src, dst)

    def has_arc(self, src: int, dst: int) -> bool:
        return self._arcs.has_arc(src, dst)

    def neighbors(self, node: int) -> Iterator[Tuple[int, Any]]:
        """
        Returns a fresh iterator over the (neighbor, weight) pairs of node.

        The order is the backend's: insertion order for lists, ascending
        neighbor index for the matrix. Do not modify the graph while
        consuming the iterator.
        """
        return self._arcs.neighbors(node)

    def arcs(self, unique: bool = False) -> Iterator[Arc]:
        """
        Returns an iterator over all stored arcs as (src, dst, weight),
        visiting source nodes in index order.

        Args:
            unique: For undirected graphs, yield each mirrored pair once, as
                    the direction with src <= dst. Ignored for directed graphs.
        """
        if unique and not self._directed:
            return (arc for arc in self._arcs.arcs() if arc[0] <= arc[1])
        return self._arcs.arcs()

    def map_arc_weights(self, func: Callable[[int, int, Any], Any]) -> None:
        """
        Replaces each arc weight w of arc (src, dst) by func(src, dst, w).

        In an undirected graph func is called once per pair, with src <= dst,
        and the result is written to both directions.
        """
        if self._directed:
            self._arcs.map_weights(func)
            return
        for src, dst, weight in list(self.arcs(unique=True)):
            self.update_arc(src, dst, func(src, dst, weight))

    # --- Comparison ----------------------------------------------------------

    def _arc_map(self) -> Dict[Tuple[int, int], Any]:
        return {(src, dst): weight for src, dst, weight in self._arcs.arcs()}

    def __eq__(self, other: object) -> bool:
        """Graphs are equal when their content matches, whatever their backends."""
        if not isinstance(other, Graph):
            return NotImplemented
        return (
            self._directed == other._directed
            and self._nodes == other._nodes
            and self._arc_map() == other._arc_map()
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Graph(node_count={self.node_count}, directed={self._directed}, "
            f"backend={self._backend_kind.value!r}, arcs={self.arc_count})"
        )
