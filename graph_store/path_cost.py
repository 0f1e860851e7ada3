from typing import Any, Iterable, Iterator, Sequence, Tuple

from .graph import Graph
from .weights import zero_of


def successor_pairs(nodes: Iterable[int]) -> Iterator[Tuple[int, int]]:
    """Yields each pair of consecutive items: [1, 2, 3] -> (1, 2), (2, 3)."""
    iterator = iter(nodes)
    try:
        prev = next(iterator)
    except StopIteration:
        return
    for curr in iterator:
        yield prev, curr
        prev = curr


def all_subpath_costs(graph: Graph, path: Sequence[int]) -> Iterator[Tuple[int, int, Any]]:
    """
    Yields the cost of every forward sub-path of path.

    path lists node indices: the first is the start node, the last the
    destination, the others the visited nodes in order. For each start
    position i, the sub-paths path[i..j] for j > i are yielded in order as
    (i, path[j], cost), where cost is the sum of the arc weights along the
    sub-path. Only forward sub-paths are produced, which is what a directed
    graph needs; for an undirected graph the reverse sub-paths cost the same.

    Example, with arcs 0->1 (1.0), 1->2 (2.0), 2->3 (3.0) and path [0, 1, 2, 3]:
        (0, 1, 1.0), (0, 2, 3.0), (0, 3, 6.0), (1, 2, 2.0), (1, 3, 5.0), (2, 3, 3.0)

    Raises:
        ArcNotFoundError: If two consecutive nodes of path are not joined by an arc.
    """
    for start in range(len(path) - 1):
        cost = None
        for src, dst in successor_pairs(path[start:]):
            weight = graph.get_arc(src, dst)
            if cost is None:
                cost = zero_of(weight)
            cost = cost + weight
            yield start, dst, cost
