import heapq
from collections import deque
from typing import Any, Dict, List, Optional, Set, Tuple, Union

from .graph import Graph


def _check_node(graph: Graph, node: int, role: str) -> None:
    if node not in graph:
        raise ValueError(f"{role} node {node} not found in the graph.")


def _build_path(predecessors: Dict[int, Optional[int]], start_node: int, end_node: int) -> List[int]:
    path: List[int] = []
    curr: Optional[int] = end_node
    while curr is not None:
        path.append(curr)
        if curr == start_node:
            break
        curr = predecessors.get(curr)
    path.reverse()
    return path


def dijkstra(
    graph: Graph,
    start_node: int,
    end_node: Optional[int] = None
) -> Union[Tuple[Dict[int, Any], Dict[int, Optional[int]]],
           Tuple[Optional[Any], List[int]]]:
    """
    Calculates the shortest path from start_node to all other nodes or to a
    specific end_node using Dijkstra's algorithm. Arc weights are added with
    "+" and compared with "<", so they must be non-negative and ordered.

    Args:
        graph: The graph on which to perform the algorithm.
        start_node: The index of the starting node.
        end_node: Optional. If provided, the algorithm stops once the shortest
                  path to this node is known.

    Returns:
        If end_node is None:
            A tuple (distances, predecessors): distances maps each reachable
            node to its shortest distance from start_node, predecessors maps
            each reachable node to its predecessor on that path.
        If end_node is specified:
            A tuple (distance, path): the shortest distance to end_node and
            the list of nodes from start_node to end_node, or (None, []) if
            end_node is unreachable.

    Raises:
        ValueError: If start_node or end_node is not a node of the graph.
    """
    _check_node(graph, start_node, "Start")
    if end_node is not None:
        _check_node(graph, end_node, "End")

    distances: Dict[int, Any] = {start_node: 0}
    predecessors: Dict[int, Optional[int]] = {start_node: None}
    done: Set[int] = set()

    # Priority queue stores (distance, node)
    priority_queue: List[Tuple[Any, int]] = [(0, start_node)]

    while priority_queue:
        current_distance, current_node = heapq.heappop(priority_queue)
        if current_node in done:
            continue
        done.add(current_node)

        if end_node is not None and current_node == end_node:
            break

        for neighbor, weight in graph.neighbors(current_node):
            distance = current_distance + weight
            if neighbor not in distances or distance < distances[neighbor]:
                distances[neighbor] = distance
                predecessors[neighbor] = current_node
                heapq.heappush(priority_queue, (distance, neighbor))

    if end_node is not None:
        if end_node not in distances:
            return None, []  # Not reachable
        return distances[end_node], _build_path(predecessors, start_node, end_node)
    return distances, predecessors


def bfs(
    graph: Graph,
    start_node: int,
    target_node: Optional[int] = None
) -> Union[List[int], Tuple[Optional[List[int]], Dict[int, Optional[int]]]]:
    """
    Performs a Breadth-First Search on the graph starting from start_node.

    Args:
        graph: The graph to traverse.
        start_node: The node to start the BFS from.
        target_node: Optional. If provided, BFS stops once the target is found.

    Returns:
        If target_node is None:
            A list of all nodes visited, in BFS order.
        If target_node is specified:
            A tuple (path, predecessors): the path with the fewest arcs from
            start_node to target_node (None if not reachable) and the BFS
            predecessor of each visited node.

    Raises:
        ValueError: If start_node or target_node is not a node of the graph.
    """
    _check_node(graph, start_node, "Start")
    if target_node is not None:
        _check_node(graph, target_node, "Target")

    queue = deque([start_node])
    predecessors: Dict[int, Optional[int]] = {start_node: None}
    visited_in_order: List[int] = []

    while queue:
        current_node = queue.popleft()
        visited_in_order.append(current_node)

        if target_node is not None and current_node == target_node:
            return _build_path(predecessors, start_node, target_node), predecessors

        for neighbor, _ in graph.neighbors(current_node):
            if neighbor not in predecessors:
                predecessors[neighbor] = current_node
                queue.append(neighbor)

    if target_node is not None:
        return None, predecessors  # Target not found
    return visited_in_order


def dfs(
    graph: Graph,
    start_node: int,
    target_node: Optional[int] = None
) -> Union[List[int], Tuple[Optional[List[int]], Dict[int, Optional[int]]]]:
    """
    Performs an iterative Depth-First Search on the graph starting from start_node.

    Neighbors are explored in the order the backend yields them.

    Args:
        graph: The graph to traverse.
        start_node: The node to start the DFS from.
        target_node: Optional. If provided, DFS stops once the target is found.

    Returns:
        If target_node is None:
            A list of all nodes visited, in DFS order.
        If target_node is specified:
            A tuple (path, predecessors): the first path found from start_node
            to target_node (None if not reachable) and the predecessor of each
            visited node.

    Raises:
        ValueError: If start_node or target_node is not a node of the graph.
    """
    _check_node(graph, start_node, "Start")
    if target_node is not None:
        _check_node(graph, target_node, "Target")

    visited: Set[int] = set()
    visited_in_order: List[int] = []
    predecessors: Dict[int, Optional[int]] = {start_node: None}
    # Stack of (node, predecessor)
    stack: List[Tuple[int, Optional[int]]] = [(start_node, None)]

    while stack:
        current_node, parent = stack.pop()
        if current_node in visited:
            continue
        visited.add(current_node)
        visited_in_order.append(current_node)
        if current_node != start_node:
            predecessors[current_node] = parent

        if target_node is not None and current_node == target_node:
            return _build_path(predecessors, start_node, target_node), predecessors

        # Reversed so the first neighbor is popped first
        neighbors = [neighbor for neighbor, _ in graph.neighbors(current_node)]
        for neighbor in reversed(neighbors):
            if neighbor not in visited:
                stack.append((neighbor, current_node))

    if target_node is not None:
        return None, predecessors
    return visited_in_order
