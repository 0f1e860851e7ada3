"""
JSON serialization of graphs.

A graph is written as a document with three entries::

    {
        "graph_type": "directed" | "undirected",
        "nodes": {"extended": [w0, w1, ...]}
               | {"compact": {"count": N, "zero": z, "weights": [[index, w], ...]}},
        "arcs": {"weighted": [[src, dst, w], ...]}
              | {"simple": [[src, dst], ...]}
    }

Node weights use the compact form, which lists only non-zero weights, when
most of them are zero; omitted nodes get the stored zero value z, so its
type survives the round trip. Undirected pairs are written once. Loading may
use a different backend than the one the graph was saved from; the loaded
graph answers every query like the original.
"""
import json
import logging
from typing import IO, Any, Dict, List, Set, Tuple

import numpy as np

from .exceptions import SerializationError
from .graph import BackendSpec, Graph, GraphType
from .weights import zero_of

logger = logging.getLogger(__name__)


def _nodes_to_dict(weights: List[Any]) -> Dict[str, Any]:
    total = len(weights)
    zeros = [weight for weight in weights if weight == 0]
    # Omitted weights come back as one zero value, so all zeros must share its type
    if 2 * len(zeros) > total + 1 and len({type(zero) for zero in zeros}) == 1:
        return {
            "compact": {
                "count": total,
                "zero": zero_of(zeros[0]),
                "weights": [[index, weight] for index, weight in enumerate(weights) if weight != 0],
            }
        }
    return {"extended": weights}


def to_dict(graph: Graph, weighted: bool = True) -> Dict[str, Any]:
    """
    Returns the JSON-compatible document describing graph.

    Args:
        graph: The graph to serialize.
        weighted: If False, arc weights are dropped ("simple" arcs) and
                  come back as 0 on load.
    """
    weights = [weight for _, weight in graph.nodes()]
    arcs = graph.arcs(unique=True)
    if weighted:
        arcs_doc = {"weighted": [[src, dst, weight] for src, dst, weight in arcs]}
    else:
        arcs_doc = {"simple": [[src, dst] for src, dst, _ in arcs]}
    return {
        "graph_type": graph.graph_type.value,
        "nodes": _nodes_to_dict(weights),
        "arcs": arcs_doc,
    }


def _check_index(index: Any, node_count: int) -> int:
    if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < node_count:
        raise SerializationError(f"Invalid node index {index!r} for {node_count} nodes.")
    return index


def _nodes_from_dict(nodes: Dict[str, Any]) -> List[Any]:
    if "extended" in nodes:
        return list(nodes["extended"])
    if "compact" in nodes:
        compact = nodes["compact"]
        count = compact["count"]
        if not isinstance(count, int) or count < 0:
            raise SerializationError(f"Invalid node count {count!r}.")
        weights: List[Any] = [compact.get("zero", 0)] * count
        for index, weight in compact["weights"]:
            weights[_check_index(index, count)] = weight
        return weights
    raise SerializationError("Node section must be 'extended' or 'compact'.")


def from_dict(data: Dict[str, Any], backend: BackendSpec = None) -> Graph:
    """
    Builds a graph from a document produced by to_dict.

    Args:
        data: The document.
        backend: Backend of the new graph; defaults to the configured one.

    Raises:
        SerializationError: If the document is malformed.
    """
    try:
        graph_type = GraphType(data["graph_type"])
        weights = _nodes_from_dict(data["nodes"])
        arcs_doc = data["arcs"]
        if "weighted" in arcs_doc:
            arcs = [(src, dst, weight) for src, dst, weight in arcs_doc["weighted"]]
        elif "simple" in arcs_doc:
            arcs = [(src, dst, 0) for src, dst in arcs_doc["simple"]]
        else:
            raise SerializationError("Arc section must be 'weighted' or 'simple'.")
    except SerializationError:
        raise
    except (KeyError, TypeError, ValueError) as exc:
        raise SerializationError(f"Malformed graph document: {exc}") from exc

    graph = Graph(len(weights), graph_type is GraphType.DIRECTED, weights, backend=backend)
    listed: Set[Tuple[int, int]] = set()
    for src, dst, weight in arcs:
        src = _check_index(src, graph.node_count)
        dst = _check_index(dst, graph.node_count)
        if (src, dst) in listed:
            raise SerializationError(f"Duplicate arc ({src}, {dst}) in graph document.")
        listed.add((src, dst))
        # Undirected documents may also list the mirror of a pair, with the same weight.
        if not graph.directed and src != dst and (dst, src) in listed:
            if graph.get_arc(dst, src) != weight:
                raise SerializationError(
                    f"Arc ({src}, {dst}) has a different weight than its mirror ({dst}, {src})."
                )
            continue
        graph.insert_arc(src, dst, weight)
    logger.debug("Loaded %r", graph)
    return graph


def _encode_default(obj: Any) -> Any:
    if isinstance(obj, np.generic):
        return obj.item()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def dumps(graph: Graph, weighted: bool = True, **kwargs: Any) -> str:
    """
    Serializes graph to a JSON string. Extra keyword arguments go to json.dumps.

    Raises:
        SerializationError: If a weight cannot be represented in JSON.
    """
    try:
        return json.dumps(to_dict(graph, weighted=weighted), default=_encode_default, **kwargs)
    except TypeError as exc:
        raise SerializationError(str(exc)) from exc


def loads(text: str, backend: BackendSpec = None) -> Graph:
    """
    Builds a graph from a JSON string.

    Raises:
        SerializationError: If the text is not valid JSON or not a graph document.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SerializationError(f"Invalid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise SerializationError("Graph document must be a JSON object.")
    return from_dict(data, backend=backend)


def dump(graph: Graph, fp: IO[str], weighted: bool = True, **kwargs: Any) -> None:
    """Writes graph as JSON to the text file object fp."""
    fp.write(dumps(graph, weighted=weighted, **kwargs))


def load(fp: IO[str], backend: BackendSpec = None) -> Graph:
    """Reads a graph from the JSON text file object fp."""
    return loads(fp.read(), backend=backend)
