import logging

from .config import BackendKind
from .weights import Weight, is_weight, zero_of, one_of
from .exceptions import (
    GraphError, SizeMismatchError, ArcNotFoundError,
    ArcAlreadyExistsError, SerializationError
)
from .adjacency_list import AdjacencyList
from .adjacency_matrix import AdjacencyMatrix
from .graph import Graph, GraphType
from .algorithms import dijkstra, bfs, dfs
from .path_cost import all_subpath_costs, successor_pairs
from .dot import to_graphviz, to_dot_source
from .networkx_adapter import to_networkx, from_networkx
from . import serialization

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Graph", "GraphType", "BackendKind",
    "AdjacencyList", "AdjacencyMatrix",
    "Weight", "is_weight", "zero_of", "one_of",
    "GraphError", "SizeMismatchError", "ArcNotFoundError",
    "ArcAlreadyExistsError", "SerializationError",
    "dijkstra", "bfs", "dfs",
    "all_subpath_costs", "successor_pairs",
    "to_graphviz", "to_dot_source",
    "to_networkx", "from_networkx",
    "serialization",
]
