from typing import Union

import networkx as nx

from .graph import BackendSpec, Graph

NxGraph = Union[nx.Graph, nx.DiGraph]


def to_networkx(graph: Graph) -> NxGraph:
    """
    Converts graph to a networkx graph.

    Nodes keep their indices; node and arc weights are stored in the
    "weight" attribute. Directed graphs give an nx.DiGraph, undirected
    graphs an nx.Graph.
    """
    nx_graph: NxGraph = nx.DiGraph() if graph.directed else nx.Graph()
    for index, weight in graph.nodes():
        nx_graph.add_node(index, weight=weight)
    for src, dst, weight in graph.arcs(unique=True):
        nx_graph.add_edge(src, dst, weight=weight)
    return nx_graph


def from_networkx(nx_graph: NxGraph, backend: BackendSpec = None) -> Graph:
    """
    Builds a Graph from a networkx graph.

    Nodes are renumbered 0..N-1 following nx_graph's node order. Node and
    edge weights are read from the "weight" attribute and default to 0.
    Multigraphs are not supported: parallel edges would collide.
    """
    if nx_graph.is_multigraph():
        raise ValueError("Multigraphs cannot be converted to a Graph.")
    relabeled = nx.convert_node_labels_to_integers(nx_graph, ordering="default")
    weights = [data.get("weight", 0) for _, data in relabeled.nodes(data=True)]
    graph = Graph(len(weights), nx_graph.is_directed(), weights, backend=backend)
    for src, dst, data in relabeled.edges(data=True):
        graph.insert_arc(src, dst, data.get("weight", 0))
    return graph
