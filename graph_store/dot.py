"""
Graphviz export.

Walks a Graph read-only and builds a graphviz.Digraph (directed graphs) or a
graphviz.Graph (undirected graphs): one node statement per node, labelled
with the node weight, then one edge statement per arc, labelled with the arc
weight. Nodes are visited in index order and each node's arcs in backend
order. Undirected pairs are stored twice by the graph but emitted once, from
the endpoint with the smaller index.
"""
from typing import Optional, Union

import graphviz

from .config import dot_node_prefix
from .graph import Graph

DotGraph = Union[graphviz.Digraph, graphviz.Graph]


def to_graphviz(graph: Graph, name: Optional[str] = None) -> DotGraph:
    """
    Builds the graphviz object describing graph.

    Args:
        graph: The graph to export.
        name: Optional graph name placed after the digraph/graph keyword.

    Returns:
        A graphviz.Digraph for directed graphs, a graphviz.Graph otherwise.
    """
    prefix = dot_node_prefix()
    dot: DotGraph = graphviz.Digraph(name=name) if graph.directed else graphviz.Graph(name=name)

    for index, weight in graph.nodes():
        dot.node(f"{prefix}{index}", label=str(weight))
    for src, dst, weight in graph.arcs(unique=True):
        dot.edge(f"{prefix}{src}", f"{prefix}{dst}", label=str(weight))
    return dot


def to_dot_source(graph: Graph, name: Optional[str] = None) -> str:
    """Returns the DOT source text describing graph."""
    return to_graphviz(graph, name=name).source
