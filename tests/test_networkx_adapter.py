import networkx as nx
import pytest

from graph_store.graph import Graph
from graph_store.networkx_adapter import from_networkx, to_networkx


class TestToNetworkx:
    def test_directed(self, backend):
        g = Graph(3, True, [1, 2, 3], backend=backend)
        g.insert_arc(0, 1, 10)
        g.insert_arc(1, 0, 11)
        nx_graph = to_networkx(g)
        assert isinstance(nx_graph, nx.DiGraph)
        assert list(nx_graph.nodes(data="weight")) == [(0, 1), (1, 2), (2, 3)]
        assert nx_graph.edges[0, 1]["weight"] == 10
        assert nx_graph.edges[1, 0]["weight"] == 11
        assert nx_graph.number_of_edges() == 2

    def test_undirected(self, backend):
        g = Graph.with_default_weights(3, False, backend=backend)
        g.insert_arc(0, 1, 1)
        g.insert_arc(2, 1, 2)
        nx_graph = to_networkx(g)
        assert not nx_graph.is_directed()
        assert nx_graph.number_of_edges() == 2
        assert nx_graph.edges[1, 2]["weight"] == 2


class TestFromNetworkx:
    def test_round_trip(self, backend):
        g = Graph(4, False, [4, 3, 2, 1], backend="list")
        g.insert_arc(0, 1, 1.5)
        g.insert_arc(3, 3, 2.5)
        assert from_networkx(to_networkx(g), backend=backend) == g

    def test_relabels_nodes_and_defaults_weights(self):
        nx_graph = nx.DiGraph()
        nx_graph.add_node("a", weight=5)
        nx_graph.add_edge("a", "b", weight=3)
        nx_graph.add_edge("b", "c")
        g = from_networkx(nx_graph)
        assert g.directed
        assert [w for _, w in g.nodes()] == [5, 0, 0]
        assert g.get_arc(0, 1) == 3
        assert g.get_arc(1, 2) == 0
        assert not g.has_arc(1, 0)

    def test_multigraph_rejected(self):
        with pytest.raises(ValueError, match="Multigraphs"):
            from_networkx(nx.MultiGraph())
