import matplotlib.pyplot as plt
import networkx as nx

from graph_store import Graph, to_networkx

# Build a small weighted undirected graph using graph_store
g = Graph(5, directed=False, node_weights=[0, 1, 2, 3, 4])
g.insert_arc(0, 1, 1.5)
g.insert_arc(1, 2, 2.0)
g.insert_arc(1, 3, 0.5)
g.insert_arc(3, 4, 4.0)

# Convert to a networkx Graph
G = to_networkx(g)

# Draw the graph using circular layout, arcs labelled with their weights
plt.figure(figsize=(6, 6))
pos = nx.circular_layout(G)
nx.draw(
    G,
    pos,
    with_labels=True,
    node_color="lightblue",
    edge_color="gray",
    node_size=800,
    font_size=10,
    font_weight="bold",
)
nx.draw_networkx_edge_labels(G, pos, edge_labels=nx.get_edge_attributes(G, "weight"))
plt.title("Graph Visualization (networkx)")
plt.tight_layout()
plt.show()
