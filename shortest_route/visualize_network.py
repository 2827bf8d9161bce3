import logging
import os

import matplotlib.pyplot as plt
import networkx as nx

from shortest_route.network_builder import to_networkx

logger = logging.getLogger(__name__)


def draw_graph_with_path(graph, path=None, output_link="plots/shortest_path.png", layout="spring"):
    G = to_networkx(graph)

    if layout == "kamada":
        pos = nx.kamada_kawai_layout(G)
    elif layout == "shell":
        pos = nx.shell_layout(G)
    else:
        pos = nx.spring_layout(G, seed=42, k=2.0)

    plt.figure(figsize=(10, 8))

    on_path = set(path or [])
    node_colors = ["#FF6F61" if n in on_path else "#A0CBE2" for n in G.nodes()]

    nx.draw_networkx_nodes(G, pos, node_color=node_colors, node_size=500)
    nx.draw_networkx_labels(G, pos, font_size=9)
    nx.draw_networkx_edges(G, pos, width=1.0)
    edge_labels = nx.get_edge_attributes(G, "weight")
    nx.draw_networkx_edge_labels(G, pos, edge_labels=edge_labels, font_size=8)

    # highlight the path
    if path and len(path) > 1:
        path_edges = list(zip(path, path[1:]))
        nx.draw_networkx_edges(G, pos, edgelist=path_edges, width=3.0, edge_color="red")

    title = "Shortest path: " + " -> ".join(path) if path else "Graph"
    plt.title(title, fontsize=12)
    plt.tight_layout()
    directory = os.path.dirname(output_link)
    if directory:
        os.makedirs(directory, exist_ok=True)
    plt.savefig(output_link)
    plt.close()
    logger.debug("Saved plot to %s", output_link)
    return output_link
