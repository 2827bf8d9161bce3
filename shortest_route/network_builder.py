import logging
import random

import networkx as nx

from shortest_route.graph_loader import load_graph_from_records

logger = logging.getLogger(__name__)


def graph_from_networkx(G, weight="weight"):
    """
    Load a networkx graph through the regular loader, so the same validation applies.
    Node labels are converted to strings.
    """
    nodes = [str(n) for n in G.nodes()]
    edges = [(str(u), str(v), data.get(weight)) for u, v, data in G.edges(data=True)]
    return load_graph_from_records(nodes, edges)


def to_networkx(graph):
    """
    Undirected nx.Graph view of a loaded graph.
    Parallel edges collapse into one edge carrying the cheapest weight.
    """
    G = nx.Graph()
    for node in graph.list_nodes():
        G.add_node(node.name)
    for node in graph.list_nodes():
        for neighbour, w in graph.neighbours(node):
            existing = G.get_edge_data(node.name, neighbour.name)
            if existing is None or w < existing["weight"]:
                G.add_edge(node.name, neighbour.name, weight=w)
    return G


def build_random_network(n_nodes=8, edge_prob=0.4, weight_range=(1, 11), seed=None):
    """
    Random connected undirected network with integer weights.
    - Erdos-Renyi skeleton, regenerated until connected.
    - Nodes are renamed n1, n2, ... in networkx node order.
    """
    if n_nodes < 2:
        raise ValueError("A network needs at least two nodes.")
    rng = random.Random(seed)

    G_temp = nx.erdos_renyi_graph(n=n_nodes, p=edge_prob, seed=seed)
    # make sure the graph is connected (and has at least one edge)
    while not nx.is_connected(G_temp) or G_temp.number_of_edges() == 0:
        G_temp = nx.erdos_renyi_graph(n=n_nodes, p=edge_prob, seed=rng.randint(1, 10**6))

    mapping = {n: f"n{i + 1}" for i, n in enumerate(G_temp.nodes())}
    G_final = nx.relabel_nodes(G_temp, mapping)
    for u, v in G_final.edges():
        G_final.edges[u, v]["weight"] = rng.randint(*weight_range)

    logger.debug("Built random network with %d nodes and %d edges", n_nodes, G_final.number_of_edges())
    return graph_from_networkx(G_final)
