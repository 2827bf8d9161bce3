"""Shortest paths over weighted undirected graphs loaded from GraphML."""

from shortest_route.errors import ShortestRouteError
from shortest_route.graph_loader import MappingReader, load_graph, load_graph_from_records, load_json
from shortest_route.graph_model import Edge, Graph, GraphNode
from shortest_route.graphml_reader import GraphMLReader, load_graphml
from shortest_route.pathfinding.dijkstra import ShortestPath, dijkstra, shortest_distances

__all__ = [
    "Edge",
    "Graph",
    "GraphMLReader",
    "GraphNode",
    "MappingReader",
    "ShortestPath",
    "ShortestRouteError",
    "dijkstra",
    "load_graph",
    "load_graph_from_records",
    "load_graphml",
    "load_json",
    "shortest_distances",
]
