"""Console formatting of query results."""

import math

import pandas as pd

from shortest_route.pathfinding.dijkstra import shortest_distances


def format_distance(distance):
    if math.isfinite(distance) and float(distance).is_integer():
        return str(int(distance))
    return str(distance)


def format_path(result):
    return " -> ".join(result.nodes)


def describe(result):
    return f"Shortest path: {format_path(result)}\nTotal distance: {format_distance(result.distance)}"


def distance_table_frame(graph, start_name):
    """
    One row per node (graph order): final distance from start_name and the
    predecessor on the best path. Unreachable nodes have distance inf.
    """
    table = shortest_distances(graph, start_name)
    df = pd.DataFrame(
        [{"node": name, "distance": entry.distance, "previous": entry.previous} for name, entry in table.items()]
    )
    return df.set_index("node")
