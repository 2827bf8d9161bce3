import logging
import math
from dataclasses import dataclass
from typing import List, NamedTuple, Optional

from shortest_route.errors import EmptyFrontier, TargetUnreachable, UnknownNode

logger = logging.getLogger(__name__)


class ShortestPath(NamedTuple):
    nodes: List[str]
    distance: float


@dataclass
class DistanceEntry:
    distance: float = math.inf
    previous: Optional[int] = None  # predecessor index on the best known path


def _resolve(graph, name):
    node = graph.find_node_by_name(name)
    if node is None:
        raise UnknownNode(name)
    return node


def _init_distance_table(graph, start):
    table = [DistanceEntry() for _ in graph.list_nodes()]
    table[start.index].distance = 0.0
    return table


def _select_closest(table, unvisited):
    # linear scan in node order, first minimum wins on ties
    best = None
    for index in unvisited:
        if best is None or table[index].distance < table[best].distance:
            best = index
    if best is None:
        raise EmptyFrontier("No unvisited node could be selected from the frontier.")
    return best


def _relax(graph, table, index):
    current = table[index]
    for edge in graph.node(index).edges:
        new_dist = current.distance + edge.weight
        if new_dist < table[edge.target].distance:  # dv > du + w
            table[edge.target].distance = new_dist
            table[edge.target].previous = index


def _run(graph, start, stop_at=None):
    table = _init_distance_table(graph, start)
    # dict keeps node order, so the scan in _select_closest is deterministic
    unvisited = dict.fromkeys(node.index for node in graph.list_nodes())

    while unvisited:
        index = _select_closest(table, unvisited)
        _relax(graph, table, index)
        del unvisited[index]
        if index == stop_at:
            break
    return table


def _rewind_path(graph, table, start, target):
    path = []
    index = target.index
    while index != start.index:
        path.append(graph.node(index).name)
        index = table[index].previous
    path.append(start.name)
    path.reverse()
    return path


def dijkstra(graph, start_name, target_name) -> ShortestPath:
    start = _resolve(graph, start_name)
    target = _resolve(graph, target_name)

    if start.index == target.index:
        return ShortestPath([start.name], 0.0)

    table = _run(graph, start, stop_at=target.index)
    if math.isinf(table[target.index].distance):
        raise TargetUnreachable(start.name, target.name)

    path = _rewind_path(graph, table, start, target)
    distance = table[target.index].distance
    logger.debug("Shortest path %s -> %s: %s (distance %s)", start.name, target.name, path, distance)
    return ShortestPath(path, distance)


@dataclass
class NamedDistance:
    distance: float
    previous: Optional[str]


def shortest_distances(graph, start_name):
    """
    Final distance table of a full run from start_name, keyed by node name.
    Unreachable nodes keep an infinite distance and no predecessor.
    """
    start = _resolve(graph, start_name)
    table = _run(graph, start)
    result = {}
    for node in graph.list_nodes():
        entry = table[node.index]
        previous = None if entry.previous is None else graph.node(entry.previous).name
        result[node.name] = NamedDistance(entry.distance, previous)
    return result


def path_weight(graph, names):
    total = 0.0
    for u, v in zip(names[:-1], names[1:]):
        source = _resolve(graph, u)
        target = _resolve(graph, v)
        weights = [w for neighbour, w in graph.neighbours(source) if neighbour.index == target.index]
        if not weights:
            raise ValueError(f"There is no edge between '{u}' and '{v}'.")
        total += min(weights)
    return total
