import math

import networkx as nx
import pytest

from shortest_route.errors import EmptyFrontier, TargetUnreachable, UnknownNode
from shortest_route.graph_loader import load_graph_from_records
from shortest_route.network_builder import build_random_network, to_networkx
import shortest_route.pathfinding.dijkstra as dijkstra_module
from shortest_route.pathfinding.dijkstra import dijkstra, path_weight, shortest_distances


def brute_force_paths(graph, src, dst):
    # (cost, path) for every simple path
    G = to_networkx(graph)
    return [
        (sum(G.edges[u, v]["weight"] for u, v in zip(p[:-1], p[1:])), p)
        for p in nx.all_simple_paths(G, src, dst)
    ]


def brute_force_distance(graph, src, dst):
    return min((cost for cost, _ in brute_force_paths(graph, src, dst)), default=math.inf)


def test_scenario_graph(scenario_graph):
    path, cost = dijkstra(scenario_graph, "A", "E")
    assert path == ["A", "C", "B", "D", "E"]
    assert cost == 11
    assert brute_force_distance(scenario_graph, "A", "E") == 11


def test_two_node_graph():
    graph = load_graph_from_records(["A", "B"], [("A", "B", 7)])
    assert dijkstra(graph, "A", "B") == (["A", "B"], 7)


def test_start_equals_target(scenario_graph):
    for name in ["A", "C", "E"]:
        assert dijkstra(scenario_graph, name, name) == ([name], 0)


def test_start_equals_target_still_resolves_names(scenario_graph):
    with pytest.raises(UnknownNode):
        dijkstra(scenario_graph, "Z", "Z")


def test_unknown_nodes(scenario_graph):
    with pytest.raises(UnknownNode) as exc:
        dijkstra(scenario_graph, "A", "Z")
    assert exc.value.name == "Z"
    with pytest.raises(UnknownNode):
        dijkstra(scenario_graph, "a", "E")  # names are case-sensitive


def test_unreachable_target(disconnected_graph):
    with pytest.raises(TargetUnreachable) as exc:
        dijkstra(disconnected_graph, "A", "C")
    assert (exc.value.start, exc.value.target) == ("A", "C")
    with pytest.raises(TargetUnreachable):
        dijkstra(disconnected_graph, "C", "B")


def test_symmetry(scenario_graph):
    forward = dijkstra(scenario_graph, "A", "E")
    backward = dijkstra(scenario_graph, "E", "A")
    assert forward.distance == backward.distance
    assert forward.nodes == list(reversed(backward.nodes))


def test_repeated_queries_are_identical(scenario_graph):
    results = [dijkstra(scenario_graph, "A", "E") for _ in range(3)]
    assert results[0] == results[1] == results[2]
    assert scenario_graph.frozen


def test_tie_break_prefers_first_node_in_order():
    # A-B-D and A-C-D both cost 2; B is declared before C
    graph = load_graph_from_records(
        ["A", "B", "C", "D"],
        [("A", "B", 1), ("A", "C", 1), ("B", "D", 1), ("C", "D", 1)],
    )
    assert dijkstra(graph, "A", "D") == (["A", "B", "D"], 2)


def test_parallel_edges_use_cheapest():
    graph = load_graph_from_records(["A", "B"], [("A", "B", 5), ("A", "B", 2)])
    assert dijkstra(graph, "A", "B") == (["A", "B"], 2)
    assert path_weight(graph, ["A", "B"]) == 2


def test_fractional_weights():
    graph = load_graph_from_records(["A", "B", "C"], [("A", "B", "0.5"), ("B", "C", 0.25), ("A", "C", 1)])
    path, cost = dijkstra(graph, "A", "C")
    assert path == ["A", "B", "C"]
    assert cost == pytest.approx(0.75)


def test_shortest_distances_table(scenario_graph):
    table = shortest_distances(scenario_graph, "A")
    assert list(table) == ["A", "B", "C", "D", "E"]
    assert {name: entry.distance for name, entry in table.items()} == {"A": 0, "B": 3, "C": 2, "D": 8, "E": 11}
    assert table["A"].previous is None
    assert table["B"].previous == "C"
    assert table["E"].previous == "D"


def test_shortest_distances_unreachable(disconnected_graph):
    table = shortest_distances(disconnected_graph, "A")
    assert math.isinf(table["C"].distance)
    assert table["C"].previous is None


def test_empty_frontier_is_reported():
    with pytest.raises(EmptyFrontier):
        dijkstra_module._select_closest([], {})


@pytest.mark.parametrize("seed", range(10))
def test_matches_brute_force_on_random_networks(seed):
    graph = build_random_network(n_nodes=7, edge_prob=0.4, seed=seed)
    names = [node.name for node in graph.list_nodes()]
    src = names[0]
    for dst in names[1:]:
        path, cost = dijkstra(graph, src, dst)
        assert path[0] == src and path[-1] == dst
        assert cost >= 0
        assert path_weight(graph, path) == cost
        assert cost == brute_force_distance(graph, src, dst)
        backward = dijkstra(graph, dst, src)
        assert backward.distance == cost
        optimal = [p for c, p in brute_force_paths(graph, src, dst) if c == cost]
        if len(optimal) == 1:
            assert backward.nodes == list(reversed(path))
            assert path == optimal[0]
