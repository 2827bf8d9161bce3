import math

from shortest_route.pathfinding.dijkstra import ShortestPath
from shortest_route.report import describe, distance_table_frame, format_distance


def test_describe():
    text = describe(ShortestPath(["A", "C", "B", "D", "E"], 11.0))
    assert text == "Shortest path: A -> C -> B -> D -> E\nTotal distance: 11"


def test_format_distance():
    assert format_distance(7.0) == "7"
    assert format_distance(0.75) == "0.75"
    assert format_distance(math.inf) == "inf"


def test_distance_table_frame(scenario_graph):
    df = distance_table_frame(scenario_graph, "A")
    assert list(df.index) == ["A", "B", "C", "D", "E"]
    assert df.loc["E", "distance"] == 11
    assert df.loc["B", "previous"] == "C"


def test_distance_table_frame_unreachable(disconnected_graph):
    df = distance_table_frame(disconnected_graph, "A")
    assert math.isinf(df.loc["C", "distance"])
