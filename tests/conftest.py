import matplotlib
import pytest

from shortest_route.graph_loader import load_graph_from_records

matplotlib.use("Agg")

SCENARIO_NODES = ["A", "B", "C", "D", "E"]
SCENARIO_EDGES = [
    ("A", "B", 4),
    ("A", "C", 2),
    ("C", "B", 1),
    ("B", "D", 5),
    ("C", "D", 8),
    ("D", "E", 3),
    ("B", "E", 10),
]


@pytest.fixture
def scenario_graph():
    return load_graph_from_records(SCENARIO_NODES, SCENARIO_EDGES)


@pytest.fixture
def disconnected_graph():
    # C has no edges
    return load_graph_from_records(["A", "B", "C"], [("A", "B", 2)])
