from shortest_route.visualize_network import draw_graph_with_path


def test_draw_graph_with_path(scenario_graph, tmp_path):
    out = tmp_path / "graph.png"
    assert draw_graph_with_path(scenario_graph, ["A", "C", "B"], output_link=str(out)) == str(out)
    assert out.stat().st_size > 0


def test_draw_graph_without_path(scenario_graph, tmp_path):
    out = tmp_path / "plain.png"
    draw_graph_with_path(scenario_graph, output_link=str(out), layout="shell")
    assert out.exists()
