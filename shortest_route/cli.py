"""Command-line entry point: load a graph file and print the shortest path."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List

import matplotlib

from shortest_route.errors import ShortestRouteError
from shortest_route.graph_loader import load_json
from shortest_route.graphml_reader import load_graphml
from shortest_route.pathfinding.dijkstra import dijkstra
from shortest_route.report import describe, distance_table_frame

DEFAULT_GRAPH_PATH = Path(__file__).parent / "data" / "graph.graphml"
DEFAULT_START = "A"
DEFAULT_TARGET = "E"

LOADERS = {
    "graphml": load_graphml,
    "json": load_json,
}


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Find the shortest path between two nodes of a weighted graph.")
    parser.add_argument("--graph", default=str(DEFAULT_GRAPH_PATH), help="GraphML or JSON graph file.")
    parser.add_argument("--start", default=DEFAULT_START, help="Name of the start node.")
    parser.add_argument("--target", default=DEFAULT_TARGET, help="Name of the target node.")
    parser.add_argument(
        "--format",
        choices=sorted(LOADERS),
        default=None,
        help="Graph file format. Inferred from the file suffix when omitted.",
    )
    parser.add_argument("--table", action="store_true", help="Also print the full distance table.")
    parser.add_argument("--plot", default=None, help="Save a PNG of the graph with the path highlighted.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser.parse_args(argv)


def load_graph_file(path, fmt=None):
    if fmt is None:
        fmt = "json" if Path(path).suffix.lower() == ".json" else "graphml"
    return LOADERS[fmt](path)


def main(argv: List[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not Path(args.graph).is_file():
        print(f"[ERROR] Graph file not found: {args.graph}", file=sys.stderr)
        return 1

    try:
        graph = load_graph_file(args.graph, args.format)
        result = dijkstra(graph, args.start, args.target)
    except ShortestRouteError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    print(describe(result))

    if args.table:
        print()
        print(distance_table_frame(graph, args.start).to_string())

    if args.plot:
        matplotlib.use("Agg")
        from shortest_route.visualize_network import draw_graph_with_path

        saved = draw_graph_with_path(graph, result.nodes, output_link=args.plot)
        print(f"Saved plot to {saved}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
