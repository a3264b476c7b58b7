from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from frontier import FRONTIERS
from graph import Graph
from graph_loader import GraphLoadError, load_graph, retrieve_start_end_nodes
from shortest_path import Dijkstra


def format_path(path: Sequence[int]) -> str:
    return " -> ".join(str(node) for node in path)


def print_result(graph: Graph, start: int, end: int, path: Optional[List[int]]) -> None:
    if path is None:
        print(f"No path from node {start} to node {end}.")
        return

    print(
        f"Shortest path from node {start} to node {end}: {format_path(path)} "
        f"(total weight {graph.path_cost(path)})"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find the shortest path between the endpoints of a graph instance."
    )
    parser.add_argument(
        "path",
        type=Path,
        help="Graph instance (text sections or YAML); its expected path gives start and end.",
    )
    parser.add_argument(
        "--frontier",
        choices=sorted(FRONTIERS),
        default="heap",
        help="Priority frontier used by Dijkstra (default: heap).",
    )
    parser.add_argument(
        "--static-out",
        type=Path,
        help="Optional path to save a PNG of the graph with the route highlighted.",
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Display the graph figure interactively.",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        graph, expected_shortest_path = load_graph(args.path)
        start, end = retrieve_start_end_nodes(expected_shortest_path)
    except GraphLoadError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(graph)
    print(f"Expected path: {format_path(expected_shortest_path)}")
    print()

    path = Dijkstra(frontier=args.frontier).find_shortest_path(graph, start, end)
    print_result(graph, start, end, path)

    if args.static_out or args.show:
        from visualize import draw_route_figure

        draw_route_figure(graph, path or [], output=args.static_out, show=args.show)
        if args.static_out:
            print(f"Figure stored at: {args.static_out}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
