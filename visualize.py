from __future__ import annotations

import argparse
from pathlib import Path
from typing import Dict, List, Sequence, Tuple

import matplotlib.pyplot as plt
import networkx as nx

from graph import Graph
from graph_loader import load_graph, retrieve_start_end_nodes
from shortest_path import Dijkstra


def build_networkx_graph(graph: Graph) -> nx.MultiGraph:
    g = nx.MultiGraph()
    g.add_nodes_from(graph.node_ids())
    for edge in graph.edges:
        g.add_edge(edge.a, edge.b, weight=edge.weight)
    return g


def compute_layout(graph_nx: nx.MultiGraph) -> Dict[int, Tuple[float, float]]:
    return nx.spring_layout(graph_nx, seed=42)


def route_edges(path: Sequence[int]) -> List[Tuple[int, int]]:
    return list(zip(path[:-1], path[1:]))


def edge_labels(graph: Graph) -> Dict[Tuple[int, int], str]:
    """One label per node pair; parallel edges are listed together."""
    labels: Dict[Tuple[int, int], List[str]] = {}
    for edge in graph.edges:
        labels.setdefault((min(edge.a, edge.b), max(edge.a, edge.b)), []).append(str(edge.weight))
    return {pair: "/".join(weights) for pair, weights in labels.items()}


def draw_route_figure(
    graph: Graph,
    path: Sequence[int],
    output: Path | None = None,
    show: bool = False,
) -> None:
    graph_nx = build_networkx_graph(graph)
    layout = compute_layout(graph_nx)

    fig, ax = plt.subplots(figsize=(10, 8))

    if graph.edges:
        nx.draw_networkx_edges(graph_nx, layout, ax=ax, edge_color="lightgray", width=1.0)

    highlighted = route_edges(path)
    if highlighted:
        nx.draw_networkx_edges(
            nx.Graph(highlighted),
            layout,
            edge_color="#d62728",
            width=2.5,
            ax=ax,
        )

    on_route = set(path)
    node_colors = [
        "#ff7f0e" if node in on_route else "#9ecae1" for node in graph_nx.nodes
    ]
    nx.draw_networkx_nodes(graph_nx, layout, node_color=node_colors, node_size=600, ax=ax)
    nx.draw_networkx_labels(graph_nx, layout, font_size=9, ax=ax)
    labels = edge_labels(graph)
    if labels:
        nx.draw_networkx_edge_labels(
            nx.Graph(list(labels)),
            layout,
            edge_labels=labels,
            font_size=8,
            ax=ax,
        )

    if path:
        summary = f"Route: {' -> '.join(map(str, path))}\nTotal weight: {graph.path_cost(path)}"
    else:
        summary = "No route"
    ax.text(
        1.02,
        0.5,
        summary,
        transform=ax.transAxes,
        va="center",
        fontsize=10,
        bbox=dict(facecolor="white", alpha=0.8, boxstyle="round"),
    )

    ax.set_axis_off()
    ax.set_title("Shortest Path – Static Overview")

    if output:
        fig.savefig(output, bbox_inches="tight")
    if show:
        plt.show()
    else:
        plt.close(fig)


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Visualise a graph instance and its shortest path."
    )
    parser.add_argument("path", type=Path, help="Graph instance file.")
    parser.add_argument(
        "--static-out",
        type=Path,
        help="Optional path to save a static PNG of the graph and route.",
    )
    parser.add_argument(
        "--no-show",
        action="store_true",
        help="Do not display the figure interactively.",
    )
    args = parser.parse_args()

    graph, expected_shortest_path = load_graph(args.path)
    start, end = retrieve_start_end_nodes(expected_shortest_path)
    path = Dijkstra().find_shortest_path(graph, start, end) or []

    draw_route_figure(graph, path, output=args.static_out, show=not args.no_show)


if __name__ == "__main__":
    main()
