"""
Single-pair shortest paths over an undirected weighted Graph.

Distances are unsigned 64-bit integers; INFINITY marks nodes that have not
been reached yet and additions saturate at it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, List, Mapping, Optional

from frontier import frontier_class, make_frontier
from graph import Graph


INFINITY = 2**64 - 1


def saturating_add(distance: int, weight: int) -> int:
    return min(distance + weight, INFINITY)


class ShortestPathAlgorithm(ABC):
    """
    Interface for single-pair shortest-path computation.
    """

    @abstractmethod
    def find_shortest_path(self, graph: Graph, start: int, end: int) -> Optional[List[int]]:
        """
        Find the shortest path between start and end.

        Returns:
            Node ids from start to end inclusive, or None if end cannot be
            reached from start (including when either id is not in graph).
        """
        raise NotImplementedError


class Dijkstra(ShortestPathAlgorithm):
    """Dijkstra's algorithm driven by a pluggable frontier ("heap" or "scan")."""

    def __init__(self, frontier: str = "heap") -> None:
        frontier_class(frontier)
        self.frontier = frontier

    def find_shortest_path(self, graph: Graph, start: int, end: int) -> Optional[List[int]]:
        if start not in graph or end not in graph:
            return None

        distances, predecessors = self.shortest_paths(graph, start, end)
        if distances.get(end, INFINITY) == INFINITY:
            return None
        return reconstruct_path(predecessors, start, end)

    def shortest_paths(
        self, graph: Graph, start: int, end: Optional[int] = None
    ) -> tuple[Dict[int, int], Dict[int, int]]:
        """
        Run the relaxation loop from start.

        Stops early once end is extracted from the frontier. Returns the
        distance table and the predecessor table; the latter omits start.
        """
        distances: Dict[int, int] = {node_id: INFINITY for node_id in graph.node_ids()}
        predecessors: Dict[int, int] = {}
        if start in distances:
            distances[start] = 0

        frontier = make_frontier(self.frontier, distances)
        for node_id, distance in distances.items():
            frontier.push(node_id, distance)

        while True:
            extracted = frontier.pop_min()
            if extracted is None:
                break

            u, distance_u = extracted
            # Everything left in the frontier is disconnected from start.
            if u == end or distance_u == INFINITY:
                break

            for v, weight in graph.neighbors(u):
                candidate = saturating_add(distance_u, weight)
                if candidate < distances.get(v, INFINITY):
                    distances[v] = candidate
                    predecessors[v] = u
                    frontier.push(v, candidate)

        return distances, predecessors


def reconstruct_path(
    predecessors: Mapping[int, int], start: int, end: int
) -> Optional[List[int]]:
    """Walk predecessor links back from end to start.

    A chain that breaks off (or loops) before reaching start yields None.
    """
    path: List[int] = [end]
    while path[-1] != start:
        previous = predecessors.get(path[-1])
        if previous is None or len(path) > len(predecessors):
            return None
        path.append(previous)
    path.reverse()
    return path


def find_shortest_path(
    graph: Graph, start: int, end: int, frontier: str = "heap"
) -> Optional[List[int]]:
    return Dijkstra(frontier=frontier).find_shortest_path(graph, start, end)
