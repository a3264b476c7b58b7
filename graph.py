from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Sequence, Tuple, Union


@dataclass(frozen=True)
class Node:
    id: int


@dataclass(frozen=True)
class Edge:
    a: int
    b: int
    weight: int


NodeLike = Union[Node, int]
EdgeLike = Union[Edge, Tuple[int, int, int]]


class Graph:
    """Undirected weighted graph addressed by integer node ids.

    The graph is never mutated after construction, so a single instance can be
    shared read-only between queries. Construction trusts its input: edges
    whose endpoints are not declared nodes are still indexed.
    """

    def __init__(self, nodes: Iterable[NodeLike], edges: Iterable[EdgeLike]) -> None:
        self.nodes: Tuple[Node, ...] = tuple(
            node if isinstance(node, Node) else Node(node) for node in nodes
        )
        self.edges: Tuple[Edge, ...] = tuple(
            edge if isinstance(edge, Edge) else Edge(*edge) for edge in edges
        )
        self._node_ids = frozenset(node.id for node in self.nodes)
        adjacency: Dict[int, List[Tuple[int, int]]] = {node.id: [] for node in self.nodes}
        for edge in self.edges:
            adjacency.setdefault(edge.a, []).append((edge.b, edge.weight))
            if edge.a != edge.b:
                adjacency.setdefault(edge.b, []).append((edge.a, edge.weight))
        self._adjacency: Dict[int, Tuple[Tuple[int, int], ...]] = {
            node_id: tuple(neighbors) for node_id, neighbors in adjacency.items()
        }

    def node_ids(self) -> List[int]:
        return [node.id for node in self.nodes]

    def neighbors(self, node_id: int) -> Tuple[Tuple[int, int], ...]:
        return self._adjacency.get(node_id, ())

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._node_ids

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def path_cost(self, path: Sequence[int]) -> int:
        """Return the total weight of walking along the given node sequence.

        Parallel edges between two nodes count with their cheapest weight.
        """
        if len(path) < 2:
            return 0

        total_cost = 0
        for u, v in zip(path[:-1], path[1:]):
            weights = [weight for neighbor, weight in self.neighbors(u) if neighbor == v]
            if not weights:
                raise ValueError(f"Edge {u}-{v} not present in graph.")
            total_cost += min(weights)
        return total_cost

    def __str__(self) -> str:
        lines = [f"Node: {node.id}" for node in self.nodes]
        lines.extend(
            f"Edge: {edge.a} - {edge.b}, weight: {edge.weight}" for edge in self.edges
        )
        return "\n".join(lines)
