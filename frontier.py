"""
Priority frontiers for the shortest-path engine.

A frontier hands out the pending node with the lowest tentative distance.
Both implementations read distances from the table owned by the engine, so
they always see the latest relaxation results.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from heapq import heappop, heappush
from typing import Dict, List, Mapping, Optional, Set, Tuple, Type


class Frontier(ABC):
    """Min-priority structure over node ids keyed by tentative distance."""

    def __init__(self, distances: Mapping[int, int]) -> None:
        self._distances = distances

    @abstractmethod
    def push(self, node_id: int, distance: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def pop_min(self) -> Optional[Tuple[int, int]]:
        """Remove and return ``(node_id, distance)``, or None once empty."""
        raise NotImplementedError


class HeapFrontier(Frontier):
    """
    Binary heap with lazy deletion.

    A node is pushed again every time its distance improves; entries whose
    recorded distance is above the current table value are stale and get
    dropped on extraction.
    """

    def __init__(self, distances: Mapping[int, int]) -> None:
        super().__init__(distances)
        self._queue: List[Tuple[int, int]] = []

    def push(self, node_id: int, distance: int) -> None:
        heappush(self._queue, (distance, node_id))

    def pop_min(self) -> Optional[Tuple[int, int]]:
        while self._queue:
            distance, node_id = heappop(self._queue)
            if distance > self._distances[node_id]:
                continue
            return node_id, distance
        return None


class ScanFrontier(Frontier):
    """
    Unsettled-set frontier.

    Each extraction scans the distance table over the unsettled nodes and
    settles the winner. O(V) per extraction, fine for small graphs.
    """

    def __init__(self, distances: Mapping[int, int]) -> None:
        super().__init__(distances)
        self._unsettled: Set[int] = set()

    def push(self, node_id: int, distance: int) -> None:
        # The table already holds the distance; only membership matters here.
        self._unsettled.add(node_id)

    def pop_min(self) -> Optional[Tuple[int, int]]:
        if not self._unsettled:
            return None
        node_id = min(self._unsettled, key=self._distances.__getitem__)
        self._unsettled.remove(node_id)
        return node_id, self._distances[node_id]


FRONTIERS: Dict[str, Type[Frontier]] = {
    "heap": HeapFrontier,
    "scan": ScanFrontier,
}


def frontier_class(name: str) -> Type[Frontier]:
    try:
        return FRONTIERS[name]
    except KeyError:
        raise ValueError(
            f"Unknown frontier {name!r}; expected one of {sorted(FRONTIERS)}."
        ) from None


def make_frontier(name: str, distances: Mapping[int, int]) -> Frontier:
    return frontier_class(name)(distances)
