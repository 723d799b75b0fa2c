"""Result records returned by the graph algorithms."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from graphlab.engine.graph import Edge

# Finite sentinels so that results stay JSON-serialisable.
UNREACHABLE_COST = 2_147_483_647
INF_DISTANCE = 1_000_000_000


@dataclass
class TraversalResult:
    """Visitation order and predecessor map of a BFS or DFS run."""

    order: list[str] = field(default_factory=list)
    parents: dict[str, Optional[str]] = field(default_factory=dict)


@dataclass
class PathResult:
    """A single-source, single-target shortest path."""

    path: list[str] = field(default_factory=list)
    total_cost: float = UNREACHABLE_COST

    @classmethod
    def unreachable(cls) -> PathResult:
        return cls(path=[], total_cost=UNREACHABLE_COST)

    @property
    def reachable(self) -> bool:
        return bool(self.path)


@dataclass
class BellmanFordResult(PathResult):
    """PathResult with an explicit negative-cycle flag.

    When ``has_negative_cycle`` is true the path is empty and ``total_cost``
    holds the sentinel; callers must check the flag before trusting the cost.
    """

    has_negative_cycle: bool = False

    @classmethod
    def unreachable(cls) -> BellmanFordResult:
        return cls(path=[], total_cost=UNREACHABLE_COST, has_negative_cycle=False)

    @classmethod
    def negative_cycle(cls) -> BellmanFordResult:
        return cls(path=[], total_cost=UNREACHABLE_COST, has_negative_cycle=True)


@dataclass
class AllPairsResult:
    """Distance and next-hop matrices indexed by ``nodes``."""

    nodes: list[str] = field(default_factory=list)
    distances: list[list[float]] = field(default_factory=list)
    next: list[list[Optional[str]]] = field(default_factory=list)
    has_negative_cycle: bool = False

    def distance(self, source: str, target: str) -> float:
        """Return the matrix entry for (*source*, *target*), ``INF_DISTANCE`` if unknown.

        A reachable pair whose cost is at least ``INF_DISTANCE`` is reported
        exactly; use ``reachable`` rather than comparing against the sentinel.
        """
        index = {node: i for i, node in enumerate(self.nodes)}
        if source not in index or target not in index:
            return INF_DISTANCE
        return self.distances[index[source]][index[target]]

    def reachable(self, source: str, target: str) -> bool:
        """True when a path from *source* to *target* exists."""
        index = {node: i for i, node in enumerate(self.nodes)}
        if source not in index or target not in index:
            return False
        return source == target or self.next[index[source]][index[target]] is not None

    def path(self, source: str, target: str) -> list[str]:
        """Reconstruct the path from *source* to *target* by following ``next``.

        Returns ``[]`` when the target is unreachable or either node is unknown.
        """
        index = {node: i for i, node in enumerate(self.nodes)}
        if source not in index or target not in index:
            return []
        if source == target:
            return [source]
        if self.next[index[source]][index[target]] is None:
            return []

        path = [source]
        current = source
        # A path visits each node at most once unless a negative cycle is involved.
        for _ in range(len(self.nodes)):
            current = self.next[index[current]][index[target]]
            if current is None:
                return []
            path.append(current)
            if current == target:
                return path
        return []


@dataclass
class MSTResult:
    """Edges of a minimum spanning tree (or forest) and their summed weight."""

    edges: list[Edge] = field(default_factory=list)
    total_cost: float = 0
