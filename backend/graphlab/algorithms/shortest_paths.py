"""Single-source shortest paths: Dijkstra and Bellman-Ford.

All functions follow the signature ``(graph, start, target) -> PathResult``.
Unknown start or target nodes produce the unreachable result rather than an error.
"""

import heapq
import logging
from typing import Optional

from graphlab.engine.algorithm_registry import register_algorithm
from graphlab.engine.graph import Graph
from graphlab.engine.results import BellmanFordResult, PathResult

logger = logging.getLogger(__name__)


def _walk_parents(parents: dict[str, Optional[str]], start: str, target: str) -> list[str]:
    """Follow *parents* from *target* back to *start* and return the path start-first."""
    path = [target]
    current = target
    while current != start:
        current = parents[current]
        path.append(current)
    path.reverse()
    return path


# ---------------------------------------------------------------------------
# Dijkstra
# ---------------------------------------------------------------------------

@register_algorithm("dijkstra", kind="path", params=("start", "target"))
def dijkstra(graph: Graph, start: str, target: str) -> PathResult:
    """Shortest path from *start* to *target* with non-negative weights.

    Edges are always traversable in both directions. The frontier is a heap
    of ``(distance, node)`` pairs, so equal distances settle in node-id order.
    Stale heap entries are skipped on pop; the search stops once *target*
    is settled.
    """
    if start not in graph or target not in graph:
        return PathResult.unreachable()

    incident = graph.incidence()
    dist: dict[str, float] = {start: 0}
    parents: dict[str, Optional[str]] = {start: None}
    settled: set[str] = set()
    heap: list[tuple[float, str]] = [(0, start)]

    while heap:
        d, current = heapq.heappop(heap)
        if current in settled:
            continue
        settled.add(current)
        if current == target:
            break

        for edge in incident[current]:
            neighbor = edge.other(current)
            if neighbor in settled:
                continue
            candidate = d + edge.weight
            if neighbor not in dist or candidate < dist[neighbor]:
                dist[neighbor] = candidate
                parents[neighbor] = current
                heapq.heappush(heap, (candidate, neighbor))

    if target not in settled:
        return PathResult.unreachable()

    return PathResult(path=_walk_parents(parents, start, target), total_cost=dist[target])


# ---------------------------------------------------------------------------
# Bellman-Ford
# ---------------------------------------------------------------------------

@register_algorithm("bellman-ford", kind="path", params=("start", "target"))
def bellman_ford(graph: Graph, start: str, target: str) -> BellmanFordResult:
    """Shortest path from *start* to *target*, allowing negative weights.

    Respects ``is_oriented``: an undirected edge is relaxed in both
    directions, so a negative undirected edge is itself a negative cycle.
    Runs at most |V|-1 relaxation passes, then one detection pass. Any
    negative cycle reachable from *start* makes the result a flagged failure
    for every target that *start* reaches; an unreachable target is simply
    unreachable.
    """
    if start not in graph or target not in graph:
        return BellmanFordResult.unreachable()

    arcs = list(graph.arcs())
    dist: dict[str, float] = {start: 0}
    parents: dict[str, Optional[str]] = {start: None}

    for _ in range(len(graph) - 1):
        changed = False
        for u, v, w in arcs:
            if u not in dist:
                continue
            candidate = dist[u] + w
            if v not in dist or candidate < dist[v]:
                dist[v] = candidate
                parents[v] = u
                changed = True
        if not changed:
            break

    # Every node reachable from start is in dist after |V|-1 passes, cycle or not.
    if target not in dist:
        return BellmanFordResult.unreachable()

    still_relaxing = sorted(
        {v for u, v, w in arcs if u in dist and (v not in dist or dist[u] + w < dist[v])}
    )
    if still_relaxing:
        logger.info("Negative cycle reachable from %s through %s", start, still_relaxing)
        return BellmanFordResult.negative_cycle()

    return BellmanFordResult(
        path=_walk_parents(parents, start, target),
        total_cost=dist[target],
        has_negative_cycle=False,
    )
