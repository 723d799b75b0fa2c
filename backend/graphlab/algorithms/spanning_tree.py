"""Minimum spanning trees: Kruskal and Prim.

Both algorithms treat every edge as undirected, whatever ``is_oriented`` says.
On a disconnected graph Kruskal returns a spanning forest, while Prim only
covers the component of its start node.
"""

from typing import Hashable, Iterable

from graphlab.engine.algorithm_registry import register_algorithm
from graphlab.engine.graph import Edge, Graph
from graphlab.engine.results import MSTResult


class UnionFind:
    """Disjoint sets with path compression and union by rank."""

    def __init__(self, items: Iterable[Hashable]) -> None:
        self.parent: dict[Hashable, Hashable] = {}
        self.rank: dict[Hashable, int] = {}
        for item in items:
            self.parent[item] = item
            self.rank[item] = 0

    def find(self, x: Hashable) -> Hashable:
        """Return the representative of *x*'s set."""
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, x: Hashable, y: Hashable) -> bool:
        """Merge the sets of *x* and *y*. Returns False if they were already joined."""
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return False

        if self.rank[root_x] < self.rank[root_y]:
            root_x, root_y = root_y, root_x
        self.parent[root_y] = root_x
        if self.rank[root_x] == self.rank[root_y]:
            self.rank[root_x] += 1
        return True


@register_algorithm("kruskal", kind="spanning_tree")
def kruskal(graph: Graph) -> MSTResult:
    """Minimum spanning forest over the full edge set.

    Edges are sorted by weight with a stable sort, so equal weights keep
    their input order. Selected edges are returned in selection order.
    """
    sets = UnionFind(graph.nodes)
    selected: list[Edge] = []
    total = 0

    for edge in sorted(graph.edges, key=lambda e: e.weight):
        if sets.union(edge.source, edge.target):
            selected.append(edge)
            total += edge.weight

    return MSTResult(edges=selected, total_cost=total)


@register_algorithm("prim", kind="spanning_tree", params=("start",))
def prim(graph: Graph, start: str) -> MSTResult:
    """Grow a minimum spanning tree from *start*.

    Each step scans all edges for the lightest one with exactly one endpoint
    in the tree (first in input order on ties), so edges come out in the
    order the tree grows. Stops when every node is covered or no crossing
    edge remains.
    """
    if start not in graph:
        return MSTResult(edges=[], total_cost=0)

    visited = {start}
    selected: list[Edge] = []
    total = 0

    while len(visited) < len(graph):
        best = None
        for edge in graph.edges:
            if (edge.source in visited) == (edge.target in visited):
                continue
            if best is None or edge.weight < best.weight:
                best = edge

        if best is None:
            break

        selected.append(best)
        total += best.weight
        visited.add(best.target if best.source in visited else best.source)

    return MSTResult(edges=selected, total_cost=total)
