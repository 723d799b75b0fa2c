"""Graph — immutable weighted graph shared read-only by every algorithm."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Iterator

import networkx as nx

if TYPE_CHECKING:
    from graphlab.models.graph import GraphData


class InvalidGraph(ValueError):
    """Raised when a graph's edges reference unknown nodes or carry unusable weights."""


@dataclass(frozen=True)
class Edge:
    """A weighted edge. Serialised as ``{from, to, weight}`` on the wire."""

    source: str
    target: str
    weight: float

    def other(self, node: str) -> str:
        """Return the endpoint opposite *node*."""
        return self.target if self.source == node else self.source


class Graph:
    """Nodes, weighted edges, and an orientation flag. No mutation after construction."""

    def __init__(
        self,
        nodes: Iterable[str],
        edges: Iterable[Edge],
        is_oriented: bool = False,
    ) -> None:
        # dict.fromkeys keeps first-occurrence order
        self._nodes: tuple[str, ...] = tuple(dict.fromkeys(nodes))
        self._edges: tuple[Edge, ...] = tuple(edges)
        self._is_oriented = bool(is_oriented)
        self._node_set = frozenset(self._nodes)
        self._validate()

    @classmethod
    def from_data(cls, data: GraphData) -> Graph:
        """Build a Graph from the validated wire model."""
        return cls(
            nodes=data.nodes,
            edges=[Edge(e.source, e.target, e.weight) for e in data.edges],
            is_oriented=data.is_oriented,
        )

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def nodes(self) -> tuple[str, ...]:
        return self._nodes

    @property
    def edges(self) -> tuple[Edge, ...]:
        return self._edges

    @property
    def is_oriented(self) -> bool:
        return self._is_oriented

    def __contains__(self, node: object) -> bool:
        return node in self._node_set

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return (
            f"Graph(nodes={len(self._nodes)}, edges={len(self._edges)}, "
            f"is_oriented={self._is_oriented})"
        )

    # ------------------------------------------------------------------
    # Adjacency queries
    # ------------------------------------------------------------------

    def outgoing_edges(self, node: str) -> list[Edge]:
        """Edges whose source is *node*, ignoring orientation."""
        return [e for e in self._edges if e.source == node]

    def incident_edges(self, node: str) -> list[Edge]:
        """Edges with *node* at either endpoint."""
        return [e for e in self._edges if e.source == node or e.target == node]

    def neighbors(self, node: str) -> list[str]:
        """Sorted unique neighbours of *node*, following edges as ``is_oriented`` allows."""
        if self._is_oriented:
            found = {e.target for e in self.outgoing_edges(node)}
        else:
            found = {e.other(node) for e in self.incident_edges(node)}
        return sorted(found)

    def adjacency(self) -> dict[str, list[str]]:
        """Map every node to ``neighbors(node)``, built in a single pass over the edges."""
        return self._sorted_adjacency(undirected=not self._is_oriented)

    def undirected_adjacency(self) -> dict[str, list[str]]:
        """Map every node to its sorted neighbours, treating all edges as undirected."""
        return self._sorted_adjacency(undirected=True)

    def incidence(self) -> dict[str, list[Edge]]:
        """Map every node to the edges touching it, in input order. Self-loops appear once."""
        incident: dict[str, list[Edge]] = {node: [] for node in self._nodes}
        for edge in self._edges:
            incident[edge.source].append(edge)
            if edge.target != edge.source:
                incident[edge.target].append(edge)
        return incident

    def arcs(self) -> Iterator[tuple[str, str, float]]:
        """Yield directed ``(u, v, w)`` arcs; undirected edges yield both directions."""
        for edge in self._edges:
            yield edge.source, edge.target, edge.weight
            if not self._is_oriented:
                yield edge.target, edge.source, edge.weight

    def to_networkx(self) -> nx.Graph:
        """Export as a NetworkX graph. Parallel edges collapse to the lightest one.

        The algorithms never call this; it is the interop hook for callers that
        want NetworkX tooling, and the reference the tests check results against.
        """
        g: nx.Graph = nx.DiGraph() if self._is_oriented else nx.Graph()
        g.add_nodes_from(self._nodes)
        for edge in self._edges:
            if g.has_edge(edge.source, edge.target):
                current = g.edges[edge.source, edge.target]["weight"]
                if edge.weight >= current:
                    continue
            g.add_edge(edge.source, edge.target, weight=edge.weight)
        return g

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _sorted_adjacency(self, undirected: bool) -> dict[str, list[str]]:
        adjacency: dict[str, set[str]] = {node: set() for node in self._nodes}
        for edge in self._edges:
            adjacency[edge.source].add(edge.target)
            if undirected:
                adjacency[edge.target].add(edge.source)
        return {node: sorted(adj) for node, adj in adjacency.items()}

    def _validate(self) -> None:
        for edge in self._edges:
            missing = [n for n in (edge.source, edge.target) if n not in self._node_set]
            if missing:
                raise InvalidGraph(
                    f"Edge ({edge.source} -> {edge.target}) references unknown node(s): {missing}"
                )
            if isinstance(edge.weight, bool) or not isinstance(edge.weight, (int, float)):
                raise InvalidGraph(
                    f"Edge ({edge.source} -> {edge.target}) has a non-numeric weight: {edge.weight!r}"
                )
            if not math.isfinite(edge.weight):
                raise InvalidGraph(
                    f"Edge ({edge.source} -> {edge.target}) has a non-finite weight: {edge.weight}"
                )
