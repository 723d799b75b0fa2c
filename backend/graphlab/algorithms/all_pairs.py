"""All-pairs shortest paths (Floyd-Warshall)."""

import math
from typing import Optional

from graphlab.engine.algorithm_registry import register_algorithm
from graphlab.engine.graph import Graph
from graphlab.engine.results import INF_DISTANCE, AllPairsResult


@register_algorithm("floyd-warshall", kind="all_pairs")
def floyd_warshall(graph: Graph) -> AllPairsResult:
    """Distance and next-hop matrices for every ordered pair of nodes.

    Rows and columns follow ``graph.nodes``. ``next[i][j]`` is the first hop
    from i towards j (``None`` on the diagonal and for unreachable pairs).
    Parallel edges keep the lightest weight. Any pair path can be rebuilt
    with ``AllPairsResult.path``.

    The relaxation runs on ``math.inf``; only cells left unreachable are
    written out as ``INF_DISTANCE``, so reachable pairs keep their exact cost
    however large the weights are.
    """
    nodes = list(graph.nodes)
    n = len(nodes)
    index = {node: i for i, node in enumerate(nodes)}

    dist: list[list[float]] = [[0 if i == j else math.inf for j in range(n)] for i in range(n)]
    nxt: list[list[Optional[str]]] = [[None] * n for _ in range(n)]

    for u, v, w in graph.arcs():
        i, j = index[u], index[v]
        if w < dist[i][j]:
            dist[i][j] = w
            nxt[i][j] = v

    for k in range(n):
        row_k = dist[k]
        for i in range(n):
            d_ik = dist[i][k]
            if d_ik == math.inf:
                continue
            row_i = dist[i]
            for j in range(n):
                d_kj = row_k[j]
                if d_kj == math.inf:
                    continue
                if d_ik + d_kj < row_i[j]:
                    row_i[j] = d_ik + d_kj
                    nxt[i][j] = nxt[i][k]

    has_negative_cycle = any(dist[i][i] < 0 for i in range(n))
    distances = [[INF_DISTANCE if d == math.inf else d for d in row] for row in dist]
    return AllPairsResult(nodes=nodes, distances=distances, next=nxt, has_negative_cycle=has_negative_cycle)
