"""Graph traversals: breadth-first and depth-first search.

Both return a TraversalResult whose ``parents`` map covers every node of the
graph; nodes never reached keep a ``None`` parent and are absent from ``order``.
"""

from collections import deque
from typing import Optional

from graphlab.engine.algorithm_registry import register_algorithm
from graphlab.engine.graph import Graph
from graphlab.engine.results import TraversalResult


@register_algorithm("bfs", kind="traversal", params=("start",))
def bfs(graph: Graph, start: str) -> TraversalResult:
    """Level-order traversal from *start*.

    Follows only outgoing edges when the graph is oriented, both directions
    otherwise. Neighbours of a node are visited in ascending id order.
    """
    parents: dict[str, Optional[str]] = {node: None for node in graph.nodes}
    if start not in graph:
        return TraversalResult(order=[], parents=parents)

    adjacency = graph.adjacency()
    order = [start]
    visited = {start}
    queue = deque([start])

    while queue:
        y = queue.popleft()
        for z in adjacency[y]:
            if z not in visited:
                visited.add(z)
                order.append(z)
                parents[z] = y
                queue.append(z)

    return TraversalResult(order=order, parents=parents)


@register_algorithm("dfs", kind="traversal", params=("start",))
def dfs(graph: Graph, start: str) -> TraversalResult:
    """Pre-order depth-first traversal from *start* over the undirected view of the graph.

    Uses an explicit stack of neighbour iterators, which yields the same order
    as the recursive formulation without growing the interpreter stack.
    """
    parents: dict[str, Optional[str]] = {node: None for node in graph.nodes}
    if start not in graph:
        return TraversalResult(order=[], parents=parents)

    adjacency = graph.undirected_adjacency()
    order = [start]
    visited = {start}
    stack = [(start, iter(adjacency[start]))]

    while stack:
        current, neighbors = stack[-1]
        for neighbor in neighbors:
            if neighbor not in visited:
                visited.add(neighbor)
                order.append(neighbor)
                parents[neighbor] = current
                stack.append((neighbor, iter(adjacency[neighbor])))
                break
        else:
            stack.pop()

    return TraversalResult(order=order, parents=parents)
