"""REST API routes — one POST per algorithm, plus algorithm and sample listings."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from pydantic import ValidationError

from graphlab.algorithms import all_pairs, shortest_paths, spanning_tree, traversal
from graphlab.config import Settings, get_settings
from graphlab.engine.algorithm_registry import AlgorithmRegistry
from graphlab.engine.graph import Graph, InvalidGraph
from graphlab.models.api import (
    AlgorithmInfo,
    AllPairsResponse,
    BellmanFordResponse,
    MSTResponse,
    PathRequest,
    PathResponse,
    SampleInfo,
    TraversalRequest,
    TraversalResponse,
)
from graphlab.models.graph import GraphData, GraphEdgeData

logger = logging.getLogger(__name__)

router = APIRouter()

ALGORITHM_MODULES = (traversal, shortest_paths, all_pairs, spanning_tree)

# --- Module-level singleton ---
registry = AlgorithmRegistry()
for _module in ALGORITHM_MODULES:
    registry.register_from_module(_module)


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------

def _build_graph(data: GraphData) -> Graph:
    """Turn the validated wire graph into the domain Graph, rejecting structural errors with 422."""
    try:
        return Graph.from_data(data)
    except InvalidGraph as exc:
        logger.warning("Rejected graph: %s", exc)
        raise HTTPException(status_code=422, detail=str(exc)) from exc


def _run(name: str, data: GraphData, *args: str) -> Any:
    """Look up *name* in the registry and run it on the request graph."""
    func = registry.get(name)
    if func is None:
        raise HTTPException(status_code=404, detail=f"Algorithm '{name}' is not registered.")
    graph = _build_graph(data)
    logger.info("Running %s on %d node(s), %d edge(s)", name, len(graph), len(graph.edges))
    return func(graph, *args)


def _mst_response(result: Any) -> MSTResponse:
    return MSTResponse(
        edges=[GraphEdgeData(source=e.source, target=e.target, weight=e.weight) for e in result.edges],
        total_cost=result.total_cost,
    )


def _read_sample(path: Path) -> dict[str, Any]:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise HTTPException(
            status_code=500, detail=f"Sample file '{path.name}' contains invalid JSON: {exc}"
        ) from exc


# ------------------------------------------------------------------
# Traversals
# ------------------------------------------------------------------

@router.post("/bfs", response_model=TraversalResponse)
def run_bfs(request: TraversalRequest) -> TraversalResponse:
    """Breadth-first traversal from ``start``."""
    result = _run("bfs", request.graph, request.start)
    return TraversalResponse(order=result.order, parents=result.parents)


@router.post("/dfs", response_model=TraversalResponse)
def run_dfs(request: TraversalRequest) -> TraversalResponse:
    """Depth-first traversal from ``start``."""
    result = _run("dfs", request.graph, request.start)
    return TraversalResponse(order=result.order, parents=result.parents)


# ------------------------------------------------------------------
# Shortest paths
# ------------------------------------------------------------------

@router.post("/dijkstra", response_model=PathResponse)
def run_dijkstra(request: PathRequest) -> PathResponse:
    """Shortest path from ``start`` to ``target`` (non-negative weights)."""
    result = _run("dijkstra", request.graph, request.start, request.target)
    return PathResponse(path=result.path, total_cost=result.total_cost)


@router.post("/bellman-ford", response_model=BellmanFordResponse)
def run_bellman_ford(request: PathRequest) -> BellmanFordResponse:
    """Shortest path from ``start`` to ``target`` with negative-cycle detection."""
    result = _run("bellman-ford", request.graph, request.start, request.target)
    return BellmanFordResponse(
        path=result.path,
        total_cost=result.total_cost,
        has_negative_cycle=result.has_negative_cycle,
    )


@router.post("/floyd-warshall", response_model=AllPairsResponse)
def run_floyd_warshall(graph: GraphData) -> AllPairsResponse:
    """Distance and next-hop matrices for every pair of nodes."""
    result = _run("floyd-warshall", graph)
    return AllPairsResponse(
        nodes=result.nodes,
        distances=result.distances,
        next=result.next,
        has_negative_cycle=result.has_negative_cycle,
    )


# ------------------------------------------------------------------
# Spanning trees
# ------------------------------------------------------------------

@router.post("/kruskal", response_model=MSTResponse)
def run_kruskal(graph: GraphData) -> MSTResponse:
    """Minimum spanning forest of the whole graph."""
    return _mst_response(_run("kruskal", graph))


@router.post("/prim", response_model=MSTResponse)
def run_prim(request: TraversalRequest) -> MSTResponse:
    """Minimum spanning tree grown from ``start``."""
    return _mst_response(_run("prim", request.graph, request.start))


# ------------------------------------------------------------------
# GET /algorithms
# ------------------------------------------------------------------

@router.get("/algorithms", response_model=list[AlgorithmInfo])
async def list_algorithms() -> list[AlgorithmInfo]:
    """Return every registered algorithm with its kind and required request parameters."""
    return [AlgorithmInfo(**entry) for entry in registry.describe()]


# ------------------------------------------------------------------
# GET /samples
# ------------------------------------------------------------------

@router.get("/samples", response_model=list[SampleInfo])
async def list_samples(settings: Settings = Depends(get_settings)) -> list[SampleInfo]:
    """Return the built-in sample graphs found in the samples directory."""
    if not settings.samples_dir.is_dir():
        return []
    results = []
    for path in sorted(settings.samples_dir.glob("*.json")):
        content = _read_sample(path)
        description = content.get("metadata", {}).get("description", "")
        results.append(SampleInfo(name=path.stem, description=description))
    return results


@router.get("/samples/{name}", response_model=GraphData)
async def get_sample(name: str, settings: Settings = Depends(get_settings)) -> GraphData:
    """Return a built-in sample graph in wire format."""
    path = settings.samples_dir / f"{name}.json"
    if not path.is_file():
        available = [p.stem for p in sorted(settings.samples_dir.glob("*.json"))]
        raise HTTPException(
            status_code=404,
            detail=f"Sample '{name}' not found. Available samples: {available}",
        )
    content = _read_sample(path)
    try:
        data = GraphData(**content.get("graph", {}))
        Graph.from_data(data)
    except (ValidationError, InvalidGraph) as exc:
        raise HTTPException(status_code=500, detail=f"Sample '{name}' is not a valid graph: {exc}") from exc
    return data
