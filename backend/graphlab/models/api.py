from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional

from .graph import GraphData, GraphEdgeData


class CamelModel(BaseModel):
    """Base for wire models: snake_case in Python, camelCase on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TraversalRequest(CamelModel):
    graph: GraphData
    start: str


class PathRequest(CamelModel):
    graph: GraphData
    start: str
    target: str


class TraversalResponse(CamelModel):
    order: list[str]
    parents: dict[str, Optional[str]]


class PathResponse(CamelModel):
    path: list[str]
    total_cost: float


class BellmanFordResponse(PathResponse):
    has_negative_cycle: bool


class AllPairsResponse(CamelModel):
    nodes: list[str]
    distances: list[list[float]]
    next: list[list[Optional[str]]]
    has_negative_cycle: bool = False


class MSTResponse(CamelModel):
    edges: list[GraphEdgeData]
    total_cost: float


class AlgorithmInfo(CamelModel):
    name: str
    kind: str
    params: list[str] = []


class SampleInfo(CamelModel):
    name: str
    description: str = ""
