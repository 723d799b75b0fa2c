from .graph import GraphEdgeData, GraphData
from .api import (
    CamelModel,
    TraversalRequest,
    PathRequest,
    TraversalResponse,
    PathResponse,
    BellmanFordResponse,
    AllPairsResponse,
    MSTResponse,
    AlgorithmInfo,
    SampleInfo,
)
