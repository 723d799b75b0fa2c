import math

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class GraphEdgeData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    source: str = Field(alias="from")
    target: str = Field(alias="to")
    weight: float = Field(validation_alias=AliasChoices("weight", "w", "cost"), serialization_alias="weight")

    @field_validator("source", "target")
    @classmethod
    def _strip_endpoint(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("edge endpoints must be non-empty strings")
        return value

    @field_validator("weight")
    @classmethod
    def _finite_weight(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("edge weight must be a finite number")
        return value


class GraphData(BaseModel):
    """Wire graph. Edges are checked against ``nodes`` when the domain Graph is built."""

    model_config = ConfigDict(populate_by_name=True)

    nodes: list[str]
    edges: list[GraphEdgeData] = []
    is_oriented: bool = Field(default=False, alias="isOriented")

    @field_validator("nodes")
    @classmethod
    def _normalise_nodes(cls, value: list[str]) -> list[str]:
        stripped = [n.strip() for n in value]
        if any(not n for n in stripped):
            raise ValueError("every node must be a non-empty string")
        if not stripped:
            raise ValueError("graph must contain at least one node")
        return list(dict.fromkeys(stripped))
