from pydantic import BaseModel, ConfigDict, Field


class NodePosition(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: int
    y: int


class GraphNode(BaseModel):
    """A commit as drawn by the external graph renderer."""

    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    message: str
    slot: int
    position: NodePosition
    branches: tuple[str, ...] = ()
    is_active: bool = False


class GraphEdge(BaseModel):
    """A parent -> child link between two commits."""

    model_config = ConfigDict(frozen=True)

    id: str
    source: str
    target: str
    is_active: bool = False


class GraphProjection(BaseModel):
    model_config = ConfigDict(frozen=True)

    nodes: list[GraphNode] = Field(default_factory=list)
    edges: list[GraphEdge] = Field(default_factory=list)
