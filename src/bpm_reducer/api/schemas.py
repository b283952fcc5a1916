"""
bpm_reducer.api.schemas

Wire models for diagrams and error responses.

Responsibilities:
- Decode request JSON into core `ProcessGraph` values (`from`/`to` edge keys).
- Encode reduced graphs and error bodies back to JSON.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from bpm_reducer.core.models import Edge, Node, ProcessGraph


class NodeSchema(BaseModel):
    # Diagram editors send numeric ids; the core works with strings.
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str
    name: str
    # Left as a plain string: unknown types are rejected by the core as UnknownNodeType.
    type: str


class EdgeSchema(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True, populate_by_name=True)

    source: str = Field(alias="from")
    target: str = Field(alias="to")


class DiagramSchema(BaseModel):
    nodes: list[NodeSchema]
    edges: list[EdgeSchema]

    def to_graph(self) -> ProcessGraph:
        return ProcessGraph(
            nodes=[Node(id=n.id, name=n.name, type=n.type) for n in self.nodes],
            edges=[Edge(source=e.source, target=e.target) for e in self.edges],
        )

    @classmethod
    def from_graph(cls, graph: ProcessGraph) -> DiagramSchema:
        return cls(
            nodes=[NodeSchema(id=n.id, name=n.name, type=n.type) for n in graph.nodes or ()],
            edges=[EdgeSchema(source=e.source, target=e.target) for e in graph.edges or ()],
        )


class ErrorResponse(BaseModel):
    timestamp: datetime
    status: int
    error: str
    message: str
    details: dict[str, Any] | None = None


# --- Module Notes -----------------------------------------------------------
# FastAPI serializes response models by alias, so edges leave as {"from", "to"}.
