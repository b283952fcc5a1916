"""
bpm_reducer.core

Diagram reduction core (pure Python, no I/O).

Responsibilities:
- Typed diagram model and failure kinds.
- Graph indexing, reachability traversal, and the quotient-graph reducer.
"""

from bpm_reducer.core.errors import (
    DanglingEdgeReference,
    DiagramError,
    DuplicateAnchor,
    DuplicateNodeId,
    InvalidGraph,
    MissingAnchor,
    UnknownNodeType,
)
from bpm_reducer.core.models import Edge, Node, NodeType, ProcessGraph
from bpm_reducer.core.reducer import DiagramReducer, reduce_diagram

__all__ = [
    "DanglingEdgeReference",
    "DiagramError",
    "DiagramReducer",
    "DuplicateAnchor",
    "DuplicateNodeId",
    "Edge",
    "InvalidGraph",
    "MissingAnchor",
    "Node",
    "NodeType",
    "ProcessGraph",
    "UnknownNodeType",
    "reduce_diagram",
]


# --- Module Notes -----------------------------------------------------------
# Nothing in this package imports FastAPI or structlog; the API and service layers
# wrap it.
