"""
bpm_reducer.core.errors

Typed failure kinds raised by the reduction core.

Responsibilities:
- Carry a stable `kind` plus structured context instead of pre-formatted text.
- Let the API layer map failures to responses without string parsing.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, ClassVar


class DiagramError(Exception):
    """
    Base class for every reduction failure.
    Subclasses are dataclasses; their fields are the failure context and, in field
    order, the exception `args` (so copies and pickles rebuild the same failure).
    """

    kind: ClassVar[str] = "DiagramError"

    def __post_init__(self) -> None:
        Exception.__init__(self, *(getattr(self, f.name) for f in fields(self)))  # type: ignore[arg-type]

    @property
    def context(self) -> dict[str, Any]:
        return asdict(self)  # type: ignore[call-overload]

    def __str__(self) -> str:
        return self.describe()

    def describe(self) -> str:
        return self.kind


@dataclass(eq=False)
class InvalidGraph(DiagramError):
    kind: ClassVar[str] = "InvalidGraph"

    missing: str

    def describe(self) -> str:
        return f"Invalid diagram structure: {self.missing} must be provided"


@dataclass(eq=False)
class MissingAnchor(DiagramError):
    kind: ClassVar[str] = "MissingAnchor"

    role: str

    def describe(self) -> str:
        return f"{self.role} node not found"


@dataclass(eq=False)
class DuplicateAnchor(DiagramError):
    kind: ClassVar[str] = "DuplicateAnchor"

    role: str
    node_ids: tuple[str, ...]

    def describe(self) -> str:
        return f"Diagram must contain exactly one {self.role} node, found {len(self.node_ids)}"


@dataclass(eq=False)
class DuplicateNodeId(DiagramError):
    kind: ClassVar[str] = "DuplicateNodeId"

    node_id: str

    def describe(self) -> str:
        return f"Duplicate node id: {self.node_id}"


@dataclass(eq=False)
class UnknownNodeType(DiagramError):
    kind: ClassVar[str] = "UnknownNodeType"

    node_id: str
    node_type: str

    def describe(self) -> str:
        return f"Node {self.node_id} has unknown type {self.node_type!r}"


@dataclass(eq=False)
class DanglingEdgeReference(DiagramError):
    """
    Raised only in strict mode; by default a missing destination is a dead end.
    """

    kind: ClassVar[str] = "DanglingEdgeReference"

    source: str
    target: str
    missing_id: str

    def describe(self) -> str:
        return f"Edge {self.source} -> {self.target} references unknown node {self.missing_id}"


# --- Module Notes -----------------------------------------------------------
# All of these are detected while indexing, before any traversal starts.
