"""
bpm_reducer.core.models

Diagram domain models.

Responsibilities:
- Define the node type vocabulary and the kept/pass-through split.
- Define immutable Node/Edge/ProcessGraph values shared by input and output.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum


class NodeType(str, Enum):
    START = "Start"
    END = "End"
    HUMAN_TASK = "HumanTask"
    SERVICE_TASK = "ServiceTask"
    GATEWAY = "Gateway"

    @property
    def is_kept(self) -> bool:
        return self in KEPT_TYPES


# Anchor types survive reduction; everything else is a pass-through step.
KEPT_TYPES: frozenset[NodeType] = frozenset(
    {NodeType.START, NodeType.END, NodeType.HUMAN_TASK}
)


@dataclass(frozen=True, slots=True)
class Node:
    """
    A single diagram step.

    `type` is kept as the raw string received from the caller; classification into
    `NodeType` happens when the graph is indexed so unknown values fail loudly there.
    """

    id: str
    name: str
    type: str


@dataclass(frozen=True, slots=True)
class Edge:
    # Directed arc between node ids; `from`/`to` on the wire.
    source: str
    target: str


@dataclass(frozen=True, slots=True)
class ProcessGraph:
    """
    Ordered nodes and edges. Used for both the input diagram and the reduced one.

    `None` collections are representable so the reducer can reject them explicitly.
    """

    nodes: Sequence[Node] | None
    edges: Sequence[Edge] | None

    @property
    def node_ids(self) -> list[str]:
        return [n.id for n in self.nodes or ()]

    @property
    def edge_pairs(self) -> list[tuple[str, str]]:
        return [(e.source, e.target) for e in self.edges or ()]


# --- Module Notes -----------------------------------------------------------
# These values are never mutated during a reduction; the reduced graph reuses the
# input Node instances for kept steps.
