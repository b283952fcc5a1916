"""
bpm_reducer.core.index

Query-ready structures built once per reduction from the raw node/edge lists.

Responsibilities:
- Map ids to nodes and classify each node by role.
- Build the ordered adjacency list (input edge order, duplicates kept).
- Locate the unique Start/End anchors and the HumanTask nodes.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from bpm_reducer.core.errors import (
    DuplicateAnchor,
    DuplicateNodeId,
    InvalidGraph,
    MissingAnchor,
    UnknownNodeType,
)
from bpm_reducer.core.models import Edge, Node, NodeType, ProcessGraph

_NO_SUCCESSORS: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class GraphIndex:
    nodes_by_id: Mapping[str, Node]
    roles: Mapping[str, NodeType]
    adjacency: Mapping[str, tuple[str, ...]]
    start: Node
    end: Node
    human_tasks: tuple[Node, ...]
    dangling_edges: tuple[Edge, ...]

    @classmethod
    def build(cls, graph: ProcessGraph) -> GraphIndex:
        """
        Index `graph`, failing fast on the first structural problem.

        Node-level failures (unknown type, duplicate id) are reported in declaration
        order before anchor cardinality is checked.
        """

        if graph.nodes is None:
            raise InvalidGraph(missing="nodes")
        if graph.edges is None:
            raise InvalidGraph(missing="edges")

        nodes_by_id: dict[str, Node] = {}
        roles: dict[str, NodeType] = {}
        by_role: dict[NodeType, list[Node]] = {t: [] for t in NodeType}

        for node in graph.nodes:
            try:
                role = NodeType(node.type)
            except ValueError:
                raise UnknownNodeType(node_id=node.id, node_type=str(node.type)) from None
            if node.id in nodes_by_id:
                raise DuplicateNodeId(node_id=node.id)
            nodes_by_id[node.id] = node
            roles[node.id] = role
            by_role[role].append(node)

        start = _single_anchor(by_role[NodeType.START], NodeType.START)
        end = _single_anchor(by_role[NodeType.END], NodeType.END)

        adjacency: dict[str, list[str]] = {}
        dangling: list[Edge] = []
        for edge in graph.edges:
            adjacency.setdefault(edge.source, []).append(edge.target)
            if edge.source not in nodes_by_id or edge.target not in nodes_by_id:
                dangling.append(edge)

        return cls(
            nodes_by_id=MappingProxyType(nodes_by_id),
            roles=MappingProxyType(roles),
            adjacency=MappingProxyType({k: tuple(v) for k, v in adjacency.items()}),
            start=start,
            end=end,
            human_tasks=tuple(by_role[NodeType.HUMAN_TASK]),
            dangling_edges=tuple(dangling),
        )

    def successors(self, node_id: str) -> tuple[str, ...]:
        # A dangling id is a dead end even if some edge names it as a source.
        if node_id not in self.nodes_by_id:
            return _NO_SUCCESSORS
        return self.adjacency.get(node_id, _NO_SUCCESSORS)

    def is_kept(self, node_id: str) -> bool:
        # Ids missing from the node list have no role and behave as pass-through.
        role = self.roles.get(node_id)
        return role is not None and role.is_kept

    @property
    def kept_nodes(self) -> tuple[Node, ...]:
        return (self.start, *self.human_tasks, self.end)


def _single_anchor(candidates: list[Node], role: NodeType) -> Node:
    if not candidates:
        raise MissingAnchor(role=role.value)
    if len(candidates) > 1:
        raise DuplicateAnchor(role=role.value, node_ids=tuple(n.id for n in candidates))
    return candidates[0]


# --- Module Notes -----------------------------------------------------------
# The index holds no traversal state; see `core.reachability` for the BFS primitives.
