"""
bpm_reducer.core.reducer

Quotient-graph reduction of a process diagram.

Responsibilities:
- Validate the diagram (via `GraphIndex.build`) before any traversal.
- Keep Start, HumanTask (declaration order) and End nodes.
- Connect every kept node to its kept frontier.
"""

from __future__ import annotations

from dataclasses import dataclass

from bpm_reducer.core.errors import DanglingEdgeReference
from bpm_reducer.core.index import GraphIndex
from bpm_reducer.core.models import Edge, Node, ProcessGraph
from bpm_reducer.core.reachability import ReachabilityEngine


@dataclass(frozen=True, slots=True)
class Reduction:
    """
    Reduced diagram plus what was learned about the input while computing it.
    """

    graph: ProcessGraph
    dangling_edges: tuple[Edge, ...]
    unreachable_tasks: tuple[Node, ...]


class DiagramReducer:
    def __init__(self, *, strict_edge_references: bool = False) -> None:
        self._strict = strict_edge_references

    def reduce(self, graph: ProcessGraph) -> ProcessGraph:
        return self.analyze(graph).graph

    def analyze(self, graph: ProcessGraph) -> Reduction:
        index = GraphIndex.build(graph)
        if self._strict and index.dangling_edges:
            raise _dangling_failure(index, index.dangling_edges[0])

        engine = ReachabilityEngine(index)
        kept = index.kept_nodes

        edges: list[Edge] = []
        seen: set[tuple[str, str]] = set()
        for node in kept:
            if node is index.end:
                continue
            for target in engine.kept_frontier(node.id):
                pair = (node.id, target)
                # A cycle back to the origin is not an edge between two kept steps.
                if target == node.id or pair in seen:
                    continue
                seen.add(pair)
                edges.append(Edge(source=node.id, target=target))

        unreachable = tuple(
            task for task in index.human_tasks if not engine.reachable(index.start.id, task.id)
        )
        return Reduction(
            graph=ProcessGraph(nodes=list(kept), edges=edges),
            dangling_edges=index.dangling_edges,
            unreachable_tasks=unreachable,
        )


def reduce_diagram(graph: ProcessGraph, *, strict_edge_references: bool = False) -> ProcessGraph:
    return DiagramReducer(strict_edge_references=strict_edge_references).reduce(graph)


def _dangling_failure(index: GraphIndex, edge: Edge) -> DanglingEdgeReference:
    missing = edge.source if edge.source not in index.nodes_by_id else edge.target
    return DanglingEdgeReference(source=edge.source, target=edge.target, missing_id=missing)


# --- Module Notes -----------------------------------------------------------
# Cost is one frontier BFS per kept node plus one reachability BFS per HumanTask.
