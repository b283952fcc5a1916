"""
bpm_reducer.services.reduction_service

Diagram reduction service (logging + configuration owner around the core).

Responsibilities:
- Build a `DiagramReducer` from settings.
- Log request/result sizes and diagnostics about the input diagram.
- Log and re-raise typed reduction failures for the API layer to map.
"""

from __future__ import annotations

from bpm_reducer.core.errors import DiagramError
from bpm_reducer.core.models import ProcessGraph
from bpm_reducer.core.reducer import DiagramReducer, Reduction
from bpm_reducer.observability.logging import get_logger
from bpm_reducer.settings import Settings

log = get_logger(__name__)


class ReductionService:
    def __init__(self, *, settings: Settings) -> None:
        self._settings = settings
        self._reducer = DiagramReducer(
            strict_edge_references=settings.strict_edge_references
        )

    @property
    def reducer(self) -> DiagramReducer:
        return self._reducer

    def reduce(self, graph: ProcessGraph) -> Reduction:
        log.info(
            "diagram_reduction_started",
            nodes=len(graph.nodes or ()),
            edges=len(graph.edges or ()),
        )
        try:
            result = self._reducer.analyze(graph)
        except DiagramError as e:
            log.warning("diagram_reduction_rejected", kind=e.kind, reason=str(e), **e.context)
            raise

        for edge in result.dangling_edges:
            log.warning("dangling_edge_reference", source=edge.source, target=edge.target)
        if result.unreachable_tasks:
            log.warning(
                "human_tasks_unreachable_from_start",
                node_ids=[n.id for n in result.unreachable_tasks],
            )

        log.info(
            "diagram_reduction_completed",
            nodes=len(result.graph.nodes or ()),
            edges=len(result.graph.edges or ()),
        )
        return result


# --- Module Notes -----------------------------------------------------------
# The service is stateless per call; one instance is shared by all requests.
