"""
bpm_reducer.api.routers.diagrams

Diagram processing endpoints.

Responsibilities:
- Accept a process diagram, enforce optional size caps, and return its reduction.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from starlette.concurrency import run_in_threadpool

from bpm_reducer.api.deps import reduction_service_dep, settings_dep
from bpm_reducer.api.schemas import DiagramSchema
from bpm_reducer.services.reduction_service import ReductionService
from bpm_reducer.settings import Settings

router = APIRouter(prefix="/api/diagramprocess", tags=["diagrams"])

PAYLOAD_TOO_LARGE = 413


@router.post("/reduce", response_model=DiagramSchema)
async def reduce_diagram(
    body: DiagramSchema,
    service: ReductionService = Depends(reduction_service_dep),
    settings: Settings = Depends(settings_dep),
) -> DiagramSchema:
    # The core has no size limit of its own; caps are enforced here.
    if settings.max_nodes is not None and len(body.nodes) > settings.max_nodes:
        raise HTTPException(
            status_code=PAYLOAD_TOO_LARGE,
            detail=f"Diagram has {len(body.nodes)} nodes; limit is {settings.max_nodes}",
        )
    if settings.max_edges is not None and len(body.edges) > settings.max_edges:
        raise HTTPException(
            status_code=PAYLOAD_TOO_LARGE,
            detail=f"Diagram has {len(body.edges)} edges; limit is {settings.max_edges}",
        )

    # Reduction is CPU-bound and synchronous; keep it off the event loop.
    result = await run_in_threadpool(service.reduce, body.to_graph())
    return DiagramSchema.from_graph(result.graph)


# --- Module Notes -----------------------------------------------------------
# Failures raised by the core propagate to the handlers in `bpm_reducer.api.errors`.
