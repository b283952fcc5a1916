"""
bpm_reducer.api.routers.health

Health and readiness endpoints.

Responsibilities:
- Provide liveness probe (`/healthz`).
- Provide readiness probe (`/readyz`) that runs a minimal reduction end to end.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from bpm_reducer.api.deps import reduction_service_dep
from bpm_reducer.core.models import Edge, Node, NodeType, ProcessGraph
from bpm_reducer.services.reduction_service import ReductionService

router = APIRouter()

_PROBE = ProcessGraph(
    nodes=[
        Node(id="start", name="Start", type=NodeType.START.value),
        Node(id="task", name="Probe", type=NodeType.SERVICE_TASK.value),
        Node(id="end", name="End", type=NodeType.END.value),
    ],
    edges=[Edge(source="start", target="task"), Edge(source="task", target="end")],
)


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    # Liveness: process is up and serving HTTP.
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(service: ReductionService = Depends(reduction_service_dep)) -> dict[str, str]:
    # Readiness: the configured reducer collapses a pass-through step into Start -> End.
    reduced = service.reducer.reduce(_PROBE)
    if reduced.edge_pairs != [("start", "end")]:
        raise RuntimeError("reducer self-check failed")
    return {"status": "ready"}


# --- Module Notes -----------------------------------------------------------
# Kubernetes typically uses /healthz for liveness and /readyz for readiness gating.
