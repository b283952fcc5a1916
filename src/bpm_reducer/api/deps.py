"""
bpm_reducer.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide dependency functions for settings and the shared reduction service.
- Encapsulate app.state access patterns.
"""

from __future__ import annotations

from fastapi import Request

from bpm_reducer.services.reduction_service import ReductionService
from bpm_reducer.settings import Settings


def settings_dep(request: Request) -> Settings:
    # The app's own settings, not the env-cached ones, so tests can inject overrides.
    return request.app.state.settings  # type: ignore[no-any-return]


def reduction_service_dep(request: Request) -> ReductionService:
    # Created once in `bpm_reducer.api.app.create_app`.
    return request.app.state.reduction_service  # type: ignore[no-any-return]
