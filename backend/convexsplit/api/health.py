"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from convexsplit.engine.registry import get_registry
from convexsplit.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        shape_kinds=[spec.kind.value for spec in get_registry().all()],
    )
