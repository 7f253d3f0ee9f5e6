"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    shape_kinds: list[str] = Field(default_factory=list)


class DecomposeResponse(BaseModel):
    points: list[tuple[float, float]] = Field(default_factory=list)
    polygons: list[list[tuple[float, float]]] = Field(default_factory=list)
    shape_count: int = 0
    scaling_factor: float = 1.0


class HullResult(BaseModel):
    index: int
    vertices: list[tuple[float, float]] | None = None
    error: str | None = None


class HullsResponse(BaseModel):
    hulls: list[HullResult] = Field(default_factory=list)
    failed: int = 0


class ErrorDetail(BaseModel):
    kind: str
    message: str
