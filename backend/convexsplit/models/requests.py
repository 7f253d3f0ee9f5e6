"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class TransformModel(BaseModel):
    x: tuple[float, float] = Field(default=(1.0, 0.0), description="Basis x column")
    y: tuple[float, float] = Field(default=(0.0, 1.0), description="Basis y column")
    origin: tuple[float, float] = Field(default=(0.0, 0.0), description="Translation")


class DecomposeRequest(BaseModel):
    points: list[list[float]] = Field(..., description="Closed boundary as [x, y] pairs")
    is_static: bool = Field(default=False, description="Count shapes for a static body")


class HullsRequest(BaseModel):
    points: list[list[float]] = Field(..., description="Closed boundary as [x, y] pairs")
    transform: TransformModel = Field(
        default_factory=TransformModel,
        description="Transform applied to every polygon before hull extraction",
    )
