"""POST /api/decompose and /api/hulls - run the decomposition on a boundary."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from convexsplit.config import Settings
from convexsplit.dependencies import get_settings
from convexsplit.engine.errors import QueryError, ShapeError
from convexsplit.engine.shapes.convex_polygon import ConvexPolygonShape
from convexsplit.engine.transform import Transform2D
from convexsplit.models.requests import DecomposeRequest, HullsRequest
from convexsplit.models.responses import DecomposeResponse, ErrorDetail, HullResult, HullsResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def _configured_shape(points: list[list[float]], settings: Settings) -> ConvexPolygonShape:
    shape = ConvexPolygonShape(scaling_factor=settings.scaling_factor)
    try:
        shape.set_data(points)
    except ShapeError as e:
        detail = ErrorDetail(kind=e.kind, message=str(e))
        raise HTTPException(status_code=422, detail=detail.model_dump()) from e
    return shape


@router.post("/decompose", response_model=DecomposeResponse)
async def decompose(
    request: DecomposeRequest,
    settings: Settings = Depends(get_settings),
) -> DecomposeResponse:
    shape = _configured_shape(request.points, settings)
    return DecomposeResponse(
        points=shape.get_data(),
        polygons=[[(float(x), float(y)) for x, y in poly] for poly in shape.polygons],
        shape_count=shape.get_shape_count(request.is_static),
        scaling_factor=shape.scaling_factor,
    )


@router.post("/hulls", response_model=HullsResponse)
async def hulls(
    request: HullsRequest,
    settings: Settings = Depends(get_settings),
) -> HullsResponse:
    shape = _configured_shape(request.points, settings)
    transform = Transform2D(
        x=request.transform.x,
        y=request.transform.y,
        origin=request.transform.origin,
    )

    results: list[HullResult] = []
    for i in range(shape.get_shape_count()):
        try:
            hull = shape.hull(i, transform)
            results.append(HullResult(index=i, vertices=[(float(x), float(y)) for x, y in hull]))
        except QueryError as e:
            logger.info("Hull %d rejected (%s): %s", i, e.kind, e)
            results.append(HullResult(index=i, error=e.kind))

    return HullsResponse(hulls=results, failed=sum(1 for r in results if r.error))
