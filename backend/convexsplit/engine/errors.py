"""Shape errors.

Ingestion errors abort ``set_data`` and reach the caller. Query errors are
caught by the shape and turn into "no shape this step".
"""

from __future__ import annotations


class ShapeError(ValueError):
    """Base class for every geometry rejection."""

    kind = "shape_error"


class IngestionError(ShapeError):
    kind = "ingestion_error"


class QueryError(ShapeError):
    kind = "query_error"


class InvalidInputType(IngestionError):
    kind = "invalid_input_type"


class TooFewPoints(IngestionError):
    kind = "too_few_points"


class SegmentationFailure(IngestionError):
    kind = "segmentation_failure"


class DegenerateSkinOffset(QueryError):
    kind = "degenerate_skin_offset"


class HullConstructionFailure(QueryError):
    kind = "hull_construction_failure"


class NativeConstructionRejected(QueryError):
    kind = "native_construction_rejected"
