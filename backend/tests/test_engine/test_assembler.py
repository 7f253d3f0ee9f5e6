"""Tests for shape assembly."""

import math

import numpy as np
import pymunk
import pytest

from convexsplit.engine.assembler import (
    assemble_polygon,
    to_physics_units,
    transformed_hull,
    validate_hull,
)
from convexsplit.engine.config import DecompositionConfig
from convexsplit.engine.errors import HullConstructionFailure, NativeConstructionRejected
from convexsplit.engine.native import PymunkShapeFactory
from convexsplit.engine.transform import Transform2D
from tests.conftest import SQUARE_CCW, RecordingFactory

UNIT_SQUARE = np.array([(1.0, 0.0), (1.0, 1.0), (0.0, 1.0), (0.0, 0.0)])


def test_to_physics_units():
    np.testing.assert_allclose(to_physics_units(np.array(SQUARE_CCW), 10.0), UNIT_SQUARE)


def test_transformed_hull_applies_transform_then_units():
    t = Transform2D.from_components(translation=(100.0, 0.0))
    hull = transformed_hull(np.array(SQUARE_CCW), t, 10.0)
    np.testing.assert_allclose(hull, UNIT_SQUARE + (10.0, 0.0))


def test_transformed_hull_with_rotation_stays_counterclockwise():
    t = Transform2D.from_components(rotation=math.pi / 2)
    hull = transformed_hull(np.array(SQUARE_CCW), t, 10.0)
    expected = np.array([(0.0, 0.0), (0.0, 1.0), (-1.0, 1.0), (-1.0, 0.0)])
    assert any(np.allclose(np.roll(hull, -k, axis=0), expected) for k in range(4))


def test_mirror_transform_is_rewound():
    t = Transform2D(x=(-1.0, 0.0), y=(0.0, 1.0))
    hull = transformed_hull(np.array(SQUARE_CCW), t, 10.0)
    validate_hull(hull)


def test_collapsing_transform_fails():
    t = Transform2D(x=(1.0, 0.0), y=(0.0, 0.0))
    with pytest.raises(HullConstructionFailure):
        transformed_hull(np.array(SQUARE_CCW), t, 10.0)


def test_validate_rejects_clockwise():
    with pytest.raises(NativeConstructionRejected):
        validate_hull(UNIT_SQUARE[::-1])


def test_validate_rejects_tiny_area():
    sliver = np.array([(1.0, 0.0), (1.0, 1e-10), (0.0, 0.0)])
    with pytest.raises(NativeConstructionRejected):
        validate_hull(sliver)


def test_validate_rejects_too_many_vertices():
    with pytest.raises(NativeConstructionRejected):
        validate_hull(UNIT_SQUARE, DecompositionConfig(max_polygon_vertices=3))


def test_assemble_passes_engine_radius(factory):
    shape = assemble_polygon(UNIT_SQUARE, DecompositionConfig(), factory)
    assert shape.get_vertices() == [tuple(v) for v in UNIT_SQUARE]
    vertices, radius = factory.polygons[0]
    np.testing.assert_array_equal(vertices, UNIT_SQUARE)
    assert radius == pytest.approx(0.01)


def test_factory_error_is_rejection():
    with pytest.raises(NativeConstructionRejected):
        assemble_polygon(UNIT_SQUARE, DecompositionConfig(), RecordingFactory(reject=True))


def test_dropped_vertices_release_the_shape():
    factory = RecordingFactory(drop_vertex=True)
    with pytest.raises(NativeConstructionRejected):
        assemble_polygon(UNIT_SQUARE, DecompositionConfig(), factory)
    assert len(factory.released) == 1


def test_pymunk_release_detaches_from_space_and_body():
    factory = PymunkShapeFactory()
    shape = factory.polygon(UNIT_SQUARE, 0.01)
    body = pymunk.Body(1.0, 1.0)
    shape.body = body
    space = pymunk.Space()
    space.add(body, shape)

    factory.release(shape)
    assert shape.space is None
    assert shape.body is None
    assert shape not in space.shapes


def test_pymunk_release_of_fresh_shape_is_harmless():
    factory = PymunkShapeFactory()
    shape = factory.polygon(UNIT_SQUARE, 0.01)
    factory.release(shape)
    factory.release(shape)
    assert shape.body is None


def test_pymunk_factory_builds_poly():
    shape = assemble_polygon(UNIT_SQUARE, DecompositionConfig(), PymunkShapeFactory())
    assert isinstance(shape, pymunk.Poly)
    assert len(shape.get_vertices()) == 4
    assert shape.radius == pytest.approx(0.01)
