"""Tests for the skin offset."""

import numpy as np
import pytest

from convexsplit.engine.config import DecompositionConfig
from convexsplit.engine.errors import DegenerateSkinOffset
from convexsplit.engine.skin import remove_polygon_skin, skin_radius
from tests.conftest import CENTERED_SQUARE


def test_skin_radius_in_world_units():
    assert skin_radius(100.0, DecompositionConfig()) == pytest.approx(1.0)


def test_points_move_half_radius_toward_origin():
    pts = np.array([(10.0, 0.0), (0.0, -4.0), (3.0, 4.0)])
    out = remove_polygon_skin(pts, 1.0)
    np.testing.assert_allclose(out, [(9.5, 0.0), (0.0, -3.5), (2.7, 3.6)])


def test_centered_square_shrinks_uniformly():
    pts = np.array(CENTERED_SQUARE)
    out = remove_polygon_skin(pts, 1.0)
    lengths = np.hypot(out[:, 0], out[:, 1])
    np.testing.assert_allclose(lengths, np.hypot(50.0, 50.0) - 0.5)


def test_origin_point_fails():
    pts = np.array([(0.0, 0.0), (10.0, 0.0), (0.0, 10.0)])
    with pytest.raises(DegenerateSkinOffset):
        remove_polygon_skin(pts, 1.0)


def test_no_nan_for_tiny_vectors():
    pts = np.array([(1e-9, 0.0), (10.0, 0.0), (0.0, 10.0)])
    out = remove_polygon_skin(pts, 1.0)
    assert np.all(np.isfinite(out))


def test_input_is_not_mutated():
    pts = np.array(CENTERED_SQUARE)
    pts.flags.writeable = False
    remove_polygon_skin(pts, 1.0)
    np.testing.assert_array_equal(pts, np.array(CENTERED_SQUARE))
