"""Tests for Transform2D."""

import math

import numpy as np
import pytest

from convexsplit.engine.transform import Transform2D


def test_identity():
    pts = np.array([(1.0, 2.0), (-3.0, 4.0)])
    np.testing.assert_array_equal(Transform2D.identity().xform(pts), pts)


def test_components():
    t = Transform2D.from_components(rotation=math.pi / 2, scale=(2.0, 2.0), translation=(1.0, 1.0))
    out = t.xform(np.array([(1.0, 0.0), (0.0, 1.0)]))
    np.testing.assert_allclose(out, [(1.0, 3.0), (-1.0, 1.0)], atol=1e-12)
    assert t.basis_scale() == pytest.approx(2.0)


def test_basis_scale_ignores_mirroring():
    t = Transform2D(x=(-3.0, 0.0), y=(0.0, 3.0))
    assert t.basis_scale() == pytest.approx(3.0)
