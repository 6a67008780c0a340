"""Pytest configuration for ray tracer tests.

Shared fixtures and helpers: the default two-sphere world, a recording
shape that remembers the object-space ray it was given, and a pattern that
returns its own coordinates as a color.
"""

import numpy as np
import pytest

from patterns import Pattern
from surfaces.bounds import BoundingBox
from surfaces.shape import Shape
from tuples import color, point, vector
from world import default_world


def assert_color(actual, expected, tol=1e-4):
    assert np.allclose(actual, expected, rtol=0.0, atol=tol), "{} != {}".format(actual, expected)


class RecordingShape(Shape):
    """Shape that records the local ray instead of intersecting it."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.saved_ray = None

    def local_intersect(self, ray):
        self.saved_ray = ray
        return []

    def local_normal_at(self, local_point, hit=None):
        return vector(local_point.x, local_point.y, local_point.z)

    def bounds(self):
        return BoundingBox(point(-1, -1, -1), point(1, 1, 1))


class CoordinatePattern(Pattern):
    """Pattern whose color is the pattern-space point itself."""

    def pattern_at(self, pattern_point):
        return color(pattern_point.x, pattern_point.y, pattern_point.z)


@pytest.fixture
def world():
    return default_world()
