"""Unit tests for the Ray structure."""

import pickle

import pytest

from rays import Ray
from transformations import scaling, translation
from tuples import point, vector


class TestRay:
    def test_create(self):
        origin = point(1, 2, 3)
        direction = vector(4, 5, 6)
        r = Ray(origin, direction)
        assert r.origin == origin
        assert r.direction == direction

    @pytest.mark.parametrize("t, expected", [
        (0, point(2, 3, 4)),
        (1, point(3, 3, 4)),
        (-1, point(1, 3, 4)),
        (2.5, point(4.5, 3, 4)),
    ])
    def test_position(self, t, expected):
        r = Ray(point(2, 3, 4), vector(1, 0, 0))
        assert r.position(t) == expected

    def test_is_immutable(self):
        r = Ray(point(0, 0, 0), vector(0, 0, 1))
        with pytest.raises(AttributeError):
            r.origin = point(1, 1, 1)

    def test_translate(self):
        r = Ray(point(1, 2, 3), vector(0, 1, 0))
        r2 = r.transform(translation(3, 4, 5))
        assert r2.origin == point(4, 6, 8)
        assert r2.direction == vector(0, 1, 0)

    def test_scale(self):
        r = Ray(point(1, 2, 3), vector(0, 1, 0))
        r2 = r.transform(scaling(2, 3, 4))
        assert r2.origin == point(2, 6, 12)
        assert r2.direction == vector(0, 3, 0)

    def test_transform_returns_new_ray(self):
        r = Ray(point(1, 2, 3), vector(0, 1, 0))
        r.transform(translation(3, 4, 5))
        assert r.origin == point(1, 2, 3)

    def test_pickles(self):
        r = Ray(point(1, 2, 3), vector(0, 1, 0))
        copy = pickle.loads(pickle.dumps(r))
        assert copy.origin == r.origin
        assert copy.direction == r.direction
