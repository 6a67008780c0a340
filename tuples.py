import math

import numpy as np

from scene_settings import EPSILON, is_approx


class DegenerateVectorError(ValueError):
    """Raised when normalizing a vector whose magnitude is (nearly) zero."""


class Tuple:
    """A 4-component (x, y, z, w) value: a point when w == 1, a vector when w == 0.

    Arithmetic keeps w in {0, 1}. point + vector and point - vector are points,
    every other combination (including the undefined point + point) is a vector.
    """

    __slots__ = ("x", "y", "z", "w")

    def __init__(self, x, y, z, w):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        self.w = float(w)

    def is_point(self):
        return self.w == 1.0

    def is_vector(self):
        return self.w == 0.0

    def to_array(self):
        return np.array([self.x, self.y, self.z, self.w], dtype=np.float64)

    def __iter__(self):
        return iter((self.x, self.y, self.z, self.w))

    def __add__(self, other):
        w = 1.0 if self.w + other.w == 1.0 else 0.0
        return Tuple(self.x + other.x, self.y + other.y, self.z + other.z, w)

    def __sub__(self, other):
        w = 1.0 if self.w - other.w == 1.0 else 0.0
        return Tuple(self.x - other.x, self.y - other.y, self.z - other.z, w)

    def __neg__(self):
        return Tuple(-self.x, -self.y, -self.z, self.w)

    def __mul__(self, scalar):
        return Tuple(self.x * scalar, self.y * scalar, self.z * scalar, self.w)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        return Tuple(self.x / scalar, self.y / scalar, self.z / scalar, self.w)

    def __eq__(self, other):
        if not isinstance(other, Tuple):
            return NotImplemented
        return (is_approx(self.x, other.x) and is_approx(self.y, other.y)
                and is_approx(self.z, other.z) and is_approx(self.w, other.w))

    __hash__ = None

    def __repr__(self):
        kind = "point" if self.is_point() else "vector" if self.is_vector() else "Tuple"
        if kind == "Tuple":
            return "Tuple({}, {}, {}, {})".format(self.x, self.y, self.z, self.w)
        return "{}({}, {}, {})".format(kind, self.x, self.y, self.z)


def point(x, y, z):
    return Tuple(x, y, z, 1.0)


def vector(x, y, z):
    return Tuple(x, y, z, 0.0)


def color(r, g, b):
    """Colors are plain float arrays so channel math stays in numpy."""
    return np.array([r, g, b], dtype=np.float64)


def magnitude(v):
    return math.sqrt(v.x * v.x + v.y * v.y + v.z * v.z + v.w * v.w)


def normalize(v):
    """Return v scaled to unit length.

    Raises:
        DegenerateVectorError: if the magnitude of v is below EPSILON.
    """
    length = magnitude(v)
    if length < EPSILON:
        raise DegenerateVectorError("cannot normalize near-zero vector {!r}".format(v))
    return Tuple(v.x / length, v.y / length, v.z / length, v.w / length)


def dot(a, b):
    return a.x * b.x + a.y * b.y + a.z * b.z + a.w * b.w


def cross(a, b):
    """Cross product of two vectors (w is ignored, the result is a vector)."""
    return vector(a.y * b.z - a.z * b.y,
                  a.z * b.x - a.x * b.z,
                  a.x * b.y - a.y * b.x)


def reflect(v, n):
    """Reflect direction v around normal n."""
    return v - n * (2.0 * dot(v, n))
