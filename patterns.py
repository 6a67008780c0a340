import math

import numpy as np

from matrices import identity


class Pattern:
    """Base pattern. Subclasses map a pattern-space point to a color.

    The pattern's own transform sits on top of the shape's, so a stripe can
    be scaled or rotated independently of the object it is painted on.
    """

    def __init__(self, transform=None):
        self.transform = transform if transform is not None else identity()

    @property
    def transform(self):
        return self._transform

    @transform.setter
    def transform(self, matrix):
        inverse = matrix.inverse()
        self._transform = matrix
        self.inverse = inverse

    def pattern_at(self, pattern_point):
        raise NotImplementedError

    def pattern_at_shape(self, shape, world_point):
        object_point = shape.world_to_object(world_point)
        return self.color_at(object_point)

    def color_at(self, object_point):
        """Color at a point given in the space this pattern is applied to."""
        return self.pattern_at(self.inverse @ object_point)


def _as_pattern(value):
    if isinstance(value, Pattern):
        return value
    return SolidPattern(value)


class SolidPattern(Pattern):
    def __init__(self, color, **kwargs):
        super().__init__(**kwargs)
        self.color = np.array(color, dtype=np.float64)

    def pattern_at(self, pattern_point):
        return self.color.copy()


class _TwoColorPattern(Pattern):
    """Alternates between two colors; either may itself be a pattern (nested patterns)."""

    def __init__(self, a, b, **kwargs):
        super().__init__(**kwargs)
        self.a = _as_pattern(a)
        self.b = _as_pattern(b)


class StripePattern(_TwoColorPattern):
    def pattern_at(self, pattern_point):
        if math.floor(pattern_point.x) % 2 == 0:
            return self.a.color_at(pattern_point)
        return self.b.color_at(pattern_point)


class GradientPattern(_TwoColorPattern):
    """Linear blend from a to b along x, repeating every unit."""

    def pattern_at(self, pattern_point):
        ca = self.a.color_at(pattern_point)
        cb = self.b.color_at(pattern_point)
        fraction = pattern_point.x - math.floor(pattern_point.x)
        return ca + (cb - ca) * fraction


class RingPattern(_TwoColorPattern):
    def pattern_at(self, pattern_point):
        distance = math.sqrt(pattern_point.x ** 2 + pattern_point.z ** 2)
        if math.floor(distance) % 2 == 0:
            return self.a.color_at(pattern_point)
        return self.b.color_at(pattern_point)


class CheckersPattern(_TwoColorPattern):
    """3D checkers: alternates in unit cubes along all three axes."""

    def pattern_at(self, pattern_point):
        total = (math.floor(pattern_point.x) + math.floor(pattern_point.y)
                 + math.floor(pattern_point.z))
        if total % 2 == 0:
            return self.a.color_at(pattern_point)
        return self.b.color_at(pattern_point)


class BlendedPattern(_TwoColorPattern):
    """Average of two patterns evaluated at the same point."""

    def pattern_at(self, pattern_point):
        return (self.a.color_at(pattern_point) + self.b.color_at(pattern_point)) / 2.0
