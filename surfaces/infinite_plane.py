import math

from intersections import Intersection
from scene_settings import EPSILON
from surfaces.bounds import BoundingBox
from surfaces.shape import Shape
from tuples import point, vector


class InfinitePlane(Shape):
    """The xz plane (y = 0) in object space, normal pointing up."""

    def local_intersect(self, ray):
        """Compute ray-plane intersection. Parallel and coplanar rays miss."""
        denom = ray.direction.y
        if abs(denom) < EPSILON:
            return []

        t = -ray.origin.y / denom
        return [Intersection(t, self)]

    def local_normal_at(self, local_point, hit=None):
        return vector(0, 1, 0)

    def bounds(self):
        return BoundingBox(point(-math.inf, 0, -math.inf), point(math.inf, 0, math.inf))
