import math

from intersections import Intersection
from scene_settings import EPSILON
from surfaces.bounds import BoundingBox
from surfaces.kernels import solve_quadratic
from surfaces.shape import Shape
from tuples import point, vector


def check_cap(ray, t, radius=1.0):
    """True when the ray at t lies within `radius` of the y axis."""
    x = ray.origin.x + t * ray.direction.x
    z = ray.origin.z + t * ray.direction.z
    return x * x + z * z <= radius * radius


class Cylinder(Shape):
    """
    Radius-1 cylinder around the y axis.

    The cylinder is truncated to minimum < y < maximum (infinite by default)
    and, when closed, capped at both ends.
    """

    def __init__(self, minimum=-math.inf, maximum=math.inf, closed=False, **kwargs):
        super().__init__(**kwargs)
        self.minimum = minimum
        self.maximum = maximum
        self.closed = closed

    def local_intersect(self, ray):
        o, d = ray.origin, ray.direction
        xs = []

        a = d.x * d.x + d.z * d.z
        # A ray parallel to the y axis can only hit the caps
        if abs(a) >= EPSILON:
            b = 2.0 * (o.x * d.x + o.z * d.z)
            c = o.x * o.x + o.z * o.z - 1.0
            found, t0, t1 = solve_quadratic(a, b, c)
            if not found:
                return []

            for t in (t0, t1):
                y = o.y + t * d.y
                if self.minimum < y < self.maximum:
                    xs.append(Intersection(t, self))

        xs.extend(self._intersect_caps(ray))
        return xs

    def _intersect_caps(self, ray):
        if not self.closed or abs(ray.direction.y) < EPSILON:
            return []

        xs = []
        for limit in (self.minimum, self.maximum):
            t = (limit - ray.origin.y) / ray.direction.y
            if check_cap(ray, t):
                xs.append(Intersection(t, self))
        return xs

    def local_normal_at(self, local_point, hit=None):
        dist = local_point.x * local_point.x + local_point.z * local_point.z

        if dist < 1 and local_point.y >= self.maximum - EPSILON:
            return vector(0, 1, 0)
        if dist < 1 and local_point.y <= self.minimum + EPSILON:
            return vector(0, -1, 0)
        return vector(local_point.x, 0, local_point.z)

    def bounds(self):
        return BoundingBox(point(-1, self.minimum, -1), point(1, self.maximum, 1))
