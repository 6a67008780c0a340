import math

from intersections import Intersection
from scene_settings import EPSILON
from surfaces.bounds import BoundingBox
from surfaces.cylinder import check_cap
from surfaces.kernels import solve_quadratic
from surfaces.shape import Shape
from tuples import point, vector


class Cone(Shape):
    """Double-napped cone x^2 + z^2 = y^2, truncated and optionally capped like Cylinder."""

    def __init__(self, minimum=-math.inf, maximum=math.inf, closed=False, **kwargs):
        super().__init__(**kwargs)
        self.minimum = minimum
        self.maximum = maximum
        self.closed = closed

    def local_intersect(self, ray):
        o, d = ray.origin, ray.direction
        a = d.x * d.x - d.y * d.y + d.z * d.z
        b = 2.0 * (o.x * d.x - o.y * d.y + o.z * d.z)
        c = o.x * o.x - o.y * o.y + o.z * o.z

        xs = []
        if abs(a) < EPSILON:
            # Ray parallel to one of the halves: a single hit on the other
            if abs(b) >= EPSILON:
                xs.extend(self._within_limits(ray, [-c / (2.0 * b)]))
        else:
            found, t0, t1 = solve_quadratic(a, b, c)
            if found:
                xs.extend(self._within_limits(ray, [t0, t1]))

        xs.extend(self._intersect_caps(ray))
        return xs

    def _within_limits(self, ray, ts):
        xs = []
        for t in ts:
            y = ray.origin.y + t * ray.direction.y
            if self.minimum < y < self.maximum:
                xs.append(Intersection(t, self))
        return xs

    def _intersect_caps(self, ray):
        if not self.closed or abs(ray.direction.y) < EPSILON:
            return []

        xs = []
        # The cap radius equals |y| at the cap
        for limit in (self.minimum, self.maximum):
            t = (limit - ray.origin.y) / ray.direction.y
            if check_cap(ray, t, abs(limit)):
                xs.append(Intersection(t, self))
        return xs

    def local_normal_at(self, local_point, hit=None):
        x, y, z = local_point.x, local_point.y, local_point.z
        dist = x * x + z * z

        if dist < self.maximum * self.maximum and y >= self.maximum - EPSILON:
            return vector(0, 1, 0)
        if dist < self.minimum * self.minimum and y <= self.minimum + EPSILON:
            return vector(0, -1, 0)

        normal_y = math.sqrt(dist)
        if y > 0:
            normal_y = -normal_y
        return vector(x, normal_y, z)

    def bounds(self):
        limit = max(abs(self.minimum), abs(self.maximum))
        return BoundingBox(point(-limit, self.minimum, -limit), point(limit, self.maximum, limit))
