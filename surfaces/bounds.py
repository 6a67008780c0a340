import math

from surfaces.kernels import check_axis
from tuples import point


class BoundingBox:
    """Axis-aligned box used to skip whole groups a ray cannot reach.

    A fresh box is empty (min at +inf, max at -inf) and grows as points and
    other boxes are added.
    """

    def __init__(self, minimum=None, maximum=None):
        self.min = minimum if minimum is not None else point(math.inf, math.inf, math.inf)
        self.max = maximum if maximum is not None else point(-math.inf, -math.inf, -math.inf)

    def __repr__(self):
        return "BoundingBox({!r}, {!r})".format(self.min, self.max)

    def is_finite(self):
        return all(math.isfinite(c) for c in (self.min.x, self.min.y, self.min.z,
                                              self.max.x, self.max.y, self.max.z))

    def add_point(self, p):
        self.min = point(min(self.min.x, p.x), min(self.min.y, p.y), min(self.min.z, p.z))
        self.max = point(max(self.max.x, p.x), max(self.max.y, p.y), max(self.max.z, p.z))

    def merge(self, other):
        if other.is_empty():
            return
        self.add_point(other.min)
        self.add_point(other.max)

    def contains_point(self, p):
        return (self.min.x <= p.x <= self.max.x
                and self.min.y <= p.y <= self.max.y
                and self.min.z <= p.z <= self.max.z)

    def contains_box(self, other):
        return self.contains_point(other.min) and self.contains_point(other.max)

    def transform(self, matrix):
        """Return the axis-aligned box enclosing this box after transforming it.

        Boxes with an infinite extent (planes) become fully infinite, since
        multiplying infinities through a rotation produces NaNs.
        """
        if self.is_empty():
            return BoundingBox()
        if not self.is_finite():
            return BoundingBox(point(-math.inf, -math.inf, -math.inf),
                               point(math.inf, math.inf, math.inf))

        corners = [point(x, y, z)
                   for x in (self.min.x, self.max.x)
                   for y in (self.min.y, self.max.y)
                   for z in (self.min.z, self.max.z)]
        box = BoundingBox()
        for corner in corners:
            box.add_point(matrix @ corner)
        return box

    def is_empty(self):
        return self.min.x > self.max.x or self.min.y > self.max.y or self.min.z > self.max.z

    def intersects(self, ray):
        if self.is_empty():
            return False
        o, d = ray.origin, ray.direction
        xtmin, xtmax = check_axis(o.x, d.x, self.min.x, self.max.x)
        ytmin, ytmax = check_axis(o.y, d.y, self.min.y, self.max.y)
        ztmin, ztmax = check_axis(o.z, d.z, self.min.z, self.max.z)

        tmin = max(xtmin, ytmin, ztmin)
        tmax = min(xtmax, ytmax, ztmax)
        return tmin <= tmax
