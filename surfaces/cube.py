from intersections import Intersection
from surfaces.bounds import BoundingBox
from surfaces.kernels import check_axis
from surfaces.shape import Shape
from tuples import point, vector


class Cube(Shape):
    """Axis-aligned cube spanning -1..1 on every axis in object space."""

    def local_intersect(self, ray):
        """Compute ray-cube intersection using the slab method."""
        o, d = ray.origin, ray.direction
        xtmin, xtmax = check_axis(o.x, d.x, -1.0, 1.0)
        ytmin, ytmax = check_axis(o.y, d.y, -1.0, 1.0)
        ztmin, ztmax = check_axis(o.z, d.z, -1.0, 1.0)

        tmin = max(xtmin, ytmin, ztmin)
        tmax = min(xtmax, ytmax, ztmax)

        if tmin > tmax:
            return []
        return [Intersection(tmin, self), Intersection(tmax, self)]

    def local_normal_at(self, local_point, hit=None):
        # The face is the axis with the largest absolute component
        ax, ay, az = abs(local_point.x), abs(local_point.y), abs(local_point.z)
        maxc = max(ax, ay, az)

        if maxc == ax:
            return vector(local_point.x, 0, 0)
        if maxc == ay:
            return vector(0, local_point.y, 0)
        return vector(0, 0, local_point.z)

    def bounds(self):
        return BoundingBox(point(-1, -1, -1), point(1, 1, 1))
