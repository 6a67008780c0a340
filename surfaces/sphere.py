from intersections import Intersection
from material import Material
from surfaces.bounds import BoundingBox
from surfaces.kernels import solve_quadratic
from surfaces.shape import Shape
from tuples import point, vector


class Sphere(Shape):
    """Unit sphere centred on the object-space origin. Scale and translate it with its transform."""

    def local_intersect(self, ray):
        """Compute ray-sphere intersection using the quadratic formula."""
        o, d = ray.origin, ray.direction
        a = d.x * d.x + d.y * d.y + d.z * d.z
        b = 2.0 * (d.x * o.x + d.y * o.y + d.z * o.z)
        c = o.x * o.x + o.y * o.y + o.z * o.z - 1.0

        found, t0, t1 = solve_quadratic(a, b, c)
        if not found:
            return []
        return [Intersection(t0, self), Intersection(t1, self)]

    def local_normal_at(self, local_point, hit=None):
        return vector(local_point.x, local_point.y, local_point.z)

    def bounds(self):
        return BoundingBox(point(-1, -1, -1), point(1, 1, 1))


def glass_sphere():
    return Sphere(material=Material(transparency=1.0, refractive_index=1.5))
