from intersections import Intersection
from scene_settings import EPSILON
from surfaces.bounds import BoundingBox
from surfaces.shape import Shape
from tuples import cross, dot, normalize


class Triangle(Shape):
    """Flat triangle through three object-space points."""

    def __init__(self, p1, p2, p3, **kwargs):
        super().__init__(**kwargs)
        self.p1 = p1
        self.p2 = p2
        self.p3 = p3
        self.e1 = p2 - p1
        self.e2 = p3 - p1
        self.normal = normalize(cross(self.e2, self.e1))

    def local_intersect(self, ray):
        """Moller-Trumbore intersection. Records (u, v) for smooth shading."""
        dir_cross_e2 = cross(ray.direction, self.e2)
        det = dot(self.e1, dir_cross_e2)
        if abs(det) < EPSILON:
            return []

        f = 1.0 / det
        p1_to_origin = ray.origin - self.p1
        u = f * dot(p1_to_origin, dir_cross_e2)
        if u < 0 or u > 1:
            return []

        origin_cross_e1 = cross(p1_to_origin, self.e1)
        v = f * dot(ray.direction, origin_cross_e1)
        if v < 0 or u + v > 1:
            return []

        t = f * dot(self.e2, origin_cross_e1)
        return [Intersection(t, self, u, v)]

    def local_normal_at(self, local_point, hit=None):
        return self.normal

    def bounds(self):
        box = BoundingBox()
        for p in (self.p1, self.p2, self.p3):
            box.add_point(p)
        return box


class SmoothTriangle(Triangle):
    """Triangle whose normal is interpolated from per-vertex normals."""

    def __init__(self, p1, p2, p3, n1, n2, n3, **kwargs):
        super().__init__(p1, p2, p3, **kwargs)
        self.n1 = n1
        self.n2 = n2
        self.n3 = n3

    def local_normal_at(self, local_point, hit=None):
        if hit is None or hit.u is None:
            raise ValueError("SmoothTriangle normals need the hit's (u, v)")
        return self.n2 * hit.u + self.n3 * hit.v + self.n1 * (1 - hit.u - hit.v)
