import math

from scene_settings import EPSILON
from tuples import dot, reflect


class Intersection:
    """A ray/shape hit record: the ray parameter t and the shape it hit.

    Triangles also record the barycentric (u, v) of the hit so smooth
    triangles can interpolate their vertex normals.
    """

    __slots__ = ("t", "object", "u", "v")

    def __init__(self, t, obj, u=None, v=None):
        self.t = float(t)
        self.object = obj
        self.u = u
        self.v = v

    def __lt__(self, other):
        return self.t < other.t

    def __repr__(self):
        return "Intersection({}, {!r})".format(self.t, self.object)


def intersections(*xs):
    """Return the intersections as a list sorted ascending by t."""
    return sorted(xs, key=lambda i: i.t)


def hit(xs):
    """Return the intersection with the lowest non-negative t, or None."""
    best = None
    for i in xs:
        if i.t >= 0 and (best is None or i.t < best.t):
            best = i
    return best


class Computations:
    """Precomputed shading state for one intersection."""

    def __init__(self, t, obj, point, eyev, normalv, reflectv, inside, n1=1.0, n2=1.0):
        self.t = t
        self.object = obj
        self.point = point
        self.eyev = eyev
        self.normalv = normalv
        self.reflectv = reflectv
        self.inside = inside
        self.n1 = n1
        self.n2 = n2

        # Offsets along the normal keep secondary rays off the surface they start on
        self.over_point = point + normalv * EPSILON
        self.under_point = point - normalv * EPSILON


def _refractive_indices(hit_, xs):
    """Walk the sorted intersections tracking which objects the ray is inside."""
    n1 = n2 = 1.0
    containers = []
    for i in xs:
        if i is hit_:
            n1 = containers[-1].material.refractive_index if containers else 1.0

        if i.object in containers:
            containers.remove(i.object)
        else:
            containers.append(i.object)

        if i is hit_:
            n2 = containers[-1].material.refractive_index if containers else 1.0
            break
    return n1, n2


def prepare_computations(hit_, ray, xs=None):
    """
    Derive the shading state for an intersection.

    Args:
        hit_: the Intersection being shaded.
        ray: the ray that produced it.
        xs: every intersection along the ray, sorted by t. Needed to work out
            the refractive indices on both sides of the surface; defaults to
            [hit_].

    Returns:
        A Computations instance.
    """
    point = ray.position(hit_.t)
    eyev = -ray.direction
    normalv = hit_.object.normal_at(point, hit_)

    inside = dot(normalv, eyev) < 0
    if inside:
        normalv = -normalv

    n1, n2 = _refractive_indices(hit_, xs if xs is not None else [hit_])

    reflectv = reflect(ray.direction, normalv)
    return Computations(hit_.t, hit_.object, point, eyev, normalv, reflectv, inside, n1, n2)


def schlick(comps):
    """Schlick's approximation of the Fresnel reflectance at the surface."""
    cos = dot(comps.eyev, comps.normalv)

    if comps.n1 > comps.n2:
        n = comps.n1 / comps.n2
        sin2_t = n * n * (1.0 - cos * cos)
        if sin2_t > 1.0:
            return 1.0
        cos = math.sqrt(1.0 - sin2_t)

    r0 = ((comps.n1 - comps.n2) / (comps.n1 + comps.n2)) ** 2
    return r0 + (1 - r0) * (1 - cos) ** 5
