from intersections import intersections
from surfaces.bounds import BoundingBox
from surfaces.group import adopt
from surfaces.shape import Shape


UNION = "union"
INTERSECTION = "intersection"
DIFFERENCE = "difference"

OPERATIONS = (UNION, INTERSECTION, DIFFERENCE)


def intersection_allowed(operation, lhit, inl, inr):
    """
    Decide whether a hit on one branch is a surface of the combined solid.

    Args:
        operation: UNION, INTERSECTION or DIFFERENCE.
        lhit: True if the hit is on the left child.
        inl: True if the hit point is inside the left child.
        inr: True if the hit point is inside the right child.
    """
    if operation == UNION:
        return (lhit and not inr) or (not lhit and not inl)
    if operation == INTERSECTION:
        return (lhit and inr) or (not lhit and inl)
    if operation == DIFFERENCE:
        return (lhit and not inr) or (not lhit and inl)
    raise ValueError("Unknown CSG operation: {}".format(operation))


class CSG(Shape):
    """Constructive solid geometry: union, intersection or difference of two shapes."""

    def __init__(self, operation, left, right, **kwargs):
        if operation not in OPERATIONS:
            raise ValueError("Unknown CSG operation: {}".format(operation))
        super().__init__(**kwargs)
        self.operation = operation
        adopt(self, left)
        adopt(self, right)
        self.left = left
        self.right = right

    def filter_intersections(self, xs):
        # Both flags start outside; each hit toggles the side it belongs to
        inl = False
        inr = False
        result = []

        for i in xs:
            lhit = self.left.includes(i.object)
            if intersection_allowed(self.operation, lhit, inl, inr):
                result.append(i)
            if lhit:
                inl = not inl
            else:
                inr = not inr
        return result

    def local_intersect(self, ray):
        if not self.bounds().intersects(ray):
            return []
        xs = intersections(*(self.left.intersect(ray) + self.right.intersect(ray)))
        return self.filter_intersections(xs)

    def local_normal_at(self, local_point, hit=None):
        raise TypeError("CSG shapes have no surface of their own; ask the child shape for its normal")

    def bounds(self):
        if self._bounds is None:
            box = BoundingBox()
            box.merge(self.left.parent_space_bounds())
            box.merge(self.right.parent_space_bounds())
            self._bounds = box
        return self._bounds

    def includes(self, other):
        return self.left.includes(other) or self.right.includes(other)


def union(left, right, **kwargs):
    return CSG(UNION, left, right, **kwargs)


def intersection(left, right, **kwargs):
    return CSG(INTERSECTION, left, right, **kwargs)


def difference(left, right, **kwargs):
    return CSG(DIFFERENCE, left, right, **kwargs)
