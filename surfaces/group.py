from intersections import intersections
from surfaces.bounds import BoundingBox
from surfaces.shape import Shape


def adopt(parent, child):
    if child.parent is not None and child.parent is not parent:
        raise ValueError("{!r} already belongs to {!r}".format(child, child.parent))
    child.parent = parent
    parent.invalidate_bounds()


class Group(Shape):
    """An ordered collection of child shapes sharing the group's transform."""

    def __init__(self, children=(), **kwargs):
        super().__init__(**kwargs)
        self.children = []
        for child in children:
            self.add_child(child)

    def add_child(self, shape):
        adopt(self, shape)
        self.children.append(shape)
        return shape

    def __len__(self):
        return len(self.children)

    def __iter__(self):
        return iter(self.children)

    def local_intersect(self, ray):
        if not self.children or not self.bounds().intersects(ray):
            return []

        xs = []
        for child in self.children:
            xs.extend(child.intersect(ray))
        return intersections(*xs)

    def local_normal_at(self, local_point, hit=None):
        raise TypeError("groups have no surface of their own; ask the child shape for its normal")

    def bounds(self):
        if self._bounds is None:
            box = BoundingBox()
            for child in self.children:
                box.merge(child.parent_space_bounds())
            self._bounds = box
        return self._bounds

    def includes(self, other):
        return any(child.includes(other) for child in self.children)
