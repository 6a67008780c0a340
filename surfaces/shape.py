from material import Material
from matrices import identity
from tuples import normalize, vector


class Shape:
    """Common state and coordinate handling for every surface.

    Each surface works in its own object space: `intersect` moves the ray
    into that space and calls `local_intersect`, `normal_at` asks for
    `local_normal_at` and carries the result back to world space through the
    shape's transform and those of its ancestors.

    `parent` is set by the Group or CSG that owns the shape. It is only used
    to walk transforms outward; the parent owns the child, never the reverse.
    """

    def __init__(self, transform=None, material=None):
        self.parent = None
        self._bounds = None
        self.transform = transform if transform is not None else identity()
        self.material = material if material is not None else Material()

    @property
    def transform(self):
        return self._transform

    @transform.setter
    def transform(self, matrix):
        # inverse() raises NonInvertibleMatrixError, so singular transforms fail here
        inverse = matrix.inverse()
        self._transform = matrix
        self.inverse = inverse
        self.inverse_transpose = inverse.transpose()
        if self.parent is not None:
            self.parent.invalidate_bounds()

    def intersect(self, ray):
        return self.local_intersect(ray.transform(self.inverse))

    def local_intersect(self, ray):
        raise NotImplementedError

    def normal_at(self, world_point, hit=None):
        local_point = self.world_to_object(world_point)
        local_normal = self.local_normal_at(local_point, hit)
        return self.normal_to_world(local_normal)

    def local_normal_at(self, local_point, hit=None):
        raise NotImplementedError

    def world_to_object(self, world_point):
        if self.parent is not None:
            world_point = self.parent.world_to_object(world_point)
        return self.inverse @ world_point

    def normal_to_world(self, normal):
        normal = self.inverse_transpose @ normal
        normal = normalize(vector(normal.x, normal.y, normal.z))
        if self.parent is not None:
            normal = self.parent.normal_to_world(normal)
        return normal

    def bounds(self):
        """Object-space bounding box."""
        raise NotImplementedError

    def parent_space_bounds(self):
        return self.bounds().transform(self.transform)

    def invalidate_bounds(self):
        self._bounds = None
        if self.parent is not None:
            self.parent.invalidate_bounds()

    def includes(self, other):
        return self is other

    def __repr__(self):
        return "{}(transform={!r})".format(type(self).__name__, self.transform)
