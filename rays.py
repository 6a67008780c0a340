class Ray:
    """A ray with an origin point and a direction vector. Immutable once built."""

    __slots__ = ("origin", "direction")

    def __init__(self, origin, direction):
        object.__setattr__(self, "origin", origin)
        object.__setattr__(self, "direction", direction)

    def __setattr__(self, name, value):
        raise AttributeError("Ray is immutable")

    def __reduce__(self):
        return (Ray, (self.origin, self.direction))

    def __repr__(self):
        return "Ray({!r}, {!r})".format(self.origin, self.direction)

    def position(self, t):
        """Compute the point along the ray at parameter t."""
        return self.origin + self.direction * t

    def transform(self, matrix):
        """Return a new ray with both origin and direction multiplied by matrix."""
        return Ray(matrix @ self.origin, matrix @ self.direction)
