import math

from matrices import Matrix, identity
from tuples import cross, normalize


def translation(x, y, z):
    return Matrix([[1, 0, 0, x],
                   [0, 1, 0, y],
                   [0, 0, 1, z],
                   [0, 0, 0, 1]])


def scaling(x, y, z):
    return Matrix([[x, 0, 0, 0],
                   [0, y, 0, 0],
                   [0, 0, z, 0],
                   [0, 0, 0, 1]])


def rotation_x(radians):
    c, s = math.cos(radians), math.sin(radians)
    return Matrix([[1, 0, 0, 0],
                   [0, c, -s, 0],
                   [0, s, c, 0],
                   [0, 0, 0, 1]])


def rotation_y(radians):
    c, s = math.cos(radians), math.sin(radians)
    return Matrix([[c, 0, s, 0],
                   [0, 1, 0, 0],
                   [-s, 0, c, 0],
                   [0, 0, 0, 1]])


def rotation_z(radians):
    c, s = math.cos(radians), math.sin(radians)
    return Matrix([[c, -s, 0, 0],
                   [s, c, 0, 0],
                   [0, 0, 1, 0],
                   [0, 0, 0, 1]])


def shearing(xy, xz, yx, yz, zx, zy):
    """Shear each component in proportion to the other two (xy moves x in proportion to y)."""
    return Matrix([[1, xy, xz, 0],
                   [yx, 1, yz, 0],
                   [zx, zy, 1, 0],
                   [0, 0, 0, 1]])


def chain(*transforms):
    """Compose transforms so the first argument is applied first."""
    result = identity()
    for transform in transforms:
        result = transform @ result
    return result


def view_transform(from_point, to_point, up):
    """Orient the world relative to an eye at from_point looking at to_point."""
    forward = normalize(to_point - from_point)
    left = cross(forward, normalize(up))
    true_up = cross(left, forward)
    orientation = Matrix([[left.x, left.y, left.z, 0],
                          [true_up.x, true_up.y, true_up.z, 0],
                          [-forward.x, -forward.y, -forward.z, 0],
                          [0, 0, 0, 1]])
    return orientation @ translation(-from_point.x, -from_point.y, -from_point.z)
