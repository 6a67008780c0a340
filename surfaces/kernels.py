import numpy as np
from numba import njit

from scene_settings import EPSILON


# =============================================================================
# Numba JIT-compiled helper functions for hot paths
# =============================================================================

@njit(cache=True)
def solve_quadratic(a, b, c):
    """
    Solve a*t^2 + b*t + c = 0 (JIT-compiled).

    Returns (found, t0, t1) with t0 <= t1. A tangent ray yields two equal roots;
    discriminants within EPSILON below zero count as tangent.
    """
    discriminant = b * b - 4.0 * a * c
    if discriminant < -EPSILON:
        return False, 0.0, 0.0

    sqrt_disc = np.sqrt(max(discriminant, 0.0))
    t0 = (-b - sqrt_disc) / (2.0 * a)
    t1 = (-b + sqrt_disc) / (2.0 * a)
    if t0 > t1:
        t0, t1 = t1, t0
    return True, t0, t1


@njit(cache=True)
def check_axis(origin, direction, minimum, maximum):
    """
    Slab test for one axis (JIT-compiled).

    Returns the (t_min, t_max) interval where the ray lies between the two
    planes. A direction parallel to the slab gives (-inf, inf) when the origin
    lies between the planes (boundaries included) and an empty (inf, -inf)
    interval otherwise.
    """
    if abs(direction) < EPSILON:
        if minimum <= origin <= maximum:
            return -np.inf, np.inf
        return np.inf, -np.inf

    tmin = (minimum - origin) / direction
    tmax = (maximum - origin) / direction

    if tmin > tmax:
        tmin, tmax = tmax, tmin
    return tmin, tmax
