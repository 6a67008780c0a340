import numpy as np


# Tolerance shared by every floating point comparison and surface offset
EPSILON = 0.0001

# Default remaining depth for reflected and refracted rays
MAX_RECURSIONS = 5


def is_approx(a, b, eps=None):
    """Return True when a and b differ by no more than eps (EPSILON by default)."""
    # equal infinities subtract to NaN
    return a == b or abs(a - b) <= (EPSILON if eps is None else eps)


class SceneSettings:
    def __init__(self, background_color=(0.0, 0.0, 0.0), max_recursions=MAX_RECURSIONS):
        if int(max_recursions) != max_recursions or max_recursions < 0:
            raise ValueError("max_recursions must be a non-negative integer, got {}".format(max_recursions))
        self.background_color = np.array(background_color, dtype=np.float64)
        self.max_recursions = int(max_recursions)
