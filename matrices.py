import numpy as np

from scene_settings import EPSILON
from tuples import Tuple


class NonInvertibleMatrixError(ValueError):
    """Raised when inverting a matrix whose determinant is (nearly) zero."""


class Matrix:
    """A 4x4 float matrix.

    `a @ b` composes two matrices (b is applied first) and `m @ t` applies
    the matrix to a Tuple.
    """

    __slots__ = ("data",)

    def __init__(self, rows):
        self.data = np.array(rows, dtype=np.float64)
        if self.data.shape != (4, 4):
            raise ValueError("Matrix must be 4x4, got shape {}".format(self.data.shape))

    def __getitem__(self, index):
        return float(self.data[index])

    def __matmul__(self, other):
        if isinstance(other, Matrix):
            return Matrix(self.data @ other.data)
        if isinstance(other, Tuple):
            x, y, z, w = self.data @ other.to_array()
            # inverted matrices carry round-off into the last row
            if abs(w - round(w)) < EPSILON:
                w = round(w)
            return Tuple(x, y, z, w)
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return bool(np.allclose(self.data, other.data, rtol=0.0, atol=EPSILON))

    __hash__ = None

    def __repr__(self):
        return "Matrix({})".format(self.data.tolist())

    def transpose(self):
        return Matrix(self.data.T)

    def determinant(self):
        return float(np.linalg.det(self.data))

    def is_invertible(self):
        return abs(self.determinant()) >= EPSILON

    def inverse(self):
        """Return the inverse matrix.

        The determinant is compared against EPSILON in absolute terms, so a
        uniform scale below about 0.0464 (0.0464 ** 3 ~ EPSILON) is rejected
        even though it is mathematically invertible. Model tiny objects in
        larger units instead.

        Raises:
            NonInvertibleMatrixError: if |det| < EPSILON.
        """
        det = self.determinant()
        if abs(det) < EPSILON:
            raise NonInvertibleMatrixError("matrix is not invertible (det={})".format(det))
        return Matrix(np.linalg.inv(self.data))


def identity():
    return Matrix(np.identity(4))
