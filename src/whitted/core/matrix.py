"""Square matrices and affine transform factories.

Matrices are backed by NumPy arrays but invert by cofactor expansion so that
a singular matrix is detected from an exact zero determinant rather than a
floating-point pivot heuristic.

Composition follows the usual column-vector convention: in ``A @ B @ p`` the
right-most transform is applied first. The fluent helpers (``translate``,
``scale``, ``rotate_x`` ...) pre-multiply, so a chain reads in the order the
transforms are applied:

    >>> from math import pi
    >>> from src.whitted.core.matrix import Matrix
    >>> m = Matrix.identity().rotate_x(pi / 2).scale(5, 5, 5).translate(10, 5, 7)
    >>> # same as translation(10, 5, 7) @ scaling(5, 5, 5) @ rotation_x(pi / 2)
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np
import numpy.typing as npt

from src.whitted.core.tuples import EPSILON, Tuple


class Matrix:
    """A square matrix of size 2, 3 or 4.

    Attributes:
        data: The underlying float64 array of shape (n, n).
    """

    __slots__ = ("data",)

    def __init__(self, rows: Sequence[Sequence[float]] | npt.NDArray[np.float64]) -> None:
        data = np.array(rows, dtype=np.float64)
        if data.ndim != 2 or data.shape[0] != data.shape[1]:
            raise ValueError(f"Matrix must be square, got shape {data.shape}")
        self.data = data

    @classmethod
    def identity(cls, size: int = 4) -> Matrix:
        return cls(np.identity(size, dtype=np.float64))

    @property
    def size(self) -> int:
        return self.data.shape[0]

    def __getitem__(self, index: tuple[int, int]) -> float:
        return float(self.data[index])

    def __matmul__(self, other: Matrix | Tuple) -> Matrix | Tuple:
        if isinstance(other, Tuple):
            return Tuple.from_array(self.data @ other.data)
        if isinstance(other, Matrix):
            return Matrix(self.data @ other.data)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.data.shape != other.data.shape:
            return False
        return bool(np.all(np.abs(self.data - other.data) < EPSILON))

    __hash__ = None  # type: ignore[assignment]

    def transpose(self) -> Matrix:
        return Matrix(self.data.T)

    # =========================================================================
    # Cofactor Expansion
    # =========================================================================

    def submatrix(self, row: int, col: int) -> Matrix:
        """Return a copy with the given row and column removed."""
        return Matrix(np.delete(np.delete(self.data, row, axis=0), col, axis=1))

    def minor(self, row: int, col: int) -> float:
        return self.submatrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        minor = self.minor(row, col)
        return -minor if (row + col) % 2 else minor

    def determinant(self) -> float:
        """Compute the determinant by cofactor expansion along the first row."""
        if self.size == 2:
            d = self.data
            return float(d[0, 0] * d[1, 1] - d[0, 1] * d[1, 0])
        return sum(float(self.data[0, col]) * self.cofactor(0, col) for col in range(self.size))

    def is_invertible(self) -> bool:
        return self.determinant() != 0.0

    def inverse(self) -> Matrix:
        """Invert the matrix by cofactor expansion.

        Returns:
            The inverse matrix.

        Raises:
            ValueError: If the determinant is exactly zero.
        """
        det = self.determinant()
        if det == 0.0:
            raise ValueError(f"Matrix is not invertible:\n{self.data}")

        n = self.size
        result = np.empty((n, n), dtype=np.float64)
        for row in range(n):
            for col in range(n):
                # Transposed placement: the adjugate is the cofactor matrix transposed
                result[col, row] = self.cofactor(row, col) / det
        return Matrix(result)

    # =========================================================================
    # Fluent Chaining (pre-multiplying)
    # =========================================================================

    def translate(self, x: float, y: float, z: float) -> Matrix:
        return translation(x, y, z) @ self

    def scale(self, x: float, y: float, z: float) -> Matrix:
        return scaling(x, y, z) @ self

    def rotate_x(self, radians: float) -> Matrix:
        return rotation_x(radians) @ self

    def rotate_y(self, radians: float) -> Matrix:
        return rotation_y(radians) @ self

    def rotate_z(self, radians: float) -> Matrix:
        return rotation_z(radians) @ self

    def shear(self, xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
        return shearing(xy, xz, yx, yz, zx, zy) @ self

    def __repr__(self) -> str:
        rows = ", ".join("[" + ", ".join(f"{v:g}" for v in row) + "]" for row in self.data)
        return f"Matrix([{rows}])"


IDENTITY = Matrix.identity()


# =============================================================================
# Transform Factories
# =============================================================================


def translation(x: float, y: float, z: float) -> Matrix:
    return Matrix(
        [
            [1, 0, 0, x],
            [0, 1, 0, y],
            [0, 0, 1, z],
            [0, 0, 0, 1],
        ]
    )


def scaling(x: float, y: float, z: float) -> Matrix:
    return Matrix(
        [
            [x, 0, 0, 0],
            [0, y, 0, 0],
            [0, 0, z, 0],
            [0, 0, 0, 1],
        ]
    )


def rotation_x(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    return Matrix(
        [
            [1, 0, 0, 0],
            [0, c, -s, 0],
            [0, s, c, 0],
            [0, 0, 0, 1],
        ]
    )


def rotation_y(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    return Matrix(
        [
            [c, 0, s, 0],
            [0, 1, 0, 0],
            [-s, 0, c, 0],
            [0, 0, 0, 1],
        ]
    )


def rotation_z(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    return Matrix(
        [
            [c, -s, 0, 0],
            [s, c, 0, 0],
            [0, 0, 1, 0],
            [0, 0, 0, 1],
        ]
    )


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    """Create a shearing matrix.

    Each argument moves one coordinate in proportion to another; ``xy`` moves
    x in proportion to y, and so on.
    """
    return Matrix(
        [
            [1, xy, xz, 0],
            [yx, 1, yz, 0],
            [zx, zy, 1, 0],
            [0, 0, 0, 1],
        ]
    )
