from __future__ import annotations

import logging
from numbers import Real
from typing import List, Sequence

import numpy as np

from kernel_settings import count, resolve_tolerance
from typings.tuple4 import Tuple4
from utils.errors import DimensionMismatchError, NotInvertibleError
from utils.vector_operations import all_approx_equal

logger = logging.getLogger(__name__)


class Matrix:
    """Immutable grid of floats.

    ``width`` is the number of rows and ``height`` the number of columns, so a
    tuple multiplied as a column is a 4x1 matrix. Entries live in a private
    flat array where ``(row, col)`` maps to ``row * height + col``.
    """

    __slots__ = ("_width", "_height", "_data")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, width: int, height: int, data: Sequence[float] | np.ndarray) -> None:
        width = int(width)
        height = int(height)
        if width <= 0 or height <= 0:
            raise DimensionMismatchError(f"Matrix dimensions must be positive, got {width}x{height}")
        flat = np.array(data, dtype=float).reshape(-1)
        if flat.size != width * height:
            raise DimensionMismatchError(
                f"Expected {width * height} values for a {width}x{height} matrix, got {flat.size}"
            )
        flat.setflags(write=False)
        self._width: int = width
        self._height: int = height
        self._data: np.ndarray = flat

    @classmethod
    def of(cls, width: int, height: int, data: Sequence[float] | np.ndarray) -> Matrix:
        return cls(width, height, data)

    @classmethod
    def zeroed(cls, width: int, height: int) -> Matrix:
        return cls(width, height, np.zeros(int(width) * int(height), dtype=float))

    @classmethod
    def identity(cls, size: int) -> Matrix:
        return cls(size, size, np.eye(int(size), dtype=float))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> Matrix:
        try:
            grid = np.asarray(rows, dtype=float)
        except ValueError as error:
            raise DimensionMismatchError("Rows must form a rectangular grid") from error
        if grid.ndim != 2:
            raise DimensionMismatchError("Rows must form a rectangular grid")
        return cls(grid.shape[0], grid.shape[1], grid)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def is_square(self) -> bool:
        return self._width == self._height

    def _index(self, row: int, col: int) -> int:
        if not (0 <= row < self._width and 0 <= col < self._height):
            raise IndexError(
                f"Index ({row}, {col}) out of range for matrix of size ({self._width} {self._height})"
            )
        return row * self._height + col

    def _grid(self) -> np.ndarray:
        # Read-only 2D view, internal use only.
        return self._data.reshape(self._width, self._height)

    def get(self, row: int, col: int) -> float:
        return float(self._data[self._index(row, col)])

    def __getitem__(self, position: tuple[int, int]) -> float:
        row, col = position
        return self.get(row, col)

    def with_value(self, row: int, col: int, value: float) -> Matrix:
        data = self._data.copy()
        data[self._index(row, col)] = float(value)
        return Matrix(self._width, self._height, data)

    def values(self) -> List[float]:
        return [float(value) for value in self._data]

    def to_list(self) -> List[List[float]]:
        return self._grid().tolist()

    def transpose(self) -> Matrix:
        return Matrix(self._height, self._width, self._grid().T)

    def submatrix(self, row: int, col: int) -> Matrix:
        self._index(row, col)
        if self._width < 2 or self._height < 2:
            raise DimensionMismatchError("Cannot take a submatrix of a single row or column")
        grid = np.delete(np.delete(self._grid(), row, axis=0), col, axis=1)
        return Matrix(self._width - 1, self._height - 1, grid)

    def _require_square(self, operation: str) -> None:
        if not self.is_square:
            raise DimensionMismatchError(
                f"{operation} requires a square matrix, got {self._width}x{self._height}"
            )

    def determinant(self) -> float:
        self._require_square("determinant")
        if self._width == 1:
            return float(self._data[0])
        if self._width == 2:
            return self.get(0, 0) * self.get(1, 1) - self.get(0, 1) * self.get(1, 0)

        # Cofactor expansion along the first row.
        total = 0.0
        for col in range(self._height):
            entry = self.get(0, col)
            if entry == 0.0:
                continue
            total += entry * self.cofactor(0, col)
        return total

    def minor(self, row: int, col: int) -> float:
        return self.submatrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        minor = self.minor(row, col)
        return -minor if (row + col) % 2 == 1 else minor

    def adjugate(self) -> Matrix:
        self._require_square("adjugate")
        if self._width == 1:
            return Matrix(1, 1, [1.0])
        cofactors = [
            self.cofactor(row, col) for row in range(self._width) for col in range(self._height)
        ]
        return Matrix(self._width, self._height, cofactors).transpose()

    def is_invertible(self, tolerance: float | None = None) -> bool:
        return abs(self.determinant()) > resolve_tolerance(tolerance)

    def inverse(self, tolerance: float | None = None) -> Matrix:
        determinant = self.determinant()
        if abs(determinant) <= resolve_tolerance(tolerance):
            logger.debug("Refusing to invert %dx%d matrix, determinant=%r", self._width, self._height, determinant)
            raise NotInvertibleError(determinant)
        count("matrix_inversions")
        return self.adjugate().divide(determinant)

    def _require_same_shape(self, other: Matrix, operation: str) -> None:
        if self._width != other._width or self._height != other._height:
            raise DimensionMismatchError(
                f"Cannot {operation} matrices of different dimensions "
                f"({self._width}x{self._height} and {other._width}x{other._height})"
            )

    def add(self, other: Matrix) -> Matrix:
        self._require_same_shape(other, "add")
        return Matrix(self._width, self._height, self._data + other._data)

    def subtract(self, other: Matrix) -> Matrix:
        self._require_same_shape(other, "subtract")
        return Matrix(self._width, self._height, self._data - other._data)

    def scale(self, scalar: float) -> Matrix:
        return Matrix(self._width, self._height, self._data * float(scalar))

    def divide(self, scalar: float) -> Matrix:
        if float(scalar) == 0.0:
            raise ZeroDivisionError("Cannot divide a matrix by zero")
        return Matrix(self._width, self._height, self._data / float(scalar))

    def multiply(self, other: Matrix | Tuple4 | float) -> Matrix | Tuple4:
        if isinstance(other, Tuple4):
            return self.multiply_tuple(other)
        if isinstance(other, Real):
            return self.scale(other)
        if not isinstance(other, Matrix):
            raise TypeError(f"Cannot multiply a matrix by {type(other).__name__}")
        if self._height != other._width:
            raise DimensionMismatchError(
                "Number of columns in the first matrix should be equal to number of rows in the second "
                f"({self._width}x{self._height} * {other._width}x{other._height})"
            )
        product = np.matmul(self._grid(), other._grid())
        return Matrix(self._width, other._height, product)

    def multiply_tuple(self, other: Tuple4) -> Tuple4:
        if self._width != 4 or self._height != 4:
            raise DimensionMismatchError(
                f"Cannot multiply a {self._width}x{self._height} matrix with a tuple"
            )
        column = Matrix(4, 1, other.to_array())
        result = self.multiply(column)
        return Tuple4(result.get(0, 0), result.get(1, 0), result.get(2, 0), result.get(3, 0))

    def approx_equal(self, other: Matrix, tolerance: float | None = None) -> bool:
        if self._width != other._width or self._height != other._height:
            return False
        return all_approx_equal(self._data, other._data, tolerance)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.approx_equal(other)

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: Matrix | Tuple4 | float) -> Matrix | Tuple4:
        if not isinstance(other, (Matrix, Tuple4, Real)):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, scalar: float) -> Matrix:
        if not isinstance(scalar, Real):
            return NotImplemented
        return self.scale(scalar)

    def __matmul__(self, other: Matrix | Tuple4) -> Matrix | Tuple4:
        if not isinstance(other, (Matrix, Tuple4)):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, scalar: float) -> Matrix:
        if not isinstance(scalar, Real):
            return NotImplemented
        return self.divide(scalar)

    def __repr__(self) -> str:
        return f"Matrix({self._width}, {self._height}, {self.values()!r})"
