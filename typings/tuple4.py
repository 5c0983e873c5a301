from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import Iterator, Sequence

import numpy as np

from utils.vector_operations import (
    all_approx_equal,
    normalize_vector,
    vector_cross,
    vector_dot,
    vector_length,
)


@dataclass(frozen=True, slots=True, eq=False)
class Tuple4:
    """Homogeneous coordinate. w == 1.0 marks a point, w == 0.0 a vector."""

    x: float
    y: float
    z: float
    w: float

    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def new(cls, x: float, y: float, z: float, w: float) -> Tuple4:
        return cls(float(x), float(y), float(z), float(w))

    @classmethod
    def from_array(cls, values: Sequence[float] | np.ndarray) -> Tuple4:
        array = np.asarray(values, dtype=float)
        if array.shape != (4,):
            raise ValueError(f"Expected 4 components, got shape {array.shape}")
        return cls(float(array[0]), float(array[1]), float(array[2]), float(array[3]))

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z, self.w], dtype=float)

    def is_point(self) -> bool:
        return self.w == 1.0

    def is_vector(self) -> bool:
        return self.w == 0.0

    def add(self, other: Tuple4) -> Tuple4:
        return Tuple4(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def subtract(self, other: Tuple4) -> Tuple4:
        return Tuple4(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def negate(self) -> Tuple4:
        return Tuple4(-self.x, -self.y, -self.z, -self.w)

    def scale(self, scalar: float) -> Tuple4:
        return Tuple4(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    def divide(self, scalar: float) -> Tuple4:
        return Tuple4(self.x / scalar, self.y / scalar, self.z / scalar, self.w / scalar)

    def dot(self, other: Tuple4) -> float:
        # Sums all four components; only meaningful between vectors.
        return vector_dot(self.to_array(), other.to_array())

    def cross(self, other: Tuple4) -> Tuple4:
        cross_product = vector_cross(self.to_array(), other.to_array())
        return vector(cross_product[0], cross_product[1], cross_product[2])

    def magnitude(self) -> float:
        return vector_length(self.to_array())

    def normalize(self) -> Tuple4:
        return Tuple4.from_array(normalize_vector(self.to_array()))

    def approx_equal(self, other: Tuple4, tolerance: float | None = None) -> bool:
        return all_approx_equal(self.to_array(), other.to_array(), tolerance)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple4):
            return NotImplemented
        return self.approx_equal(other)

    def __getitem__(self, index: int) -> float:
        if 0 <= index < 4:
            return (self.x, self.y, self.z, self.w)[index]
        raise IndexError(f"Tuple4 index {index} out of range")

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __len__(self) -> int:
        return 4

    def __add__(self, other: Tuple4) -> Tuple4:
        if not isinstance(other, Tuple4):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Tuple4) -> Tuple4:
        if not isinstance(other, Tuple4):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> Tuple4:
        return self.negate()

    def __mul__(self, scalar: float) -> Tuple4:
        if not isinstance(scalar, Real):
            return NotImplemented
        return self.scale(scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Tuple4:
        if not isinstance(scalar, Real):
            return NotImplemented
        return self.divide(scalar)


def point(x: float, y: float, z: float) -> Tuple4:
    return Tuple4(float(x), float(y), float(z), 1.0)


def vector(x: float, y: float, z: float) -> Tuple4:
    return Tuple4(float(x), float(y), float(z), 0.0)
