from __future__ import annotations

from dataclasses import dataclass

from typings.tuple4 import Tuple4
from utils.matrix import Matrix


@dataclass(frozen=True, slots=True)
class Ray:
    origin: Tuple4
    direction: Tuple4

    def position(self, t: float) -> Tuple4:
        return self.origin.add(self.direction.scale(t))

    def transform(self, matrix: Matrix) -> Ray:
        """Moves the ray into the space described by matrix, e.g. an object's inverse transform."""
        return Ray(origin=matrix.multiply_tuple(self.origin), direction=matrix.multiply_tuple(self.direction))
