from __future__ import annotations


class KernelError(Exception):
    """Base class for every failure raised by the geometry kernel."""


class DimensionMismatchError(KernelError, ValueError):
    """Matrix shapes are incompatible for the requested operation."""


class NotInvertibleError(KernelError, ArithmeticError):
    """The determinant is within tolerance of zero.

    Degenerate transforms are a normal occurrence, so callers are expected to
    catch this and reject the transform.
    """

    def __init__(self, determinant: float) -> None:
        super().__init__(f"Matrix is not invertible (determinant={determinant!r})")
        self.determinant: float = float(determinant)


class DegenerateVectorError(KernelError, ValueError):
    """A zero-length tuple was used where a direction is required."""
