from __future__ import annotations

import numpy as np

from kernel_settings import EPSILON, resolve_tolerance
from utils.errors import DegenerateVectorError

__all__ = [
    "EPSILON",
    "approx_equal",
    "all_approx_equal",
    "vector_length",
    "normalize_vector",
    "vector_dot",
    "vector_cross",
]


def approx_equal(a: float, b: float, tolerance: float | None = None) -> bool:
    """Absolute-tolerance float comparison shared by tuples, matrices and intersections."""
    return abs(float(a) - float(b)) <= resolve_tolerance(tolerance)


def all_approx_equal(a: np.ndarray, b: np.ndarray, tolerance: float | None = None) -> bool: #element-wise approx_equal over two arrays
    array_a = np.asarray(a, dtype=float)
    array_b = np.asarray(b, dtype=float)
    if array_a.shape != array_b.shape:
        return False
    return bool(np.all(np.abs(array_a - array_b) <= resolve_tolerance(tolerance)))


def vector_length(v: np.ndarray) -> float: #Euclidean length over every component, w included
    vector_array = np.asarray(v, dtype=float)
    return float(np.linalg.norm(vector_array))


def normalize_vector(v: np.ndarray) -> np.ndarray:
    vector_array = np.asarray(v, dtype=float)
    magnitude = vector_length(vector_array)
    if magnitude == 0.0: # only an exact zero has no direction
        raise DegenerateVectorError("Cannot normalize zero-length vector")
    return vector_array / magnitude


def vector_dot(a: np.ndarray, b: np.ndarray) -> float:
    vector_a = np.asarray(a, dtype=float)
    vector_b = np.asarray(b, dtype=float)
    return float(np.dot(vector_a, vector_b))


def vector_cross(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Cross product of the first three components; any w component is ignored."""
    vector_a = np.asarray(a, dtype=float)[:3]
    vector_b = np.asarray(b, dtype=float)[:3]
    return np.cross(vector_a, vector_b)
