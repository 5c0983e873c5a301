from __future__ import annotations

import math
from functools import reduce

from utils.matrix import Matrix


def translation(x: float, y: float, z: float) -> Matrix:
    # w == 0 tuples only pick up w * (x, y, z), so vectors are unaffected
    return (
        Matrix.identity(4)
        .with_value(0, 3, x)
        .with_value(1, 3, y)
        .with_value(2, 3, z)
    )


def scaling(x: float, y: float, z: float) -> Matrix:
    return (
        Matrix.identity(4)
        .with_value(0, 0, x)
        .with_value(1, 1, y)
        .with_value(2, 2, z)
    )


def rotation_x(angle: float) -> Matrix:
    """Right-handed rotation about the x axis, angle in radians."""
    cosine = math.cos(angle)
    sine = math.sin(angle)
    return Matrix.from_rows(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, cosine, -sine, 0.0],
            [0.0, sine, cosine, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_y(angle: float) -> Matrix:
    """Right-handed rotation about the y axis, angle in radians."""
    cosine = math.cos(angle)
    sine = math.sin(angle)
    return Matrix.from_rows(
        [
            [cosine, 0.0, sine, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [-sine, 0.0, cosine, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_z(angle: float) -> Matrix:
    """Right-handed rotation about the z axis, angle in radians."""
    cosine = math.cos(angle)
    sine = math.sin(angle)
    return Matrix.from_rows(
        [
            [cosine, -sine, 0.0, 0.0],
            [sine, cosine, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    """Each factor moves the first axis in proportion to the second, e.g. xy moves x by y."""
    return Matrix.from_rows(
        [
            [1.0, xy, xz, 0.0],
            [yx, 1.0, yz, 0.0],
            [zx, zy, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def chain(*transforms: Matrix) -> Matrix:
    """
    Compose transforms listed in the order they should be applied.
    chain(a, b, c) is c * b * a: the leftmost argument acts on a tuple first.
    """
    return reduce(lambda composed, transform: transform.multiply(composed), transforms, Matrix.identity(4))
