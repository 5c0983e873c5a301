from __future__ import annotations

import math
from typing import List

from kernel_settings import count
from typings.intersection import Intersection
from typings.ray import Ray
from typings.tuple4 import point
from utils.errors import DegenerateVectorError

SPHERE_CENTER = point(0.0, 0.0, 0.0)


class Sphere:
    """Unit sphere at the origin. Transforms are applied to the incoming ray instead."""

    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sphere):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(Sphere)

    def __repr__(self) -> str:
        return "Sphere()"

    def intersect(self, ray: Ray) -> List[Intersection]:
        count("ray_intersections")
        ray_direction = ray.direction
        sphere_to_ray = ray.origin.subtract(SPHERE_CENTER)

        quadratic_a = ray_direction.dot(ray_direction)
        quadratic_b = 2.0 * ray_direction.dot(sphere_to_ray)
        quadratic_c = sphere_to_ray.dot(sphere_to_ray) - 1.0
        if quadratic_a == 0.0:
            raise DegenerateVectorError("Ray direction has zero length")

        discriminant = quadratic_b * quadratic_b - 4.0 * quadratic_a * quadratic_c
        if discriminant < 0.0:
            return []

        # a > 0, so t_near <= t_far; tangent rays give two equal roots
        sqrt_discriminant = math.sqrt(discriminant)
        denominator = 2.0 * quadratic_a
        t_near = (-quadratic_b - sqrt_discriminant) / denominator
        t_far = (-quadratic_b + sqrt_discriminant) / denominator

        count("sphere_hits")
        return [Intersection(t_near, self), Intersection(t_far, self)]
