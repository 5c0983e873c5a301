import pytest

from kernel_settings import get_profile_counters
from surfaces.sphere import Sphere
from typings.intersection import Intersection
from typings.ray import Ray
from typings.tuple4 import point, vector
from utils.errors import DegenerateVectorError
from utils.transformations import scaling, translation


def test_ray_position():
    ray = Ray(point(2, 3, 4), vector(1, 0, 0))
    assert ray.position(0) == point(2, 3, 4)
    assert ray.position(1) == point(3, 3, 4)
    assert ray.position(-1) == point(1, 3, 4)
    assert ray.position(2.5) == point(4.5, 3, 4)


def test_ray_is_immutable():
    ray = Ray(point(0, 0, 0), vector(0, 0, 1))
    with pytest.raises(AttributeError):
        ray.origin = point(1, 1, 1)


class TestSphereIntersect:
    def test_two_points(self):
        sphere = Sphere()
        xs = sphere.intersect(Ray(point(0, 0, -5), vector(0, 0, 1)))
        assert [x.t for x in xs] == [4.0, 6.0]

    def test_tangent(self):
        sphere = Sphere()
        xs = sphere.intersect(Ray(point(0, 1, -5), vector(0, 0, 1)))
        assert len(xs) == 2
        assert xs[0].t == 5.0
        assert xs[1].t == 5.0

    def test_miss(self):
        sphere = Sphere()
        assert sphere.intersect(Ray(point(0, 2, -5), vector(0, 0, 1))) == []

    def test_origin_inside_sphere(self):
        sphere = Sphere()
        xs = sphere.intersect(Ray(point(0, 0, 0), vector(0, 0, 1)))
        assert [x.t for x in xs] == [-1.0, 1.0]

    def test_sphere_behind_ray(self):
        sphere = Sphere()
        xs = sphere.intersect(Ray(point(0, 0, 5), vector(0, 0, 1)))
        assert [x.t for x in xs] == [-6.0, -4.0]

    def test_unnormalized_direction(self):
        sphere = Sphere()
        xs = sphere.intersect(Ray(point(0, 0, -5), vector(0, 0, 2)))
        assert [x.t for x in xs] == pytest.approx([2.0, 3.0])

    def test_results_are_tagged_with_sphere(self):
        sphere = Sphere()
        xs = sphere.intersect(Ray(point(0, 0, -5), vector(0, 0, 1)))
        assert all(isinstance(x, Intersection) for x in xs)
        assert xs[0].obj is sphere
        assert xs[1].obj is sphere

    def test_results_ordered_smallest_first(self):
        sphere = Sphere()
        xs = sphere.intersect(Ray(point(0.3, -0.2, 4), vector(-0.1, 0.05, -1)))
        assert len(xs) == 2
        assert xs[0].t <= xs[1].t

    def test_zero_direction(self):
        with pytest.raises(DegenerateVectorError):
            Sphere().intersect(Ray(point(0, 0, -5), vector(0, 0, 0)))

    def test_intersections_are_counted(self):
        sphere = Sphere()
        sphere.intersect(Ray(point(0, 0, -5), vector(0, 0, 1)))
        sphere.intersect(Ray(point(0, 2, -5), vector(0, 0, 1)))
        counters = get_profile_counters()
        assert counters["ray_intersections"] == 2
        assert counters["sphere_hits"] == 1


class TestTransformedRay:
    def test_scaled_sphere(self):
        sphere = Sphere()
        ray = Ray(point(0, 0, -5), vector(0, 0, 1))
        xs = sphere.intersect(ray.transform(scaling(2, 2, 2).inverse()))
        assert [x.t for x in xs] == pytest.approx([3.0, 7.0])

    def test_translated_sphere(self):
        sphere = Sphere()
        ray = Ray(point(0, 0, -5), vector(0, 0, 1))
        assert sphere.intersect(ray.transform(translation(5, 0, 0).inverse())) == []


def test_spheres_are_interchangeable():
    assert Sphere() == Sphere()
    assert hash(Sphere()) == hash(Sphere())
