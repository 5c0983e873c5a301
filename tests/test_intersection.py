from surfaces.sphere import Sphere
from typings.intersection import Intersection, hit, intersections


def test_intersection_holds_t_and_object():
    sphere = Sphere()
    record = Intersection(3.5, sphere)
    assert record.t == 3.5
    assert record.obj is sphere


def test_equality_needs_same_object():
    sphere = Sphere()
    assert Intersection(1.0, sphere) == Intersection(1.0, sphere)
    assert Intersection(1.0, sphere) != Intersection(2.0, sphere)
    assert Intersection(1.0, sphere) != Intersection(1.0, Sphere())


def test_equality_tolerates_rounding():
    sphere = Sphere()
    assert Intersection(0.1 + 0.2, sphere) == Intersection(0.3, sphere)


def test_aggregating_sorts_by_t():
    sphere = Sphere()
    i1 = Intersection(2.0, sphere)
    i2 = Intersection(-1.0, sphere)
    i3 = Intersection(1.0, sphere)
    xs = intersections(i1, i2, i3)
    assert [x.t for x in xs] == [-1.0, 1.0, 2.0]


def test_hit_all_positive():
    sphere = Sphere()
    i1 = Intersection(1.0, sphere)
    i2 = Intersection(2.0, sphere)
    assert hit(intersections(i2, i1)) is i1


def test_hit_some_negative():
    sphere = Sphere()
    i1 = Intersection(-1.0, sphere)
    i2 = Intersection(1.0, sphere)
    assert hit(intersections(i2, i1)) is i2


def test_hit_all_negative():
    sphere = Sphere()
    assert hit(intersections(Intersection(-2.0, sphere), Intersection(-1.0, sphere))) is None


def test_hit_unsorted_input():
    sphere = Sphere()
    i4 = Intersection(2.0, sphere)
    records = [Intersection(5.0, sphere), Intersection(7.0, sphere), Intersection(-3.0, sphere), i4]
    assert hit(records) is i4


def test_hit_empty():
    assert hit([]) is None
