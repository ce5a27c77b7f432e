import numpy as np
import pytest

from nbv.plane import Plane


def test_set_from_points_xy_plane():
    plane = Plane()
    plane.set_from_points((0, 0, 0), (1, 0, 0), (0, 1, 0))
    assert np.allclose(plane.normal, [0, 0, 1])
    assert plane.distance == pytest.approx(0.0)
    assert plane.is_point_correct_side((3, -2, 0)) is True
    assert plane.is_point_correct_side((0, 0, 1)) is True
    assert plane.is_point_correct_side((0, 0, -1)) is False


def test_winding_flips_normal():
    plane = Plane()
    plane.set_from_points((0, 0, 0), (0, 1, 0), (1, 0, 0))
    assert np.allclose(plane.normal, [0, 0, -1])
    assert plane.is_point_correct_side((0, 0, -1)) is True


def test_source_points_on_plane_and_reflection_flips_side():
    p1 = np.array([1.0, 2.0, 3.0])
    p2 = np.array([4.0, 0.0, 1.0])
    p3 = np.array([2.0, 5.0, -1.0])
    plane = Plane()
    plane.set_from_points(p1, p2, p3)

    assert np.linalg.norm(plane.normal) == pytest.approx(1.0)
    for p in (p1, p2, p3):
        assert plane.signed_distance(p) == pytest.approx(0.0, abs=1e-9)

    above = p1 + 2.0 * plane.normal
    below = p1 - 2.0 * plane.normal
    assert plane.is_point_correct_side(above) is True
    assert plane.is_point_correct_side(below) is False


def test_set_from_distance_normal():
    plane = Plane()
    plane.set_from_distance_normal((0, 1, 0), 2.5)
    assert plane.is_point_correct_side((0, 2.5, 0)) is True
    assert plane.is_point_correct_side((0, 2.4, 0)) is False
    assert plane.signed_distance((7, 4, -1)) == pytest.approx(1.5)


def test_points_correct_side_matches_scalar_test():
    plane = Plane((0, 0, 1), 1.0)
    points = np.array([[0, 0, 0], [0, 0, 1], [5, 5, 2]])
    mask = plane.points_correct_side(points)
    assert mask.tolist() == [False, True, True]
    assert mask.tolist() == [plane.is_point_correct_side(p) for p in points]
