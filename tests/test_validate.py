import math

import numpy as np
import pytest

from curve_simplify.point import Point
from curve_simplify.validate import (
    InvalidArgument,
    check_epsilon,
    check_xy,
    simplify_polyline,
    simplify_xy_checked,
)


def test_check_epsilon_accepts_non_negative_reals():
    assert check_epsilon(0) == 0.0
    assert check_epsilon(0.25) == 0.25
    assert check_epsilon(np.float32(2.0)) == 2.0
    assert isinstance(check_epsilon(3), float)


@pytest.mark.parametrize("eps", [-0.1, -1, math.nan, math.inf, -math.inf, "0.1", None, True])
def test_check_epsilon_rejects(eps):
    with pytest.raises(InvalidArgument):
        check_epsilon(eps)


def test_invalid_argument_is_a_value_error():
    with pytest.raises(ValueError):
        simplify_polyline([Point(0, 0), Point(1, 1), Point(2, 0)], -1.0)


def test_simplify_polyline_rejects_non_finite_points():
    pts = [Point(0, 0), Point(1, math.nan), Point(2, 0)]
    with pytest.raises(InvalidArgument, match="point 1"):
        simplify_polyline(pts, 0.5)
    with pytest.raises(InvalidArgument):
        simplify_polyline([Point(math.inf, 0)], 0.5)


def test_simplify_polyline_runs_core():
    pts = [Point(0, 0), Point(1, 0.01), Point(2, 0)]
    assert simplify_polyline(pts, 0.1) == [pts[0], pts[-1]]
    assert simplify_polyline((p for p in pts), 0.0) == pts


def test_check_xy_shape_and_values():
    assert check_xy([[0, 1], [2, 3]]).shape == (2, 2)
    with pytest.raises(InvalidArgument):
        check_xy(np.zeros((3, 3)))
    with pytest.raises(InvalidArgument):
        check_xy(np.array([["a", "b"]]))
    with pytest.raises(InvalidArgument, match="row 2"):
        check_xy(np.array([[0.0, 0.0], [1.0, 1.0], [np.inf, 2.0]]))


def test_simplify_xy_checked():
    xy = np.array([[0, 0], [1, 0], [2, 0], [3, 5]], dtype=np.int32)
    out = simplify_xy_checked(xy, 0.5)
    assert out.dtype == np.int32
    assert np.array_equal(out[[0, -1]], xy[[0, -1]])
    with pytest.raises(InvalidArgument):
        simplify_xy_checked(xy, -0.5)
