from __future__ import annotations
import math
import numbers
from typing import Sequence

import numpy as np

from curve_simplify.point import Point
from curve_simplify.rdp import simplify, simplify_xy


class InvalidArgument(ValueError):
    """Caller passed something the simplifier cannot give a meaning to."""


def check_epsilon(epsilon) -> float:
    # bool is an Integral, but a True tolerance is almost certainly a mistake
    if isinstance(epsilon, bool) or not isinstance(epsilon, numbers.Real):
        raise InvalidArgument(f"epsilon must be a real number, got {type(epsilon).__name__}")
    eps = float(epsilon)
    if not math.isfinite(eps):
        raise InvalidArgument(f"epsilon must be finite, got {eps}")
    if eps < 0.0:
        raise InvalidArgument(f"epsilon must be >= 0, got {eps}")
    return eps


def check_finite_points(points: Sequence[Point]) -> None:
    for k, p in enumerate(points):
        if not (math.isfinite(p.x) and math.isfinite(p.y)):
            raise InvalidArgument(f"point {k} has a non-finite coordinate: ({p.x}, {p.y})")


def check_xy(points_xy: np.ndarray) -> np.ndarray:
    """
    Accept an (N,2) numeric array with finite entries; return it as an array.
    """
    arr = np.asarray(points_xy)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise InvalidArgument(f"points_xy must be (N,2), got shape {arr.shape}")
    if not np.issubdtype(arr.dtype, np.number):
        raise InvalidArgument(f"points_xy must be numeric, got dtype {arr.dtype}")
    bad = ~np.isfinite(arr).all(axis=1)
    if bad.any():
        k = int(np.argmax(bad))
        raise InvalidArgument(f"row {k} has a non-finite coordinate: {arr[k].tolist()}")
    return arr


def simplify_polyline(points: Sequence[Point], epsilon: float) -> list[Point]:
    """
    simplify() behind argument checks: rejects negative/non-finite epsilon
    and non-finite coordinates with InvalidArgument.
    """
    eps = check_epsilon(epsilon)
    pts = list(points)
    check_finite_points(pts)
    return simplify(pts, eps)


def simplify_xy_checked(points_xy: np.ndarray, epsilon: float) -> np.ndarray:
    eps = check_epsilon(epsilon)
    return simplify_xy(check_xy(points_xy), eps)
