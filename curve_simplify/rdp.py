from __future__ import annotations
from typing import Sequence

import numpy as np

from curve_simplify.distance import line_distances, perpendicular_distance
from curve_simplify.point import Point, points_to_xy


def _split_position(k: int, n: int) -> int:
    # never split at either end of the span, or one side would be the whole span again
    if k == 0:
        return 1
    if k == n - 1:
        return n - 2
    return k


def simplify_indices(points_xy: np.ndarray, epsilon: float) -> np.ndarray:
    """
    Ramer-Douglas-Peucker polyline simplification on an explicit stack.
    points_xy: (N,2) int/float
    epsilon: max allowed perpendicular deviation from the chord

    Returns: sorted indices of the rows that survive.

    Each stack entry is a half-open range [lo, hi) of rows. A range is split
    at its farthest row k into [lo, k) and [k, hi), so the split row opens
    the right-hand range.
    """
    pts = np.asarray(points_xy, dtype=float)
    if pts.ndim != 2 or pts.shape[1] != 2:
        raise ValueError("points_xy must be (N,2)")
    n = pts.shape[0]
    if n <= 2:
        return np.arange(n)

    eps = max(float(epsilon), 0.0)

    keep = np.zeros(n, dtype=bool)
    stack = [(0, n)]
    while stack:
        lo, hi = stack.pop()
        if hi - lo <= 2:
            keep[lo:hi] = True
            continue

        d = line_distances(pts[lo:hi], pts[lo], pts[hi - 1])
        k = int(np.argmax(d))  # first maximum wins ties
        if d[k] <= eps:
            keep[lo] = True
            keep[hi - 1] = True
            continue

        k = lo + _split_position(k, hi - lo)
        stack.append((k, hi))
        stack.append((lo, k))

    return np.flatnonzero(keep)


def simplify_xy(points_xy: np.ndarray, epsilon: float) -> np.ndarray:
    """
    Rows of points_xy kept by simplify_indices, in original order and dtype.
    """
    arr = np.asarray(points_xy)
    return arr[simplify_indices(arr, epsilon)]


def simplify(points: Sequence[Point], epsilon: float) -> list[Point]:
    """
    Simplify a curve of Points. Always keeps the first and last point.
    The input is left untouched; a new list is returned.
    """
    pts = list(points)
    if len(pts) <= 2:
        return pts
    keep = simplify_indices(points_to_xy(pts), epsilon)
    return [pts[k] for k in keep]


def simplify_recursive(points: Sequence[Point], epsilon: float) -> list[Point]:
    """
    Textbook recursive form of simplify(), same output.
    Recursion depth grows with the curve in the worst case (zig-zags),
    so prefer simplify() for long or untrusted input.
    """
    pts = list(points)
    if len(pts) <= 2:
        return pts

    eps = max(float(epsilon), 0.0)
    first, last = pts[0], pts[-1]

    index = 0
    max_d = 0.0
    for i, p in enumerate(pts):
        d = perpendicular_distance(p, first, last)
        if d > max_d:
            max_d = d
            index = i

    if max_d <= eps:
        return [first, last]

    index = _split_position(index, len(pts))
    return simplify_recursive(pts[:index], eps) + simplify_recursive(pts[index:], eps)
