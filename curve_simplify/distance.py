from __future__ import annotations
import math

import numpy as np

from curve_simplify.point import Point


def euclidean(p1: Point, p2: Point) -> float:
    x = float(p2.x) - float(p1.x)
    y = float(p2.y) - float(p1.y)
    return math.sqrt(x * x + y * y)


def perpendicular_distance(p: Point, start: Point, end: Point) -> float:
    """
    Distance from p to the infinite line through start and end.
    Falls back to the distance to start when start and end coincide.
    Coordinates are taken as float64, like the array engine sees them.
    """
    px, py = float(p.x), float(p.y)
    sx, sy = float(start.x), float(start.y)
    ex, ey = float(end.x), float(end.y)
    if sx == ex and sy == ey:
        return euclidean(p, start)

    # line in standard form: A*x + B*y + C = 0
    A = ey - sy
    B = sx - ex
    C = ex * sy - sx * ey
    return abs(A * px + B * py + C) / math.sqrt(A * A + B * B)


def line_distances(points_xy: np.ndarray, start: np.ndarray, end: np.ndarray) -> np.ndarray:
    """
    Vectorized perpendicular_distance for every row of points_xy.
    points_xy: (N,2) float, start/end: (2,) float
    Returns: (N,) float

    Same operation order as the scalar helper, so both agree exactly.
    """
    px = points_xy[:, 0]
    py = points_xy[:, 1]
    sx, sy = float(start[0]), float(start[1])
    ex, ey = float(end[0]), float(end[1])

    if sx == ex and sy == ey:
        dx = sx - px
        dy = sy - py
        return np.sqrt(dx * dx + dy * dy)

    A = ey - sy
    B = sx - ex
    C = ex * sy - sx * ey
    return np.abs(A * px + B * py + C) / math.sqrt(A * A + B * B)
