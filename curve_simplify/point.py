from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np


@dataclass(frozen=True)
class Point:
    x: float
    y: float
    index: Optional[int] = None  # opaque tag, e.g. position in the source curve


def points_to_xy(points: Sequence[Point]) -> np.ndarray:
    """
    Pack a curve of Points into an (N,2) float array of [x, y] rows.
    """
    xy = np.empty((len(points), 2), dtype=float)
    for k, p in enumerate(points):
        xy[k, 0] = p.x
        xy[k, 1] = p.y
    return xy


def points_from_xy(points_xy: np.ndarray, *, tag: bool = True) -> list[Point]:
    """
    Unpack an (N,2) array into Points.
    tag: store each row number in Point.index so survivors can be traced back.
    """
    P = np.asarray(points_xy, dtype=float)
    if P.ndim != 2 or P.shape[1] != 2:
        raise ValueError("points_xy must be (N,2)")
    return [
        Point(float(x), float(y), k if tag else None)
        for k, (x, y) in enumerate(P)
    ]
