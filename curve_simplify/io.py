from __future__ import annotations
import os
import warnings
from typing import Optional, Union

import numpy as np


def load_points_csv(path: str) -> np.ndarray:
    """
    Read one "x,y" pair per line into an (N,2) float array.
    Blank lines are skipped; anything else that is not two numbers is an error.
    """
    try:
        with warnings.catch_warnings():
            # an empty file is a valid empty curve
            warnings.simplefilter("ignore", UserWarning)
            data = np.loadtxt(path, delimiter=",", ndmin=2, dtype=float)
    except ValueError as e:
        raise ValueError(f"{path}: {e}") from None

    if data.size == 0:
        return data.reshape(-1, 2)
    if data.shape[1] != 2:
        raise ValueError(f"{path}: expected 2 columns (x,y), got {data.shape[1]}")
    return data


def save_points_csv(path: str, points_xy: np.ndarray) -> None:
    P = np.asarray(points_xy, dtype=float)
    if P.ndim != 2 or P.shape[1] != 2:
        raise ValueError("points_xy must be (N,2)")
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    # 17 significant digits round-trip any float64 exactly
    np.savetxt(path, P, fmt="%.17g", delimiter=",")


def make_random_points(
    n: int,
    rng: Optional[Union[int, np.random.Generator]] = None,
) -> np.ndarray:
    """
    Random walk used for benchmarking: x grows by U(0,1) each step,
    y = x + 10*U(0,1). Returns (n,2) float.
    """
    rng = np.random.default_rng(rng)
    n = int(max(0, n))
    x = np.cumsum(rng.random(n))
    y = x + 10.0 * rng.random(n)
    return np.stack([x, y], axis=1)
