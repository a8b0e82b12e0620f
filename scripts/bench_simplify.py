from __future__ import annotations
import argparse
import os
import time
import numpy as np

from curve_simplify.io import load_points_csv, save_points_csv, make_random_points
from curve_simplify.point import points_from_xy
from curve_simplify.rdp import simplify, simplify_recursive


def _time_it(fn, repeat: int) -> float:
    # best of `repeat`, seconds
    best = float("inf")
    for _ in range(repeat):
        t0 = time.perf_counter()
        fn()
        best = min(best, time.perf_counter() - t0)
    return best


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--file", type=str, default="runs/rdp_bench.txt")
    ap.add_argument("--update", action="store_true", help="regenerate the bench file")
    ap.add_argument("--n", type=int, default=1000)
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--eps", type=float, default=0.5)
    ap.add_argument("--repeat", type=int, default=20)
    args = ap.parse_args()

    if args.update or not os.path.exists(args.file):
        save_points_csv(args.file, make_random_points(args.n, rng=args.seed))

    xy = load_points_csv(args.file)
    pts = points_from_xy(xy)
    repeat = max(1, args.repeat)

    out = simplify(pts, args.eps)
    t_stack = _time_it(lambda: simplify(pts, args.eps), repeat)
    t_rec = _time_it(lambda: simplify_recursive(pts, args.eps), repeat)

    print(f"points={len(pts)}  after_rdp={len(out)}  eps={args.eps:g}")
    print(f"stack:     {1e3 * t_stack:8.3f} ms")
    print(f"recursive: {1e3 * t_rec:8.3f} ms")
    print(f"kept indices: {np.array([p.index for p in out])[:10]}{' ...' if len(out) > 10 else ''}")


if __name__ == "__main__":
    main()
