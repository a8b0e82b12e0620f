from __future__ import annotations
import argparse
import os
import numpy as np
import matplotlib.pyplot as plt

from curve_simplify.io import load_points_csv, save_points_csv, make_random_points
from curve_simplify.validate import InvalidArgument, simplify_xy_checked


def main():
    ap = argparse.ArgumentParser(description="Simplify an x,y polyline with Ramer-Douglas-Peucker.")
    ap.add_argument("--in", dest="inp", type=str, default=None, help="CSV with one x,y pair per line")
    ap.add_argument("--random", type=int, default=0, help="use a random walk of this many points instead")
    ap.add_argument("--seed", type=int, default=0)
    ap.add_argument("--eps", type=float, default=0.5)
    ap.add_argument("--out", type=str, default="runs/simplified.csv")
    ap.add_argument("--plot", type=str, default=None, help="optional PNG comparing input and output")
    args = ap.parse_args()

    if args.inp is not None:
        try:
            pts = load_points_csv(args.inp)
        except (OSError, ValueError) as e:
            raise SystemExit(f"Could not read points: {e}")
    elif args.random > 0:
        pts = make_random_points(args.random, rng=args.seed)
    else:
        raise SystemExit("Give --in FILE or --random N")

    try:
        simp = simplify_xy_checked(pts, args.eps)
    except InvalidArgument as e:
        raise SystemExit(str(e))

    save_points_csv(args.out, simp)
    ratio = simp.shape[0] / max(1, pts.shape[0])
    print(f"points={pts.shape[0]}  after_rdp={simp.shape[0]}  kept={ratio:.1%}  -> {args.out}")

    if args.plot:
        os.makedirs(os.path.dirname(args.plot) or ".", exist_ok=True)
        plt.figure(figsize=(10, 4))
        plt.plot(pts[:, 0], pts[:, 1], linewidth=1, alpha=0.4, label=f"input ({pts.shape[0]})")
        plt.plot(simp[:, 0], simp[:, 1], linewidth=1.5, marker="o", markersize=3,
                 label=f"simplified ({simp.shape[0]})")
        if pts.shape[0] > 0:
            ends = np.vstack([pts[0], pts[-1]])
            plt.scatter(ends[:, 0], ends[:, 1], marker="x", s=70, color="k")
        plt.title(f"Ramer-Douglas-Peucker, epsilon={args.eps:g}")
        plt.axis("equal")
        plt.legend(loc="best")
        plt.tight_layout()
        plt.savefig(args.plot, dpi=150)
        plt.close()


if __name__ == "__main__":
    main()
