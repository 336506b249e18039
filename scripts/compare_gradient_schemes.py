from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path

import numpy as np

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from imagegrad.operators.gradient import build_gradient_operator, grad1  # noqa: E402


@dataclass
class Metrics:
    l2: float
    linf: float
    rel_l2: float
    rel_linf: float


def _metrics(diff: np.ndarray, ref: np.ndarray) -> Metrics:
    l2 = float(np.linalg.norm(diff))
    linf = float(np.max(np.abs(diff)))
    ref_l2 = float(np.linalg.norm(ref))
    ref_linf = float(np.max(np.abs(ref)))
    rel_l2 = l2 / ref_l2 if ref_l2 > 0 else float("nan")
    rel_linf = linf / ref_linf if ref_linf > 0 else float("nan")
    return Metrics(l2=l2, linf=linf, rel_l2=rel_l2, rel_linf=rel_linf)


def _gaussian_field(X: np.ndarray, Y: np.ndarray, sigma: float) -> np.ndarray:
    r2 = X * X + Y * Y
    return np.exp(-r2 / (2.0 * sigma * sigma))


def _gaussian_dx(X: np.ndarray, Y: np.ndarray, sigma: float) -> np.ndarray:
    return -X / (sigma * sigma) * _gaussian_field(X, Y, sigma)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Compare grad1 with analytic and numpy gradients.")
    parser.add_argument("--half", type=float, default=0.2)
    parser.add_argument("--nx", type=int, default=64)
    parser.add_argument("--ny", type=int, default=48)
    parser.add_argument("--sigma", type=float, default=0.08)
    parser.add_argument("--plot", action="store_true")
    args = parser.parse_args(argv)
    if args.nx < 3:
        parser.error("--nx must be at least 3 to have interior columns.")
    if args.ny < 1:
        parser.error("--ny must be at least 1.")

    x = np.linspace(-args.half, args.half, args.nx)
    y = np.linspace(-args.half, args.half, args.ny)
    X, Y = np.meshgrid(x, y)
    h = float(x[1] - x[0])

    S = _gaussian_field(X, Y, args.sigma)
    g = grad1(S) / h
    g_op = build_gradient_operator(S.shape[1]).apply(S) / h
    g_np = np.gradient(S, h, axis=1)
    ref = _gaussian_dx(X, Y, args.sigma)

    print(f"grid={S.shape}  h={h:.4e}")
    stats = _metrics(g_op - g, g)
    print(f"  sparse-dense  L2={stats.l2:.4e}  Linf={stats.linf:.4e}")

    stats = _metrics(g_np - g, g)
    print(f"  numpy-grad1   L2={stats.l2:.4e}  Linf={stats.linf:.4e}")

    stats_all = _metrics(g - ref, ref)
    stats_int = _metrics(g[:, 1:-1] - ref[:, 1:-1], ref[:, 1:-1])
    print("  vs analytic:")
    print(f"    all       rel_L2={stats_all.rel_l2:.4e} rel_Linf={stats_all.rel_linf:.4e}")
    print(f"    interior  rel_L2={stats_int.rel_l2:.4e} rel_Linf={stats_int.rel_linf:.4e}")

    if args.plot:
        try:
            import matplotlib.pyplot as plt

            fig, ax = plt.subplots(figsize=(5, 4))
            im = ax.pcolormesh(X, Y, np.abs(g - ref), shading="auto")
            fig.colorbar(im, ax=ax, label="|grad1 - analytic|")
            ax.set_aspect("equal", adjustable="box")
            plt.show()
        except Exception as exc:
            print(f"plot skipped: {exc}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
