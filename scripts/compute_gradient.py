from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from imagegrad.app.run_gradient import GradientRunConfig, run_gradient  # noqa: E402


def _print_progress(stage: str, info: str) -> None:
    print(f"[{stage}] {info}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Row-wise central-difference gradient of a matrix.")
    parser.add_argument("input", help="Matrix file (.npy, .npz, .csv, .txt).")
    parser.add_argument("--output", default=None, help="Output file (.npz, .npy, .csv, .txt).")
    parser.add_argument("--key", default=None, help="Array name inside an .npz input.")
    parser.add_argument("--report", default=None, help="Write a JSON summary here.")
    parser.add_argument("--plot", action="store_true")
    parser.add_argument("--quiet", action="store_true")
    args = parser.parse_args(argv)

    config = GradientRunConfig(
        input_path=args.input,
        output_path=args.output,
        key=args.key,
        report_path=args.report,
    )
    result = run_gradient(config, progress_cb=None if args.quiet else _print_progress)

    s_in = result.summary["input"]
    s_out = result.summary["gradient"]
    print(f"shape={tuple(s_in['shape'])}")
    print(f"  input     min={s_in['min']:.4e}  max={s_in['max']:.4e}")
    print(f"  gradient  min={s_out['min']:.4e}  max={s_out['max']:.4e}")
    if result.output_path is not None:
        print(f"saved: {result.output_path}")

    if args.plot:
        try:
            import matplotlib.pyplot as plt

            fig, axes = plt.subplots(1, 2, figsize=(9, 4))
            im0 = axes[0].imshow(result.x, cmap="gray")
            axes[0].set_title("input")
            fig.colorbar(im0, ax=axes[0])
            im1 = axes[1].imshow(result.grad, cmap="RdBu_r")
            axes[1].set_title("d/dcol")
            fig.colorbar(im1, ax=axes[1])
            plt.show()
        except Exception as exc:
            print(f"plot skipped: {exc}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
