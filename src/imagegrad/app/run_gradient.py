from __future__ import annotations

from collections.abc import Callable
from dataclasses import asdict, dataclass
from pathlib import Path

import numpy as np

from imagegrad.debug.report import summarize_gradient, write_report
from imagegrad.io.matrix_io import load_matrix, save_gradient_npz, save_matrix
from imagegrad.operators.gradient import grad1


@dataclass
class GradientRunConfig:
    input_path: str
    output_path: str | None = None
    key: str | None = None
    report_path: str | None = None

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> GradientRunConfig:
        if "input_path" not in data:
            raise ValueError("config requires 'input_path'.")
        return cls(
            input_path=str(data["input_path"]),
            output_path=data.get("output_path"),
            key=data.get("key"),
            report_path=data.get("report_path"),
        )


@dataclass(frozen=True)
class GradientRunResult:
    x: np.ndarray
    grad: np.ndarray
    summary: dict
    output_path: Path | None
    report_path: Path | None


OUTPUT_SUFFIXES = {".npz", ".npy", ".csv", ".txt"}


def _progress(progress_cb: Callable[[str, str], None] | None, stage: str, info: str) -> None:
    if progress_cb is not None:
        progress_cb(stage, info)


def run_gradient(
    config: GradientRunConfig,
    progress_cb: Callable[[str, str], None] | None = None,
) -> GradientRunResult:
    if config.output_path is not None:
        suffix = Path(config.output_path).suffix.lower()
        if suffix not in OUTPUT_SUFFIXES:
            raise ValueError(f"Unsupported matrix format: {suffix or config.output_path}.")

    _progress(progress_cb, "load", str(config.input_path))
    x = load_matrix(config.input_path, key=config.key)

    _progress(progress_cb, "gradient", f"shape={x.shape}")
    out = grad1(x)
    summary = summarize_gradient(x, out)

    output_path = None
    if config.output_path is not None:
        _progress(progress_cb, "save", str(config.output_path))
        target = Path(config.output_path)
        if target.suffix.lower() != ".npz":
            output_path = save_matrix(target, out)
        else:
            output_path = save_gradient_npz(target, x, out, meta=config.to_dict())

    report_path = None
    if config.report_path is not None:
        _progress(progress_cb, "report", str(config.report_path))
        report_path = write_report(config.report_path, {"config": config.to_dict(), **summary})

    return GradientRunResult(
        x=x,
        grad=out,
        summary=summary,
        output_path=output_path,
        report_path=report_path,
    )
