from __future__ import annotations

import json
from pathlib import Path

import numpy as np

Array = np.ndarray


def summarize_matrix(a: Array) -> dict:
    a = np.asarray(a, dtype=float)
    finite = a[np.isfinite(a)]
    return {
        "shape": [int(n) for n in a.shape],
        "size": int(a.size),
        "finite_count": int(finite.size),
        "nan_count": int(np.count_nonzero(np.isnan(a))),
        "min": float(np.min(finite)) if finite.size else 0.0,
        "max": float(np.max(finite)) if finite.size else 0.0,
        "mean": float(np.mean(finite)) if finite.size else 0.0,
    }


def summarize_gradient(x: Array, out: Array) -> dict:
    x = np.asarray(x)
    out = np.asarray(out)
    return {
        "input": summarize_matrix(x),
        "gradient": summarize_matrix(out),
        "shape_preserved": bool(x.shape == out.shape),
    }


def write_report(path: Path | str, summary: dict) -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(summary, indent=2, sort_keys=True), encoding="utf-8")
    return p
