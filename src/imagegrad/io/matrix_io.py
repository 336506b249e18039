from __future__ import annotations

import json
from pathlib import Path

import numpy as np


def _to_matrix(arr: np.ndarray) -> np.ndarray:
    arr = np.asarray(arr, dtype=float)
    if arr.ndim > 2:
        raise ValueError(f"Stored array must be at most 2D, got ndim={arr.ndim}.")
    return np.atleast_2d(arr)


def load_matrix(path: Path | str, *, key: str | None = None) -> np.ndarray:
    p = Path(path)
    suffix = p.suffix.lower()
    if suffix == ".npy":
        return _to_matrix(np.load(p, allow_pickle=False))
    if suffix == ".npz":
        with np.load(p, allow_pickle=False) as npz:
            if key is None:
                if "x" in npz.files:
                    key = "x"
                elif npz.files:
                    key = npz.files[0]
                else:
                    raise ValueError(f"{p.name} contains no arrays.")
            if key not in npz.files:
                raise ValueError(f"Key '{key}' not found in {p.name}.")
            return _to_matrix(npz[key])
    if suffix == ".csv":
        return _to_matrix(np.loadtxt(p, delimiter=",", dtype=float, ndmin=2))
    if suffix == ".txt":
        return _to_matrix(np.loadtxt(p, dtype=float, ndmin=2))
    raise ValueError(f"Unsupported matrix format: {suffix or p.name}.")


def save_matrix(path: Path | str, out: np.ndarray) -> Path:
    p = Path(path)
    suffix = p.suffix.lower()
    out = np.asarray(out, dtype=float)
    if suffix == ".npy":
        np.save(p, out, allow_pickle=False)
    elif suffix == ".csv":
        np.savetxt(p, out, delimiter=",")
    elif suffix == ".txt":
        np.savetxt(p, out)
    else:
        raise ValueError(f"Unsupported matrix format: {suffix or p.name}.")
    return p


def save_gradient_npz(
    path: Path | str,
    x: np.ndarray,
    out: np.ndarray,
    *,
    meta: dict | None = None,
) -> Path:
    p = Path(path)
    if p.suffix.lower() != ".npz":
        p = p.with_name(p.name + ".npz")
    payload: dict[str, np.ndarray] = {
        "x": np.asarray(x, dtype=float),
        "grad": np.asarray(out, dtype=float),
    }
    if meta is not None:
        payload["meta_json"] = np.array(json.dumps(meta, sort_keys=True))
    np.savez(p, **payload)
    return p
