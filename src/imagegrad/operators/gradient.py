from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from scipy.sparse import coo_matrix, csr_matrix


def _as_matrix(x: object) -> np.ndarray:
    if x is None:
        raise ValueError("x must not be None.")
    if np.iscomplexobj(x):
        raise ValueError("x must be a numeric matrix.")
    try:
        arr = np.asarray(x, dtype=float)
    except (TypeError, ValueError) as exc:
        raise ValueError("x must be a numeric matrix.") from exc
    if arr.ndim != 2:
        raise ValueError(f"x must be 2D, got ndim={arr.ndim}.")
    return arr


def grad1(x: np.ndarray) -> np.ndarray:
    """Central-difference gradient along columns, row by row.

    Interior columns use (x[:, t+1] - x[:, t-1]) / 2. The first and last
    columns use one-sided differences. A single column has no neighbor and
    yields zeros.
    """
    x = _as_matrix(x)
    nrow, ncol = x.shape
    out = np.zeros((nrow, ncol), dtype=float)
    if ncol < 2:
        return out

    out[:, 1:-1] = (x[:, 2:] - x[:, :-2]) / 2
    out[:, 0] = x[:, 1] - x[:, 0]
    out[:, -1] = x[:, -1] - x[:, -2]
    return out


@dataclass
class GradientOperator:
    """Sparse row-gradient operator acting on matrices with ncol columns."""

    D: csr_matrix
    ncol: int
    scheme: str

    def apply(self, x: np.ndarray) -> np.ndarray:
        x = _as_matrix(x)
        if x.shape[1] != self.ncol:
            raise ValueError(f"x has {x.shape[1]} columns, operator expects {self.ncol}.")
        if x.size == 0:
            return np.zeros(x.shape, dtype=float)
        return np.asarray(self.D @ x.T, dtype=float).T


def build_gradient_operator(ncol: int) -> GradientOperator:
    """Build D with shape (ncol, ncol) such that grad1(x) == x @ D.T."""
    ncol = int(ncol)
    if ncol < 0:
        raise ValueError("ncol must be non-negative.")

    rows_idx: list[int] = []
    cols_idx: list[int] = []
    data: list[float] = []

    def add_entry(r: int, c: int, val: float) -> None:
        rows_idx.append(r)
        cols_idx.append(c)
        data.append(val)

    if ncol >= 2:
        for t in range(1, ncol - 1):
            add_entry(t, t + 1, 0.5)
            add_entry(t, t - 1, -0.5)
        add_entry(0, 1, 1.0)
        add_entry(0, 0, -1.0)
        add_entry(ncol - 1, ncol - 1, 1.0)
        add_entry(ncol - 1, ncol - 2, -1.0)

    D = coo_matrix(
        (
            np.asarray(data, dtype=float),
            (np.asarray(rows_idx, dtype=int), np.asarray(cols_idx, dtype=int)),
        ),
        shape=(ncol, ncol),
    ).tocsr()
    return GradientOperator(D=D, ncol=ncol, scheme="central")
