from __future__ import annotations

import numpy as np
import pytest

from imagegrad.operators.gradient import build_gradient_operator, grad1


def test_sparse_operator_matches_dense() -> None:
    rng = np.random.default_rng(0)
    for ncol in (2, 3, 8, 17):
        x = rng.standard_normal((5, ncol))
        op = build_gradient_operator(ncol)
        assert op.D.shape == (ncol, ncol)
        assert op.scheme == "central"
        assert np.allclose(op.apply(x), grad1(x))
        assert np.allclose(x @ op.D.T.toarray(), grad1(x))


def test_sparse_operator_degenerate_columns() -> None:
    op1 = build_gradient_operator(1)
    assert op1.D.nnz == 0
    out = op1.apply(np.array([[3.0], [7.0]]))
    assert np.array_equal(out, np.zeros((2, 1)))

    op0 = build_gradient_operator(0)
    assert op0.D.shape == (0, 0)
    assert op0.apply(np.zeros((4, 0))).shape == (4, 0)


def test_sparse_operator_rows_sum_to_zero() -> None:
    op = build_gradient_operator(9)
    row_sums = np.asarray(op.D.sum(axis=1)).ravel()
    assert np.allclose(row_sums, 0.0)


def test_sparse_operator_shape_mismatch() -> None:
    op = build_gradient_operator(4)
    with pytest.raises(ValueError, match="columns"):
        op.apply(np.zeros((2, 5)))


def test_build_gradient_operator_rejects_negative() -> None:
    with pytest.raises(ValueError, match="non-negative"):
        build_gradient_operator(-1)
