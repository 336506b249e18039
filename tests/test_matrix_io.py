from __future__ import annotations

import json
from pathlib import Path

import numpy as np
import pytest

from imagegrad.io.matrix_io import load_matrix, save_gradient_npz, save_matrix


def test_load_matrix_formats(tmp_path: Path) -> None:
    x = np.array([[1.0, 2.0, 4.0], [3.0, 5.0, 9.0]])

    np.save(tmp_path / "a.npy", x)
    assert np.array_equal(load_matrix(tmp_path / "a.npy"), x)

    np.savez(tmp_path / "b.npz", other=np.zeros((1, 1)), x=x)
    assert np.array_equal(load_matrix(tmp_path / "b.npz"), x)
    assert load_matrix(tmp_path / "b.npz", key="other").shape == (1, 1)

    np.savetxt(tmp_path / "c.csv", x, delimiter=",")
    assert np.allclose(load_matrix(tmp_path / "c.csv"), x)

    np.savetxt(tmp_path / "d.txt", x)
    assert np.allclose(load_matrix(tmp_path / "d.txt"), x)


def test_load_matrix_single_row_and_column(tmp_path: Path) -> None:
    (tmp_path / "row.csv").write_text("1,2,4,8\n", encoding="utf-8")
    assert load_matrix(tmp_path / "row.csv").shape == (1, 4)

    (tmp_path / "col.txt").write_text("3\n7\n", encoding="utf-8")
    assert load_matrix(tmp_path / "col.txt").shape == (2, 1)

    np.save(tmp_path / "vec.npy", np.arange(3.0))
    assert load_matrix(tmp_path / "vec.npy").shape == (1, 3)


def test_load_matrix_errors(tmp_path: Path) -> None:
    np.savez(tmp_path / "b.npz", y=np.zeros((2, 2)))
    with pytest.raises(ValueError, match="not found"):
        load_matrix(tmp_path / "b.npz", key="x")

    np.save(tmp_path / "cube.npy", np.zeros((2, 2, 2)))
    with pytest.raises(ValueError, match="2D"):
        load_matrix(tmp_path / "cube.npy")

    with pytest.raises(ValueError, match="Unsupported"):
        load_matrix(tmp_path / "image.png")


def test_save_matrix_and_gradient_npz(tmp_path: Path) -> None:
    x = np.array([[5.0, 5.0], [10.0, 20.0]])
    g = np.array([[0.0, 0.0], [10.0, 10.0]])

    p = save_matrix(tmp_path / "g.csv", g)
    assert np.allclose(load_matrix(p), g)

    p = save_gradient_npz(tmp_path / "run", x, g, meta={"source": "unit"})
    assert p.name == "run.npz"
    with np.load(p, allow_pickle=False) as npz:
        assert np.array_equal(npz["x"], x)
        assert np.array_equal(npz["grad"], g)
        assert json.loads(str(npz["meta_json"])) == {"source": "unit"}

    with pytest.raises(ValueError, match="Unsupported"):
        save_matrix(tmp_path / "g.bin", g)
