"""I/O helpers for matrices and gradient results."""

from .matrix_io import load_matrix, save_gradient_npz, save_matrix

__all__ = ["load_matrix", "save_gradient_npz", "save_matrix"]
