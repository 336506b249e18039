"""Summaries for inspecting gradient runs."""

from .report import summarize_gradient, summarize_matrix, write_report

__all__ = ["summarize_gradient", "summarize_matrix", "write_report"]
