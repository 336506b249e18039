"""File-based gradient runs."""

from .run_gradient import GradientRunConfig, GradientRunResult, run_gradient

__all__ = ["GradientRunConfig", "GradientRunResult", "run_gradient"]
