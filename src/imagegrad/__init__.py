"""Row-wise central-difference gradients of image matrices."""

from .operators import GradientOperator, build_gradient_operator, grad1

__all__ = [
    "GradientOperator",
    "build_gradient_operator",
    "grad1",
]
