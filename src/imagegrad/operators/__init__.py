"""Linear operators for image matrices."""

from .gradient import GradientOperator, build_gradient_operator, grad1

__all__ = [
    "GradientOperator",
    "build_gradient_operator",
    "grad1",
]
