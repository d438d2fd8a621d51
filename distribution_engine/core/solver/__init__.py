"""distribution_engine.core.solver

Pure-Python root finding and quadrature.
"""

from .quantile import bisection_quantile, discrete_quantile
from .integration import adaptive_simpson, graded_trapezoid, trapezoid

__all__ = [
    "bisection_quantile",
    "discrete_quantile",
    "adaptive_simpson",
    "trapezoid",
    "graded_trapezoid",
]
