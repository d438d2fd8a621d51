"""
Numerical options for the distribution engine.

This module defines the tolerances and iteration caps used by the quantile
solvers, the numerical integrators and the table generator.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from ..errors import ParameterError


@dataclass(frozen=True)
class NumericsOptions:
    """
    Tolerances and iteration limits for numerical routines.

    Attributes:
        quantile_tolerance: Bisection stops when the bracket is this narrow (default: 1e-8)
        quantile_max_iterations: Hard cap on bisection steps (default: 200)
        discrete_max_iterations: Cap on the discrete quantile walk (default: 10000)
        simpson_tolerance: Target error of the adaptive Simpson rule (default: 1e-6)
        simpson_max_depth: Maximum interval halvings in adaptive Simpson (default: 50)
        simpson_max_intervals: Maximum intervals processed by adaptive Simpson (default: 100000)
        student_lower_bound: Lower integration limit for the Student-t CDF (default: -50)
        trapezoid_lower_bound: First node of the Chi-squared / Fisher-F integration grid (default: 0.001)
        trapezoid_intervals: Grid cells between the first node and the quantile search bound (default: 1000)
        max_table_rows: Largest table the generator will produce (default: 100000)
    """

    quantile_tolerance: float = 1e-8
    quantile_max_iterations: int = 200
    discrete_max_iterations: int = 10_000

    simpson_tolerance: float = 1e-6
    simpson_max_depth: int = 50
    simpson_max_intervals: int = 100_000
    student_lower_bound: float = -50.0

    trapezoid_lower_bound: float = 0.001
    trapezoid_intervals: int = 1000

    max_table_rows: int = 100_000

    def __post_init__(self):
        """Validate options after initialization."""
        if self.quantile_tolerance <= 0:
            raise ParameterError("quantile_tolerance must be positive")

        if self.quantile_max_iterations < 1:
            raise ParameterError("quantile_max_iterations must be at least 1")

        if self.discrete_max_iterations < 1:
            raise ParameterError("discrete_max_iterations must be at least 1")

        if self.simpson_tolerance <= 0:
            raise ParameterError("simpson_tolerance must be positive")

        if self.simpson_max_depth < 1:
            raise ParameterError("simpson_max_depth must be at least 1")

        if self.simpson_max_intervals < 1:
            raise ParameterError("simpson_max_intervals must be at least 1")

        if self.trapezoid_lower_bound <= 0:
            raise ParameterError("trapezoid_lower_bound must be positive")

        if self.trapezoid_intervals < 1:
            raise ParameterError("trapezoid_intervals must be at least 1")

        if self.max_table_rows < 1:
            raise ParameterError("max_table_rows must be at least 1")

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize options to dictionary.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        return {
            "quantile_tolerance": self.quantile_tolerance,
            "quantile_max_iterations": self.quantile_max_iterations,
            "discrete_max_iterations": self.discrete_max_iterations,
            "simpson_tolerance": self.simpson_tolerance,
            "simpson_max_depth": self.simpson_max_depth,
            "simpson_max_intervals": self.simpson_max_intervals,
            "student_lower_bound": self.student_lower_bound,
            "trapezoid_lower_bound": self.trapezoid_lower_bound,
            "trapezoid_intervals": self.trapezoid_intervals,
            "max_table_rows": self.max_table_rows,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'NumericsOptions':
        """
        Create NumericsOptions from a dictionary.

        Missing keys keep their defaults.

        Args:
            data: Dictionary with option values

        Returns:
            New NumericsOptions instance
        """
        return cls(
            quantile_tolerance=float(data.get("quantile_tolerance", 1e-8)),
            quantile_max_iterations=int(data.get("quantile_max_iterations", 200)),
            discrete_max_iterations=int(data.get("discrete_max_iterations", 10_000)),
            simpson_tolerance=float(data.get("simpson_tolerance", 1e-6)),
            simpson_max_depth=int(data.get("simpson_max_depth", 50)),
            simpson_max_intervals=int(data.get("simpson_max_intervals", 100_000)),
            student_lower_bound=float(data.get("student_lower_bound", -50.0)),
            trapezoid_lower_bound=float(data.get("trapezoid_lower_bound", 0.001)),
            trapezoid_intervals=int(data.get("trapezoid_intervals", 1000)),
            max_table_rows=int(data.get("max_table_rows", 100_000)),
        )

    @classmethod
    def default(cls) -> 'NumericsOptions':
        """
        Create options with default values.

        Returns:
            NumericsOptions with default settings
        """
        return cls()

    @classmethod
    def high_precision(cls) -> 'NumericsOptions':
        """
        Create options for slower, tighter numerical work.

        Returns:
            NumericsOptions with finer tolerances and more subintervals
        """
        return cls(
            quantile_tolerance=1e-11,
            simpson_tolerance=1e-9,
            trapezoid_intervals=10_000,
        )

    def __repr__(self) -> str:
        return (
            f"NumericsOptions("
            f"qtol={self.quantile_tolerance}, "
            f"stol={self.simpson_tolerance}, "
            f"trap_n={self.trapezoid_intervals})"
        )
