"""
Approximation reports for discrete distributions.

Binomial and Hypergeometric distributions can be approximated by simpler
distributions. The report carries the exact point probability next to the
approximate value so the caller can judge the quality of the approximation.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict

from .serialization import json_safe_value


@dataclass(frozen=True)
class ApproximationResult:
    """
    Exact versus approximate point probability.

    Attributes:
        method: Name of the approximating distribution ("normal", "poisson", "binomial")
        k: Evaluation point
        exact: Exact probability P(X = k)
        approximation: Approximate probability
    """

    method: str
    k: float
    exact: float
    approximation: float

    @property
    def absolute_error(self) -> float:
        """|exact - approximation|"""
        return abs(self.exact - self.approximation)

    @property
    def relative_error(self) -> float:
        """Absolute error relative to the exact value (inf when exact is 0)."""
        err = self.absolute_error
        if self.exact == 0.0:
            return 0.0 if err == 0.0 else math.inf
        return err / abs(self.exact)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize approximation report to dictionary."""
        return {
            "type": self.method,
            "k": self.k,
            "exact": json_safe_value(self.exact),
            "approximation": json_safe_value(self.approximation),
            "error": json_safe_value(self.absolute_error),
            "relativeError": json_safe_value(self.relative_error),
        }
