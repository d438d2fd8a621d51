"""
Fisher-Snedecor F distribution.

X ~ F(d1, d2), d1, d2 > 0:

    pdf(x) = Gamma((d1+d2)/2) d1^{d1/2} d2^{d2/2} x^{d1/2 - 1}
             / (Gamma(d1/2) Gamma(d2/2) (d1 x + d2)^{(d1+d2)/2}),   x > 0

(d1, d2) = (1, 1) and (1, 2) use exact closed forms:

    F(1,1):  pdf = 1 / (pi sqrt(x) (1 + x)),      cdf = (2/pi) atan(sqrt(x))
    F(1,2):  pdf = 1 / (sqrt(x) (x + 2)^{3/2}),   cdf = sqrt(x / (x + 2))

Other pairs use the log-space pdf (clamped to [1e-100, 1e100]) and the
trapezoidal rule from 0.001 to x for the CDF, on a fixed geometric grid of
1000 cells up to the quantile bound 100 so that the CDF never decreases.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, List, Mapping

from ..models.catalog import ExampleEntry
from ..models.options import NumericsOptions
from ..results.table import TableRow
from ..solver.integration import graded_trapezoid
from ..solver.quantile import bisection_quantile
from ..special.functions import incomplete_beta_regularized, log_gamma
from .base import ContinuousDistribution, is_number
from .chi2 import clamp_density

QUANTILE_BOUNDS = (0.001, 100.0)


@dataclass(frozen=True)
class FisherDistribution(ContinuousDistribution):
    """
    Fisher-Snedecor F distribution.

    Attributes:
        d1: Numerator degrees of freedom (> 0)
        d2: Denominator degrees of freedom (> 0)
        options: Numerical options
    """

    d1: float
    d2: float
    options: NumericsOptions = field(default_factory=NumericsOptions, repr=False, compare=False)

    PARAM_NAMES = {"d1": "d1", "d2": "d2"}
    EXAMPLES = (
        ExampleEntry({"d1": 5, "d2": 10}, "F with 5 and 10 degrees of freedom"),
        ExampleEntry({"d1": 10, "d2": 20}, "F with 10 and 20 degrees of freedom"),
        ExampleEntry({"d1": 2, "d2": 30}, "F with 2 and 30 degrees of freedom"),
    )

    @staticmethod
    def validate_params(params: Mapping[str, Any]) -> List[str]:
        errors: List[str] = []

        d1 = params.get("d1")
        if not is_number(d1) or d1 <= 0:
            errors.append("d1 must be a number greater than 0")

        d2 = params.get("d2")
        if not is_number(d2) or d2 <= 0:
            errors.append("d2 must be a number greater than 0")

        return errors

    def _is_pair(self, d1: float, d2: float) -> bool:
        return self.d1 == d1 and self.d2 == d2

    def pdf(self, x: float) -> float:
        if x <= 0 or math.isinf(x):
            return 0.0

        if self._is_pair(1.0, 1.0):
            return 1.0 / (math.pi * math.sqrt(x) * (1.0 + x))
        if self._is_pair(1.0, 2.0):
            return 1.0 / (math.sqrt(x) * (x + 2.0) ** 1.5)

        h1 = 0.5 * self.d1
        h2 = 0.5 * self.d2
        log_num = (
            log_gamma(h1 + h2)
            + h1 * math.log(self.d1)
            + h2 * math.log(self.d2)
            + (h1 - 1.0) * math.log(x)
        )
        log_den = log_gamma(h1) + log_gamma(h2) + (h1 + h2) * math.log(self.d1 * x + self.d2)
        return clamp_density(math.exp(log_num - log_den))

    def cdf(self, x: float) -> float:
        if math.isnan(x):
            return math.nan
        if x <= 0:
            return 0.0
        if math.isinf(x):
            return 1.0

        if self._is_pair(1.0, 1.0):
            return 2.0 * math.atan(math.sqrt(x)) / math.pi
        if self._is_pair(1.0, 2.0):
            return math.sqrt(x / (x + 2.0))

        area = graded_trapezoid(
            self.pdf,
            self.options.trapezoid_lower_bound,
            x,
            QUANTILE_BOUNDS[1],
            self.options.trapezoid_intervals,
        )
        return max(0.0, min(1.0, area))

    def analytic_cdf(self, x: float) -> float:
        """CDF via the regularized incomplete beta I_{d1 x/(d1 x + d2)}(d1/2, d2/2)."""
        if x <= 0:
            return 0.0
        if math.isinf(x):
            return 1.0
        z = self.d1 * x / (self.d1 * x + self.d2)
        return incomplete_beta_regularized(0.5 * self.d1, 0.5 * self.d2, z)

    def _quantile(self, p: float) -> float:
        lower, upper = QUANTILE_BOUNDS
        return bisection_quantile(
            self.cdf,
            p,
            lower,
            upper,
            tolerance=self.options.quantile_tolerance,
            max_iterations=self.options.quantile_max_iterations,
        )

    def generate_table(self, start: float = 0.0, end: float = 10.0, step: float = 0.1) -> List[TableRow]:
        return self._table(start, end, step)

    @property
    def mean(self) -> float:
        """d2 / (d2 - 2), defined for d2 > 2."""
        if self.d2 <= 2:
            return math.nan
        return self.d2 / (self.d2 - 2.0)

    @property
    def variance(self) -> float:
        """Defined for d2 > 4."""
        d1, d2 = self.d1, self.d2
        if d2 <= 4:
            return math.nan
        numerator = 2.0 * d2 * d2 * (d1 + d2 - 2.0)
        denominator = d1 * (d2 - 2.0) ** 2 * (d2 - 4.0)
        return numerator / denominator

    @property
    def mode(self) -> float:
        if self.d1 <= 2:
            return 0.0
        return self.d2 * (self.d1 - 2.0) / (self.d1 * (self.d2 + 2.0))


def fisher(d1: float, d2: float) -> FisherDistribution:
    """Convenience constructor."""
    return FisherDistribution(d1, d2)


def fisher_pdf(d1: float, d2: float, x: float) -> float:
    return fisher(d1, d2).pdf(x)


def fisher_cdf(d1: float, d2: float, x: float) -> float:
    return fisher(d1, d2).cdf(x)


def fisher_quantile(d1: float, d2: float, p: float) -> float:
    return fisher(d1, d2).quantile(p)
