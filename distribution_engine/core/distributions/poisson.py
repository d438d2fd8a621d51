"""
Poisson distribution.

X ~ Poisson(lambda) counts events in a fixed interval at average rate
lambda > 0:

    P(X = k) = e^{-lambda} lambda^k / k!,   k = 0, 1, 2, ...

The mass is evaluated in log-space so that large k does not overflow k!.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, List, Mapping

from ..models.catalog import ExampleEntry
from ..models.options import NumericsOptions
from ..results.table import TableRow
from ..solver.quantile import discrete_quantile
from ..special.functions import log_gamma
from .base import DiscreteDistribution, floor_index, is_integer, is_number

# Relative size below which a tail term cannot change a double-precision sum
_TAIL_EPSILON = 1e-17


def poisson_mass(lam: float, k: float) -> float:
    """e^{-lam} lam^k / k! for integer k >= 0 (0 otherwise); lam = 0 is a point mass at 0."""
    if not is_integer(k) or k < 0:
        return 0.0
    k = int(k)
    if lam == 0.0:
        return 1.0 if k == 0 else 0.0
    return math.exp(-lam + k * math.log(lam) - log_gamma(k + 1.0))


@dataclass(frozen=True)
class PoissonDistribution(DiscreteDistribution):
    """
    Poisson distribution.

    Attributes:
        lam: Average rate lambda (> 0)
        options: Numerical options
    """

    lam: float
    options: NumericsOptions = field(default_factory=NumericsOptions, repr=False, compare=False)

    PARAM_NAMES = {"lambda": "lam"}
    EXAMPLES = (
        ExampleEntry({"lambda": 1}, "Average of 1 arrival per unit of time"),
        ExampleEntry({"lambda": 2}, "Average of 2 arrivals per unit of time"),
        ExampleEntry({"lambda": 5}, "Average of 5 arrivals per unit of time"),
    )

    @staticmethod
    def validate_params(params: Mapping[str, Any]) -> List[str]:
        errors: List[str] = []
        lam = params.get("lambda")
        if not is_number(lam) or lam <= 0:
            errors.append("lambda must be a number greater than 0")
        return errors

    def pmf(self, k: float) -> float:
        return poisson_mass(self.lam, k)

    def cdf(self, k: float) -> float:
        """P(X <= k) by summation of the mass over 0..floor(k).

        Past the mode the terms shrink monotonically; the sum stops once a term
        no longer changes the running total.
        """
        if k < 0:
            return 0.0
        if math.isinf(k):
            return 1.0
        total = 0.0
        for i in range(floor_index(k) + 1):
            term = self.pmf(i)
            total += term
            if i > self.lam and term <= _TAIL_EPSILON * total:
                break
        return min(1.0, total)

    def _quantile(self, p: float) -> int:
        return discrete_quantile(self.pmf, p, start=0, stop=None,
                                 max_iterations=self.options.discrete_max_iterations)

    def generate_table(self, start: int = 0, end: int = 20) -> List[TableRow]:
        """Table of pmf/cdf/ccdf for k = start..end."""
        return self._table(start, end, 1)

    @property
    def mean(self) -> float:
        return self.lam

    @property
    def variance(self) -> float:
        return self.lam

    @property
    def mode(self) -> int:
        """Most likely value, floor(lambda)."""
        return int(math.floor(self.lam))


def poisson(lam: float) -> PoissonDistribution:
    """Convenience constructor."""
    return PoissonDistribution(lam)


def poisson_pmf(lam: float, k: float) -> float:
    return poisson(lam).pmf(k)


def poisson_cdf(lam: float, k: float) -> float:
    return poisson(lam).cdf(k)


def poisson_quantile(lam: float, p: float) -> int:
    return poisson(lam).quantile(p)
