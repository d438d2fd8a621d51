"""
Binomial distribution.

X ~ Binomial(n, p) counts successes in n independent trials with success
probability p:

    P(X = k) = C(n, k) p^k (1-p)^{n-k},   k = 0..n

Auxiliary estimators compare the exact mass with its normal
(continuity-corrected) and Poisson (lambda = n p) approximations.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional

from ..errors import DomainError
from ..models.catalog import ExampleEntry
from ..models.options import NumericsOptions
from ..results.approximation import ApproximationResult
from ..results.table import TableRow
from ..solver.quantile import discrete_quantile
from ..special.functions import combination, log_combination
from .base import DiscreteDistribution, floor_index, is_integer, is_number, normal_point_approximation
from .poisson import poisson_mass

logger = logging.getLogger(__name__)


def binomial_mass(n: int, p: float, k: float) -> float:
    """C(n, k) p^k (1-p)^{n-k} for integer 0 <= k <= n (0 otherwise)."""
    if not is_integer(k) or k < 0 or k > n:
        return 0.0
    k = int(k)

    if p == 0.0:
        return 1.0 if k == 0 else 0.0
    if p == 1.0:
        return 1.0 if k == n else 0.0

    coeff = combination(n, k)
    if math.isfinite(coeff):
        value = coeff * p ** k * (1.0 - p) ** (n - k)
        if math.isfinite(value):
            return value

    logger.debug("C(%d, %d) overflows; evaluating binomial mass in log-space", n, k)
    return math.exp(log_combination(n, k) + k * math.log(p) + (n - k) * math.log1p(-p))


@dataclass(frozen=True)
class BinomialDistribution(DiscreteDistribution):
    """
    Binomial distribution.

    Attributes:
        n: Number of trials (integer >= 0)
        p: Success probability in [0, 1]
        options: Numerical options
    """

    n: int
    p: float
    options: NumericsOptions = field(default_factory=NumericsOptions, repr=False, compare=False)

    PARAM_NAMES = {"n": "n", "p": "p"}
    EXAMPLES = (
        ExampleEntry({"n": 10, "p": 0.2}, "10 trials with a 20% chance of success"),
        ExampleEntry({"n": 20, "p": 0.5}, "20 trials with a 50% chance of success"),
        ExampleEntry({"n": 100, "p": 0.02}, "100 trials with a 2% chance of success (close to Poisson)"),
    )

    @staticmethod
    def validate_params(params: Mapping[str, Any]) -> List[str]:
        errors: List[str] = []

        n = params.get("n")
        if not is_integer(n) or n < 0:
            errors.append("n must be a non-negative integer")

        p = params.get("p")
        if not is_number(p) or p < 0 or p > 1:
            errors.append("p must be a number between 0 and 1")

        return errors

    def _normalize(self) -> None:
        object.__setattr__(self, 'n', int(self.n))
        object.__setattr__(self, 'p', float(self.p))

    def pmf(self, k: float) -> float:
        return binomial_mass(self.n, self.p, k)

    def cdf(self, k: float) -> float:
        """P(X <= k) by summation over 0..min(floor(k), n)."""
        if k < 0:
            return 0.0
        if k >= self.n:
            return 1.0
        total = 0.0
        for i in range(floor_index(k) + 1):
            total += self.pmf(i)
        return min(1.0, total)

    def _quantile(self, q: float) -> int:
        return discrete_quantile(self.pmf, q, start=0, stop=self.n,
                                 max_iterations=self.options.discrete_max_iterations)

    def generate_table(self, start: int = 0, end: Optional[int] = None) -> List[TableRow]:
        """Table of pmf/cdf/ccdf over the support (0..n by default)."""
        return self._table(start, self.n if end is None else end, 1)

    @property
    def mean(self) -> float:
        return self.n * self.p

    @property
    def variance(self) -> float:
        return self.n * self.p * (1.0 - self.p)

    @property
    def mode(self) -> int:
        """floor((n+1)p); one less when (n+1)p is an integer (the lower of two modes)."""
        if self.p == 0.0:
            return 0
        m = (self.n + 1) * self.p
        floor_m = math.floor(m)
        if m == floor_m:
            return int(floor_m) - 1
        return int(floor_m)

    # ------------------------------------------------------------------
    # Approximations
    # ------------------------------------------------------------------

    def normal_approximation(self, k: float, continuity_correction: bool = True) -> ApproximationResult:
        """Compare P(X = k) with N(np, np(1-p)), continuity-corrected by default."""
        approx = normal_point_approximation(k, self.mean, self.std_dev, continuity_correction)
        return ApproximationResult("normal", k, self.pmf(k), approx)

    def poisson_approximation(self, k: float) -> ApproximationResult:
        """Compare P(X = k) with Poisson(lambda = n p)."""
        return ApproximationResult("poisson", k, self.pmf(k), poisson_mass(self.mean, k))

    def approximation(self, k: float, method: str = "normal") -> ApproximationResult:
        """
        Approximation report by name.

        Args:
            k: evaluation point
            method: "normal" or "poisson"

        Raises:
            DomainError: unknown method
        """
        method_lower = str(method).lower().strip()
        if method_lower == "normal":
            return self.normal_approximation(k)
        if method_lower == "poisson":
            return self.poisson_approximation(k)
        raise DomainError(f"Unknown approximation type: {method} (use 'normal' or 'poisson')")


def binomial(n: int, p: float) -> BinomialDistribution:
    """Convenience constructor."""
    return BinomialDistribution(n, p)


def binomial_pmf(n: int, p: float, k: float) -> float:
    return binomial(n, p).pmf(k)


def binomial_cdf(n: int, p: float, k: float) -> float:
    return binomial(n, p).cdf(k)


def binomial_quantile(n: int, p: float, q: float) -> int:
    return binomial(n, p).quantile(q)
