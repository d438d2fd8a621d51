"""
Hypergeometric distribution.

X counts successes in n draws without replacement from a population of N
items of which K are successes:

    P(X = k) = C(K, k) C(N-K, n-k) / C(N, n)

Support: max(0, n - (N - K)) <= k <= min(n, K).
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Tuple

from ..errors import DomainError
from ..models.catalog import ExampleEntry
from ..models.options import NumericsOptions
from ..results.approximation import ApproximationResult
from ..results.table import TableRow
from ..solver.quantile import discrete_quantile
from ..special.functions import combination, log_combination
from .base import DiscreteDistribution, floor_index, is_integer, normal_point_approximation
from .binomial import binomial_mass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HypergeometricDistribution(DiscreteDistribution):
    """
    Hypergeometric distribution.

    Attributes:
        population: Population size N (integer > 0)
        successes: Successes in the population K (integer, 0 <= K <= N)
        draws: Sample size n (integer, 0 <= n <= N)
        options: Numerical options
    """

    population: int
    successes: int
    draws: int
    options: NumericsOptions = field(default_factory=NumericsOptions, repr=False, compare=False)

    PARAM_NAMES = {"N": "population", "K": "successes", "n": "draws"}
    EXAMPLES = (
        ExampleEntry({"N": 50, "K": 5, "n": 10}, "Population of 50 with 5 successes, sample of 10"),
        ExampleEntry({"N": 100, "K": 20, "n": 15}, "Population of 100 with 20 successes, sample of 15"),
        ExampleEntry({"N": 200, "K": 50, "n": 30}, "Population of 200 with 50 successes, sample of 30"),
    )

    @staticmethod
    def validate_params(params: Mapping[str, Any]) -> List[str]:
        errors: List[str] = []

        N = params.get("N")
        K = params.get("K")
        n = params.get("n")

        if not is_integer(N) or N <= 0:
            errors.append("N must be a positive integer")
            # K and n are bounded by N; report them only against a valid N
            if not is_integer(K) or K < 0:
                errors.append("K must be an integer between 0 and N")
            if not is_integer(n) or n < 0:
                errors.append("n must be an integer between 0 and N")
            return errors

        if not is_integer(K) or K < 0 or K > N:
            errors.append("K must be an integer between 0 and N")

        if not is_integer(n) or n < 0 or n > N:
            errors.append("n must be an integer between 0 and N")

        return errors

    def _normalize(self) -> None:
        for attr in ("population", "successes", "draws"):
            object.__setattr__(self, attr, int(getattr(self, attr)))

    @property
    def support(self) -> Tuple[int, int]:
        """(lowest, highest) attainable number of successes."""
        lower = max(0, self.draws - (self.population - self.successes))
        upper = min(self.draws, self.successes)
        return lower, upper

    def pmf(self, k: float) -> float:
        lower, upper = self.support
        if not is_integer(k) or k < lower or k > upper:
            return 0.0
        k = int(k)

        N, K, n = self.population, self.successes, self.draws
        numerator = combination(K, k) * combination(N - K, n - k)
        denominator = combination(N, n)
        if math.isfinite(numerator) and math.isfinite(denominator):
            return numerator / denominator

        logger.debug("Binomial coefficients overflow for N=%d; evaluating mass in log-space", N)
        return math.exp(log_combination(K, k) + log_combination(N - K, n - k) - log_combination(N, n))

    def cdf(self, k: float) -> float:
        """P(X <= k), summing the mass over the support only."""
        lower, upper = self.support
        if k < lower:
            return 0.0
        if k >= upper:
            return 1.0
        total = 0.0
        for i in range(lower, floor_index(k) + 1):
            total += self.pmf(i)
        return min(1.0, total)

    def _quantile(self, p: float) -> int:
        lower, upper = self.support
        return discrete_quantile(self.pmf, p, start=lower, stop=upper,
                                 max_iterations=self.options.discrete_max_iterations)

    def generate_table(self, start: Optional[int] = None, end: Optional[int] = None) -> List[TableRow]:
        """Table of pmf/cdf/ccdf over the support by default."""
        lower, upper = self.support
        return self._table(lower if start is None else start, upper if end is None else end, 1)

    @property
    def mean(self) -> float:
        return self.draws * self.successes / self.population

    @property
    def variance(self) -> float:
        N, K, n = self.population, self.successes, self.draws
        if N == 1:
            return 0.0
        numerator = n * K * (N - K) * (N - n)
        denominator = N * N * (N - 1)
        return numerator / denominator

    @property
    def mode(self) -> int:
        """floor((n+1)(K+1)/(N+2))."""
        return (self.draws + 1) * (self.successes + 1) // (self.population + 2)

    # ------------------------------------------------------------------
    # Approximations
    # ------------------------------------------------------------------

    def binomial_approximation(self, k: float) -> ApproximationResult:
        """Compare P(X = k) with Binomial(n, K/N) (sampling with replacement)."""
        p = self.successes / self.population
        return ApproximationResult("binomial", k, self.pmf(k), binomial_mass(self.draws, p, k))

    def normal_approximation(self, k: float, continuity_correction: bool = True) -> ApproximationResult:
        """Compare P(X = k) with a normal of matching mean and variance."""
        approx = normal_point_approximation(k, self.mean, self.std_dev, continuity_correction)
        return ApproximationResult("normal", k, self.pmf(k), approx)

    def approximation(self, k: float, method: str = "binomial") -> ApproximationResult:
        """
        Approximation report by name.

        Args:
            k: evaluation point
            method: "binomial" or "normal"

        Raises:
            DomainError: unknown method
        """
        method_lower = str(method).lower().strip()
        if method_lower == "binomial":
            return self.binomial_approximation(k)
        if method_lower == "normal":
            return self.normal_approximation(k)
        raise DomainError(f"Unknown approximation type: {method} (use 'binomial' or 'normal')")


def hypergeometric(N: int, K: int, n: int) -> HypergeometricDistribution:
    """Convenience constructor."""
    return HypergeometricDistribution(N, K, n)


def hypergeometric_pmf(N: int, K: int, n: int, k: float) -> float:
    return hypergeometric(N, K, n).pmf(k)


def hypergeometric_cdf(N: int, K: int, n: int, k: float) -> float:
    return hypergeometric(N, K, n).cdf(k)


def hypergeometric_quantile(N: int, K: int, n: int, p: float) -> int:
    return hypergeometric(N, K, n).quantile(p)
