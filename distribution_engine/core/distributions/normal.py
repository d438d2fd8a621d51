"""
Normal (Gaussian) distribution.

X ~ N(mu, sigma^2):
    pdf(x) = exp(-z^2 / 2) / (sigma sqrt(2 pi)),  z = (x - mu) / sigma
    cdf(x) = 0.5 (1 + erf(z / sqrt(2)))

The quantile uses a rational approximation of the inverse standard normal
CDF (Beasley-Springer-Moro / Acklam coefficients, relative error ~1e-9)
rather than bisection.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional

from ..models.catalog import ExampleEntry
from ..models.options import NumericsOptions
from ..results.table import TableRow
from ..special.functions import standard_normal_cdf
from .base import ContinuousDistribution, is_number


# ----------------------------
# Inverse standard normal CDF
# ----------------------------

# Central region numerator / denominator
_A = (-3.969683028665376e+01, 2.209460984245205e+02, -2.759285104469687e+02,
      1.383577518672690e+02, -3.066479806614716e+01, 2.506628277459239e+00)
_B = (-5.447609879822406e+01, 1.615858368580409e+02, -1.556989798598866e+02,
      6.680131188771972e+01, -1.328068155288572e+01)

# Tail region numerator / denominator
_C = (-7.784894002430293e-03, -3.223964580411365e-01, -2.400758277161838e+00,
      -2.549732539343734e+00, 4.374664141464968e+00, 2.938163982698783e+00)
_D = (7.784695709041462e-03, 3.224671290700398e-01, 2.445134137142996e+00,
      3.754408661907416e+00)

_TAIL_SPLIT = 0.02425


def inverse_standard_normal_cdf(p: float) -> float:
    """z such that Phi(z) = p.

    With q = min(p, 1-p): a central rational formula for q > 0.02425 and
    a tail formula in t = sqrt(-2 ln q) otherwise; the sign follows p.

    Returns:
        -inf for p <= 0, +inf for p >= 1
    """
    if p <= 0.0:
        return -math.inf
    if p >= 1.0:
        return math.inf

    q = min(p, 1.0 - p)

    if q > _TAIL_SPLIT:
        u = q - 0.5
        t = u * u
        num = ((((_A[0] * t + _A[1]) * t + _A[2]) * t + _A[3]) * t + _A[4]) * t + _A[5]
        den = ((((_B[0] * t + _B[1]) * t + _B[2]) * t + _B[3]) * t + _B[4]) * t + 1.0
        z = u * num / den
    else:
        t = math.sqrt(-2.0 * math.log(q))
        num = ((((_C[0] * t + _C[1]) * t + _C[2]) * t + _C[3]) * t + _C[4]) * t + _C[5]
        den = (((_D[0] * t + _D[1]) * t + _D[2]) * t + _D[3]) * t + 1.0
        z = num / den

    # z is the lower-tail quantile of q
    return -z if p > 0.5 else z


@dataclass(frozen=True)
class NormalDistribution(ContinuousDistribution):
    """
    Normal distribution.

    Attributes:
        mu: Mean
        sigma: Standard deviation (> 0)
        options: Numerical options
    """

    mu: float = 0.0
    sigma: float = 1.0
    options: NumericsOptions = field(default_factory=NumericsOptions, repr=False, compare=False)

    PARAM_NAMES = {"mu": "mu", "sigma": "sigma"}
    EXAMPLES = (
        ExampleEntry({"mu": 0, "sigma": 1}, "Standard normal (Z)"),
        ExampleEntry({"mu": 100, "sigma": 15}, "Mean 100 and standard deviation 15 (IQ scores)"),
        ExampleEntry({"mu": 50, "sigma": 10}, "Mean 50 and standard deviation 10"),
    )

    @staticmethod
    def validate_params(params: Mapping[str, Any]) -> List[str]:
        errors: List[str] = []

        if not is_number(params.get("mu")):
            errors.append("mu must be a number")

        sigma = params.get("sigma")
        if not is_number(sigma) or sigma <= 0:
            errors.append("sigma must be a number greater than 0")

        return errors

    def pdf(self, x: float) -> float:
        z = (x - self.mu) / self.sigma
        return math.exp(-0.5 * z * z) / (self.sigma * math.sqrt(2.0 * math.pi))

    def cdf(self, x: float) -> float:
        return standard_normal_cdf((x - self.mu) / self.sigma)

    def _quantile(self, p: float) -> float:
        return self.mu + self.sigma * inverse_standard_normal_cdf(p)

    def generate_table(
        self,
        start: Optional[float] = None,
        end: Optional[float] = None,
        step: Optional[float] = None,
    ) -> List[TableRow]:
        """Table of pdf/cdf/ccdf; defaults to mu +/- 4 sigma in steps of sigma/10."""
        if start is None:
            start = self.mu - 4.0 * self.sigma
        if end is None:
            end = self.mu + 4.0 * self.sigma
        if step is None:
            step = 0.1 * self.sigma
        return self._table(start, end, step)

    @property
    def mean(self) -> float:
        return self.mu

    @property
    def variance(self) -> float:
        return self.sigma * self.sigma

    @property
    def std_dev(self) -> float:
        return self.sigma

    @property
    def mode(self) -> float:
        return self.mu

    @property
    def median(self) -> float:
        return self.mu

    @property
    def skewness(self) -> float:
        return 0.0

    @property
    def kurtosis(self) -> float:
        """Excess kurtosis."""
        return 0.0


def normal(mu: float = 0.0, sigma: float = 1.0) -> NormalDistribution:
    """Convenience constructor."""
    return NormalDistribution(mu, sigma)


def normal_pdf(mu: float, sigma: float, x: float) -> float:
    return normal(mu, sigma).pdf(x)


def normal_cdf(mu: float, sigma: float, x: float) -> float:
    return normal(mu, sigma).cdf(x)


def normal_quantile(mu: float, sigma: float, p: float) -> float:
    return normal(mu, sigma).quantile(p)


def standard_normal_quantile(p: float) -> float:
    return normal().quantile(p)
