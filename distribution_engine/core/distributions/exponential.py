"""
Exponential distribution.

X ~ Exp(lambda) is the waiting time between events of a Poisson process
with rate lambda > 0 (scale beta = 1 / lambda):

    pdf(x) = lambda e^{-lambda x},   cdf(x) = 1 - e^{-lambda x},   x >= 0

Everything is closed form, including the quantile -ln(1 - p) / lambda.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from ..errors import ParameterError
from ..models.catalog import ExampleEntry
from ..models.options import NumericsOptions
from ..results.table import TableRow
from .base import ContinuousDistribution, is_number


@dataclass(frozen=True)
class ExponentialDistribution(ContinuousDistribution):
    """
    Exponential distribution.

    Attributes:
        lam: Rate lambda (> 0)
        options: Numerical options
    """

    lam: float
    options: NumericsOptions = field(default_factory=NumericsOptions, repr=False, compare=False)

    PARAM_NAMES = {"lambda": "lam"}
    EXAMPLES = (
        ExampleEntry({"lambda": 1}, "Rate of 1 event per unit of time"),
        ExampleEntry({"lambda": 0.5}, "Rate of 0.5 events per unit of time"),
        ExampleEntry({"scale": 2}, "Mean time between events of 2 units"),
    )

    @staticmethod
    def validate_params(params: Mapping[str, Any]) -> List[str]:
        """Either ``lambda`` or ``scale`` must be given; each one given must be > 0."""
        errors: List[str] = []

        has_lambda = params.get("lambda") is not None
        has_scale = params.get("scale") is not None

        if has_lambda or not has_scale:
            lam = params.get("lambda")
            if not is_number(lam) or lam <= 0:
                errors.append("lambda must be a number greater than 0")

        if has_scale:
            scale = params.get("scale")
            if not is_number(scale) or scale <= 0:
                errors.append("scale must be a number greater than 0")

        return errors

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], options: Optional[NumericsOptions] = None) -> 'ExponentialDistribution':
        """Create from ``{"lambda": ...}`` or ``{"scale": ...}`` (lambda wins when both are given)."""
        errors = cls.validate_params(data)
        if errors:
            raise ParameterError(errors)

        lam = data.get("lambda")
        if lam is None:
            lam = 1.0 / data["scale"]

        if options is None:
            return cls(lam)
        return cls(lam, options)

    @classmethod
    def from_scale(cls, scale: float, options: Optional[NumericsOptions] = None) -> 'ExponentialDistribution':
        """Alternate constructor from the scale beta = 1 / lambda."""
        return cls.from_dict({"scale": scale}, options)

    @property
    def scale(self) -> float:
        return 1.0 / self.lam

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["scale"] = self.scale
        return data

    def pdf(self, x: float) -> float:
        if x < 0:
            return 0.0
        return self.lam * math.exp(-self.lam * x)

    def cdf(self, x: float) -> float:
        if x < 0:
            return 0.0
        return -math.expm1(-self.lam * x)

    def ccdf(self, x: float) -> float:
        if x < 0:
            return 1.0
        return math.exp(-self.lam * x)

    def hazard(self, x: float) -> float:
        """Hazard rate pdf / ccdf; constant lambda on the support."""
        if x < 0:
            return 0.0
        return self.lam

    def cumulative_hazard(self, x: float) -> float:
        """Integrated hazard lambda x."""
        if x < 0:
            return 0.0
        return self.lam * x

    def memoryless_probability(self, s: float, t: float) -> float:
        """P(X > s + t | X > s), which equals P(X > t) = e^{-lambda t}."""
        if s < 0 or t < 0:
            return 0.0
        return math.exp(-self.lam * t)

    def _quantile(self, p: float) -> float:
        if p == 0.0:
            return 0.0
        if p == 1.0:
            return math.inf
        return -math.log1p(-p) / self.lam

    def generate_table(self, start: float = 0.0, end: float = 10.0, step: float = 0.1) -> List[TableRow]:
        return self._table(start, end, step)

    @property
    def mean(self) -> float:
        return self.scale

    @property
    def variance(self) -> float:
        return self.scale * self.scale

    @property
    def std_dev(self) -> float:
        return self.scale

    @property
    def median(self) -> float:
        return self.scale * math.log(2.0)

    @property
    def mode(self) -> float:
        return 0.0

    @property
    def skewness(self) -> float:
        return 2.0

    @property
    def kurtosis(self) -> float:
        """Excess kurtosis."""
        return 6.0


def exponential(lam: float) -> ExponentialDistribution:
    """Convenience constructor."""
    return ExponentialDistribution(lam)


def exponential_scale(scale: float) -> ExponentialDistribution:
    return ExponentialDistribution.from_scale(scale)


def exponential_pdf(lam: float, x: float) -> float:
    return exponential(lam).pdf(x)


def exponential_cdf(lam: float, x: float) -> float:
    return exponential(lam).cdf(x)


def exponential_quantile(lam: float, p: float) -> float:
    return exponential(lam).quantile(p)
