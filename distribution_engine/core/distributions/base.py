"""
Base classes for probability distributions.

Conventions:
- Instances are frozen dataclasses; parameters are validated once, in
  ``__post_init__``, and an invalid instance is never created
- Parameters are exposed to the boundary layer under their conventional
  names (``lambda``, ``df``, ``n``/``p``, ``N``/``K``/``n``, ``mu``/``sigma``,
  ``d1``/``d2``) through ``params`` / ``from_dict`` / ``to_dict``
- Moments are properties computed on access; they are NaN or inf when
  undefined for the parameters
- ``validate_params`` returns a list of messages instead of raising, so a
  caller can report every problem before attempting construction

Distribution kinds:
- DiscreteDistribution: integer support, pmf, interval P(a <= X <= b)
- ContinuousDistribution: real support, pdf, interval P(a < X <= b)
"""

from __future__ import annotations

import math
import numbers
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Sequence, Tuple, Union

import numpy as np

from ..errors import DomainError, ParameterError
from ..models.catalog import ExampleEntry
from ..models.inequality import InequalityType
from ..models.options import NumericsOptions
from ..results.serialization import json_safe_value
from ..results.table import TableRow
from ..special.functions import standard_normal_cdf, standard_normal_pdf
from ..statistics.probability import calculate_interval_probability, calculate_probability
from ..statistics.table import generate_table


def is_number(value: Any) -> bool:
    """True for finite real numbers (bools excluded)."""
    return (
        isinstance(value, numbers.Real)
        and not isinstance(value, bool)
        and math.isfinite(float(value))
    )


def is_integer(value: Any) -> bool:
    """True for finite real numbers with no fractional part."""
    return is_number(value) and float(value).is_integer()


class Distribution(ABC):
    """
    Base class for all distributions.

    Subclasses are frozen dataclasses declaring their parameters as fields
    followed by an ``options`` field, and set:

        PARAM_NAMES: boundary name -> attribute name
        EXAMPLES: static example catalog
    """

    discrete: ClassVar[bool] = False
    PARAM_NAMES: ClassVar[Dict[str, str]] = {}
    EXAMPLES: ClassVar[Tuple[ExampleEntry, ...]] = ()

    options: NumericsOptions

    def __post_init__(self):
        """Validate parameters; raise ParameterError listing every problem."""
        errors = self.validate_params(self.params)
        if errors:
            raise ParameterError(errors)
        self._normalize()

    def _normalize(self) -> None:
        """Coerce validated parameters to their canonical types."""
        for attr in self.PARAM_NAMES.values():
            object.__setattr__(self, attr, float(getattr(self, attr)))

    # ------------------------------------------------------------------
    # Parameters and catalog
    # ------------------------------------------------------------------

    @staticmethod
    @abstractmethod
    def validate_params(params: Mapping[str, Any]) -> List[str]:
        """
        Validate a boundary parameter mapping.

        Returns:
            List of error messages (empty if valid)
        """

    @classmethod
    def get_examples(cls) -> List[ExampleEntry]:
        """Static example catalog of the distribution."""
        return list(cls.EXAMPLES)

    @property
    def params(self) -> Dict[str, Any]:
        """Parameters keyed by their boundary names."""
        return {key: getattr(self, attr) for key, attr in self.PARAM_NAMES.items()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], options: Optional[NumericsOptions] = None) -> 'Distribution':
        """
        Create a distribution from a boundary parameter mapping.

        Args:
            data: Mapping with the boundary parameter names
            options: Numerical options (defaults when None)

        Returns:
            New distribution instance

        Raises:
            ParameterError: parameters missing or invalid
        """
        errors = cls.validate_params(data)
        if errors:
            raise ParameterError(errors)

        kwargs: Dict[str, Any] = {attr: data[key] for key, attr in cls.PARAM_NAMES.items()}
        if options is not None:
            kwargs["options"] = options
        return cls(**kwargs)

    # ------------------------------------------------------------------
    # Core functions
    # ------------------------------------------------------------------

    @abstractmethod
    def density(self, x: float) -> float:
        """pmf (discrete) or pdf (continuous) at x."""

    @abstractmethod
    def cdf(self, x: float) -> float:
        """P(X <= x)."""

    @abstractmethod
    def ccdf(self, x: float) -> float:
        """Survival function."""

    @abstractmethod
    def interval_probability(self, a: float, b: float) -> float:
        """Probability of the interval between a and b."""

    @abstractmethod
    def _quantile(self, p: float) -> float:
        """Quantile for a probability already checked to lie in [0, 1]."""

    def quantile(self, p: float) -> float:
        """
        Inverse CDF.

        Raises:
            DomainError: p outside [0, 1]
        """
        if not is_number(p) or not 0.0 <= p <= 1.0:
            raise DomainError(f"Probability must be between 0 and 1, got {p}")
        return self._quantile(float(p))

    def probability(self, x: float, inequality: Union[InequalityType, str] = InequalityType.LE) -> float:
        """Probability of the inequality event at x (see statistics.probability)."""
        return calculate_probability(x, self.density, self.cdf, inequality, self.discrete)

    def _table(self, start: float, end: float, step: float) -> List[TableRow]:
        return generate_table(
            self.density,
            self.cdf,
            start,
            end,
            step,
            discrete=self.discrete,
            max_rows=self.options.max_table_rows,
        )

    # ------------------------------------------------------------------
    # Moments
    # ------------------------------------------------------------------

    @property
    @abstractmethod
    def mean(self) -> float:
        """Expected value (NaN when undefined)."""

    @property
    @abstractmethod
    def variance(self) -> float:
        """Variance (NaN or inf when undefined)."""

    @property
    def std_dev(self) -> float:
        """Standard deviation."""
        var = self.variance
        if math.isnan(var):
            return math.nan
        return math.sqrt(var)

    # ------------------------------------------------------------------
    # Sampling and serialization
    # ------------------------------------------------------------------

    def sample(self, size: Optional[Union[int, Sequence[int]]] = None, rng: Optional[np.random.Generator] = None):
        """
        Draw variates by inverse-transform sampling.

        Args:
            size: None for a single value, otherwise the output shape
            rng: numpy Generator (a fresh default_rng() when None)

        Returns:
            a single value, or a numpy array of the requested shape
        """
        if rng is None:
            rng = np.random.default_rng()

        if size is None:
            return self._quantile(float(rng.random()))

        u = rng.random(size)
        otype = int if self.discrete else float
        return np.vectorize(self._quantile, otypes=[otype])(u)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize parameters and moments to dictionary."""
        data: Dict[str, Any] = dict(self.params)
        data.update({
            "mean": json_safe_value(self.mean),
            "variance": json_safe_value(self.variance),
            "stdDev": json_safe_value(self.std_dev),
        })
        for name in ("mode", "median", "skewness", "kurtosis"):
            if hasattr(type(self), name):
                data[name] = json_safe_value(getattr(self, name))
        return data


class DiscreteDistribution(Distribution):
    """Distribution on the integers."""

    discrete: ClassVar[bool] = True

    @abstractmethod
    def pmf(self, k: float) -> float:
        """P(X = k); 0 for non-integer k or k outside the support."""

    def density(self, x: float) -> float:
        return self.pmf(x)

    def ccdf(self, k: float) -> float:
        """P(X >= k) = 1 - cdf(k - 1)."""
        return 1.0 - self.cdf(k - 1)

    def interval_probability(self, a: float, b: float) -> float:
        """P(a <= X <= b) = cdf(b) - cdf(a - 1)."""
        return calculate_interval_probability(a, b, self.cdf, inclusive=True)


class ContinuousDistribution(Distribution):
    """Distribution on the real line (or a subset of it)."""

    discrete: ClassVar[bool] = False

    @abstractmethod
    def pdf(self, x: float) -> float:
        """Probability density at x."""

    def density(self, x: float) -> float:
        return self.pdf(x)

    def ccdf(self, x: float) -> float:
        """1 - cdf(x)."""
        return 1.0 - self.cdf(x)

    def interval_probability(self, a: float, b: float) -> float:
        """P(a < X <= b) = cdf(b) - cdf(a)."""
        return self.cdf(b) - self.cdf(a)


def normal_point_approximation(k: float, mu: float, sigma: float, continuity_correction: bool = True) -> float:
    """Normal approximation of a point probability P(X = k).

    With continuity correction:  Phi((k+0.5-mu)/sigma) - Phi((k-0.5-mu)/sigma)
    Without:                     phi((k-mu)/sigma) / sigma
    A degenerate distribution (sigma = 0) puts all mass on mu.
    """
    if sigma == 0.0:
        return 1.0 if k == mu else 0.0
    if continuity_correction:
        upper = standard_normal_cdf((k + 0.5 - mu) / sigma)
        lower = standard_normal_cdf((k - 0.5 - mu) / sigma)
        return upper - lower
    return standard_normal_pdf((k - mu) / sigma) / sigma


def floor_index(k: float) -> int:
    """Largest integer <= k (k finite)."""
    return int(math.floor(k))
