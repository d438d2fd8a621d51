"""
Distribution Engine - probability distributions without SciPy

Probabilities, cumulative distributions, quantiles, tables and moments for
eight standard distributions:

- Discrete: Poisson, Binomial, Hypergeometric
- Continuous: Normal, Exponential, Student-t, Chi-squared, Fisher-F

Conventions:
- Distributions are immutable; parameters are validated at construction
- Boundary parameter names: lambda, n/p, N/K/n, mu/sigma, df, d1/d2
- Discrete intervals are inclusive, P(a <= X <= b); continuous intervals
  are P(a < X <= b)
- Undefined moments are NaN (serialized as None)
"""

__version__ = "1.0.0"
__author__ = "Distribution Engine"

from .core.errors import DistributionError, ParameterError, DomainError
from .core.models import InequalityType, ExampleEntry, NumericsOptions
from .core.results import TableRow, ApproximationResult
from .core.distributions import (
    PoissonDistribution,
    BinomialDistribution,
    HypergeometricDistribution,
    NormalDistribution,
    ExponentialDistribution,
    StudentDistribution,
    Chi2Distribution,
    FisherDistribution,
    DistributionType,
    create_distribution,
    validate_distribution_params,
    get_distribution_examples,
)

__all__ = [
    # Version
    "__version__",

    # Errors
    "DistributionError",
    "ParameterError",
    "DomainError",

    # Models
    "InequalityType",
    "ExampleEntry",
    "NumericsOptions",

    # Results
    "TableRow",
    "ApproximationResult",

    # Distributions
    "PoissonDistribution",
    "BinomialDistribution",
    "HypergeometricDistribution",
    "NormalDistribution",
    "ExponentialDistribution",
    "StudentDistribution",
    "Chi2Distribution",
    "FisherDistribution",

    # Registry
    "DistributionType",
    "create_distribution",
    "validate_distribution_params",
    "get_distribution_examples",
]
