"""
Core module of the distribution engine.

This module contains pure Python implementations (numpy is only used for
table arrays and sampling). It has no I/O and can be embedded in any
application that needs probabilities, quantiles or moments.
"""

from .errors import DistributionError, ParameterError, DomainError, IntegrationError

from .models import InequalityType, ExampleEntry, NumericsOptions

from .results import TableRow, ApproximationResult, table_to_dicts, table_to_array

from .statistics import calculate_probability, calculate_interval_probability, generate_table

from .distributions import (
    Distribution,
    DiscreteDistribution,
    ContinuousDistribution,
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
    # Errors
    "DistributionError",
    "ParameterError",
    "DomainError",
    "IntegrationError",

    # Models
    "InequalityType",
    "ExampleEntry",
    "NumericsOptions",

    # Results
    "TableRow",
    "ApproximationResult",
    "table_to_dicts",
    "table_to_array",

    # Probability utilities
    "calculate_probability",
    "calculate_interval_probability",
    "generate_table",

    # Distributions
    "Distribution",
    "DiscreteDistribution",
    "ContinuousDistribution",
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
