"""
Probability distributions.

Discrete:   Poisson, Binomial, Hypergeometric
Continuous: Normal, Exponential, Student-t, Chi-squared, Fisher-F
"""

from .base import (
    Distribution,
    DiscreteDistribution,
    ContinuousDistribution,
)
from .poisson import (
    PoissonDistribution,
    poisson,
    poisson_pmf,
    poisson_cdf,
    poisson_quantile,
)
from .binomial import (
    BinomialDistribution,
    binomial,
    binomial_pmf,
    binomial_cdf,
    binomial_quantile,
)
from .hypergeometric import (
    HypergeometricDistribution,
    hypergeometric,
    hypergeometric_pmf,
    hypergeometric_cdf,
    hypergeometric_quantile,
)
from .normal import (
    NormalDistribution,
    inverse_standard_normal_cdf,
    normal,
    normal_pdf,
    normal_cdf,
    normal_quantile,
    standard_normal_quantile,
)
from .exponential import (
    ExponentialDistribution,
    exponential,
    exponential_scale,
    exponential_pdf,
    exponential_cdf,
    exponential_quantile,
)
from .student import (
    StudentDistribution,
    student,
    student_pdf,
    student_cdf,
    student_quantile,
)
from .chi2 import (
    Chi2Distribution,
    chi2,
    chi2_pdf,
    chi2_cdf,
    chi2_quantile,
)
from .fisher import (
    FisherDistribution,
    fisher,
    fisher_pdf,
    fisher_cdf,
    fisher_quantile,
)
from .factory import (
    DistributionType,
    create_distribution,
    distribution_class,
    get_distribution_examples,
    validate_distribution_params,
)

__all__ = [
    # Base classes
    "Distribution",
    "DiscreteDistribution",
    "ContinuousDistribution",
    # Discrete
    "PoissonDistribution",
    "poisson",
    "poisson_pmf",
    "poisson_cdf",
    "poisson_quantile",
    "BinomialDistribution",
    "binomial",
    "binomial_pmf",
    "binomial_cdf",
    "binomial_quantile",
    "HypergeometricDistribution",
    "hypergeometric",
    "hypergeometric_pmf",
    "hypergeometric_cdf",
    "hypergeometric_quantile",
    # Continuous
    "NormalDistribution",
    "inverse_standard_normal_cdf",
    "normal",
    "normal_pdf",
    "normal_cdf",
    "normal_quantile",
    "standard_normal_quantile",
    "ExponentialDistribution",
    "exponential",
    "exponential_scale",
    "exponential_pdf",
    "exponential_cdf",
    "exponential_quantile",
    "StudentDistribution",
    "student",
    "student_pdf",
    "student_cdf",
    "student_quantile",
    "Chi2Distribution",
    "chi2",
    "chi2_pdf",
    "chi2_cdf",
    "chi2_quantile",
    "FisherDistribution",
    "fisher",
    "fisher_pdf",
    "fisher_cdf",
    "fisher_quantile",
    # Registry
    "DistributionType",
    "create_distribution",
    "distribution_class",
    "get_distribution_examples",
    "validate_distribution_params",
]
