"""Special functions for the distribution engine.

This package contains the numerical building blocks shared by every
distribution:
- Gamma / log-gamma (Lanczos), beta
- Error function (Abramowitz & Stegun)
- Regularized incomplete beta and lower incomplete gamma
- Factorials and binomial coefficients

No SciPy dependency is required.
"""

from .functions import (
    log_gamma,
    gamma,
    log_beta,
    beta,
    erf,
    erfc,
    standard_normal_cdf,
    standard_normal_pdf,
    incomplete_beta_regularized,
    incomplete_gamma_lower,
    factorial,
    combination,
    log_combination,
)

__all__ = [
    "log_gamma",
    "gamma",
    "log_beta",
    "beta",
    "erf",
    "erfc",
    "standard_normal_cdf",
    "standard_normal_pdf",
    "incomplete_beta_regularized",
    "incomplete_gamma_lower",
    "factorial",
    "combination",
    "log_combination",
]
