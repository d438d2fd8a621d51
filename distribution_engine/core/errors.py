"""distribution_engine.core.errors

Exception types raised by the distribution engine.

Caller-facing failures derive from ``ValueError`` so code that already
guards numeric input with ``except ValueError`` keeps working:

- ParameterError: constructor or table-range input violates a constraint
- DomainError: an argument is outside the domain of an operation
  (probability not in [0, 1], unknown inequality or distribution type)

IntegrationError is internal. The adaptive integrator raises it when its
caps are exceeded; distributions catch it and fall back to an estimate.
"""

from __future__ import annotations

from typing import Iterable


class DistributionError(ValueError):
    """Base class for caller-facing distribution errors."""


class ParameterError(DistributionError):
    """Invalid distribution parameters (the instance is never created)."""

    def __init__(self, errors: Iterable[str]):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


class DomainError(DistributionError):
    """Argument outside the domain of an operation."""


class IntegrationError(ArithmeticError):
    """Numerical integration did not converge within its limits."""
