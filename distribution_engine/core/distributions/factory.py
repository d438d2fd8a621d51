"""
Distribution registry.

Maps a DistributionType (or its string value) to the implementing class so
a caller holding a boundary parameter mapping can validate and construct
any of the eight distributions without knowing the classes.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Type, Union

from ..errors import DomainError
from ..models.catalog import ExampleEntry
from ..models.options import NumericsOptions
from .base import Distribution
from .binomial import BinomialDistribution
from .chi2 import Chi2Distribution
from .exponential import ExponentialDistribution
from .fisher import FisherDistribution
from .hypergeometric import HypergeometricDistribution
from .normal import NormalDistribution
from .poisson import PoissonDistribution
from .student import StudentDistribution


class DistributionType(Enum):
    """Supported distributions."""
    POISSON = "poisson"
    BINOMIAL = "binomial"
    HYPERGEOMETRIC = "hypergeometric"
    NORMAL = "normal"
    EXPONENTIAL = "exponential"
    STUDENT = "student"
    CHI2 = "chi2"
    FISHER = "fisher"

    @classmethod
    def from_string(cls, s: str) -> "DistributionType":
        """Create DistributionType from string (case-insensitive)."""
        s_lower = str(s).lower().strip()
        for member in cls:
            if member.value == s_lower:
                return member
        raise DomainError(f"Unknown distribution type: {s}")

    @property
    def is_discrete(self) -> bool:
        return distribution_class(self).discrete


_REGISTRY: Dict[DistributionType, Type[Distribution]] = {
    DistributionType.POISSON: PoissonDistribution,
    DistributionType.BINOMIAL: BinomialDistribution,
    DistributionType.HYPERGEOMETRIC: HypergeometricDistribution,
    DistributionType.NORMAL: NormalDistribution,
    DistributionType.EXPONENTIAL: ExponentialDistribution,
    DistributionType.STUDENT: StudentDistribution,
    DistributionType.CHI2: Chi2Distribution,
    DistributionType.FISHER: FisherDistribution,
}


def distribution_class(kind: Union[DistributionType, str]) -> Type[Distribution]:
    """Class implementing ``kind``.

    Raises:
        DomainError: unknown distribution type
    """
    if not isinstance(kind, DistributionType):
        kind = DistributionType.from_string(kind)
    return _REGISTRY[kind]


def validate_distribution_params(kind: Union[DistributionType, str], params: Mapping[str, Any]) -> List[str]:
    """Validation messages for ``params`` (empty when they are valid)."""
    return distribution_class(kind).validate_params(params)


def create_distribution(
    kind: Union[DistributionType, str],
    params: Mapping[str, Any],
    options: Optional[NumericsOptions] = None,
) -> Distribution:
    """
    Build a distribution from boundary parameters.

    Args:
        kind: DistributionType or its string value ("poisson", "chi2", ...)
        params: Parameters under their boundary names
        options: Numerical options (defaults when None)

    Returns:
        Validated distribution instance

    Raises:
        DomainError: unknown distribution type
        ParameterError: invalid parameters
    """
    return distribution_class(kind).from_dict(params, options)


def get_distribution_examples(kind: Union[DistributionType, str]) -> List[ExampleEntry]:
    return distribution_class(kind).get_examples()
