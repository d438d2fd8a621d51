"""
Tests for the distribution registry.
"""

import pytest

import distribution_engine
from distribution_engine.core.errors import DomainError, ParameterError
from distribution_engine.core.models.options import NumericsOptions
from distribution_engine.core.distributions import (
    BinomialDistribution,
    Chi2Distribution,
    DistributionType,
    ExponentialDistribution,
    create_distribution,
    distribution_class,
    get_distribution_examples,
    validate_distribution_params,
)


class TestDistributionType:
    """Tests for the DistributionType enum."""

    def test_from_string(self):
        assert DistributionType.from_string("chi2") is DistributionType.CHI2
        assert DistributionType.from_string("Fisher") is DistributionType.FISHER

    def test_unknown(self):
        with pytest.raises(DomainError):
            DistributionType.from_string("weibull")

    def test_discreteness(self):
        assert DistributionType.POISSON.is_discrete
        assert DistributionType.HYPERGEOMETRIC.is_discrete
        assert not DistributionType.STUDENT.is_discrete


class TestCreateDistribution:
    """Tests for create_distribution and friends."""

    def test_create_by_string(self):
        dist = create_distribution("binomial", {"n": 10, "p": 0.5})

        assert isinstance(dist, BinomialDistribution)
        assert dist.pmf(5) == pytest.approx(252.0 / 1024.0)

    def test_create_by_enum_with_options(self):
        opts = NumericsOptions(trapezoid_intervals=5000)
        dist = create_distribution(DistributionType.CHI2, {"df": 5}, options=opts)

        assert isinstance(dist, Chi2Distribution)
        assert dist.options.trapezoid_intervals == 5000

    def test_exponential_scale_parameter(self):
        dist = create_distribution("exponential", {"scale": 2})

        assert isinstance(dist, ExponentialDistribution)
        assert dist.mean == pytest.approx(2.0)

    def test_invalid_parameters(self):
        with pytest.raises(ParameterError) as excinfo:
            create_distribution("hypergeometric", {"N": 10, "K": 11, "n": 12})
        assert len(excinfo.value.errors) == 2

    def test_unknown_kind(self):
        with pytest.raises(DomainError):
            create_distribution("gamma", {"shape": 2})

    def test_validate_distribution_params(self):
        assert validate_distribution_params("normal", {"mu": 1, "sigma": 2}) == []
        assert validate_distribution_params("student", {"df": -3}) == ["df must be a number greater than 0"]

    def test_distribution_class(self):
        assert distribution_class("chi2") is Chi2Distribution

    @pytest.mark.parametrize("kind", list(DistributionType))
    def test_every_example_builds(self, kind):
        examples = get_distribution_examples(kind)

        assert len(examples) == 3
        for entry in examples:
            dist = create_distribution(kind, entry.params)
            assert entry.description
            assert dist.discrete == kind.is_discrete


def test_package_exports():
    assert distribution_engine.__version__ == "1.0.0"
    dist = distribution_engine.create_distribution("poisson", {"lambda": 2})
    assert isinstance(dist, distribution_engine.PoissonDistribution)
