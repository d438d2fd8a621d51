"""
Tests for the Normal, Exponential, Student-t, Chi-squared and Fisher-F
distributions.
"""

import logging
import math

import numpy as np
import pytest

from distribution_engine.core.errors import DomainError, ParameterError
from distribution_engine.core.models.options import NumericsOptions
from distribution_engine.core.special.functions import standard_normal_cdf
from distribution_engine.core.distributions.chi2 import Chi2Distribution, chi2_cdf
from distribution_engine.core.distributions.exponential import ExponentialDistribution, exponential_quantile
from distribution_engine.core.distributions.fisher import FisherDistribution
from distribution_engine.core.distributions.normal import (
    NormalDistribution,
    inverse_standard_normal_cdf,
    normal_cdf,
    standard_normal_quantile,
)
from distribution_engine.core.distributions.student import StudentDistribution, student_quantile


class TestNormal:
    """Tests for NormalDistribution."""

    def test_known_values(self):
        dist = NormalDistribution()

        assert dist.cdf(0.0) == 0.5
        assert dist.pdf(0.0) == pytest.approx(0.3989422804014327)
        assert dist.quantile(0.975) == pytest.approx(1.959964, abs=1e-6)
        assert standard_normal_quantile(0.025) == pytest.approx(-1.959964, abs=1e-6)

    def test_location_scale(self):
        dist = NormalDistribution(100.0, 15.0)

        assert dist.cdf(115.0) == pytest.approx(standard_normal_cdf(1.0))
        assert dist.quantile(0.5) == pytest.approx(100.0, abs=1e-9)
        assert normal_cdf(100.0, 15.0, 70.0) == pytest.approx(0.02275, abs=1e-5)

    @pytest.mark.parametrize("p", [1e-6, 0.001, 0.02, 0.1, 0.3, 0.7, 0.95, 0.999])
    def test_inverse_cdf_symmetry(self, p):
        assert inverse_standard_normal_cdf(p) == pytest.approx(-inverse_standard_normal_cdf(1.0 - p), abs=1e-9)

    def test_inverse_cdf_tail_branch(self):
        # Phi(-3) = 0.0013498980316301
        assert inverse_standard_normal_cdf(0.0013498980316301) == pytest.approx(-3.0, abs=1e-6)

    def test_quantile_extremes(self):
        dist = NormalDistribution()

        assert dist.quantile(0.0) == -math.inf
        assert dist.quantile(1.0) == math.inf

    def test_moments(self):
        dist = NormalDistribution(3.0, 2.0)

        assert dist.mean == 3.0
        assert dist.variance == 4.0
        assert dist.std_dev == 2.0
        assert dist.median == dist.mode == 3.0
        assert dist.skewness == 0.0
        assert dist.kurtosis == 0.0

    def test_validation(self):
        assert NormalDistribution.validate_params({"mu": 0, "sigma": 1}) == []
        assert NormalDistribution.validate_params({"mu": "a", "sigma": 0}) == [
            "mu must be a number",
            "sigma must be a number greater than 0",
        ]
        with pytest.raises(ParameterError):
            NormalDistribution(0.0, -1.0)

    def test_continuous_probability_selectors(self):
        dist = NormalDistribution()

        assert dist.probability(0.0, "le") == 0.5
        assert dist.probability(0.0, "gt") == 0.5
        assert dist.probability(0.0, "lt") == pytest.approx(0.5 - dist.pdf(0.0))
        assert dist.interval_probability(-1.0, 1.0) == pytest.approx(0.682689, abs=1e-6)

    def test_default_table(self):
        rows = NormalDistribution(10.0, 2.0).generate_table()

        assert len(rows) == 81
        assert rows[0].x == pytest.approx(2.0)
        assert rows[-1].x == pytest.approx(18.0)
        assert rows[40].cdf == pytest.approx(0.5)
        assert "pdf" in rows[0].to_dict()

    def test_to_dict(self):
        data = NormalDistribution(0.0, 1.0).to_dict()

        assert data["mu"] == 0.0
        assert data["sigma"] == 1.0
        assert data["median"] == 0.0
        assert data["kurtosis"] == 0.0


class TestExponential:
    """Tests for ExponentialDistribution."""

    def test_median_quantile(self):
        dist = ExponentialDistribution(1.0)

        assert dist.quantile(0.5) == pytest.approx(math.log(2.0), abs=1e-12)
        assert dist.quantile(0.5) == pytest.approx(0.693147, abs=1e-6)
        assert dist.median == pytest.approx(math.log(2.0))
        assert exponential_quantile(2.0, 0.5) == pytest.approx(math.log(2.0) / 2.0)

    def test_quantile_extremes(self):
        dist = ExponentialDistribution(3.0)

        assert dist.quantile(0.0) == 0.0
        assert dist.quantile(1.0) == math.inf

    def test_functions(self):
        dist = ExponentialDistribution(0.5)

        assert dist.pdf(-1.0) == 0.0
        assert dist.pdf(0.0) == 0.5
        assert dist.cdf(2.0) == pytest.approx(1.0 - math.exp(-1.0))
        assert dist.ccdf(2.0) == pytest.approx(math.exp(-1.0))
        assert dist.ccdf(-1.0) == 1.0

    def test_hazard_and_memoryless(self):
        dist = ExponentialDistribution(0.5)

        assert dist.hazard(3.0) == 0.5
        assert dist.hazard(-3.0) == 0.0
        assert dist.cumulative_hazard(4.0) == 2.0
        assert dist.memoryless_probability(10.0, 2.0) == pytest.approx(dist.ccdf(2.0))
        assert dist.memoryless_probability(-1.0, 2.0) == 0.0

    def test_scale(self):
        dist = ExponentialDistribution.from_scale(2.0)

        assert dist.lam == 0.5
        assert dist.scale == 2.0
        assert dist.mean == 2.0
        assert dist.variance == 4.0
        assert dist.to_dict()["scale"] == 2.0

    def test_from_dict_accepts_scale(self):
        assert ExponentialDistribution.from_dict({"scale": 4}).lam == 0.25
        assert ExponentialDistribution.from_dict({"lambda": 2, "scale": 4}).lam == 2.0

    def test_validation(self):
        assert ExponentialDistribution.validate_params({"lambda": 1}) == []
        assert ExponentialDistribution.validate_params({"scale": 2}) == []
        assert ExponentialDistribution.validate_params({}) == ["lambda must be a number greater than 0"]
        assert ExponentialDistribution.validate_params({"lambda": 1, "scale": -2}) == [
            "scale must be a number greater than 0"
        ]
        with pytest.raises(ParameterError):
            ExponentialDistribution(0.0)
        with pytest.raises(ParameterError):
            ExponentialDistribution.from_scale(-1.0)

    def test_examples_are_valid(self):
        for entry in ExponentialDistribution.get_examples():
            assert ExponentialDistribution.validate_params(entry.params) == []

    def test_shape_moments(self):
        dist = ExponentialDistribution(1.0)

        assert dist.mode == 0.0
        assert dist.skewness == 2.0
        assert dist.kurtosis == 6.0


class TestStudent:
    """Tests for StudentDistribution."""

    def test_cauchy_case(self):
        dist = StudentDistribution(1.0)

        assert dist.cdf(1.0) == pytest.approx(0.75)
        assert dist.pdf(0.0) == pytest.approx(1.0 / math.pi)

    def test_two_degrees_of_freedom(self):
        dist = StudentDistribution(2.0)

        assert dist.cdf(1.0) == pytest.approx(0.5 + 1.0 / (2.0 * math.sqrt(3.0)))
        assert dist.cdf(0.0) == 0.5

    def test_integrated_cdf(self):
        dist = StudentDistribution(5.0)

        assert dist.cdf(0.0) == pytest.approx(0.5, abs=1e-5)
        assert dist.cdf(2.015048) == pytest.approx(0.95, abs=1e-5)
        for t in (-3.0, -0.7, 0.4, 1.5, 4.0):
            assert dist.cdf(t) == pytest.approx(dist.analytic_cdf(t), abs=1e-5)

    def test_cdf_is_clamped(self):
        dist = StudentDistribution(5.0)

        assert dist.cdf(-80.0) == 0.0
        assert 0.0 <= dist.cdf(60.0) <= 1.0
        assert dist.cdf(math.inf) == 1.0
        assert dist.cdf(-math.inf) == 0.0

    def test_integration_lower_bound_drops_heavy_tail(self):
        """Mass below -50 is missed; it only matters for small df."""
        heavy = StudentDistribution(0.5)
        gap = heavy.analytic_cdf(5.0) - heavy.cdf(5.0)
        assert 0.03 < gap < 0.06

        light = StudentDistribution(3.0)
        assert light.cdf(5.0) == pytest.approx(light.analytic_cdf(5.0), abs=2e-5)

    def test_quantile(self):
        assert student_quantile(10.0, 0.975) == pytest.approx(2.228139, abs=1e-3)
        assert StudentDistribution(1.0).quantile(0.75) == pytest.approx(1.0, abs=1e-6)
        assert StudentDistribution(5.0).quantile(0.5) == pytest.approx(0.0, abs=1e-4)

    def test_moments(self):
        assert math.isnan(StudentDistribution(1.0).mean)
        assert math.isnan(StudentDistribution(1.0).variance)
        assert StudentDistribution(2.0).variance == math.inf
        assert StudentDistribution(5.0).variance == pytest.approx(5.0 / 3.0)
        assert math.isnan(StudentDistribution(3.0).skewness)
        assert StudentDistribution(4.5).skewness == 0.0
        assert math.isnan(StudentDistribution(4.0).kurtosis)
        assert StudentDistribution(6.0).kurtosis == pytest.approx(6.0)

    def test_to_dict_maps_undefined_moments_to_none(self):
        data = StudentDistribution(1.0).to_dict()

        assert data["df"] == 1.0
        assert data["mean"] is None
        assert data["variance"] is None
        assert data["stdDev"] is None
        assert data["mode"] == 0.0

    def test_integration_fallback(self, caplog):
        opts = NumericsOptions(simpson_tolerance=1e-300, simpson_max_intervals=1)

        with caplog.at_level(logging.WARNING, logger="distribution_engine.core.distributions.student"):
            assert StudentDistribution(5.0, opts).cdf(20.0) == 1.0
            assert StudentDistribution(5.0, opts).cdf(-20.0) == 0.0
            assert StudentDistribution(5.0, opts).cdf(0.3) == 0.5

            expected = standard_normal_cdf(1.0 / math.sqrt(40.0 / 38.0))
            assert StudentDistribution(40.0, opts).cdf(1.0) == pytest.approx(expected)

        assert "using fallback" in caplog.text

    def test_validation(self):
        assert StudentDistribution.validate_params({"df": 3}) == []
        assert StudentDistribution.validate_params({"df": 0}) == ["df must be a number greater than 0"]
        with pytest.raises(ParameterError):
            StudentDistribution(-2.0)


class TestChi2:
    """Tests for Chi2Distribution."""

    def test_two_degrees_of_freedom_closed_form(self):
        dist = Chi2Distribution(2.0)

        assert dist.cdf(2.0) == pytest.approx(1.0 - math.exp(-1.0), rel=1e-14)
        assert dist.cdf(2.0) == pytest.approx(0.632121, abs=1e-6)
        for x in (0.5, 3.0, 10.0):
            assert dist.cdf(x) == pytest.approx(1.0 - math.exp(-x / 2.0), rel=1e-14)
        assert dist.pdf(2.0) == pytest.approx(0.5 * math.exp(-1.0))

    def test_one_degree_of_freedom(self):
        dist = Chi2Distribution(1.0)

        assert dist.cdf(3.841458820694124) == pytest.approx(0.95, abs=2e-7)
        assert dist.pdf(1.0) == pytest.approx(math.exp(-0.5) / math.sqrt(2.0 * math.pi))

    def test_trapezoid_cdf_matches_analytic(self):
        dist = Chi2Distribution(5.0)

        assert dist.cdf(11.0705) == pytest.approx(0.95, abs=1e-4)
        for x in (1.0, 4.0, 9.0, 20.0):
            assert dist.cdf(x) == pytest.approx(dist.analytic_cdf(x), abs=1e-4)

    def test_out_of_support(self):
        dist = Chi2Distribution(4.0)

        assert dist.pdf(0.0) == 0.0
        assert dist.pdf(-1.0) == 0.0
        assert dist.cdf(-1.0) == 0.0
        assert dist.cdf(0.0005) == 0.0

    def test_pdf_clamped(self):
        # exp(-x/2) underflows long before x = 5000
        assert Chi2Distribution(10.0).pdf(5000.0) == 1e-100

    def test_quantile(self):
        assert Chi2Distribution(2.0).quantile(0.95) == pytest.approx(5.991465, abs=1e-6)
        assert Chi2Distribution(10.0).quantile(0.95) == pytest.approx(18.307038, abs=1e-2)

    def test_moments(self):
        dist = Chi2Distribution(8.0)

        assert dist.mean == 8.0
        assert dist.variance == 16.0
        assert dist.mode == 6.0
        assert Chi2Distribution(1.0).mode == 0.0
        assert dist.skewness == pytest.approx(1.0)
        assert dist.kurtosis == pytest.approx(1.5)

    def test_convenience(self):
        assert chi2_cdf(2.0, 2.0) == pytest.approx(0.632121, abs=1e-6)


class TestFisher:
    """Tests for FisherDistribution."""

    @pytest.mark.parametrize("x", [0.1, 0.5, 1.0, 3.0, 20.0])
    def test_one_one_closed_form(self, x):
        dist = FisherDistribution(1.0, 1.0)

        assert dist.cdf(x) == pytest.approx(dist.analytic_cdf(x), abs=1e-8)
        assert dist.pdf(x) == pytest.approx(1.0 / (math.pi * math.sqrt(x) * (1.0 + x)))

    @pytest.mark.parametrize("x", [0.1, 0.5, 1.0, 3.0, 20.0])
    def test_one_two_closed_form(self, x):
        dist = FisherDistribution(1.0, 2.0)

        assert dist.cdf(x) == pytest.approx(dist.analytic_cdf(x), abs=1e-8)
        assert dist.cdf(x) == pytest.approx(math.sqrt(x / (x + 2.0)))

    def test_closed_form_pdfs_are_derivatives(self):
        h = 1e-6
        for d2 in (1.0, 2.0):
            dist = FisherDistribution(1.0, d2)
            for x in (0.3, 2.0):
                numeric = (dist.cdf(x + h) - dist.cdf(x - h)) / (2.0 * h)
                assert dist.pdf(x) == pytest.approx(numeric, rel=1e-5)

    def test_general_case(self):
        dist = FisherDistribution(5.0, 10.0)

        assert dist.cdf(3.325835) == pytest.approx(0.95, abs=1e-3)
        for x in (0.5, 1.0, 2.0, 5.0):
            assert dist.cdf(x) == pytest.approx(dist.analytic_cdf(x), abs=1e-3)

    def test_general_pdf_matches_beta_form(self):
        """pdf at x = 1 for d1 = d2 = 4: Gamma(4) / Gamma(2)^2 * 4^2 * 4^2 / 8^4."""
        dist = FisherDistribution(4.0, 4.0)
        assert dist.pdf(1.0) == pytest.approx(6.0 * 256.0 / 4096.0, rel=1e-10)

    def test_quantile(self):
        assert FisherDistribution(1.0, 1.0).quantile(0.5) == pytest.approx(1.0, abs=1e-6)
        assert FisherDistribution(5.0, 10.0).quantile(0.95) == pytest.approx(3.3258, abs=2e-2)

    def test_moments(self):
        assert math.isnan(FisherDistribution(5.0, 2.0).mean)
        assert FisherDistribution(5.0, 10.0).mean == pytest.approx(1.25)
        assert math.isnan(FisherDistribution(5.0, 4.0).variance)
        expected_var = 2 * 100 * 13 / (5 * 64 * 6)
        assert FisherDistribution(5.0, 10.0).variance == pytest.approx(expected_var)
        assert FisherDistribution(2.0, 10.0).mode == 0.0
        assert FisherDistribution(5.0, 10.0).mode == pytest.approx(10 * 3 / (5 * 12))

    def test_validation(self):
        assert FisherDistribution.validate_params({"d1": 5, "d2": 10}) == []
        assert FisherDistribution.validate_params({"d1": 0, "d2": -1}) == [
            "d1 must be a number greater than 0",
            "d2 must be a number greater than 0",
        ]
        with pytest.raises(ParameterError):
            FisherDistribution(1.0, 0.0)

    def test_out_of_support(self):
        dist = FisherDistribution(5.0, 10.0)

        assert dist.pdf(0.0) == 0.0
        assert dist.cdf(-2.0) == 0.0
        assert dist.cdf(math.inf) == 1.0


class TestContinuousCommon:
    """Behaviour shared by every continuous distribution."""

    @pytest.mark.parametrize(
        "dist",
        [
            NormalDistribution(),
            ExponentialDistribution(1.0),
            StudentDistribution(1.0),
            Chi2Distribution(2.0),
            FisherDistribution(1.0, 1.0),
        ],
    )
    def test_quantile_domain_error(self, dist):
        with pytest.raises(DomainError):
            dist.quantile(1.01)
        with pytest.raises(DomainError):
            dist.quantile(math.nan)

    def test_sample_with_seeded_generator(self):
        dist = ExponentialDistribution(2.0)

        first = dist.sample(1000, rng=np.random.default_rng(7))
        second = dist.sample(1000, rng=np.random.default_rng(7))

        np.testing.assert_array_equal(first, second)
        assert first.dtype == np.float64
        assert np.all(first >= 0.0)
        assert first.mean() == pytest.approx(0.5, abs=0.05)

    def test_sample_shape(self):
        draws = NormalDistribution(5.0, 1.0).sample((4, 3), rng=np.random.default_rng(1))

        assert draws.shape == (4, 3)
        assert isinstance(NormalDistribution().sample(rng=np.random.default_rng(1)), float)
