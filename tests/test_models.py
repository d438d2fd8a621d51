"""
Tests for options, catalog entries, approximation reports and errors.
"""

import json
import math

import numpy as np
import pytest

from distribution_engine.core.errors import DistributionError, DomainError, IntegrationError, ParameterError
from distribution_engine.core.models.catalog import ExampleEntry
from distribution_engine.core.models.options import NumericsOptions
from distribution_engine.core.results.approximation import ApproximationResult
from distribution_engine.core.results.serialization import json_safe_value


class TestNumericsOptions:
    """Tests for NumericsOptions."""

    def test_defaults(self):
        opts = NumericsOptions()

        assert opts.quantile_tolerance == 1e-8
        assert opts.discrete_max_iterations == 10_000
        assert opts.student_lower_bound == -50.0
        assert opts.trapezoid_lower_bound == 0.001
        assert opts.trapezoid_intervals == 1000
        assert NumericsOptions.default() == opts

    def test_high_precision(self):
        opts = NumericsOptions.high_precision()

        assert opts.quantile_tolerance < NumericsOptions().quantile_tolerance
        assert opts.trapezoid_intervals == 10_000

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"quantile_tolerance": 0.0},
            {"quantile_max_iterations": 0},
            {"discrete_max_iterations": 0},
            {"simpson_tolerance": -1.0},
            {"simpson_max_depth": 0},
            {"simpson_max_intervals": 0},
            {"trapezoid_lower_bound": -0.1},
            {"trapezoid_lower_bound": 0.0},
            {"trapezoid_intervals": 0},
            {"max_table_rows": 0},
        ],
    )
    def test_invalid_values_raise(self, kwargs):
        with pytest.raises(ParameterError):
            NumericsOptions(**kwargs)

    def test_dict_round_trip(self):
        opts = NumericsOptions(quantile_tolerance=1e-10, trapezoid_intervals=2000)
        restored = NumericsOptions.from_dict(opts.to_dict())

        assert restored == opts

    def test_from_dict_keeps_missing_defaults(self):
        opts = NumericsOptions.from_dict({"max_table_rows": 50})

        assert opts.max_table_rows == 50
        assert opts.simpson_tolerance == 1e-6

    def test_is_immutable(self):
        opts = NumericsOptions()
        with pytest.raises(AttributeError):
            opts.quantile_tolerance = 1.0


class TestExampleEntry:
    """Tests for catalog entries."""

    def test_params_are_read_only(self):
        entry = ExampleEntry({"lambda": 2}, "Two arrivals")
        with pytest.raises(TypeError):
            entry.params["lambda"] = 3

    def test_source_mapping_is_copied(self):
        source = {"df": 5}
        entry = ExampleEntry(source, "five")
        source["df"] = 6

        assert entry.params["df"] == 5

    def test_to_dict(self):
        entry = ExampleEntry({"mu": 0, "sigma": 1}, "Standard normal")
        assert entry.to_dict() == {"params": {"mu": 0, "sigma": 1}, "description": "Standard normal"}


class TestApproximationResult:
    """Tests for approximation reports."""

    def test_errors(self):
        res = ApproximationResult("normal", 5, 0.25, 0.24)

        assert res.absolute_error == pytest.approx(0.01)
        assert res.relative_error == pytest.approx(0.04)

    def test_zero_exact(self):
        assert ApproximationResult("poisson", 3, 0.0, 0.0).relative_error == 0.0
        assert ApproximationResult("poisson", 3, 0.0, 0.1).relative_error == math.inf

    def test_to_dict(self):
        data = ApproximationResult("poisson", 3, 0.0, 0.1).to_dict()

        assert data["type"] == "poisson"
        assert data["k"] == 3
        assert data["error"] == pytest.approx(0.1)
        assert data["relativeError"] is None


class TestErrors:
    """Tests for the exception hierarchy."""

    def test_parameter_error_collects_messages(self):
        err = ParameterError(["a is bad", "b is bad"])

        assert err.errors == ["a is bad", "b is bad"]
        assert str(err) == "a is bad; b is bad"

    def test_parameter_error_accepts_string(self):
        assert ParameterError("only one").errors == ["only one"]

    def test_hierarchy(self):
        assert issubclass(ParameterError, DistributionError)
        assert issubclass(DomainError, ValueError)
        assert not issubclass(IntegrationError, ValueError)


def test_json_safe_value():
    assert json_safe_value(math.nan) is None
    assert json_safe_value(-math.inf) is None
    assert json_safe_value(1.5) == 1.5
    assert json_safe_value(3) == 3
    assert json_safe_value(None) is None


def test_json_safe_value_unwraps_numpy_scalars():
    value = json_safe_value(np.float64(0.25))
    assert type(value) is float
    assert value == 0.25

    count = json_safe_value(np.int64(7))
    assert type(count) is int
    assert count == 7

    assert json_safe_value(np.float64(np.nan)) is None
    assert json_safe_value(np.float32(np.inf)) is None
    assert json.dumps({"x": json_safe_value(np.int64(3))}) == '{"x": 3}'
