"""
Tests for inequality probabilities and table generation.
"""

import math

import numpy as np
import pytest

from distribution_engine.core.errors import DomainError, ParameterError
from distribution_engine.core.models.inequality import InequalityType
from distribution_engine.core.results.table import TableRow, table_to_array, table_to_dicts
from distribution_engine.core.statistics.probability import calculate_interval_probability, calculate_probability
from distribution_engine.core.statistics.table import generate_table, table_row_count, validate_table_range


# Fair die on 1..6
def die_pmf(k):
    return 1.0 / 6.0 if float(k).is_integer() and 1 <= k <= 6 else 0.0


def die_cdf(k):
    return min(1.0, max(0.0, math.floor(k) / 6.0))


# Uniform on [0, 2]
def uniform_pdf(x):
    return 0.5 if 0.0 <= x <= 2.0 else 0.0


def uniform_cdf(x):
    return min(1.0, max(0.0, 0.5 * x))


class TestInequalityType:
    """Tests for the inequality selector enum."""

    def test_from_string(self):
        assert InequalityType.from_string("le") is InequalityType.LE
        assert InequalityType.from_string(" GE ") is InequalityType.GE

    def test_unknown_raises_domain_error(self):
        with pytest.raises(DomainError):
            InequalityType.from_string("between")

    def test_coerce_and_symbol(self):
        assert InequalityType.coerce(InequalityType.NE) is InequalityType.NE
        assert InequalityType.coerce("eq").symbol == "="


class TestCalculateProbability:
    """Tests for the selector-to-formula mapping."""

    @pytest.mark.parametrize(
        "inequality, expected",
        [
            ("le", 3 / 6),
            ("lt", 2 / 6),
            ("ge", 4 / 6),
            ("gt", 3 / 6),
            ("eq", 1 / 6),
            ("ne", 5 / 6),
        ],
    )
    def test_discrete(self, inequality, expected):
        p = calculate_probability(3, die_pmf, die_cdf, inequality, discrete=True)
        assert p == pytest.approx(expected)

    @pytest.mark.parametrize(
        "inequality, expected",
        [
            (InequalityType.LE, 0.5),
            (InequalityType.LT, 0.5 - 0.5),
            (InequalityType.GE, 1.0 - 0.5 + 0.5),
            (InequalityType.GT, 0.5),
            (InequalityType.EQ, 0.5),
            (InequalityType.NE, 0.5),
        ],
    )
    def test_continuous_mixes_in_point_density(self, inequality, expected):
        p = calculate_probability(1.0, uniform_pdf, uniform_cdf, inequality, discrete=False)
        assert p == pytest.approx(expected)

    def test_default_is_le(self):
        assert calculate_probability(4, die_pmf, die_cdf) == pytest.approx(4 / 6)

    def test_unknown_selector(self):
        with pytest.raises(DomainError):
            calculate_probability(1, die_pmf, die_cdf, "approx")


class TestIntervalProbability:
    """Tests for integer interval probabilities."""

    def test_inclusive(self):
        assert calculate_interval_probability(2, 4, die_cdf) == pytest.approx(3 / 6)

    def test_exclusive(self):
        assert calculate_interval_probability(2, 5, die_cdf, inclusive=False) == pytest.approx(2 / 6)


class TestTableRange:
    """Tests for table range validation."""

    def test_row_count_reaches_end(self):
        assert table_row_count(0.0, 1.0, 0.1) == 11
        assert table_row_count(-4.0, 4.0, 0.1) == 81
        assert table_row_count(0, 20, 1) == 21

    def test_valid_range(self):
        assert validate_table_range(0, 10, 1, max_rows=100) == []

    def test_bad_step_and_order(self):
        assert len(validate_table_range(0, 10, 0, max_rows=100)) == 1
        assert len(validate_table_range(10, 0, -1, max_rows=100)) == 2

    def test_non_finite(self):
        errors = validate_table_range(0, math.inf, 1, max_rows=100)
        assert errors == ["end must be a finite number"]

    def test_numpy_scalar_bounds(self):
        assert validate_table_range(np.int64(0), np.int64(5), np.float64(0.5), max_rows=100) == []
        assert validate_table_range(np.float64(0.0), np.float64(np.nan), 1, max_rows=100) == [
            "end must be a finite number"
        ]

    def test_row_limit(self):
        errors = validate_table_range(0, 1000, 0.001, max_rows=10_000)
        assert len(errors) == 1
        assert "limit 10000" in errors[0]


class TestGenerateTable:
    """Tests for the table generator."""

    def test_discrete_rows(self):
        rows = generate_table(die_pmf, die_cdf, 1, 6, 1, discrete=True)

        assert [r.x for r in rows] == [1, 2, 3, 4, 5, 6]
        assert rows[0].ccdf == pytest.approx(1.0)
        assert rows[2].ccdf == pytest.approx(4 / 6)
        assert rows[-1].cdf == pytest.approx(1.0)
        assert all(r.density == pytest.approx(1 / 6) for r in rows)

    def test_continuous_rows_use_plain_survival(self):
        rows = generate_table(uniform_pdf, uniform_cdf, 0.0, 2.0, 0.5, discrete=False)

        assert len(rows) == 5
        for row in rows:
            assert row.ccdf == pytest.approx(1.0 - row.cdf)

    def test_grid_has_no_drift(self):
        rows = generate_table(uniform_pdf, uniform_cdf, 0.0, 2.0, 0.1, discrete=False)

        assert len(rows) == 21
        assert rows[3].x == 0.3
        assert rows[-1].x == 2.0

    def test_invalid_range_raises(self):
        with pytest.raises(ParameterError) as excinfo:
            generate_table(die_pmf, die_cdf, 6, 1, 1)
        assert "must not be smaller" in str(excinfo.value)

        with pytest.raises(ParameterError):
            generate_table(die_pmf, die_cdf, 1, 6, 0)

        with pytest.raises(ParameterError):
            generate_table(die_pmf, die_cdf, 0, 100, 0.001, max_rows=1000)

    def test_parameter_error_is_value_error(self):
        with pytest.raises(ValueError):
            generate_table(die_pmf, die_cdf, 1, 6, -1)


class TestTableSerialization:
    """Tests for TableRow serialization."""

    def test_row_keys_follow_kind(self):
        discrete = TableRow(x=1, density=0.2, cdf=0.3, ccdf=0.9, discrete=True).to_dict()
        continuous = TableRow(x=1.0, density=0.2, cdf=0.3, ccdf=0.7, discrete=False).to_dict()

        assert set(discrete) == {"x", "pmf", "cdf", "ccdf"}
        assert set(continuous) == {"x", "pdf", "cdf", "ccdf"}

    def test_non_finite_values_become_none(self):
        row = TableRow(x=0.0, density=math.inf, cdf=0.0, ccdf=1.0, discrete=False)
        assert row.to_dict()["pdf"] is None

    def test_to_dicts_and_array(self):
        rows = generate_table(die_pmf, die_cdf, 1, 3, 1)

        dicts = table_to_dicts(rows)
        assert dicts[1]["pmf"] == pytest.approx(1 / 6)

        arr = table_to_array(rows)
        assert arr.shape == (3, 4)
        np.testing.assert_allclose(arr[:, 0], [1.0, 2.0, 3.0])
        np.testing.assert_allclose(arr[:, 2], [1 / 6, 2 / 6, 3 / 6])

    def test_empty_array(self):
        assert table_to_array([]).shape == (0, 4)
