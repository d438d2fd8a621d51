"""distribution_engine.core.statistics.table

Distribution tables: (x, density, cdf, ccdf) sampled on a regular grid.

For each x in start, start + step, ..., end (inclusive):
    density = pmf(x) or pdf(x)
    cdf     = cdf(x)
    ccdf    = 1 - cdf(x - offset),  offset = 1 (discrete) or 0 (continuous)

For discrete distributions ccdf is exactly P(X >= x). For continuous ones
it is 1 - cdf(x), the survival function, which equals P(X >= x) only
because point probabilities vanish; no density correction is applied.
"""

from __future__ import annotations

import math
import numbers
from typing import Callable, List

import numpy as np

from ..errors import ParameterError
from ..results.table import TableRow

# Relative slack so that end is reached despite floating-point division
_GRID_EPS = 1e-9


def table_row_count(start: float, end: float, step: float) -> int:
    """Number of grid points from start to end (inclusive) for a given step."""
    return int(math.floor((end - start) / step + _GRID_EPS)) + 1


def validate_table_range(start: float, end: float, step: float, max_rows: int) -> List[str]:
    """
    Validate a table range.

    Returns:
        List of error messages (empty if valid)
    """
    errors: List[str] = []

    for name, value in (("start", start), ("end", end), ("step", step)):
        if not isinstance(value, numbers.Real) or isinstance(value, bool) or not math.isfinite(value):
            errors.append(f"{name} must be a finite number")
    if errors:
        return errors

    if step <= 0:
        errors.append(f"step must be positive, got {step}")
    if end < start:
        errors.append(f"end ({end}) must not be smaller than start ({start})")
    if errors:
        return errors

    rows = table_row_count(start, end, step)
    if rows > max_rows:
        errors.append(f"Table would have {rows} rows (limit {max_rows}); increase step or narrow the range")

    return errors


def generate_table(
    density: Callable[[float], float],
    cdf: Callable[[float], float],
    start: float,
    end: float,
    step: float = 1.0,
    discrete: bool = True,
    max_rows: int = 100_000,
) -> List[TableRow]:
    """Tabulate density, cdf and ccdf on [start, end].

    Args:
        density: pmf (discrete) or pdf (continuous)
        cdf: cumulative distribution function
        start: first x
        end: last x (inclusive)
        step: grid spacing (>0)
        discrete: True for discrete distributions
        max_rows: largest number of rows accepted

    Returns:
        rows in ascending x

    Raises:
        ParameterError: non-positive step, end < start, or too many rows
    """
    errors = validate_table_range(start, end, step, max_rows)
    if errors:
        raise ParameterError(errors)

    offset = 1 if discrete else 0
    count = table_row_count(start, end, step)

    # x_i = start + i * step avoids drift from repeated addition
    grid = start + step * np.arange(count, dtype=float)

    rows: List[TableRow] = []
    for raw in grid:
        x = round(float(raw), 12)
        rows.append(
            TableRow(
                x=x,
                density=density(x),
                cdf=cdf(x),
                ccdf=1.0 - cdf(x - offset),
                discrete=discrete,
            )
        )
    return rows
