"""Probability utilities for the distribution engine.

This package contains the distribution-independent helpers used by every
distribution class:
- Inequality probabilities and interval probabilities
- Table generation over a regular grid
"""

from .probability import calculate_probability, calculate_interval_probability
from .table import generate_table, validate_table_range, table_row_count

__all__ = [
    "calculate_probability",
    "calculate_interval_probability",
    "generate_table",
    "validate_table_range",
    "table_row_count",
]
