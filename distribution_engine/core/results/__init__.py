"""
Result classes for the distribution engine.

This module exports the output value types:
- TableRow: One sample of a distribution table
- ApproximationResult: Exact vs. approximate point probability
"""

from .table import TableRow, table_to_dicts, table_to_array
from .approximation import ApproximationResult
from .serialization import json_safe_value

__all__ = [
    "TableRow",
    "table_to_dicts",
    "table_to_array",
    "ApproximationResult",
    "json_safe_value",
]
