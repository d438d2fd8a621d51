"""
Data models for the distribution engine.

This module provides the core value types:
- InequalityType: Closed set of probability selectors
- ExampleEntry: Documented parameter set of a distribution
- NumericsOptions: Tolerances and iteration caps of the numerical routines
"""

from .inequality import InequalityType
from .catalog import ExampleEntry
from .options import NumericsOptions

__all__ = [
    "InequalityType",
    "ExampleEntry",
    "NumericsOptions",
]
