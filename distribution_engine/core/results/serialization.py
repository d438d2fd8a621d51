"""Helpers for turning engine results into JSON-friendly dictionaries."""

from __future__ import annotations

import math
from typing import Any

import numpy as np


def json_safe_value(value: Any) -> Any:
    """Convert a value for JSON output.

    numpy scalars become the matching Python scalars; nan and +/-inf become
    None. Everything else is returned unchanged.
    """
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value
