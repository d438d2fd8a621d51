"""
Table rows produced by the table generator.

A row samples one point of a distribution:
- x: evaluation point
- density: pmf (discrete) or pdf (continuous) at x
- cdf: P(X <= x)
- ccdf: 1 - cdf(x - 1) for discrete rows, 1 - cdf(x) for continuous rows
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Sequence

import numpy as np

from .serialization import json_safe_value


@dataclass(frozen=True)
class TableRow:
    """
    One sample of a distribution table.

    Attributes:
        x: Evaluation point
        density: Probability mass (discrete) or density (continuous) at x
        cdf: Cumulative probability P(X <= x)
        ccdf: Survival value approximating P(X >= x)
        discrete: True for rows of a discrete distribution
    """

    x: float
    density: float
    cdf: float
    ccdf: float
    discrete: bool = True

    def to_dict(self) -> Dict[str, Any]:
        """Serialize table row to dictionary (``pmf`` or ``pdf`` key by kind)."""
        return {
            "x": json_safe_value(self.x),
            "pmf" if self.discrete else "pdf": json_safe_value(self.density),
            "cdf": json_safe_value(self.cdf),
            "ccdf": json_safe_value(self.ccdf),
        }


def table_to_dicts(rows: Sequence[TableRow]) -> List[Dict[str, Any]]:
    """Serialize a sequence of rows."""
    return [row.to_dict() for row in rows]


def table_to_array(rows: Sequence[TableRow]) -> np.ndarray:
    """Stack rows into an (n x 4) array of x, density, cdf, ccdf."""
    if not rows:
        return np.zeros((0, 4), dtype=float)
    return np.array([(r.x, r.density, r.cdf, r.ccdf) for r in rows], dtype=float)
