"""
Inequality selectors for probability queries.

A selector names the event whose probability is requested for a value x:

- LE: P(X <= x)
- LT: P(X < x)
- GE: P(X >= x)
- GT: P(X > x)
- EQ: P(X = x)
- NE: P(X != x)
"""

from __future__ import annotations

from enum import Enum
from typing import Union

from ..errors import DomainError


class InequalityType(Enum):
    """Closed set of inequality selectors."""
    LE = "le"
    LT = "lt"
    GE = "ge"
    GT = "gt"
    EQ = "eq"
    NE = "ne"

    @classmethod
    def from_string(cls, s: str) -> "InequalityType":
        """Create InequalityType from string (case-insensitive)."""
        s_lower = str(s).lower().strip()
        for member in cls:
            if member.value == s_lower:
                return member
        raise DomainError(f"Unknown inequality type: {s}")

    @classmethod
    def coerce(cls, value: Union["InequalityType", str]) -> "InequalityType":
        """Return ``value`` as an InequalityType, parsing strings once."""
        if isinstance(value, cls):
            return value
        return cls.from_string(value)

    @property
    def symbol(self) -> str:
        """Mathematical symbol of the selector."""
        return _SYMBOLS[self]


_SYMBOLS = {
    InequalityType.LE: "≤",
    InequalityType.LT: "<",
    InequalityType.GE: "≥",
    InequalityType.GT: ">",
    InequalityType.EQ: "=",
    InequalityType.NE: "≠",
}
