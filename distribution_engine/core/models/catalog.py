"""
Example catalog entries.

Each distribution publishes a small static list of parameter sets with a
short description, used for documentation and demos.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping


@dataclass(frozen=True)
class ExampleEntry:
    """
    A documented parameter set.

    Attributes:
        params: Parameters keyed by their boundary names (read-only)
        description: Human-readable description of the scenario
    """

    params: Mapping[str, Any] = field(default_factory=dict)
    description: str = ""

    def __post_init__(self):
        object.__setattr__(self, 'params', MappingProxyType(dict(self.params)))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize example entry to dictionary."""
        return {
            "params": dict(self.params),
            "description": self.description,
        }
