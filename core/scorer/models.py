#!/usr/bin/env python3
"""
Scoring Models - Data structures for scoring results.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Literal

from core.scorer.labels import label_for

ScoringMode = Literal["insights", "basic"]

_PERCENT_FIELDS = ('style', 'goals', 'experience', 'preferences', 'total')


@dataclass(frozen=True)
class CompatibilityBreakdown:
    """Per-factor compatibility for one (viewer, candidate) pair, as 0-100 integers."""
    style: int
    goals: int
    experience: int
    preferences: int
    total: int
    mode: ScoringMode = "insights"

    def __post_init__(self):
        for name in _PERCENT_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= 100:
                raise ValueError(f"{name} must be an integer in [0, 100], got {value!r}")

    @property
    def label(self) -> str:
        return label_for(self.total)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['label'] = self.label
        return data
