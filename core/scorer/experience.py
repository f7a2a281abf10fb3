#!/usr/bin/env python3
"""
Experience Proximity - How close two experience levels are.
"""

from typing import Any

from core.matcher.models import ExperienceLevel

UNKNOWN_LEVEL_SCORE = 0.5

# Keyed by ordinal distance
_PROXIMITY = {0: 1.0, 1: 0.7, 2: 0.4}


def level_distance(level_a: Any, level_b: Any):
    """Ordinal distance between two levels, or None if either is unrecognized."""
    a = ExperienceLevel.parse(level_a)
    b = ExperienceLevel.parse(level_b)
    if a is None or b is None:
        return None
    return abs(a.ordinal - b.ordinal)


def calculate_experience_proximity(level_a: Any, level_b: Any) -> float:
    distance = level_distance(level_a, level_b)
    if distance is None:
        return UNKNOWN_LEVEL_SCORE
    return _PROXIMITY[distance]
