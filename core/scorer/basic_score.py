#!/usr/bin/env python3
"""
Basic Score - Fallback model for profiles without usable insights.

Uses only the experience level and gym name that every profile carries.
"""

import logging
import math
from typing import Any, Dict, Tuple

from core.matcher.models import Profile
from core.scorer.experience import level_distance

logger = logging.getLogger(__name__)

SAME_LEVEL_BASE = 0.8
ADJACENT_LEVEL_BASE = 0.4
DISTANT_LEVEL_BASE = 0.2
SAME_GYM_BONUS = 0.2


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up."""
    return int(math.floor(value + 0.5))


def _normalize_level(value: Any) -> str:
    if not isinstance(value, str):
        return ""
    return value.strip().lower()


def basic_experience_base(level_a: Any, level_b: Any) -> float:
    a = _normalize_level(level_a)
    b = _normalize_level(level_b)
    if a and a == b:
        return SAME_LEVEL_BASE
    if level_distance(a, b) == 1:
        return ADJACENT_LEVEL_BASE
    return DISTANT_LEVEL_BASE


def same_gym(viewer: Profile, candidate: Profile) -> bool:
    return bool(viewer.gym_name) and bool(candidate.gym_name) and viewer.gym_name == candidate.gym_name


def calculate_basic_score(viewer: Profile, candidate: Profile) -> Tuple[int, Dict[str, Any]]:
    """
    Score a pair from profile fields alone.

    Returns: (total 0-100, components)
    """
    base = basic_experience_base(viewer.experience_level, candidate.experience_level)
    gym_bonus = SAME_GYM_BONUS if same_gym(viewer, candidate) else 0.0
    total = max(0, min(100, round_half_up((base + gym_bonus) * 100)))

    components = {
        'experience_base': base,
        'gym_bonus': gym_bonus,
        'total': total,
    }
    logger.debug("Basic score %s -> %s: %s", viewer.id, candidate.id, components)
    return total, components
