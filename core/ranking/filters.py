#!/usr/bin/env python3
"""
Candidate Filters - Narrow a partner pool before scoring.

Mirrors the nearby-partner query options: gender, experience level, maximum
distance, same gym only, and dropping the viewer from their own pool.
"""

import logging
import math
from typing import List, Optional

from core.matcher.models import Candidate, Profile
from core.ranking.models import CandidateFilters

logger = logging.getLogger(__name__)


def _norm(value: Optional[str]) -> str:
    if not isinstance(value, str):
        return ""
    return value.strip().lower()


def matches_filters(viewer: Profile, candidate: Candidate, filters: CandidateFilters) -> bool:
    profile = candidate.profile

    if filters.exclude_viewer and profile.id == viewer.id:
        return False

    if filters.gender and _norm(profile.gender) != _norm(filters.gender):
        return False

    if filters.experience_level and _norm(profile.experience_level) != _norm(filters.experience_level):
        return False

    if filters.max_distance is not None:
        distance = candidate.distance
        if distance is None or not math.isfinite(distance) or distance > filters.max_distance:
            return False

    if filters.same_gym_only:
        if not viewer.gym_name or profile.gym_name != viewer.gym_name:
            return False

    return True


def apply_filters(
    viewer: Profile,
    candidates: List[Candidate],
    filters: Optional[CandidateFilters]
) -> List[Candidate]:
    """Return the candidates that pass every active filter, in input order."""
    if filters is None:
        return list(candidates)

    kept = [c for c in candidates if matches_filters(viewer, c, filters)]
    if len(kept) != len(candidates):
        logger.debug("Filters kept %d of %d candidates", len(kept), len(candidates))
    return kept
