#!/usr/bin/env python3
"""
Ranking Models - Inputs and results of a ranking pass.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from core.config_loader import MatchWeights
from core.matcher.models import Profile
from core.scorer.models import CompatibilityBreakdown


class SortKey(str, Enum):
    COMPATIBILITY = "compatibility"      # total, descending
    DISTANCE = "distance"                # ascending, unknown last
    EXPERIENCE_LEVEL = "experienceLevel"  # ordinal, descending, unknown last


@dataclass(frozen=True)
class CandidateFilters:
    """Pool filters applied before scoring. None/False disables a filter."""
    gender: Optional[str] = None
    experience_level: Optional[str] = None
    max_distance: Optional[float] = None
    same_gym_only: bool = False
    exclude_viewer: bool = True


@dataclass(frozen=True)
class RankedCandidate:
    profile: Profile
    breakdown: CompatibilityBreakdown
    distance: Optional[float] = None

    @property
    def id(self) -> str:
        return self.profile.id


@dataclass(frozen=True)
class ScoringFailure:
    """A candidate that could not be scored, with the reason."""
    profile_id: Optional[str]
    error: str
    error_type: str = "InvalidProfileError"


@dataclass
class RankingResult:
    """Ordered candidates plus everything needed to explain the order."""
    candidates: List[RankedCandidate]
    sort_by: SortKey
    weights: MatchWeights
    failures: List[ScoringFailure] = field(default_factory=list)

    @property
    def breakdowns(self) -> Dict[str, CompatibilityBreakdown]:
        """Breakdown per profile id.

        Candidates sharing an id collapse to one entry, the lowest ranked of
        them. Iterate `candidates` to see every entry.
        """
        return {c.profile.id: c.breakdown for c in self.candidates}

    @property
    def ids(self) -> List[str]:
        return [c.profile.id for c in self.candidates]

    def __len__(self) -> int:
        return len(self.candidates)
