#!/usr/bin/env python3
"""
Matcher Models - Profile and insight data structures.

Profiles arrive from the profile store already shaped; the engine only reads
them. Insights stay raw on the Profile until parse_insight_document turns
them into an InsightDocument (see core.matcher.insights).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Union


class ExperienceLevel(str, Enum):
    """Ordered training experience levels."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"

    @property
    def ordinal(self) -> int:
        return _LEVEL_ORDER[self]

    @classmethod
    def parse(cls, value: Any) -> Optional["ExperienceLevel"]:
        """Case-insensitive parse; returns None for anything unrecognized."""
        if isinstance(value, ExperienceLevel):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


_LEVEL_ORDER = {
    ExperienceLevel.BEGINNER: 0,
    ExperienceLevel.INTERMEDIATE: 1,
    ExperienceLevel.ADVANCED: 2,
}


@dataclass(frozen=True)
class InsightDocument:
    """Parsed personality insight for one profile."""
    workout_style: str = ""
    recommended_goals: List[str] = field(default_factory=list)
    partner_preferences: str = ""
    motivation_tips: List[str] = field(default_factory=list)  # carried, never scored


@dataclass(frozen=True)
class Profile:
    """A user profile as read from the profile store."""
    id: str
    experience_level: str
    gender: Optional[str] = None
    gym_name: Optional[str] = None
    bio: Optional[str] = None
    # None, a JSON string, a mapping, or an InsightDocument
    insights: Any = None

    @property
    def level(self) -> Optional[ExperienceLevel]:
        return ExperienceLevel.parse(self.experience_level)


@dataclass(frozen=True)
class Candidate:
    """A profile in a ranking pool with its optional distance annotation (miles)."""
    profile: Profile
    distance: Optional[float] = None

    @property
    def id(self) -> str:
        return self.profile.id


PoolEntry = Union[Profile, Candidate]


def as_candidate(entry: PoolEntry) -> Candidate:
    if isinstance(entry, Candidate):
        return entry
    return Candidate(profile=entry)
