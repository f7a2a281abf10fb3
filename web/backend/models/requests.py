#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Literal, Optional

from core.matcher.models import Candidate, Profile
from core.ranking.models import CandidateFilters


class ProfilePayload(BaseModel):
    """A user profile as supplied by the profile store."""
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "u-42",
                "experienceLevel": "intermediate",
                "gender": "female",
                "gymName": "Acme Gym",
                "insights": {
                    "workoutStyle": "balanced",
                    "recommendedGoals": ["strength", "endurance"],
                    "partnerPreferences": "Someone consistent who sticks to a schedule",
                    "motivationTips": ["Track your lifts"]
                }
            }
        }
    )

    # Optional here so a bad pool entry becomes a per-candidate failure, not a 422
    id: Optional[str] = Field(None, description="Profile id")
    experience_level: Optional[str] = Field(
        None, alias="experienceLevel", description="beginner, intermediate or advanced"
    )
    gender: Optional[str] = None
    gym_name: Optional[str] = Field(None, alias="gymName")
    bio: Optional[str] = None
    # Kept raw: malformed insights degrade to basic scoring instead of a 422
    insights: Optional[Any] = Field(None, description="Personality insight document (object or JSON string)")

    def to_profile(self) -> Profile:
        return Profile(
            id=self.id,
            experience_level=self.experience_level,
            gender=self.gender,
            gym_name=self.gym_name,
            bio=self.bio,
            insights=self.insights,
        )


class CandidatePayload(ProfilePayload):
    """A pool entry: a profile plus the distance from the viewer, if known."""
    distance: Optional[float] = Field(None, ge=0, description="Distance from the viewer in miles")

    def to_candidate(self) -> Candidate:
        return Candidate(profile=self.to_profile(), distance=self.distance)


class WeightsPayload(BaseModel):
    """Factor weights for the insights model."""
    style: float = Field(description="Workout style weight")
    goals: float = Field(description="Goal overlap weight")
    experience: float = Field(description="Experience proximity weight")
    preferences: float = Field(description="Partner preference weight")

    def to_weights(self) -> Dict[str, float]:
        """Raw values; range checks happen in the engine and the weights service."""
        return self.model_dump()


class FiltersPayload(BaseModel):
    """Pool filters applied before scoring."""
    model_config = ConfigDict(populate_by_name=True)

    gender: Optional[str] = None
    experience_level: Optional[str] = Field(None, alias="experienceLevel")
    max_distance: Optional[float] = Field(None, ge=0, alias="maxDistance", description="Miles")
    same_gym_only: bool = Field(False, alias="sameGymOnly")

    def to_filters(self) -> CandidateFilters:
        return CandidateFilters(
            gender=self.gender,
            experience_level=self.experience_level,
            max_distance=self.max_distance,
            same_gym_only=self.same_gym_only,
        )


class RankRequest(BaseModel):
    """Request to rank a partner pool for a viewer."""
    model_config = ConfigDict(populate_by_name=True)

    viewer: ProfilePayload
    candidates: List[CandidatePayload] = Field(default_factory=list)
    weights: Optional[WeightsPayload] = Field(None, description="Defaults to the current weights")
    sort_by: Optional[Literal["compatibility", "distance", "experienceLevel"]] = Field(
        None, alias="sortBy", description="Defaults to the configured sort"
    )
    filters: Optional[FiltersPayload] = None


class ScoreRequest(BaseModel):
    """Request to score a single (viewer, candidate) pair."""
    viewer: ProfilePayload
    candidate: ProfilePayload
    weights: Optional[WeightsPayload] = None


class WeightsUpdate(WeightsPayload):
    """Request to replace the current default weights."""
    pass
