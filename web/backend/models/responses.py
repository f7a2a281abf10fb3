#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict
from typing import Dict, List, Optional


class BreakdownResponse(BaseModel):
    """Per-factor compatibility as 0-100 integers."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "style": 90,
                "goals": 50,
                "experience": 100,
                "preferences": 50,
                "total": 70,
                "mode": "insights",
                "label": "Great Match"
            }
        }
    )

    style: int
    goals: int
    experience: int
    preferences: int
    total: int
    mode: str
    label: str


class RankedCandidateResponse(BaseModel):
    """One entry of a ranked pool."""
    id: str
    rank: int
    distance: Optional[float] = None
    experience_level: str
    gym_name: Optional[str] = None
    breakdown: BreakdownResponse


class ScoringFailureResponse(BaseModel):
    """A candidate that could not be scored."""
    id: Optional[str]
    error: str
    type: str


class WeightsResponse(BaseModel):
    """Response containing factor weights."""
    style: float
    goals: float
    experience: float
    preferences: float
    total: float


class RankResponse(BaseModel):
    """Response containing a ranked partner pool."""
    success: bool
    viewer_id: str
    sort_by: str
    count: int
    weights: WeightsResponse
    candidates: List[RankedCandidateResponse]
    failures: List[ScoringFailureResponse]


class ScoreResponse(BaseModel):
    """Response containing a single pair score."""
    success: bool
    viewer_id: str
    candidate_id: str
    breakdown: BreakdownResponse


class LabelResponse(BaseModel):
    """Response containing the label for a score."""
    score: float
    label: str


class WeightPresetsResponse(BaseModel):
    """Response listing the named weight presets."""
    presets: Dict[str, WeightsResponse]
