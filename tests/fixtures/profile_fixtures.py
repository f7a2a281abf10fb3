#!/usr/bin/env python3
"""
Test fixtures for profiles and insight documents.

Insight payloads use the camelCase wire shape that the insight generator
produces.
"""
import json

from core.matcher.models import Candidate, Profile


# ============================================================================
# INSIGHT PAYLOADS
# ============================================================================

BALANCED_STRENGTH_INSIGHTS = {
    "workoutStyle": "balanced",
    "recommendedGoals": ["strength"],
    "partnerPreferences": "",
    "motivationTips": ["Log every session"],
}

BALANCED_STRENGTH_ENDURANCE_INSIGHTS = {
    "workoutStyle": "balanced",
    "recommendedGoals": ["strength", "endurance"],
    "partnerPreferences": "",
    "motivationTips": [],
}

CONSISTENT_SCHEDULE_INSIGHTS = {
    "workoutStyle": "consistent",
    "recommendedGoals": ["Build a regular routine", "Improve form on squats"],
    "partnerPreferences": "Someone consistent who keeps a regular schedule",
    "motivationTips": ["Book sessions in advance"],
}

HIGH_INTENSITY_INSIGHTS = {
    "workoutStyle": "High Intensity",
    "recommendedGoals": ["HIIT conditioning", "fat loss"],
    "partnerPreferences": "A partner who will push me and bring intensity",
    "motivationTips": [],
}

MALFORMED_INSIGHT_STRINGS = [
    "{not json",
    "[1, 2, 3]",
    '{"workoutStyle": 42}',
    '{"recommendedGoals": "strength"}',
]

# Valid JSON with a missing or null workoutStyle, or null goals
INCOMPLETE_INSIGHT_PAYLOADS = [
    {},
    '{"foo": 1}',
    {"workoutStyle": None},
    {"workoutStyle": None, "recommendedGoals": ["strength"]},
    {"workoutStyle": "balanced", "recommendedGoals": None},
]


def make_profile(
    profile_id="u-1",
    experience_level="intermediate",
    insights=None,
    gym_name=None,
    gender=None,
    bio=None,
):
    """Build a Profile with sensible defaults."""
    return Profile(
        id=profile_id,
        experience_level=experience_level,
        gender=gender,
        gym_name=gym_name,
        bio=bio,
        insights=insights,
    )


def make_candidate(profile_id, distance=None, **kwargs):
    return Candidate(profile=make_profile(profile_id, **kwargs), distance=distance)


def as_json(payload):
    return json.dumps(payload)


def profile_payload(profile_id="u-1", experience_level="intermediate", insights=None, **extra):
    """Wire-shaped profile dict for API tests."""
    data = {"id": profile_id, "experienceLevel": experience_level}
    if insights is not None:
        data["insights"] = insights
    data.update(extra)
    return data
