#!/usr/bin/env python3
"""
Preference Match - Keyword heuristic between one user's stated partner
preferences and the other user's insights.

Only keywords from a fixed dictionary are considered. A keyword is relevant
when it appears in the preference text; each relevant keyword can earn one
point for appearing in the candidate's workout style and one for appearing in
any of the candidate's goals.
"""

from typing import Optional, Tuple

from core.matcher.models import InsightDocument

NEUTRAL_PREFERENCE_SCORE = 0.5
MIN_PREFERENCE_SCORE = 0.4

PREFERENCE_KEYWORDS: Tuple[str, ...] = (
    "intensity", "intense", "methodical", "balanced", "social", "consistent",
    "challenge", "push", "motivate", "patient", "technique", "form", "fun",
    "enjoy", "regular", "schedule", "routine",
)


def calculate_preference_match(
    preference_text: Optional[str],
    candidate_insights: Optional[InsightDocument]
) -> float:
    """
    Score how well a candidate's insights satisfy a free-text preference.

    Returns 0.5 when the text is blank or mentions no dictionary keyword,
    otherwise max(0.4, matches / (relevant * 2)).
    """
    if not preference_text or not preference_text.strip():
        return NEUTRAL_PREFERENCE_SCORE

    text = preference_text.lower()
    relevant = [kw for kw in PREFERENCE_KEYWORDS if kw in text]
    if not relevant:
        return NEUTRAL_PREFERENCE_SCORE

    style = ""
    goals = []
    if candidate_insights is not None:
        style = (candidate_insights.workout_style or "").lower()
        goals = [g.lower() for g in candidate_insights.recommended_goals if isinstance(g, str)]

    matches = 0
    for keyword in relevant:
        if keyword in style:
            matches += 1
        if any(keyword in goal for goal in goals):
            matches += 1

    return max(MIN_PREFERENCE_SCORE, matches / (len(relevant) * 2))
