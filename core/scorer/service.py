#!/usr/bin/env python3
"""
Scoring Service - Compatibility score for one (viewer, candidate) pair.

Two models:
- Insights: both profiles carry a parseable insight document. Four sub-scores
  (style, goals, experience, preferences) in [0,1] are combined with the
  supplied weights and scaled to 0-100.
- Basic: fallback from experience level and gym name only.

Weights are passed in on every call and used as given (no renormalization).
"""

import logging
import math
from numbers import Real
from typing import Any, Mapping, Optional, Tuple, Union

from core.config_loader import DEFAULT_WEIGHTS, MatchWeights
from core.matcher.insights import parse_insight_document
from core.matcher.models import InsightDocument, Profile
from core.scorer.basic_score import calculate_basic_score, round_half_up
from core.scorer.exceptions import InvalidProfileError, InvalidWeightsError
from core.scorer.experience import calculate_experience_proximity
from core.scorer.goals import NEUTRAL_GOAL_SCORE, calculate_goal_overlap
from core.scorer.models import CompatibilityBreakdown
from core.scorer.preferences import calculate_preference_match
from core.scorer.style_matrix import calculate_style_score

logger = logging.getLogger(__name__)

WEIGHT_FIELDS = ('style', 'goals', 'experience', 'preferences')

# Sub-score reported for factors the basic model does not evaluate
NEUTRAL_PERCENT = round_half_up(NEUTRAL_GOAL_SCORE * 100)

WeightsLike = Union[MatchWeights, Mapping[str, Any]]


def _clamp_percent(value: int) -> int:
    return max(0, min(100, value))


def _to_percent(value: float) -> int:
    return _clamp_percent(round_half_up(value * 100))


def validate_weights(weights: Optional[WeightsLike]) -> MatchWeights:
    """
    Check a weight configuration and return it as MatchWeights.

    Raises:
        InvalidWeightsError: a weight is missing, non-numeric, not finite or negative
    """
    if weights is None:
        return DEFAULT_WEIGHTS

    values = {}
    for name in WEIGHT_FIELDS:
        if isinstance(weights, Mapping):
            if name not in weights:
                raise InvalidWeightsError(f"Weight '{name}' is missing", {'field': name})
            value = weights[name]
        else:
            value = getattr(weights, name, None)

        if isinstance(value, bool) or not isinstance(value, Real):
            raise InvalidWeightsError(
                f"Weight '{name}' must be a number, got {value!r}",
                {'field': name, 'value': repr(value)},
            )
        value = float(value)
        if not math.isfinite(value) or value < 0:
            raise InvalidWeightsError(
                f"Weight '{name}' must be a finite number >= 0, got {value!r}",
                {'field': name, 'value': repr(value)},
            )
        values[name] = value

    total = sum(values.values())
    if not math.isclose(total, 1.0, abs_tol=1e-9):
        logger.warning("Weights sum to %.4f, not 1.0; using them as given", total)

    if isinstance(weights, MatchWeights):
        return weights
    return MatchWeights(**values)


def validate_profile(profile: Profile) -> None:
    """Raise InvalidProfileError if the profile lacks an id or experience level."""
    profile_id = getattr(profile, 'id', None)
    if not isinstance(profile_id, str) or not profile_id.strip():
        raise InvalidProfileError("Profile is missing an id", profile_id=profile_id, field='id')

    level = getattr(profile, 'experience_level', None)
    if not isinstance(level, str) or not level.strip():
        raise InvalidProfileError(
            f"Profile {profile_id} is missing an experience level",
            profile_id=profile_id,
            field='experience_level',
        )


def _insight_sub_scores(
    viewer: Profile,
    candidate: Profile,
    viewer_insights: InsightDocument,
    candidate_insights: InsightDocument
) -> Tuple[float, float, float, float]:
    """Style, goals, experience and preferences sub-scores, each in [0,1]."""
    style = calculate_style_score(viewer_insights.workout_style, candidate_insights.workout_style)
    goals = calculate_goal_overlap(viewer_insights.recommended_goals, candidate_insights.recommended_goals)
    experience = calculate_experience_proximity(viewer.experience_level, candidate.experience_level)
    preferences = calculate_preference_match(viewer_insights.partner_preferences, candidate_insights)
    return style, goals, experience, preferences


def _score_insights(sub_scores: Tuple[float, float, float, float], weights: MatchWeights) -> CompatibilityBreakdown:
    style, goals, experience, preferences = sub_scores
    weighted = (
        style * weights.style
        + goals * weights.goals
        + experience * weights.experience
        + preferences * weights.preferences
    )

    return CompatibilityBreakdown(
        style=_to_percent(style),
        goals=_to_percent(goals),
        experience=_to_percent(experience),
        preferences=_to_percent(preferences),
        total=_to_percent(weighted),
        mode="insights",
    )


def _score_basic(viewer: Profile, candidate: Profile) -> CompatibilityBreakdown:
    total, components = calculate_basic_score(viewer, candidate)
    return CompatibilityBreakdown(
        style=NEUTRAL_PERCENT,
        goals=NEUTRAL_PERCENT,
        experience=_to_percent(components['experience_base']),
        preferences=NEUTRAL_PERCENT,
        total=total,
        mode="basic",
    )


def score_compatibility(
    viewer: Profile,
    candidate: Profile,
    weights: Optional[WeightsLike] = None,
    check_weights: bool = True
) -> CompatibilityBreakdown:
    """
    Score how compatible a candidate is for the viewer.

    The result is directional: the viewer's partner preferences are matched
    against the candidate's insights, so score(a, b) may differ from score(b, a).

    Args:
        viewer: Profile of the user browsing partners
        candidate: Profile being scored
        weights: Factor weights; defaults to DEFAULT_WEIGHTS
        check_weights: Skip weight validation when the caller already did it;
            anything other than MatchWeights is still validated

    Raises:
        InvalidProfileError: either profile lacks an id or experience level
        InvalidWeightsError: a weight is missing, negative, non-numeric or not finite
    """
    # Unchecked weights are trusted only when they are already MatchWeights
    if check_weights or not isinstance(weights, MatchWeights):
        weights = validate_weights(weights)

    validate_profile(viewer)
    validate_profile(candidate)

    viewer_insights = parse_insight_document(viewer.insights, viewer.id)
    candidate_insights = parse_insight_document(candidate.insights, candidate.id)

    sub_scores = None
    if viewer_insights is not None and candidate_insights is not None:
        try:
            sub_scores = _insight_sub_scores(viewer, candidate, viewer_insights, candidate_insights)
        except (AttributeError, TypeError, ValueError) as e:
            logger.warning(
                "Insight scoring failed for %s -> %s, falling back to basic: %s",
                viewer.id, candidate.id, e,
            )

    if sub_scores is None:
        breakdown = _score_basic(viewer, candidate)
    else:
        breakdown = _score_insights(sub_scores, weights)

    logger.debug(
        "Scored %s -> %s: total=%d mode=%s",
        viewer.id, candidate.id, breakdown.total, breakdown.mode,
    )
    return breakdown
