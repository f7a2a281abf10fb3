#!/usr/bin/env python3
"""
Scoring Module - Pairwise compatibility scoring.

Public API:
- score_compatibility: Score one (viewer, candidate) pair
- CompatibilityBreakdown: Per-factor result
- label_for: Score bucket label

Modules:
- style_matrix.py: Workout style compatibility table
- goals.py: Goal overlap
- experience.py: Experience level proximity
- preferences.py: Partner preference keyword match
- basic_score.py: Fallback model for profiles without insights
- labels.py: Score to label mapping
- models.py: CompatibilityBreakdown
- exceptions.py: Engine errors
- service.py: Aggregation and weight validation
"""

from core.scorer.exceptions import (
    ScoringError, InvalidProfileError, InvalidWeightsError, RankingCancelledError
)
from core.scorer.labels import label_for, label_rank
from core.scorer.models import CompatibilityBreakdown
from core.scorer.service import score_compatibility, validate_weights

__all__ = [
    'score_compatibility', 'validate_weights', 'CompatibilityBreakdown',
    'label_for', 'label_rank',
    'ScoringError', 'InvalidProfileError', 'InvalidWeightsError', 'RankingCancelledError',
]
