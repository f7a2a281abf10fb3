#!/usr/bin/env python3
"""
Match service - business logic for partner ranking and pair scoring.
"""

import logging
from typing import Optional

from core.config_loader import MatchWeights
from core.ranking import CandidateFilters, RankingService, SortKey
from core.scorer import CompatibilityBreakdown, score_compatibility
from ..config import get_config
from ..models.requests import RankRequest, ScoreRequest, WeightsPayload
from ..models.responses import (
    BreakdownResponse,
    RankedCandidateResponse,
    RankResponse,
    ScoreResponse,
    ScoringFailureResponse,
    WeightsResponse
)
from .weights_service import WeightsService

logger = logging.getLogger(__name__)


def breakdown_response(breakdown: CompatibilityBreakdown) -> BreakdownResponse:
    return BreakdownResponse(**breakdown.to_dict())


def weights_response(weights: MatchWeights) -> WeightsResponse:
    return WeightsResponse(**weights.as_dict(), total=round(weights.total(), 6))


class MatchService:
    """Service for ranking partner pools and scoring pairs."""

    def __init__(self, ranking_service: RankingService, weights_service: WeightsService):
        self.ranking_service = ranking_service
        self.weights_service = weights_service

    def _resolve_weights(self, payload: Optional[WeightsPayload]):
        # Snapshot taken once per request
        if payload is None:
            return self.weights_service.get_current_weights()
        return payload.to_weights()

    def rank(self, request: RankRequest) -> RankResponse:
        """
        Rank the request's candidate pool for its viewer.

        Args:
            request: Viewer, pool and optional weights, sort key and filters.

        Returns:
            RankResponse with ordered candidates and per-candidate failures.
        """
        ranking_config = get_config().matching.ranking
        sort_by = SortKey(request.sort_by or ranking_config.default_sort)

        filters = request.filters.to_filters() if request.filters else CandidateFilters()
        if filters.max_distance is None and ranking_config.max_distance_miles is not None:
            filters = CandidateFilters(
                gender=filters.gender,
                experience_level=filters.experience_level,
                max_distance=ranking_config.max_distance_miles,
                same_gym_only=filters.same_gym_only,
            )

        viewer = request.viewer.to_profile()
        result = self.ranking_service.rank(
            viewer,
            [c.to_candidate() for c in request.candidates],
            weights=self._resolve_weights(request.weights),
            sort_by=sort_by,
            filters=filters,
        )

        candidates = [
            RankedCandidateResponse(
                id=entry.profile.id,
                rank=position,
                distance=entry.distance,
                experience_level=entry.profile.experience_level,
                gym_name=entry.profile.gym_name,
                breakdown=breakdown_response(entry.breakdown),
            )
            for position, entry in enumerate(result.candidates, start=1)
        ]
        failures = [
            ScoringFailureResponse(id=f.profile_id, error=f.error, type=f.error_type)
            for f in result.failures
        ]

        return RankResponse(
            success=True,
            viewer_id=viewer.id,
            sort_by=result.sort_by.value,
            count=len(candidates),
            weights=weights_response(result.weights),
            candidates=candidates,
            failures=failures,
        )

    def score(self, request: ScoreRequest) -> ScoreResponse:
        """
        Score a single (viewer, candidate) pair.

        Raises:
            InvalidProfileError: If either profile is structurally invalid.
            InvalidWeightsError: If the supplied weights are invalid.
        """
        viewer = request.viewer.to_profile()
        candidate = request.candidate.to_profile()
        breakdown = score_compatibility(viewer, candidate, self._resolve_weights(request.weights))

        return ScoreResponse(
            success=True,
            viewer_id=viewer.id,
            candidate_id=candidate.id,
            breakdown=breakdown_response(breakdown),
        )
