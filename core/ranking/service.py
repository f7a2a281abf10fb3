#!/usr/bin/env python3
"""
Ranking Service - Score a partner pool and order it for display.

Each candidate is scored independently against the viewer, so the pool can be
scored in parallel. Ordering is always stable: ties keep input order because
the input position is part of every sort key.
"""

import logging
import math
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Iterable, List, Optional, Tuple

from core.config_loader import MatchWeights
from core.matcher.models import Candidate, PoolEntry, Profile, as_candidate
from core.ranking.filters import apply_filters
from core.ranking.models import (
    CandidateFilters, RankedCandidate, RankingResult, ScoringFailure, SortKey
)
from core.scorer.exceptions import InvalidProfileError, RankingCancelledError
from core.scorer.models import CompatibilityBreakdown
from core.scorer.service import score_compatibility, validate_profile, validate_weights

logger = logging.getLogger(__name__)

# Outcome per input position: a breakdown or the failure that replaced it
_Outcome = Tuple[Optional[CompatibilityBreakdown], Optional[ScoringFailure]]


def _sort_key(sort_by: SortKey, index: int, entry: RankedCandidate) -> Tuple[Any, ...]:
    if sort_by == SortKey.DISTANCE:
        # NaN or infinite distances sort with the unknown ones
        if entry.distance is None or not math.isfinite(entry.distance):
            return (1, 0.0, index)
        return (0, entry.distance, index)
    if sort_by == SortKey.EXPERIENCE_LEVEL:
        level = entry.profile.level
        if level is None:
            return (1, 0, index)
        return (0, -level.ordinal, index)
    return (-entry.breakdown.total, index)


def sort_ranked(entries: List[RankedCandidate], sort_by: SortKey) -> List[RankedCandidate]:
    """Stable sort of already-scored entries by the given key."""
    keyed = [(_sort_key(sort_by, i, e), e) for i, e in enumerate(entries)]
    keyed.sort(key=lambda pair: pair[0])
    return [e for _, e in keyed]


class RankingService:
    """Scores a candidate pool against a viewer and returns it ordered."""

    def __init__(self, max_workers: Optional[int] = None):
        """
        Args:
            max_workers: Thread pool size for scoring; None or 1 scores sequentially
        """
        self.max_workers = max_workers

    def _check_interrupted(self, stop_event: Optional[threading.Event]) -> None:
        if stop_event and stop_event.is_set():
            logger.info("Ranking interrupted (stop event set)")
            raise RankingCancelledError("Ranking request was superseded")

    def _score_one(
        self,
        viewer: Profile,
        candidate: Candidate,
        weights: MatchWeights
    ) -> _Outcome:
        try:
            return score_compatibility(viewer, candidate.profile, weights, check_weights=False), None
        except InvalidProfileError as e:
            logger.warning("Skipping candidate %r: %s", e.profile_id, e.message)
            return None, ScoringFailure(
                profile_id=e.profile_id,
                error=e.message,
                error_type=e.__class__.__name__,
            )

    def _score_sequential(
        self,
        viewer: Profile,
        pool: List[Candidate],
        weights: MatchWeights,
        stop_event: Optional[threading.Event]
    ) -> List[_Outcome]:
        outcomes = []
        for candidate in pool:
            self._check_interrupted(stop_event)
            outcomes.append(self._score_one(viewer, candidate, weights))
        return outcomes

    def _score_parallel(
        self,
        viewer: Profile,
        pool: List[Candidate],
        weights: MatchWeights,
        stop_event: Optional[threading.Event]
    ) -> List[_Outcome]:
        workers = min(self.max_workers, len(pool))
        outcomes: List[Optional[_Outcome]] = [None] * len(pool)

        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="ranking") as executor:
            futures = [
                executor.submit(self._score_one, viewer, candidate, weights)
                for candidate in pool
            ]
            try:
                for index, future in enumerate(futures):
                    self._check_interrupted(stop_event)
                    outcomes[index] = future.result()
            except RankingCancelledError:
                for future in futures:
                    future.cancel()
                raise
            self._check_interrupted(stop_event)

        return outcomes

    def rank(
        self,
        viewer: Profile,
        candidates: Iterable[PoolEntry],
        weights: Optional[MatchWeights] = None,
        sort_by: SortKey = SortKey.COMPATIBILITY,
        filters: Optional[CandidateFilters] = None,
        stop_event: Optional[threading.Event] = None
    ) -> RankingResult:
        """
        Score every candidate against the viewer and order the pool.

        Args:
            viewer: Profile of the user browsing partners
            candidates: Profiles or Candidates (with distance annotations)
            weights: Factor weights; defaults to DEFAULT_WEIGHTS
            sort_by: compatibility, distance or experienceLevel
            filters: Optional pool filters applied before scoring
            stop_event: Set it to abandon the request

        Returns:
            RankingResult with ordered candidates and per-candidate failures

        Raises:
            InvalidWeightsError: weights invalid (checked before any scoring)
            InvalidProfileError: the viewer itself is invalid
            RankingCancelledError: stop_event was set before completion
        """
        weights = validate_weights(weights)
        validate_profile(viewer)
        sort_by = SortKey(sort_by)

        pool = apply_filters(viewer, [as_candidate(c) for c in candidates], filters)
        self._check_interrupted(stop_event)

        if self.max_workers and self.max_workers > 1 and len(pool) > 1:
            outcomes = self._score_parallel(viewer, pool, weights, stop_event)
        else:
            outcomes = self._score_sequential(viewer, pool, weights, stop_event)

        scored = []
        failures = []
        for candidate, (breakdown, failure) in zip(pool, outcomes):
            if failure is not None:
                failures.append(failure)
                continue
            scored.append(RankedCandidate(
                profile=candidate.profile,
                breakdown=breakdown,
                distance=candidate.distance,
            ))

        ordered = sort_ranked(scored, sort_by)

        logger.info(
            f"Ranked {len(ordered)} candidates for {viewer.id} by {sort_by.value} "
            f"({len(failures)} failed)"
        )
        return RankingResult(
            candidates=ordered,
            sort_by=sort_by,
            weights=weights,
            failures=failures,
        )
