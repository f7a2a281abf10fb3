"""Ranking Module - Order a partner pool by compatibility, distance or experience."""
from core.ranking.models import (
    SortKey, CandidateFilters, RankedCandidate, ScoringFailure, RankingResult
)
from core.ranking.filters import apply_filters
from core.ranking.service import RankingService, sort_ranked

__all__ = [
    'RankingService', 'sort_ranked', 'apply_filters',
    'SortKey', 'CandidateFilters', 'RankedCandidate', 'ScoringFailure', 'RankingResult',
]
