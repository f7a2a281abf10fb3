#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.
"""

from core.ranking import RankingService
from .config import get_config


# Global ranking service instance; stateless, so shared across requests
_ranking_service = RankingService(max_workers=get_config().matching.ranking.max_workers)


def get_ranking_service() -> RankingService:
    """
    FastAPI dependency that returns the shared ranking service.

    Usage:
        @app.post("/endpoint")
        def my_endpoint(ranking: RankingService = Depends(get_ranking_service)):
            ...
    """
    return _ranking_service
