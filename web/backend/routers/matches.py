#!/usr/bin/env python3
"""
Match endpoints - rank partner pools and score pairs.
"""

import logging
from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded

from core.ranking import RankingService
from core.scorer import label_for
from ..config import get_config
from ..dependencies import get_ranking_service
from ..services.match_service import MatchService
from ..services.weights_service import get_weights_service
from ..models.requests import RankRequest, ScoreRequest
from ..models.responses import LabelResponse, RankResponse, ScoreResponse

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)

router = APIRouter(prefix="/api/matches", tags=["matches"])


def add_rate_limit_handlers(app):
    """Add rate limit exception handlers to the FastAPI app."""
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


async def _rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    return JSONResponse(
        status_code=429,
        content={"detail": str(exc)}
    )


def get_match_service(
    ranking_service: RankingService = Depends(get_ranking_service)
) -> MatchService:
    return MatchService(ranking_service, get_weights_service())


@router.post("/rank", response_model=RankResponse)
@limiter.limit(get_config().web.rank_rate_limit)
def rank_candidates(
    request: Request,
    body: RankRequest,
    match_service: MatchService = Depends(get_match_service)
):
    """
    Rank a partner pool for a viewer.

    - weights: optional; the current default weights are used when omitted
    - sortBy: compatibility (default), distance or experienceLevel
    - filters: gender, experienceLevel, maxDistance, sameGymOnly

    Candidates that cannot be scored are listed under failures; the rest are
    still ranked. Ties keep the order they were submitted in.
    """
    return match_service.rank(body)


@router.post("/score", response_model=ScoreResponse)
def score_pair(
    body: ScoreRequest,
    match_service: MatchService = Depends(get_match_service)
):
    """
    Score one (viewer, candidate) pair.

    The score is directional: the viewer's partner preferences are checked
    against the candidate's insights.
    """
    return match_service.score(body)


@router.get("/label", response_model=LabelResponse)
def get_label(
    score: float = Query(..., description="Compatibility score (0-100)")
):
    """Get the display label for a compatibility score."""
    return LabelResponse(score=score, label=label_for(score))
