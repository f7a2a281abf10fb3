"""Business logic services."""

from .match_service import MatchService
from .weights_service import WeightsService
