import logging
import math
import os
from typing import Dict, Literal, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)


class MatchWeights(BaseModel):
    """Per-factor weights for the insights scoring model.

    Weights are meant to sum to 1.0, but nothing renormalizes them: the
    composite is computed with exactly the values given here.
    """
    model_config = ConfigDict(frozen=True)

    style: float = Field(default=0.30, ge=0.0)
    goals: float = Field(default=0.30, ge=0.0)
    experience: float = Field(default=0.15, ge=0.0)
    preferences: float = Field(default=0.25, ge=0.0)

    @field_validator("style", "goals", "experience", "preferences")
    @classmethod
    def _finite(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("weight must be a finite number")
        return value

    def total(self) -> float:
        return self.style + self.goals + self.experience + self.preferences

    def as_dict(self) -> Dict[str, float]:
        return self.model_dump()


DEFAULT_WEIGHTS = MatchWeights()

# Named weight sets offered by the weight-adjustment surface
WEIGHT_PRESETS: Dict[str, MatchWeights] = {
    "balanced": DEFAULT_WEIGHTS,
    "goal_focused": MatchWeights(style=0.20, goals=0.45, experience=0.10, preferences=0.25),
    "style_focused": MatchWeights(style=0.45, goals=0.20, experience=0.10, preferences=0.25),
    "experience_focused": MatchWeights(style=0.20, goals=0.20, experience=0.40, preferences=0.20),
}


class RankingConfig(BaseModel):
    """Defaults applied by the ranking service when a request leaves them out."""
    default_sort: Literal["compatibility", "distance", "experienceLevel"] = "compatibility"
    max_workers: Optional[int] = Field(default=None, ge=1)  # None = score sequentially
    max_distance_miles: Optional[float] = Field(default=None, ge=0.0)


class MatchingConfig(BaseModel):
    weights: MatchWeights = Field(default_factory=MatchWeights)
    ranking: RankingConfig = Field(default_factory=RankingConfig)


class WebConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8080
    rank_rate_limit: str = "30/minute"


class AppConfig(BaseModel):
    matching: MatchingConfig = Field(default_factory=MatchingConfig)
    web: WebConfig = Field(default_factory=WebConfig)


def load_config(config_path: str = "config.yaml") -> AppConfig:
    # If not found at relative path (e.g. running from root), try the project root copy
    if not os.path.exists(config_path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", "config.yaml")

    data = {}
    if os.path.exists(config_path):
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}
    else:
        logger.info("No config file found, using defaults")

    # Allow env var override for web host/port
    env_host = os.environ.get("WEB_HOST")
    if env_host:
        data.setdefault('web', {})
        data['web']['host'] = env_host

    env_port = os.environ.get("WEB_PORT")
    if env_port:
        data.setdefault('web', {})
        data['web']['port'] = int(env_port)

    # Allow env var override for ranking parallelism
    env_workers = os.environ.get("MATCHING_MAX_WORKERS")
    if env_workers:
        if 'matching' not in data or data['matching'] is None:
            data['matching'] = {}
        if 'ranking' not in data['matching'] or data['matching']['ranking'] is None:
            data['matching']['ranking'] = {}
        data['matching']['ranking']['max_workers'] = int(env_workers)

    return AppConfig(**data)
