#!/usr/bin/env python3
"""
Insight Parsing - Turns raw insight payloads into InsightDocument.

This is the only place where enrichment payloads are inspected. Anything that
does not validate is treated as absent so scoring can fall back to the basic
model instead of failing.
"""

import logging
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from core.matcher.models import InsightDocument

logger = logging.getLogger(__name__)


class InsightPayload(BaseModel):
    """Wire shape of a personality insight (camelCase, as the producer writes it)."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    # A document without a workout style is unusable and must fall back to basic scoring
    workout_style: str = Field(..., alias="workoutStyle")
    recommended_goals: List[str] = Field(default_factory=list, alias="recommendedGoals")
    partner_preferences: Optional[str] = Field(default="", alias="partnerPreferences")
    motivation_tips: Optional[List[str]] = Field(default_factory=list, alias="motivationTips")

    @field_validator("motivation_tips", mode="before")
    @classmethod
    def _null_list(cls, value):
        return [] if value is None else value

    @field_validator("partner_preferences", mode="before")
    @classmethod
    def _null_text(cls, value):
        return "" if value is None else value

    def to_document(self) -> InsightDocument:
        return InsightDocument(
            workout_style=self.workout_style,
            recommended_goals=list(self.recommended_goals),
            partner_preferences=self.partner_preferences or "",
            motivation_tips=list(self.motivation_tips or []),
        )


def parse_insight_document(raw: Any, profile_id: Optional[str] = None) -> Optional[InsightDocument]:
    """
    Parse a raw insight payload.

    Args:
        raw: None, a JSON string, a mapping or an InsightDocument
        profile_id: Used only for log context

    Returns:
        InsightDocument, or None when the payload is absent or malformed
    """
    if raw is None:
        return None
    if isinstance(raw, InsightDocument):
        return raw

    try:
        if isinstance(raw, (str, bytes)):
            if not raw.strip():
                return None
            payload = InsightPayload.model_validate_json(raw)
        elif isinstance(raw, dict):
            payload = InsightPayload.model_validate(raw)
        else:
            logger.warning(
                "Ignoring insights for profile %s: unsupported type %s",
                profile_id, type(raw).__name__,
            )
            return None
    except ValidationError as e:
        logger.warning(
            "Ignoring malformed insights for profile %s (%d errors)",
            profile_id, e.error_count(),
        )
        return None

    return payload.to_document()
