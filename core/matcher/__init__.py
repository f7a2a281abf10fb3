"""Matcher Module - Profile data model and insight parsing."""
from core.matcher.models import (
    ExperienceLevel, InsightDocument, Profile, Candidate, as_candidate
)
from core.matcher.insights import InsightPayload, parse_insight_document

__all__ = [
    'ExperienceLevel', 'InsightDocument', 'Profile', 'Candidate', 'as_candidate',
    'InsightPayload', 'parse_insight_document',
]
