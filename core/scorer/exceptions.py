#!/usr/bin/env python3
"""
Scoring Exceptions - Errors raised by the compatibility engine.
"""

from typing import Any, Dict, Optional


class ScoringError(Exception):
    """Base exception for compatibility engine errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidProfileError(ScoringError):
    """Raised when a profile lacks a required field (id or experience level)."""

    def __init__(self, message: str, profile_id: Optional[str] = None, field: Optional[str] = None):
        super().__init__(message, {'profile_id': profile_id, 'field': field})
        self.profile_id = profile_id
        self.field = field


class InvalidWeightsError(ScoringError):
    """Raised when a weight is missing, negative, non-numeric or not finite."""
    pass


class RankingCancelledError(ScoringError):
    """Raised when a ranking request is superseded before it completes."""
    pass
