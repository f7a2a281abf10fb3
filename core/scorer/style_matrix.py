#!/usr/bin/env python3
"""
Style Matrix - Workout style compatibility lookup.

Coefficients in [0,1] for pairs of canonical workout styles. Pairs are looked
up after lowercasing and trimming; unknown pairs score a neutral 0.5.
"""

import logging
from typing import Dict, Optional

logger = logging.getLogger(__name__)

NEUTRAL_STYLE_SCORE = 0.5

HIGH_INTENSITY = "high intensity"
METHODICAL = "methodical"
BALANCED = "balanced"
SOCIAL = "social"
CONSISTENT = "consistent"

STYLE_CATEGORIES = (HIGH_INTENSITY, METHODICAL, BALANCED, SOCIAL, CONSISTENT)

_MATRIX: Dict[str, Dict[str, float]] = {
    HIGH_INTENSITY: {HIGH_INTENSITY: 0.9, METHODICAL: 0.5, BALANCED: 0.7, SOCIAL: 0.6, CONSISTENT: 0.6},
    METHODICAL: {HIGH_INTENSITY: 0.5, METHODICAL: 0.9, BALANCED: 0.7, SOCIAL: 0.5, CONSISTENT: 0.8},
    BALANCED: {HIGH_INTENSITY: 0.7, METHODICAL: 0.7, BALANCED: 0.9, SOCIAL: 0.8, CONSISTENT: 0.8},
    SOCIAL: {HIGH_INTENSITY: 0.6, METHODICAL: 0.5, BALANCED: 0.8, SOCIAL: 0.9, CONSISTENT: 0.7},
    CONSISTENT: {HIGH_INTENSITY: 0.6, METHODICAL: 0.8, BALANCED: 0.8, SOCIAL: 0.7, CONSISTENT: 0.9},
}


def normalize_style(style: Optional[str]) -> str:
    if not style:
        return ""
    return style.strip().lower()


def lookup(style_a: str, style_b: str) -> Optional[float]:
    """Raw table lookup on normalized styles, trying the reverse pair too."""
    row = _MATRIX.get(style_a)
    if row is not None and style_b in row:
        return row[style_b]
    row = _MATRIX.get(style_b)
    if row is not None and style_a in row:
        return row[style_a]
    return None


def calculate_style_score(style_a: Optional[str], style_b: Optional[str]) -> float:
    """Compatibility coefficient for two workout style descriptions."""
    a = normalize_style(style_a)
    b = normalize_style(style_b)
    if not a or not b:
        return NEUTRAL_STYLE_SCORE

    value = lookup(a, b)
    if value is None:
        logger.debug("No style coefficient for (%r, %r), using neutral", a, b)
        return NEUTRAL_STYLE_SCORE
    return value
