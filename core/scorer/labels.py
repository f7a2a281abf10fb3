#!/usr/bin/env python3
"""
Match Labels - Map a 0-100 score onto a human-readable bucket.
"""

from typing import List, Tuple

# Most specific first: (inclusive lower bound, label)
LABEL_THRESHOLDS: List[Tuple[int, str]] = [
    (90, "Perfect Match"),
    (80, "Excellent Match"),
    (70, "Great Match"),
    (60, "Good Match"),
    (50, "Decent Match"),
    (40, "Moderate Match"),
    (30, "Fair Match"),
    (20, "Low Match"),
]
FLOOR_LABEL = "Minimal Match"

# Lowest bucket first
LABELS_ASCENDING: List[str] = [FLOOR_LABEL] + [label for _, label in reversed(LABEL_THRESHOLDS)]


def label_for(score: float) -> str:
    for threshold, label in LABEL_THRESHOLDS:
        if score >= threshold:
            return label
    return FLOOR_LABEL


def label_rank(label: str) -> int:
    """Position of a label in the bucket order (0 = Minimal Match)."""
    try:
        return LABELS_ASCENDING.index(label)
    except ValueError:
        raise ValueError(f"Unknown match label: {label!r}")
