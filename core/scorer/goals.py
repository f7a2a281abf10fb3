#!/usr/bin/env python3
"""
Goal Overlap - Fuzzy overlap between two recommended-goal lists.

A goal on one side matches a goal on the other when either string contains
the other (after lowercasing and trimming). Each goal from the first list
counts at most once.
"""

from typing import Iterable, List, Optional

NEUTRAL_GOAL_SCORE = 0.5


def normalize_goals(goals: Optional[Iterable[str]]) -> List[str]:
    if not goals:
        return []
    return [g.strip().lower() for g in goals if isinstance(g, str) and g.strip()]


def count_goal_matches(goals_a: List[str], goals_b: List[str]) -> int:
    matches = 0
    for goal_a in goals_a:
        for goal_b in goals_b:
            if goal_a in goal_b or goal_b in goal_a:
                matches += 1
                break
    return matches


def calculate_goal_overlap(
    goals_a: Optional[Iterable[str]],
    goals_b: Optional[Iterable[str]]
) -> float:
    """
    Score how much two goal lists overlap.

    Returns 0.5 when either list is empty. Otherwise, with
    overlap = matches / max(len_a, len_b):
    - at least half of the shorter list matched: max(0.5, overlap)
    - fewer: 0.3 + 0.4 * overlap
    """
    a = normalize_goals(goals_a)
    b = normalize_goals(goals_b)
    if not a or not b:
        return NEUTRAL_GOAL_SCORE

    matches = count_goal_matches(a, b)
    max_len = max(len(a), len(b))
    min_needed = min(len(a), len(b)) / 2
    overlap = matches / max_len

    if matches >= min_needed:
        return max(0.5, overlap)
    return 0.3 + 0.4 * overlap
