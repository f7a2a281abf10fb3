#!/usr/bin/env python3
"""
Test suite for the basic (no insights) compatibility model.
"""

import unittest

from core.scorer.basic_score import (
    basic_experience_base,
    calculate_basic_score,
    round_half_up,
)
from tests.fixtures.profile_fixtures import make_profile


class TestBasicScore(unittest.TestCase):
    """Test calculate_basic_score."""

    def test_same_level_same_gym_is_100(self):
        viewer = make_profile("a", "intermediate", gym_name="Acme Gym")
        candidate = make_profile("b", "intermediate", gym_name="Acme Gym")
        total, components = calculate_basic_score(viewer, candidate)
        self.assertEqual(total, 100)
        self.assertEqual(components['gym_bonus'], 0.2)

    def test_two_apart_different_gyms_is_20(self):
        viewer = make_profile("a", "beginner", gym_name="Acme Gym")
        candidate = make_profile("b", "advanced", gym_name="Iron Temple")
        total, _ = calculate_basic_score(viewer, candidate)
        self.assertEqual(total, 20)

    def test_adjacent_levels(self):
        viewer = make_profile("a", "beginner", gym_name="Acme Gym")
        self.assertEqual(calculate_basic_score(viewer, make_profile("b", "intermediate"))[0], 40)
        same_gym = make_profile("c", "intermediate", gym_name="Acme Gym")
        self.assertEqual(calculate_basic_score(viewer, same_gym)[0], 60)

    def test_same_level_without_gym(self):
        viewer = make_profile("a", "advanced")
        candidate = make_profile("b", "advanced")
        self.assertEqual(calculate_basic_score(viewer, candidate)[0], 80)

    def test_empty_gym_names_get_no_bonus(self):
        viewer = make_profile("a", "advanced", gym_name="")
        candidate = make_profile("b", "advanced", gym_name="")
        self.assertEqual(calculate_basic_score(viewer, candidate)[0], 80)

    def test_gym_match_is_exact(self):
        viewer = make_profile("a", "advanced", gym_name="acme gym")
        candidate = make_profile("b", "advanced", gym_name="Acme Gym")
        self.assertEqual(calculate_basic_score(viewer, candidate)[0], 80)

    def test_unknown_levels(self):
        self.assertEqual(basic_experience_base("expert", "expert"), 0.8)
        self.assertEqual(basic_experience_base("expert", "beginner"), 0.2)
        self.assertEqual(basic_experience_base("Intermediate", "intermediate"), 0.8)


class TestRoundHalfUp(unittest.TestCase):

    def test_halves_go_up(self):
        self.assertEqual(round_half_up(69.5), 70)
        self.assertEqual(round_half_up(0.5), 1)
        self.assertEqual(round_half_up(2.5), 3)

    def test_other_values(self):
        self.assertEqual(round_half_up(69.49), 69)
        self.assertEqual(round_half_up(60.00000000000001), 60)
        self.assertEqual(round_half_up(0.0), 0)


if __name__ == '__main__':
    unittest.main()
