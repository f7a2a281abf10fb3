#!/usr/bin/env python3
"""
Test suite for partner pool filters.
"""

import math
import unittest

from core.ranking.filters import apply_filters, matches_filters
from core.ranking.models import CandidateFilters
from tests.fixtures.profile_fixtures import make_candidate, make_profile


class TestCandidateFilters(unittest.TestCase):

    def setUp(self):
        self.viewer = make_profile("viewer", "intermediate", gym_name="Acme Gym")
        self.pool = [
            make_candidate("viewer", distance=0.0),
            make_candidate("f-beg", distance=1.0, experience_level="beginner", gender="Female", gym_name="Acme Gym"),
            make_candidate("m-int", distance=4.0, experience_level="intermediate", gender="male"),
            make_candidate("f-adv", distance=None, experience_level="Advanced", gender="female", gym_name="Iron"),
        ]

    def _ids(self, filters):
        return [c.profile.id for c in apply_filters(self.viewer, self.pool, filters)]

    def test_no_filters_keeps_everything(self):
        self.assertEqual(len(apply_filters(self.viewer, self.pool, None)), 4)

    def test_exclude_viewer(self):
        self.assertEqual(self._ids(CandidateFilters()), ["f-beg", "m-int", "f-adv"])
        self.assertIn("viewer", self._ids(CandidateFilters(exclude_viewer=False)))

    def test_gender_case_insensitive(self):
        self.assertEqual(self._ids(CandidateFilters(gender="FEMALE")), ["f-beg", "f-adv"])

    def test_experience_level(self):
        self.assertEqual(self._ids(CandidateFilters(experience_level="advanced")), ["f-adv"])

    def test_max_distance_excludes_unknown(self):
        self.assertEqual(self._ids(CandidateFilters(max_distance=4.0)), ["f-beg", "m-int"])
        self.assertEqual(self._ids(CandidateFilters(max_distance=2.0)), ["f-beg"])

    def test_max_distance_excludes_non_finite(self):
        viewer = make_profile("viewer", "intermediate")
        for distance in (math.nan, math.inf):
            candidate = make_candidate("x", distance=distance)
            self.assertFalse(matches_filters(viewer, candidate, CandidateFilters(max_distance=10.0)), distance)

    def test_same_gym_only(self):
        self.assertEqual(self._ids(CandidateFilters(same_gym_only=True)), ["f-beg"])

    def test_same_gym_only_without_viewer_gym(self):
        viewer = make_profile("viewer", "intermediate")
        candidate = make_candidate("x", gym_name=None)
        self.assertFalse(matches_filters(viewer, candidate, CandidateFilters(same_gym_only=True)))

    def test_combined(self):
        filters = CandidateFilters(gender="female", max_distance=5.0, same_gym_only=True)
        self.assertEqual(self._ids(filters), ["f-beg"])


if __name__ == '__main__':
    unittest.main()
