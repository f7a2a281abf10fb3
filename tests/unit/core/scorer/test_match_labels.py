#!/usr/bin/env python3
"""
Test suite for score labels.
"""

import unittest

from core.scorer.labels import LABELS_ASCENDING, label_for, label_rank


class TestLabelFor(unittest.TestCase):

    def test_bucket_boundaries(self):
        expected = {
            100: "Perfect Match",
            90: "Perfect Match",
            89: "Excellent Match",
            80: "Excellent Match",
            79: "Great Match",
            70: "Great Match",
            69: "Good Match",
            60: "Good Match",
            50: "Decent Match",
            40: "Moderate Match",
            30: "Fair Match",
            20: "Low Match",
            19: "Minimal Match",
            0: "Minimal Match",
        }
        for score, label in expected.items():
            self.assertEqual(label_for(score), label, f"score={score}")

    def test_monotonic(self):
        previous = -1
        for score in range(0, 101):
            rank = label_rank(label_for(score))
            self.assertGreaterEqual(rank, previous)
            previous = rank

    def test_label_rank_order(self):
        self.assertEqual(label_rank("Minimal Match"), 0)
        self.assertEqual(label_rank("Perfect Match"), len(LABELS_ASCENDING) - 1)
        self.assertLess(label_rank("Low Match"), label_rank("Fair Match"))

    def test_unknown_label(self):
        with self.assertRaises(ValueError):
            label_rank("Best Friends")


if __name__ == '__main__':
    unittest.main()
