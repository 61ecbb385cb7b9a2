#!/usr/bin/env python3
"""
Tests for match reason generation.
"""

import unittest

from core.scorer.models import MatchDetails
from core.scorer.reasons import generate_reasons
from tests.mocks.residence_mocks import make_candidate


def _details(budget=0, care=0, location=0, availability=0, responsiveness=0):
    return MatchDetails(
        budget_match=budget,
        care_match=care,
        location_match=location,
        availability_match=availability,
        responsiveness_match=responsiveness,
    )


class TestGenerateReasons(unittest.TestCase):

    def test_all_rules_fire_in_order(self):
        reasons = generate_reasons(
            _details(budget=100, care=80, location=100),
            make_candidate(units=4, rating=4.6)
        )
        self.assertEqual(reasons, [
            "Excellent budget match",
            "Specialized care available",
            "Perfect location match",
            "4 units available now",
            "Highly rated (4.6/5)",
        ])

    def test_second_tier_phrases(self):
        reasons = generate_reasons(
            _details(budget=60, care=60, location=75),
            make_candidate(units=2, rating=4.0)
        )
        self.assertEqual(reasons, [
            "Good budget match",
            "Suitable care level",
            "Good location match",
            "2 units available",
            "Well rated (4.0/5)",
        ])

    def test_single_unit(self):
        reasons = generate_reasons(_details(), make_candidate(units=1, rating=None))
        self.assertEqual(reasons, ["1 unit available"])

    def test_three_units_is_not_many(self):
        reasons = generate_reasons(_details(), make_candidate(units=3, rating=None))
        self.assertEqual(reasons, ["3 units available"])

    def test_below_thresholds_gives_empty_list(self):
        reasons = generate_reasons(
            _details(budget=59, care=59, location=69),
            make_candidate(units=0, rating=3.9)
        )
        self.assertEqual(reasons, [])

    def test_out_of_range_rating_is_shown_on_five_point_scale(self):
        reasons = generate_reasons(_details(), make_candidate(units=None, rating=9.0))
        self.assertEqual(reasons, ["Highly rated (5.0/5)"])

    def test_no_availability_history(self):
        reasons = generate_reasons(_details(), make_candidate(units=None, rating=None))
        self.assertEqual(reasons, [])


if __name__ == '__main__':
    unittest.main()
