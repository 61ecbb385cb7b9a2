#!/usr/bin/env python3
"""
Tests for hard filter construction.
"""

import unittest

from core.config_loader import FilterConfig
from core.matcher.filters import build_hard_filters
from core.scorer.budget_score import calculate_budget_score
from tests.mocks.residence_mocks import make_candidate, make_profile


class TestBudgetFilters(unittest.TestCase):

    def test_strict_budget_must_fall_inside_range(self):
        filters = build_hard_filters(make_profile(budget={"amount": 2500, "flexibility": "strict"}))
        self.assertEqual(filters.budget_floor_max, 2500.0)
        self.assertEqual(filters.budget_ceiling_min, 2500.0)

    def test_flexible_budget_widens_floor(self):
        filters = build_hard_filters(make_profile(budget={"amount": 2500, "flexibility": "flexible"}))
        self.assertAlmostEqual(filters.budget_floor_max, 3000.0)
        self.assertIsNone(filters.budget_ceiling_min)

    def test_negotiable_and_unspecified_behave_as_flexible(self):
        for budget in ({"amount": 2500, "flexibility": "negotiable"}, {"amount": 2500}):
            with self.subTest(budget=budget):
                filters = build_hard_filters(make_profile(budget=budget))
                self.assertAlmostEqual(filters.budget_floor_max, 3000.0)
                self.assertIsNone(filters.budget_ceiling_min)

    def test_custom_multiplier(self):
        filters = build_hard_filters(
            make_profile(budget={"amount": 2000}),
            FilterConfig(flexible_budget_multiplier=1.5)
        )
        self.assertAlmostEqual(filters.budget_floor_max, 3000.0)

    def test_no_budget_no_budget_filter(self):
        filters = build_hard_filters(make_profile(budget=None))
        self.assertIsNone(filters.budget_floor_max)
        self.assertIsNone(filters.budget_ceiling_min)

    def test_filter_is_wider_than_scoring(self):
        """
        A residence priced 15% above a flexible budget passes the filter
        but is still penalised when scored: filtering over-selects.
        """
        profile = make_profile(budget={"amount": 2000, "flexibility": "flexible"})
        candidate = make_candidate(pricing_min=2300.0, pricing_max=2600.0)

        filters = build_hard_filters(profile)
        self.assertLessEqual(candidate.pricing_min, filters.budget_floor_max)
        self.assertLess(calculate_budget_score(profile, candidate), 50.0)


class TestLocationFilters(unittest.TestCase):

    def test_city_wins_over_region(self):
        filters = build_hard_filters(make_profile(location={"city": "Trois-Rivières", "region": "Mauricie"}))
        self.assertEqual(filters.city_key, "trois rivieres")
        self.assertIsNone(filters.region_key)

    def test_region_when_no_city(self):
        filters = build_hard_filters(make_profile(location={"region": "Abitibi-Témiscamingue"}))
        self.assertIsNone(filters.city_key)
        self.assertEqual(filters.region_key, "abitibi temiscamingue")

    def test_no_location(self):
        filters = build_hard_filters(make_profile(location=None))
        self.assertIsNone(filters.city_key)
        self.assertIsNone(filters.region_key)

    def test_always_active_only(self):
        self.assertTrue(build_hard_filters(make_profile()).active_only)


if __name__ == '__main__':
    unittest.main()
