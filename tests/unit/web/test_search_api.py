#!/usr/bin/env python3
"""
API tests for POST /api/search/match and GET /health.
"""

import unittest
from datetime import timedelta
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from core.config_loader import MatchingConfig
from database.models import utcnow
from tests.mocks.api_client import ApiTestCase
from tests.mocks.residence_mocks import gatineau_profile_data, make_residence

pytestmark = pytest.mark.db


class TestSearchMatch(ApiTestCase):

    def _fresh(self, units):
        return [{"units_available": units, "reported_at": utcnow() - timedelta(hours=1)}]

    def test_returns_ranked_matches(self):
        self.seed(
            make_residence(name="Parc", availability=self._fresh(4)),
            make_residence(name="Chelsea", city="Chelsea", availability=self._fresh(2)),
            make_residence(name="Complet", availability=self._fresh(0)),
        )

        response = self.client.post("/api/search/match", json={
            "patientProfile": gatineau_profile_data(location={"region": "Outaouais"}),
        })

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual([m["rpa_info"]["name"] for m in data["matches"]], ["Parc", "Chelsea"])
        self.assertEqual(data["total"], 2)
        self.assertFalse(data["hasMore"])

        top = data["matches"][0]
        self.assertIsInstance(top["score"], int)
        self.assertEqual(set(top["match_details"]), {
            "budget_match", "care_match", "location_match",
            "availability_match", "responsiveness_match"
        })
        self.assertEqual(top["availability"]["units_available"], 4)
        self.assertIsNotNone(top["availability"]["last_updated"])
        self.assertIn("4 units available now", top["reasons"])

    def test_include_unavailable(self):
        self.seed(make_residence(name="Complet", availability=self._fresh(0)))

        response = self.client.post("/api/search/match", json={
            "patientProfile": gatineau_profile_data(),
            "requireAvailability": False,
        })

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["total"], 1)

    def test_full_page_reports_has_more(self):
        self.seed(*[make_residence(name=f"R{i}", availability=self._fresh(3)) for i in range(3)])

        response = self.client.post("/api/search/match", json={
            "patientProfile": gatineau_profile_data(),
            "limit": 3,
        })

        data = response.json()
        self.assertEqual(data["total"], 3)
        self.assertTrue(data["hasMore"])

    def test_no_matches_is_not_an_error(self):
        response = self.client.post("/api/search/match", json={
            "patientProfile": gatineau_profile_data(location={"city": "Rimouski"}),
        })

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"matches": [], "total": 0, "hasMore": False})

    def test_missing_profile_is_400(self):
        response = self.client.post("/api/search/match", json={"limit": 5})

        self.assertEqual(response.status_code, 400)
        data = response.json()
        self.assertFalse(data["success"])
        self.assertEqual(data["type"], "ProfileValidationError")
        self.assertEqual(data["code"], "INVALID_CRITERIA")

    def test_malformed_profile_is_400(self):
        response = self.client.post("/api/search/match", json={
            "patientProfile": {"autonomy": "bedridden"},
        })

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["code"], "INVALID_CRITERIA")

    def test_non_object_profile_is_400(self):
        for profile in ("hello", 42, ["Gatineau"]):
            with self.subTest(profile=profile):
                response = self.client.post("/api/search/match", json={"patientProfile": profile})
                self.assertEqual(response.status_code, 400)
                data = response.json()
                self.assertEqual(data["type"], "ProfileValidationError")
                self.assertEqual(data["code"], "INVALID_CRITERIA")

    def test_pagination_bounds(self):
        for body in ({"limit": 0}, {"offset": -1}):
            with self.subTest(body=body):
                response = self.client.post(
                    "/api/search/match",
                    json={"patientProfile": gatineau_profile_data(), **body}
                )
                self.assertEqual(response.status_code, 400)
                self.assertEqual(response.json()["type"], "ValidationError")

    def test_limit_above_configured_max_is_400(self):
        response = self.client.post("/api/search/match", json={
            "patientProfile": gatineau_profile_data(),
            "limit": 51,
        })

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["type"], "InvalidRequestException")

    def test_page_size_follows_matching_config(self):
        from web.backend.dependencies import get_matching_config

        self.app.dependency_overrides[get_matching_config] = lambda: MatchingConfig(
            default_limit=2, max_limit=3
        )
        self.seed(*[make_residence(name=f"R{i}", availability=self._fresh(3)) for i in range(5)])

        response = self.client.post("/api/search/match", json={
            "patientProfile": gatineau_profile_data(),
        })
        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["total"], 2)
        self.assertTrue(data["hasMore"])

        response = self.client.post("/api/search/match", json={
            "patientProfile": gatineau_profile_data(),
            "limit": 5,
        })
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["type"], "InvalidRequestException")

    def test_database_failure_is_500(self):
        from web.backend.dependencies import get_db

        broken = MagicMock()
        broken.execute.side_effect = OperationalError("SELECT", {}, Exception("connection refused"))
        self.app.dependency_overrides[get_db] = lambda: broken

        response = self.client.post("/api/search/match", json={
            "patientProfile": gatineau_profile_data(),
        })

        self.assertEqual(response.status_code, 500)
        data = response.json()
        self.assertEqual(data["type"], "RepositoryError")
        self.assertEqual(data["code"], "DATABASE_ERROR")


class TestHealth(ApiTestCase):

    def test_health(self):
        response = self.client.get("/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "healthy")


if __name__ == '__main__':
    unittest.main()
