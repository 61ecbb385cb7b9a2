#!/usr/bin/env python3
"""
Tests for the command line entry point.
"""

import io
import json
import os
import tempfile
import unittest
from contextlib import redirect_stdout
from unittest.mock import MagicMock, patch

import main
from core.config_loader import AppConfig, MatchingConfig
from core.matcher.errors import RepositoryError
from tests.mocks.residence_mocks import gatineau_profile_data, make_candidate


class TestMatchCommand(unittest.TestCase):

    def setUp(self):
        fd, self.profile_path = tempfile.mkstemp(suffix=".json")
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(gatineau_profile_data(), f)

        self.repo = MagicMock()
        uow_patcher = patch("main.open_residence_uow")
        self.mock_uow = uow_patcher.start()
        self.mock_uow.return_value.__enter__ = MagicMock(return_value=self.repo)
        self.mock_uow.return_value.__exit__ = MagicMock(return_value=False)
        self.addCleanup(uow_patcher.stop)

    def tearDown(self):
        os.remove(self.profile_path)

    def _run(self, *args):
        out = io.StringIO()
        with redirect_stdout(out):
            code = main.main(["match", "--profile", self.profile_path, *args])
        return code, out.getvalue()

    def test_prints_match_page(self):
        self.repo.query_candidates.return_value = [make_candidate(name="Parc", units=2)]

        code, output = self._run("--limit", "5")

        self.assertEqual(code, 0)
        data = json.loads(output)
        self.assertEqual(data["total"], 1)
        self.assertFalse(data["hasMore"])
        self.assertEqual(data["matches"][0]["rpa_info"]["name"], "Parc")

    def test_include_unavailable_flag(self):
        self.repo.query_candidates.return_value = [make_candidate(units=0)]

        _, without_flag = self._run()
        _, with_flag = self._run("--include-unavailable")

        self.assertEqual(json.loads(without_flag)["total"], 0)
        self.assertEqual(json.loads(with_flag)["total"], 1)

    def test_repository_error_exit_code(self):
        self.repo.query_candidates.side_effect = RepositoryError("connection refused")

        code, output = self._run()

        self.assertEqual(code, 1)
        self.assertEqual(output, "")

    def test_limit_outside_range_is_rejected(self):
        for limit in ("0", "-3", "51"):
            with self.subTest(limit=limit):
                code, output = self._run("--limit", limit)
                self.assertEqual(code, 2)
                self.assertEqual(output, "")
        self.mock_uow.assert_not_called()

    def test_negative_offset_is_rejected(self):
        code, _ = self._run("--offset", "-1")
        self.assertEqual(code, 2)
        self.mock_uow.assert_not_called()

    def test_limit_follows_matching_config(self):
        config = AppConfig(matching=MatchingConfig(default_limit=3, max_limit=4))
        self.repo.query_candidates.return_value = [
            make_candidate(name=f"R{i}", units=2) for i in range(6)
        ]

        with patch("core.config_loader.load_config", return_value=config):
            code, output = self._run()
            over_code, _ = self._run("--limit", "5")

        self.assertEqual(code, 0)
        self.assertEqual(json.loads(output)["total"], 3)
        self.assertEqual(over_code, 2)


class TestInitDbCommand(unittest.TestCase):

    def test_init_db_runs_create_all(self):
        with patch("main.create_tables") as mock_init:
            self.assertEqual(main.main(["init-db"]), 0)
        mock_init.assert_called_once()

    def test_command_required(self):
        with self.assertRaises(SystemExit):
            main.main([])


if __name__ == '__main__':
    unittest.main()
