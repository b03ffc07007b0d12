"""Tests for clock configuration and the remembered setup form: pclock.core.config."""

import json
import shutil
import tempfile
import unittest
from pathlib import Path

from pclock.core import config
from pclock.core.config import DEFAULTS, ClockConfig
from pclock.core.errors import InvalidConfig


class TestClockConfig(unittest.TestCase):

    def test_defaults_match_setup_form(self):
        cfg = ClockConfig()
        self.assertEqual(cfg.to_dict(), DEFAULTS)
        self.assertIs(cfg.validate(), cfg)

    def test_validate_rejects_out_of_range(self):
        for bad in (ClockConfig(player_count=1), ClockConfig(player_count=7),
                    ClockConfig(seconds_per_player=-1), ClockConfig(increment_seconds=-1)):
            with self.assertRaises(InvalidConfig):
                bad.validate()

    def test_invalid_config_is_a_value_error(self):
        with self.assertRaises(ValueError):
            ClockConfig(player_count=9).validate()

    def test_from_settings_fills_missing_keys(self):
        cfg = ClockConfig.from_settings({"player_count": 4})
        self.assertEqual(cfg.player_count, 4)
        self.assertEqual(cfg.seconds_per_player, 300)
        self.assertEqual(cfg.increment_seconds, 5)
        self.assertFalse(cfg.elimination_mode)

    def test_from_settings_defaults_mistyped_values(self):
        cfg = ClockConfig.from_settings({
            "player_count": "3",
            "seconds_per_player": 60,
            "increment_seconds": True,
            "elimination_mode": 1,
        })
        self.assertEqual(cfg, ClockConfig(2, 60, 5, False))

    def test_from_settings_keeps_bad_ranges_for_validate(self):
        cfg = ClockConfig.from_settings({"player_count": 12})
        self.assertEqual(cfg.player_count, 12)
        with self.assertRaises(InvalidConfig):
            cfg.validate()

    def test_from_settings_logs_defaulted_keys(self):
        with self.assertLogs("playerclock", level="DEBUG") as logs:
            ClockConfig.from_settings({"player_count": 3, "elimination_mode": True})
        self.assertTrue(any(
            "defaulted values: increment_seconds, seconds_per_player" in line for line in logs.output))

    def test_from_settings_non_dict(self):
        self.assertEqual(ClockConfig.from_settings(["nope"]), ClockConfig())


class TestSettingsFile(unittest.TestCase):
    """load_settings / save_settings against a temp settings.json."""

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        self._orig_settings_path = config.SETTINGS_PATH
        config.SETTINGS_PATH = Path(self.tmpdir) / "settings.json"

    def tearDown(self):
        config.SETTINGS_PATH = self._orig_settings_path
        shutil.rmtree(self.tmpdir, ignore_errors=True)

    def test_missing_file_gives_defaults(self):
        self.assertEqual(config.load_settings(), ClockConfig())

    def test_save_and_load_roundtrip(self):
        cfg = ClockConfig(5, 90, 2, True)
        config.save_settings(cfg)
        with open(config.SETTINGS_PATH, "r", encoding="utf-8") as f:
            self.assertEqual(json.load(f)["player_count"], 5)
        self.assertEqual(config.load_settings(), cfg)

    def test_corrupt_file_gives_defaults(self):
        config.SETTINGS_PATH.write_text("{not json", encoding="utf-8")
        self.assertEqual(config.load_settings(), ClockConfig())

    def test_out_of_range_file_gives_defaults(self):
        config.SETTINGS_PATH.write_text(json.dumps({"player_count": 1}), encoding="utf-8")
        self.assertEqual(config.load_settings(), ClockConfig())

    def test_partial_file_is_filled(self):
        config.SETTINGS_PATH.write_text(json.dumps({"increment_seconds": 0}), encoding="utf-8")
        self.assertEqual(config.load_settings(), ClockConfig(increment_seconds=0))


if __name__ == "__main__":
    unittest.main()
