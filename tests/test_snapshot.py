"""Tests for the observable snapshot and display helpers: pclock.core.snapshot, pclock.util."""

import unittest

from pclock.core import engine
from pclock.core.clock_state import ClockState, Player
from pclock.core.config import ClockConfig
from pclock.core.snapshot import LOST_LABEL, OUT_LABEL, build_snapshot, format_remaining
from pclock.util import format_clock, parse_time_input


class TestFormatClock(unittest.TestCase):

    def test_zero_padded_minutes_and_seconds(self):
        self.assertEqual(format_clock(0), "00:00")
        self.assertEqual(format_clock(5), "00:05")
        self.assertEqual(format_clock(300), "05:00")
        self.assertEqual(format_clock(599), "09:59")

    def test_minutes_are_not_capped(self):
        self.assertEqual(format_clock(7200), "120:00")

    def test_negative_clamps(self):
        self.assertEqual(format_clock(-4), "00:00")


class TestParseTimeInput(unittest.TestCase):

    def test_formats(self):
        self.assertEqual(parse_time_input("300"), 300)
        self.assertEqual(parse_time_input("5:00"), 300)
        self.assertEqual(parse_time_input("1:02:03"), 3723)
        self.assertEqual(parse_time_input(" 0:45 "), 45)

    def test_bad_input(self):
        for text in ("", "abc", "1:2:3:4", "5:xx", "-10", "5:-3", "-0:30", "-0:00:30"):
            self.assertIsNone(parse_time_input(text), text)


class TestFormatRemaining(unittest.TestCase):

    def test_labels(self):
        self.assertEqual(format_remaining(Player(1, 65)), "01:05")
        self.assertEqual(format_remaining(Player(1, 0)), LOST_LABEL)
        self.assertEqual(format_remaining(Player(1, 0, is_out=True)), OUT_LABEL)


class TestBuildSnapshot(unittest.TestCase):

    def test_shape(self):
        state = engine.initialize(ClockConfig(3, 90, 0, True))
        snap = build_snapshot(state)
        self.assertEqual(snap["mode"], "ready")
        self.assertTrue(snap["elimination_mode"])
        self.assertEqual(snap["players"][0], {
            "id": 1,
            "time_left_seconds": 90,
            "is_active": True,
            "is_out": False,
            "display": "01:30",
        })
        self.assertEqual([p["id"] for p in snap["players"]], [1, 2, 3])

    def test_mutating_snapshot_does_not_touch_state(self):
        state = engine.initialize(ClockConfig())
        snap = build_snapshot(state)
        snap["players"][0]["time_left_seconds"] = 0
        snap["players"].clear()
        self.assertEqual(state.players[0].time_left_seconds, 300)
        self.assertEqual(len(build_snapshot(state)["players"]), 2)

    def test_uninitialized(self):
        self.assertEqual(build_snapshot(engine.reset(ClockState())), {
            "mode": "uninitialized",
            "elimination_mode": False,
            "players": [],
        })


if __name__ == "__main__":
    unittest.main()
