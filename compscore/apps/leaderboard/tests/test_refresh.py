from __future__ import annotations

import threading

from django.test import SimpleTestCase

from compscore.apps.leaderboard.services.refresh import PeriodicRefresh


class PeriodicRefreshTest(SimpleTestCase):
    def test_invalid_interval(self):
        with self.assertRaises(ValueError):
            PeriodicRefresh(lambda: None, 0)

    def test_tick_calls_callback(self):
        calls = []
        refresh = PeriodicRefresh(lambda: calls.append(1), 10)
        self.assertTrue(refresh.tick())
        self.assertEqual(calls, [1])
        self.assertEqual(refresh.ticks, 1)

    def test_tick_skipped_when_inactive(self):
        calls = []
        visible = {"value": False}
        refresh = PeriodicRefresh(lambda: calls.append(1), 10, is_active=lambda: visible["value"])
        self.assertFalse(refresh.tick())
        visible["value"] = True
        self.assertTrue(refresh.tick())
        self.assertEqual(len(calls), 1)

    def test_thread_runs_until_cancelled(self):
        fired = threading.Event()
        refresh = PeriodicRefresh(fired.set, 0.01, name="test-refresh")
        refresh.start()
        try:
            self.assertTrue(fired.wait(2))
            self.assertTrue(refresh.running)
        finally:
            refresh.cancel(timeout=2)
        self.assertFalse(refresh.running)
        self.assertTrue(refresh.cancelled)

    def test_failing_callback_keeps_running(self):
        state = {"n": 0}
        done = threading.Event()

        def callback():
            state["n"] += 1
            if state["n"] == 1:
                raise RuntimeError("boom")
            done.set()

        refresh = PeriodicRefresh(callback, 0.01)
        with self.assertLogs("compscore.apps.leaderboard.services.refresh", level="ERROR"):
            refresh.start()
            try:
                self.assertTrue(done.wait(2))
            finally:
                refresh.cancel(timeout=2)
