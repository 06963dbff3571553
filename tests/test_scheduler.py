"""Unit tests for the deferred task scheduler."""

import unittest

from src.bubble_vocab_trainer.domain import TaskScheduler


class TestTaskScheduler(unittest.TestCase):
    def setUp(self):
        self.scheduler = TaskScheduler()
        self.calls = []

    def _record(self, name):
        return lambda: self.calls.append(name)

    def test_runs_only_due_tasks_in_order(self):
        self.scheduler.schedule(12.0, 1, self._record("late"))
        self.scheduler.schedule(10.5, 1, self._record("second"))
        self.scheduler.schedule(10.0, 1, self._record("first"))
        self.assertEqual(self.scheduler.run_due(11.0), 2)
        self.assertEqual(self.calls, ["first", "second"])
        self.assertEqual(len(self.scheduler.pending()), 1)
        self.assertEqual(self.scheduler.run_due(12.0), 1)
        self.assertEqual(self.calls, ["first", "second", "late"])

    def test_keyed_task_supersedes_pending(self):
        self.scheduler.schedule(10.0, 1, self._record("old"), key="speak")
        self.scheduler.schedule(10.0, 1, self._record("new"), key="speak")
        self.scheduler.run_due(10.0)
        self.assertEqual(self.calls, ["new"])

    def test_cancel_by_key(self):
        self.scheduler.schedule(10.0, 1, self._record("speak"), key="speak")
        self.scheduler.schedule(10.0, 1, self._record("other"))
        self.assertEqual(self.scheduler.cancel("speak"), 1)
        self.scheduler.run_due(10.0)
        self.assertEqual(self.calls, ["other"])

    def test_cancel_round(self):
        self.scheduler.schedule(10.0, 1, self._record("round1"))
        self.scheduler.schedule(10.0, 2, self._record("round2"))
        self.assertEqual(self.scheduler.cancel_round(1), 1)
        self.scheduler.run_due(10.0)
        self.assertEqual(self.calls, ["round2"])

    def test_cancel_all(self):
        self.scheduler.schedule(10.0, 1, self._record("a"))
        self.scheduler.schedule(11.0, 2, self._record("b"))
        self.scheduler.cancel_all()
        self.assertEqual(self.scheduler.run_due(100.0), 0)
        self.assertEqual(self.calls, [])

    def test_task_added_while_running_waits(self):
        def chain():
            self.calls.append("first")
            self.scheduler.schedule(5.0, 1, self._record("chained"))

        self.scheduler.schedule(5.0, 1, chain)
        self.assertEqual(self.scheduler.run_due(5.0), 1)
        self.assertEqual(self.calls, ["first"])
        self.assertEqual(self.scheduler.run_due(5.0), 1)
        self.assertEqual(self.calls, ["first", "chained"])


if __name__ == "__main__":
    unittest.main()
