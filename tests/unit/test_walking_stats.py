from __future__ import annotations

import unittest

from tests.unit._bootstrap import ensure_project_on_path


ensure_project_on_path()


class TestWalkingStats(unittest.TestCase):
    def test_empty_history_returns_none(self) -> None:
        from walkpace.core.stats.walking_stats import compute_walking_stats

        self.assertIsNone(compute_walking_stats(()))

    def test_single_record(self) -> None:
        from tests.unit._factories import make_profile
        from walkpace.core.stats.walking_stats import compute_walking_stats

        stats = compute_walking_stats(make_profile([1.1]).walking_history)
        self.assertEqual(stats.total_walks, 1)
        self.assertAlmostEqual(stats.average_accuracy, 1.1)
        self.assertAlmostEqual(stats.recent_accuracy, 1.1)
        self.assertFalse(stats.is_improving)

    def test_recent_window_is_last_five(self) -> None:
        from tests.unit._factories import make_profile
        from walkpace.core.stats.walking_stats import compute_walking_stats

        history = make_profile([1.5, 1.5, 1.5, 1.0, 1.0, 1.0, 1.0, 1.0]).walking_history
        stats = compute_walking_stats(history)
        self.assertEqual(stats.total_walks, len(history))
        self.assertAlmostEqual(stats.average_accuracy, 9.5 / 8)
        self.assertAlmostEqual(stats.recent_accuracy, 1.0)
        self.assertTrue(stats.is_improving)

    def test_not_improving_when_recent_walks_are_slower(self) -> None:
        from tests.unit._factories import make_profile
        from walkpace.core.stats.walking_stats import compute_walking_stats

        stats = compute_walking_stats(make_profile([0.9, 0.9, 1.2, 1.2, 1.2, 1.2, 1.2]).walking_history)
        self.assertGreater(stats.recent_accuracy, stats.average_accuracy)
        self.assertFalse(stats.is_improving)

    def test_history_to_dataframe_keeps_insertion_order(self) -> None:
        from tests.unit._factories import make_profile
        from walkpace.core.stats.walking_stats import HISTORY_COLUMNS, history_to_dataframe

        df = history_to_dataframe(make_profile([1.0, 1.2, 0.8]).walking_history)
        self.assertEqual(list(df.columns), HISTORY_COLUMNS)
        self.assertEqual(list(df["id"]), ["rec-0", "rec-1", "rec-2"])
        self.assertEqual(list(df["accuracy"]), [1.0, 1.2, 0.8])

    def test_history_to_dataframe_empty(self) -> None:
        from walkpace.core.stats.walking_stats import HISTORY_COLUMNS, history_to_dataframe

        df = history_to_dataframe(())
        self.assertTrue(df.empty)
        self.assertEqual(list(df.columns), HISTORY_COLUMNS)


if __name__ == "__main__":
    unittest.main()
