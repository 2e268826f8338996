from __future__ import annotations

import unittest

from tests.unit._bootstrap import ensure_project_on_path


ensure_project_on_path()


class TestHistoryService(unittest.TestCase):
    def test_append_keeps_insertion_order(self) -> None:
        from tests.unit._factories import make_record
        from walkpace.services.history_service import append_history

        history = append_history((make_record(0), make_record(1)), make_record(2))
        self.assertIsInstance(history, tuple)
        self.assertEqual([r.id for r in history], ["rec-0", "rec-1", "rec-2"])

    def test_append_to_full_history_drops_oldest(self) -> None:
        from tests.unit._factories import make_record
        from walkpace.services.history_service import append_history

        full = tuple(make_record(i) for i in range(50))
        history = append_history(full, make_record(50))
        self.assertEqual(len(history), 50)
        self.assertEqual(history[0].id, "rec-1")
        self.assertEqual(history[-1].id, "rec-50")

    def test_cap_holds_over_many_appends(self) -> None:
        from tests.unit._factories import make_record
        from walkpace.services.history_service import append_history

        history: tuple = ()
        for i in range(120):
            history = append_history(history, make_record(i))
            self.assertLessEqual(len(history), 50)
        self.assertEqual([r.id for r in history], [f"rec-{i}" for i in range(70, 120)])

    def test_trim_oldest_without_limit(self) -> None:
        from walkpace.services.history_service import trim_oldest

        self.assertEqual(trim_oldest([1, 2, 3], max_items=0), (1, 2, 3))
        self.assertEqual(trim_oldest([1, 2, 3], max_items=2), (2, 3))

    def test_upsert_and_remove_location(self) -> None:
        from walkpace.core.models import Coordinates, SavedLocation
        from walkpace.services.history_service import remove_location, upsert_location

        home = SavedLocation(id="a", name="Home", address="1-1", coordinates=Coordinates(1.0, 2.0), category="home")
        gym = SavedLocation(id="b", name="Gym", address="2-2", coordinates=Coordinates(3.0, 4.0), category="gym")
        moved = SavedLocation(id="a", name="Home", address="9-9", coordinates=Coordinates(5.0, 6.0), category="home")

        locations = upsert_location(upsert_location((), home), gym)
        locations = upsert_location(locations, moved)
        self.assertEqual(len(locations), 2)
        self.assertEqual({loc.id: loc.address for loc in locations}, {"a": "9-9", "b": "2-2"})

        self.assertEqual([loc.id for loc in remove_location(locations, "a")], ["b"])
        self.assertEqual(len(remove_location(locations, "missing")), 2)


if __name__ == "__main__":
    unittest.main()
