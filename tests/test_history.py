from __future__ import annotations

import threading
import unittest

from spwgen.core.history import HistoryStore


class HistoryStoreTests(unittest.TestCase):
    def test_keeps_newest_first(self) -> None:
        history = HistoryStore()
        for value in ("p1", "p2", "p3", "p4", "p5"):
            history.record(value)
        self.assertEqual(history.list(), ("p5", "p4", "p3", "p2", "p1"))
        self.assertEqual(len(history), 5)

    def test_sixth_entry_evicts_oldest(self) -> None:
        history = HistoryStore()
        for value in ("p1", "p2", "p3", "p4", "p5", "p6"):
            history.record(value)
        self.assertEqual(history.list(), ("p6", "p5", "p4", "p3", "p2"))

    def test_custom_capacity(self) -> None:
        history = HistoryStore(2)
        for value in ("a", "b", "c"):
            history.record(value)
        self.assertEqual(history.capacity, 2)
        self.assertEqual(history.list(), ("c", "b"))

    def test_latest_and_clear(self) -> None:
        history = HistoryStore()
        self.assertIsNone(history.latest())
        history.record("x")
        history.record("y")
        self.assertEqual(history.latest(), "y")
        history.clear()
        self.assertEqual(history.list(), ())
        self.assertIsNone(history.latest())

    def test_list_returns_snapshot(self) -> None:
        history = HistoryStore()
        history.record("a")
        snapshot = history.list()
        history.record("b")
        self.assertEqual(snapshot, ("a",))

    def test_invalid_capacity_raises(self) -> None:
        for bad in (0, -1, True):
            with self.subTest(bad=bad):
                with self.assertRaisesRegex(ValueError, "capacity"):
                    HistoryStore(bad)  # type: ignore[arg-type]

    def test_concurrent_records_stay_bounded(self) -> None:
        history = HistoryStore()

        def worker(tag: str) -> None:
            for i in range(200):
                history.record(f"{tag}{i}")

        threads = [threading.Thread(target=worker, args=(f"t{n}-",)) for n in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        entries = history.list()
        self.assertEqual(len(entries), 5)
        self.assertEqual(len(set(entries)), 5)


if __name__ == "__main__":
    unittest.main()
