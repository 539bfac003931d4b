"""
Task List Test Suite: TaskStore
==================================
Seed contents, add/toggle/remove semantics, ids and locking.

Usage:
    python -m pytest tests/test_store.py -v
    python tests/test_store.py
"""
import sys
import os
import threading
import unittest
from dataclasses import fields

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from tasklist.store import TaskStore, Task, Outcome, OpResult, DEFAULT_SEED


def _values(store):
    return [(t.id, t.text, t.completed) for t in store.list()]


# ─────────────────────────────────────────────
#  Seed
# ─────────────────────────────────────────────

class TestSeed(unittest.TestCase):

    def test_fresh_store_has_three_open_tasks(self):
        tasks = TaskStore().list()
        self.assertEqual(len(tasks), 3)
        self.assertTrue(all(not t.completed for t in tasks))

    def test_seed_order_and_ids(self):
        tasks = TaskStore().list()
        self.assertEqual([t.text for t in tasks], list(DEFAULT_SEED))
        self.assertEqual([t.id for t in tasks], ["1", "2", "3"])

    def test_empty_seed(self):
        self.assertEqual(TaskStore(seed=()).list(), [])
        self.assertEqual(len(TaskStore(seed=())), 0)


# ─────────────────────────────────────────────
#  add
# ─────────────────────────────────────────────

class TestAdd(unittest.TestCase):

    def test_trims_and_appends(self):
        store = TaskStore()
        result = store.add("  buy milk  ")
        self.assertTrue(result.ok)
        last = store.list()[-1]
        self.assertEqual(last.text, "buy milk")
        self.assertFalse(last.completed)
        self.assertEqual(result.task, last)

    def test_empty_text_is_ignored(self):
        store = TaskStore()
        for text in ("", "   ", "\t\n"):
            result = store.add(text)
            self.assertEqual(result.outcome, Outcome.INVALID)
            self.assertIsNone(result.task)
        self.assertEqual(len(store.list()), 3)

    def test_non_string_is_ignored(self):
        store = TaskStore()
        self.assertEqual(store.add(None).outcome, Outcome.INVALID)
        self.assertEqual(store.add(42).outcome, Outcome.INVALID)
        self.assertEqual(len(store), 3)

    def test_duplicate_text_creates_two_tasks(self):
        store = TaskStore(seed=())
        a = store.add("same")
        b = store.add("same")
        self.assertEqual(len(store), 2)
        self.assertNotEqual(a.task.id, b.task.id)

    def test_ids_continue_after_seed(self):
        store = TaskStore()
        self.assertEqual(store.add("four").task.id, "4")

    def test_ids_not_reused_after_remove(self):
        store = TaskStore(seed=())
        first = store.add("a").task
        store.remove(first.id)
        second = store.add("b").task
        self.assertNotEqual(first.id, second.id)


# ─────────────────────────────────────────────
#  toggle
# ─────────────────────────────────────────────

class TestToggle(unittest.TestCase):

    def test_flips_completed(self):
        store = TaskStore()
        result = store.toggle("2")
        self.assertTrue(result.ok)
        self.assertTrue(result.task.completed)
        self.assertTrue(store.get("2").completed)

    def test_self_inverting(self):
        store = TaskStore()
        before = _values(store)
        store.toggle("1")
        store.toggle("1")
        self.assertEqual(_values(store), before)

    def test_keeps_position(self):
        store = TaskStore()
        store.toggle("2")
        self.assertEqual([t.id for t in store.list()], ["1", "2", "3"])

    def test_unknown_id_is_noop(self):
        store = TaskStore()
        before = _values(store)
        result = store.toggle("999")
        self.assertEqual(result.outcome, Outcome.NOT_FOUND)
        self.assertEqual(_values(store), before)

    def test_non_string_id_is_invalid(self):
        store = TaskStore()
        before = _values(store)
        self.assertEqual(store.toggle(1).outcome, Outcome.INVALID)
        self.assertEqual(_values(store), before)

    def test_snapshot_not_changed_by_later_toggle(self):
        store = TaskStore()
        snapshot = store.list()
        store.toggle("1")
        self.assertFalse(snapshot[0].completed)


# ─────────────────────────────────────────────
#  remove
# ─────────────────────────────────────────────

class TestRemove(unittest.TestCase):

    def test_removes_one_and_keeps_order(self):
        store = TaskStore()
        store.add("four")
        result = store.remove("2")
        self.assertTrue(result.ok)
        self.assertEqual(result.task.id, "2")
        self.assertEqual([t.id for t in store.list()], ["1", "3", "4"])

    def test_unknown_id_is_noop(self):
        store = TaskStore()
        before = _values(store)
        self.assertEqual(store.remove("nope").outcome, Outcome.NOT_FOUND)
        self.assertEqual(_values(store), before)

    def test_second_remove_is_noop(self):
        store = TaskStore()
        self.assertTrue(store.remove("3").ok)
        self.assertEqual(len(store), 2)
        second = store.remove("3")
        self.assertFalse(second.ok)
        self.assertEqual(second.outcome, Outcome.NOT_FOUND)
        self.assertEqual(len(store), 2)


# ─────────────────────────────────────────────
#  Records
# ─────────────────────────────────────────────

class TestRecords(unittest.TestCase):

    def test_task_is_immutable(self):
        task = Task(id="1", text="x")
        with self.assertRaises(AttributeError):
            task.completed = True

    def test_task_to_dict(self):
        self.assertEqual(
            Task(id="7", text="x", completed=True).to_dict(),
            {"id": "7", "text": "x", "completed": True},
        )

    def test_record_fields(self):
        self.assertEqual([f.name for f in fields(Task)], ["id", "text", "completed"])
        self.assertEqual([f.name for f in fields(OpResult)], ["outcome", "task"])
        self.assertEqual(Task(id="1", text="x").completed, False)
        self.assertIsNone(OpResult(Outcome.INVALID).task)

    def test_op_result_ok(self):
        self.assertTrue(OpResult(Outcome.APPLIED).ok)
        self.assertFalse(OpResult(Outcome.INVALID).ok)
        self.assertFalse(OpResult(Outcome.NOT_FOUND).ok)

    def test_get_unknown(self):
        self.assertIsNone(TaskStore().get("404"))


# ─────────────────────────────────────────────
#  End-to-end + concurrency
# ─────────────────────────────────────────────

class TestScenario(unittest.TestCase):

    def test_add_toggle_remove(self):
        store = TaskStore()
        task = store.add("Write tests").task

        tasks = store.list()
        self.assertEqual(len(tasks), 4)
        self.assertEqual(tasks[-1].text, "Write tests")
        self.assertFalse(tasks[-1].completed)

        store.toggle(task.id)
        self.assertTrue(store.get(task.id).completed)
        self.assertEqual(sum(t.completed for t in store.list()), 1)

        store.remove(task.id)
        self.assertEqual(len(store.list()), 3)
        self.assertEqual(sum(t.completed for t in store.list()), 0)

    def test_concurrent_adds_get_unique_ids(self):
        store = TaskStore(seed=())
        per_thread = 200

        def worker(n):
            for i in range(per_thread):
                store.add(f"t{n}-{i}")

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        ids = [t.id for t in store.list()]
        self.assertEqual(len(ids), 8 * per_thread)
        self.assertEqual(len(set(ids)), len(ids))


if __name__ == "__main__":
    unittest.main()
