import os
import sys
import threading
import unittest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from projects_api.storage import (  # noqa: E402
    InvalidProjectError,
    ProjectNotFoundError,
    ProjectStore,
    ProjectStoreError,
)


class TestProjectStore(unittest.TestCase):
    def setUp(self):
        self.store = ProjectStore()

    def test_starts_empty(self):
        self.assertEqual(self.store.list(), [])
        self.assertEqual(len(self.store), 0)

    def test_create_assigns_unique_ids(self):
        ids = [self.store.create(f"p{i}", "owner").id for i in range(200)]
        self.assertEqual(len(set(ids)), 200)
        self.assertTrue(all(ids))

    def test_create_does_not_validate(self):
        project = self.store.create("", None)
        self.assertEqual(project.name, "")
        self.assertIsNone(project.owner)
        self.assertEqual(len(self.store), 1)

    def test_list_keeps_insertion_order(self):
        a = self.store.create("A", "owner-a")
        b = self.store.create("B", "owner-b")
        self.assertEqual([p.id for p in self.store.list()], [a.id, b.id])

        self.store.delete(a.id)
        self.assertEqual(self.store.list(), [b])

    def test_list_returns_copies(self):
        self.store.create("A", "owner")
        listed = self.store.list()
        listed[0].name = "changed"
        listed.clear()
        self.assertEqual(self.store.list()[0].name, "A")
        self.assertEqual(len(self.store), 1)

    def test_update_preserves_id_and_position(self):
        a = self.store.create("A", "owner-a")
        b = self.store.create("B", "owner-b")
        c = self.store.create("C", "owner-c")

        updated = self.store.update(b.id, "X", "Y")

        self.assertEqual(updated.id, b.id)
        self.assertEqual((updated.name, updated.owner), ("X", "Y"))
        projects = self.store.list()
        self.assertEqual([p.id for p in projects], [a.id, b.id, c.id])
        self.assertEqual(projects[0].name, "A")
        self.assertEqual(projects[2].name, "C")

    def test_update_unknown_id_checked_before_fields(self):
        with self.assertRaises(ProjectNotFoundError):
            self.store.update("unknown-id", "", "")

    def test_update_requires_name_and_owner(self):
        project = self.store.create("A", "owner")
        for name, owner in [("", "owner"), ("name", ""), (None, "owner"), ("name", None)]:
            with self.assertRaises(InvalidProjectError):
                self.store.update(project.id, name, owner)
        self.assertEqual(self.store.list()[0].name, "A")

    def test_delete_twice(self):
        project = self.store.create("A", "owner")
        self.assertIsNone(self.store.delete(project.id))
        with self.assertRaises(ProjectNotFoundError):
            self.store.delete(project.id)

    def test_delete_keeps_relative_order(self):
        a = self.store.create("A", "o")
        b = self.store.create("B", "o")
        c = self.store.create("C", "o")
        self.store.delete(b.id)
        self.assertEqual([p.id for p in self.store.list()], [a.id, c.id])

    def test_non_string_values_are_kept(self):
        project = self.store.create(5, ["x"])
        updated = self.store.update(project.id, 7, {"team": "y"})
        self.assertEqual((updated.name, updated.owner), (7, {"team": "y"}))

        updated.owner["team"] = "changed"
        self.assertEqual(self.store.list()[0].owner, {"team": "y"})

        with self.assertRaises(InvalidProjectError):
            self.store.update(project.id, 0, "y")

    def test_error_attributes(self):
        with self.assertRaises(ProjectStoreError) as ctx:
            self.store.delete("missing")
        self.assertEqual(ctx.exception.status_code, 404)
        self.assertEqual(ctx.exception.message, "Project not found")
        self.assertEqual(ctx.exception.project_id, "missing")
        self.assertEqual(InvalidProjectError.status_code, 400)
        self.assertEqual(InvalidProjectError.message, "Name and owner are required")

    def test_clear(self):
        self.store.create("A", "o")
        self.store.clear()
        self.assertEqual(self.store.list(), [])

    def test_concurrent_creates(self):
        ids = []
        ids_lock = threading.Lock()

        def worker():
            for _ in range(50):
                project_id = self.store.create("p", "o").id
                with ids_lock:
                    ids.append(project_id)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        self.assertEqual(len(self.store), 400)
        self.assertEqual(len(set(ids)), 400)


if __name__ == "__main__":
    unittest.main()
