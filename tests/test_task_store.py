import os
import shutil
import tempfile
import unittest
from datetime import datetime, timezone
from tasks_api.models import Task
from tasks_api.services.task_store import TaskStore, TaskStoreError


class TestTask(unittest.TestCase):

    def test_create_uses_same_instant_for_id_and_timestamp(self):
        now = datetime(2024, 5, 1, 12, 0, 0, 123000, tzinfo=timezone.utc)
        task = Task.create("Write report", now=now)
        self.assertEqual(task.id, 1714564800123)
        self.assertEqual(task.created_at, "2024-05-01T12:00:00.123Z")
        self.assertFalse(task.completed)

    def test_from_dict(self):
        data = {"id": 7, "title": "Read", "completed": True, "createdAt": "2024-01-01T00:00:00.000Z"}
        self.assertEqual(Task.from_dict(data).to_dict(), data)


class TestTaskStore(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        self.store = TaskStore(os.path.join(self.tmpdir, "data", "tasks.json"))

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def test_load_missing_file_raises(self):
        with self.assertRaises(TaskStoreError):
            self.store.load()

    def test_load_or_empty_missing_file_raises(self):
        with self.assertRaises(TaskStoreError):
            self.store.load_or_empty()

    def test_load_or_empty_falsy_non_list_raises(self):
        for document in ({}, 0, False, ""):
            self.store.save(document)
            with self.assertRaises(TaskStoreError):
                self.store.load_or_empty()

    def test_load_or_empty_null_document(self):
        self.store.save(None)
        self.assertEqual(self.store.load_or_empty(), [])

    def test_load_or_empty_malformed_raises(self):
        self.store.save([])
        with open(self.store.path, "w", encoding="utf-8") as f:
            f.write("[{")
        with self.assertRaises(TaskStoreError):
            self.store.load_or_empty()

    def test_save_creates_parent_directory(self):
        self.store.save([])
        self.assertTrue(os.path.isdir(os.path.join(self.tmpdir, "data")))

    def test_append_keeps_existing_records(self):
        self.store.save([{"id": 1, "title": "First", "completed": False, "createdAt": "x"}])
        task = self.store.append(Task.create("Second"))
        self.assertEqual(self.store.load()[-1], task.to_dict())
        self.assertEqual(len(self.store.load()), 2)


if __name__ == "__main__":
    unittest.main()
