import unittest

from tasktracker.db import SqlDbClient
from tasktracker.errors import (
    DuplicateEmail,
    DuplicateUsername,
    TaskNotFound,
    UserNotFound,
)


class SqlDbClientTests(unittest.TestCase):
    """
    Uses SQLite via SQLAlchemy URL for fast/local testing of the SQL client logic.
    """

    def setUp(self):
        self.db = SqlDbClient("sqlite+pysqlite:///:memory:")
        self.user = self.db.create_user("u1", "u1@x.com", "hash")

    def tearDown(self):
        self.db.engine.dispose()

    def test_create_and_get_user(self):
        self.assertIsInstance(self.user.id, int)
        fetched = self.db.get_user(self.user.id)
        self.assertEqual(fetched, self.user)
        self.assertEqual(self.db.get_user_by_email("u1@x.com"), self.user)
        self.assertTrue(self.db.exists_by_email("u1@x.com"))
        self.assertFalse(self.db.exists_by_email("nobody@x.com"))
        self.assertIsNone(self.db.get_user(self.user.id + 100))

    def test_user_uniqueness(self):
        with self.assertRaises(DuplicateEmail):
            self.db.create_user("u2", "u1@x.com", "hash")
        with self.assertRaises(DuplicateUsername):
            self.db.create_user("u1", "u2@x.com", "hash")

    def test_task_roundtrip(self):
        task = self.db.create_task(self.user.id, "A", "first")
        self.assertFalse(task.completed)
        self.assertEqual(task.user_id, self.user.id)

        task.title = "B"
        task.completed = True
        self.db.save_task(task)

        fetched = self.db.get_task(task.id)
        self.assertEqual(fetched.title, "B")
        self.assertTrue(fetched.completed)
        self.assertEqual(fetched.description, "first")

    def test_create_task_requires_existing_owner(self):
        with self.assertRaises(UserNotFound):
            self.db.create_task(self.user.id + 100, "orphan", None)
        self.assertEqual(self.db.list_tasks_for_user(self.user.id + 100), [])

    def test_list_tasks_scoped_to_owner(self):
        other = self.db.create_user("u2", "u2@x.com", "hash")
        mine = self.db.create_task(self.user.id, "mine", None)
        self.db.create_task(other.id, "theirs", None)

        listed = self.db.list_tasks_for_user(self.user.id)
        self.assertEqual([t.id for t in listed], [mine.id])

    def test_delete_task(self):
        task = self.db.create_task(self.user.id, "A", None)
        self.assertTrue(self.db.delete_task(task.id))
        self.assertFalse(self.db.delete_task(task.id))
        self.assertIsNone(self.db.get_task(task.id))
        with self.assertRaises(TaskNotFound):
            self.db.save_task(task)


if __name__ == "__main__":
    unittest.main()
