from django.test import SimpleTestCase

from String_Analyser.exceptions import AlreadyExists, ErrorKind, InvalidInput, NotFound
from String_Analyser.store import RecordStore
from String_Analyser.utils import analyze_string


class RecordStoreTests(SimpleTestCase):
    def setUp(self):
        self.store = RecordStore()

    def test_insert_then_get(self):
        record = self.store.insert("hello world")
        fetched = self.store.get("hello world")

        self.assertIs(fetched, record)
        self.assertEqual(fetched.properties, analyze_string("hello world"))
        self.assertEqual(fetched.id, fetched.properties.sha256_hash)
        self.assertIsNotNone(fetched.created_at.tzinfo)

    def test_duplicate_insert_fails(self):
        self.store.insert("hello")
        with self.assertRaises(AlreadyExists) as ctx:
            self.store.insert("hello")
        self.assertEqual(ctx.exception.kind, ErrorKind.ALREADY_EXISTS)
        self.assertEqual(len(self.store), 1)

    def test_invalid_values(self):
        for value in ["", None, 42, ["a"]]:
            with self.assertRaises(InvalidInput):
                self.store.insert(value)
        self.assertEqual(len(self.store), 0)

    def test_get_missing(self):
        with self.assertRaises(NotFound):
            self.store.get("nope")

    def test_delete(self):
        self.store.insert("hello")
        self.store.delete("hello")

        self.assertNotIn("hello", self.store)
        with self.assertRaises(NotFound):
            self.store.get("hello")
        with self.assertRaises(NotFound):
            self.store.delete("hello")

    def test_reinsert_after_delete_creates_new_record(self):
        first = self.store.insert("hello")
        self.store.delete("hello")
        second = self.store.insert("hello")

        self.assertIsNot(first, second)
        self.assertGreaterEqual(second.created_at, first.created_at)

    def test_all_is_a_snapshot(self):
        self.store.insert("a")
        self.store.insert("b")
        snapshot = self.store.all()
        self.store.delete("a")

        self.assertEqual(sorted(value for value, _ in snapshot), ["a", "b"])
        self.assertEqual([value for value, _ in self.store.all()], ["b"])

    def test_records_are_immutable(self):
        record = self.store.insert("hello")
        with self.assertRaises(Exception):
            record.value = "other"
        with self.assertRaises(TypeError):
            record.properties.character_frequency_map["z"] = 1
