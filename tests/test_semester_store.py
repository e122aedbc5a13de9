import json
import unittest

from gpacalc.core.gpa import CourseRow, SemesterRow, compute_gpa
from gpacalc.services.semester_store import SemesterStore, SemesterStoreError, transfer
from gpacalc.services.storage import Storage


KEY = "cgpaSemesters"


class StorageTests(unittest.TestCase):
    def setUp(self):
        self.storage = Storage(":memory:")

    def tearDown(self):
        self.storage.close()

    def test_set_get_delete(self):
        self.assertIsNone(self.storage.get("k"))
        self.storage.set("k", "one")
        self.storage.set("k", "two")
        self.assertEqual(self.storage.get("k"), "two")
        self.storage.delete("k")
        self.assertIsNone(self.storage.get("k"))


class SemesterStoreTests(unittest.TestCase):
    def setUp(self):
        self.storage = Storage(":memory:")
        self.store = SemesterStore(self.storage, KEY)

    def tearDown(self):
        self.storage.close()

    def test_load_missing_record(self):
        self.assertEqual(self.store.load(), [])

    def test_load_malformed_record(self):
        for raw in ("not json", '{"gpa": "3.0"}', "[1, 2]"):
            self.storage.set(KEY, raw)
            with self.assertLogs("gpacalc.services.semester_store", level="WARNING"):
                self.assertEqual(self.store.load(), [])

    def test_replace_writes_through(self):
        rows = [SemesterRow("3.50", 15), SemesterRow("3.50", 15)]
        self.store.replace(rows)
        self.assertEqual(json.loads(self.storage.get(KEY)), [{"gpa": "3.50", "credit": 15}] * 2)
        self.assertEqual(SemesterStore(self.storage, KEY).load(), rows)

    def test_replace_is_idempotent(self):
        rows = [SemesterRow("3.10", 12)]
        self.store.replace(rows)
        first = self.store.load()
        self.store.replace(rows)
        self.assertEqual(self.store.load(), first)

    def test_clear(self):
        self.store.replace([SemesterRow("2.00", 10)])
        self.store.clear()
        self.assertEqual(self.store.load(), [])
        self.assertIsNone(self.storage.get(KEY))

    def test_rows_is_a_copy(self):
        self.store.append(SemesterRow("3.00", 12))
        self.store.rows[0].gpa = "0.00"
        self.assertEqual(self.store.rows[0].gpa, "3.00")

    def test_append_and_edit(self):
        self.store.append()
        self.store.edit(0, "gpa", "3.40")
        self.store.edit(0, "credit", "-3")
        self.assertEqual(SemesterStore(self.storage, KEY).load(), [SemesterRow("3.40", "")])

    def test_edit_out_of_range(self):
        with self.assertRaises(SemesterStoreError):
            self.store.edit(0, "gpa", "3.0")


class TransferTests(unittest.TestCase):
    def setUp(self):
        self.storage = Storage(":memory:")
        self.store = SemesterStore(self.storage, KEY)
        self.store.load()

    def tearDown(self):
        self.storage.close()

    def test_transfer_appends_rounded_gpa(self):
        result = compute_gpa([CourseRow("Algebra", 3, 90), CourseRow("Drawing", 2, 50)])
        row = transfer(result, self.store)
        self.assertEqual(row, SemesterRow("2.40", 5))
        self.assertEqual(row.credit, result.total_credit)
        self.assertEqual(self.store.load(), [row])

    def test_second_transfer_keeps_first_row(self):
        first = transfer(compute_gpa([CourseRow("A", 3, 77)]), self.store)
        second = transfer(compute_gpa([CourseRow("B", 4, 62), CourseRow("C", 3, 81)]), self.store)
        self.assertEqual(self.store.load(), [first, second])
        self.assertEqual(second.gpa, "2.72")

    def test_transfer_without_result_is_noop(self):
        self.assertIsNone(transfer(None, self.store))
        self.assertEqual(self.store.load(), [])
        self.assertIsNone(self.storage.get(KEY))


if __name__ == "__main__":
    unittest.main()
